"""Static settings for git-commit-helper."""

APP_NAME = "git-commit-helper"

CONFIG_FILE_NAME = "config.json"
CACHE_DIR_NAME = "cache"

# Cache duration in seconds (1 hour)
CACHE_DURATION = 3600

DEFAULT_MODEL = "claude-3-sonnet-20240229"
DEFAULT_MAX_TOKENS = 300
DEFAULT_COMMIT_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "chore",
    "ci",
    "build",
]

API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"

RECENT_COMMITS_COUNT = 3
