"""Configuration data model."""

from pydantic import BaseModel, Field, field_validator

from git_commit_helper.config.constants import (
    DEFAULT_COMMIT_TYPES,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
)


class HelperConfig(BaseModel):
    """Settings stored in config.json."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    commit_types: list[str] = Field(default_factory=lambda: list(DEFAULT_COMMIT_TYPES))
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)

    @field_validator("commit_types")
    @classmethod
    def _require_commit_types(cls, value: list[str]) -> list[str]:
        types = [t.strip() for t in value if t and t.strip()]
        if not types:
            raise ValueError("commit_types must contain at least one label")
        return types
