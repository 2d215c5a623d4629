"""Prompt template for commit message generation."""

from typing import Optional

USER_PROMPT_TEMPLATE = """Generate a git commit message following conventional commits format.
Type: {commit_type}
{scope_line}

Guidelines:
- First line: <type>{scope_suffix}: <description>
- Keep descriptions concise and direct
- Add bullet points for additional context if needed
- Leave second line blank if using bullet points
- Focus on what changed, not why
- Be specific but brief

Recent commits (for style reference):
{recent_commits}

Changes to be committed:
{diff}"""


def build_prompt(
    commit_type: str,
    scope: Optional[str],
    recent_commits: str,
    diff: str,
) -> str:
    """Build the user prompt.

    Args:
        commit_type: Conventional commit type (feat, fix, ...).
        scope: Optional commit scope. Blank scopes are omitted.
        recent_commits: Recent commit messages used as a style reference.
        diff: The staged diff.

    Returns:
        The formatted prompt.
    """
    scope = (scope or "").strip()
    return USER_PROMPT_TEMPLATE.format(
        commit_type=commit_type,
        scope_line=f"Scope: {scope}" if scope else "",
        scope_suffix=f"({scope})" if scope else "",
        recent_commits=recent_commits,
        diff=diff,
    )
