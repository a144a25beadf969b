"""
Reply text for operators.

Successful replies use Telegram's legacy Markdown; rejections and errors
are plain text so arbitrary messages cannot break the formatting.
"""
from dataclasses import dataclass

# Characters legacy Markdown treats as entity delimiters
_MARKDOWN_SPECIAL = ("\\", "_", "*", "`", "[")


@dataclass(frozen=True)
class AdminReply:
    """Reply text and whether it is Markdown-formatted."""

    text: str
    markdown: bool = True

    def __str__(self) -> str:
        return self.text


def escape_markdown(value: str) -> str:
    """Escape legacy Markdown delimiters outside of an entity."""
    for char in _MARKDOWN_SPECIAL:
        value = value.replace(char, f"\\{char}")
    return value


def code(value) -> str:
    """
    Render a value as inline code.

    Inline code cannot contain a backtick, so such values are escaped
    and shown as plain text instead.

    Args:
        value: Value to render

    Returns:
        Markdown fragment
    """
    value = str(value)
    if "`" in value:
        return escape_markdown(value)
    return f"`{value}`"
