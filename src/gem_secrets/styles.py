"""Custom styling for questionary prompts.

This module provides a consistent style for all interactive CLI prompts.
"""

from questionary import Style

# ANSI 256 colors for broad terminal compatibility
PROMPT_STYLE = Style(
    [
        ("qmark", "fg:#5fafff bold"),  # Blue question mark
        ("question", "bold"),
        ("answer", "fg:#ffaf5f bold"),  # Orange submitted answer
        ("instruction", "fg:#6c6c6c italic"),
        ("text", ""),
    ]
)

QMARK = "? "
