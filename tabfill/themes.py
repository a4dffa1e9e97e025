# Tabfill Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Color constants and the Rich theme used by Tabfill's console output."""
from rich.theme import Theme


class OneColors:
    """One Dark palette as Rich style strings."""

    WHITE = "#DCDFE4"
    COMMENT_GREY = "#5C6370"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    BLUE_b = "bold #61AFEF"


def get_theme() -> Theme:
    return Theme(
        {
            "completion.autofill": f"bold {OneColors.GREEN}",
            "completion.more": f"italic {OneColors.COMMENT_GREY}",
            "error": f"bold {OneColors.DARK_RED}",
        }
    )
