"""Terminal colors for candidate lines."""

from rich.color import ColorSystem
from rich.style import Style

KIND_STYLE = Style(color="green")


def styled_kind(label: str) -> str:
    """Wrap *label* in raw ANSI escapes, as fzf --ansi expects them."""
    return KIND_STYLE.render(label, color_system=ColorSystem.STANDARD)
