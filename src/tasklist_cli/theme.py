"""Console styling for Task List CLI."""

from rich.console import Console
from rich.theme import Theme
from rich.text import Text
import logging

logger = logging.getLogger(__name__)


# City Lights palette
CITY_LIGHTS_COLORS = {
    'primary': '#68D5F3',
    'accent': '#B7C5D3',
    'success': '#8BD649',
    'warning': '#FFD93D',
    'error': '#F78C6C',
    'text_muted': '#4F5B66',
}

TASKLIST_THEME = Theme({
    'default': f"{CITY_LIGHTS_COLORS['accent']}",
    'muted': f"{CITY_LIGHTS_COLORS['text_muted']}",
    'success': f"{CITY_LIGHTS_COLORS['success']} bold",
    'warning': f"{CITY_LIGHTS_COLORS['warning']} bold",
    'error': f"{CITY_LIGHTS_COLORS['error']} bold",
    'primary': f"{CITY_LIGHTS_COLORS['primary']} bold",
})


def get_themed_console(no_color: bool = False) -> Console:
    """Get a console with the task list theme applied."""
    return Console(theme=TASKLIST_THEME, no_color=no_color, highlight=False, emoji=False)


def print_result(console: Console, message: str) -> None:
    """Print a task manager message verbatim.

    Task lines look like ``[T][ ] ...`` so markup must stay off.
    """
    if message:
        console.print(message.rstrip("\n"), markup=False, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    console.print(Text(str(message), style="error"), soft_wrap=True)


def print_warning(console: Console, message: str) -> None:
    console.print(Text(str(message), style="warning"), soft_wrap=True)
