"""Rich console used by the human renderers.

Every render gets a fresh Console over a StringIO buffer, so renderers
return plain strings. Rich drops color codes when the buffer is not a TTY,
which keeps CliRunner and piped output clean.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PDV_THEME = Theme(
    {
        "pdv.ok": "bold green",
        "pdv.error": "bold red",
        "pdv.op": "bold cyan",
        "pdv.key": "dim",
        "pdv.valid": "green",
        "pdv.invalid": "red",
        "pdv.field": "bold",
    }
)

RENDER_WIDTH = 120


def create_console() -> Console:
    return Console(file=StringIO(), theme=PDV_THEME, highlight=False, width=RENDER_WIDTH)


def get_output(console: Console) -> str:
    """Text written to a console made by :func:`create_console`."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_validity(valid: bool) -> str:
    """Theme style for a yes/no verdict."""
    return "pdv.valid" if valid else "pdv.invalid"
