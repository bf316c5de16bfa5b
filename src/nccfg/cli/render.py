# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Rich rendering of a loaded client configuration."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class TableRenderer:
    """Render configuration sections as rich tables and panels."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_list(self, title: str, items: list[str]) -> None:
        if not items:
            self.console.print(f"[dim]No {title.lower()}[/dim]")
            return

        table = Table(title=title, show_header=False, box=None, title_justify="left")
        table.add_column("value", style="cyan", no_wrap=True)
        for item in items:
            table.add_row(item)
        self.console.print(table)

    def render_key_values(self, title: str, data: dict[str, Any]) -> None:
        """Render a key/value panel; empty values are shown dimmed."""
        table = Table(show_header=False, box=None, pad_edge=False)
        for key, value in data.items():
            style = "white" if value not in (None, "") else "dim"
            shown = "-" if value in (None, "") else str(value)
            table.add_row(Text(key, style="bold cyan"), Text(shown, style=style))

        panel = Panel(
            table, title=f"[bold blue]{title}[/bold blue]", border_style="blue", padding=(1, 2)
        )
        self.console.print(panel)
