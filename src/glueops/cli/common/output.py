"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import questionary
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from glueops.cli.common.tui_style import QUESTIONARY_STYLE_CONFIRM

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def _q_try(self, fn, *args, **kwargs):
        """Call questionary prompts and drop unsupported kwargs on older versions."""
        try:
            return fn(*args, **kwargs)
        except TypeError:
            for k in ("pointer", "auto_enter"):
                kwargs.pop(k, None)
            return fn(*args, **kwargs)

    def _q(self, message: str) -> str:
        """Prefix Questionary prompts to be GLUEOPS consistent."""
        return f"[GLUEOPS] {message}"

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {escape(msg)}", soft_wrap=True)

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {escape(msg)}", soft_wrap=True)

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {escape(msg)}", soft_wrap=True)

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {escape(msg)}", soft_wrap=True)

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{escape(title)}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(
                f"[meta]{escape(str(k))}[/]: {escape(str(v))}", soft_wrap=True, emoji=False
            )

    def confirm(self, message: str, *, default: bool = False) -> bool:
        """
        Ask the user for confirmation using a standardized Questionary prompt.

        Args:
            message: Confirmation question shown to the user.
            default: Default answer if the user just presses enter.

        Returns:
            True if the user confirms, False otherwise.
        """
        console.print("[meta]Use y/n then Enter[/]")

        prompt = self._q_try(
            questionary.confirm,
            self._q(message),
            default=default,
            style=QUESTIONARY_STYLE_CONFIRM,
            qmark="✦",
            auto_enter=False,
            pointer="❯",  # dropped automatically on older Questionary versions
        )
        return bool(prompt.ask())

    def database_table(self, spec: Any, title: str = "Database") -> None:
        """
        Render the database that is about to be created.

        Expects an object with `.name`, `.catalog_id`, `.description`,
        `.location_uri` and `.parameters` (like glueops.core.glue.DatabaseSpec).
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Name", style="ok", no_wrap=True)
        t.add_column("Catalog", style="meta")
        t.add_column("Location")
        t.add_column("Parameters", style="meta")

        params = ", ".join(
            f"{k}={v}" for k, v in (getattr(spec, "parameters", None) or {}).items()
        )
        t.add_row(
            escape(spec.name),
            escape(getattr(spec, "catalog_id", None) or "(account default)"),
            escape(getattr(spec, "location_uri", None) or ""),
            escape(params),
        )

        console.print(t)


out = Out()
