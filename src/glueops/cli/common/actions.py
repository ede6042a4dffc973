"""GitHub Actions runner integration.

When glueops runs as a workflow step, inputs arrive as `INPUT_<NAME>` env
vars (wired up in options.py), step outputs are appended to the file named
by GITHUB_OUTPUT, and failures are surfaced as `::error::` workflow commands.
"""

from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import Mapping

_OUTPUT_ENV = "GITHUB_OUTPUT"


def in_github_actions() -> bool:
    """Return True when running inside a GitHub Actions job."""
    return os.getenv("GITHUB_ACTIONS", "").lower() == "true"


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error_command(message: str) -> str:
    """Format a workflow `error` command for the given message."""
    return f"::error::{_escape_data(message)}"


def _format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def write_outputs(outputs: Mapping[str, str]) -> Path | None:
    """
    Append step outputs to the GITHUB_OUTPUT file.

    Returns:
        The file written to, or None when GITHUB_OUTPUT is not set.
    """
    raw = os.getenv(_OUTPUT_ENV)
    if not raw:
        return None
    path = Path(raw)
    with path.open("a", encoding="utf-8") as fh:
        for name, value in outputs.items():
            fh.write(_format_output(name, value))
    return path
