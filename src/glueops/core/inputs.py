"""Input construction utilities.

Translates the string-typed inputs a runner hands over (CLI options or
GitHub Actions `INPUT_*` variables) into a single immutable DatabaseSpec.
All validation here happens before any network call is made.
"""

from __future__ import annotations

import json

from glueops.core.errors import InputValidationError
from glueops.core.glue import DatabaseSpec


def _blank_to_none(value: str | None) -> str | None:
    """Runners pass unset optional inputs as empty strings."""
    if value is None or value == "":
        return None
    return value


def parse_if_not_exists(value: str | None) -> bool:
    """Anything other than the literal "false" tolerates existing databases."""
    return value != "false"


def parse_parameters(raw: str | None) -> dict[str, str] | None:
    """
    Parse the `parameters` input.

    The value must be a JSON object whose keys and values are all strings.

    Args:
        raw: JSON text, or None/empty when not provided.

    Returns:
        The parsed mapping, or None when no parameters were given.

    Raises:
        InputValidationError: If the text is not valid JSON or is not a flat
                              object of string values.
    """
    raw = _blank_to_none(raw)
    if raw is None:
        return None

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InputValidationError(f"Failed to parse parameters JSON: {exc}") from exc

    if not isinstance(parsed, dict):
        raise InputValidationError(
            "Failed to parse parameters JSON: Parameters must be a JSON object"
        )

    bad = sorted(k for k, v in parsed.items() if not isinstance(v, str))
    if bad:
        raise InputValidationError(
            "Failed to parse parameters JSON: values must be strings "
            f"(invalid keys: {', '.join(bad)})"
        )

    return parsed


def build_database_spec(
    *,
    name: str | None,
    description: str | None = None,
    location_uri: str | None = None,
    parameters: str | None = None,
    catalog_id: str | None = None,
) -> DatabaseSpec:
    """
    Build a DatabaseSpec from raw inputs.

    Raises:
        InputValidationError: If the name is empty or parameters are malformed.
    """
    name = (name or "").strip()
    if not name:
        raise InputValidationError("Input required and not supplied: database-name")

    return DatabaseSpec(
        name=name,
        description=_blank_to_none(description),
        location_uri=_blank_to_none(location_uri),
        parameters=parse_parameters(parameters),
        catalog_id=_blank_to_none(catalog_id),
    )
