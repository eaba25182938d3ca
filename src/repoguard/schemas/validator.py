"""Bundled-schema checks for evidence records and config documents."""

from typing import Any

from jsonschema.exceptions import ValidationError
from jsonschema.validators import Draft202012Validator

from repoguard.schemas.registry import get_registry


def _describe(error: ValidationError) -> str:
    if not error.path:
        return error.message
    return f"{'.'.join(str(p) for p in error.path)}: {error.message}"


def schema_errors(data: Any, schema_name: str) -> list[str]:
    """Return one message per violation, ordered by document path.

    An empty list means the document conforms. Config loading reports these
    messages itself rather than raising.
    """
    validator = Draft202012Validator(get_registry().get_json(schema_name))
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    return [_describe(e) for e in errors]


def validate_data(data: Any, schema_name: str) -> None:
    """Raise ValueError unless data conforms to the named schema.

    Used as a write guard: an evidence record that fails here is a bug in the
    builder, never something to persist.
    """
    errors = schema_errors(data, schema_name)
    if errors:
        raise ValueError(
            f"{schema_name} document does not match its schema:\n"
            + "\n".join(f"  - {msg}" for msg in errors)
        )
