"""Shared JSON output helpers for the finder management commands."""

import json

from core.schemas.base_schema_model import BaseSchemaModel


def render_results(results: list[BaseSchemaModel], indent: int | None) -> str:
    """Serialize finder results as a JSON array with camelCase keys."""
    return json.dumps(
        [result.model_dump(mode="json", by_alias=True) for result in results],
        indent=indent,
    )
