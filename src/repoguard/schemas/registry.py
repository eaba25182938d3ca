"""Schema registry backed by package data.

Schemas are read with importlib.resources, so lookups do not depend on the
current working directory.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from importlib.resources import files
from typing import Any

SCHEMA_SUFFIX = ".schema.json"


@dataclass(frozen=True)
class SchemaRegistry:
    """Registry of schemas shipped inside ``repoguard.schemas``.

    Attributes:
        available: Sorted canonical schema names (without the .schema.json suffix)
    """

    available: tuple[str, ...] = ()

    def __init__(self) -> None:
        names = [
            item.name.removesuffix(SCHEMA_SUFFIX)
            for item in files("repoguard.schemas").iterdir()
            if item.name.endswith(SCHEMA_SUFFIX)
        ]
        object.__setattr__(self, "available", tuple(sorted(names)))

    def get_json(self, name: str) -> dict[str, Any]:
        """Load a schema by canonical name.

        Raises:
            KeyError: If no such schema is bundled
        """
        canonical = name.removesuffix(SCHEMA_SUFFIX)
        if canonical not in self.available:
            raise KeyError(
                f"Schema '{canonical}' not found. Available: {', '.join(self.available) or 'none'}"
            )
        text = files("repoguard.schemas").joinpath(canonical + SCHEMA_SUFFIX).read_text(encoding="utf-8")
        return json.loads(text)


@lru_cache(maxsize=1)
def get_registry() -> SchemaRegistry:
    return SchemaRegistry()
