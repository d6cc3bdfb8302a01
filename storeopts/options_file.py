"""Load store options from YAML files validated against a JSON Schema."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .capabilities import Capabilities, Provider
from .errors import OptionsFileError
from .options import StoreOptions
from .transport import TransportConfig

SCHEMA_PATH = Path(__file__).parent / "schemas" / "options.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict:
    """Load the options-file JSON Schema."""
    with open(SCHEMA_PATH) as f:
        return json.load(f)


def _render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class OptionsDocument:
    """Parsed contents of one options file."""

    provider: str | None = None
    options: tuple[tuple[str, str], ...] = ()
    transport: dict[str, Any] = field(default_factory=dict)

    def declared_provider(self) -> Provider | None:
        if self.provider is None:
            return None
        return Provider.parse(self.provider)

    def transport_config(self) -> TransportConfig:
        return TransportConfig.from_dict(self.transport)

    def to_store_options(self, capabilities: Capabilities | None = None) -> StoreOptions:
        return StoreOptions(self.options, self.transport_config(), capabilities=capabilities)


def validate_options_document(document: Any, schema: dict | None = None) -> list[str]:
    """
    Validate a parsed options document against the JSON Schema.
    Returns a list of error messages (empty if valid).
    """
    if schema is None:
        schema = load_schema()

    errors = []
    validator = jsonschema.Draft7Validator(schema)

    for error in sorted(validator.iter_errors(document), key=lambda e: list(e.path)):
        path = ".".join(str(p) for p in error.absolute_path) or "(root)"
        errors.append(f"[{path}] {error.message}")

    return errors


def load_options_file(path: str | Path) -> OptionsDocument:
    """Load and validate an options YAML file."""
    try:
        with open(path) as f:
            document = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise OptionsFileError(str(path), [f"Failed to load YAML: {e}"]) from e

    if document is None:
        document = {}
    errors = validate_options_document(document)
    if errors:
        raise OptionsFileError(str(path), errors)

    options = document.get("options") or {}
    return OptionsDocument(
        provider=document.get("provider"),
        options=tuple((str(key), _render_value(value)) for key, value in options.items()),
        transport=dict(document.get("transport") or {}),
    )
