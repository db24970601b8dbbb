"""Load resource schemas exported by the provider's schema registry."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping

from ..config import load_mapping
from ..models import Field, FieldSet, parse_bool

# Registry exports use Go-style or snake_case spellings; compare on a folded key.
_ATTRIBUTE_KEYS = {
    "type": "type",
    "optional": "optional",
    "required": "required",
    "forcenew": "force_new",
    "computed": "computed",
}


class SchemaLoaderError(RuntimeError):
    """Raised when a schema export cannot be loaded."""


class SchemaLoader:
    """Read ``resource name -> field name -> attributes`` mappings."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._data: Dict[str, Any] | None = None

    def resource_names(self) -> list[str]:
        return sorted(self._load())

    def load_resource(self, resource_name: str) -> FieldSet:
        """Return the schema FieldSet for ``resource_name``."""

        data = self._load()
        if resource_name not in data:
            raise SchemaLoaderError(
                f"Resource '{resource_name}' is not defined in schema export {self.path}"
            )

        fields = data[resource_name]
        if not isinstance(fields, Mapping):
            raise SchemaLoaderError(f"Schema for '{resource_name}' must be a mapping of fields")

        return build_field_set(fields)

    # ------------------------------------------------------------------
    def _load(self) -> Dict[str, Any]:
        if self._data is None:
            self._data = load_mapping(self.path, SchemaLoaderError)
        return self._data


def build_field_set(fields: Mapping[str, Any]) -> FieldSet:
    """Convert a raw field mapping into a :class:`FieldSet`."""

    result: FieldSet = {}
    for name, attributes in fields.items():
        if not name:
            continue
        if attributes is None:
            attributes = {}
        if not isinstance(attributes, Mapping):
            raise SchemaLoaderError(f"Attributes of field '{name}' must be a mapping")

        values: Dict[str, Any] = {}
        for key, value in attributes.items():
            folded = str(key).replace("_", "").lower()
            target = _ATTRIBUTE_KEYS.get(folded)
            if target is None or value is None:
                continue
            if target == "type":
                values[target] = str(value)
            elif isinstance(value, str):
                values[target] = parse_bool(value.strip())
            else:
                values[target] = bool(value)

        result[str(name)] = Field(name=str(name), **values)
    return result


__all__ = ["SchemaLoader", "SchemaLoaderError", "build_field_set"]
