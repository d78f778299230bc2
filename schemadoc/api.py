"""
High-level Python API for schemadoc.

This module ties the loader and the conversion engine together and
serializes the resulting models.
"""

import json
from typing import Any, Iterable, List

from schemadoc.converter import convert_schemas
from schemadoc.converter.types import NamedModel
from schemadoc.loader import LoaderOptions, load_exports


def document(options: LoaderOptions) -> List[NamedModel]:
    """
    Load schema exports from the configured modules and convert them.

    Args:
        options: Loader options naming the modules to scan

    Returns:
        List[NamedModel]: One model per export, in load order

    Raises:
        SchemaLoadError: If the modules cannot be loaded
        UnsupportedSchemaKind: If an export uses a variant with no conversion rule
    """
    return convert_schemas(load_exports(options))


def models_to_dicts(models: Iterable[NamedModel]) -> List[dict]:
    return [model.to_dict() for model in models]


def models_to_json(models: Iterable[NamedModel], indent: int = 2) -> str:
    """Serialize models to JSON. Values JSON cannot encode (e.g. dates) fall back to str()."""
    return json.dumps(models_to_dicts(models), indent=indent, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return str(value)


__all__ = ["document", "models_to_dicts", "models_to_json", "LoaderOptions"]
