"""
schemadoc: Documentation models from schema definitions

schemadoc introspects declarative schema definitions (strings, numbers,
objects, unions, records, tuples, functions, modifier wrappers, ...) and
converts each exported schema into a serializable intermediate model that a
formatter can render into documentation.

Key Features:
    - One conversion rule per schema variant, modifier wrappers looked through
    - Named exports referenced by name instead of duplicated
    - Validation constraints normalized per leaf type
    - Description/optional/nullable/default/readonly flags on every model

Quick Start:
    ```python
    from schemadoc import convert_schemas, ExportedSchema
    from schemadoc.schema import builders as s

    User = s.object_({
        "id": s.string().uuid(),
        "age": s.number().min(0).optional(),
        "tags": s.array(s.string()).max(5),
    })

    models = convert_schemas([ExportedSchema(name="User", path="models.py", schema=User)])
    print(models[0].to_dict())
    ```

Architecture:
    1. Schema vocabulary: build schema nodes (schemadoc.schema)
    2. Loader: collect module-level schema exports (schemadoc.loader)
    3. Converter: dispatch, resolve refs, extract constraints and meta
    4. CLI: print or write the models as JSON (schemadoc.cli)
"""

__version__ = "0.1.0"

from schemadoc.converter import convert_schemas  # noqa: F401
from schemadoc.converter.types import ExportedSchema, NamedModel  # noqa: F401
from schemadoc.exceptions import SchemaDocError, SchemaLoadError, UnsupportedSchemaKind  # noqa: F401

__all__ = [
    "convert_schemas",
    "ExportedSchema",
    "NamedModel",
    "SchemaDocError",
    "SchemaLoadError",
    "UnsupportedSchemaKind",
]
