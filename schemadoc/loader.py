"""
Module loader - collect schema exports from Python modules.

A schema export is a module-level attribute holding a SchemaNode, limited
to the names in `__all__` when the module defines it. The attribute name
becomes the export name and the module's source file the export path. An
attribute called `default` is treated as an anonymous export.

Usage:
    ```python
    from schemadoc.loader import LoaderOptions, load_exports

    exports = load_exports(LoaderOptions(modules=["myapp.models"]))
    ```
"""

import importlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List, Mapping, Optional

from schemadoc.converter.types import ExportedSchema
from schemadoc.exceptions import SchemaLoadError
from schemadoc.schema.nodes import SchemaNode

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "default"


@dataclass
class LoaderOptions:
    """
    Options controlling which exports are collected.

    Attributes:
        modules: Dotted module paths, loaded in order
        include_private: Also collect attributes whose name starts with "_"
    """

    modules: List[str] = field(default_factory=list)
    include_private: bool = False


def find_schemas(
    namespace: Mapping[str, Any],
    path: str,
    include_private: bool = False,
) -> List[ExportedSchema]:
    """
    Collect schema exports from a namespace mapping.

    Args:
        namespace: Name to value mapping, e.g. vars(module)
        path: Path recorded on every export found
        include_private: Keep names starting with "_"

    Returns:
        Exports in the namespace's iteration order
    """
    exports = []
    for name, value in namespace.items():
        if not isinstance(value, SchemaNode):
            continue
        if name.startswith("_") and not include_private:
            continue
        export_name: Optional[str] = None if name == DEFAULT_EXPORT_NAME else name
        exports.append(ExportedSchema(name=export_name, path=path, schema=value))
    return exports


def load_exports(options: LoaderOptions) -> List[ExportedSchema]:
    """
    Import each module and collect its schema exports.

    A schema object reachable from more than one module (for example through
    `from .common import Address`) is kept only at its first occurrence.

    Args:
        options: Loader options

    Returns:
        List[ExportedSchema]: Exports across all modules, in load order

    Raises:
        SchemaLoadError: If a module cannot be imported or no exports are found
    """
    exports: List[ExportedSchema] = []
    seen = set()

    for module_name in options.modules:
        module = _import_module(module_name)
        path = module_path(module)
        found = find_schemas(module_namespace(module), path, include_private=options.include_private)
        logger.debug(f"Found {len(found)} schema export(s) in {module_name}")

        for exported in found:
            if id(exported.schema) in seen:
                logger.debug(f"Skipping {exported.name} in {module_name}: already exported")
                continue
            seen.add(id(exported.schema))
            exports.append(exported)

    if not exports:
        raise SchemaLoadError(f"No schema exports found in: {', '.join(options.modules) or '<none>'}")

    logger.info(f"Loaded {len(exports)} schema export(s) from {len(options.modules)} module(s)")
    return exports


def module_namespace(module: ModuleType) -> Dict[str, Any]:
    """
    Public names of a module, in `__all__` order when the module declares it.

    Without `__all__`, every module attribute is a candidate, including
    schemas imported from other modules.
    """
    public = getattr(module, "__all__", None)
    if public is None:
        return vars(module)
    return {name: getattr(module, name) for name in public if hasattr(module, name)}


def module_path(module: ModuleType) -> str:
    """
    Source location recorded for a module's exports.

    The source file relative to the working directory when possible, the
    absolute file path otherwise, and the dotted module name for modules
    without a file.
    """
    filename = getattr(module, "__file__", None)
    if not filename:
        return module.__name__
    source = Path(filename).resolve()
    try:
        return source.relative_to(Path.cwd()).as_posix()
    except ValueError:
        return source.as_posix()


def _import_module(module_name: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaLoadError(f"Cannot import module {module_name}: {e}") from e
