"""
CLI command implementations.

This module contains the business logic for each CLI command:
- convert: Convert schema exports and print or save the models as JSON
- inspect: Summarize schema exports in a table
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from schemadoc.api import document, models_to_dicts, models_to_json
from schemadoc.converter.types import NamedModel
from schemadoc.loader import LoaderOptions

from .display import (
    print_exports_table,
    print_header,
    print_info,
    print_json,
    print_separator,
    print_success,
)


def convert_command(
    modules: List[str],
    output_path: Optional[Path],
    indent: int,
    include_private: bool,
) -> None:
    """
    Execute the convert command.

    Args:
        modules: Dotted module paths to load exports from
        output_path: File to write the JSON to; printed when None
        indent: JSON indentation
        include_private: Also collect names starting with "_"
    """
    models = document(LoaderOptions(modules=modules, include_private=include_private))

    if output_path is None:
        print_json(models_to_json(models, indent=indent))
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(models_to_json(models, indent=indent) + "\n", encoding="utf-8")
    print_success(f"Wrote {len(models)} model(s) to: {output_path}")


def inspect_command(modules: List[str], include_private: bool, show_models: bool) -> None:
    """
    Execute the inspect command.

    Args:
        modules: Dotted module paths to load exports from
        include_private: Also collect names starting with "_"
        show_models: Also print each model's JSON
    """
    print_header("schemadoc - Schema Exports")

    models = document(LoaderOptions(modules=modules, include_private=include_private))
    print_info(f"Modules: [bold]{', '.join(modules)}[/bold]")
    print_exports_table([summarize_model(model) for model in models])

    if show_models:
        for model, data in zip(models, models_to_dicts(models)):
            print_separator()
            print_json(data, title=model.name or "<default>")


def summarize_model(model: NamedModel) -> Dict[str, Any]:
    """Build the table row for one converted export."""
    meta = model.model.meta_dict()
    return {
        "name": model.name,
        "path": model.path,
        "type": model.type,
        "refs": count_refs(model.to_dict()),
        "meta": ", ".join(key for key in meta if key != "description"),
    }


def count_refs(data: Any) -> int:
    """Count ref entries anywhere in a serialized model."""
    if isinstance(data, dict):
        own = 1 if data.get("kind") == "ref" else 0
        return own + sum(count_refs(value) for value in data.values())
    if isinstance(data, list):
        return sum(count_refs(item) for item in data)
    return 0
