"""
Command-line interface module.

This module provides a rich terminal interface for schemadoc using Typer and Rich.

Commands:
    - convert: Convert schema exports and print or save the models as JSON
    - inspect: Summarize schema exports in a table

Example Usage:
    ```bash
    # Print models for one module
    schemadoc convert --module myapp.models

    # Several modules, written to a file
    schemadoc convert \\
        --module myapp.models \\
        --module myapp.events \\
        --output docs/models.json

    # Summary table with debug logging
    schemadoc --verbose inspect --module myapp.models
    ```
"""

from .main import app

__all__ = ["app"]
