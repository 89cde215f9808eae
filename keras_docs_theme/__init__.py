"""Theme configuration for the Do it in Keras documentation site.

This package builds the immutable theme record consumed by the documentation
framework and exposes the CLI used to inspect and preview it.

Exports
-------
- ``load``: Build the theme with the current year stamped into the footer.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from keras_docs_theme import load
>>> load().favicon_glyph
'💻'
"""

from __future__ import annotations

from .cli import app, main
from .config import load

__all__ = ["app", "load", "main"]
