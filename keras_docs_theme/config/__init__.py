"""Build and validate the Do it in Keras documentation theme.

The built-in theme comes from :func:`load`, which assembles a frozen
:class:`ThemeConfig` from literal values and stamps the footer with the
current year. :func:`load_theme_config` reads an optional ``theme.yaml`` file
and layers its overrides on top, validating URLs, booleans, and the favicon
glyph before returning a new record.

Examples
--------
>>> from keras_docs_theme.config import load
>>> theme = load()
>>> theme.page_title("Transformers")
'Transformers – Do it in Keras'
>>> theme.edit_link("pages/transformers.mdx")
'https://github.com/sebaspv/do-it-in-keras/tree/main/web/pages/transformers.mdx'
"""

from .loader import apply_overrides, current_theme, load, load_theme_config
from .models import (
    FooterConfig,
    NavigationConfig,
    SearchConfig,
    ThemeConfig,
    ThemeConfigError,
)

__all__ = [
    "FooterConfig",
    "NavigationConfig",
    "SearchConfig",
    "ThemeConfig",
    "ThemeConfigError",
    "apply_overrides",
    "current_theme",
    "load",
    "load_theme_config",
]
