"""Literal values that make up the Do it in Keras documentation theme.

These constants keep the site copy and links centralized so the loader,
templates, and tests can import the same values without drifting.

Examples
--------
>>> from keras_docs_theme import _constants
>>> _constants.FOOTER_TEMPLATE.format(
...     license=_constants.LICENSE, year=2025, holder=_constants.COPYRIGHT_HOLDER
... )
'MIT 2025 © Sebaspv.'
"""

REPOSITORY_URL = "https://github.com/sebaspv/do-it-in-keras"
DOCS_BASE_URL = "https://github.com/sebaspv/do-it-in-keras/tree/main/web"
TITLE_SUFFIX = " – Do it in Keras"
FAVICON_GLYPH = "💻"

SITE_TITLE = "Do it in Keras"
SITE_SUBTITLE = "Modern deep learning architectures and tasks"
SITE_DESCRIPTION = f"{SITE_TITLE}: {SITE_SUBTITLE}"

LICENSE = "MIT"
COPYRIGHT_HOLDER = "Sebaspv"
FOOTER_TEMPLATE = "{license} {year} © {holder}."
EDIT_LINK_TEXT = "Edit this page on GitHub"

LOGO_TITLE_CLASSES = "mr-2 font-extrabold hidden md:inline"
LOGO_SUBTITLE_CLASSES = "text-gray-600 font-normal hidden md:inline"
VIEWPORT = "width=device-width, initial-scale=1.0"
