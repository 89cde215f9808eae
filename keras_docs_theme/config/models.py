"""Typed dataclasses describing the documentation theme configuration."""

from __future__ import annotations

import dataclasses as dc
import posixpath
from urllib.parse import quote, urlsplit

import regex
from markupsafe import escape

from keras_docs_theme.fragments import Node  # noqa: TC001 - runtime dataclass field

URL_SCHEMES = ("http", "https")
GRAPHEME_PATTERN = regex.compile(r"\X")
LEADING_EXTENDER_PATTERN = regex.compile("[\\p{M}\u200d\U0001f3fb-\U0001f3ff]")


class ThemeConfigError(ValueError):
    """Raised when the theme configuration is invalid or incomplete."""


def _count_glyphs(text: str) -> int:
    """Count user-perceived glyphs (extended grapheme clusters) in ``text``."""
    return len(GRAPHEME_PATTERN.findall(text))


def _require_absolute_url(field: str, value: object) -> str:
    """Validate that ``value`` is an absolute http(s) URL and return it."""
    if not isinstance(value, str) or not value.strip():
        msg = f"Theme field '{field}' must be a non-empty URL string."
        raise ThemeConfigError(msg)
    text = value.strip()
    parts = urlsplit(text)
    if parts.scheme not in URL_SCHEMES or not parts.netloc:
        msg = f"Theme field '{field}' must be an absolute http(s) URL, got {text!r}."
        raise ThemeConfigError(msg)
    return text


def _require_single_glyph(value: object) -> str:
    """Validate that ``value`` renders as exactly one glyph.

    A cluster that starts with a combining mark, modifier, or joiner has no
    base character and is rejected.
    """
    if not isinstance(value, str) or not value.strip():
        msg = "Theme field 'favicon_glyph' must be a non-empty string."
        raise ThemeConfigError(msg)
    if (
        value != value.strip()
        or _count_glyphs(value) != 1
        or LEADING_EXTENDER_PATTERN.match(value)
    ):
        msg = f"Theme field 'favicon_glyph' must be a single glyph, got {value!r}."
        raise ThemeConfigError(msg)
    return value


@dc.dataclass(frozen=True, slots=True)
class NavigationConfig:
    """Sequential page navigation controls."""

    next_links: bool = True
    prev_links: bool = True


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search box settings; ``custom_provider`` replaces the default box."""

    enabled: bool = True
    custom_provider: Node | None = None


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer copy shown beneath every page."""

    enabled: bool
    text: str
    edit_link_text: str


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Fully resolved theme handed to the host documentation framework.

    Instances are immutable: every field is fixed when :func:`load` builds
    the record, including the footer year.
    """

    repository_url: str
    docs_base_url: str
    title_suffix: str
    navigation: NavigationConfig
    search: SearchConfig
    dark_mode: bool
    footer: FooterConfig
    favicon_glyph: str
    logo: Node
    head_meta: Node

    def __post_init__(self) -> None:
        """Reject relative URLs and favicons that are not a single glyph."""
        _require_absolute_url("repository_url", self.repository_url)
        _require_absolute_url("docs_base_url", self.docs_base_url)
        _require_single_glyph(self.favicon_glyph)

    def page_title(self, title: str) -> str:
        """Return ``title`` with the site suffix appended."""
        return f"{title}{self.title_suffix}"

    def edit_link(self, page_path: str) -> str:
        """Return the "edit this page" URL for a docs-relative page path.

        Parameters
        ----------
        page_path : str
            Path of the page source relative to the docs root, for example
            ``pages/index.mdx``.

        Returns
        -------
        str
            ``docs_base_url`` joined with the normalized page path.

        Raises
        ------
        ThemeConfigError
            If ``page_path`` is empty, absolute, or escapes the docs root.
        """
        stripped = page_path.strip()
        if not stripped or stripped.startswith("/"):
            msg = f"Edit links require a docs-relative path, got {page_path!r}."
            raise ThemeConfigError(msg)
        normalized = posixpath.normpath(stripped)
        if normalized == ".." or normalized.startswith("../"):
            msg = f"Page path {page_path!r} escapes the docs root."
            raise ThemeConfigError(msg)
        return f"{self.docs_base_url.rstrip('/')}/{quote(normalized)}"

    @property
    def favicon_href(self) -> str:
        """Return an SVG data URI that draws the favicon glyph."""
        svg = (
            "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>"
            "<text x='50' y='.9em' font-size='90' text-anchor='middle'>"
            f"{escape(self.favicon_glyph)}</text></svg>"
        )
        return f"data:image/svg+xml;utf8,{quote(svg)}"


__all__ = [
    "URL_SCHEMES",
    "FooterConfig",
    "NavigationConfig",
    "SearchConfig",
    "ThemeConfig",
    "ThemeConfigError",
]
