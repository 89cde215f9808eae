"""Build the documentation theme, optionally layering YAML overrides."""

from __future__ import annotations

import datetime as dt  # noqa: TC003 - used in runtime signatures
import functools
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from keras_docs_theme import _constants

from .helpers import (
    _build_head_meta,
    _build_logo,
    _current_year,
    _footer_text,
    _merge_footer,
    _merge_navigation,
    _merge_search,
    _require_bool,
    _require_str,
    _resolve_today,
    _section,
)
from .models import (
    FooterConfig,
    NavigationConfig,
    SearchConfig,
    ThemeConfig,
    _require_absolute_url,
    _require_single_glyph,
)


def load(*, today: dt.date | None = None) -> ThemeConfig:
    """Return the Do it in Keras theme.

    Every field is a literal except the footer year, which is read from the
    clock once, here, and never re-evaluated.

    Parameters
    ----------
    today : date, optional
        Date used for the footer year. Defaults to the local system date.

    Returns
    -------
    ThemeConfig
        Frozen theme record ready for the documentation framework.

    Examples
    --------
    >>> import datetime as dt
    >>> load(today=dt.date(2025, 1, 1)).footer.text
    'MIT 2025 © Sebaspv.'
    """
    return ThemeConfig(
        repository_url=_constants.REPOSITORY_URL,
        docs_base_url=_constants.DOCS_BASE_URL,
        title_suffix=_constants.TITLE_SUFFIX,
        navigation=NavigationConfig(next_links=True, prev_links=True),
        search=SearchConfig(enabled=True, custom_provider=None),
        dark_mode=True,
        footer=FooterConfig(
            enabled=True,
            text=_footer_text(_current_year(today)),
            edit_link_text=_constants.EDIT_LINK_TEXT,
        ),
        favicon_glyph=_constants.FAVICON_GLYPH,
        logo=_build_logo(),
        head_meta=_build_head_meta(),
    )


@functools.cache
def current_theme() -> ThemeConfig:
    """Return the process-wide theme, built on first use and reused after."""
    return load()


def load_theme_config(path: Path, *, today: dt.date | None = None) -> ThemeConfig:
    """Load the theme and apply overrides from a YAML file.

    Parameters
    ----------
    path : Path
        YAML file whose top-level ``theme`` mapping overrides theme fields.
    today : date, optional
        Date used for the footer year. Defaults to the local system date.

    Returns
    -------
    ThemeConfig
        The built-in theme with any overrides applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ThemeConfigError
        If an override has the wrong type, a URL is not absolute, or the
        favicon is not a single glyph.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    today = _resolve_today(today)
    return apply_overrides(load(today=today), _section(raw, "theme"), today=today)


def apply_overrides(
    base: ThemeConfig,
    overrides: typ.Mapping[str, typ.Any],
    *,
    today: dt.date | None = None,
) -> ThemeConfig:
    """Return a new theme with ``overrides`` merged over ``base``.

    Unknown keys are ignored. The footer year is only recomputed when the
    footer license or copyright holder changes.
    """
    if not overrides:
        return base
    logo = _section(overrides, "logo")
    head = _section(overrides, "head")
    return ThemeConfig(
        repository_url=_require_absolute_url(
            "repository_url", overrides.get("repository_url", base.repository_url)
        ),
        docs_base_url=_require_absolute_url(
            "docs_base_url", overrides.get("docs_base_url", base.docs_base_url)
        ),
        title_suffix=_require_str(
            "title_suffix", overrides.get("title_suffix", base.title_suffix)
        ),
        navigation=_merge_navigation(base.navigation, _section(overrides, "navigation")),
        search=_merge_search(base.search, _section(overrides, "search")),
        dark_mode=_require_bool("dark_mode", overrides.get("dark_mode", base.dark_mode)),
        footer=_merge_footer(
            base.footer, _section(overrides, "footer"), year=_current_year(today)
        ),
        favicon_glyph=_require_single_glyph(
            overrides.get("favicon_glyph", base.favicon_glyph)
        ),
        logo=_build_logo(
            _require_str("logo.title", logo.get("title", _constants.SITE_TITLE)),
            _require_str("logo.subtitle", logo.get("subtitle", _constants.SITE_SUBTITLE)),
        )
        if logo
        else base.logo,
        head_meta=_build_head_meta(
            _require_str("head.description", head["description"])
        )
        if "description" in head
        else base.head_meta,
    )


__all__ = ["apply_overrides", "current_theme", "load", "load_theme_config"]
