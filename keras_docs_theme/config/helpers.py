"""Utility helpers shared by the theme configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from keras_docs_theme import _constants
from keras_docs_theme.fragments import Fragment, Node, meta, span

from .models import (
    FooterConfig,
    NavigationConfig,
    SearchConfig,
    ThemeConfigError,
)


def _footer_text(
    year: int,
    *,
    license_name: str = _constants.LICENSE,
    holder: str = _constants.COPYRIGHT_HOLDER,
) -> str:
    """Return the footer copyright line for ``year``."""
    return _constants.FOOTER_TEMPLATE.format(license=license_name, year=year, holder=holder)


def _resolve_today(today: dt.date | None) -> dt.date:
    """Return ``today`` or read the local system date once."""
    return today or dt.date.today()  # noqa: DTZ011 - local calendar year


def _current_year(today: dt.date | None) -> int:
    """Return the year of ``today`` or of the local system date."""
    return _resolve_today(today).year


def _require_bool(field: str, value: object) -> bool:
    """Return ``value`` when it is a boolean, raising otherwise."""
    match value:
        case bool():
            return value
        case _:
            msg = f"Theme field '{field}' must be true or false, got {value!r}."
            raise ThemeConfigError(msg)


def _require_str(field: str, value: object) -> str:
    """Return ``value`` when it is a string, raising otherwise."""
    match value:
        case str():
            return value
        case _:
            msg = f"Theme field '{field}' must be a string, got {value!r}."
            raise ThemeConfigError(msg)


def _section(payload: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return a nested mapping from ``payload`` or an empty mapping."""
    match payload.get(key):
        case None:
            return {}
        case dict() as section:
            return section
        case other:
            msg = f"Theme section '{key}' must be a mapping, got {other!r}."
            raise ThemeConfigError(msg)


def _build_logo(
    title: str = _constants.SITE_TITLE, subtitle: str = _constants.SITE_SUBTITLE
) -> Node:
    """Build the header logo: an emphasized title followed by a subtitle."""
    return Fragment(
        (
            span(title, classes=_constants.LOGO_TITLE_CLASSES),
            span(subtitle, classes=_constants.LOGO_SUBTITLE_CLASSES),
        )
    )


def _build_head_meta(description: str = _constants.SITE_DESCRIPTION) -> Node:
    """Build the viewport, description, and social preview meta tags."""
    return Fragment(
        (
            meta(name="viewport", content=_constants.VIEWPORT),
            meta(name="description", content=description),
            meta(name="og:title", content=description),
        )
    )


def _merge_navigation(
    base: NavigationConfig, override: typ.Mapping[str, typ.Any]
) -> NavigationConfig:
    """Merge an override mapping into the base navigation settings."""
    if not override:
        return base
    return NavigationConfig(
        next_links=_require_bool(
            "navigation.next_links", override.get("next_links", base.next_links)
        ),
        prev_links=_require_bool(
            "navigation.prev_links", override.get("prev_links", base.prev_links)
        ),
    )


def _merge_search(base: SearchConfig, override: typ.Mapping[str, typ.Any]) -> SearchConfig:
    """Merge an override mapping into the base search settings."""
    if not override:
        return base
    return SearchConfig(
        enabled=_require_bool("search.enabled", override.get("enabled", base.enabled)),
        custom_provider=base.custom_provider,
    )


def _merge_footer(
    base: FooterConfig, override: typ.Mapping[str, typ.Any], *, year: int
) -> FooterConfig:
    """Merge an override mapping into the base footer settings."""
    if not override:
        return base
    text = base.text
    if "license" in override or "copyright_holder" in override:
        text = _footer_text(
            year,
            license_name=_require_str(
                "footer.license", override.get("license", _constants.LICENSE)
            ),
            holder=_require_str(
                "footer.copyright_holder",
                override.get("copyright_holder", _constants.COPYRIGHT_HOLDER),
            ),
        )
    return FooterConfig(
        enabled=_require_bool("footer.enabled", override.get("enabled", base.enabled)),
        text=text,
        edit_link_text=_require_str(
            "footer.edit_link_text",
            override.get("edit_link_text", base.edit_link_text),
        ),
    )


__all__ = [
    "_build_head_meta",
    "_build_logo",
    "_current_year",
    "_footer_text",
    "_merge_footer",
    "_merge_navigation",
    "_merge_search",
    "_resolve_today",
    "_require_bool",
    "_require_str",
    "_section",
]
