"""Unit tests for the built-in documentation theme.

These tests cover :func:`keras_docs_theme.config.load`: the literal field
values, the year stamped into the footer, immutability of the record, and the
derived values (page titles, edit links, favicon data URI).

Usage
-----
Run ``pytest tests/test_theme_config.py -v`` to execute the suite. No fixtures
are required beyond the injected ``today`` dates.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import xml.etree.ElementTree as ET
from urllib.parse import unquote, urlsplit

import pytest

from keras_docs_theme.config import (
    NavigationConfig,
    ThemeConfigError,
    current_theme,
    load,
)
from keras_docs_theme.config.models import _count_glyphs, _require_single_glyph
from keras_docs_theme.fragments import iter_elements, text_content


@pytest.mark.parametrize(
    ("today", "expected"),
    [
        (dt.date(2025, 1, 1), "MIT 2025 © Sebaspv."),
        (dt.date(2030, 12, 31), "MIT 2030 © Sebaspv."),
    ],
)
def test_footer_text_uses_year_at_load(today: dt.date, expected: str) -> None:
    """Footer text should carry the calendar year active at load time."""
    theme = load(today=today)
    assert theme.footer.text == expected, (
        f"Expected {expected!r} for {today}, got {theme.footer.text!r}"
    )


def test_footer_text_defaults_to_system_year() -> None:
    """Without an injected date the footer should use the current year."""
    year = dt.date.today().year  # noqa: DTZ011 - mirrors the loader clock
    assert load().footer.text == f"MIT {year} © Sebaspv."


def test_footer_year_is_not_reevaluated() -> None:
    """A loaded theme should keep its year when later loads see a new year."""
    first = load(today=dt.date(2025, 12, 31))
    second = load(today=dt.date(2026, 1, 1))
    assert first.footer.text == "MIT 2025 © Sebaspv."
    assert second.footer.text == "MIT 2026 © Sebaspv."


def test_load_is_idempotent_within_a_year() -> None:
    """Repeated loads in the same year should be structurally equal."""
    assert load(today=dt.date(2025, 3, 1)) == load(today=dt.date(2025, 11, 30))


def test_literal_values() -> None:
    """The built-in theme should expose the site's literal settings."""
    theme = load(today=dt.date(2025, 1, 1))
    assert theme.repository_url == "https://github.com/sebaspv/do-it-in-keras"
    assert (
        theme.docs_base_url
        == "https://github.com/sebaspv/do-it-in-keras/tree/main/web"
    )
    assert theme.title_suffix == " – Do it in Keras"
    assert theme.dark_mode is True
    assert theme.favicon_glyph == "💻"
    assert theme.search.enabled is True
    assert theme.search.custom_provider is None
    assert theme.footer.enabled is True
    assert theme.footer.edit_link_text == "Edit this page on GitHub"


@pytest.mark.parametrize("field", ["repository_url", "docs_base_url"])
def test_urls_are_absolute(field: str) -> None:
    """Repository and docs URLs should be absolute https URLs."""
    parts = urlsplit(getattr(load(), field))
    assert parts.scheme == "https"
    assert parts.netloc == "github.com"


def test_favicon_is_single_glyph() -> None:
    """The favicon glyph should be exactly one rendered glyph."""
    glyph = load().favicon_glyph
    assert glyph
    assert _count_glyphs(glyph) == 1


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("💻", 1),
        ("é", 1),
        ("\u2764\ufe0f", 1),
        ("👍\U0001f3fd", 1),
        ("\U0001f469\u200d\U0001f4bb", 1),
        ("\U0001f1fa\U0001f1f8", 1),
        ("\u0915\u093f", 1),
        ("\u1112\u1161\u11ab", 1),
        ("ab", 2),
        ("💻💻", 2),
        ("", 0),
    ],
)
def test_count_glyphs(text: str, expected: int) -> None:
    """Glyph counting should treat common emoji clusters as one glyph."""
    assert _count_glyphs(text) == expected


def test_navigation_defaults_and_independent_toggles() -> None:
    """Both navigation links default on and toggle independently."""
    navigation = load().navigation
    assert navigation == NavigationConfig(next_links=True, prev_links=True)

    no_next = dc.replace(navigation, next_links=False)
    assert no_next.next_links is False
    assert no_next.prev_links is True

    no_prev = dc.replace(navigation, prev_links=False)
    assert no_prev.prev_links is False
    assert no_prev.next_links is True


def test_theme_is_immutable() -> None:
    """Assigning to any field of a loaded theme should fail."""
    theme = load()
    with pytest.raises(dc.FrozenInstanceError):
        theme.dark_mode = False  # type: ignore[misc]
    with pytest.raises(dc.FrozenInstanceError):
        theme.footer.text = "changed"  # type: ignore[misc]


def test_logo_holds_title_and_subtitle() -> None:
    """The logo should contain the site title followed by the subtitle."""
    spans = [el for el in iter_elements(load().logo) if el.tag == "span"]
    assert [text_content(el) for el in spans] == [
        "Do it in Keras",
        "Modern deep learning architectures and tasks",
    ]
    assert ("class", "mr-2 font-extrabold hidden md:inline") in spans[0].attrs


def test_head_meta_tags() -> None:
    """Head metadata should declare viewport, description, and og:title."""
    metas = {
        dict(el.attrs)["name"]: dict(el.attrs)["content"]
        for el in iter_elements(load().head_meta)
        if el.tag == "meta"
    }
    description = "Do it in Keras: Modern deep learning architectures and tasks"
    assert metas == {
        "viewport": "width=device-width, initial-scale=1.0",
        "description": description,
        "og:title": description,
    }


def test_page_title_appends_suffix() -> None:
    """Page titles should end with the site suffix."""
    assert load().page_title("GANs") == "GANs – Do it in Keras"


@pytest.mark.parametrize(
    ("page_path", "expected_tail"),
    [
        ("pages/index.mdx", "/web/pages/index.mdx"),
        ("pages//nested/./cnn.mdx", "/web/pages/nested/cnn.mdx"),
        ("pages/with space.mdx", "/web/pages/with%20space.mdx"),
    ],
)
def test_edit_link_joins_docs_base(page_path: str, expected_tail: str) -> None:
    """Edit links should be the docs base URL joined with the page path."""
    link = load().edit_link(page_path)
    assert link == f"https://github.com/sebaspv/do-it-in-keras/tree/main{expected_tail}"


@pytest.mark.parametrize("page_path", ["", "/etc/passwd", "../secrets.md", "a/../../b"])
def test_edit_link_rejects_paths_outside_docs_root(page_path: str) -> None:
    """Edit links should only be built for docs-relative paths."""
    with pytest.raises(ThemeConfigError):
        load().edit_link(page_path)


def test_favicon_href_embeds_glyph() -> None:
    """The favicon data URI should draw the configured glyph."""
    href = load().favicon_href
    assert href.startswith("data:image/svg+xml;utf8,")
    assert "💻</text></svg>" in unquote(href)


def test_current_theme_is_built_once() -> None:
    """The process-wide theme should be the same object on every call."""
    assert current_theme() is current_theme()
    assert current_theme() == load()


@pytest.mark.parametrize(
    "glyph",
    ["\u0915\u093f", "\ud55c", "\U0001f469\u200d\U0001f4bb", "&"],
)
def test_single_glyph_accepts_clusters(glyph: str) -> None:
    """Clusters with spacing marks, jamo, or joiners count as one glyph."""
    assert _require_single_glyph(glyph) == glyph


@pytest.mark.parametrize("glyph", ["\u0301", "\u200d\U0001f4bb", "\U0001f3fd"])
def test_single_glyph_rejects_missing_base(glyph: str) -> None:
    """A cluster that starts with a mark, joiner, or modifier is rejected."""
    with pytest.raises(ThemeConfigError, match="single glyph"):
        _require_single_glyph(glyph)


@pytest.mark.parametrize(
    ("changes", "message"),
    [
        ({"favicon_glyph": "ab"}, "single glyph"),
        ({"repository_url": "x"}, "absolute"),
        ({"docs_base_url": "/tree/main/web"}, "absolute"),
    ],
)
def test_replace_revalidates_invariants(changes: dict[str, str], message: str) -> None:
    """Building a modified theme should re-check URLs and the favicon glyph."""
    with pytest.raises(ThemeConfigError, match=message):
        dc.replace(load(), **changes)


def test_favicon_href_escapes_markup_glyph() -> None:
    """A markup-significant glyph should still yield well-formed SVG."""
    theme = dc.replace(load(), favicon_glyph="&")
    svg = unquote(theme.favicon_href.removeprefix("data:image/svg+xml;utf8,"))
    root = ET.fromstring(svg)  # noqa: S314 - parsing locally built SVG
    text = root.find("{http://www.w3.org/2000/svg}text")
    assert text is not None
    assert text.text == "&"
