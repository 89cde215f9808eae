"""Theme preview rendering pipeline.

This module shows how the documentation framework applies the theme to a
single page: it renders the page shell (head metadata, favicon, logo, search
box, sequential navigation, and footer) around an empty content slot. The
main entry point is ``ThemeShellBuilder``, which loads the shell template,
injects the theme and page description, and optionally persists the HTML.

Typical usage:

>>> from keras_docs_theme.config import load
>>> builder = ThemeShellBuilder(load())
>>> page = ShellPage(title="Introduction", path="pages/index.mdx")
>>> output_path = builder.run(page, Path("public/preview.html"))  # doctest: +SKIP

The builder expects templates to reside under ``keras_docs_theme/templates``
unless a custom directory is provided. It relies on Jinja2 with autoescape
enabled and produces UTF-8 encoded files.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .fragments import render_fragment

if typ.TYPE_CHECKING:
    from .config import ThemeConfig


@dc.dataclass(frozen=True, slots=True)
class PageLink:
    """A neighbouring page used for previous/next navigation."""

    title: str
    href: str


@dc.dataclass(frozen=True, slots=True)
class ShellPage:
    """The page whose shell is being previewed."""

    title: str
    path: str
    prev_page: PageLink | None = None
    next_page: PageLink | None = None


class ThemeShellBuilder:
    """Render a page shell with the theme applied."""

    def __init__(
        self, theme: ThemeConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        theme : ThemeConfig
            Theme produced by :func:`keras_docs_theme.config.load`.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``keras_docs_theme/templates``.
        """
        self.theme = theme
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["fragment"] = render_fragment
        self.template = self.env.get_template("theme_shell.jinja")

    def render(self, page: ShellPage) -> str:
        """Render the shell HTML for ``page``, ending with a newline."""
        theme = self.theme
        context = {
            "theme": theme,
            "page": page,
            "page_title": theme.page_title(page.title),
            "edit_link": theme.edit_link(page.path) if theme.footer.enabled else None,
            "prev_page": page.prev_page if theme.navigation.prev_links else None,
            "next_page": page.next_page if theme.navigation.next_links else None,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, page: ShellPage, output_path: Path) -> Path:
        """Render and write the shell HTML, returning the output path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(page), encoding="utf-8")
        return output_path


__all__ = ["PageLink", "ShellPage", "ThemeShellBuilder"]
