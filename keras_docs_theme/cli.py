"""Cyclopts CLI entrypoint for inspecting and previewing the docs theme.

The ``theme`` console script defined here prints the resolved theme as JSON
and renders a preview of one page shell with the theme applied. Both commands
accept an optional YAML override file so site maintainers can check a change
before handing the theme to the documentation framework.

Examples
--------
Print the built-in theme:

>>> from keras_docs_theme.cli import app
>>> app(["show"])  # doctest: +SKIP

Preview a page shell with neighbouring pages:

>>> app(
...     ["preview", "--title", "CNNs", "--path", "pages/cnn.mdx",
...      "--next-page", "RNNs=/rnn"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ThemeConfig, current_theme, load_theme_config
from .fragments import render_fragment
from .shell import PageLink, ShellPage, ThemeShellBuilder

DEFAULT_PREVIEW_OUTPUT = Path("public/theme-preview.html")

app = App(name="theme", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_theme(config: Path | None) -> ThemeConfig:
    """Return the built-in theme or the theme with overrides from ``config``."""
    if config is None:
        return current_theme()
    return load_theme_config(config)


def _parse_page_link(value: str | None) -> PageLink | None:
    """Parse a ``Title=href`` option value into a page link."""
    if value is None:
        return None
    title, sep, href = value.partition("=")
    if not sep or not title.strip() or not href.strip():
        msg = f"Page links must look like 'Title=/href', got {value!r}."
        raise ValueError(msg)
    return PageLink(title=title.strip(), href=href.strip())


def theme_to_dict(theme: ThemeConfig) -> dict[str, typ.Any]:
    """Return a JSON-serializable mapping of ``theme`` with rendered fragments."""
    custom_provider = theme.search.custom_provider
    return {
        "repository_url": theme.repository_url,
        "docs_base_url": theme.docs_base_url,
        "title_suffix": theme.title_suffix,
        "navigation": dc.asdict(theme.navigation),
        "search": {
            "enabled": theme.search.enabled,
            "custom_provider": (
                str(render_fragment(custom_provider)) if custom_provider else None
            ),
        },
        "dark_mode": theme.dark_mode,
        "footer": dc.asdict(theme.footer),
        "favicon_glyph": theme.favicon_glyph,
        "logo": str(render_fragment(theme.logo)),
        "head_meta": str(render_fragment(theme.head_meta)),
    }


@app.command(help="Print the resolved theme configuration as JSON.")
def show(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to a theme override YAML file", env_var="INPUT_CONFIG"),
    ] = None,
) -> None:
    """Print the theme, with any overrides applied, as indented JSON.

    Parameters
    ----------
    config : Path or None, optional
        YAML file whose ``theme`` mapping overrides the built-in values.
    """
    theme = _resolve_theme(config)
    print(json.dumps(theme_to_dict(theme), indent=2, ensure_ascii=False))


@app.command(help="Render a page shell preview with the theme applied.")
def preview(
    *,
    title: typ.Annotated[str, Parameter(help="Page title")],
    path: typ.Annotated[
        str, Parameter(help="Page source path relative to the docs root")
    ],
    prev_page: typ.Annotated[
        str | None, Parameter(help="Previous page as 'Title=/href'")
    ] = None,
    next_page: typ.Annotated[
        str | None, Parameter(help="Next page as 'Title=/href'")
    ] = None,
    output: typ.Annotated[
        Path, Parameter(help="Where to write the preview", env_var="INPUT_OUTPUT")
    ] = DEFAULT_PREVIEW_OUTPUT,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to a theme override YAML file", env_var="INPUT_CONFIG"),
    ] = None,
) -> None:
    """Render the theme around an empty page and write it to ``output``.

    Parameters
    ----------
    title : str
        Page title; the theme suffix is appended.
    path : str
        Docs-relative source path used for the edit link.
    prev_page, next_page : str or None, optional
        Neighbouring pages in ``Title=/href`` form.
    output : Path, optional
        Destination HTML file.
    config : Path or None, optional
        YAML file whose ``theme`` mapping overrides the built-in values.

    Raises
    ------
    ValueError
        If a neighbouring page is not in ``Title=/href`` form.
    """
    theme = _resolve_theme(config)
    page = ShellPage(
        title=title,
        path=path,
        prev_page=_parse_page_link(prev_page),
        next_page=_parse_page_link(next_page),
    )
    written = ThemeShellBuilder(theme).run(page, output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `theme` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
