"""
FastHTML Web Adapter

Serves the page directory through the layout shell. Every request loads its
content page fresh, lists the page directory once for the sidebar and streams
the resulting markup.
"""

import logging
from typing import Optional

from fasthtml.common import H1, Div, FastHTML, P, to_xml
from fasthtml.live_reload import FastHTMLWithLiveReload
from starlette.responses import HTMLResponse, StreamingResponse
from starlette.staticfiles import StaticFiles

from .config import ShowcaseConfig, configure_logging
from .errors import InvalidPage, PageNotFound
from .mail import mailer
from .pages import load_page
from .registry import ExampleRegistry, FilesystemListing
from .shell import LayoutShell

logger = logging.getLogger(__name__)

INDEX_PAGE = "index"
STATIC_PREFIX = "/assets"


def build_shell(config: ShowcaseConfig) -> LayoutShell:
    """Wire the registry over the configured page directory into a shell."""
    listing = FilesystemListing(config.pages_dir, sort=config.sort_pages)
    registry = ExampleRegistry(listing, extension=config.page_extension)
    return LayoutShell(registry, default_title=config.default_title)


def page_response(shell: LayoutShell, config: ShowcaseConfig, file_name: str):
    try:
        page = load_page(config.pages_dir, file_name, config.page_extension)
    except (PageNotFound, InvalidPage) as e:
        logger.info(str(e))
        return HTMLResponse(to_xml(Div(H1("404"), P(f"Page not found: {file_name}"))), status_code=404)

    logger.debug(f"Rendering {file_name}")
    return StreamingResponse(iter(shell.render(page.render, page.title)), media_type="text/html")


def create_app(config: Optional[ShowcaseConfig] = None) -> FastHTML:
    """
    Create the FastHTML application serving the showcase pages.

    Args:
        config: Application configuration; read from the environment if omitted

    Returns:
        The configured FastHTML app
    """
    config = config or ShowcaseConfig.from_env()
    configure_logging(config.logging)
    mailer.configure(config.mail)

    shell = build_shell(config)
    app = (FastHTMLWithLiveReload if config.live else FastHTML)()
    # Only the stylesheet directory is public; nothing is served from the working directory.
    app.mount(STATIC_PREFIX, StaticFiles(directory=config.static_dir), name="assets")
    rt = app.route

    @rt("/")
    def index():
        return page_response(shell, config, INDEX_PAGE + config.page_extension)

    @rt("/{file_name}")
    def page(file_name: str):
        return page_response(shell, config, file_name)

    logger.info(f"Serving pages from {config.pages_dir}")
    return app
