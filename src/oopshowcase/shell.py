"""
Layout Shell

Composes a complete HTML page around a content page: head metadata and
navbar, the sidebar menu built from the ``ExampleRegistry``, the page body
and the footer.

Output is produced as a stream of markup chunks so that whatever has been
emitted stays visible when a later stage fails.
"""

import logging
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional, TextIO

from fasthtml.common import A, Div, Head, Header, Li, Link, Meta, Nav, P, Span, Title, Ul, to_xml

from .errors import RegistryUnavailable
from .registry import ExampleRegistry, PageEntry

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Practical Exercise"
REGISTRY_ERROR_MESSAGE = "Error: Unable to read directory."

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.2/dist/css/bootstrap.min.css"
BOOTSTRAP_INTEGRITY = "sha384-T3c6CoIi6uLrA9TneNEoa7RxnatzjcDSCmG1MXxSR1GAsXEV/Dwwykc2MPK8M2HN"
SIDEBAR_CSS = "/assets/sidebars.css"

SIDEBAR_CLS = "d-flex flex-column flex-shrink-0 p-3 text-white bg-dark"
SIDEBAR_STYLE = "width: 280px; min-height:80vh"

BodyRenderer = Callable[[], Iterable[Any]]


class Stage(Enum):
    """Progress of one page render. Stages only ever move forward."""
    START = "start"
    HEAD_EMITTED = "head_emitted"
    SIDEBAR_RENDERED = "sidebar_rendered"
    BODY_EXECUTING = "body_executing"
    FOOTER_EMITTED = "footer_emitted"


def fragment_markup(fragment: Any) -> str:
    """Serialise a body fragment. Strings are raw markup; anything else goes through ``to_xml``."""
    if isinstance(fragment, str):
        return fragment
    return to_xml(fragment)


def head(title: str):
    return Head(
        Title(title),
        Meta(charset="utf-8"),
        Meta(name="viewport", content="width=device-width, initial-scale=1, shrink-to-fit=no"),
        Link(href=BOOTSTRAP_CSS, rel="stylesheet", integrity=BOOTSTRAP_INTEGRITY, crossorigin="anonymous"),
        Link(href=SIDEBAR_CSS, rel="stylesheet"),
    )


def navbar(title: str):
    return Nav(
        Div(
            A(title, href="index.py", cls="navbar-brand"),
            cls="container-fluid",
        ),
        cls="navbar navbar-expand-lg navbar-dark bg-primary",
    )


def nav_item(entry: PageEntry):
    return Li(
        A(entry.display_label, href=entry.file_name, cls="nav-link text-white", aria_current="page"),
        cls="nav-item",
    )


def sidebar(entries: Iterable[PageEntry]):
    return Div(
        Ul(*[nav_item(e) for e in entries], cls="nav nav-pills flex-column mb-auto text-center"),
        cls=SIDEBAR_CLS,
        style=SIDEBAR_STYLE,
    )


def sidebar_error(message: str = REGISTRY_ERROR_MESSAGE):
    return Div(P(message, cls="text-danger fw-bold"), cls=SIDEBAR_CLS, style=SIDEBAR_STYLE)


def footer():
    return Span("Practical Exercises", cls="text-muted")


class PageRender:
    """
    A single pass of the shell over one content page.

    Iterating yields the page markup chunk by chunk and advances ``stage``.
    A render can only be iterated once.
    """

    def __init__(self, registry: ExampleRegistry, body: BodyRenderer, title: str):
        self.registry = registry
        self.body = body
        self.title = title
        self.stage = Stage.START
        self.aborted = False

    def __iter__(self) -> Iterator[str]:
        if self.stage is not Stage.START:
            raise RuntimeError("PageRender has already been consumed")

        yield "<!doctype html>\n<html lang=\"en\">\n"
        yield to_xml(head(self.title))
        yield "<body>\n"
        yield to_xml(Header(navbar(self.title)))
        yield "<main>\n"
        self.stage = Stage.HEAD_EMITTED

        try:
            entries = self.registry.entries()
        except RegistryUnavailable as e:
            logger.error(f"Aborting render of '{self.title}': {e}")
            self.aborted = True
            self.stage = Stage.SIDEBAR_RENDERED
            yield to_xml(sidebar_error())
            return
        yield to_xml(sidebar(entries))
        self.stage = Stage.SIDEBAR_RENDERED

        yield '<div class="container m-5 p-5" id="content">\n'
        self.stage = Stage.BODY_EXECUTING
        for fragment in self.body():
            yield fragment_markup(fragment)

        yield "</div>\n</main>\n"
        yield "<footer>\n" + to_xml(footer()) + "</footer>\n"
        yield "</body>\n</html>\n"
        self.stage = Stage.FOOTER_EMITTED


class LayoutShell:
    """
    Wraps content pages with the shared head, navigation and footer.

    Args:
        registry: Source of the sidebar entries, consulted once per render
        default_title: Title used when a page does not provide one
    """

    def __init__(self, registry: ExampleRegistry, default_title: str = DEFAULT_TITLE):
        self.registry = registry
        self.default_title = default_title

    def render(self, body: BodyRenderer, title: Optional[str] = None) -> PageRender:
        """Prepare a render of ``body``; nothing runs until it is iterated."""
        return PageRender(self.registry, body, title or self.default_title)

    def write(self, out: TextIO, body: BodyRenderer, title: Optional[str] = None) -> None:
        """
        Render a page straight into a text stream.

        Errors raised by ``body`` propagate; chunks written before the
        failure stay in ``out``.
        """
        for chunk in self.render(body, title):
            out.write(chunk)
