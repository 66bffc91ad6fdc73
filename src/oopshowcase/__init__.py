"""
oopshowcase - Object-oriented programming exercises served as web pages

A directory of self-contained demo pages, discovered by the example registry
and rendered inside a shared layout shell with FastHTML.
"""

from .errors import ShowcaseError, RegistryUnavailable, PageNotFound, InvalidPage
from .registry import (
    ListedFile,
    PageEntry,
    DirectoryListing,
    FilesystemListing,
    ExampleRegistry,
    display_label,
    is_page_file,
    is_reserved,
)
from .shell import LayoutShell, PageRender, Stage, DEFAULT_TITLE
from .pages import ContentPage, load_page
from .config import Environment, ShowcaseConfig, LoggingConfig, MailConfig, configure_logging
from .mail import Mailer, mailer
from .web import create_app

__all__ = [
    # Errors
    'ShowcaseError',
    'RegistryUnavailable',
    'PageNotFound',
    'InvalidPage',

    # Registry
    'ListedFile',
    'PageEntry',
    'DirectoryListing',
    'FilesystemListing',
    'ExampleRegistry',
    'display_label',
    'is_page_file',
    'is_reserved',

    # Shell and pages
    'LayoutShell',
    'PageRender',
    'Stage',
    'DEFAULT_TITLE',
    'ContentPage',
    'load_page',

    # Configuration
    'Environment',
    'ShowcaseConfig',
    'LoggingConfig',
    'MailConfig',
    'configure_logging',

    # Mail and web
    'Mailer',
    'mailer',
    'create_app',
]
