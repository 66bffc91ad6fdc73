"""
Showcase Errors

Exceptions raised by the registry, page loader and layout shell.
"""

from pathlib import Path
from typing import Union


class ShowcaseError(Exception):
    """Base class for all showcase errors."""


class RegistryUnavailable(ShowcaseError):
    """The page directory could not be listed."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = str(directory)
        super().__init__(f"Unable to read directory: {self.directory}")


class PageNotFound(ShowcaseError):
    """No content page matches the requested file name."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Page not found: {file_name}")


class InvalidPage(ShowcaseError):
    """A content page module does not expose a callable ``render``."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"Page {file_name} does not define render()")
