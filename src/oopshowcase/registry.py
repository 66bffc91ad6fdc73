"""
Example Registry

Discovers the content pages of a page directory and turns their file names
into navigation labels for the sidebar.

The directory listing is injected (see ``DirectoryListing``) so the labelling
and filtering policy can be exercised against fake listings.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Protocol, Sequence, Union

from .errors import RegistryUnavailable

logger = logging.getLogger(__name__)

PAGE_EXTENSION = ".py"

# Shell parts living next to the pages; never listed in the menu.
RESERVED_NAMES = frozenset({"header", "footer", "navbar", "sidebar"})

HOME_LABEL = "HOME"


@dataclass(frozen=True)
class ListedFile:
    """One entry of a directory listing."""
    name: str
    is_file: bool = True


@dataclass(frozen=True)
class PageEntry:
    """A navigable content page: where the link points and what it reads."""
    file_name: str
    display_label: str


class DirectoryListing(Protocol):
    """Anything that can return the ordered entries of the page directory."""

    def list(self) -> Sequence[ListedFile]:
        ...


class FilesystemListing:
    """
    Directory listing backed by ``os.scandir``.

    Args:
        directory: Directory holding the content pages
        sort: Order entries by name. When False the platform's native
              scandir order is returned untouched.
    """

    def __init__(self, directory: Union[str, Path], sort: bool = True):
        self.directory = Path(directory)
        self.sort = sort

    def list(self) -> List[ListedFile]:
        """
        Read the directory once.

        Raises:
            RegistryUnavailable: If the directory cannot be read
        """
        try:
            with os.scandir(self.directory) as it:
                files = [ListedFile(entry.name, entry.is_file()) for entry in it]
        except OSError as e:
            logger.error(f"Cannot list page directory {self.directory}: {e}")
            raise RegistryUnavailable(self.directory) from e

        if self.sort:
            files.sort(key=lambda f: f.name)
        return files


def split_name(file_name: str) -> tuple[str, str]:
    """Split ``file_name`` into its stem and its last extension."""
    return os.path.splitext(file_name)


def display_label(file_name: str) -> str:
    """
    Derive the menu label of a page file.

    ``practical_exe_01.py`` becomes ``PRACTICAL EXE 01``; ``index.py``
    (in any case) becomes ``HOME``.
    """
    stem, _ = split_name(file_name)
    label = stem.replace("_", " ").upper()
    return HOME_LABEL if label == "INDEX" else label


def is_reserved(file_name: str) -> bool:
    """True for shell parts (header, footer, navbar, sidebar), whatever the case."""
    stem, _ = split_name(file_name)
    return stem.lower() in RESERVED_NAMES


def is_page_file(listed: ListedFile, extension: str = PAGE_EXTENSION) -> bool:
    """
    Decide whether a listed entry is a navigable content page.

    Args:
        listed: Entry returned by a directory listing
        extension: Page source extension, matched exactly

    Returns:
        True for regular files with the page extension that are not shell parts
    """
    if not listed.is_file:
        return False
    _, ext = split_name(listed.name)
    return ext == extension and not is_reserved(listed.name)


class ExampleRegistry:
    """
    Produces the ordered navigation entries of the page directory.

    Entries keep the order of the underlying listing; nothing is cached
    between calls.
    """

    def __init__(self, listing: DirectoryListing, extension: str = PAGE_EXTENSION):
        self.listing = listing
        self.extension = extension

    def entries(self) -> List[PageEntry]:
        """
        List the navigable pages.

        Raises:
            RegistryUnavailable: If the listing cannot be obtained
        """
        return [
            PageEntry(listed.name, display_label(listed.name))
            for listed in self.listing.list()
            if is_page_file(listed, self.extension)
        ]
