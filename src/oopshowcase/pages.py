"""
Page Loader

Resolves a requested file name to a content page module in the page
directory. Modules are executed afresh for every request so that no demo
state outlives a single render.
"""

import importlib.util
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Union

from .errors import InvalidPage, PageNotFound
from .registry import PAGE_EXTENSION, is_reserved, split_name

logger = logging.getLogger(__name__)

MODULE_PREFIX = "oopshowcase_pages"


@dataclass(frozen=True)
class ContentPage:
    """A loaded content page: its file, optional title and body renderer."""
    file_name: str
    title: Optional[str]
    render: Callable[[], Iterable[Any]]


def resolve_page_path(directory: Union[str, Path], file_name: str, extension: str = PAGE_EXTENSION) -> Path:
    """
    Map a requested file name onto a page source file.

    Raises:
        PageNotFound: For names outside the directory, shell parts,
                      other extensions and missing files
    """
    if not file_name or "/" in file_name or "\\" in file_name or file_name.startswith("."):
        raise PageNotFound(file_name)

    _, ext = split_name(file_name)
    if ext != extension or is_reserved(file_name):
        raise PageNotFound(file_name)

    path = Path(directory) / file_name
    if not path.is_file():
        raise PageNotFound(file_name)
    return path


def load_page(directory: Union[str, Path], file_name: str, extension: str = PAGE_EXTENSION) -> ContentPage:
    """
    Load a content page module.

    Args:
        directory: Page directory
        file_name: Requested page, e.g. ``practical_exe_02.py``
        extension: Page source extension

    Returns:
        ContentPage wrapping the module's ``render`` and ``TITLE``

    Raises:
        PageNotFound: If the page does not exist
        InvalidPage: If the module has no callable ``render``
    """
    path = resolve_page_path(directory, file_name, extension)
    stem, _ = split_name(file_name)
    module_name = f"{MODULE_PREFIX}.{stem}"

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise PageNotFound(file_name)

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise

    render = getattr(module, "render", None)
    if not callable(render):
        raise InvalidPage(file_name)

    logger.debug(f"Loaded page {file_name} from {path}")
    return ContentPage(file_name=file_name, title=getattr(module, "TITLE", None), render=render)
