"""Shared fixtures: fake directory listings and the shipped page directory."""

from pathlib import Path

import pytest

from oopshowcase.config import MailConfig
from oopshowcase.errors import RegistryUnavailable
from oopshowcase.mail import mailer
from oopshowcase.registry import ListedFile

PAGES_DIR = Path(__file__).resolve().parent.parent / "app" / "pages"


class FakeListing:
    """Listing that returns a fixed sequence and counts how often it is read."""

    def __init__(self, *names, directories=()):
        self.files = [ListedFile(n, True) for n in names] + [ListedFile(d, False) for d in directories]
        self.calls = 0

    def list(self):
        self.calls += 1
        return list(self.files)


class FailingListing:
    """Listing that behaves like an unreadable directory."""

    def __init__(self, directory="/srv/pages"):
        self.directory = directory
        self.calls = 0

    def list(self):
        self.calls += 1
        raise RegistryUnavailable(self.directory)


@pytest.fixture
def pages_dir():
    return PAGES_DIR


@pytest.fixture(autouse=True)
def offline_mailer():
    """Keep the global mailer without an SMTP host for every test."""
    previous = mailer.config
    mailer.configure(MailConfig())
    yield mailer
    mailer.configure(previous)
