"""
Destructors.

``__del__`` runs when the last reference goes away; ``del`` on the only name
bound to an object triggers it immediately under CPython.
"""

from fasthtml.common import *

QUESTION = "Write a class that implements a destructor to perform cleanup tasks when an object is destroyed."


class DatabaseConnection:
    def __init__(self, echo):
        self.echo = echo
        echo("Database connection established.")

    def __del__(self):
        self.echo("Database connection closed.")


class Cache:
    def __init__(self, echo):
        self.echo = echo
        echo("Cache initialized.")

    def __del__(self):
        self.echo("Cache cleared.")


def render():
    yield H4(QUESTION)

    lines = []
    db = DatabaseConnection(lines.append)
    del db
    cache = Cache(lines.append)
    del cache

    for line in lines:
        yield P(line)
