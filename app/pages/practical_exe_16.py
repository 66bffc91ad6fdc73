from fasthtml.common import *

from pathlib import Path

QUESTION = "Create a script that reads from a text file and displays its content on a web page."

SOURCE = Path(__file__).parent / "index.py"


def read_content(path: Path) -> str:
    if path.is_file():
        return path.read_text(encoding="utf-8")
    return "File not found."


def render():
    yield H4(QUESTION)
    yield H1("File Content")
    yield Pre(read_content(SOURCE))
