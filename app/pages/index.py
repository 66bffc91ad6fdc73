from fasthtml.common import *

TITLE = "Practical Exercise"

TOPICS = [
    "Encapsulation with private and public members",
    "Classes, objects and inheritance",
    "Overloading, interfaces and constructors",
    "Destructors and static members",
    "Traits, visibility and typed properties",
    "Final classes",
    "Safe email input, reading files and sending mail",
]


def render():
    yield H1("Object-Oriented Programming Exercises")
    yield P("Each page in the menu is a small, self-contained exercise. "
            "Pick one on the left to see the class it builds and the output it produces.")
    yield Ul(*[Li(t) for t in TOPICS])
