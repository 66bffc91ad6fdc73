"""
Visibility.

Python signals visibility by naming: a plain name is public, a single leading
underscore marks a member as protected, a double underscore is name-mangled
to ``_MyClass__name`` and so is private to the defining class.
"""

from fasthtml.common import *

QUESTION = "Write a class that shows examples of each visibility type and how they restrict access to properties and methods."


class MyClass:
    def __init__(self):
        self.prop_public = "This is a public property"
        self._prop_protected = "This is a protected property"
        self.__prop_private = "This is a private property"

    def met_public(self):
        return "This is a public method"

    def _met_protected(self):
        return "This is a protected method"

    def __met_private(self):
        return "This is a private method"

    def get_prop_protected(self):
        return self._prop_protected

    def get_prop_private(self):
        return self.__prop_private

    def run_met_protected(self):
        return self._met_protected()

    def run_met_private(self):
        return self.__met_private()


class MyChildClass(MyClass):
    pass


def private_access(obj):
    try:
        return obj.__prop_private
    except AttributeError:
        return f"{type(obj).__name__} has no attribute __prop_private outside the class"


def column(heading, obj):
    return Div(cls="col-6")(
        H5(heading),
        H6("Properties"),
        P(obj.prop_public),
        P(obj.get_prop_protected()),
        P(obj.get_prop_private()),
        H6("Methods"),
        P(obj.met_public()),
        P(obj.run_met_protected()),
        P(obj.run_met_private()),
        H6("Direct access"),
        P(private_access(obj)),
    )


def render():
    yield H4(QUESTION)
    yield Div(cls="row")(
        column("Parent Class", MyClass()),
        column("Child Class", MyChildClass()),
    )
