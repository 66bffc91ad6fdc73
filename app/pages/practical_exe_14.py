from fasthtml.common import *

from typing import final

QUESTION = "Create a class marked as final and attempt to extend it to show the restriction."


@final
class RestClass:
    def __init_subclass__(cls, **kwargs):
        raise TypeError(f"Cannot extend final class RestClass (attempted by {cls.__name__})")

    def message(self):
        return "This is a method from final class"


class DerClass:
    def message(self):
        return "changes with child class of a final class"


def try_extend():
    try:
        type("DerClass", (RestClass,), {})
    except TypeError as e:
        return str(e)
    return "RestClass was extended"


def render():
    yield H4(QUESTION)
    yield P(RestClass().message())
    yield P(DerClass().message())
    yield P(try_extend(), cls="text-danger")
