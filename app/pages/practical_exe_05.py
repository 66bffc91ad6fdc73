"""
Method overloading.

Python has one function per name, so the accepted call shapes are spelled out
with ``typing.overload`` and the implementation checks the arity explicitly.
"""

from fasthtml.common import *

from typing import Union, overload

QUESTION = ("Create a class that demonstrates method overloading by defining multiple methods "
            "with the same name but different parameters.")

INVALID_ARGUMENTS = "Invalid number of arguments"

Number = Union[int, float]


class AddNumbers:
    @overload
    def add(self, a: Number, b: Number) -> Number: ...

    @overload
    def add(self, a: Number, b: Number, c: Number) -> Number: ...

    @overload
    def add(self, a: Number, b: Number, c: Number, d: Number) -> Number: ...

    def add(self, *numbers):
        if len(numbers) not in (2, 3, 4):
            return INVALID_ARGUMENTS
        return sum(numbers)


def render():
    yield H4(QUESTION)

    adder = AddNumbers()
    yield P(str(adder.add(2)))
    yield P(str(adder.add(25, 35)))
    yield P(str(adder.add(10, 20, 30)))
    yield P(str(adder.add(20, 40, 60, 80)))
    yield P(str(adder.add(15, 25, 35, 45, 55)))
