from fasthtml.common import *

QUESTION = "Create two traits and use them in a class to demonstrate how to include multiple behaviors."


class TraitA:
    def greet_a(self):
        return "Hello from Trait A"


class TraitB:
    def greet_b(self):
        return "Hello from Trait B"


class MyClass(TraitA, TraitB):
    pass


def render():
    yield H4(QUESTION)

    obj = MyClass()
    yield P(obj.greet_a())
    yield P(obj.greet_b())
