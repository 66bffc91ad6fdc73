from fasthtml.common import *

QUESTION = "Create a class with static properties and methods, and demonstrate their access through the class itself."


class MyClass:
    greeting = "Hello"

    @classmethod
    def greet(cls):
        return f"{cls.greeting}, World!"

    @staticmethod
    def shout(text):
        return text.upper()


def render():
    yield H4(QUESTION)
    yield P(MyClass.greeting)
    yield P(MyClass.greet())
    yield P(MyClass.shout(MyClass.greet()))
