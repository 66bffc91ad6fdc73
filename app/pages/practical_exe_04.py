"""Inheritance: Car reuses Vehicle's constructor and overrides its display."""

from fasthtml.common import *

QUESTION = ("Create a Vehicle class and extend it with a Car class. Include properties and methods "
            "in both classes, demonstrating inherited behavior.")


class Vehicle:
    def __init__(self, make, model, year):
        self._make = make
        self._model = model
        self._year = year

    def display_details(self):
        return P(f"Vehicle Details: {self._year} {self._make} {self._model}")


class Car(Vehicle):
    def __init__(self, make, model, year, color):
        super().__init__(make, model, year)
        self._color = color

    def display_details(self):
        return P(f"Car Details: {self._year} {self._make} {self._model} {self._color}")


def render():
    yield H4(QUESTION)

    yield Car("Toyota", "Corolla", 2018, "Red").display_details()
    yield Car("Honda", "Civic", 2019, "Blue").display_details()
    yield Vehicle("Toyota", "Corolla", 2018).display_details()
    yield Vehicle("Honda", "Civic", 2019).display_details()
