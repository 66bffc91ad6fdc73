from fasthtml.common import *

QUESTION = ("Write a script to create a class representing a Car with properties like make, model, "
            "and year, and a method to display the car details.")


class Car:
    def __init__(self, make, model, year):
        self._make = make
        self._model = model
        self._year = year

    def display_details(self):
        return P(f"Car Details: {self._year} {self._make} {self._model}")


def render():
    yield H4(QUESTION)

    car1 = Car("Toyota", "Corolla", 2018)
    yield car1.display_details()
