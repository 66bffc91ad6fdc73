from fasthtml.common import *

QUESTION = "Instantiate multiple objects of the Car class and demonstrate how to access their properties and methods."


class Car:
    def __init__(self, make, model, year):
        self._make = make
        self._model = model
        self._year = year

    def display_details(self):
        return P(f"Car Details: {self._year} {self._make} {self._model}")


CARS = [
    ("Toyota", "Corolla", 2018),
    ("Honda", "Civic", 2019),
    ("Suzuki", "Swift", 2020),
    ("Hyundai", "Accent", 2021),
]


def render():
    yield H4(QUESTION)

    for make, model, year in CARS:
        car = Car(make, model, year)
        yield car.display_details()
