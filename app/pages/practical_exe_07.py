from fasthtml.common import *

QUESTION = "Create a class with a constructor that initializes properties when an object is created."


class Car:
    def __init__(self, make="Maruti", model="Swift"):
        self.make = make
        self.model = model


def render():
    yield H4(QUESTION)

    my_car = Car("Toyota", "Corolla")
    yield P(my_car.make)
    yield P(my_car.model)

    my_default_car = Car()
    yield P(my_default_car.make)
    yield P(my_default_car.model)
