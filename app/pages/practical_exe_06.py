from fasthtml.common import *

from abc import ABC, abstractmethod

QUESTION = ("Define an interface named VehicleInterface with methods like start(), stop(), "
            "and implement this interface in multiple classes.")


class VehicleInterface(ABC):
    @abstractmethod
    def start(self) -> str: ...

    @abstractmethod
    def stop(self) -> str: ...


class Car(VehicleInterface):
    def __init__(self, brand, model):
        self.brand = brand
        self.model = model

    def start(self):
        return "Car is starting..."

    def stop(self):
        return "Car is stopping..."


class HeavyVehicle(VehicleInterface):
    def __init__(self, brand, model, load_capacity):
        self.brand = brand
        self.model = model
        self.load_capacity = load_capacity

    def start(self):
        return "Heavy vehicle starting ..."

    def stop(self):
        return "Heavy vehicle stopping ..."


def render():
    yield H4(QUESTION)

    vehicles = [Car("Maruti", "Swift"), HeavyVehicle("Tata", "4025", 40000)]
    for vehicle in vehicles:
        yield P(vehicle.start())
        yield P(vehicle.stop())
