"""
Vehicles - inheritance.

Vehicle holds the shared state (model, year, color) and behaviour
(accelerate, brake). Car inherits all of it and only adds what is specific
to cars.
"""


class Vehicle:
    """Base class for anything that can accelerate and brake."""

    def __init__(self, model: str, year: int, color: str):
        self._model = model
        self._year = year
        self._color = color

    @property
    def model(self) -> str:
        return self._model

    @model.setter
    def model(self, model: str) -> None:
        self._model = model

    @property
    def year(self) -> int:
        return self._year

    @property
    def color(self) -> str:
        return self._color

    def accelerate(self) -> None:
        print(f"{self._model} is accelerating!")

    def brake(self) -> None:
        print(f"{self._model} is braking!")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._model!r}, {self._year}, {self._color!r})"


class Car(Vehicle):
    """A four-wheeled Vehicle."""

    wheels = 4


def main() -> None:
    my_car = Car("Fox", 2014, "Black")
    my_car.accelerate()
    my_car.brake()
