"""A vehicle and a car that extends it with a trunk size."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vehicle:
    """A vehicle's make, colour, year and model."""

    make: str = ""
    color: str = ""
    year: int = 0
    model: str = ""

    def details(self) -> str:
        """Describe the manufacturer, colour and year, one per line."""
        return (
            f"Manufacturer: {self.make}\n"
            f"Color: {self.color}\n"
            f"Year: {self.year}\n"
        )


@dataclass
class Car(Vehicle):
    """A vehicle with a trunk."""

    trunk_size: str = ""

    def details(self) -> str:
        """Describe the vehicle, then its trunk size and model."""
        return (
            super().details()
            + f"Trunk size: {self.trunk_size}\n"
            + f"Model: {self.model}\n"
        )