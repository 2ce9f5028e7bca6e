"""
Domain beinhaltet die Entities + Enums

Dieses Modul enthält nur die Fachlogik.
Es enthält keine Ein- oder Ausgabe.

- Entities sind unveränderliche Dataclasses.
- Grenzen der Zahlenfelder werden beim Erzeugen geprüft.
- Die Textdarstellung entspricht der Ausgabe in der Konsole.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EmployeeSortKey(Enum):
    """Mögliche Sortierungen für Mitarbeiter."""
    name = "Name"
    age = "Age"
    salary_asc = "Salary Asc"
    salary_desc = "Salary Desc"


@dataclass(frozen=True, slots=True)
class Employee:
    """
    Ein Mitarbeiter.
    - age muss > 0 sein
    - salary muss > 0 sein
    """
    name: str
    age: int
    salary: float

    def __post_init__(self) -> None:
        """Prüft Grundregeln nach dem Erzeugen."""
        if self.age <= 0:
            raise ValueError(f"age muss > 0 sein, ist aber {self.age}.")
        if not self.salary > 0:
            raise ValueError(f"salary muss > 0 sein, ist aber {self.salary}.")

    def __str__(self) -> str:
        return f"Employee{{name='{self.name}', age={self.age}, salary={self.salary:.2f}}}"


@dataclass(frozen=True, slots=True)
class Student:
    """
    Ein Student mit Punktzahl in Prozent.
    marks darf 0 sein, aber nicht negativ.
    """
    name: str
    marks: float

    def __post_init__(self) -> None:
        """Prüft Grundregeln nach dem Erzeugen."""
        if not self.marks >= 0:
            raise ValueError(f"marks muss >= 0 sein, ist aber {self.marks}.")

    def __str__(self) -> str:
        return f"Student{{name='{self.name}', marks={self.marks:.2f}}}"


@dataclass(frozen=True, slots=True)
class Product:
    """Ein Produkt mit Preis und Kategorie."""
    name: str
    price: float
    category: str

    def __post_init__(self) -> None:
        if not self.price > 0:
            raise ValueError(f"price muss > 0 sein, ist aber {self.price}.")

    def __str__(self) -> str:
        return f"Product{{name='{self.name}', price={self.price:.2f}, category='{self.category}'}}"
