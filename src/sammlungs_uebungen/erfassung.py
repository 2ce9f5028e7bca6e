"""
Erfassung der Sammlungen

Der SammlungErfasser liest Mitarbeiter, Studenten und Produkte über die View ein.
Zuerst wird die Anzahl N gefragt, danach genau N Einträge.
Zahlenfelder laufen immer über die validierte Eingabe.
"""

from __future__ import annotations

import logging
from typing import List

from .domain import Employee, Student, Product
from .eingabe import (
    lese_nicht_negative_zahl,
    lese_positive_ganzzahl,
    lese_positive_zahl,
    lese_text,
)
from .view import ConsoleView

logger = logging.getLogger(__name__)


class SammlungErfasser:
    """
    Liest Sammlungen von der Konsole.
    Die Reihenfolge der Felder ist fest.
    """

    def __init__(self, view: ConsoleView) -> None:
        self._view = view

    def erfasse_mitarbeiter(self) -> List[Employee]:
        """
        Liest Mitarbeiter ein.
        Felder: Name, Alter, Gehalt.
        """
        quelle = self._view.prompt
        n = lese_positive_ganzzahl(quelle, "Enter number of employees: ")
        liste: List[Employee] = []
        for i in range(1, n + 1):
            name = lese_text(quelle, f"Employee {i} name: ")
            age = lese_positive_ganzzahl(quelle, "Age: ")
            salary = lese_positive_zahl(quelle, "Salary: ")
            liste.append(Employee(name, age, salary))

        logger.info("%d Mitarbeiter erfasst", len(liste))
        return liste

    def erfasse_studenten(self) -> List[Student]:
        """
        Liest Studenten ein.
        Felder: Name, Punkte in Prozent.
        """
        quelle = self._view.prompt
        n = lese_positive_ganzzahl(quelle, "Enter number of students: ")
        liste: List[Student] = []
        for i in range(1, n + 1):
            name = lese_text(quelle, f"Student {i} name: ")
            marks = lese_nicht_negative_zahl(quelle, "Marks (%): ")
            liste.append(Student(name, marks))

        logger.info("%d Studenten erfasst", len(liste))
        return liste

    def erfasse_produkte(self) -> List[Product]:
        """
        Liest Produkte ein.
        Felder: Name, Preis, Kategorie.
        """
        quelle = self._view.prompt
        n = lese_positive_ganzzahl(quelle, "Enter number of products: ")
        liste: List[Product] = []
        for i in range(1, n + 1):
            name = lese_text(quelle, f"Product {i} name: ")
            price = lese_positive_zahl(quelle, "Price: ")
            category = lese_text(quelle, "Category: ")
            liste.append(Product(name, price, category))

        logger.info("%d Produkte erfasst", len(liste))
        return liste
