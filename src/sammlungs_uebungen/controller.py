"""
Controller layer

Der MenueController steuert die App. Er verbindet Erfassung, Service und View.

Aufgaben:
- Hauptmenü anzeigen und Auswahl verarbeiten
- Teil A: Mitarbeiter sortieren
- Teil B: Studenten filtern und sortieren
- Teil C: Produkte gruppieren und auswerten
"""

from __future__ import annotations

import logging
from typing import Dict, List

from .domain import Employee, EmployeeSortKey
from .erfassung import SammlungErfasser
from .service import SammlungService
from .view import ConsoleView

logger = logging.getLogger(__name__)

# Auswahl im Untermenü von Teil A
SORTIER_AUSWAHL: Dict[str, EmployeeSortKey] = {
    "1": EmployeeSortKey.name,
    "2": EmployeeSortKey.age,
    "3": EmployeeSortKey.salary_asc,
    "4": EmployeeSortKey.salary_desc,
}


class MenueController:
    """
    Hauptcontroller.

    Jede Menü-Aktion liest ihre Sammlung neu ein.
    Nach der Aktion wird die Sammlung verworfen.
    """

    def __init__(
        self,
        erfasser: SammlungErfasser,
        service: SammlungService,
        view: ConsoleView
    ) -> None:
        """
        Erstellt den Controller.

        - erfasser: Sammlungen einlesen
        - service: Sortieren, Filtern, Aggregieren
        - view: Ein-/Ausgabe
        """
        self._erfasser = erfasser
        self._service = service
        self._view = view

    def starte_app(self) -> None:
        """
        Startet die Menü-Schleife.
        Sie endet nur mit Auswahl 0 (oder wenn die Eingabe endet).
        """
        while True:
            self._view.render_hauptmenue()
            choice = self._view.prompt("Choose option: ").strip()
            logger.info("Hauptmenü Auswahl: %r", choice)

            if choice == "1":
                self.sortiere_mitarbeiter()
            elif choice == "2":
                self.filtere_studenten()
            elif choice == "3":
                self.werte_produkte_aus()
            elif choice == "0":
                self._view.show_message("Exiting... Goodbye!")
                break
            else:
                self._view.show_message("Invalid choice. Try again.")

    def sortiere_mitarbeiter(self) -> None:
        """
        Teil A.
        Das Untermenü wird wiederholt, bis 0 gewählt wird.
        Jede Sortierung baut auf der vorherigen Reihenfolge auf.
        """
        self._view.show_message("\n--- Part A: Employee Sorting ---")
        mitarbeiter: List[Employee] = self._erfasser.erfasse_mitarbeiter()
        if not mitarbeiter:
            self._view.show_message("No employees entered.")
            return

        while True:
            self._view.render_sortiermenue()
            ch = self._view.prompt("Choice: ").strip()

            if ch == "0":
                return

            key = SORTIER_AUSWAHL.get(ch)
            if key is None:
                self._view.show_message("Invalid option")
                continue

            mitarbeiter = self._service.sortiere_mitarbeiter(mitarbeiter, key)
            self._view.render_liste(f"Sorted by {key.value}", mitarbeiter)

    def filtere_studenten(self) -> None:
        """Teil B."""
        self._view.show_message("\n--- Part B: Filter & Sort Students ---")
        studenten = self._erfasser.erfasse_studenten()

        self._view.show_message(
            f"Students scoring > {self._service.noten_schwelle:g}%, sorted by marks descending:"
        )
        self._view.render_namen(self._service.beste_studenten(studenten))

    def werte_produkte_aus(self) -> None:
        """
        Teil C.
        Der Durchschnitt ist nur für eine nicht leere Liste definiert,
        deshalb wird vorher geprüft.
        """
        self._view.show_message("\n--- Part C: Product Operations ---")
        produkte = self._erfasser.erfasse_produkte()
        if not produkte:
            self._view.show_message("No products entered.")
            return

        auswertung = self._service.erzeuge_produkt_auswertung(produkte)
        self._view.render_produkt_auswertung(auswertung)
