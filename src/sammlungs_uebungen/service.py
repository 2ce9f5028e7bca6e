"""
Application/Use-Case layer

Der SammlungService enthält die Transformationen auf den Sammlungen.
Alle Methoden sind rein: die Eingabeliste wird nicht verändert.
Für Teil C wird eine ProduktAuswertung als ViewModel für die ConsoleView gebaut.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .domain import Employee, EmployeeSortKey, Student, Product


class LeereSammlungFehler(ValueError):
    """Eine Berechnung ist für eine leere Sammlung nicht definiert."""


@dataclass(slots=True)
class ProduktAuswertung:
    """
    Datenobjekt für die View (Teil C).
    """
    gruppen: Dict[str, List[Product]] = field(default_factory=dict)
    teuerste: Dict[str, Product] = field(default_factory=dict)
    durchschnittspreis: float = 0.0


class SammlungService:
    """
    Service für Sortieren, Filtern und Aggregieren.
    """

    def __init__(self, noten_schwelle: float = 75.0) -> None:
        self._noten_schwelle = noten_schwelle

    @property
    def noten_schwelle(self) -> float:
        return self._noten_schwelle

    def sortiere_mitarbeiter(self, mitarbeiter: Sequence[Employee], key: EmployeeSortKey) -> List[Employee]:
        """
        Liefert eine sortierte Kopie.
        Die Sortierung ist stabil, auch bei "Salary Desc":
        gleiche Gehälter behalten ihre Reihenfolge.
        """
        if key is EmployeeSortKey.name:
            return sorted(mitarbeiter, key=lambda e: e.name)
        if key is EmployeeSortKey.age:
            return sorted(mitarbeiter, key=lambda e: e.age)
        if key is EmployeeSortKey.salary_asc:
            return sorted(mitarbeiter, key=lambda e: e.salary)
        if key is EmployeeSortKey.salary_desc:
            # reverse=True von sorted() bleibt stabil.
            return sorted(mitarbeiter, key=lambda e: e.salary, reverse=True)
        raise ValueError(f"Unbekannte Sortierung: {key}")

    def beste_studenten(self, studenten: Sequence[Student]) -> List[str]:
        """
        Namen der Studenten mit marks > Schwelle.
        Absteigend nach marks, bei Gleichstand in Eingabereihenfolge.
        """
        gefiltert = [s for s in studenten if s.marks > self._noten_schwelle]
        gefiltert.sort(key=lambda s: s.marks, reverse=True)
        return [s.name for s in gefiltert]

    def gruppiere_nach_kategorie(self, produkte: Sequence[Product]) -> Dict[str, List[Product]]:
        """
        Gruppiert Produkte nach Kategorie.
        - Kategorien in der Reihenfolge des ersten Auftretens
        - Produkte innerhalb einer Kategorie in Eingabereihenfolge
        """
        gruppen: Dict[str, List[Product]] = {}
        for p in produkte:
            gruppen.setdefault(p.category, []).append(p)
        return gruppen

    def teuerstes_pro_kategorie(self, produkte: Sequence[Product]) -> Dict[str, Product]:
        """
        Liefert pro Kategorie das teuerste Produkt.
        Bei gleichem Preis gewinnt das zuerst eingegebene Produkt.
        """
        teuerste: Dict[str, Product] = {}
        for p in produkte:
            bisher = teuerste.get(p.category)
            if bisher is None or p.price > bisher.price:
                teuerste[p.category] = p
        return teuerste

    def durchschnittspreis(self, produkte: Sequence[Product]) -> float:
        """
        Durchschnittspreis über alle Produkte.
        Für eine leere Liste nicht definiert.
        """
        if not produkte:
            raise LeereSammlungFehler("Durchschnitt einer leeren Produktliste ist nicht definiert.")
        return sum(p.price for p in produkte) / len(produkte)

    def erzeuge_produkt_auswertung(self, produkte: Sequence[Product]) -> ProduktAuswertung:
        """
        Baut die komplette Auswertung für Teil C.
        - Gruppen
        - teuerstes Produkt pro Kategorie
        - Durchschnittspreis
        """
        return ProduktAuswertung(
            gruppen=self.gruppiere_nach_kategorie(produkte),
            teuerste=self.teuerstes_pro_kategorie(produkte),
            durchschnittspreis=self.durchschnittspreis(produkte),
        )
