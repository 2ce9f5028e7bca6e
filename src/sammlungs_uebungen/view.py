"""
UI layer für die Console

Diese View zeigt Menüs und Ergebnisse in der Konsole.
- Menüs anzeigen
- Eingaben lesen
- Listen und die Produkt-Auswertung formatieren und ausgeben
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .service import ProduktAuswertung


class ConsoleView:
    """
    View für die Konsole.
    Die Ausgabe-Texte werden in _build_* Methoden gebaut und dann ausgegeben.
    """

    def render_hauptmenue(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("╔══════════════════════════════════════════════════════════════╗")
        print("║                            MENU                              ║")
        print("╠══════════════════════════════════════════════════════════════╣")
        print("║  1) Part A - Sort Employees                                  ║")
        print("║  2) Part B - Filter & Sort Students                          ║")
        print("║  3) Part C - Product Operations (group, max, average)        ║")
        print("║  0) Exit                                                     ║")
        print("╚══════════════════════════════════════════════════════════════╝")

    def render_sortiermenue(self) -> None:
        """Zeigt das Untermenü für Teil A."""
        print()
        print("Sort by: 1) Name 2) Age 3) Salary Asc 4) Salary Desc 0) Back")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        Am Ende der Eingabe wirft input() EOFError.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_liste(self, titel: str, eintraege: Iterable[object]) -> None:
        """Gibt eine Überschrift und danach einen Eintrag pro Zeile aus."""
        print(self._build_liste(titel, eintraege))

    def render_namen(self, namen: Sequence[str]) -> None:
        """
        Gibt Namen aus.
        Eine leere Liste wird als "(None)" angezeigt.
        """
        if not namen:
            print("(None)")
            return
        for name in namen:
            print(name)

    def render_produkt_auswertung(self, auswertung: ProduktAuswertung) -> None:
        """Zeigt Gruppen, teuerste Produkte und Durchschnitt."""
        print(self._build_produkt_auswertung(auswertung))

    def _build_liste(self, titel: str, eintraege: Iterable[object]) -> str:
        lines: List[str] = ["", f"{titel}:"]
        lines.extend(str(e) for e in eintraege)
        return "\n".join(lines)

    def _build_produkt_auswertung(self, auswertung: ProduktAuswertung) -> str:
        """
        Baut die Ausgabe für Teil C.
        Kategorien erscheinen in der Reihenfolge des ersten Auftretens.
        """
        lines: List[str] = []

        # Gruppen
        lines.append("")
        lines.append("Products Grouped By Category:")
        for kategorie, produkte in auswertung.gruppen.items():
            lines.append(f"{kategorie}: " + ", ".join(p.name for p in produkte))

        # Teuerstes Produkt
        lines.append("")
        lines.append("Most Expensive Product In Each Category:")
        for kategorie, p in auswertung.teuerste.items():
            lines.append(f"{kategorie} -> {p.name} ({self._fmt_preis(p.price)})")

        # Durchschnitt
        lines.append("")
        lines.append(f"Average Price of All Products: {auswertung.durchschnittspreis:.2f}")

        return "\n".join(lines)

    def _fmt_preis(self, value: float) -> str:
        """Formatiert einen Preis ohne Rundung, z.B. 20.0 oder 9.99."""
        return str(float(value))
