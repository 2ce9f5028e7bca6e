"""
sammlungs_uebungen package

Konsolen-Übung zu Sortieren, Filtern und Aggregieren kleiner Sammlungen
(Mitarbeiter, Studenten, Produkte), die interaktiv eingegeben werden.

Schichtenarchitektur:
- domain.py: Entities + Enums
- eingabe.py: validierte Zahleneingabe
- erfassung.py: Sammlungen einlesen
- service.py: Sortierung, Filter, Aggregation
- view.py: Konsolen-Ausgabe
- controller.py: Menü-Orchestrierung
- main.py: Einstiegspunkt
"""

__version__ = "1.0.0"
