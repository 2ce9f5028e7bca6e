"""
Validierte Zahleneingabe

Liest eine Zeile, wandelt sie in eine Zahl um und prüft sie.
Bei Fehler wird erneut gefragt, so lange bis die Eingabe passt.

- Parse-Fehler sind ValueError.
- Ende der Eingabe (EOFError) wird zu EingabeBeendet.
- Es gibt keine Obergrenze für Wiederholungen.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", int, float)

# Liefert zu einem Prompt eine Zeile, z.B. input oder ConsoleView.prompt.
Zeilenquelle = Callable[[str], str]

_GANZZAHL = re.compile(r"[+-]?\d+")

MELDUNG_POSITIVE_GANZZAHL = "Enter a positive integer."
MELDUNG_POSITIVE_ZAHL = "Enter a positive number."
MELDUNG_NICHT_NEGATIVE_ZAHL = "Enter a non-negative number."


class EingabeBeendet(Exception):
    """Die Eingabequelle ist geschlossen, es kommt keine Zeile mehr."""


def parse_ganzzahl(text: str) -> int:
    """
    Wandelt Text in eine ganze Zahl um.
    Erlaubt sind nur Vorzeichen und Ziffern, also kein "3.0" und kein "1_000".
    """
    s = text.strip()
    if not _GANZZAHL.fullmatch(s):
        raise ValueError(f"Keine ganze Zahl: {text!r}")
    return int(s)


def parse_zahl(text: str) -> float:
    """
    Wandelt Text in eine Kommazahl um.
    - Unterstriche sind nicht erlaubt.
    - nan und inf werden abgelehnt.
    """
    s = text.strip()
    if "_" in s:
        raise ValueError(f"Keine Zahl: {text!r}")
    wert = float(s)
    if not math.isfinite(wert):
        raise ValueError(f"Keine endliche Zahl: {text!r}")
    return wert


def lese_zeile(quelle: Zeilenquelle, prompt: str) -> str:
    """Liest eine Zeile und übersetzt EOFError in EingabeBeendet."""
    try:
        return quelle(prompt)
    except EOFError as e:
        raise EingabeBeendet("Eingabe wurde unerwartet beendet.") from e


def lese_validiert(
    quelle: Zeilenquelle,
    prompt: str,
    parse: Callable[[str], T],
    ist_gueltig: Callable[[T], bool],
    fehlermeldung: str,
) -> T:
    """
    Fragt so lange, bis eine gültige Zahl eingegeben wurde.

    Ablauf:
    - Zeile lesen (erst mit prompt, danach mit fehlermeldung + " Try again: ")
    - parse anwenden, ValueError bedeutet ungültig
    - ist_gueltig prüfen
    - Wert zurückgeben
    """
    aktueller_prompt = prompt
    while True:
        raw = lese_zeile(quelle, aktueller_prompt)
        try:
            wert = parse(raw)
        except ValueError:
            logger.debug("Eingabe nicht lesbar: %r", raw)
        else:
            if ist_gueltig(wert):
                return wert
            logger.debug("Eingabe ausserhalb des Bereichs: %r", wert)
        aktueller_prompt = f"{fehlermeldung} Try again: "


def lese_positive_ganzzahl(quelle: Zeilenquelle, prompt: str) -> int:
    return lese_validiert(quelle, prompt, parse_ganzzahl, lambda x: x > 0, MELDUNG_POSITIVE_GANZZAHL)


def lese_positive_zahl(quelle: Zeilenquelle, prompt: str) -> float:
    return lese_validiert(quelle, prompt, parse_zahl, lambda x: x > 0, MELDUNG_POSITIVE_ZAHL)


def lese_nicht_negative_zahl(quelle: Zeilenquelle, prompt: str) -> float:
    return lese_validiert(quelle, prompt, parse_zahl, lambda x: x >= 0, MELDUNG_NICHT_NEGATIVE_ZAHL)


def lese_text(quelle: Zeilenquelle, prompt: str) -> str:
    """Liest freien Text, ohne Prüfung. Leerzeichen am Rand werden entfernt."""
    return lese_zeile(quelle, prompt).strip()
