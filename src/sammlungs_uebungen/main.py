"""
Entry point für die Sammlungs-Übungen.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import AppConfig
from .controller import MenueController
from .eingabe import EingabeBeendet
from .erfassung import SammlungErfasser
from .logging_config import setup_logging
from .service import SammlungService
from .view import ConsoleView

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> AppConfig:
    """Liest die Kommandozeile und baut die AppConfig."""
    ap = argparse.ArgumentParser(prog="sammlungs-uebungen")
    ap.add_argument("--log-level", default="WARNING", help="DEBUG, INFO, WARNING, ...")
    ap.add_argument("--log-format", choices=["text", "json"], default="text")
    args = ap.parse_args(argv)
    return AppConfig(log_level=args.log_level, log_format=args.log_format)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Konfiguration lesen
    - Logging einrichten
    - Komponenten erstellen
    - Controller starten
    """
    config = parse_args(argv)
    setup_logging(config.log_level, config.log_format)

    try:
        # Bausteine der App erstellen.
        view = ConsoleView()
        erfasser = SammlungErfasser(view)
        service = SammlungService(noten_schwelle=config.marks_threshold)
        controller = MenueController(erfasser, service, view)

        # App starten.
        controller.starte_app()

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nApplication terminated.")
        sys.exit(0)

    except EingabeBeendet as e:
        # Eingabe wurde geschlossen, es gibt nichts mehr zu lesen.
        print(f"\nERROR: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unerwarteter Fehler")
        print(f"\nERROR: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
