"""Gemeinsame Test-Konfiguration: src im Pfad und eine View mit vorgegebenen Eingaben."""

from collections import deque
from pathlib import Path
import sys

import pytest

# src zum Import-Pfad hinzufügen (unabhängig vom Ort des pytest-Aufrufs)
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sammlungs_uebungen.view import ConsoleView


class ScriptedView(ConsoleView):
    """
    ConsoleView, die Eingaben aus einer Liste liest.
    - Prompts werden gesammelt
    - sind alle Zeilen verbraucht, kommt EOFError wie bei input()
    """

    def __init__(self, zeilen):
        self._zeilen = deque(zeilen)
        self.prompts = []

    def prompt(self, frage: str) -> str:
        self.prompts.append(frage)
        if not self._zeilen:
            raise EOFError
        return self._zeilen.popleft()

    @property
    def rest(self):
        return list(self._zeilen)


@pytest.fixture
def scripted_view():
    """Factory: scripted_view(["1", "Bob", ...])"""
    return ScriptedView
