"""
Konfiguration

Es gibt keine Umgebungsvariablen und keine Konfigurationsdatei.
Werte kommen aus Defaults oder aus der Kommandozeile (siehe main.py).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """
    Einstellungen der Anwendung.
    - marks_threshold: Studenten müssen mehr Prozent erreichen
    - log_level: Level für logging (Logs gehen auf stderr)
    - log_format: "text" oder "json"
    """
    marks_threshold: float = 75.0
    log_level: str = "WARNING"
    log_format: str = "text"

    def __post_init__(self) -> None:
        if self.log_format not in ("text", "json"):
            raise ValueError(f"log_format muss 'text' oder 'json' sein, ist aber {self.log_format!r}.")
