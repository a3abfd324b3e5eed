"""Eingabeschleifen: fragen so lange nach, bis die Eingabe gültig ist.

Jede Ablehnung meldet die verletzte Bedingung (leer / keine Zahl / außerhalb
des Bereichs / ungültiges Datum) und fragt erneut. Ungültige Werte werden
nie zurückgegeben.
"""

from typing import Callable, Optional, TextIO, TypeVar

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from frontdesk.errors import FrontDeskError
from frontdesk.validation import (
    parse_check_in_date,
    parse_decimal,
    parse_integer,
    require_text,
)

T = TypeVar("T")


class Prompter:
    """Liest Eingaben über Rich. ``stream`` ersetzt stdin (für Tests)."""

    def __init__(self, console: Console, stream: Optional[TextIO] = None) -> None:
        self.console = console
        self.stream = stream

    def text(self, prompt: str) -> str:
        """Rohe Zeile ohne Prüfung, Leerzeichen an den Rändern entfernt."""
        return Prompt.ask(prompt, console=self.console, stream=self.stream).strip()

    def error(self, message: str) -> None:
        self.console.print(f"[red]Fehler:[/red] {escape(message)}")

    def retry(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Fragt ``prompt``, bis ``parse`` ohne FrontDeskError durchläuft."""
        while True:
            raw = self.text(prompt)
            try:
                return parse(raw)
            except FrontDeskError as e:
                self.error(e.message)

    # ─── Begrenzte Leser ───

    def required_text(self, prompt: str) -> str:
        return self.retry(prompt, require_text)

    def integer(self, prompt: str, minimum: int, maximum: int) -> int:
        return self.retry(prompt, lambda raw: parse_integer(raw, minimum, maximum))

    def decimal(self, prompt: str, minimum: float,
                maximum: Optional[float] = None) -> float:
        return self.retry(prompt, lambda raw: parse_decimal(raw, minimum, maximum))

    def check_in_date(self, prompt: str, min_year: int) -> str:
        return self.retry(prompt, lambda raw: parse_check_in_date(raw, min_year))

    def pause(self) -> None:
        self.text("\n[dim]Enter drücken zum Fortfahren...[/dim]")
