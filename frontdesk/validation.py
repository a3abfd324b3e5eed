"""Prüf- und Parse-Funktionen für rohe Texteingaben.

Reine Funktionen ohne Ein-/Ausgabe. Die Prädikate (``is_valid_*``) sagen nur
ja/nein; die Parser liefern den Wert oder werfen einen ``InputError`` mit der
verletzten Bedingung, den die Eingabeschleife der Oberfläche anzeigt.
"""

import calendar
import re
from typing import Optional

from frontdesk.errors import ErrorKind, input_error

# Nur ASCII-Ziffern; str.isdigit() akzeptiert auch "²" o.ä.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?=.)[0-9]*\.?[0-9]*")
_DATE_RE = re.compile(r"([0-9]{2})/([0-9]{2})/([0-9]{4})")

MIN_YEAR = 1900
MAX_YEAR = 2100


# ─── Prädikate ───

def is_valid_integer(text: str) -> bool:
    """Optionales Vorzeichen, danach mindestens eine Ziffer und nur Ziffern."""
    return _INTEGER_RE.fullmatch(text) is not None


def is_valid_decimal(text: str) -> bool:
    """Optionales Vorzeichen, danach nicht leer: Ziffern und höchstens ein Punkt.

    Auch "." und "+." sind gültig; ``parse_decimal`` liest sie als 0.
    """
    return _DECIMAL_RE.fullmatch(text) is not None


def days_in_month(month: int, year: int) -> int:
    """Tage im Monat nach gregorianischer Schaltjahresregel."""
    return calendar.monthrange(year, month)[1]


def is_valid_date(text: str) -> bool:
    """Exakt TT/MM/JJJJ, Jahr 1900–2100, Tag passend zum Monat."""
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return False
    day, month, year = (int(g) for g in match.groups())
    if not 1 <= month <= 12 or not MIN_YEAR <= year <= MAX_YEAR:
        return False
    return 1 <= day <= days_in_month(month, year)


# ─── Parser ───

def parse_integer(text: str, minimum: int, maximum: int) -> int:
    """Ganzzahl im Bereich [minimum, maximum] oder InputError."""
    if text == "":
        raise input_error(ErrorKind.EMPTY_INPUT)
    if not is_valid_integer(text):
        raise input_error(ErrorKind.NOT_A_NUMBER)
    value = int(text)
    if value < minimum or value > maximum:
        raise input_error(
            ErrorKind.OUT_OF_RANGE,
            f"Wert muss zwischen {minimum} und {maximum} liegen!",
        )
    return value


def parse_decimal(text: str, minimum: float,
                  maximum: Optional[float] = None) -> float:
    """Dezimalzahl ≥ minimum (und ≤ maximum, falls gesetzt) oder InputError."""
    if text == "":
        raise input_error(ErrorKind.EMPTY_INPUT)
    if not is_valid_decimal(text):
        raise input_error(ErrorKind.NOT_A_DECIMAL)
    # "." oder "+." ohne Ziffern gilt als 0
    value = float(text) if any(c.isdigit() for c in text) else 0.0
    if value < minimum:
        raise input_error(
            ErrorKind.OUT_OF_RANGE,
            f"Wert muss mindestens {minimum:.2f} sein!",
        )
    if maximum is not None and value > maximum:
        raise input_error(
            ErrorKind.OUT_OF_RANGE,
            f"Wert darf höchstens {maximum:.2f} sein!",
        )
    return value


def parse_check_in_date(text: str, min_year: int) -> str:
    """Gültiges Check-in-Datum (TT/MM/JJJJ, Jahr ≥ min_year) oder InputError."""
    # Auch eine leere Eingabe ist ein ungültiges Datum
    if not is_valid_date(text) or int(text[6:]) < min_year:
        raise input_error(ErrorKind.INVALID_DATE)
    return text


def require_text(text: str) -> str:
    """Nicht-leerer Text oder InputError(EmptyInput)."""
    if text == "":
        raise input_error(ErrorKind.EMPTY_INPUT)
    return text
