"""Console input parsing and re-prompting."""

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from diet_tracker.domain.errors import InputValidationError

T = TypeVar("T")

YES_ANSWERS = frozenset({"y", "yes"})
NO_ANSWERS = frozenset({"n", "no"})


def parse_text(raw: str) -> str:
    value = raw.strip()
    if not value:
        raise InputValidationError("Input cannot be empty. Please try again.")
    return value


def parse_field(raw: str) -> str:
    """Parse text that will be stored in a comma-delimited record."""
    value = parse_text(raw)
    if "," in value:
        raise InputValidationError("Input cannot contain commas. Please try again.")
    return value


def parse_positive_int(raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError:
        raise InputValidationError("Please enter a valid positive number.") from None
    if value <= 0:
        raise InputValidationError("Please enter a valid positive number.")
    return value


def parse_positive_float(raw: str) -> float:
    try:
        value = float(raw.strip())
    except ValueError:
        raise InputValidationError("Please enter a valid positive number.") from None
    if not math.isfinite(value) or value <= 0:
        raise InputValidationError("Please enter a valid positive number.")
    return value


def parse_int_in_range(raw: str, minimum: int, maximum: int) -> int:
    message = f"Please enter a number between {minimum} and {maximum}."
    try:
        value = int(raw.strip())
    except ValueError:
        raise InputValidationError(message) from None
    if not minimum <= value <= maximum:
        raise InputValidationError(message)
    return value


def parse_yes_no(raw: str) -> bool:
    answer = raw.strip().lower()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    raise InputValidationError("Please enter 'y' for yes or 'n' for no.")


@dataclass
class Prompter:
    """Asks for input until a parser accepts it.

    ``read`` behaves like ``input`` and raises ``EOFError`` when input ends.
    """

    read: Callable[[str], str] = input
    write: Callable[[str], None] = print

    def ask(self, prompt: str, parser: Callable[[str], T]) -> T:
        while True:
            raw = self.read(prompt)
            try:
                return parser(raw)
            except InputValidationError as exc:
                self.write(f"Error: {exc}")

    def ask_text(self, prompt: str) -> str:
        return self.ask(prompt, parse_text)

    def ask_field(self, prompt: str) -> str:
        return self.ask(prompt, parse_field)

    def ask_positive_int(self, prompt: str) -> int:
        return self.ask(prompt, parse_positive_int)

    def ask_positive_float(self, prompt: str) -> float:
        return self.ask(prompt, parse_positive_float)

    def ask_choice(self, prompt: str, minimum: int, maximum: int) -> int:
        return self.ask(prompt, lambda raw: parse_int_in_range(raw, minimum, maximum))

    def ask_yes_no(self, prompt: str) -> bool:
        return self.ask(f"{prompt} (y/n): ", parse_yes_no)
