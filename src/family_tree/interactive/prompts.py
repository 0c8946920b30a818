from __future__ import annotations

from typing import Optional

from family_tree.core.exceptions import InvalidInputError
from family_tree.interactive.port import ConsolePort
from family_tree.registry.entities import MAX_STORED_NAME

YES_NO_RETRY = "Please enter y or n: "
GENDER_RETRY = "Invalid gender. Enter M or F."
CHOICE_RETRY = "Invalid number, enter again: "


# ---------------------------------------------------------
# Parsers (pure; raise InvalidInputError)
# ---------------------------------------------------------

def parse_gender(text: str) -> str:
    value = text.strip().upper()
    if value not in ("M", "F"):
        raise InvalidInputError(f"Invalid gender: {text!r}")
    return value


def parse_yes_no(text: str, default: Optional[bool] = None) -> bool:
    value = text.strip().lower()
    if not value and default is not None:
        return default
    if value == "y":
        return True
    if value == "n":
        return False
    raise InvalidInputError(f"Expected y or n, got {text!r}")


def parse_choice(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError as exc:
        raise InvalidInputError(f"Invalid number: {text!r}") from exc


# ---------------------------------------------------------
# Prompt loops
# ---------------------------------------------------------

def read_text(port: ConsolePort, prompt: str, max_len: int = MAX_STORED_NAME) -> str:
    """One line of free text, stripped and cut to ``max_len`` characters."""
    return port.read_line(prompt).strip()[:max_len]


def read_gender(port: ConsolePort, prompt: str) -> str:
    while True:
        try:
            return parse_gender(port.read_line(prompt))
        except InvalidInputError:
            port.write(GENDER_RETRY)


def _read_yes_no(port: ConsolePort, prompt: str, default: Optional[bool]) -> bool:
    answer = port.read_line(prompt)
    while True:
        try:
            return parse_yes_no(answer, default)
        except InvalidInputError:
            answer = port.read_line(YES_NO_RETRY)


def read_yes_no(port: ConsolePort, prompt: str) -> bool:
    """y/n confirmation with no default: a blank line asks again."""
    return _read_yes_no(port, prompt, None)


def read_yes_no_default_yes(port: ConsolePort, prompt: str) -> bool:
    """y/n where a blank line means yes (used for alive-status questions)."""
    return _read_yes_no(port, prompt, True)


def read_choice(port: ConsolePort, prompt: str) -> int:
    answer = port.read_line(prompt)
    while True:
        try:
            return parse_choice(answer)
        except InvalidInputError:
            answer = port.read_line(CHOICE_RETRY)
