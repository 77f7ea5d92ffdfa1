"""Command-line argument validation and parsing into simulation settings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

USAGE = (
    "Usage: ./philo <number_of_philosophers> <time_to_die> "
    "<time_to_eat> <time_to_sleep> [!number_of_times_must_eat]"
)
ARG_COUNT_ERROR = "Error: INVALID number of arguments\n" + USAGE
NOT_NUMBER_ERROR = "Error: Arguments accept only positive numbers"
NOT_POSITIVE_ERROR = "Error: Invalid arguments (accept only positive numbers)"

_WHITESPACE = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the command-line arguments are unusable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining philosophers run, times in milliseconds."""

    philo_count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def is_number(text: str) -> bool:
    """Return True if text is an optional '+' followed only by ASCII digits."""
    digits = text[1:] if text.startswith("+") else text
    return all("0" <= ch <= "9" for ch in digits)


def parse_int(text: str) -> int:
    """Parse a leading integer the way atoi does; 32-bit overflow yields 0."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
        if not INT_MIN <= result * sign <= INT_MAX:
            return 0
    return result * sign


def check_args(args: Sequence[str]) -> None:
    """Check the argument count and that each argument is a plain number.

    ``args`` excludes the program name.
    """
    if len(args) not in (4, 5):
        raise ArgumentError(ARG_COUNT_ERROR)
    if not all(is_number(arg) for arg in args):
        raise ArgumentError(NOT_NUMBER_ERROR)


def parse_settings(args: Sequence[str]) -> Settings:
    """Validate the arguments and build the settings they describe."""
    check_args(args)
    philo_count, t_die, t_eat, t_sleep = (parse_int(arg) for arg in args[:4])
    meals = parse_int(args[4]) if len(args) == 5 else None
    if min(philo_count, t_die, t_eat, t_sleep) <= 0 or (
        meals is not None and meals <= 0
    ):
        raise ArgumentError(NOT_POSITIVE_ERROR)
    return Settings(philo_count, t_die, t_eat, t_sleep, meals)