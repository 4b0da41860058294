"""Core record type for person_record.

PersonRecord holds a name and an age and exposes a few methods with
different return and failure behaviours: an optional result, a variadic
join, a fallible call, a static greeting and two collection accessors.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

# Characters removed from both ends by concatenate: control chars and space
TRIM_CHARS = "".join(chr(c) for c in range(0x21))


class GenericFailure(Exception):
    """Raised by PersonRecord.risky_method on an unlucky draw."""

    MESSAGE = "Random exception from Java"

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)


@dataclass
class RiskyResult:
    """Outcome of a single risky_method call."""

    success: bool
    value: str | None = None
    error: str | None = None


class PersonRecord:
    """A person-like record with a mutable name and age.

    No validation is applied: any text is a valid name and any integer
    (zero and negatives included) is a valid age. Instances are plain
    value objects and are not thread-safe.

    Attributes:
        name: The person's name
        age: The person's age
    """

    GREETING = "Hello from Java static method"
    SUCCESS = "Success from Java"

    def __init__(self, name: str, age: int) -> None:
        """Initialize the record.

        Args:
            name: The name to store
            age: The age to store
        """
        self.name = name
        self.age = age

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_age(self) -> int:
        return self.age

    def set_age(self, age: int) -> None:
        self.age = age

    def get_description(self) -> str | None:
        """Describe the person, or return None about half of the time.

        Each call makes an independent draw from the process-wide random
        source, so callers must handle the None case.

        Returns:
            "Description: {name} is {age} years old", or None

        Examples:
            >>> desc = PersonRecord("Ann", 30).get_description()
            >>> desc is None or desc == "Description: Ann is 30 years old"
            True
        """
        if random.random() > 0.5:
            return f"Description: {self.name} is {self.age} years old"
        return None

    def concatenate(self, *strings: str) -> str:
        """Join strings with single spaces.

        The joined text is stripped of leading and trailing characters
        at or below U+0020 (space and ASCII control characters). Other
        Unicode whitespace such as U+00A0 is kept.

        Args:
            *strings: Strings to join, in order

        Returns:
            The joined text, or "" when called without arguments

        Examples:
            >>> PersonRecord("Ann", 30).concatenate("a", "b", "c")
            'a b c'
            >>> PersonRecord("Ann", 30).concatenate()
            ''
        """
        return "".join(f"{s} " for s in strings).strip(TRIM_CHARS)

    def risky_method(self) -> str:
        """Return a success message, or fail about half of the time.

        Returns:
            "Success from Java"

        Raises:
            GenericFailure: On an unlucky draw, with the message
                "Random exception from Java"
        """
        if random.random() > 0.5:
            raise GenericFailure()
        return self.SUCCESS

    @staticmethod
    def static_greeting() -> str:
        """Return the fixed greeting. Needs no instance."""
        return PersonRecord.GREETING

    def get_names(self) -> list[str]:
        """Return a new list of the demo names on every call."""
        return ["Alice", "Bob", "Charlie"]

    def get_scores(self) -> dict[str, int]:
        """Return a new name-to-score mapping on every call."""
        return {"Alice": 95, "Bob": 87, "Charlie": 92}

    def __str__(self) -> str:
        return f"PersonRecord{{name='{self.name}', age={self.age}}}"

    def __repr__(self) -> str:
        """Return string representation."""
        return f"PersonRecord(name={self.name!r}, age={self.age})"


def call_risky(record: PersonRecord) -> RiskyResult:
    """Call record.risky_method once and capture its outcome.

    Only GenericFailure is captured; anything else propagates.

    Args:
        record: Record to call

    Returns:
        RiskyResult with either the success value or the failure message.
    """
    try:
        value = record.risky_method()
    except GenericFailure as e:
        return RiskyResult(success=False, error=str(e))
    return RiskyResult(success=True, value=value)
