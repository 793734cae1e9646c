"""
Module: subject

Purpose:
    Provides the Subject dataclass - one course in a semester with the
    marks already earned. Subjects are the only input record the engine
    accepts; planners derive hypothetical copies with ``with_see`` and
    never touch the caller's instances.

Key Functions:
    - Subject.with_see(see): Copy with a different SEE score
    - Subject.from_dict(data) / Subject.to_dict()

Dependencies:
    - dataclasses (std)
    - core.errors.InvalidInputError

Used By:
    - engine.aggregator: SGPA calculation
    - engine.single_planner / engine.greedy_planner: Hypothetical scores
    - core.utils.serialization: JSON loading
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..errors import InvalidInputError
from ..utils.numbers import is_number, is_whole


@dataclass(frozen=True)
class Subject:
    """
    A subject with its internal (CIE) and exam (SEE) marks.

    Attributes:
        code: Subject code, unique within one computation
        name: Display name
        cie: Continuous internal evaluation marks, 0..max_cie
        see: Raw semester-end exam score, 0..max_see
        credits: Positive integer credit weight

    Invariants:
        - code is a non-empty string
        - cie >= 0 and see >= 0 (upper bounds depend on the GradingConfig
          and are checked by engine.validation)
        - credits is a positive whole number (stored as int)

    Example:
        >>> s = Subject("MA101", "Calculus", cie=40, see=80, credits=4)
        >>> s.with_see(90).see
        90
    """

    code: str
    name: str
    cie: float
    see: float
    credits: int

    def __post_init__(self) -> None:
        """Validate subject on construction."""
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidInputError(f"Subject code must be a non-empty string: {self.code!r}", field="code")
        if not isinstance(self.name, str):
            raise InvalidInputError(f"Subject name must be a string: {self.name!r}", field="name")
        for attr in ("cie", "see"):
            value = getattr(self, attr)
            if not is_number(value):
                raise InvalidInputError(f"{attr} must be a number: {value!r}", field=attr)
            if value < 0:
                raise InvalidInputError(f"{attr} cannot be negative: {value}", field=attr)
        if not is_whole(self.credits) or self.credits <= 0:
            raise InvalidInputError(
                f"credits must be a positive integer: {self.credits!r}", field="credits"
            )
        # 4.0 from a JSON payload is stored as 4
        object.__setattr__(self, "credits", int(self.credits))

    def with_see(self, see: float) -> Subject:
        """
        Copy of this subject with a different SEE score.

        Args:
            see: The hypothetical exam score

        Returns:
            New Subject (self is unchanged)
        """
        return replace(self, see=see)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "code": self.code,
            "name": self.name,
            "cie": self.cie,
            "see": self.see,
            "credits": self.credits,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subject:
        """
        Deserialize from a dict.

        ``name`` is optional and defaults to the code.
        """
        missing = [k for k in ("code", "cie", "see", "credits") if k not in data]
        if missing:
            raise InvalidInputError(f"Subject missing required fields: {missing}", field=missing[0])
        return cls(
            code=data["code"],
            name=data.get("name", data["code"]),
            cie=data["cie"],
            see=data["see"],
            credits=data["credits"],
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Subject({self.code!r}, cie={self.cie}, see={self.see}, credits={self.credits})"
