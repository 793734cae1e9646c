"""
Module: engine.config

Purpose:
    Grading policy for the engine. Immutable configuration with
    validation on construction, plus loading from a JSON file.

Key Classes:
    - GradingConfig: SEE scale, cutoff table, floor grade point, mark ceilings

Key Functions:
    - load_grading_config(): Read and validate a config JSON file

Dependencies:
    - dataclasses (std)
    - core.schemas: Payload validation

Used By:
    - Every engine function (defaults to DEFAULT_GRADING_CONFIG)
    - cli: --config
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from sgpa_planner.common.limits import MARK_LIMITS
from sgpa_planner.core.errors import InvalidInputError
from sgpa_planner.core.models.grading import GradeCutoff
from sgpa_planner.core.schemas.validator import validate_grading_config_payload
from sgpa_planner.core.utils.numbers import is_number, is_whole


DEFAULT_CUTOFFS: tuple[GradeCutoff, ...] = (
    GradeCutoff(90, 10),
    GradeCutoff(80, 9),
    GradeCutoff(70, 8),
    GradeCutoff(60, 7),
    GradeCutoff(50, 6),
    GradeCutoff(45, 5),
    GradeCutoff(40, 4),
)


@dataclass(frozen=True)
class GradingConfig:
    """
    Grading policy (immutable).

    Attributes:
        see_scale: Factor applied to the raw SEE before adding CIE
        cutoffs: Tiers, highest cutoff_total first
        floor_grade_point: Grade point for totals below every cutoff
        max_cie: Ceiling for CIE marks
        max_see: Ceiling for raw SEE marks

    Invariants:
        - at least one cutoff
        - cutoff_total strictly decreasing
        - grade_point non-increasing
        - floor_grade_point <= grade point of the lowest tier
        - see_scale, max_cie, max_see > 0

    Example:
        >>> config = GradingConfig()
        >>> config.top_grade_point
        10
    """

    see_scale: float = MARK_LIMITS.see_scale
    cutoffs: tuple[GradeCutoff, ...] = field(default=DEFAULT_CUTOFFS)
    floor_grade_point: int = 4
    max_cie: float = MARK_LIMITS.max_cie
    max_see: float = MARK_LIMITS.max_see

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Lists and (total, gp) pairs are accepted and normalized
        cutoffs = tuple(
            c if isinstance(c, GradeCutoff) else GradeCutoff(*c) for c in self.cutoffs
        )
        object.__setattr__(self, "cutoffs", cutoffs)

        for name in ("see_scale", "max_cie", "max_see"):
            value = getattr(self, name)
            if not is_number(value) or value <= 0:
                raise InvalidInputError(f"{name} must be a positive number: {value!r}", field=name)
        if not is_whole(self.floor_grade_point) or self.floor_grade_point < 0:
            raise InvalidInputError(
                f"floor_grade_point must be a non-negative integer: {self.floor_grade_point!r}",
                field="floor_grade_point",
            )
        object.__setattr__(self, "floor_grade_point", int(self.floor_grade_point))
        if not cutoffs:
            raise InvalidInputError("cutoffs must not be empty", field="cutoffs")

        for i in range(1, len(cutoffs)):
            prev, cur = cutoffs[i - 1], cutoffs[i]
            if cur.cutoff_total >= prev.cutoff_total:
                raise InvalidInputError(
                    f"cutoffs must be sorted by cutoff_total, strictly decreasing: "
                    f"{prev.cutoff_total} then {cur.cutoff_total}",
                    field=f"cutoffs[{i}].cutoff_total",
                )
            if cur.grade_point > prev.grade_point:
                raise InvalidInputError(
                    f"grade points must not increase as cutoffs decrease: "
                    f"{prev.grade_point} then {cur.grade_point}",
                    field=f"cutoffs[{i}].grade_point",
                )
        if self.floor_grade_point > cutoffs[-1].grade_point:
            raise InvalidInputError(
                f"floor_grade_point ({self.floor_grade_point}) must not exceed the lowest "
                f"tier's grade point ({cutoffs[-1].grade_point})",
                field="floor_grade_point",
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def top_grade_point(self) -> int:
        """Grade point of the highest tier."""
        return self.cutoffs[0].grade_point

    @property
    def max_total(self) -> float:
        """Largest total a subject can score under this policy."""
        return self.max_cie + self.max_see * self.see_scale

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "see_scale": self.see_scale,
            "cutoffs": [c.to_dict() for c in self.cutoffs],
            "floor_grade_point": self.floor_grade_point,
            "max_cie": self.max_cie,
            "max_see": self.max_see,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, validate: bool = True) -> GradingConfig:
        """
        Build a config from a parsed JSON payload.

        Fields other than ``cutoffs`` fall back to the defaults.

        Raises:
            SchemaValidationError: If validate=True and the payload shape is wrong
            InvalidInputError: If the cutoff table breaks an ordering rule
        """
        if validate:
            validate_grading_config_payload(data)
        kwargs: dict[str, Any] = {
            "cutoffs": tuple(GradeCutoff.from_dict(c) for c in data["cutoffs"]),
        }
        for name in ("see_scale", "floor_grade_point", "max_cie", "max_see"):
            if name in data:
                kwargs[name] = data[name]
        return cls(**kwargs)

    @classmethod
    def from_table(cls, table: Sequence[tuple[float, int]], **kwargs: Any) -> GradingConfig:
        """
        Build a config from ``(cutoff_total, grade_point)`` pairs.

        Example:
            >>> GradingConfig.from_table([(50, 10), (0, 5)], floor_grade_point=0)
        """
        return cls(cutoffs=tuple(GradeCutoff(t, gp) for t, gp in table), **kwargs)


DEFAULT_GRADING_CONFIG = GradingConfig()


def load_grading_config(path: Path) -> GradingConfig:
    """
    Load a grading config from a JSON file.

    Args:
        path: Path to the JSON file

    Returns:
        Validated GradingConfig
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return GradingConfig.from_dict(data)
