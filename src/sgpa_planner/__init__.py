"""Top-level package for the SGPA planner.

Provides subpackages:
- sgpa_planner.core – data models, errors, schema validation, serialization
- sgpa_planner.engine – grade mapping, SGPA aggregation and the planners
- sgpa_planner.common – mark ceilings and numeric tolerances
- sgpa_planner.cli – command line entry point
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("sgpa-planner")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .core import (  # noqa: E402
    EngineError,
    InvalidInputError,
    UnknownSubjectError,
    Subject,
    SGPAResult,
    CriticalPoint,
    SinglePlan,
    GlobalPlan,
)
from .engine import (  # noqa: E402
    GradingConfig,
    DEFAULT_GRADING_CONFIG,
    scale_see,
    calculate_total,
    gp_for_total,
    calculate_weighted_points,
    calculate_sgpa,
    calculate_cgpa,
    calculate_critical_see_values,
    find_minimal_see_for_target,
    greedy_global_plan,
)

__all__: list[str] = [
    "__version__",
    "EngineError",
    "InvalidInputError",
    "UnknownSubjectError",
    "Subject",
    "SGPAResult",
    "CriticalPoint",
    "SinglePlan",
    "GlobalPlan",
    "GradingConfig",
    "DEFAULT_GRADING_CONFIG",
    "scale_see",
    "calculate_total",
    "gp_for_total",
    "calculate_weighted_points",
    "calculate_sgpa",
    "calculate_cgpa",
    "calculate_critical_see_values",
    "find_minimal_see_for_target",
    "greedy_global_plan",
]
