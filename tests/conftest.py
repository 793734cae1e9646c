import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import sgpa_planner
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from sgpa_planner.core.models import Subject  # noqa: E402
from sgpa_planner.engine.config import DEFAULT_GRADING_CONFIG, GradingConfig  # noqa: E402


# Common test fixtures
@pytest.fixture
def config() -> GradingConfig:
    """Return the default 10-point grading config."""
    return DEFAULT_GRADING_CONFIG


@pytest.fixture
def three_subjects() -> list[Subject]:
    """Totals 90/85/65 -> gp 10/9/7 -> SGPA 8.80."""
    return [
        Subject("SUB1", "Subject 1", cie=40, see=100, credits=4),
        Subject("SUB2", "Subject 2", cie=45, see=80, credits=3),
        Subject("SUB3", "Subject 3", cie=30, see=70, credits=3),
    ]


@pytest.fixture
def improvable_subjects() -> list[Subject]:
    """SGPA 7.30 now, 9.30 with every SEE at 100."""
    return [
        Subject("SUB1", "Subject 1", cie=35, see=50, credits=4),
        Subject("SUB2", "Subject 2", cie=38, see=55, credits=3),
        Subject("SUB3", "Subject 3", cie=42, see=60, credits=3),
    ]


@pytest.fixture
def low_cie_subjects() -> list[Subject]:
    """Best attainable SGPA is 8.00."""
    return [
        Subject("SUB1", "Subject 1", cie=20, see=50, credits=4),
        Subject("SUB2", "Subject 2", cie=25, see=55, credits=3),
    ]


@pytest.fixture
def subjects_json(tmp_path: Path, improvable_subjects) -> Path:
    """Write improvable_subjects to a JSON file."""
    import json

    path = tmp_path / "subjects.json"
    path.write_text(json.dumps({"subjects": [s.to_dict() for s in improvable_subjects]}))
    return path
