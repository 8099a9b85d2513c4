"""Runtime configuration for the lab."""
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

CONTENT_DIR = Path(__file__).parent / "content"
DEFAULT_SOURCE = str(CONTENT_DIR / "questions.json")

AUTO_ADVANCE_DELAY = 2.5  # seconds
POINTS_PER_CORRECT = 10
RUN_TIMEOUT_MS = 2000
FETCH_TIMEOUT = 10.0
DEFAULT_CATEGORY = "variables"
DEFAULT_DIFFICULTY = "all"


@dataclass
class LabConfig:
    source: str = DEFAULT_SOURCE
    auto_advance_delay: float = AUTO_ADVANCE_DELAY
    points_per_correct: int = POINTS_PER_CORRECT
    run_timeout_ms: Optional[int] = RUN_TIMEOUT_MS
    fetch_timeout: float = FETCH_TIMEOUT
    default_category: str = DEFAULT_CATEGORY
    default_difficulty: str = DEFAULT_DIFFICULTY


def load_config(path: Optional[str] = None) -> LabConfig:
    """Load a LabConfig, overlaying values from a YAML file when one is given."""
    if path is None:
        return LabConfig()
    import yaml
    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    known = {f.name: f for f in fields(LabConfig)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    for key in ("auto_advance_delay", "fetch_timeout"):
        if key in data and not isinstance(data[key], (int, float)):
            raise ValueError(f"{key} must be a number")
    if "points_per_correct" in data and not isinstance(data["points_per_correct"], int):
        raise ValueError("points_per_correct must be an integer")
    if data.get("run_timeout_ms") is not None and not isinstance(data["run_timeout_ms"], int):
        raise ValueError("run_timeout_ms must be an integer or null")
    return LabConfig(**data)
