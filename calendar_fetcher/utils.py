import json
import yaml
from pathlib import Path
from typing import List
from .models import HolidayRecord, RenderProfiles, RenderProfile

CONFIG_DIR = Path("config")


def load_render_profiles(path: Path = CONFIG_DIR / "render_profiles.yaml") -> RenderProfiles:
    """Loads render profiles from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Render profiles file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return RenderProfiles(**data)


def get_profile(name: str = "default", path: Path = CONFIG_DIR / "render_profiles.yaml") -> RenderProfile:
    """Helper to get a specific render profile."""
    profiles = load_render_profiles(path)
    if name not in profiles.profiles:
        raise ValueError(f"Profile '{name}' not found. Available: {list(profiles.profiles.keys())}")
    return profiles.profiles[name]


def load_holidays_file(path: Path) -> List[HolidayRecord]:
    """Loads a holiday list saved as JSON (e.g. by `run.py fetch --json`)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Holidays file not found at {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of holidays in {path}")
    return [HolidayRecord.model_validate(h) for h in data]
