"""Settings file loading with repo-relative path resolution."""

from pathlib import Path

import yaml


PROJECT_DIR = Path(__file__).resolve().parents[1]

DEFAULT_SETTINGS = {
    "search_depth": 4,
    "red_player": "manual",
    "blue_player": "ai",
    "gui": False,
    "seed": None,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Battle_Ataxx_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path="config/settings.yaml"):
    """Load settings YAML over the defaults; a missing file leaves the defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return settings
    settings.update(data)
    return settings
