# src/fuzzy_date/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union


# This file lives at:
#   <project_root>/src/fuzzy_date/utils/pathing.py
#
# Path(__file__).resolve().parents gives:
#   [0] .../src/fuzzy_date/utils
#   [1] .../src/fuzzy_date
#   [2] .../src
#   [3] .../ (project root)
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is the directory that contains src/, tests/ and config/.
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("config/fuzzy_date.yml")
        resolve_project_path(Path("logs") / "fuzzy_date.log")
    """
    path = Path(relative)
    if path.is_absolute():
        return path
    return project_root() / path


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Example:
        tests_data_path("sample_dates.txt")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))
