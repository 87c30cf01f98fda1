import os
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# Keep test runs from writing log files
TEST_CONFIG = PROJECT_ROOT / "tests" / "data" / "fuzzy_date_test.yml"
os.environ.setdefault("FUZZY_DATE_CONFIG", str(TEST_CONFIG))


@pytest.fixture
def sample_dates_path() -> Path:
    return PROJECT_ROOT / "tests" / "data" / "sample_dates.txt"
