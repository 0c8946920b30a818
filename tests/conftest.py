import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture(autouse=True)
def reset_config():
    """Commands may install a config override; drop it after each test."""
    from family_tree.config import set_config

    yield
    set_config(None)


@pytest.fixture
def restore_logging():
    """Rebuild logging from the project config once a test has replaced it."""
    from family_tree.config import set_config
    from family_tree.logging import configure_logging

    yield
    set_config(None)
    configure_logging()
