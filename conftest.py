# Make the brainrunner package importable from a plain checkout.
import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def detach_log_handlers():
    # configure_logging binds a handler to whatever sys.stderr was at the time
    yield
    logger = logging.getLogger("brainrunner")
    logger.handlers[:] = []
    logger.setLevel(logging.NOTSET)
