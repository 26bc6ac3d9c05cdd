"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def loguru_messages() -> list[str]:
    """Capture loguru output as "LEVEL | message" strings.

    loguru does not propagate to the stdlib logging tree, so pytest's caplog
    never sees it; a list sink is attached for the duration of the test.
    """
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
