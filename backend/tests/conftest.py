import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from scorekeeper.services.session import GameSession  # noqa: E402


@pytest.fixture
def session():
    return GameSession()
