"""
Pytest configuration and fixtures
"""
import sys
import random
from pathlib import Path

import pytest

# Make the project root importable when running from a checkout
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from eightball import EightBall
from history import History


@pytest.fixture
def ball():
    """Eight ball with a seeded random source"""
    return EightBall(rng=random.Random(8))


@pytest.fixture
def client(monkeypatch):
    """Flask test client with fresh history and a seeded ball"""
    import app as app_module

    monkeypatch.setattr(app_module, 'ball', EightBall(rng=random.Random(42)))
    monkeypatch.setattr(app_module, 'history', History())
    app_module.app.config['TESTING'] = True
    return app_module.app.test_client()
