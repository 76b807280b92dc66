"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from app.core.config import DEFAULT_SEED_NAMES, Settings  # noqa: E402
from app.main import create_app  # noqa: E402
from app.services.transcript_store import TranscriptStore  # noqa: E402


@pytest.fixture
def settings():
    """Settings isolated from any local .env file"""
    return Settings(_env_file=None, seed_on_startup=True, seed_names=list(DEFAULT_SEED_NAMES))


@pytest.fixture
def store():
    """Empty transcript store"""
    return TranscriptStore()


@pytest.fixture
def seeded_store(store):
    """Store loaded with the default seed: Sardor=1, Jasur=2, Jasur=3, Nigora=4"""
    store.reset(DEFAULT_SEED_NAMES)
    return store


@pytest.fixture
def client(settings):
    """Test client; entering the context runs the startup seed"""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
