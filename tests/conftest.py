"""
Pytest Configuration and Fixtures
=================================

Fixtures:
    - clock: ManualClock driving breathing timers
    - narrator: RecordingNarrator
    - storage_config: StorageConfig in a temporary directory
    - data_service: DataService loaded from an empty temporary directory
    - bot: RecordingBot
"""

import pytest

from config import StorageConfig
from services.data_service import DataService

from tests.mocks import ManualClock, RecordingBot, RecordingNarrator


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def narrator():
    return RecordingNarrator()


@pytest.fixture
def storage_config(tmp_path):
    return StorageConfig(
        path=tmp_path / "data" / "mindful_data.json",
        backup_dir=tmp_path / "backups",
        stats_history_limit=365,
        default_photo_url="https://example.com/gizele.png"
    )


@pytest.fixture
def data_service(storage_config):
    return DataService(storage_config).load()


@pytest.fixture
def bot():
    return RecordingBot()
