from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_store():
    """ストアのモックフィクスチャ"""
    return MagicMock()
