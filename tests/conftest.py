"""Configuração do pytest para o projeto Slack Relay."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_cors_settings,
    get_server_settings,
    get_slack_settings,
)

_CACHED_SETTINGS = (
    get_base_settings,
    get_cors_settings,
    get_server_settings,
    get_slack_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são lru_cache: cada teste lê o ambiente do zero."""
    for getter in _CACHED_SETTINGS:
        getter.cache_clear()
    yield
    for getter in _CACHED_SETTINGS:
        getter.cache_clear()
