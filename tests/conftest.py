import sys
from pathlib import Path

import pytest

# Ensure `import netguard` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _isolate_core_config(monkeypatch) -> None:
    from netguard.core.config import get_config

    monkeypatch.delenv("NETGUARD_DEBUG", raising=False)
    monkeypatch.delenv("NETGUARD_LOG_VERBOSITY", raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
