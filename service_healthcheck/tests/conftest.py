# service_healthcheck/tests/conftest.py
import sys
from pathlib import Path

import pytest

# ---------- Ensure project root on sys.path ----------
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from service_healthcheck.models import ServiceTarget  # noqa: E402


@pytest.fixture
def targets():
    return (
        ServiceTarget(name="Alpha", url="http://localhost:7001/health", port=7001),
        ServiceTarget(name="Beta", url="http://localhost:7002/health", port=7002),
        ServiceTarget(name="Gamma", url="http://localhost:7003", port=7003),
    )


@pytest.fixture
def lines():
    """Collects emitted report lines instead of printing them."""
    return []
