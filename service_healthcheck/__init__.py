# service_healthcheck/__init__.py

from .checker import HealthChecker, check_services
from .models import CheckOutcome, NotRunning, Running, ServiceTarget, TimedOut

__all__ = [
    "HealthChecker",
    "check_services",
    "CheckOutcome",
    "NotRunning",
    "Running",
    "ServiceTarget",
    "TimedOut",
]
