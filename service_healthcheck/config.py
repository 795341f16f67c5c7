# service_healthcheck/config.py
from .models import ServiceTarget

DEFAULT_TITLE = "AI Model Marketplace Services"

# seconds, measured per request from its own dispatch
DEFAULT_TIMEOUT = 2.0

START_HINT = "Start them manually or use start-demo.bat"

DEFAULT_TARGETS: tuple[ServiceTarget, ...] = (
    ServiceTarget(name="Fingerprinting Service", url="http://localhost:5000/health", port=5000),
    ServiceTarget(name="Backend API", url="http://localhost:3000/health", port=3000),
    ServiceTarget(name="Frontend", url="http://localhost:5173", port=5173),
)
