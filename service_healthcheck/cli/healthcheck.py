# cli/healthcheck.py
import sys

from service_healthcheck.checker import check_services
from service_healthcheck.config import DEFAULT_TARGETS
from service_healthcheck.utils.logging_setup import setup_logging


def main():
    setup_logging()
    check_services(DEFAULT_TARGETS)
    # report-only: unreachable services never change the exit status
    sys.exit(0)


if __name__ == "__main__":
    main()
