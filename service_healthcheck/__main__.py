# service_healthcheck/__main__.py
from service_healthcheck.cli.healthcheck import main

main()
