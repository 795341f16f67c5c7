from setuptools import find_packages, setup

setup(
    name="service_healthcheck",
    version="1.0.0",
    packages=find_packages(exclude=("service_healthcheck.tests", "service_healthcheck.tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "httpx~=0.28",
        "pydantic~=2.11",
    ],
    extras_require={
        # Local dev & CI tools
        "dev": [
            "pytest~=8.4",
            "pytest-cov~=5.0",
            "fastapi~=0.116",
            "ruff~=0.13",
            "mypy~=1.11",
        ],
    },
    entry_points={
        "console_scripts": [
            "service-healthcheck=service_healthcheck.cli.healthcheck:main",
        ],
    },
    include_package_data=True,
)
