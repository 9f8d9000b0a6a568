"""Setup script for quick installation."""

from setuptools import find_packages, setup

setup(
    name="status-page",
    version="0.1.0",
    description="Pluggable health-check aggregator for service status endpoints",
    author="Status Page Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "requests>=2.31.0",
        "sqlalchemy>=2.0.0",
        "redis>=5.0.0",
        "click>=8.1.0",
        "rich>=13.5.0",
        "pydantic>=2.3.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "celery": ["celery>=5.3.0"],
        "test": [
            "pytest>=7.4.0",
            "celery>=5.3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "status-page=status_page.cli.main:main",
        ],
    },
)
