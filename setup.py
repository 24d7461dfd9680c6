"""Package setup for gs308ep."""

from setuptools import setup, find_packages

setup(
    name="gs308ep",
    version="0.5.0",
    description="Per-port PoE control and telemetry for the Netgear GS308EP web console",
    packages=find_packages(include=["gs308ep", "gs308ep.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
    ],
    extras_require={
        "ui": [
            "tqdm>=4.66.0",
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "gs308ep=gs308ep.cli:main",
        ],
    },
)
