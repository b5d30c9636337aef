# setup.py
from setuptools import find_packages, setup

setup(
    name="movie-catalog-client",
    version="0.0.1",
    packages=find_packages(include=["movie_catalog", "movie_catalog.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "structlog>=24.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "python-dotenv>=1.0",
        ],
    },
    entry_points={
        "console_scripts": ["movie-catalog=movie_catalog.cli:main"],
    },
)
