"""
Setup script for the Creative Marketplace API
"""
from setuptools import setup, find_packages

setup(
    name="creative_marketplace",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10,<3.14",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "sqlalchemy>=2.0",
        "psycopg2-binary>=2.9",
        "alembic>=1.13",
        "pydantic>=2.5",
        "python-jose[cryptography]>=3.3",
        "httpx>=0.26",
        "litellm>=1.40",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
)
