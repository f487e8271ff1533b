from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="cinelog",
    version="0.1.0",
    # Repo convention: backend code lives under `backend/`.
    # Layers install as top-level imports (`import domain`, `import server`, ...).
    package_dir={"": "backend"},
    packages=find_packages(where="backend"),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.6,<3",
        "aiohttp>=3.9",
        "python-dotenv>=1.0",
    ],
    extras_require={
        # Test runner + FastAPI TestClient transport.
        "test": [
            "pytest>=7.4",
            "httpx>=0.26",
        ],
    },
)
