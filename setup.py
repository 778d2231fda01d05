from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="farmtoken",
    version="0.1.0",
    description="Farm asset registry with ledger tokenisation of a safe collateral ceiling",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "fastapi>=0.100",
        "uvicorn>=0.23",
        "httpx>=0.24",
        "pydantic>=2",
        "pydantic-settings>=2.7",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "farmtoken = farmtoken.__main__:main",
        ],
    },
)
