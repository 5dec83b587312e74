from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _long_description() -> str:
    readme = ROOT / "README.md"
    if not readme.exists():
        return ""
    return readme.read_text(encoding="utf-8")


setup(
    name="urlconfig",
    version="0.1.0",
    description="Build configured values from URLs through a thread-safe scheme registry.",
    long_description=_long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.24",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
)
