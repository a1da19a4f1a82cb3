from pathlib import Path

from setuptools import find_packages, setup

NAME = "invoicedoc"
README = Path("SPEC_FULL.md")

setup(
    name=NAME,
    version="0.1.0",
    description="Invoice totals engine and print-ready invoice document renderer",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src", include=["invoicedoc", "invoicedoc.*"]),
    python_requires=">=3.10",
    install_requires=[
        "openpyxl>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "lxml>=4.9",
        ],
    },
    entry_points={
        "console_scripts": [
            "invoicedoc=invoicedoc.cli:main",
        ],
    },
)
