# setup.py
from setuptools import setup, find_packages

setup(
    name="asa",
    version="0.1.0",
    description="Tree-walking interpreter for the asa scripting language",
    packages=find_packages(include=["asa", "asa.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["asa=asa.cli:main"],
    },
    zip_safe=False,
)
