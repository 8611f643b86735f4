# setup.py
from setuptools import setup, find_packages

setup(
    name="shallot",
    version="0.1.0",
    description="A small Lisp with an open atom model, closures by copy and two-stage macros",
    packages=find_packages(include=["shallot", "shallot.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["shallot = shallot.repl:main"],
    },
    zip_safe=False,
)
