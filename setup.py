# setup.py
from setuptools import setup, find_packages

setup(
    name="iota",
    version="0.1.0",
    description="A small embeddable Scheme-style expression evaluator",
    packages=find_packages(include=["iota", "iota.*"]),
    package_data={"iota": ["prelude/*.scm"]},
    python_requires=">=3.10",
    extras_require={"test": ["pytest", "hypothesis>=6.85"]},
    zip_safe=False,
)
