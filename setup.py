from setuptools import setup

setup(
    name="dotgraph",
    version="0.1.0",
    description="Generic directed graph with Graphviz DOT export",
    license="MIT",
    packages=["dotgraph"],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
)
