from setuptools import find_packages, setup

setup(
    name="nx-bench",
    version="0.1.0",
    description="Shortest-path and MST benchmarks over adjacency-list and incidence-matrix graphs",
    packages=find_packages(include=["nx_bench", "nx_bench.*"]),
    python_requires=">=3.9",
    install_requires=[
        "networkx>=3.2",
        "numpy>=1.21",
        "scipy>=1.11",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": ["nx-bench = nx_bench.cli:main"],
    },
)
