from setuptools import setup, find_packages

setup(
    name="string_search",
    version="0.1.0",
    description="Exact substring search with naive, KMP, Rabin-Karp and Horspool implementations",
    packages=find_packages(exclude=["tests", "tests.*", "benchmarks", "benchmarks.*"]),
    package_data={
        "string_search.config": ["search.conf"],
    },
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "benchmark": [
            "pandas>=1.3",
            "matplotlib>=3.4",
            "psutil>=5.8",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "string-search=string_search.cli:run",
        ],
    },
)
