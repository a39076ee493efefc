from setuptools import setup, find_packages

setup(
    name="condensed-audio-maker",
    version="0.1.0",
    description="Condense episodes to their spoken dialogue using subtitle timings",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydub>=0.25.1",
        "librosa>=0.10.0",
        "numpy>=1.24.0",
        "pyyaml>=6.0",
        "pysubs2>=1.6.0",
        "audioop-lts; python_version>='3.13'",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "condenser=condenser.cli:main",
        ],
    },
)
