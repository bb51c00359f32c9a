from setuptools import setup, find_packages

setup(
    name="stcalc",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0.0",
        "pytz>=2021.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "stcalc=stcalc.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
