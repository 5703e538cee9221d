from setuptools import setup, find_packages

setup(
    name="bogusdata",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["cryptography"],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "bogusdata = bogusdata.cli:main",
        ]
    },
)
