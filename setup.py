from setuptools import find_packages, setup

setup(
    name="keyedcollection",
    version="0.1",
    description="dictionary-like collection with key generation and functional helpers",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.9",
    install_requires = [
        "pandas",
    ],
    extras_require = {
        "test": ["pytest"],
    },
)
