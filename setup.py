from setuptools import setup, find_packages


setup(
    name="uuidv47",
    version="0.1",
    packages=find_packages(include=["uuidv47", "uuidv47.*"]),
    description="Store sortable UUIDv7 internally, emit UUIDv4-looking facades via a SipHash-masked timestamp.",
    author="vercingetorx",
    install_requires=[
        "pycryptodomex>=3.23.0",
        "argon2-cffi>=23.1.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "uuidv47=uuidv47.cli:main",
        ]
    },
)
