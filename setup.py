""" btcmsg build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import btcmsg

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=btcmsg.name,
    version=btcmsg.__version__,
    license=btcmsg.__license__,
    author=btcmsg.__author__,
    author_email=btcmsg.__author_email__,
    description="Verification of Bitcoin signed messages",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"btcmsg": ["_data/*.json"]},
    # install_requires=[],
    extras_require={"test": ["pytest"]},
    keywords=(
        "bitcoin cryptography elliptic-curves ecdsa secp256k1 "
        "public-key-recovery base58 p2pkh message-signing"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
