"""Setup for multikey_fm."""

from pathlib import Path

from setuptools import find_packages, setup


def read_readme():
    """Read README file."""
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        return readme_path.read_text(encoding="utf-8")
    return "Multikey <-> JWK conversion for ECDSA P-256/P-384 and Ed25519"


setup(
    name="multikey_fm",
    version="0.1.0",
    description="Multikey <-> JWK conversion for ECDSA P-256/P-384 and Ed25519 keys",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["multikey_fm", "multikey_fm.*"]),
    python_requires=">=3.9",
    install_requires=[
        "cryptography>=41.0.0",
        "base58>=2.1.0",
        "multiformats>=0.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Security :: Cryptography",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="multikey multibase jwk did verifiable-credentials ecdsa eddsa ssi",
)
