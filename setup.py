"""
Setup script for Sparse Distributed Memory.
"""

from setuptools import setup, find_packages

setup(
    name="sparse-distributed-memory",
    version="0.1.0",
    description="Sparse Distributed Memory over a binary address space",
    author="SDM Team",
    author_email="example@example.com",
    url="https://github.com/example/sparse-distributed-memory",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    install_requires=[
        "numpy>=1.20.0",
        "torch>=1.9.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    python_requires=">=3.8",
)
