"""
Sparse Distributed Memory.

This package provides an implementation of Kanerva's Sparse Distributed Memory,
a noise-tolerant associative memory over a high-dimensional binary address
space, built on PyTorch tensors.
"""

from sdm.memory import SparseDistributedMemory, MemoryLocation
from sdm.functional import new, write, read
from sdm.vector_ops import hamming_distance, hamming_distances, random_address
from sdm.random_source import RandomSource
from sdm.config import Config
from sdm.exceptions import SDMError, InvalidArgumentError, ShapeMismatchError

__all__ = [
    'SparseDistributedMemory',
    'MemoryLocation',
    'new',
    'write',
    'read',
    'hamming_distance',
    'hamming_distances',
    'random_address',
    'RandomSource',
    'Config',
    'SDMError',
    'InvalidArgumentError',
    'ShapeMismatchError'
]

__version__ = '0.1.0'
