"""Procedural interface to the SDM store."""

import torch
from typing import Tuple, Union

from sdm.memory import DEFAULT_CRITICAL_DISTANCE_FACTOR, SparseDistributedMemory
from sdm.vector_ops import VectorLike, hamming_distance

__all__ = ["new", "write", "read", "hamming_distance"]


def new(dimensions: int,
        num_locations: int,
        critical_distance_factor: float = DEFAULT_CRITICAL_DISTANCE_FACTOR,
        random_source=None,
        device: Union[str, torch.device] = "cpu") -> SparseDistributedMemory:
    """
    Create a store with randomly generated memory locations.

    Args:
        dimensions: Length of addresses and data vectors
        num_locations: Number of memory locations
        critical_distance_factor: Fraction of ``dimensions`` used as the activation radius
        random_source: Object exposing ``uniform(shape)``
        device: Device to store tensors on

    Returns:
        A new store
    """
    return SparseDistributedMemory(
        dimensions,
        num_locations,
        critical_distance_factor=critical_distance_factor,
        random_source=random_source,
        device=device,
    )


def write(store: SparseDistributedMemory, address: VectorLike, data: VectorLike) -> SparseDistributedMemory:
    """
    Add ``data`` to every location of ``store`` near ``address``.

    The store is updated in place and returned.
    """
    return store.write(address, data)


def read(store: SparseDistributedMemory, address: VectorLike) -> Tuple[torch.Tensor, int]:
    """Return the mean data near ``address`` and the number of activated locations."""
    return store.read(address)
