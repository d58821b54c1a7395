"""
Vector operations for Sparse Distributed Memory.

This module provides the Hamming distance used to activate memory locations,
plus helpers that coerce and validate the address and data vectors passed to
the store. Inputs may be torch tensors, numpy arrays or plain sequences.
"""

import numpy as np
import torch
from typing import Sequence, Union

from sdm.exceptions import InvalidArgumentError, ShapeMismatchError

VectorLike = Union[torch.Tensor, np.ndarray, Sequence[float]]


def to_tensor(vector: VectorLike, device: Union[str, torch.device, None] = None) -> torch.Tensor:
    """
    Convert a vector-like input to a torch tensor.
    
    Args:
        vector: Tensor, numpy array or sequence of numbers
        device: Device to place the tensor on (defaults to the input's device)
    
    Returns:
        A tensor holding the same values

    Raises:
        ShapeMismatchError: If a nested sequence is ragged
    """
    if isinstance(vector, torch.Tensor):
        return vector if device is None else vector.to(device)

    try:
        array = np.asarray(vector)
    except ValueError as e:
        raise ShapeMismatchError(f"Vector has an inhomogeneous shape: {e}") from e

    if array.dtype == object:
        raise ShapeMismatchError("Vector has an inhomogeneous shape")

    # torch can't wrap arrays with negative strides, e.g. reversed views
    if not array.flags.c_contiguous:
        array = np.ascontiguousarray(array)

    return torch.as_tensor(array, device=device)


def hamming_distance(a: VectorLike, b: VectorLike) -> int:
    """
    Count the positions at which two equal-shaped vectors differ.
    
    Args:
        a: First vector
        b: Second vector
    
    Returns:
        The number of differing positions as a non-negative integer
    
    Raises:
        ShapeMismatchError: If the vectors have different shapes
    """
    a = to_tensor(a)
    b = to_tensor(b, device=a.device)
    
    if a.shape != b.shape:
        raise ShapeMismatchError(
            f"Cannot compare vectors of shape {tuple(a.shape)} and {tuple(b.shape)}"
        )
        
    return int(torch.count_nonzero(a != b).item())


def hamming_distances(addresses: torch.Tensor, address: VectorLike) -> torch.Tensor:
    """
    Compute the Hamming distance from one address to every row of an address matrix.
    
    Args:
        addresses: Tensor of shape (num_locations, dimensions)
        address: Query address of shape (dimensions,)
    
    Returns:
        An int64 tensor of shape (num_locations,) with one distance per row
    
    Raises:
        ShapeMismatchError: If the address length differs from the matrix width
    """
    address = to_tensor(address, device=addresses.device)
    
    if addresses.dim() != 2 or address.shape != addresses.shape[1:]:
        raise ShapeMismatchError(
            f"Address shape {tuple(address.shape)} doesn't match "
            f"address matrix of shape {tuple(addresses.shape)}"
        )
    
    return torch.count_nonzero(addresses != address, dim=1)


def as_address(address: VectorLike, dimensions: int, device: Union[str, torch.device] = "cpu") -> torch.Tensor:
    """
    Validate a binary address and return it as a uint8 tensor.
    
    Args:
        address: Address vector containing only 0s and 1s
        dimensions: Expected length of the address
        device: Device to place the result on
    
    Returns:
        A new uint8 tensor of shape (dimensions,)
    
    Raises:
        ShapeMismatchError: If the address shape isn't (dimensions,)
        InvalidArgumentError: If the address contains values other than 0 and 1
    """
    address = to_tensor(address, device=device)
    
    if address.shape != (dimensions,):
        raise ShapeMismatchError(
            f"address shape {tuple(address.shape)} doesn't match expected ({dimensions},)"
        )
    
    if not torch.all((address == 0) | (address == 1)):
        raise InvalidArgumentError("address must contain only 0s and 1s")
        
    return address.to(torch.uint8).clone()


def as_data(data: VectorLike, dimensions: int, device: Union[str, torch.device] = "cpu") -> torch.Tensor:
    """
    Validate a data vector and return it as a float32 tensor.
    
    Args:
        data: Real-valued data vector
        dimensions: Expected length of the vector
        device: Device to place the result on
    
    Returns:
        A new float32 tensor of shape (dimensions,)
    
    Raises:
        ShapeMismatchError: If the data shape isn't (dimensions,)
    """
    data = to_tensor(data, device=device)
    
    if data.shape != (dimensions,):
        raise ShapeMismatchError(
            f"data shape {tuple(data.shape)} doesn't match expected ({dimensions},)"
        )
        
    return data.to(torch.float32).clone()


def random_address(dimensions: int, random_source) -> torch.Tensor:
    """
    Draw a random binary address the same way memory locations draw theirs.
    
    Args:
        dimensions: Length of the address
        random_source: Object exposing ``uniform(shape)``
    
    Returns:
        A uint8 tensor of shape (dimensions,)
    """
    return (random_source.uniform((dimensions,)) > 0.5).to(torch.uint8)
