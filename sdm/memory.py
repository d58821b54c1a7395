"""
Sparse Distributed Memory store.

This module implements Kanerva's Sparse Distributed Memory: a fixed set of
memory locations, each with a random binary address and a real-valued data
accumulator. A write adds a data vector to every location whose address lies
within the critical Hamming distance of the write address; a read averages
the data of every location within that distance of the read address.

Locations are held as two dense tensors (an address matrix and a data
matrix) so every read and write is a single vectorized scan over all
locations.
"""

import copy
import logging
import math
import numbers
import torch
from typing import List, NamedTuple, Tuple, Union

from sdm.exceptions import InvalidArgumentError
from sdm.random_source import RandomSource
from sdm.vector_ops import VectorLike, as_address, as_data, hamming_distances

logger = logging.getLogger(__name__)

DEFAULT_CRITICAL_DISTANCE_FACTOR = 0.3


class MemoryLocation(NamedTuple):
    """Snapshot of a single memory location."""
    address: torch.Tensor
    data: torch.Tensor


def _check_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return int(value)


class SparseDistributedMemory:
    """
    Sparse Distributed Memory over a binary address space.
    
    The store mutates in place: ``write`` updates the caller's store and
    returns it, so ``memory = memory.write(address, data)`` reads the same as
    a functional update. Use ``copy`` to keep an independent earlier state.
    The address matrix is never modified after construction.
    """
    
    def __init__(self,
                 dimensions: int,
                 num_locations: int,
                 critical_distance_factor: float = DEFAULT_CRITICAL_DISTANCE_FACTOR,
                 random_source=None,
                 device: Union[str, torch.device] = "cpu") -> None:
        """
        Initialize the store with randomly generated memory locations.
        
        Args:
            dimensions: Length of addresses and data vectors
            num_locations: Number of memory locations to create
            critical_distance_factor: Fraction of ``dimensions`` used as the
                                      activation radius
            random_source: Object exposing ``uniform(shape)``; defaults to an
                           unseeded ``RandomSource``
            device: Device to store tensors on ("cpu" or "cuda")
        
        Raises:
            InvalidArgumentError: If a size is not a positive integer or the
                                  factor is negative or not finite
        """
        self.dimensions = _check_positive_int(dimensions, "dimensions")
        self.num_locations = _check_positive_int(num_locations, "num_locations")
        
        if (isinstance(critical_distance_factor, bool)
                or not isinstance(critical_distance_factor, numbers.Real)
                or not math.isfinite(critical_distance_factor)
                or critical_distance_factor < 0):
            raise InvalidArgumentError(
                f"critical_distance_factor must be a non-negative number, got {critical_distance_factor!r}"
            )
        
        self.critical_distance_factor = float(critical_distance_factor)
        self.critical_distance = self.dimensions * self.critical_distance_factor
        self.device = device
        self.random_source = random_source if random_source is not None else RandomSource()
        
        self._init_locations()
        
        logger.debug(
            "Created SDM with %d locations of %d dimensions (critical distance %.2f)",
            self.num_locations, self.dimensions, self.critical_distance
        )
        
    def _init_locations(self) -> None:
        """Draw the address and initial data of every location."""
        # [:, 0] thresholds into addresses, [:, 1] is the initial data
        samples = self.random_source.uniform((self.num_locations, 2, self.dimensions))
        samples = samples.to(self.device)

        # Threshold before any cast so samples just above 0.5 keep their bit
        self.address_matrix = (samples[:, 0] > 0.5).to(torch.uint8).contiguous()
        self.data_matrix = samples[:, 1].to(torch.float32).clone().contiguous()
    
    @classmethod
    def from_config(cls, config, random_source=None) -> "SparseDistributedMemory":
        """
        Create a store from a configuration.
        
        Args:
            config: ``Config`` object with "memory", "random" and "system" sections
            random_source: Optional random source; defaults to a ``RandomSource``
                           seeded from the "random" section
        
        Returns:
            A new store
        """
        memory = config.get("memory")
        
        if random_source is None:
            random_source = RandomSource(config.get("random", "seed"))
            
        return cls(
            dimensions=memory["dimensions"],
            num_locations=memory["num_locations"],
            critical_distance_factor=memory["critical_distance_factor"],
            random_source=random_source,
            device=config.get("system", "device"),
        )
    
    def distances(self, address: VectorLike) -> torch.Tensor:
        """
        Compute the Hamming distance from an address to every location.
        
        Args:
            address: Binary address of shape (dimensions,)
        
        Returns:
            An int64 tensor of shape (num_locations,)
        """
        address = as_address(address, self.dimensions, self.device)
        return hamming_distances(self.address_matrix, address)
    
    def _activation_mask(self, address: torch.Tensor) -> torch.Tensor:
        return hamming_distances(self.address_matrix, address) <= self.critical_distance
    
    def activated(self, address: VectorLike) -> torch.Tensor:
        """
        Find the locations activated by an address.
        
        Args:
            address: Binary address of shape (dimensions,)
        
        Returns:
            Tensor of indices of locations within the critical distance
        """
        address = as_address(address, self.dimensions, self.device)
        return torch.nonzero(self._activation_mask(address), as_tuple=True)[0]
    
    def write(self, address: VectorLike, data: VectorLike) -> "SparseDistributedMemory":
        """
        Add a data vector to every location near an address.
        
        Args:
            address: Binary address of shape (dimensions,)
            data: Data vector of shape (dimensions,)
        
        Returns:
            This store, updated in place
        
        Raises:
            ShapeMismatchError: If either vector has the wrong shape
            InvalidArgumentError: If the address isn't binary
        """
        address = as_address(address, self.dimensions, self.device)
        data = as_data(data, self.dimensions, self.device)
        
        mask = self._activation_mask(address)
        self.data_matrix[mask] += data
        
        logger.debug("Write activated %d of %d locations", int(mask.sum().item()), self.num_locations)
        return self
    
    def read(self, address: VectorLike) -> Tuple[torch.Tensor, int]:
        """
        Reconstruct the data stored near an address.
        
        Args:
            address: Binary address of shape (dimensions,)
        
        Returns:
            Tuple of (mean data vector of the activated locations, activation
            count). With no activated locations the vector is all zeros and
            the count is 0.
        
        Raises:
            ShapeMismatchError: If the address has the wrong shape
            InvalidArgumentError: If the address isn't binary
        """
        address = as_address(address, self.dimensions, self.device)
        
        mask = self._activation_mask(address)
        count = int(mask.sum().item())
        
        logger.debug("Read activated %d of %d locations", count, self.num_locations)
        
        if count == 0:
            return torch.zeros(self.dimensions, dtype=torch.float32, device=self.device), 0
        
        total = self.data_matrix[mask].sum(dim=0)
        return total / count, count
    
    @property
    def locations(self) -> List[MemoryLocation]:
        """Snapshots of every memory location, in location order."""
        return [
            MemoryLocation(address.clone(), data.clone())
            for address, data in zip(self.address_matrix, self.data_matrix)
        ]
    
    @property
    def addresses(self) -> torch.Tensor:
        """Copy of the address matrix, shape (num_locations, dimensions)."""
        return self.address_matrix.clone()
    
    @property
    def contents(self) -> torch.Tensor:
        """Copy of the data matrix, shape (num_locations, dimensions)."""
        return self.data_matrix.clone()
    
    def copy(self) -> "SparseDistributedMemory":
        """Return an independent copy of the store."""
        other = copy.copy(self)
        other.address_matrix = self.address_matrix.clone()
        other.data_matrix = self.data_matrix.clone()
        return other
    
    def __len__(self) -> int:
        return self.num_locations
    
    def __repr__(self) -> str:
        return (
            f"SparseDistributedMemory(dimensions={self.dimensions}, "
            f"num_locations={self.num_locations}, "
            f"critical_distance={self.critical_distance:g}, device={self.device!r})"
        )
