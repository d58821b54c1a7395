"""
Random sources for initializing memory locations.

A store draws all of its initial entropy through an object exposing
``uniform(shape)``. Injecting a seeded source makes construction fully
reproducible, which the tests rely on.
"""

import torch
from typing import Optional, Sequence, Union


class RandomSource:
    """
    Uniform random source backed by a CPU ``torch.Generator``.
    
    Samples are float32 values in [0, 1). A source created with a seed always
    produces the same sequence of samples; a source created without one is
    seeded from system entropy.
    """
    
    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the random source.
        
        Args:
            seed: Optional integer seed. If None, the generator is seeded
                  non-deterministically.
        """
        self.generator = torch.Generator(device="cpu")
        
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.seed = int(seed)
            self.generator.manual_seed(self.seed)
            
    def uniform(self, shape: Union[int, Sequence[int]]) -> torch.Tensor:
        """
        Draw independent uniform samples in [0, 1).
        
        Args:
            shape: Shape of the returned tensor
            
        Returns:
            A float32 tensor of the requested shape
        """
        if isinstance(shape, int):
            shape = (shape,)
        return torch.rand(tuple(shape), generator=self.generator, dtype=torch.float32)
    
    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"
