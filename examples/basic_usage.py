"""
Basic usage example for Sparse Distributed Memory.

This example stores a few random patterns, then recalls each one from a noisy
copy of its address and reports how closely the recalled data matches.
"""

import logging
import os
import sys

import torch

# Add parent directory to path to import sdm package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sdm import Config, RandomSource, SparseDistributedMemory, hamming_distance, random_address


def flip_bits(address: torch.Tensor, num_bits: int, random_source: RandomSource) -> torch.Tensor:
    """Return a copy of the address with ``num_bits`` random positions flipped."""
    order = torch.argsort(random_source.uniform(address.shape[0]))
    noisy = address.clone()
    noisy[order[:num_bits]] = 1 - noisy[order[:num_bits]]
    return noisy


def main():
    """Run the basic usage example."""
    logging.basicConfig(level=logging.DEBUG)
    print("Sparse Distributed Memory Basic Usage Example")
    
    config = Config({
        "memory": {
            "dimensions": 256,
            "num_locations": 2000,
            "critical_distance_factor": 0.4,
        },
        "random": {
            "seed": 42,
        },
    })
    print(config)
    
    memory = SparseDistributedMemory.from_config(config)
    print(memory)
    
    random_source = RandomSource(seed=7)
    dimensions = config.get("memory", "dimensions")
    
    patterns = []
    for _ in range(5):
        address = random_address(dimensions, random_source)
        data = 2 * random_address(dimensions, random_source).float() - 1
        memory.write(address, data)
        patterns.append((address, data))
    
    print("\n=== Recall from noisy addresses ===")
    for i, (address, data) in enumerate(patterns):
        noisy = flip_bits(address, 20, random_source)
        recalled, count = memory.read(noisy)
        
        similarity = torch.nn.functional.cosine_similarity(recalled, data, dim=0).item() if count else 0.0
        print(f"Pattern {i}: noise={hamming_distance(address, noisy)} bits, "
              f"activated={count}, cosine similarity={similarity:.3f}")


if __name__ == "__main__":
    main()
