"""
Unit tests for the procedural interface.
"""

import unittest
import torch
import sys
import os

# Add parent directory to path to import sdm package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import sdm
from sdm.functional import new, write, read, hamming_distance
from sdm.random_source import RandomSource


class TestFunctional(unittest.TestCase):
    """Test cases for new, write, read and hamming_distance."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.random_source = RandomSource(seed=21)
        
    def test_new_defaults(self):
        """Test that new builds a store with the default factor."""
        for dimensions, num_locations in [(1, 1), (7, 3), (100, 250)]:
            store = new(dimensions, num_locations, random_source=self.random_source)
            
            self.assertEqual(len(store.locations), num_locations)
            self.assertEqual(store.critical_distance, dimensions * 0.3)
            for location in store.locations:
                self.assertEqual(location.address.shape, (dimensions,))
                self.assertEqual(location.data.shape, (dimensions,))
                
    def test_new_invalid(self):
        """Test that new rejects non-positive sizes."""
        with self.assertRaises(sdm.InvalidArgumentError):
            new(0, 10)
            
        with self.assertRaises(sdm.InvalidArgumentError):
            new(10, 0)
            
    def test_write_read(self):
        """Test the functional update style."""
        store = new(100, 500, critical_distance_factor=0.4, random_source=self.random_source)
        address = store.locations[0].address
        data = torch.ones(100)
        initial = store.contents[0]
        
        store = write(store, address, data)
        retrieved, count = read(store, address)
        
        self.assertGreater(count, 0)
        self.assertEqual(retrieved.shape, (100,))
        self.assertTrue(torch.allclose(store.contents[0], initial + data))
        
    def test_hamming_distance(self):
        """Test hamming_distance exported from the package."""
        self.assertEqual(hamming_distance([1, 0, 1, 0, 1], [1, 1, 0, 0, 1]), 2)
        self.assertEqual(sdm.hamming_distance([1, 0, 1], [1, 0, 1]), 0)
        
        with self.assertRaises(sdm.ShapeMismatchError):
            sdm.hamming_distance([1, 0, 1], [1, 0])
            
    def test_package_exports(self):
        """Test the package-level API."""
        store = sdm.new(16, 8, random_source=RandomSource(seed=0))
        
        self.assertIsInstance(store, sdm.SparseDistributedMemory)
        self.assertEqual(sdm.read(store, store.locations[0].address)[1] >= 1, True)
        self.assertEqual(sdm.__version__, '0.1.0')


if __name__ == "__main__":
    unittest.main()
