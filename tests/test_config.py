"""
Unit tests for configuration management.
"""

import unittest
import tempfile
import sys
import os

# Add parent directory to path to import sdm package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sdm.config import Config
from sdm.exceptions import InvalidArgumentError


class TestConfig(unittest.TestCase):
    """Test cases for Config."""
    
    def test_defaults(self):
        """Test default configuration values."""
        config = Config()
        
        self.assertEqual(config.get("memory", "dimensions"), 1000)
        self.assertEqual(config.get("memory", "num_locations"), 10000)
        self.assertEqual(config.get("memory", "critical_distance_factor"), 0.3)
        self.assertIsNone(config.get("random", "seed"))
        self.assertEqual(config.get("system", "device"), "cpu")
        
    def test_defaults_not_shared(self):
        """Test that instances don't share the default dictionary."""
        config = Config()
        config.set("memory", "dimensions", 64)
        
        self.assertEqual(Config.DEFAULT_CONFIG["memory"]["dimensions"], 1000)
        self.assertEqual(Config().get("memory", "dimensions"), 1000)
        
    def test_update(self):
        """Test partial updates keep other defaults."""
        config = Config({"memory": {"dimensions": 256}, "random": {"seed": 9}})
        
        self.assertEqual(config.get("memory", "dimensions"), 256)
        self.assertEqual(config.get("memory", "num_locations"), 10000)
        self.assertEqual(config.get("random", "seed"), 9)
        
    def test_unknown_keys(self):
        """Test that unknown sections and parameters are rejected."""
        with self.assertRaises(ValueError):
            Config({"storage": {"path": "/tmp"}})
            
        with self.assertRaises(ValueError):
            Config({"memory": {"radius": 3}})
            
        with self.assertRaises(ValueError):
            Config({"memory": 5})
            
        with self.assertRaises(ValueError):
            Config().get("storage")
            
        with self.assertRaises(ValueError):
            Config().get("memory", "radius")
            
    def test_invalid_values(self):
        """Test validation of parameter values."""
        invalid = [
            {"memory": {"dimensions": 0}},
            {"memory": {"dimensions": 10.0}},
            {"memory": {"num_locations": -1}},
            {"memory": {"critical_distance_factor": -0.2}},
            {"memory": {"critical_distance_factor": "0.3"}},
            {"random": {"seed": 1.5}},
            {"system": {"device": "tpu"}},
        ]
        
        for config_dict in invalid:
            with self.assertRaises(InvalidArgumentError):
                Config(config_dict)
                
    def test_set_reverts_invalid_value(self):
        """Test that a rejected set leaves the previous value in place."""
        config = Config()
        
        with self.assertRaises(InvalidArgumentError):
            config.set("memory", "dimensions", -5)
            
        self.assertEqual(config.get("memory", "dimensions"), 1000)
        
    def test_save_load(self):
        """Test saving and loading configuration files."""
        config = Config({"memory": {"dimensions": 128, "critical_distance_factor": 0.45}})
        
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "config.json")
            config.save(path)
            loaded = Config.load(path)
            
        self.assertEqual(loaded.to_dict(), config.to_dict())
        
    def test_load_with_overrides(self):
        """Test that overrides take precedence over the file's values."""
        config = Config({"memory": {"dimensions": 128}, "random": {"seed": 1}})

        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "nested", "config.json")
            config.save(path)
            loaded = Config.load(path, overrides={"random": {"seed": 2}})

        self.assertEqual(loaded.get("memory", "dimensions"), 128)
        self.assertEqual(loaded.get("random", "seed"), 2)

    def test_get_section_is_a_copy(self):
        """Test that editing a returned section doesn't change the config."""
        config = Config()
        section = config.get("memory")
        section["dimensions"] = -1

        self.assertEqual(config.get("memory", "dimensions"), 1000)

    def test_repr(self):
        """Test the summary representation."""
        text = repr(Config({"random": {"seed": 5}}))

        self.assertIn("dimensions=1000", text)
        self.assertIn("seed=5", text)

    def test_load_missing_file(self):
        """Test loading a file that doesn't exist."""
        with self.assertRaises(FileNotFoundError):
            Config.load("/nonexistent/config.json")
            
    def test_str(self):
        """Test the JSON string representation."""
        self.assertIn('"critical_distance_factor": 0.3', str(Config()))


if __name__ == "__main__":
    unittest.main()
