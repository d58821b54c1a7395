"""
Configuration management for Sparse Distributed Memory.

This module provides configuration management for SDM stores, including
default parameters, validation, and loading/saving configurations.
"""

import copy
import os
import json
import math
from typing import Dict, Any, Optional

from sdm.exceptions import InvalidArgumentError


class Config:
    """
    Configuration manager for SDM stores.
    
    This class manages configuration parameters for building a store,
    providing default values, validation, and loading/saving functionality.
    """
    
    # Default configuration parameters
    DEFAULT_CONFIG = {
        # Store geometry
        "memory": {
            "dimensions": 1000,                 # Length of addresses and data vectors
            "num_locations": 10000,             # Number of memory locations
            "critical_distance_factor": 0.3,    # Activation radius as a fraction of dimensions
        },
        
        # Random initialization
        "random": {
            "seed": None,                       # Seed for location generation (None = nondeterministic)
        },
        
        # System parameters
        "system": {
            "device": "cpu",                    # Device to store tensors on ("cpu" or "cuda")
        }
    }
    
    def __init__(self, config_dict: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the configuration manager.
        
        Args:
            config_dict: Optional dictionary with configuration parameters
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        
        if config_dict is not None:
            self._update_config(config_dict)
            
        self._validate_config()
        
    def _update_config(self, config_dict: Dict[str, Any]) -> None:
        """
        Update configuration with provided dictionary.
        
        Args:
            config_dict: Dictionary with configuration parameters to update
        """
        for section, params in config_dict.items():
            if section not in self.config:
                raise ValueError(f"Unknown section '{section}'")
            if not isinstance(params, dict):
                raise ValueError(f"Section '{section}' should be a dictionary")
            
            for key, value in params.items():
                if key not in self.config[section]:
                    raise ValueError(f"Unknown parameter '{key}' in section '{section}'")
                self.config[section][key] = value
                
    def _validate_config(self) -> None:
        """Validate configuration parameters."""
        memory = self.config["memory"]
        
        for key in ("dimensions", "num_locations"):
            value = memory[key]
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"Memory {key} must be an integer")
            if value <= 0:
                raise InvalidArgumentError(f"Memory {key} must be positive")
        
        factor = memory["critical_distance_factor"]
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            raise InvalidArgumentError("Critical distance factor must be a number")
        if not math.isfinite(factor) or factor < 0:
            raise InvalidArgumentError("Critical distance factor must be non-negative")
        
        seed = self.config["random"]["seed"]
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidArgumentError("Random seed must be an integer or None")
        
        if self.config["system"]["device"] not in ["cpu", "cuda"]:
            raise InvalidArgumentError("Device must be 'cpu' or 'cuda'")
        
    def _section(self, section: str) -> Dict[str, Any]:
        if section not in self.config:
            raise ValueError(f"Unknown section '{section}'")
        return self.config[section]
        
    def get(self, section: str, param: Optional[str] = None) -> Any:
        """
        Look up a whole section, or one parameter within it.
        
        Sections are returned as copies, so editing them doesn't bypass
        validation; use ``set`` instead.
        
        Raises:
            ValueError: If the section or parameter is unknown
        """
        values = self._section(section)
        
        if param is None:
            return dict(values)
        
        if param not in values:
            raise ValueError(f"Unknown parameter '{param}' in section '{section}'")
        return values[param]
    
    def set(self, section: str, param: str, value: Any) -> None:
        """
        Set configuration parameter.
        
        The previous value is restored if the new one fails validation.
        
        Args:
            section: Configuration section
            param: Parameter name within section
            value: Parameter value
        """
        previous = self.get(section, param)
        self.config[section][param] = value
        
        try:
            self._validate_config()
        except InvalidArgumentError:
            self.config[section][param] = previous
            raise
        
    def save(self, filepath: str) -> None:
        """Write the configuration as JSON, creating parent directories as needed."""
        directory = os.path.dirname(filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
            
        with open(filepath, 'w') as f:
            json.dump(self.config, f, indent=2, sort_keys=True)
            
    @classmethod
    def load(cls, filepath: str, overrides: Optional[Dict[str, Any]] = None) -> 'Config':
        """
        Read a JSON configuration file.
        
        Args:
            filepath: Path to configuration file
            overrides: Optional sections applied on top of the file's values
            
        Returns:
            Validated Config
        """
        if not os.path.isfile(filepath):
            raise FileNotFoundError(f"Configuration file '{filepath}' not found")
            
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
            
        for section, params in (overrides or {}).items():
            config_dict.setdefault(section, {}).update(params)
            
        return cls(config_dict)
    
    def to_dict(self) -> Dict[str, Any]:
        """Independent copy of all sections."""
        return copy.deepcopy(self.config)
    
    def __str__(self) -> str:
        return json.dumps(self.config, indent=2, sort_keys=True)
    
    def __repr__(self) -> str:
        memory = self.config["memory"]
        return (
            f"Config(dimensions={memory['dimensions']}, num_locations={memory['num_locations']}, "
            f"critical_distance_factor={memory['critical_distance_factor']}, "
            f"seed={self.config['random']['seed']}, device={self.config['system']['device']!r})"
        )
