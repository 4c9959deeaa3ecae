"""
Configuration manager for the inertial tracker.
"""

import copy
import json
import logging
import os
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

class Config:
    """Configuration manager for the dead reckoning tracker."""
    
    DEFAULT_CONFIG = {
        # Gravity low-pass filter
        "gravity_filter": {
            "alpha": 0.8
        },
        
        # Periodic drift correction
        "drift_correction": {
            "period_s": 0.1,
            "velocity_threshold": 0.05,
            "damping_factor": 0.95
        },
        
        # Logging
        "logging": {
            "enable_logging": True,
            "log_level": "INFO",
            "log_file": None
        }
    }
    
    def __init__(self, config_file: Optional[str] = None, create_missing: bool = False):
        """
        Initialize configuration.
        
        Args:
            config_file: Path to configuration file, None for defaults only
            create_missing: Write the defaults to config_file if it does not exist
        """
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        
        if config_file is None:
            return
        
        if os.path.exists(config_file):
            self.load_config()
        else:
            logger.info("Config file %s not found, using defaults", config_file)
            if create_missing:
                self.save_config()
    
    def load_config(self) -> bool:
        """
        Load configuration from file.
        
        Returns:
            True if loaded successfully
        """
        try:
            with open(self.config_file, 'r') as f:
                file_config = json.load(f)
            
            # File config overrides defaults
            self._merge_config(self.config, file_config)
            
            logger.info("Configuration loaded from %s", self.config_file)
            return True
            
        except (OSError, ValueError) as e:
            logger.error("Failed to load config %s: %s", self.config_file, e)
            return False
    
    def save_config(self) -> bool:
        """
        Save current configuration to file.
        
        Returns:
            True if saved successfully
        """
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
            
            logger.info("Configuration saved to %s", self.config_file)
            return True
            
        except (OSError, TypeError) as e:
            logger.error("Failed to save config %s: %s", self.config_file, e)
            return False
    
    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]):
        """Recursively merge configuration dictionaries."""
        for key, value in override.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._merge_config(base[key], value)
            else:
                base[key] = value
    
    def get(self, key: str, default=None):
        """Get configuration value with optional default."""
        keys = key.split('.')
        value = self.config
        
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        
        return value
    
    def set(self, key: str, value: Any):
        """Set configuration value."""
        keys = key.split('.')
        config = self.config
        
        for k in keys[:-1]:
            if k not in config:
                config[k] = {}
            config = config[k]
        
        config[keys[-1]] = value
    
    # Property accessors for common configuration values
    @property
    def gravity_filter_alpha(self) -> float:
        return self.config["gravity_filter"]["alpha"]
    
    @property
    def drift_period_s(self) -> float:
        return self.config["drift_correction"]["period_s"]
    
    @property
    def velocity_threshold(self) -> float:
        return self.config["drift_correction"]["velocity_threshold"]
    
    @property
    def damping_factor(self) -> float:
        return self.config["drift_correction"]["damping_factor"]
    
    @property
    def enable_logging(self) -> bool:
        return self.config["logging"]["enable_logging"]
    
    @property
    def log_level(self) -> str:
        return self.config["logging"]["log_level"]
    
    @property
    def log_file(self) -> Optional[str]:
        return self.config["logging"]["log_file"]
    
    def dumps(self) -> str:
        """Current configuration as formatted JSON."""
        return json.dumps(self.config, indent=2)

def configure_logging(config: Config):
    """Apply the logging section of a Config to the root logger."""
    if not config.enable_logging:
        logging.disable(logging.CRITICAL)
        return
    
    logging.disable(logging.NOTSET)
    level = getattr(logging, str(config.log_level).upper(), logging.INFO)
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))
    
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True
    )
