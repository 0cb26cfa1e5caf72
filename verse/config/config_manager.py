# verse/config/config_manager.py

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

@dataclass
class ProviderConfig:
    """Text-generation provider configuration"""
    provider: str = "openai"
    model: str = "gpt-4o-mini"
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: int = 60
    temperature: float = 0.7

@dataclass
class ValidationConfig:
    """Structure validation configuration"""
    syllable_tolerance: int = 1
    review_enabled: bool = False

@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None

class ConfigManager:
    """
    Manages configuration loading and access.
    
    Handles loading from YAML files, environment variable overrides,
    and provides typed access to configuration sections.
    """
    
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else self._get_default_config_path()
        self.logger = logging.getLogger(__name__)
        
        self._config: Dict[str, Any] = {}
        self._load_config()
    
    def _get_default_config_path(self) -> Path:
        """Get default configuration file path"""
        return Path(__file__).parent / "default_config.yaml"
    
    def _load_config(self):
        """Load configuration from YAML file"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
            self.logger.info(f"Loaded configuration from {self.config_path}")
        except FileNotFoundError:
            self.logger.warning(f"Configuration file not found: {self.config_path}")
            self._config = {}
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing configuration file: {e}")
            self._config = {}
        
        self._apply_env_overrides()
    
    def _apply_env_overrides(self):
        """Apply environment variable overrides"""
        api_key = os.getenv("VERSE_API_KEY") or os.getenv("OPENAI_API_KEY")
        if api_key:
            self._config.setdefault("llm", {})["api_key"] = api_key
        
        if os.getenv("VERSE_BASE_URL"):
            self._config.setdefault("llm", {})["base_url"] = os.getenv("VERSE_BASE_URL")
        
        if os.getenv("VERSE_MODEL"):
            self._config.setdefault("llm", {})["model"] = os.getenv("VERSE_MODEL")
        
        if os.getenv("VERSE_LOG_LEVEL"):
            self._config.setdefault("logging", {})["level"] = os.getenv("VERSE_LOG_LEVEL")
    
    def get_llm_config(self) -> ProviderConfig:
        """Get text-generation provider configuration"""
        llm_config = self._config.get("llm", {})
        
        return ProviderConfig(
            provider=llm_config.get("provider", "openai"),
            model=llm_config.get("model", "gpt-4o-mini"),
            api_key=llm_config.get("api_key"),
            base_url=llm_config.get("base_url"),
            timeout=llm_config.get("timeout", 60),
            temperature=llm_config.get("temperature", 0.7)
        )
    
    def get_validation_config(self) -> ValidationConfig:
        """Get structure validation configuration"""
        validation_config = self._config.get("validation", {})

        tolerance = validation_config.get("syllable_tolerance", 1)
        try:
            tolerance = int(tolerance)
            if tolerance < 0:
                raise ValueError(tolerance)
        except (TypeError, ValueError):
            self.logger.warning(f"Invalid syllable_tolerance {tolerance!r}, using 1")
            tolerance = 1

        return ValidationConfig(
            syllable_tolerance=tolerance,
            review_enabled=validation_config.get("review_enabled", False)
        )
    
    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration"""
        log_config = self._config.get("logging", {})
        
        return LoggingConfig(
            level=log_config.get("level", "INFO"),
            format=log_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file=log_config.get("file")
        )
    
    def get_raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary"""
        return self._config.copy()
    
    def reload_config(self):
        """Reload configuration from file"""
        self._load_config()

# Singleton instance for global access
_config_manager: Optional[ConfigManager] = None

def get_config_manager(config_path: Optional[str] = None) -> ConfigManager:
    """Get global configuration manager instance"""
    global _config_manager
    
    if _config_manager is None or config_path is not None:
        _config_manager = ConfigManager(config_path)
    
    return _config_manager
