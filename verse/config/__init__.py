# verse/config/__init__.py

from .config_manager import (
    ConfigManager,
    ProviderConfig,
    ValidationConfig,
    LoggingConfig,
    get_config_manager
)

__all__ = [
    'ConfigManager',
    'ProviderConfig',
    'ValidationConfig',
    'LoggingConfig',
    'get_config_manager'
]
