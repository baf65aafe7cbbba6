"""Utility modules"""

from .config_loader import load_config, save_config
from .errors import (
    RewardsSystemError,
    ConfigurationError,
    TransactionFetchError,
    TransactionSourceError,
    TransactionValidationError,
    TransactionNotFoundError,
    CacheError
)

__all__ = [
    "load_config",
    "save_config",
    "RewardsSystemError",
    "ConfigurationError",
    "TransactionFetchError",
    "TransactionSourceError",
    "TransactionValidationError",
    "TransactionNotFoundError",
    "CacheError"
]
