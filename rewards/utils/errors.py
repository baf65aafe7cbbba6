"""Custom exceptions for the rewards system"""


class RewardsSystemError(Exception):
    """Base exception for rewards system errors"""
    pass


class ConfigurationError(RewardsSystemError):
    """Configuration loading errors"""
    pass


class TransactionFetchError(RewardsSystemError):
    """Transaction source errors"""
    pass


class TransactionSourceError(TransactionFetchError):
    """Source is misconfigured or its data is malformed; another attempt cannot succeed"""
    pass


class TransactionValidationError(RewardsSystemError):
    """Manual transaction input failed validation"""

    def __init__(self, errors: dict):
        self.errors = errors
        details = ", ".join(f"{field}: {message}" for field, message in errors.items())
        super().__init__(f"Invalid transaction: {details}")


class TransactionNotFoundError(RewardsSystemError):
    """Transaction id not present in the store"""
    pass


class CacheError(RewardsSystemError):
    """Transaction cache errors"""
    pass
