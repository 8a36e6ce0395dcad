"""Custom exception hierarchy for kakeibo."""


class KakeiboError(Exception):
    """Base exception for all kakeibo errors."""


class EntityNotFoundError(KakeiboError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class InvalidEntityStateError(KakeiboError):
    """Raised when an entity is in an invalid state for the operation."""


class ConfigurationError(KakeiboError):
    """Raised when configuration is invalid or missing."""


class StorageError(KakeiboError):
    """Raised when reading or writing persisted records fails."""
