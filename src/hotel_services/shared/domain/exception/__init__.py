from .exceptions import (
    ConflictException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ValidationException",
    "ConflictException",
    "DuplicateResourceException",
    "OptimisticLockException",
]
