from .error_kind import ErrorKind
from .exceptions import (
    BusinessRuleViolationException,
    CapacityExceededException,
    DomainException,
    DuplicateResourceException,
    EmptyResultException,
    InsufficientInventoryException,
    InvalidRangeException,
    OptimisticLockException,
    ResourceNotFoundException,
    StoreFailureException,
)

__all__ = [
    "ErrorKind",
    "DomainException",
    "ResourceNotFoundException",
    "EmptyResultException",
    "BusinessRuleViolationException",
    "InvalidRangeException",
    "InsufficientInventoryException",
    "CapacityExceededException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "StoreFailureException",
]
