from .entity import Entity
from .exception import (
    BusinessRuleViolationException,
    CapacityExceededException,
    DomainException,
    DuplicateResourceException,
    EmptyResultException,
    ErrorKind,
    InsufficientInventoryException,
    InvalidRangeException,
    OptimisticLockException,
    ResourceNotFoundException,
    StoreFailureException,
)
from .value_object import Currency, EntityIdentifier, Money

__all__ = [
    "Entity",
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
    "Currency",
    "EntityIdentifier",
    "Money",
]
