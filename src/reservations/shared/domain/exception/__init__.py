from .exceptions import (
    DomainException,
    DuplicateResourceException,
    InvalidInputException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "InvalidInputException",
    "ResourceNotFoundException",
    "DuplicateResourceException",
]
