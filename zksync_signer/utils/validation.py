"""Validation utilities for zkSync signing."""

import re

from ..exceptions import ValidationError

__all__ = [
    "is_valid_address",
    "validate_address",
    "validate_uint32",
    "validate_amount",
]

# Regex pattern
ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")

UINT32_MAX = 2 ** 32 - 1


def is_valid_address(address: str) -> bool:
    """
    Check if Ethereum address format is valid.
    
    Checksum casing is not verified.
    """
    return bool(ADDRESS_PATTERN.match(address))


def validate_address(address: str) -> str:
    """
    Validate Ethereum address.
    
    Args:
        address: Address to validate
        
    Returns:
        The address unchanged
        
    Raises:
        ValidationError: If address is invalid
    """
    if not address:
        raise ValidationError("Address cannot be empty")
        
    if not is_valid_address(address):
        raise ValidationError(f"Invalid Ethereum address: {address}")
        
    return address



def validate_uint32(value: int, name: str = "value") -> int:
    """
    Validate that value fits an unsigned 32-bit field.
    
    Raises:
        ValidationError: If value is out of range
    """
    if not 0 <= value <= UINT32_MAX:
        raise ValidationError(f"{name} out of range: {value}")
    return value


def validate_amount(amount: int) -> int:
    """Validate a non-negative integer amount."""
    if amount < 0:
        raise ValidationError(f"Amount cannot be negative: {amount}")
    return amount
