"""Token type definitions."""

from dataclasses import dataclass
from decimal import Decimal

from ..constants import ZERO_ADDRESS
from ..exceptions import ValidationError
from ..types.common import Address, TokenId
from ..utils.formatting import format_amount, to_decimal
from ..utils.validation import validate_address

__all__ = ["Token", "ETH"]


@dataclass(frozen=True)
class Token:
    """
    Token known to the zkSync network.
    
    Amounts handled by the SDK are integers in the token's smallest
    unit; `decimals` tells how many of their digits are fractional.
    """
    
    id: TokenId
    address: Address
    symbol: str
    decimals: int
    
    def __post_init__(self) -> None:
        """Validate token fields."""
        if self.id < 0:
            raise ValidationError(f"Token id must be non-negative: {self.id}")
        if self.decimals < 0:
            raise ValidationError(f"Token decimals must be non-negative: {self.decimals}")
        if not self.symbol:
            raise ValidationError("Token symbol cannot be empty")
        validate_address(self.address)
        
    @classmethod
    def eth(cls) -> "Token":
        """
        Get the ETH token.
        
        Decimals are 0 here, not 18: amounts are rendered in wei.
        """
        return ETH
        
    @property
    def is_eth(self) -> bool:
        """Check if token is ETH."""
        return self.id == 0 and self.address == ZERO_ADDRESS
        
    def into_decimal(self, amount: int) -> Decimal:
        """Convert integer amount to Decimal, rounding down."""
        return to_decimal(amount, self.decimals)
        
    def format_amount(self, amount: int) -> str:
        """Render integer amount as decimal text without symbol."""
        return format_amount(amount, self.decimals)
        
    def __str__(self) -> str:
        """String representation."""
        return self.symbol


ETH = Token(
    id=TokenId(0),
    address=Address(ZERO_ADDRESS),
    symbol="ETH",
    decimals=0,
)
