"""Amount formatting for zkSync tokens."""

import re
from decimal import Decimal, ROUND_DOWN, localcontext

from ..exceptions import ValidationError

__all__ = ["format_amount", "to_decimal", "parse_amount"]

AMOUNT_PATTERN = re.compile(r"(\d*)(?:\.(\d*))?", re.ASCII)


def _check(amount: int, decimals: int) -> None:
    if amount < 0:
        raise ValidationError(f"Amount cannot be negative: {amount}")
    if decimals < 0:
        raise ValidationError(f"Decimals cannot be negative: {decimals}")


def format_amount(amount: int, decimals: int) -> str:
    """
    Render integer amount as a decimal string.
    
    The amount is read as a value scaled by 10**decimals. All fractional
    digits are kept, so the result is exact and never rounded up.
    
    Args:
        amount: Amount in the token's smallest unit
        decimals: Number of fractional digits
        
    Returns:
        Decimal text, e.g. format_amount(1005, 3) == "1.005"
        
    Raises:
        ValidationError: If amount or decimals is negative
    """
    _check(amount, decimals)
    if decimals == 0:
        return str(amount)
        
    whole, fraction = divmod(amount, 10 ** decimals)
    return f"{whole}.{fraction:0{decimals}d}"


def to_decimal(amount: int, decimals: int) -> Decimal:
    """
    Convert integer amount to Decimal.
    
    Args:
        amount: Amount in the token's smallest unit
        decimals: Number of fractional digits
        
    Returns:
        Decimal with exactly `decimals` fractional digits
    """
    _check(amount, decimals)
    with localcontext() as ctx:
        # Enough precision to hold every digit of the amount
        ctx.prec = max(28, len(str(amount)) + decimals + 1)
        ctx.rounding = ROUND_DOWN
        value = Decimal(amount).scaleb(-decimals)
        return value.quantize(Decimal(1).scaleb(-decimals))


def parse_amount(text: str, decimals: int) -> int:
    """
    Parse decimal text into an integer amount.
    
    Fractional digits beyond `decimals` are truncated.
    
    Raises:
        ValidationError: If text is not a non-negative decimal number
    """
    if decimals < 0:
        raise ValidationError(f"Decimals cannot be negative: {decimals}")
        
    text = text.strip()
    match = AMOUNT_PATTERN.fullmatch(text)
    if match is None:
        raise ValidationError(f"Invalid amount: {text!r}")
        
    whole, fraction = match.group(1), match.group(2) or ""
    if not whole and not fraction:
        raise ValidationError(f"Amount has no digits: {text!r}")
        
    fraction = fraction[:decimals].ljust(decimals, "0")
    return int(whole or "0") * 10 ** decimals + int(fraction or "0")
