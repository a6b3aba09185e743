from decimal import Decimal

import pytest

from zksync_signer.exceptions import ValidationError
from zksync_signer.utils.formatting import format_amount, to_decimal, parse_amount


@pytest.mark.parametrize("amount, decimals, expected", [
    (1005, 3, "1.005"),
    (1, 3, "0.001"),
    (1234, 0, "1234"),
    (0, 0, "0"),
    (0, 2, "0.00"),
    (1000, 3, "1.000"),
    (123456789, 18, "0.000000000123456789"),
])
def test_format_amount(amount, decimals, expected):
    assert format_amount(amount, decimals) == expected


def test_format_amount_large_values_are_exact():
    amount = 10**40 + 9
    assert format_amount(amount, 18) == "10000000000000000000000.000000000000000009"


def test_format_amount_rejects_negative():
    with pytest.raises(ValidationError):
        format_amount(-1, 2)
    with pytest.raises(ValidationError):
        format_amount(1, -2)


def test_to_decimal():
    assert to_decimal(1005, 3) == Decimal("1.005")
    assert str(to_decimal(1, 3)) == "0.001"
    assert to_decimal(10**40 + 9, 18) == Decimal("10000000000000000000000.000000000000000009")


def test_parse_amount_truncates():
    assert parse_amount("1.005", 3) == 1005
    assert parse_amount("0.0019", 3) == 1
    assert parse_amount("12", 2) == 1200
    assert parse_amount(".5", 1) == 5
    with pytest.raises(ValidationError):
        parse_amount("-1", 2)
    with pytest.raises(ValidationError):
        parse_amount("1.2.3", 2)
    with pytest.raises(ValidationError):
        parse_amount("\u00b2", 0)
    with pytest.raises(ValidationError):
        parse_amount("\u0661", 0)
    with pytest.raises(ValidationError):
        parse_amount("", 2)
    with pytest.raises(ValidationError):
        parse_amount(".", 2)
    assert parse_amount("1.", 2) == 100
