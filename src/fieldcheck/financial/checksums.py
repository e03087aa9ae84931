"""Numeric checksum algorithms for card and routing numbers."""

_ABA_WEIGHTS = (3, 7, 1, 3, 7, 1, 3, 7, 1)


def luhn_checksum_valid(number: str) -> bool:
    """Check *number* against the Luhn (mod 10) formula.

    From the rightmost digit, every second digit is doubled and 9 is
    subtracted when the double exceeds 9. The number is valid when the
    sum of all digits is a multiple of 10.

    Examples::

        >>> luhn_checksum_valid("4111111111111111")
        True
        >>> luhn_checksum_valid("4111111111111112")
        False
    """
    if not number or not number.isascii() or not number.isdigit():
        return False

    total = 0
    for position, char in enumerate(reversed(number)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def luhn_check_digit(partial: str) -> str:
    """Return the digit that makes ``partial + digit`` pass the Luhn check."""
    for candidate in "0123456789":
        if luhn_checksum_valid(partial + candidate):
            return candidate
    msg = f"Not a numeric string: {partial!r}"
    raise ValueError(msg)


def aba_checksum_valid(routing_number: str) -> bool:
    """Check a 9-digit US routing number against the ABA weighted sum.

    Digits are weighted ``3, 7, 1`` repeating; the weighted sum must be a
    multiple of 10.

    Examples::

        >>> aba_checksum_valid("021000021")
        True
        >>> aba_checksum_valid("021000022")
        False
    """
    if len(routing_number) != 9 or not routing_number.isascii() or not routing_number.isdigit():
        return False
    total = sum(int(d) * w for d, w in zip(routing_number, _ABA_WEIGHTS, strict=True))
    return total % 10 == 0
