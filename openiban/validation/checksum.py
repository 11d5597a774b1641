"""ISO 7064 mod-97 checksum for IBANs.

The IBAN is rotated (first four characters moved to the end), every letter is
replaced by two digits (A=10 ... Z=35), and the resulting numeral is reduced
modulo 97 in chunks of at most nine digits, so it is never parsed as one
oversized integer. A correct IBAN leaves a remainder of 1.
"""

CHUNK_SIZE = 9


def to_numeral(iban: str) -> str:
    """Rotated, letter-mapped digit string of ``iban``.

    >>> to_numeral("GB82WEST12345698765432")
    '3214282912345698765432161182'

    Raises:
        ValueError: If ``iban`` contains anything but A-Z and 0-9
    """
    rotated = iban[4:] + iban[:4]
    digits = []
    for ch in rotated:
        if "0" <= ch <= "9":
            digits.append(ch)
        elif "A" <= ch <= "Z":
            digits.append(str(ord(ch) - ord("A") + 10))
        else:
            raise ValueError(f"Unexpected character {ch!r} in IBAN")
    return "".join(digits)


def mod97(iban: str) -> int:
    """Remainder of the IBAN numeral modulo 97."""
    remainder = to_numeral(iban)
    if not remainder:
        raise ValueError("Cannot compute a checksum of an empty IBAN")
    while len(remainder) > 2:
        block = remainder[:CHUNK_SIZE]
        remainder = str(int(block) % 97) + remainder[len(block) :]
    return int(remainder) % 97


def is_valid_checksum(iban: str) -> bool:
    """Whether ``iban`` satisfies the mod-97 relation (remainder 1)."""
    try:
        return mod97(iban) == 1
    except ValueError:
        return False


def compute_check_digits(country_code: str, bban: str) -> str:
    """Two check digits that make ``country_code + digits + bban`` valid.

    >>> compute_check_digits("GB", "WEST12345698765432")
    '82'
    """
    remainder = mod97(f"{country_code}00{bban}")
    return f"{98 - remainder:02d}"
