"""Human-readable (printed) form of an IBAN.

Most countries print an IBAN in groups of four characters. The few that do
not are listed in ``GROUPINGS`` as explicit (offset, length) pairs; an empty
grouping means the IBAN is printed as a single unbroken string.
"""

GROUP_SIZE = 4

GROUPINGS: dict[str, tuple[tuple[int, int], ...]] = {
    # Burundi
    "BI": ((0, 4), (4, 5), (9, 5), (14, 11), (25, 2)),
    # Egypt
    "EG": (),
    # Libya
    "LY": ((0, 4), (4, 3), (7, 3), (10, 15)),
    # El Salvador
    "SV": ((0, 2), (2, 2), (4, 4), (8, 20)),
}


def group_by_four(iban: str) -> str:
    """Split ``iban`` into space-separated groups of four characters."""
    return " ".join(iban[i : i + GROUP_SIZE] for i in range(0, len(iban), GROUP_SIZE))


def human_readable(iban: str, country_code: str | None = None) -> str:
    """Printed form of ``iban``.

    >>> human_readable("GB82WEST12345698765432")
    'GB82 WEST 1234 5698 7654 32'
    >>> human_readable("SV62CENR00000000000000700025")
    'SV 62 CENR 00000000000000700025'
    """
    if country_code is None:
        country_code = iban[:2]
    grouping = GROUPINGS.get(country_code)
    if grouping is None:
        return group_by_four(iban)
    if not grouping:
        return iban
    return " ".join(iban[offset : offset + length] for offset, length in grouping)
