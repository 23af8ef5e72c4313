"""Small numeric and character helpers."""

MAX_DWORD = 0xFFFFFFFF
MAX_WORD = 0xFFFF


def units_count(value, unit, roundup=True):
    """Number of ``unit``-sized units in ``value``, optionally rounded up."""
    if unit == 0:
        return 0
    units, rest = divmod(value, unit)
    if roundup and rest:
        units += 1
    return units


def roundup(value, unit):
    """Round ``value`` up to a multiple of ``unit`` (0 when ``unit`` is 0)."""
    return units_count(value, unit) * unit


def round_up_to_unit(size, unit):
    """Round ``size`` up to a multiple of ``unit``; a zero unit leaves it as is."""
    if unit == 0:
        return size
    return units_count(size, unit) * unit


def is_printable(c):
    """True for printable ASCII characters (0x20..0x7e)."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        c = ord(c)
    return 0x20 <= c < 0x7F


def mask_to_dword(value):
    """Clamp ``value`` into the DWORD range."""
    return value & MAX_DWORD if value < MAX_DWORD else MAX_DWORD


def mask_to_word(value):
    """Clamp ``value`` into the WORD range."""
    return value & MAX_WORD if value < MAX_WORD else MAX_WORD