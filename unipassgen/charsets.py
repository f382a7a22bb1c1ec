import collections
import logging
import math
import numbers

logger = logging.getLogger(__name__)

CharRange = collections.namedtuple("CharRange", ["start", "end"])

BMP_MAX = 0xFFFF

_LOWER = CharRange(ord("a"), ord("z"))
_UPPER = CharRange(ord("A"), ord("Z"))
_DIGITS = CharRange(ord("0"), ord("9"))

# Printable ASCII punctuation: !"#$%&'()*+,-./ :;<=>?@ [\]^_` {|}~
_SYMBOLS = (
    CharRange(0x21, 0x2F),
    CharRange(0x3A, 0x40),
    CharRange(0x5B, 0x60),
    CharRange(0x7B, 0x7E),
)

ALIASES = {
    "alpha": (_LOWER, _UPPER),
    "alpha_lower": (_LOWER,),
    "alpha_upper": (_UPPER,),
    "numeric": (_DIGITS,),
    "alpha_numeric": (_LOWER, _UPPER, _DIGITS),
    "alpha_numeric_lower": (_LOWER, _DIGITS),
    "alpha_numeric_upper": (_UPPER, _DIGITS),
    "symbols": _SYMBOLS,
}

def alias_names() -> list[str]:
    return sorted(ALIASES)

def is_int(value) -> bool:
    """
    True for real numbers that survive truncation toward zero unchanged,
    e.g. -3, 0, 7 or 7.0. Bools, strings, None, NaN and infinities are not
    integers.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if math.isnan(value) or math.isinf(value):
        return False
    return math.trunc(value) == value

def to_code_point(value):
    """
    Converts a single range endpoint to a code point.

    Whole numbers (65 as well as 65.0, see is_int) are taken as they are.
    Strings are literal characters, only the first character counts.
    Anything else (including bools, fractional floats and the empty string)
    cannot be converted and yields None.
    """
    if is_int(value):
        return int(value)
    if isinstance(value, str) and len(value) > 0:
        return ord(value[0])
    return None

def resolve_range(entry) -> list[CharRange]:
    """
    Resolves one raw range entry such as ``["a", "z"]``, ``[0x41]`` or
    ``["alpha"]`` to a list of CharRanges.

    A bare string entry is treated like a one-element entry. Entries without
    a 0th element or with unconvertible endpoints resolve to an empty list.

    Returns:
        List of CharRange with inclusive bounds. The list is empty when the
        entry is unusable; no exception is raised.
    """
    if isinstance(entry, str):
        entry = (entry,)
    if not isinstance(entry, (list, tuple)) or len(entry) == 0:
        logger.debug("Skipping range entry %r", entry)
        return []

    start = entry[0]
    if isinstance(start, str) and start in ALIASES:
        return list(ALIASES[start])

    start_cp = to_code_point(start)
    if len(entry) > 1 and entry[1] is not None:
        end_cp = to_code_point(entry[1])
    else:
        end_cp = start_cp

    if start_cp is None or end_cp is None:
        logger.debug("Skipping range entry %r with unusable endpoint", entry)
        return []

    return [CharRange(start_cp, end_cp)]
