import logging
import secrets

from .charsets import is_int
from .options import Options, normalize
from .pool import build_pool, get_character_sets

logger = logging.getLogger(__name__)

class PassgenException(Exception):
    pass

class LengthTypeError(PassgenException, TypeError):
    pass

class LengthRangeError(PassgenException, ValueError):
    pass


def default_rng():
    return secrets.SystemRandom()

def shuffle(chars, rng=None) -> list:
    """
    Fisher-Yates shuffle. Returns a new list, chars is left untouched.

    Args:
        chars: Sequence of characters (or any other elements).
        rng: Object providing randrange(n). Defaults to secrets.SystemRandom.
    """
    rng = rng or default_rng()
    content = list(chars)
    for idx in range(len(content) - 1, 0, -1):
        swap_idx = rng.randrange(idx + 1)
        content[idx], content[swap_idx] = content[swap_idx], content[idx]
    return content

def draw(pool: list[int], count: int, rng) -> list[str]:
    """
    Draws count characters uniformly with replacement from pool. An empty pool
    yields nothing.
    """
    if len(pool) == 0:
        return []
    return [chr(pool[rng.randrange(len(pool))]) for i in range(count)]


class PasswordGenerator:
    """
    Generates passwords from include/exclude code point options.

    The pools are built once on construction, so one instance can be used
    for many passwords with the same options.
    """
    def __init__(self, options=None, rng=None):
        """
        Args:
            options: Raw options mapping, Options object or None for the
                whole BMP.
            rng: Object providing randrange(n). Defaults to
                secrets.SystemRandom. Inject random.Random(seed) for
                reproducible output.
        """
        self.options: Options = normalize(options)
        self.rng = rng or default_rng()

        self.all_characters = build_pool(self.options.include, self.options.exclude)
        self.character_sets = []
        for pool, min_count in get_character_sets(self.options):
            if min_count <= 0:
                continue
            if len(pool) == 0:
                logger.warning("Minimum of %d cannot be met, character set is empty", min_count)
            self.character_sets.append((pool, min_count))

    def min_length(self) -> int:
        """
        Number of characters the minimum requirements add on their own.
        """
        return sum(min_count for pool, min_count in self.character_sets if pool)

    def generate(self, length: int) -> str:
        """
        Returns:
            Shuffled password with max(length, min_length()) characters, or
            an empty string if no character is eligible at all.
        """
        if not is_int(length):
            raise LengthTypeError("Non-integer length type")
        if length < 0:
            raise LengthRangeError("Length must be a positive integer")
        length = int(length)

        if len(self.all_characters) == 0:
            return ""

        pw = []

        # Stage 1: Satisfy the minimum of each character set.
        for pool, min_count in self.character_sets:
            pw.extend(draw(pool, min_count, self.rng))

        # Stage 2: Fill up the remaining length from all eligible characters.
        pw.extend(draw(self.all_characters, length - len(pw), self.rng))

        return "".join(shuffle(pw, self.rng))

    def describe(self) -> str:
        parts = [f"{len(self.all_characters)} eligible characters"]
        for pool, min_count in self.character_sets:
            parts.append(f"at least {min_count} of {len(pool)}")
        return ", ".join(parts)


def generate(length: int, options=None, rng=None) -> str:
    """
    Generates a password of the given length.

    Args:
        length: Requested number of characters. Minimum requirements of the
            options can make the result longer.
        options: Mapping with optional "include" and "exclude" lists, each
            holding entries like ``{"chars": [["a", "z"], ["alpha_upper"]],
            "min": 2}``. None means the whole BMP, including the surrogate
            code points U+D800 to U+DFFF. A result containing those is a
            valid str but raises UnicodeEncodeError on encode(); exclude
            them if the password has to be encoded.
        rng: Object providing randrange(n).

    Raises:
        LengthTypeError: length is not a whole number.
        LengthRangeError: length is negative.
    """
    # Check length before doing any pool work.
    if not is_int(length):
        raise LengthTypeError("Non-integer length type")
    if length < 0:
        raise LengthRangeError("Length must be a positive integer")

    return PasswordGenerator(options, rng).generate(length)
