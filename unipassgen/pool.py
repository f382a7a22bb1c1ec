"""
Eligible code point pools.

A pool is computed on a bitset covering the whole Basic Multilingual Plane
(one byte per code point). Includes are accumulated first, then excludes are
cleared, so exclusion always wins. Range endpoints are clipped to the BMP:
code points above U+FFFF are never added and never cause an error.
"""

import itertools
import logging

from .charsets import BMP_MAX
from .options import CharSetSpec, Options, normalize

logger = logging.getLogger(__name__)

POOL_SIZE = BMP_MAX + 1

def _clip(char_range):
    start = max(char_range.start, 0)
    end = min(char_range.end, BMP_MAX)
    return start, end

def _fill(mask: bytearray, specs, value: int):
    for spec in specs:
        for char_range in spec.ranges:
            start, end = _clip(char_range)
            if start > end:
                continue
            mask[start:end+1] = bytes([value]) * (end - start + 1)

def build_pool(specs: list[CharSetSpec], exclude_specs: list[CharSetSpec]) -> list[int]:
    """
    Returns:
        Sorted list of distinct code points contained in any range of specs
        and in no range of exclude_specs.
    """
    mask = bytearray(POOL_SIZE)
    _fill(mask, specs, 1)
    _fill(mask, exclude_specs, 0)
    return list(itertools.compress(range(POOL_SIZE), mask))

def get_character_list(options=None) -> list[int]:
    """
    Full pool ("all characters") for raw or normalized options.
    """
    opts = normalize(options)
    pool = build_pool(opts.include, opts.exclude)
    logger.debug("Full pool holds %d code points", len(pool))
    return pool

def get_character_sets(options=None) -> list[tuple[list[int], int]]:
    """
    Returns:
        One (pool, min) tuple per include spec, in include order. Each pool
        is that spec's own ranges minus the global excludes.
    """
    opts: Options = normalize(options)
    return [
        (build_pool([spec], opts.exclude), spec.min)
        for spec in opts.include
    ]
