import pytest

from unipassgen.charsets import CharRange
from unipassgen.options import CharSetSpec
from unipassgen.pool import build_pool, get_character_list, get_character_sets

def spec(*ranges, min=0):
    return CharSetSpec(tuple(CharRange(*r) for r in ranges), min)

def test_alphanumeric_characters():
    options = {
        "include": [{"chars": [["A", "Z"], ["0", "8"]]}],
        "exclude": [{"chars": []}],
    }
    chars = get_character_list(options)
    assert set([65, 66, 67, 77, 90, 48, 53, 56]) <= set(chars)
    assert 57 not in chars
    assert len(chars) == 26 + 9

def test_decimal_characters():
    options = {
        "include": [{"chars": [[50, 53], [1000, 1002]]}],
        "exclude": [{"chars": [["3"]]}],
    }
    assert get_character_list(options) == [50, 52, 53, 1000, 1001, 1002]

def test_included_characters():
    assert get_character_list({"include": [{"chars": []}], "exclude": [{"chars": []}]}) == []
    assert get_character_list({"include": [{"chars": [[0x41]]}], "exclude": [{"chars": []}]}) == [65]
    assert get_character_list({"include": [{"chars": [[0x41, 0x43]]}]}) == [65, 66, 67]
    assert get_character_list({"include": [{"chars": [[0x41, 0x43], [0x46]]}]}) == [65, 66, 67, 70]

def test_excluded_characters():
    assert get_character_list({"include": [{"chars": [[0x41]]}], "exclude": [{"chars": [[0x41]]}]}) == []
    assert 66 not in get_character_list({"include": [{"chars": [[0x41, 0x43]]}], "exclude": [{"chars": [[0x42]]}]})
    assert get_character_list({"include": [{"chars": [[0x41, 0x43]]}], "exclude": [{"chars": [[0x41, 0x43]]}]}) == []

def test_default_is_full_bmp():
    chars = get_character_list()
    assert len(chars) == 0x10000
    assert chars[0] == 0 and chars[-1] == 0xFFFF

def test_overlapping_includes_deduplicated():
    pool = build_pool([spec((97, 100), (99, 102)), spec((100, 100))], [])
    assert pool == [97, 98, 99, 100, 101, 102]

def test_exclude_wins_regardless_of_order():
    includes = [spec((65, 70)), spec((68, 72))]
    excludes = [spec((66, 66)), spec((69, 80))]
    assert build_pool(includes, excludes) == [65, 67, 68]
    assert build_pool(includes[::-1], excludes[::-1]) == [65, 67, 68]

def test_exclude_missing_points_is_noop():
    assert build_pool([spec((65, 66))], [spec((1000, 2000))]) == [65, 66]

@pytest.mark.parametrize("ranges, expected", [
    # Astral code points are silently ignored.
    ([(0x10000, 0x10010)], []),
    ([(0x1F600,)], []),
    # Ranges crossing the BMP boundary keep their BMP part.
    ([(0xFFFE, 0x10001)], [0xFFFE, 0xFFFF]),
    ([(-5, 1)], [0, 1]),
    # Reversed ranges are empty.
    ([(70, 65)], []),
])
def test_out_of_range(ranges, expected):
    ranges = [r if len(r) == 2 else (r[0], r[0]) for r in ranges]
    assert build_pool([spec(*ranges)], []) == expected

def test_astral_literal_ignored():
    assert get_character_list({"include": [{"chars": [["😀"], ["a"]]}]}) == [97]

def test_character_list_deterministic():
    options = {"include": [{"chars": [["alpha"], ["symbols"]]}], "exclude": [{"chars": [["l"], ["I"]]}]}
    assert get_character_list(options) == get_character_list(options)

def test_character_sets():
    options = {
        "include": [
            {"chars": [["a", "d"]], "min": 2},
            {"chars": [["0", "5"], ["7"]], "min": 5},
            {"chars": [["x"]]},
        ],
        "exclude": [{"chars": [["4"], ["b"]]}],
    }
    assert get_character_sets(options) == [
        ([97, 99, 100], 2),
        ([48, 49, 50, 51, 53, 55], 5),
        ([120], 0),
    ]
