import random

import pytest

from tilemaze.maze import InvalidPattern, RandomSource, SeededRandomSource, get_preset
from tilemaze.maze.patterns import parse_pattern
from tests.maze_test_utils import ConstantRandomSource


def test_seeded_source_repeatable():
    a = SeededRandomSource(99)
    b = SeededRandomSource(99)
    assert [a.next_int(10) for _ in range(20)] == [b.next_int(10) for _ in range(20)]


def test_seeded_source_ignores_global_random():
    a = SeededRandomSource(5)
    first = [a.next_int(1000) for _ in range(5)]
    random.seed(123)
    random.random()
    b = SeededRandomSource(5)
    assert [b.next_int(1000) for _ in range(5)] == first


def test_seeded_source_stays_in_bounds():
    src = SeededRandomSource(1)
    values = {src.next_int(3) for _ in range(200)}
    assert values == {0, 1, 2}
    assert {src.next_int(1) for _ in range(20)} == {0}


@pytest.mark.parametrize("bound", [0, -4])
def test_seeded_source_rejects_empty_range(bound):
    with pytest.raises(ValueError):
        SeededRandomSource(1).next_int(bound)


def test_protocol_accepts_duck_typed_sources():
    assert isinstance(SeededRandomSource(1), RandomSource)
    assert isinstance(ConstantRandomSource(), RandomSource)


def test_presets_lookup_is_case_insensitive():
    assert get_preset("GRID") == ([[2, 1], [1, 0]], True)
    with pytest.raises(InvalidPattern):
        get_preset("spiral")


def test_get_preset_returns_fresh_copy():
    first, _ = get_preset("weave")
    first[0][0] = 7
    second, _ = get_preset("weave")
    assert second is not first
    assert second[0][0] != 7


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1,2,2,1,0", [1, 2, 2, 1, 0]),
        ("2,1;1,0", [[2, 1], [1, 0]]),
        (" 0, 2 ,2 ; 1,1,2 ", [[0, 2, 2], [1, 1, 2]]),
        ("5", [5]),
    ],
)
def test_parse_pattern(text, expected):
    assert parse_pattern(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "a,b", "1;x", ",", ";", " , ; "])
def test_parse_pattern_rejects_garbage(text):
    with pytest.raises(InvalidPattern):
        parse_pattern(text)
