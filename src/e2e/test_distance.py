# src/e2e/test_distance.py

import random

import pytest

from wordfind.distance import (
    bounded_levenshtein,
    char_count_lower_bound,
    char_mask,
    count_profile,
    levenshtein,
    surplus_exceeds,
)


@pytest.mark.parametrize("a,b,d", [
    ("", "", 0),
    ("", "abc", 3),
    ("abc", "", 3),
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("becuase", "because", 2),   # transposition costs two edits
    ("becuase", "become", 3),
    ("cet", "cat", 1),
    ("cet", "bat", 2),
    ("same", "same", 0),
])
def test_levenshtein_known_pairs(a, b, d):
    assert levenshtein(a, b) == d
    assert levenshtein(b, a) == d


def test_bounded_returns_exact_distance_within_bound():
    assert bounded_levenshtein("kitten", "sitting", 3) == 3
    assert bounded_levenshtein("kitten", "sitting", 10) == 3


def test_bounded_gives_up_past_bound():
    assert bounded_levenshtein("kitten", "sitting", 2) is None
    # length gap alone exceeds the bound
    assert bounded_levenshtein("a", "abcdef", 4) is None
    assert bounded_levenshtein("abc", "abd", -1) is None


def test_bounded_agrees_with_full_dp():
    words = ["", "a", "ab", "abc", "acb", "bca", "hello", "hallo", "yellow", "fellow", "mellow"]
    for a in words:
        for b in words:
            d = levenshtein(a, b)
            for bound in range(0, 7):
                got = bounded_levenshtein(a, b, bound)
                assert got == (d if d <= bound else None), (a, b, bound)


def _random_pairs(n, seed=7):
    rnd = random.Random(seed)
    alphabet = "abcdeq"
    for _ in range(n):
        a = "".join(rnd.choice(alphabet) for _ in range(rnd.randint(0, 12)))
        b = "".join(rnd.choice(alphabet) for _ in range(rnd.randint(0, 12)))
        yield a, b


def test_banded_dp_agrees_with_full_dp_on_random_pairs():
    for a, b in _random_pairs(400):
        d = levenshtein(a, b)
        for bound in (0, 1, 2, 3, 5, 8, 13):
            assert bounded_levenshtein(a, b, bound) == (d if d <= bound else None), (a, b, bound)


def test_shared_prefix_and_suffix_do_not_change_distance():
    assert bounded_levenshtein("prefixXmiddleYsuffix", "prefixmiddlesuffix", 2) == 2
    assert bounded_levenshtein("aaaaab", "aaaab", 1) == 1
    assert bounded_levenshtein("abab", "ab", 1) is None


def test_count_bounds_never_exceed_distance():
    for a, b in _random_pairs(400, seed=11):
        d = levenshtein(a, b)
        lb = char_count_lower_bound(a, b)
        assert lb <= d, (a, b)
        missing_a = (char_mask(a) & ~char_mask(b)).bit_count()
        missing_b = (char_mask(b) & ~char_mask(a)).bit_count()
        assert max(missing_a, missing_b) <= d, (a, b)
        # surplus check only fires when the full multiset bound would too
        for bound in range(0, 6):
            if surplus_exceeds(count_profile(a), b, bound):
                assert lb > bound, (a, b, bound)


def test_surplus_rejects_words_missing_repeated_letters():
    profile = count_profile("qqqqqqqq")
    assert surplus_exceeds(profile, "because", 7)
    assert not surplus_exceeds(profile, "qqqqqqqa", 7)
    assert levenshtein("qqqqqqqq", "because") > 7
