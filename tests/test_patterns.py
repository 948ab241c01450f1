import pytest

from dsakit.patterns import naive_search, rabin_karp_search

CASES = [
    ("AABA", "AABAACAADAABAAABAA"),
    ("yan", "MayankDhankar is the son of no one"),
    ("aa", "aaaaa"),
    ("xyz", "abcabc"),
    ("abc", "abc"),
    ("é", "café é"),
]


def test_naive_example():
    assert naive_search("AABA", "AABAACAADAABAAABAA") == [0, 9, 13]


def test_rabin_karp_example():
    text = "MayankDhankar is the son of no one"
    assert rabin_karp_search("yan", text) == [text.find("yan")]


@pytest.mark.parametrize("pattern, text", CASES)
def test_rabin_karp_agrees_with_naive(pattern, text):
    assert rabin_karp_search(pattern, text) == naive_search(pattern, text)


@pytest.mark.parametrize("modulus", [1, 3, 13, 101])
@pytest.mark.parametrize("pattern, text", CASES)
def test_small_modulus_does_not_change_result(pattern, text, modulus):
    assert rabin_karp_search(pattern, text, modulus) == naive_search(pattern, text)


@pytest.mark.parametrize("search", [naive_search, rabin_karp_search])
@pytest.mark.parametrize("pattern, text", CASES)
def test_every_match_is_real_and_none_missed(search, pattern, text):
    found = search(pattern, text)
    assert all(text[i:i + len(pattern)] == pattern for i in found)
    expected_count = sum(
        text.startswith(pattern, i) for i in range(len(text))
    )
    assert len(found) == expected_count


@pytest.mark.parametrize("search", [naive_search, rabin_karp_search])
def test_pattern_longer_than_text(search):
    assert search("abcdef", "abc") == []


@pytest.mark.parametrize("search", [naive_search, rabin_karp_search])
def test_empty_pattern_matches_everywhere(search):
    text = "abcd"
    assert search("", text) == list(range(len(text) + 1))


@pytest.mark.parametrize("modulus", [0, -5])
def test_modulus_must_be_positive(modulus):
    with pytest.raises(ValueError):
        rabin_karp_search("a", "abc", modulus)