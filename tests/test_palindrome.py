import pytest

from toolbench.palindrome import is_palindrome


@pytest.mark.parametrize(
    "items, want",
    [
        ([], True),
        (["a"], True),
        (["a", "b"], False),
        (["a", "b", "a"], True),
        (["a", "b", "c"], False),
        (["a", "b", "b", "a"], True),
        (["a", "b", "c", "b", "a"], True),
        (["a", "b", "c", "d", "a"], False),
    ],
)
def test_with_list(items, want):
    assert is_palindrome(items) is want


@pytest.mark.parametrize(
    "text, want",
    [
        ("", True),
        ("a", True),
        ("ab", False),
        ("aba", True),
        ("abc", False),
        ("abba", True),
        ("abcba", True),
        ("abcda", False),
    ],
)
def test_with_string(text, want):
    assert is_palindrome(text) is want


@pytest.mark.parametrize(
    "text, want",
    [
        ("", True),
        ("a", True),
        ("Aa", True),
        ("Aba", True),
        ("Abc", False),
        ("AbBa", True),
        ("ABBA", True),
        ("élle", False),
        ("éllÉ", True),
    ],
)
def test_case_insensitive(text, want):
    assert is_palindrome(text, key=str.upper) is want


def test_case_matters_without_key():
    assert is_palindrome("Aa") is False