## switchline — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from switchline.tokenizer import tokenize, join_arguments
from switchline.errors import InvalidArgument


def test_tokenize_splits_and_collapses_whitespace():
    assert tokenize("  --prev   file.txt\t--next \n") == ["--prev", "file.txt", "--next"]
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_tokenize_unicode_whitespace_separates():
    assert tokenize("a b c") == ["a", "b", "c"]


def test_tokenize_quotes_group_and_are_dropped():
    assert tokenize('--onevalue "val" --next') == ["--onevalue", "val", "--next"]
    assert tokenize('--onevalue "val3   val4"') == ["--onevalue", "val3   val4"]


def test_tokenize_quotes_hide_switches():
    line = '--prev --onevalue "val1 --next val2 val3" --next'
    assert tokenize(line) == ["--prev", "--onevalue", "val1 --next val2 val3", "--next"]


def test_tokenize_closing_quote_ends_token():
    assert tokenize('"ab"cd') == ["ab", "cd"]
    assert tokenize('"a b""c d"') == ["a b", "c d"]


def test_tokenize_text_before_opening_quote_joins_it():
    assert tokenize('ab"c d" e') == ["abc d", "e"]


def test_tokenize_empty_quotes_give_empty_token():
    assert tokenize('--onevalue ""') == ["--onevalue", ""]


def test_tokenize_unterminated_quote_keeps_content():
    assert tokenize('--onevalue "val1 val2') == ["--onevalue", "val1 val2"]
    assert tokenize('--onevalue "') == ["--onevalue"]


def test_tokenize_rejects_none():
    with pytest.raises(InvalidArgument):
        tokenize(None)


def test_join_arguments_quotes_trims_and_skips():
    assert join_arguments(["--prev", "--usage", "--next"]) == "--prev --usage --next"
    assert join_arguments(["--prev", "--usage", "usagevalue1 usagevalue2", "--next"]) \
        == '--prev --usage "usagevalue1 usagevalue2" --next'
    assert join_arguments(["  a  ", "", "   ", "b"]) == "a b"
    assert join_arguments([]) == ""


def test_join_arguments_rejects_none():
    with pytest.raises(InvalidArgument):
        join_arguments(None)
    with pytest.raises(InvalidArgument):
        join_arguments(["a", None])


@pytest.mark.parametrize("args", [
    ["--prev", "file.txt", "--next"],
    ["--onevalue", "val1 --next val2", "--next"],
    ["a\tb", "c  d", "e"],
    ["--multi", "x", "y z", "w"],
])
def test_tokenize_inverts_join_arguments(args):
    assert tokenize(join_arguments(args)) == args
