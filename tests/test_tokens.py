import pytest

from aissock.tokens import StringTokens


def test_next_token_splits_on_spaces_and_tabs():
    tokens = StringTokens("alpha beta\tgamma")
    assert tokens.next_token() == "alpha"
    assert tokens.next_token() == "beta"
    assert tokens.next_token() == "gamma"
    assert tokens.has_more_tokens() is False


def test_runs_of_blanks_are_one_separator():
    tokens = StringTokens("  one   \t two  ")
    assert list(tokens) == ["one", "two"]
    assert tokens.has_more_tokens() is False


def test_next_token_after_end_is_empty():
    tokens = StringTokens("only")
    assert tokens.next_token() == "only"
    assert tokens.next_token() == ""


def test_next_token_with_delimiter_keeps_empty_fields():
    tokens = StringTokens("a,,b")
    assert tokens.next_token(",") == "a"
    assert tokens.next_token(",") == ""
    assert tokens.next_token(",") == "b"
    assert tokens.has_more_tokens() is False


def test_delimiter_must_be_single_character():
    with pytest.raises(ValueError):
        StringTokens("a,b").next_token(",;")


def test_count_tokens_does_not_move_position():
    tokens = StringTokens("x y z")
    assert tokens.count_tokens() == 3
    assert tokens.position == 0
    assert tokens.next_token() == "x"
    assert tokens.count_tokens() == 3


def test_count_tokens_agrees_with_iteration():
    for sample in ["", "   ", "a", " a  b ", "a\tb\tc d"]:
        assert StringTokens(sample).count_tokens() == len(list(StringTokens(sample)))


def test_count_tokens_with_delimiter_agrees_with_next_token():
    sample = "k1=v1;k2=v2;;k3"
    walker = StringTokens(sample)
    seen = []
    while walker.has_more_tokens():
        seen.append(walker.next_token(";"))
    assert StringTokens(sample).count_tokens(";") == len(seen)
    assert seen == sample.split(";")


def test_starting_position_is_honoured():
    tokens = StringTokens("skip these words", 5)
    assert tokens.next_token() == "these"
    assert tokens.rest() == "words"


def test_rest_does_not_move_position():
    tokens = StringTokens("PRIVMSG #chan :hello there")
    tokens.next_token()
    before = tokens.position
    assert tokens.rest() == "#chan :hello there"
    assert tokens.position == before


def test_next_colon_token_takes_rest_of_line():
    tokens = StringTokens("PRIVMSG #chan :hello there friend")
    assert tokens.next_colon_token() == "PRIVMSG"
    assert tokens.next_colon_token() == "#chan"
    assert tokens.next_colon_token() == "hello there friend"
    assert tokens.has_more_tokens() is False


def test_next_colon_token_without_colon_matches_next_token():
    first = StringTokens("NICK somebody")
    second = StringTokens("NICK somebody")
    assert [first.next_colon_token(), first.next_colon_token()] == [
        second.next_token(),
        second.next_token(),
    ]


def test_iteration_rebuilds_blank_separated_words():
    sample = "the quick  brown\tfox"
    assert " ".join(StringTokens(sample)) == " ".join(sample.split())


def test_str_returns_held_string():
    assert str(StringTokens("held text", 3)) == "held text"