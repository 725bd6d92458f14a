from newscast.core.tokens import TokenBudgeter


def test_count_uses_encoding(char_budgeter):
    assert char_budgeter.count("hello world") == 11


def test_slice_decodes_token_range(char_budgeter):
    assert char_budgeter.slice("abcdefghij", (2, 5)) == "cde"


def test_truncate_clips_oversized_input(char_budgeter):
    assert char_budgeter.truncate("abcdefghij", 4) == "abcd"
    assert char_budgeter.truncate("abc", 4) == "abc"


def test_split_is_consecutive_and_non_overlapping(char_budgeter):
    chunks = char_budgeter.split("abcdefghijklmnopqrstuvwxy", 10)
    assert chunks == ["abcdefghij", "klmnopqrst", "uvwxy"]
    assert ''.join(chunks) == "abcdefghijklmnopqrstuvwxy"


def test_unknown_encoding_falls_back_to_characters(fallback_budgeter):
    text = "x" * 41
    assert fallback_budgeter.count(text) == 11
    assert fallback_budgeter.slice(text, (0, 2)) == "x" * 8
    assert fallback_budgeter.truncate(text, 10) == "x" * 40


def test_encode_failure_falls_back_to_characters():
    class Broken:
        def encode(self, text, disallowed_special=()):
            raise RuntimeError("tokenizer exploded")

    budgeter = TokenBudgeter(encoding=Broken())
    assert budgeter.count("abcdefgh") == 2
    assert budgeter.truncate("abcdefghij", 1) == "abcd"


def test_budgeter_is_stateless_across_calls(char_budgeter):
    first = char_budgeter.count("one two")
    char_budgeter.truncate("something much longer than before", 3)
    assert char_budgeter.count("one two") == first
