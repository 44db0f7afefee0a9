"""Tests for mdnotion.utils: chunking, text splitting, redaction."""

from __future__ import annotations

import pytest

from mdnotion.utils import chunk_children, redact, split_string


class TestChunkChildren:
    def test_empty(self):
        assert chunk_children([]) == []

    def test_exact_multiple(self):
        blocks = [{"n": i} for i in range(200)]
        assert [len(b) for b in chunk_children(blocks)] == [100, 100]

    def test_remainder(self):
        blocks = [{"n": i} for i in range(250)]
        batches = chunk_children(blocks)
        assert [len(b) for b in batches] == [100, 100, 50]
        assert [blk for batch in batches for blk in batch] == blocks

    def test_custom_size(self):
        assert chunk_children([{}] * 5, size=2) == [[{}, {}], [{}, {}], [{}]]

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            chunk_children([{}], size=0)


class TestSplitString:
    def test_short(self):
        assert split_string("abc") == ["abc"]

    def test_empty(self):
        assert split_string("") == []

    def test_exact_limit(self):
        assert split_string("a" * 2000) == ["a" * 2000]

    def test_over_limit(self):
        assert [len(p) for p in split_string("a" * 4001)] == [2000, 2000, 1]

    def test_emoji_not_split(self):
        parts = split_string("\U0001f600" * 3, limit=2)
        assert parts == ["\U0001f600\U0001f600", "\U0001f600"]

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            split_string("x", limit=0)


class TestRedact:
    def test_sensitive_keys(self):
        result = redact({"notionToken": "ntn_abc", "Authorization": "Bearer x", "title": "t"})
        assert result == {"notionToken": "<redacted>", "Authorization": "<redacted>", "title": "t"}

    def test_token_scrubbed_from_values(self):
        result = redact({"note": "sent ntn_secret_12345678 to api"}, token="ntn_secret_12345678")
        assert result == {"note": "sent <redacted:...5678> to api"}

    def test_short_token_suffix_hidden(self):
        assert redact({"n": "abc"}, token="abc") == {"n": "<redacted:...****>"}

    def test_bearer_in_free_text(self):
        assert redact({"log": "header Bearer abc.def"}) == {"log": "header Bearer <redacted>"}

    def test_nested(self):
        payload = {"request_body": {"children": [{"text": "tok_99999999"}]}}
        result = redact(payload, token="tok_99999999")
        assert result["request_body"]["children"][0]["text"] == "<redacted:...9999>"

    def test_input_not_mutated(self):
        payload = {"token": "x", "inner": {"secret": "y"}}
        redact(payload)
        assert payload == {"token": "x", "inner": {"secret": "y"}}
