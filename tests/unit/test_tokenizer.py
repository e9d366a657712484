"""
Unit tests for text tokenization.
"""
from wordcheck.services.tokenizer import tokenize


def words(text):
    return [token.word for token in tokenize(text)]


class TestTokenize:
    """Tests for word extraction."""

    def test_basic_words_with_offsets(self):
        """Test words and offsets for plain prose."""
        tokens = list(tokenize("This is an exmple."))
        assert [(t.word, t.offset) for t in tokens] == [
            ("This", 0),
            ("is", 5),
            ("an", 8),
            ("exmple", 11),
        ]

    def test_punctuation_excluded(self):
        """Test punctuation never becomes part of a token."""
        assert words("Hello, world! How are you?") == ["Hello", "world", "How", "are", "you"]

    def test_words_with_digits_excluded(self):
        """Test mixed alphanumeric runs produce no tokens."""
        assert words("example123 abc 42 x1y") == ["abc"]

    def test_code_identifiers_excluded(self):
        """Test words touching '_', '*' or '-' are skipped."""
        assert words("snake_case *bold* well-known plain") == ["plain"]

    def test_unicode_letters(self):
        """Test accented letters are part of words."""
        assert words("čudovit café") == ["čudovit", "café"]

    def test_empty_text(self):
        """Test empty and whitespace-only text yields nothing."""
        assert words("") == []
        assert words("   \n\t ") == []

    def test_repeated_words_have_distinct_offsets(self):
        """Test each occurrence of a repeated word gets its own offset."""
        tokens = list(tokenize("teh cat teh dog teh"))
        assert [t.offset for t in tokens if t.word == "teh"] == [0, 8, 16]

    def test_case_preserved(self):
        """Test tokens keep the case they were typed in."""
        assert words("Ljubljana SLOVENIJA") == ["Ljubljana", "SLOVENIJA"]


class TestRemovedSpans:
    """Tests for URL and code-span exclusion."""

    def test_urls_removed(self):
        """Test http, https and www URLs produce no tokens."""
        text = "see https://www.exmple.com and http://foo.bar/baz or www.qux.org now"
        assert words(text) == ["see", "and", "or", "now"]

    def test_inline_code_removed(self):
        """Test inline code spans produce no tokens."""
        assert words("use `exmple` here") == ["use", "here"]

    def test_fenced_code_removed(self):
        """Test fenced code blocks produce no tokens."""
        text = "before\n```python\ndef tset():\n    pass\n```\nafter"
        assert words(text) == ["before", "after"]

    def test_offsets_after_removed_spans_point_into_original(self):
        """Test offsets refer to the unmodified text."""
        text = "`exmple` exmple https://x.io exmple"
        tokens = list(tokenize(text))
        assert [t.offset for t in tokens] == [9, 29]
        for token in tokens:
            assert text[token.offset:token.offset + len(token.word)] == token.word

    def test_word_joined_across_code_span_skipped(self):
        """Test letters stitched together by span removal are not reported."""
        assert words("foo`x`bar baz") == ["baz"]

    def test_tokenize_is_lazy(self):
        """Test tokenize returns a one-shot iterator."""
        tokens = tokenize("one two")
        assert next(tokens).word == "one"
        assert [t.word for t in tokens] == ["two"]

    def test_url_without_word_characters_removed(self):
        """Test a scheme followed only by punctuation is still a URL span."""
        assert words("see https://... wrds") == ["see", "wrds"]
        assert words("x http://a.b/!! y") == ["x", "y"]

    def test_url_trailing_punctuation_kept_outside_span(self):
        """Test sentence punctuation after a URL does not swallow the next word."""
        text = "Visit https://www.example.com. Then leave"
        tokens = list(tokenize(text))
        assert [t.word for t in tokens] == ["Visit", "Then", "leave"]
        assert tokens[1].offset == text.index("Then")
