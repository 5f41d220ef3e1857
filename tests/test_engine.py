"""
Tests for the Redaction Engine.

Tests cover:
- identify: match metadata and pattern-major ordering
- preview: highlight markers
- redact: token substitution and diagnostics
- Default patterns (email, phone, SSN, credit card)
- Sequential rewrite semantics and edge cases
"""

import logging
import re

import pytest

from redactor import (
    HIGHLIGHT_CLASS,
    REDACTION_TOKEN,
    InvalidInputError,
    RedactionEngine,
    identify,
    preview,
    redact,
)

MARK_OPEN = f'<mark class="{HIGHLIGHT_CLASS}">'
MARK_CLOSE = "</mark>"


class TestIdentify:
    """Test suite for identify()."""

    def test_contact_example(self):
        """Email and phone in one sentence yield two matches."""
        result = identify("Contact me at a@b.com or 555-123-4567")

        assert result.count == 2
        assert [m.text for m in result.matches] == ["a@b.com", "555-123-4567"]

    def test_match_metadata(self):
        content = "Contact me at a@b.com or 555-123-4567"
        email, phone = identify(content).matches

        assert email.index == content.index("a@b.com")
        assert email.length == len("a@b.com")
        assert email.pattern == r"[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9.-]+"
        assert content[phone.index:phone.index + phone.length] == "555-123-4567"

    def test_pattern_major_order(self):
        """All matches of the first pattern come before any of the second."""
        result = identify("b1 a1 b2 a2", ["a\\d", "b\\d"])

        assert [m.text for m in result.matches] == ["a1", "a2", "b1", "b2"]
        assert [m.index for m in result.matches] == [3, 9, 0, 6]

    def test_non_overlapping_matches(self):
        result = identify("aaaa", "aa")
        assert [m.index for m in result.matches] == [0, 2]

    def test_offsets_refer_to_original_content(self):
        """identify never rewrites the buffer between patterns."""
        content = "abc abc"
        result = identify(content, ["abc", "c a"])

        assert [(m.text, m.index) for m in result.matches] == [
            ("abc", 0), ("abc", 4), ("c a", 2),
        ]

    def test_to_dict(self):
        data = identify("x a@b.com", "a@b\\.com").to_dict()

        assert data == {
            "matches": [{"text": "a@b.com", "index": 2, "length": 7, "pattern": "a@b\\.com"}],
            "count": 1,
        }

    def test_no_matches(self):
        result = identify("This is a normal page")
        assert result.count == 0
        assert result.matches == ()

    def test_empty_after_invalid_patterns(self):
        """A spec reduced to nothing finds nothing instead of failing."""
        engine = RedactionEngine(on_invalid=lambda e: None)
        assert engine.identify("a@b.com", "(bad").count == 0


class TestDefaultPatterns:
    """Each default category, alone in a string, is found exactly once."""

    @pytest.mark.parametrize("sample", [
        "jane.doe+news@example.co.uk",
        "555-123-4567",
        "(555) 123-4567",
        "+1 555.123.4567",
        "5551234567",
        "123-45-6789",
        "123.45.6789",
        "123456789",
        "4111 1111 1111 1111",
        "4111-1111-1111-1111",
    ])
    def test_single_instance(self, sample):
        result = identify(f"<p>value: {sample}</p>")

        assert result.count == 1
        assert result.matches[0].text == sample

    def test_ssn_spans_full_token(self):
        result = identify("SSN 123-45-6789 on file")

        assert result.count == 1
        match = result.matches[0]
        assert match.text == "123-45-6789"
        assert match.index == 4
        assert match.pattern == r"\b\d{3}[-.]?\d{2}[-.]?\d{4}\b"

    def test_email_upper_case(self):
        """Upper case addresses match through the character classes."""
        assert identify("Mail JOHN@EXAMPLE.COM").matches[0].text == "JOHN@EXAMPLE.COM"

    @pytest.mark.parametrize("sample", [
        "id １２３-４５-６７８９",  # fullwidth SSN
        "٥٥٥-١٢٣-٤٥٦٧",  # Arabic-Indic phone
        "१२३४ १२३४ १२३४ १२३४",
    ])
    def test_non_ascii_digits_ignored(self, sample):
        """Only 0-9 count as digits in the default patterns."""
        assert identify(sample).count == 0
        assert redact(sample) == sample


class TestPreview:
    """Test suite for preview()."""

    def test_wraps_each_match(self):
        result = preview("Contact me at a@b.com or 555-123-4567")

        assert result == (
            f"Contact me at {MARK_OPEN}a@b.com{MARK_CLOSE} "
            f"or {MARK_OPEN}555-123-4567{MARK_CLOSE}"
        )

    def test_unmatched_text_untouched(self):
        content = "<html><body><p>Nothing here</p></body></html>"
        assert preview(content) == content

    def test_marker_count_equals_match_count(self):
        content = "<li>ID-1</li><li>ID-22</li><li>ID-333</li>"
        result = preview(content, "ID-\\d+")

        assert result.count(MARK_OPEN) == 3
        assert result.count(MARK_CLOSE) == 3
        stripped = result.replace(MARK_OPEN, "").replace(MARK_CLOSE, "")
        assert stripped == content

    def test_match_text_not_escaped(self):
        result = preview("a<b", "a<b")
        assert result == f"{MARK_OPEN}a<b{MARK_CLOSE}"

    def test_later_pattern_sees_earlier_markers(self):
        """Markers are not protected from later patterns."""
        result = preview("secret", ["secret", "mark"])

        assert result == (
            f'<{MARK_OPEN}mark{MARK_CLOSE} class="{HIGHLIGHT_CLASS}">secret'
            f"</{MARK_OPEN}mark{MARK_CLOSE}>"
        )


class TestRedact:
    """Test suite for redact()."""

    def test_contact_example(self):
        assert redact("Contact me at a@b.com or 555-123-4567") == (
            "Contact me at [REDACTED] or [REDACTED]"
        )

    def test_no_matches_returns_content_unchanged(self):
        content = "<p>This is a normal page</p>"
        assert redact(content) == content

    def test_empty_string(self):
        assert redact("") == ""

    def test_n_matches_length(self):
        """Each match span is replaced by exactly one token."""
        content = "key=ab12 key=cd34 key=ef56"
        result = redact(content, "key=\\w+")

        assert result.count(REDACTION_TOKEN) == 3
        removed = len("key=ab12") * 3
        assert len(result) == len(content) - removed + 3 * len(REDACTION_TOKEN)

    def test_custom_spec_replaces_defaults(self):
        """With a custom spec, default categories are left alone."""
        result = redact("a@b.com TEST-1234", "TEST-\\d{4}")
        assert result == "a@b.com [REDACTED]"

    def test_precompiled_pattern_spec(self):
        result = redact("Acct acct-1 ACCT-2", re.compile(r"acct-\d", re.IGNORECASE))
        assert result == "Acct [REDACTED] [REDACTED]"

    def test_literal_syntax_source(self):
        assert redact("pin 1234", "/\\d{4}/g") == "pin [REDACTED]"

    def test_invalid_pattern_does_not_abort(self):
        engine = RedactionEngine(on_invalid=lambda e: None)
        assert engine.redact("foo bar", ["(bad", "bar"]) == "foo [REDACTED]"

    def test_later_pattern_sees_earlier_tokens(self):
        """A later pattern can rewrite a token inserted by an earlier one."""
        result = redact("secret", ["secret", "REDACTED"])
        assert result == "[[REDACTED]]"

    def test_does_not_mutate_spec(self):
        spec = ["foo"]
        redact("foo", spec)
        assert spec == ["foo"]

    def test_diagnostics_go_to_injected_logger(self, caplog):
        """Counts are logged to the engine's logger without changing the result."""
        sink = logging.getLogger("test.redactor.sink")
        engine = RedactionEngine(logger=sink)

        with caplog.at_level(logging.DEBUG, logger="test.redactor.sink"):
            result = engine.redact("a1 a2", "a\\d")

        assert result == "[REDACTED] [REDACTED]"
        messages = [r.getMessage() for r in caplog.records if r.name == "test.redactor.sink"]
        assert "Original content length: 5" in messages
        assert "Found 2 matches for pattern: a\\d" in messages
        assert f"Redacted content length: {len(result)}" in messages


class TestInvalidInput:
    """Non-text content is rejected by every operation."""

    @pytest.mark.parametrize("operation", [identify, preview, redact])
    @pytest.mark.parametrize("content", [None, b"bytes", 42])
    def test_rejects_non_text(self, operation, content):
        with pytest.raises(InvalidInputError):
            operation(content)

    def test_invalid_input_is_type_error(self):
        with pytest.raises(TypeError):
            redact(None)
