import pytest

from logdorak.sanitize import LINE_ENDINGS, concat_sanitized, strip_line_endings, to_text


def test_concat_strings():
    assert concat_sanitized(["a", "b"]) == "ab"


def test_concat_mixed_types():
    assert concat_sanitized(["Value: ", 42, "!"]) == "Value: 42!"


def test_crlf_removed():
    assert concat_sanitized(["bad\r\ninput"]) == "badinput"


def test_forged_line_is_flattened():
    user_input = "bob\n2024-01-01 12:00:00 ERROR admin password reset"
    message = concat_sanitized(["Login attempt for ", user_input])
    assert "\n" not in message
    assert message == "Login attempt for bob2024-01-01 12:00:00 ERROR admin password reset"


def test_line_endings_removed_from_non_string_fragments():
    class Multiline:
        def __str__(self):
            return "first\rsecond\nthird"

    assert concat_sanitized([Multiline()]) == "firstsecondthird"


def test_none_uses_placeholder():
    assert concat_sanitized([None]) == "None"
    assert concat_sanitized(["id=", None], placeholder="null") == "id=null"


def test_empty_parts():
    assert concat_sanitized([]) == ""
    assert concat_sanitized(["", ""]) == ""


def test_no_separator_between_parts():
    assert concat_sanitized(["x", 1, 2.5, True]) == "x12.5True"


def test_other_whitespace_kept():
    assert concat_sanitized(["a\tb", " c "]) == "a\tb c "


@pytest.mark.parametrize("text", ["", "plain", "tab\there", "unicode °C"])
def test_strip_is_identity_on_clean_text(text):
    assert strip_line_endings(text) == text
    assert strip_line_endings(strip_line_endings(text)) == text


def test_strip_is_idempotent():
    once = strip_line_endings("\r\na\n\nb\r")
    assert once == "ab"
    assert strip_line_endings(once) == once


def test_to_text():
    assert to_text(42) == "42"
    assert to_text(None) == "None"
    assert to_text(None, placeholder="-") == "-"
    assert to_text(b"raw") == "b'raw'"


def test_line_endings_pattern():
    assert LINE_ENDINGS.findall("a\rb\nc\r\n") == ["\r", "\n", "\r", "\n"]
