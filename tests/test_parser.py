"""Test parsing and rendering of user_pref directives."""

import pytest

from pref_overrides.lib.overrides import (
    OverrideSet,
    ParseError,
    PreferenceOverride,
    dump,
    load,
    load_file,
    parse_line,
    render,
)


class TestParseLine:
    def test_integer_value(self):
        override = parse_line('user_pref("network.trr.mode", 3);')
        assert override == PreferenceOverride("network.trr.mode", 3)
        assert type(override.value) is int

    def test_boolean_values(self):
        assert parse_line('user_pref("signon.rememberSignons", false);').value is False
        assert parse_line('user_pref("privacy.sanitize.sanitizeOnShutdown", true);').value is True

    def test_string_value(self):
        override = parse_line(
            'user_pref("network.trr.uri", "https://dns.quad9.net/dns-query");'
        )
        assert override.value == "https://dns.quad9.net/dns-query"

    def test_empty_string_value(self):
        assert parse_line('user_pref("browser.bookmarks.file", "");').value == ""

    def test_negative_integer(self):
        assert parse_line('user_pref("a.b", -1);').value == -1

    def test_escaped_string(self):
        override = parse_line(r'user_pref("a.b", "say \"hi\" to C:\\dir");')
        assert override.value == 'say "hi" to C:\\dir'

    def test_browser_escape_sequences(self):
        override = parse_line(r'user_pref("a.b", "l1\nl2\r\x41\u00e9\'");')
        assert override.value == "l1\nl2\rA\u00e9'"

    def test_surrogate_pair_escape(self):
        override = parse_line(r'user_pref("a.b", "\ud83d\ude00");')
        assert override.value == "\U0001F600"

    def test_unknown_escape(self):
        with pytest.raises(ParseError, match="invalid escape sequence"):
            parse_line(r'user_pref("a.b", "C:\qdir");')

    def test_truncated_unicode_escape(self):
        with pytest.raises(ParseError, match="invalid escape sequence"):
            parse_line(r'user_pref("a.b", "\u12");')

    def test_unpaired_surrogate(self):
        with pytest.raises(ParseError, match="unpaired surrogate"):
            parse_line(r'user_pref("a.b", "\ud83d");')

    def test_escaped_name(self):
        assert parse_line(r'user_pref("a\x2eb", 1);').name == "a.b"

    def test_string_containing_closing_paren(self):
        assert parse_line('user_pref("a.b", "x); y");').value == "x); y"

    def test_trailing_comment(self):
        override = parse_line('user_pref("network.trr.mode", 3); // Quad9 only')
        assert override.value == 3

    def test_flexible_whitespace(self):
        override = parse_line('  user_pref( "a.b" ,  true ) ;  ')
        assert override == PreferenceOverride("a.b", True)

    def test_line_number_recorded(self):
        assert parse_line('user_pref("a.b", 1);', line_no=7).line_no == 7

    def test_missing_comma(self):
        with pytest.raises(ParseError, match="expected user_pref"):
            parse_line('user_pref("x" true)')

    def test_missing_semicolon(self):
        with pytest.raises(ParseError):
            parse_line('user_pref("x", true)')

    def test_empty_name(self):
        with pytest.raises(ParseError, match="empty preference name"):
            parse_line('user_pref("", true);')

    @pytest.mark.parametrize(
        "literal", ["True", "1.5", "0x10", "yes", '"open', "\u0663", "-\u0661\u0662"]
    )
    def test_untyped_literal(self, literal):
        with pytest.raises(ParseError, match="cannot type value literal"):
            parse_line(f'user_pref("a.b", {literal});')

    def test_integer_out_of_range(self):
        with pytest.raises(ParseError, match="integer out of range"):
            parse_line('user_pref("a.b", 2147483648);')

    def test_error_carries_position(self):
        with pytest.raises(ParseError) as excinfo:
            parse_line("garbage", line_no=4, source_name="user.js")
        assert excinfo.value.line_no == 4
        assert str(excinfo.value).startswith("user.js:4:")


class TestLoad:
    def test_skips_comments_and_blank_lines(self, sample_source):
        overrides = load(sample_source)
        assert overrides.as_dict() == {
            "network.trr.mode": 3,
            "network.trr.uri": "https://dns.quad9.net/dns-query",
            "signon.rememberSignons": False,
        }

    def test_preserves_declaration_order(self, sample_source):
        assert load(sample_source).names == [
            "network.trr.mode",
            "network.trr.uri",
            "signon.rememberSignons",
        ]

    def test_later_duplicate_wins(self):
        overrides = load('user_pref("a.b", 1);\nuser_pref("c.d", 2);\nuser_pref("a.b", 3);\n')
        assert overrides.as_dict() == {"a.b": 3, "c.d": 2}
        assert overrides.replaced == ["a.b"]

    def test_block_comments(self):
        source = (
            "/* Header\n"
            'user_pref("ignored.pref", true);\n'
            "*/\n"
            '/* inline */ user_pref("kept.pref", 1);\n'
        )
        assert load(source).as_dict() == {"kept.pref": 1}

    def test_unterminated_block_comment(self):
        with pytest.raises(ParseError, match="unterminated block comment"):
            load('user_pref("a.b", 1);\n/* never closed\n')

    def test_malformed_line_aborts_whole_load(self):
        source = 'user_pref("a.b", 1);\nuser_pref("x" true)\nuser_pref("c.d", 2);\n'
        with pytest.raises(ParseError) as excinfo:
            load(source)
        assert excinfo.value.line_no == 2

    def test_empty_source(self):
        assert len(load("")) == 0

    def test_leading_byte_order_mark(self):
        assert load('\ufeffuser_pref("a.b", 1);\n').as_dict() == {"a.b": 1}

    def test_byte_order_mark_in_file(self, tmp_path):
        path = tmp_path / "user.js"
        path.write_text('user_pref("a.b", true);\r\n', encoding="utf-8-sig")
        assert load_file(path).as_dict() == {"a.b": True}

    def test_line_separator_inside_value(self):
        overrides = load('user_pref("a.b", "x\u2028y");\nuser_pref("c.d", 1);\n')
        assert overrides.get("a.b").value == "x\u2028y"
        assert overrides.get("c.d").line_no == 2

    def test_load_file(self, overrides_path):
        overrides = load_file(overrides_path)
        assert len(overrides) == 44
        assert overrides.get("network.trr.mode").value == 3
        assert overrides.get("privacy.sanitize.timeSpan").value == 0
        assert overrides.get("browser.bookmarks.file").value == ""
        assert overrides.get("extensions.pocket.enabled").value is False

    def test_load_file_error_names_path(self, tmp_path):
        path = tmp_path / "user.js"
        path.write_text('user_pref("a.b", nope);\n', encoding="utf-8")
        with pytest.raises(ParseError, match="user.js:1"):
            load_file(path)


class TestDump:
    def test_render(self):
        assert render("network.trr.mode", 3) == 'user_pref("network.trr.mode", 3);'
        assert render("a.b", False) == 'user_pref("a.b", false);'
        assert render("a.b", 'x"y') == 'user_pref("a.b", "x\\"y");'

    def test_render_escapes_control_characters(self):
        assert render("a.b", "l1\nl2\r\x01\\") == r'user_pref("a.b", "l1\nl2\r\x01\\");'

    def test_escaped_values_survive_reload(self):
        text = r'user_pref("a.b", "line1\nline2 \"q\" \\ \x07 é");' + "\n"
        overrides = load(text)
        assert load(dump(overrides)) == overrides
        assert dump(overrides) == r'user_pref("a.b", "line1\nline2 \"q\" \\ \x07 é");' + "\n"

    def test_header(self):
        text = dump(OverrideSet([PreferenceOverride("a.b", True)]), header="// hi")
        assert text == '// hi\n\nuser_pref("a.b", true);\n'

    def test_reload_gives_same_overrides(self, overrides_path):
        overrides = load_file(overrides_path)
        assert load(dump(overrides)) == overrides
