"""Parsing and rendering of ``user_pref(...)`` directive files."""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from pref_overrides.lib.overrides.errors import ParseError
from pref_overrides.lib.overrides.models import (
    OverrideSet,
    PreferenceOverride,
    PrefValue,
)

logger = logging.getLogger(__name__)

DIRECTIVE_RE = re.compile(
    r"^\s*user_pref\s*\(\s*"
    r'"(?P<name>(?:[^"\\]|\\.)*)"'
    r"\s*,\s*"
    r'(?P<value>"(?:[^"\\]|\\.)*"|[^\s,)]+)'
    r"\s*\)\s*;\s*(?://.*)?$"
)
STRING_RE = re.compile(r'^"(?:[^"\\]|\\.)*"$')
INTEGER_RE = re.compile(r"^-?[0-9]+$")
ESCAPE_RE = re.compile(r"\\(u[0-9A-Fa-f]{4}|x[0-9A-Fa-f]{2}|.)", re.DOTALL)

# Escape sequences understood by the browser's pref parser
SIMPLE_ESCAPES = {'"': '"', "'": "'", "\\": "\\", "n": "\n", "r": "\r"}
ESCAPE_TABLE = {ord("\\"): "\\\\", ord('"'): '\\"', ord("\n"): "\\n", ord("\r"): "\\r"}
ESCAPE_TABLE.update(
    {code: f"\\x{code:02x}" for code in list(range(0x20)) + [0x7F] if code not in ESCAPE_TABLE}
)

# Integer prefs are stored as signed 32-bit values by the browser
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _replace_escape(match: "re.Match") -> str:
    sequence = match.group(1)
    if len(sequence) > 1:
        return chr(int(sequence[1:], 16))
    if sequence in SIMPLE_ESCAPES:
        return SIMPLE_ESCAPES[sequence]
    raise ValueError(f"invalid escape sequence \\{sequence}")


def _unescape(text: str) -> str:
    """Decode escape sequences, raising ValueError on ones the browser rejects."""
    decoded = ESCAPE_RE.sub(_replace_escape, text)
    # Consecutive \uHHHH escapes may spell a surrogate pair
    try:
        return decoded.encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeDecodeError:
        raise ValueError("unpaired surrogate in \\u escape") from None


def _escape(text: str) -> str:
    return text.translate(ESCAPE_TABLE)


def parse_value(
    token: str, line: str, line_no: int = 1, source_name: Optional[str] = None
) -> PrefValue:
    """
    Type a value literal as boolean, integer or string.

    Args:
        token (str): The literal as written in the directive
        line (str): The full directive line, used for error reporting
        line_no (int): Line number of the directive
        source_name (str, optional): Name of the source being parsed

    Returns:
        PrefValue: The typed value

    Raises:
        ParseError: If the literal is not a boolean, integer or string
    """
    if token == "true":
        return True
    if token == "false":
        return False
    if STRING_RE.match(token):
        try:
            return _unescape(token[1:-1])
        except ValueError as e:
            raise ParseError(line_no, line, str(e), source_name) from e
    if INTEGER_RE.match(token):
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            raise ParseError(line_no, line, "integer out of range", source_name)
        return value
    raise ParseError(
        line_no, line, f"cannot type value literal {token!r}", source_name
    )


def parse_line(
    line: str, line_no: int = 1, source_name: Optional[str] = None
) -> PreferenceOverride:
    """
    Parse a single ``user_pref("name", value);`` directive.

    Args:
        line (str): The directive line
        line_no (int): Line number of the directive
        source_name (str, optional): Name of the source being parsed

    Returns:
        PreferenceOverride: The parsed override

    Raises:
        ParseError: If the line is not a well-formed directive
    """
    match = DIRECTIVE_RE.match(line)
    if not match:
        raise ParseError(
            line_no, line, 'expected user_pref("name", value);', source_name
        )

    try:
        name = _unescape(match.group("name"))
    except ValueError as e:
        raise ParseError(line_no, line, str(e), source_name) from e
    if not name:
        raise ParseError(line_no, line, "empty preference name", source_name)

    value = parse_value(match.group("value"), line, line_no, source_name)
    return PreferenceOverride(name=name, value=value, line_no=line_no)


def load(source: str, source_name: Optional[str] = None) -> OverrideSet:
    """
    Parse override source text into an OverrideSet.

    Blank lines, ``//`` comments and ``/* ... */`` comments are skipped, as is a
    leading byte order mark. The whole source is parsed before anything is
    returned, so a malformed line never yields a partial set.

    Args:
        source (str): Text containing one directive per line
        source_name (str, optional): Name used in error messages

    Returns:
        OverrideSet: Overrides in declaration order

    Raises:
        ParseError: On the first malformed line
    """
    overrides: List[PreferenceOverride] = []
    if source.startswith("\ufeff"):
        source = source[1:]

    in_comment = False
    comment_start = 0

    # Lines end at CR or LF only
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line
        if in_comment:
            end = line.find("*/")
            if end == -1:
                continue
            in_comment = False
            line = line[end + 2 :]

        stripped = line.strip()
        if stripped.startswith("/*"):
            end = stripped.find("*/", 2)
            if end == -1:
                in_comment = True
                comment_start = line_no
                continue
            stripped = stripped[end + 2 :].strip()

        if not stripped or stripped.startswith("//"):
            continue

        overrides.append(parse_line(stripped, line_no, source_name))

    if in_comment:
        raise ParseError(
            comment_start, "/*", "unterminated block comment", source_name
        )

    override_set = OverrideSet(overrides)
    for name in override_set.replaced:
        logger.debug(f"Preference {name} declared more than once, last value wins")
    logger.debug(
        f"Loaded {len(override_set)} overrides from {source_name or 'source text'}"
    )
    return override_set


def load_file(path: Union[str, Path], encoding: str = "utf-8") -> OverrideSet:
    """
    Read and parse an override file.

    Args:
        path (str | Path): File to read
        encoding (str): Text encoding of the file

    Returns:
        OverrideSet: Overrides in declaration order
    """
    path = Path(path)
    return load(path.read_text(encoding=encoding), source_name=str(path))


def format_value(value: PrefValue) -> str:
    """Render a value as a directive literal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return f'"{_escape(value)}"'


def render(name: str, value: PrefValue) -> str:
    """Render a single ``user_pref`` directive."""
    return f'user_pref("{_escape(name)}", {format_value(value)});'


def dump(override_set: OverrideSet, header: Optional[str] = None) -> str:
    """
    Render an OverrideSet back into directive text.

    Args:
        override_set (OverrideSet): Overrides to render
        header (str, optional): Comment block written before the directives

    Returns:
        str: Directive text ending with a newline
    """
    lines = []
    if header:
        lines.append(header.rstrip())
        lines.append("")
    lines.extend(render(o.name, o.value) for o in override_set)
    return "\n".join(lines) + "\n"
