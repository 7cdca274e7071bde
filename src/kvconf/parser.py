# topmark:header:start
#
#   project      : KVConf
#   file         : parser.py
#   file_relpath : src/kvconf/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse ``key = value`` files into a flat key/value table.

Format rules:
    - One ``key = value`` pair per line; the line is split on the first ``=``.
    - Leading whitespace is ignored; blank lines are skipped.
    - Lines whose first non-whitespace character is ``#`` are comments.
    - Lines without ``=`` are skipped.
    - Keys are right-trimmed; values are trimmed on both sides. Internal
      whitespace and quote characters are kept verbatim.
    - When a key occurs more than once, the last occurrence wins.

Parsing is permissive: irregular lines are dropped, never reported as errors.
Only I/O and decoding failures raise (`SourceReadError`).
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

from kvconf.config.logging import get_logger
from kvconf.constants import COMMENT_PREFIX, KEY_VALUE_SEPARATOR
from kvconf.errors import SourceReadError

if TYPE_CHECKING:
    from kvconf.config.logging import KvconfLogger

logger: KvconfLogger = get_logger(__name__)

# Raw string values keyed by configuration key, in first-seen order.
KeyValueTable = dict[str, str]


def parse_line(line: str) -> tuple[str, str] | None:
    """Split a single line into ``(key, value)``.

    Args:
        line (str): One line of text, with or without its line terminator.

    Returns:
        tuple[str, str] | None: The key/value pair, or None if the line is
            blank, a comment, or has no separator.
    """
    stripped: str = line.lstrip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    key, sep, value = stripped.partition(KEY_VALUE_SEPARATOR)
    if not sep:
        return None

    return key.rstrip(), value.rstrip("\r\n").strip()


def parse(stream: BinaryIO, *, source: Path | str = "<stream>") -> KeyValueTable:
    """Read a byte stream and build its key/value table.

    Args:
        stream (BinaryIO): A readable binary stream positioned at the start of the content.
        source (Path | str): Name of the stream, used in log and error messages.

    Returns:
        KeyValueTable: The parsed table.

    Raises:
        SourceReadError: If reading fails or a line is not valid UTF-8.
    """
    table: KeyValueTable = {}
    lineno = 0
    try:
        for raw_line in stream:
            lineno += 1
            line: str = raw_line.decode("utf-8")
            pair: tuple[str, str] | None = parse_line(line)
            if pair is None:
                logger.trace("%s:%d: skipped %r", source, lineno, line)
                continue
            key, value = pair
            if key in table:
                logger.debug("%s:%d: key [%s] redefined", source, lineno, key)
            table[key] = value
    except UnicodeDecodeError as exc:
        raise SourceReadError(source, f"line {lineno}: {exc}") from exc
    except OSError as exc:
        raise SourceReadError(source, exc) from exc

    logger.debug("Parsed %d key(s) from %s", len(table), source)
    return table


def parse_text(text: str) -> KeyValueTable:
    """Parse in-memory text (see `parse`)."""
    return parse(io.BytesIO(text.encode("utf-8")), source="<text>")


def parse_file(path: Path | str) -> KeyValueTable:
    """Open ``path`` in binary mode and parse it.

    The file handle is released before returning, on success and on error.

    Raises:
        FileNotFoundError: If ``path`` does not exist (left for the caller to classify).
        SourceReadError: If the file cannot be opened or read for any other reason.
    """
    try:
        with Path(path).open("rb") as stream:
            return parse(stream, source=path)
    except FileNotFoundError:
        raise
    except OSError as exc:
        raise SourceReadError(path, exc) from exc
