"""
Tokenizer for the people search index.
Records and queries share the same rules: lower-case, then split on runs of whitespace.
"""

import re
from pathlib import Path

from nltk.tokenize import WhitespaceTokenizer

_TOKENIZER = WhitespaceTokenizer()
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def tokenize(text: str) -> list[str]:
    """
    Lower-case text and split it on whitespace runs.
    Empty pieces produced by leading/trailing whitespace are discarded.
    """
    if not text:
        return []
    return _TOKENIZER.tokenize(text.lower())


def read_text_file(filepath: Path) -> str:
    """
    Read a text file as UTF-8, falling back to Windows-1252.
    Bytes undefined in both (e.g. 0x81 outside a UTF-8 sequence) are an error.
    """
    for encoding in ("utf-8", "cp1252"):
        try:
            return Path(filepath).read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")


def split_lines(text: str) -> list[str]:
    """
    Split text on \\n, \\r\\n or \\r only. A trailing line break does not
    start another line. Other separators (form feed, U+2028, ...) stay in the line.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines
