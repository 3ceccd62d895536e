"""Classification of source lines into code, comment and blank lines."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import IO, Optional, Union

from clocount.languages import Language
from clocount.options import ClocOptions

_MAX_TOKEN = 1024 * 1024
_BOM = "\ufeff"


@dataclass
class ClocFile:
    """Line counts for one file."""

    code: int = 0
    comments: int = 0
    blanks: int = 0
    name: str = ""
    lang: str = ""


def sort_files(files: Iterable[ClocFile], tag: str) -> list[ClocFile]:
    """Return the files ordered by ``tag``: name, comment, blank or code."""
    if tag == "name":
        key = lambda f: f.name  # noqa: E731
    elif tag == "comment":
        key = lambda f: (-f.comments, -f.code)  # noqa: E731
    elif tag == "blank":
        key = lambda f: (-f.blanks, -f.code)  # noqa: E731
    else:
        key = lambda f: -f.code  # noqa: E731
    return sorted(files, key=key)


def trim_bom(line: str) -> str:
    """Drop a leading UTF-8 byte order mark."""
    return line[1:] if line.startswith(_BOM) else line


def contains_comment(line: str, multi_lines: Sequence[Sequence[str]]) -> bool:
    """Tell whether any block comment delimiter occurs in ``line``."""
    return any(delim in line for pair in multi_lines for delim in pair)


class _Kind(enum.Enum):
    BLANK = "BLNK"
    CODE = "CODE"
    COMMENT = "COMM"


class _LineClassifier:
    def __init__(self, language: Language) -> None:
        self.language = language
        self.in_comments: list[tuple[str, str]] = []
        self.first_line = True

    def _starts_block(self, line: str) -> bool:
        return any(begin and line.startswith(begin) for begin, _ in self.language.multi_lines)

    def _is_line_comment(self, line: str) -> bool:
        lang = self.language
        if lang.regex_line_comments:
            for pattern in lang.regex_line_comments:
                if pattern.search(line):
                    return not self._starts_block(line)
            return False
        for prefix in lang.line_comments:
            if line.startswith(prefix):
                return not self._starts_block(line)
        return False

    def classify(self, line: str) -> tuple[_Kind, str]:
        multi = self.language.multi_lines
        if not line:
            return _Kind.BLANK, line

        # A shebang counts as code.
        if self.first_line and line.startswith("#!"):
            self.first_line = False
            return _Kind.CODE, line

        if not self.in_comments:
            if self.first_line:
                line = trim_bom(line)
            if self._is_line_comment(line):
                return _Kind.COMMENT, line
            if not multi or not contains_comment(line, multi):
                return _Kind.CODE, line

        if len(multi) == 1 and multi[0][0] == "":
            return _Kind.CODE, line

        return self._scan_blocks(line), line

    def _scan_blocks(self, line: str) -> _Kind:
        multi = self.language.multi_lines
        stack = self.in_comments
        length = len(line)
        code_flags = [False] * len(multi)
        pos = 0
        while pos < length:
            for idx, (begin, end) in enumerate(multi):
                if (
                    pos + len(begin) <= length
                    and line.startswith(begin, pos)
                    and (begin != end or not stack)
                ):
                    pos += len(begin)
                    stack.append((begin, end))
                    continue
                if stack:
                    closing = stack[-1][1]
                    if pos + len(closing) <= length and line.startswith(closing, pos):
                        stack.pop()
                        pos += len(closing)
                elif pos < length and not line[pos].isspace():
                    code_flags[idx] = True
            pos += 1
        return _Kind.CODE if all(code_flags) else _Kind.COMMENT


def _iter_lines(stream: Iterable[Union[str, bytes]]) -> Iterator[str]:
    for raw in stream:
        if isinstance(raw, (bytes, bytearray)):
            if len(raw) > _MAX_TOKEN:
                return
            text = bytes(raw).decode("utf-8", errors="surrogateescape")
        else:
            text = raw
        if text.endswith("\n"):
            text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
        yield text


def analyze_reader(
    filename: str,
    language: Language,
    stream: Union[IO[str], IO[bytes], Iterable[Union[str, bytes]]],
    opts: Optional[ClocOptions] = None,
) -> ClocFile:
    """Count code, comment and blank lines read from ``stream``."""
    opts = opts if opts is not None else ClocOptions()
    if opts.debug:
        print(f"filename={filename}")

    result = ClocFile(name=filename, lang=language.name)
    classifier = _LineClassifier(language)
    callbacks = {
        _Kind.BLANK: opts.on_blank,
        _Kind.CODE: opts.on_code,
        _Kind.COMMENT: opts.on_comment,
    }

    for original in _iter_lines(stream):
        kind, line = classifier.classify(original.strip())
        if kind is _Kind.BLANK:
            result.blanks += 1
        elif kind is _Kind.CODE:
            result.code += 1
        else:
            result.comments += 1

        callback = callbacks[kind]
        if callback is not None:
            callback(line)

        if opts.debug:
            in_comments = "true" if classifier.in_comments else "false"
            print(
                f"[{kind.value}, cd:{result.code}, cm:{result.comments}, "
                f"bk:{result.blanks}, iscm:{in_comments}] {original}"
            )

    return result


def analyze_file(
    filename: str, language: Language, opts: Optional[ClocOptions] = None
) -> ClocFile:
    """Count the lines of ``filename``; an unreadable file yields empty counts."""
    try:
        handle = open(filename, "rb")
    except OSError:
        return ClocFile(name=filename)
    with handle:
        return analyze_reader(filename, language, handle, opts)