"""Work out the file type of a path from its name, extension, shebang or content."""

from __future__ import annotations

import os
import re
from typing import Optional

from clocount.options import ClocOptions

_RE_SHEBANG_ENV = re.compile(r"^#! *(\S+/env) ([a-zA-Z]+)", re.ASCII)
_RE_SHEBANG_LANG = re.compile(r"^#! *[.a-zA-Z/]+/([a-zA-Z]+)", re.ASCII)

_SHEBANG_TO_EXT = {
    "gosh": "scm",
    "make": "make",
    "perl": "pl",
    "rc": "plan9sh",
    "python": "py",
    "ruby": "rb",
    "escript": "erl",
}

_AMBIGUOUS_EXTS = frozenset({".m", ".v", ".fs", ".r", ".ts"})

_BY_BASENAME = {
    "meson.build": "meson",
    "meson_options.txt": "meson",
    "CMakeLists.txt": "cmake",
    "configure.ac": "m4",
    "Makefile.am": "makefile",
    "build.xml": "Ant",
    "pom.xml": "maven",
}

_BY_LOWER_BASENAME = {
    "justfile": "just",
    "makefile": "makefile",
    "nukefile": "nu",
    "dune": "dune",
}

_SKIPPED_LOWER_BASENAMES = frozenset({"rebar"})

_OBJC_HINT = re.compile(
    r"^\s*(@interface|@implementation|@protocol|@end|#import|#include)\b", re.M
)
_MERCURY_HINT = re.compile(r"^:-\s*(module|interface|implementation|import_module)\b", re.M)
_MATLAB_HINT = re.compile(r"^\s*(function\b|%|end\s*$)", re.M)
_COQ_HINT = re.compile(
    r"^\s*(Require|Theorem|Lemma|Proof|Qed|Definition|Inductive|Fixpoint)\b", re.M
)
_GLSL_HINT = re.compile(
    r"#version\b|\bgl_FragColor\b|\buniform\b|\bvarying\b|\bvoid\s+main\s*\("
)
_REBOL_HINT = re.compile(r"\bREBOL\s*\[", re.I)
_QT_TS_HINT = re.compile(r"^\s*(<\?xml|<!DOCTYPE TS|<TS\b)")
_GETTEXT_MAGICS = (b"\xde\x12\x04\x95", b"\x95\x04\x12\xde")


def _ext(path: str) -> str:
    """Return the suffix of the last path element starting at its final dot."""
    base = path.rsplit("/", 1)[-1].rsplit(os.sep, 1)[-1]
    idx = base.rfind(".")
    return base[idx:] if idx >= 0 else ""


def _base(path: str) -> str:
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep if path else "."
    return os.path.basename(stripped)


def get_shebang(line: str) -> Optional[str]:
    """Return the file type named by a shebang line, or None if there is none."""
    match = _RE_SHEBANG_ENV.match(line)
    if match:
        lang = match.group(2)
        return _SHEBANG_TO_EXT.get(lang, lang)
    match = _RE_SHEBANG_LANG.match(line)
    if match:
        lang = match.group(1)
        return _SHEBANG_TO_EXT.get(lang, lang)
    return None


def file_type_by_shebang(path: str) -> Optional[str]:
    """Read the first line of ``path`` and return the type its shebang names."""
    try:
        with open(path, "rb") as handle:
            line = handle.readline()
    except OSError:
        return None
    if not line.endswith(b"\n"):
        return None
    line = line.lstrip()
    if len(line) > 2 and line.startswith(b"#!"):
        return get_shebang(line.decode("utf-8", errors="replace"))
    return None


def guess_ambiguous_language(path: str, content: bytes) -> str:
    """Tell apart languages that share an extension by looking at the content.

    Returns a key of the extension table, or an empty string when the content
    is not source code of any candidate.
    """
    ext = _ext(path)
    if ext == ".mo":
        return "" if content[:4] in _GETTEXT_MAGICS else "Motoko"

    text = content.decode("utf-8", errors="replace")
    if ext == ".m":
        if _OBJC_HINT.search(text):
            return "Objective-C"
        if _MERCURY_HINT.search(text):
            return "Mercury"
        if _MATLAB_HINT.search(text):
            return "Matlab"
        return "Objective-C"
    if ext == ".v":
        return "Coq" if _COQ_HINT.search(text) else "Verilog"
    if ext == ".fs":
        return "GLSL" if _GLSL_HINT.search(text) else "F#"
    if ext == ".r":
        return "Rebol" if _REBOL_HINT.search(text) else "R"
    if ext == ".ts":
        return "XML" if _QT_TS_HINT.match(text) else "TypeScript"
    return ""


def get_file_type(path: str, opts: Optional[ClocOptions] = None) -> Optional[str]:
    """Return the extension-table key for ``path``, or None if it has no type."""
    opts = opts if opts is not None else ClocOptions()
    ext = _ext(path)
    base = _base(path)

    if ext in _AMBIGUOUS_EXTS or ext == ".mo":
        try:
            with open(path, "rb") as handle:
                content = handle.read()
        except OSError:
            return None
        lang = guess_ambiguous_language(path, content)
        if opts.debug:
            print(f"path={path}, lang={lang}")
        return lang

    if base in _BY_BASENAME:
        return _BY_BASENAME[base]

    lower = base.lower()
    if lower in _BY_LOWER_BASENAME:
        return _BY_LOWER_BASENAME[lower]
    if lower in _SKIPPED_LOWER_BASENAMES:
        return None

    shebang = file_type_by_shebang(path)
    if shebang is not None:
        return shebang

    if len(ext) >= 2:
        return ext[1:]
    return None