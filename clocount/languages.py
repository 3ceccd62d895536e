"""Language definitions and per-language statistics."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from clocount.exts import lang_to_exts


@dataclass
class Language:
    """Comment syntax of one language together with the counts gathered for it."""

    name: str
    line_comments: list[str] = field(default_factory=list)
    multi_lines: list[tuple[str, str]] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    code: int = 0
    comments: int = 0
    blanks: int = 0
    total: int = 0
    regex_line_comments: list[re.Pattern[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.line_comments = list(self.line_comments)
        self.multi_lines = [(pair[0], pair[1]) for pair in self.multi_lines]

    def with_regex_line_comments(self, patterns: Iterable[str]) -> Language:
        """Use regular expressions instead of prefixes to spot line comments."""
        self.regex_line_comments = [re.compile(pattern) for pattern in patterns]
        return self

    def fresh_copy(self) -> Language:
        """Return a language with the same syntax but no files and zero counts."""
        return Language(
            name=self.name,
            line_comments=list(self.line_comments),
            multi_lines=list(self.multi_lines),
            regex_line_comments=list(self.regex_line_comments),
        )


_NONE = (("", ""),)
_C = (("/*", "*/"),)
_XML = (("<!--", "-->"),)
_HASKELL = (("{-", "-}"),)
_ML = (("(*", "*)"),)
_DOCSTRING = (('"""', '"""'),)

_BUILTIN: tuple[tuple[str, Sequence[str], Sequence[tuple[str, str]]], ...] = (
    ("ActionScript", ["//"], _C),
    ("Ada", ["--"], _NONE),
    ("Alda", ["#"], _NONE),
    ("Ant", ["<!--"], _XML),
    ("ANTLR", ["//"], _C),
    ("AsciiDoc", [], _NONE),
    ("Assembly", ["//", ";", "#", "@", "|", "!"], _C),
    ("ATS", ["//"], (("/*", "*/"), ("(*", "*)"))),
    ("AutoHotkey", [";"], _NONE),
    ("Awk", ["#"], _NONE),
    ("Arduino Sketch", ["//"], _C),
    ("Ballerina", ["//"], _NONE),
    ("Batch", ["REM", "rem"], _NONE),
    ("Berry", ["#"], (("#-", "-#"),)),
    ("BASH", ["#"], _NONE),
    ("Bicep", ["//"], _C),
    ("BitBake", ["#"], _NONE),
    ("C", ["//"], _C),
    ("C Header", ["//"], _C),
    ("C Shell", ["#"], _NONE),
    ("Cairo", ["//"], _NONE),
    ("Carbon", ["//"], _NONE),
    ("Cap'n Proto", ["#"], _NONE),
    ("Carp", [";"], _NONE),
    ("C#", ["//"], _C),
    ("Chapel", ["//"], _C),
    ("Circom", ["//"], _C),
    ("Clojure", ["#", "#_"], _NONE),
    ("COBOL", ["*", "/"], _NONE),
    ("CoffeeScript", ["#"], (("###", "###"),)),
    ("Coq", ["(*"], _ML),
    ("ColdFusion", [], (("<!---", "--->"),)),
    ("ColdFusion CFScript", ["//"], _C),
    ("CMake", ["#"], _NONE),
    ("C++", ["//"], _C),
    ("C++ Header", ["//"], _C),
    ("Crystal", ["#"], _NONE),
    ("CSS", ["//"], _C),
    ("Cython", ["#"], _DOCSTRING),
    ("CUDA", ["//"], _C),
    ("D", ["//"], _C),
    ("Dart", ["//", "///"], _C),
    ("Dhall", ["--"], _HASKELL),
    ("DTrace", [], _C),
    ("Device Tree", ["//"], _C),
    ("Dune", [";"], _NONE),
    ("Eiffel", ["--"], _NONE),
    ("Elm", ["--"], _HASKELL),
    ("Elixir", ["#"], _NONE),
    ("Erlang", ["%"], _NONE),
    ("Expect", ["#"], _NONE),
    ("Fish", ["#"], _NONE),
    ("Frege", ["--"], _HASKELL),
    ("F*", ["(*", "//"], _ML),
    ("F#", ["(*"], _ML),
    ("Lean", ["--"], (("/-", "-/"),)),
    ("Logtalk", ["%"], _NONE),
    ("Lua", ["--"], (("--[[", "]]"),)),
    ("Lilypond", ["%"], _NONE),
    ("LISP", [";;"], (("#|", "|#"),)),
    ("LiveScript", ["#"], _C),
    ("Factor", ["! "], _NONE),
    ("FORTRAN Legacy", ["c", "C", "!", "*"], _NONE),
    ("FORTRAN Modern", ["!"], _NONE),
    ("Gherkin", ["#"], _NONE),
    ("Gleam", ["//"], _NONE),
    ("GLSL", ["//"], _C),
    ("Go", ["//"], _C),
    ("Groovy", ["//"], _C),
    ("Handlebars", [], (("<!--", "-->"), ("{{!", "}}"))),
    ("Haskell", ["--"], _HASKELL),
    ("Haxe", ["//"], _C),
    ("Hurl", ["#"], _NONE),
    ("Hare", ["//"], _NONE),
    ("HLSL", ["//"], _C),
    ("HTML", ["//", "<!--"], _XML),
    ("Hy", [";"], _NONE),
    ("Idris", ["--"], _HASKELL),
    ("Imba", ["#"], (("###", "###"),)),
    ("Io", ["//", "#"], _C),
    ("SKILL", [";"], _C),
    ("JAI", ["//"], _C),
    ("Janet", ["#"], _NONE),
    ("Java", ["//"], _C),
    ("JSP", ["//"], _C),
    ("JavaScript", ["//"], _C),
    ("Julia", ["#"], (("#:=", ":=#"),)),
    ("Jupyter Notebook", ["#"], _NONE),
    ("Just", ["#"], _NONE),
    ("JSON", [], _NONE),
    ("JSX", ["//"], _C),
    ("KakouneScript", ["#"], _NONE),
    ("Koka", ["//"], _C),
    ("Kotlin", ["//"], _C),
    ("LD Script", ["//"], _C),
    ("LESS", ["//"], _C),
    ("Objective-C", ["//"], _C),
    ("Markdown", ["<!--"], _XML),
    ("Motoko", ["//"], _C),
    ("Nearley", ["#"], _NONE),
    ("Nix", ["#"], _C),
    ("NSIS", ["#", ";"], _C),
    ("Nu", [";", "#"], _NONE),
    ("OCaml", [], _ML),
    ("Objective-C++", ["//"], _C),
    ("Makefile", ["#"], _NONE),
    ("MATLAB", ["%"], (("%{", "}%"),)),
    ("Mercury", ["%"], _C),
    ("Maven", ["<!--"], _XML),
    ("Meson", ["#"], _NONE),
    ("Mojo", ["#"], _NONE),
    ("Move", ["//"], _NONE),
    ("Mustache", [], (("{{!", "}}"),)),
    ("M4", ["#"], _NONE),
    ("Nim", ["#"], (("#[", "]#"),)),
    ("Nunjucks", [], (("{#", "#}"), ("<!--", "-->"))),
    ("lex", [], _C),
    ("Odin", ["//"], _C),
    ("Ohm", ["//"], _C),
    ("PHP", ["#", "//"], _C),
    ("Pascal", ["//"], (("{", ")"),)),
    ("Perl", ["#"], ((":=", ":=cut"),)),
    ("Plain Text", [], _NONE),
    ("Plan9 Shell", ["#"], _NONE),
    ("Pony", ["//"], _C),
    ("PowerShell", ["#"], (("<#", "#>"),)),
    ("Polly", ["<!--"], _XML),
    ("Protocol Buffers", ["//"], _NONE),
    ("PRQL", ["#"], _NONE),
    ("Python", ["#"], _DOCSTRING),
    ("Q", ["/ "], (("\\", "/"), ("/", "\\"))),
    ("QML", ["//"], _C),
    ("R", ["#"], _NONE),
    ("Reason", ["//"], _C),
    ("Rebol", [";"], _NONE),
    ("Red", [";"], _NONE),
    ("Rego", ["#"], _NONE),
    ("RMarkdown", [], _NONE),
    ("RAML", ["#"], _NONE),
    ("Racket", [";"], (("#|", "|#"),)),
    ("ReStructuredText", [], _NONE),
    ("Ring", ["#", "//"], _C),
    ("Ruby", ["#"], ((":=begin", ":=end"),)),
    ("Ruby HTML", ["<!--"], _XML),
    ("Rust", ["//", "///", "//!"], _C),
    ("Scala", ["//"], _C),
    ("Sass", ["//"], _C),
    ("Scheme", [";"], (("#|", "|#"),)),
    ("sed", ["#"], _NONE),
    ("Stan", ["//"], _C),
    ("Starlark", ["#"], _NONE),
    ("Solidity", ["//"], _C),
    ("Bourne Shell", ["#"], _NONE),
    ("Standard ML", [], _ML),
    ("SQL", ["--"], _C),
    ("Svelte", ["//"], (("/*", "*/"), ("<!--", "-->"))),
    ("Swift", ["//"], _C),
    ("Terra", ["--"], (("--[[", "]]"),)),
    ("TeX", ["%"], _NONE),
    ("Inno Setup", [";"], _NONE),
    ("Isabelle", [], _ML),
    ("TLA", ["\\*"], _ML),
    ("Tcl/Tk", ["#"], _NONE),
    ("TOML", ["#"], _NONE),
    ("TypeScript", ["//"], _C),
    ("HCL", ["#", "//"], _C),
    ("Umka", ["//"], _C),
    ("Unity-Prefab", [], _NONE),
    ("MSBuild script", ["<!--"], _XML),
    ("Vala", ["//"], _C),
    ("Verilog", ["//"], _C),
    ("VimL", ['"'], _NONE),
    ("Visual Basic", ["'"], _NONE),
    ("Vue", ["<!--"], _XML),
    ("Vyper", ["#"], _DOCSTRING),
    ("WiX", ["<!--"], _XML),
    ("XML", ["<!--"], _XML),
    ("XML resource", ["<!--"], _XML),
    ("XSLT", ["<!--"], _XML),
    ("XSD", ["<!--"], _XML),
    ("YAML", ["#"], _NONE),
    ("Yacc", ["//"], _C),
    ("Yul", ["//"], _C),
    ("Zephir", ["//"], _C),
    ("Zig", ["//", "///"], _NONE),
    ("Zsh", ["#"], _NONE),
)

_REGEX_LINE_COMMENTS: dict[str, tuple[str, ...]] = {
    "Just": (r"^#[^!].*",),
}


def _builtin_languages() -> dict[str, Language]:
    langs: dict[str, Language] = {}
    for name, line_comments, multi_lines in _BUILTIN:
        lang = Language(name, list(line_comments), list(multi_lines))
        patterns = _REGEX_LINE_COMMENTS.get(name)
        if patterns:
            lang.with_regex_line_comments(patterns)
        langs[name] = lang
    return langs


@dataclass
class DefinedLanguages:
    """All known languages, keyed by language name."""

    langs: dict[str, Language] = field(default_factory=_builtin_languages)

    def formatted(self) -> str:
        """Return one line per language, sorted by name, with its extensions."""
        names = sorted(lang.name for lang in self.langs.values())
        return "".join(f"{name:<30} ({lang_to_exts(name)})\n" for name in names)


def sort_languages(languages: Iterable[Language], tag: str) -> list[Language]:
    """Return the languages ordered by ``tag``: name, files, comment, blank or code."""
    if tag == "name":
        key = lambda lang: lang.name  # noqa: E731
    elif tag == "files":
        key = lambda lang: (-len(lang.files), -lang.code)  # noqa: E731
    elif tag == "comment":
        key = lambda lang: (-lang.comments, -lang.code)  # noqa: E731
    elif tag == "blank":
        key = lambda lang: (-lang.blanks, -lang.code)  # noqa: E731
    else:
        key = lambda lang: -lang.code  # noqa: E731
    return sorted(languages, key=key)