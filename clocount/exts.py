"""Mapping from file extensions (and a few pseudo-extensions) to language names."""

from __future__ import annotations

# Extensions grouped by the language they belong to, separated by whitespace.
# A few entries are pseudo-extensions: names that content detection returns
# for extensions shared by several languages ('.m', '.fs', '.ts', '.mo', ...).
_EXTENSIONS_BY_LANGUAGE: dict[str, str] = {
    "ActionScript": "as",
    "Ada": "ada adb ads",
    "Alda": "alda",
    "ANTLR": "g4",
    "Ant": "Ant",
    "Arduino Sketch": "ino",
    "AsciiDoc": "adoc asciidoc",
    "Assembly": "asm S s",
    "ATS": "dats sats hats",
    "AutoHotkey": "ahk",
    "Awk": "awk",
    "Ballerina": "bal",
    "BASH": "bash",
    "Batch": "bat btm cmd",
    "Berry": "be",
    "Bicep": "bicep",
    "BitBake": "bb",
    "Bourne Shell": "sh",
    "C": "c ec pgc",
    "C Header": "h",
    "C Shell": "csh",
    "C#": "cs",
    "C++": "cc cpp cxx pcc c++",
    "C++ Header": "hpp hh hxx",
    "Cairo": "cairo",
    "Cap'n Proto": "capnp",
    "Carbon": "carbon",
    "Carp": "carp",
    "Chapel": "chpl",
    "Circom": "circom",
    "Clojure": "clj",
    "CMake": "cmake",
    "COBOL": "cbl",
    "CoffeeScript": "coffee",
    "ColdFusion": "cfm",
    "ColdFusion CFScript": "cfc",
    "Coq": "Coq",
    "Crystal": "cr",
    "CSS": "css",
    "CUDA": "cu",
    "Cython": "pxd pyx",
    "D": "d",
    "Dart": "dart",
    "Device Tree": "dts dtsi",
    "Dhall": "dhall",
    "DTrace": "dtrace",
    "Dune": "dune",
    "Eiffel": "e",
    "Elixir": "ex exs",
    "Elm": "elm",
    "Erlang": "erl hrl",
    "Expect": "exp",
    "F#": "F#",
    "F*": "fst",
    "Factor": "factor",
    "Fish": "fish",
    "FORTRAN Legacy": "f F f77 for ftn pfo",
    "FORTRAN Modern": "f90 F90 f95 f03 f08",
    "Frege": "fr",
    "Gherkin": "feature",
    "Gleam": "gleam",
    "GLSL": "GLSL vs",
    "Go": "go go2",
    "Groovy": "groovy gradle",
    "Handlebars": "hbs",
    "Hare": "ha",
    "Haskell": "hs",
    "Haxe": "hx",
    "HCL": "tf",
    "HLSL": "shader cg cginc hlsl",
    "HTML": "html",
    "Hurl": "hurl",
    "Hy": "hy",
    "Idris": "idr",
    "Imba": "imba",
    "Inno Setup": "iss",
    "Io": "io",
    "Isabelle": "thy",
    "JAI": "jai",
    "Janet": "janet",
    "Java": "java",
    "JavaScript": "js",
    "JSON": "json",
    "JSP": "jsp",
    "JSX": "jsx",
    "Julia": "jl",
    "Jupyter Notebook": "ipynb",
    "Just": "just",
    "KakouneScript": "kak",
    "Koka": "kk",
    "Kotlin": "kt kts",
    "LD Script": "lds",
    "Lean": "lean hlean",
    "LESS": "less",
    "lex": "l",
    "Lilypond": "ly",
    "LISP": "el lisp lsp sc",
    "LiveScript": "ls",
    "Logtalk": "lgt",
    "Lua": "lua",
    "M4": "m4",
    "Makefile": "makefile",
    "Markdown": "md markdown",
    "MATLAB": "Matlab",
    "Maven": "maven",
    "Mercury": "Mercury",
    "Meson": "meson",
    "Mojo": "mojo \U0001f525",
    "Motoko": "mo Motoko",
    "Move": "move",
    "MSBuild script": "csproj vbproj vcproj",
    "Mustache": "mustache",
    "Nearley": "ne",
    "Nim": "nim",
    "Nix": "nix",
    "NSIS": "nsi nsh",
    "Nu": "nu",
    "Nunjucks": "njk",
    "Objective-C": "Objective-C",
    "Objective-C++": "mm",
    "OCaml": "ML ml mli mll mly",
    "Odin": "odin",
    "Ohm": "ohm",
    "Pascal": "pas",
    "Perl": "PL pl pm",
    "PHP": "php",
    "Plain Text": "text txt",
    "Plan9 Shell": "plan9sh",
    "Polly": "polly",
    "Pony": "pony",
    "PowerShell": "ps1",
    "Protocol Buffers": "proto",
    "PRQL": "prql",
    "Python": "py",
    "Q": "q",
    "QML": "qml",
    "R": "r R",
    "Racket": "rkt",
    "RAML": "raml",
    "Reason": "re rei",
    "Rebol": "Rebol",
    "Red": "red",
    "Rego": "rego",
    "ReStructuredText": "rst",
    "Ring": "ring",
    "RMarkdown": "Rmd",
    "Ruby": "rake rb",
    "Ruby HTML": "rhtml",
    "Rust": "rs",
    "Sass": "sass scss",
    "Scala": "scala",
    "Scheme": "scm",
    "sed": "sed",
    "SKILL": "il",
    "Solidity": "sol",
    "SQL": "sql",
    "Stan": "stan",
    "Standard ML": "sml",
    "Starlark": "star",
    "Svelte": "svelte",
    "Swift": "swift",
    "Tcl/Tk": "tcl",
    "Terra": "t",
    "TeX": "tex sty",
    "TLA": "tla",
    "TOML": "toml",
    "TypeScript": "TypeScript tsx",
    "Umka": "um",
    "Unity-Prefab": "mat prefab",
    "Vala": "vala",
    "Verilog": "Verilog",
    "VimL": "vim",
    "Visual Basic": "vb",
    "Vue": "vue",
    "Vyper": "vy",
    "WiX": "wxs",
    "XML": "xml XML",
    "XML resource": "resx",
    "XSD": "xsd",
    "XSLT": "xsl xslt",
    "Yacc": "y",
    "YAML": "yaml yml",
    "Yul": "yul",
    "Zephir": "zep",
    "Zig": "zig",
    "Zsh": "zsh",
}

EXTS: dict[str, str] = {
    ext: lang
    for lang, exts in _EXTENSIONS_BY_LANGUAGE.items()
    for ext in exts.split()
}

_SHARED_M = frozenset({"Objective-C", "MATLAB", "Mercury"})


def _display_ext(ext: str, lang: str) -> str:
    """Return the extension shown for ``lang`` in place of a pseudo-extension key."""
    if lang in _SHARED_M:
        return "m"
    if lang == "F#":
        return "fs"
    if lang == "GLSL" and ext == "GLSL":
        return "fs"
    if lang == "TypeScript":
        return "ts"
    if lang == "Motoko":
        return "mo"
    return ext


def lang_to_exts(lang: str) -> str:
    """Return the comma separated extensions that map to the language ``lang``."""
    return ", ".join(
        _display_ext(ext, name) for ext, name in EXTS.items() if name == lang
    )