import pytest

from clocount.detect import (
    file_type_by_shebang,
    get_file_type,
    get_shebang,
    guess_ambiguous_language,
)
from clocount.options import ClocOptions


@pytest.mark.parametrize(
    "line, expected",
    [
        ("#!/usr/bin/env python", "py"),
        ("#! /usr/bin/env python", "py"),
        ("#!/usr/bin/env bash", "bash"),
        ("#!/usr/bin/bash", "bash"),
        ("#! /usr/bin/bash", "bash"),
        ("#!/usr/rc", "plan9sh"),
        ("#!./perl -o", "pl"),
        ("#!/usr/bin/ruby", "rb"),
        ("#!/usr/bin/env escript", "erl"),
    ],
)
def test_get_shebang(line, expected):
    assert get_shebang(line) == expected


@pytest.mark.parametrize("line", ["#!", "hello world", "# comment", ""])
def test_get_shebang_none(line):
    assert get_shebang(line) is None


def test_file_type_by_shebang(tmp_path):
    script = tmp_path / "script"
    script.write_text("#!/usr/bin/env python\nprint(1)\n")
    assert file_type_by_shebang(str(script)) == "py"


def test_file_type_by_shebang_leading_space(tmp_path):
    script = tmp_path / "script"
    script.write_text("  #!/bin/sh\necho\n")
    assert file_type_by_shebang(str(script)) == "sh"


def test_file_type_by_shebang_needs_newline(tmp_path):
    script = tmp_path / "script"
    script.write_text("#!/usr/bin/env python")
    assert file_type_by_shebang(str(script)) is None


def test_file_type_by_shebang_missing_file(tmp_path):
    assert file_type_by_shebang(str(tmp_path / "missing")) is None


def test_file_type_by_shebang_no_shebang(tmp_path):
    script = tmp_path / "script"
    script.write_text("echo hi\n")
    assert file_type_by_shebang(str(script)) is None


@pytest.mark.parametrize(
    "name, expected",
    [
        ("CMakeLists.txt", "cmake"),
        ("meson.build", "meson"),
        ("configure.ac", "m4"),
        ("Makefile.am", "makefile"),
        ("build.xml", "Ant"),
        ("pom.xml", "maven"),
        ("Makefile", "makefile"),
        ("JUSTFILE", "just"),
        ("Nukefile", "nu"),
        ("dune", "dune"),
        ("main.go", "go"),
        (".bashrc", "bashrc"),
    ],
)
def test_get_file_type_by_name(tmp_path, name, expected):
    path = tmp_path / name
    path.write_text("content\n")
    assert get_file_type(str(path), ClocOptions()) == expected


def test_get_file_type_rebar_skipped(tmp_path):
    path = tmp_path / "rebar"
    path.write_text("{deps, []}.\n")
    assert get_file_type(str(path), ClocOptions()) is None


def test_get_file_type_shebang(tmp_path):
    path = tmp_path / "tool"
    path.write_text("#!/usr/bin/perl\nprint 1;\n")
    assert get_file_type(str(path), ClocOptions()) == "pl"


def test_get_file_type_no_extension(tmp_path):
    path = tmp_path / "README"
    path.write_text("plain words\n")
    assert get_file_type(str(path), ClocOptions()) is None


def test_get_file_type_typescript(tmp_path):
    path = tmp_path / "app.ts"
    path.write_text("const x: number = 1;\n")
    assert get_file_type(str(path), ClocOptions()) == "TypeScript"


def test_get_file_type_ambiguous_missing(tmp_path):
    assert get_file_type(str(tmp_path / "gone.m"), ClocOptions()) is None


def test_get_file_type_debug_prints(tmp_path, capsys):
    path = tmp_path / "shader.fs"
    path.write_text("#version 330\nvoid main() {}\n")
    assert get_file_type(str(path), ClocOptions(debug=True)) == "GLSL"
    assert f"path={path}, lang=GLSL" in capsys.readouterr().out


@pytest.mark.parametrize(
    "name, content, expected",
    [
        ("a.m", b"#import <Foundation/Foundation.h>\n@interface A\n@end\n", "Objective-C"),
        ("a.m", b":- module hello.\n", "Mercury"),
        ("a.m", b"function y = f(x)\n  y = x;\nend\n", "Matlab"),
        ("a.v", b"Theorem t : True.\nProof. auto. Qed.\n", "Coq"),
        ("a.v", b"module top(input a);\nendmodule\n", "Verilog"),
        ("a.fs", b"let x = 1\n", "F#"),
        ("a.fs", b"uniform vec4 c;\nvoid main() { }\n", "GLSL"),
        ("a.r", b"x <- c(1, 2)\n", "R"),
        ("a.r", b"REBOL [Title: \"t\"]\n", "Rebol"),
        ("a.ts", b"<?xml version=\"1.0\"?>\n<TS></TS>\n", "XML"),
        ("a.ts", b"export const a = 1;\n", "TypeScript"),
        ("a.mo", b"actor { };\n", "Motoko"),
        ("a.mo", b"\xde\x12\x04\x95\x00\x00\x00\x00", ""),
    ],
)
def test_guess_ambiguous_language(name, content, expected):
    assert guess_ambiguous_language(name, content) == expected