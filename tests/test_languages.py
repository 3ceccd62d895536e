import re

import pytest

from clocount.exts import EXTS
from clocount.languages import DefinedLanguages, Language, sort_languages


def test_every_extension_maps_to_a_defined_language():
    langs = DefinedLanguages().langs
    missing = {name for name in EXTS.values() if name not in langs}
    assert missing == set()


def test_keys_match_language_names():
    langs = DefinedLanguages().langs
    assert all(key == lang.name for key, lang in langs.items())


def test_builtin_syntax_for_go_and_python():
    langs = DefinedLanguages().langs
    assert langs["Go"].line_comments == ["//"]
    assert langs["Go"].multi_lines == [("/*", "*/")]
    assert langs["Python"].multi_lines == [('"""', '"""')]
    assert langs["Go"].files == []


def test_just_has_regex_line_comments():
    just = DefinedLanguages().langs["Just"]
    assert [p.pattern for p in just.regex_line_comments] == [r"^#[^!].*"]


def test_formatted_is_sorted_and_complete():
    defined = DefinedLanguages()
    lines = defined.formatted().splitlines()
    assert len(lines) == len(defined.langs)
    names = [line[:30].rstrip() for line in lines]
    assert names == sorted(names)


def test_formatted_line_for_go():
    lines = DefinedLanguages().formatted().splitlines()
    go_line = next(line for line in lines if line.startswith("Go "))
    assert go_line == "Go".ljust(30) + " (go, go2)"


def test_with_regex_line_comments_returns_self():
    lang = Language("Just", ["#"], [("", "")])
    assert lang.with_regex_line_comments([r"^#[^!].*"]) is lang
    assert lang.regex_line_comments[0].search("# comment")
    assert not lang.regex_line_comments[0].search("#!shebang")


def test_with_regex_line_comments_invalid_pattern():
    with pytest.raises(re.error):
        Language("X").with_regex_line_comments(["("])


def test_multi_lines_are_normalised_to_tuples():
    lang = Language("Go", ["//"], [["/*", "*/"]])
    assert lang.multi_lines == [("/*", "*/")]


def test_fresh_copy_resets_counts_and_files():
    lang = Language("Go", ["//"], [("/*", "*/")], files=["a.go"], code=5, comments=2)
    lang.with_regex_line_comments(["^//"])
    copy = lang.fresh_copy()
    assert copy.files == []
    assert (copy.code, copy.comments, copy.blanks, copy.total) == (0, 0, 0, 0)
    assert copy.line_comments == lang.line_comments
    assert copy.multi_lines == lang.multi_lines
    assert copy.regex_line_comments == lang.regex_line_comments
    copy.files.append("b.go")
    assert lang.files == ["a.go"]


def _langs():
    return [
        Language("b", files=["1", "2"], code=10, comments=1, blanks=3),
        Language("a", files=["1"], code=30, comments=1, blanks=3),
        Language("c", files=["1", "2"], code=20, comments=5, blanks=0),
    ]


def test_sort_by_name():
    assert [lang.name for lang in sort_languages(_langs(), "name")] == ["a", "b", "c"]


def test_sort_by_code():
    result = sort_languages(_langs(), "code")
    codes = [lang.code for lang in result]
    assert codes == sorted(codes, reverse=True)


def test_sort_by_files_ties_broken_by_code():
    assert [lang.name for lang in sort_languages(_langs(), "files")] == ["c", "b", "a"]


def test_sort_by_comment_ties_broken_by_code():
    assert [lang.name for lang in sort_languages(_langs(), "comment")] == ["c", "a", "b"]


def test_sort_by_blank_ties_broken_by_code():
    assert [lang.name for lang in sort_languages(_langs(), "blank")] == ["a", "b", "c"]


def test_unknown_tag_sorts_by_code():
    by_default = [lang.name for lang in sort_languages(_langs(), "whatever")]
    by_code = [lang.name for lang in sort_languages(_langs(), "code")]
    assert by_default == by_code