import xml.etree.ElementTree as ET

from clocount.analyzer import ClocFile
from clocount.languages import Language
from clocount.report import (
    XML_HEADER,
    ClocLanguage,
    dump_json,
    files_json,
    files_xml,
    languages_json,
    languages_xml,
)


def _total(files=3, code=30, comments=5, blanks=7):
    total = Language("TOTAL")
    total.total = files
    total.code = code
    total.comments = comments
    total.blanks = blanks
    return total


def _lang(name, files, code, comments, blanks):
    lang = Language(name, files=list(files))
    lang.code = code
    lang.comments = comments
    lang.blanks = blanks
    return lang


def test_output_json_files():
    total = Language("")
    files = [ClocFile(name="one.go", lang="Go"), ClocFile(name="two.go", lang="Go")]
    result = files_json(total, files)

    assert result["files"][0]["name"] == "one.go"
    assert result["files"][1]["name"] == "two.go"
    assert result["files"][1]["language"] == "Go"
    expected = (
        '{"files":[{"code":0,"comment":0,"blank":0,"name":"one.go","language":"Go"},'
        '{"code":0,"comment":0,"blank":0,"name":"two.go","language":"Go"}],'
        '"total":{"files":0,"code":0,"comment":0,"blank":0}}'
    )
    assert dump_json(result) == expected


def test_languages_json_fields():
    langs = [_lang("Go", ["a.go", "b.go"], 20, 3, 4), _lang("C", ["x.c"], 10, 2, 3)]
    result = languages_json(_total(), langs)
    assert result["languages"][0] == {
        "name": "Go",
        "files": 2,
        "code": 20,
        "comment": 3,
        "blank": 4,
    }
    assert [entry["name"] for entry in result["languages"]] == ["Go", "C"]
    assert result["total"] == {"files": 3, "code": 30, "comment": 5, "blank": 7}


def test_empty_lists_serialise_as_null():
    assert dump_json(languages_json(Language(""), [])) == (
        '{"languages":null,"total":{"files":0,"code":0,"comment":0,"blank":0}}'
    )
    assert dump_json(files_json(Language(""), [])).startswith('{"files":null,')


def test_dump_json_escapes_html_characters():
    assert dump_json({"name": "<a&b>"}) == '{"name":"\\u003ca\\u0026b\\u003e"}'


def test_dump_json_keeps_unicode():
    assert dump_json({"name": "日本"}) == '{"name":"日本"}'


def test_cloc_language_defaults():
    summary = ClocLanguage(name="Go", files_count=1)
    assert (summary.code, summary.comments, summary.blanks) == (0, 0, 0)


def test_files_xml_layout():
    files = [ClocFile(code=3, comments=1, blanks=2, name="one.go", lang="Go")]
    total = _total(files=1, code=3, comments=1, blanks=2)
    expected = (
        XML_HEADER
        + "<results>\n"
        + "  <files>\n"
        + '    <file code="3" comment="1" blank="2" name="one.go" language="Go"></file>\n'
        + '    <total code="3" comment="1" blank="2"></total>\n'
        + "  </files>\n"
        + "</results>\n"
    )
    assert files_xml(total, files) == expected


def test_languages_xml_parses_back():
    langs = [_lang("Go", ["a.go", "b.go"], 20, 3, 4), _lang("C", ["x.c"], 10, 2, 3)]
    document = languages_xml(_total(), langs)
    assert document.startswith(XML_HEADER)

    root = ET.fromstring(document[len(XML_HEADER):])
    assert root.tag == "results"
    section = root.find("languages")
    entries = section.findall("language")
    assert [e.get("name") for e in entries] == ["Go", "C"]
    assert entries[0].get("files_count") == "2"
    assert entries[1].get("code") == "10"
    total = section.find("total")
    assert total.attrib == {"sum_files": "3", "code": "30", "comment": "5", "blank": "7"}


def test_xml_attribute_escaping_round_trips():
    name = 'a<b>&"c\'\td'
    document = files_xml(_total(), [ClocFile(name=name, lang="Go")])
    assert "&lt;" in document and "&amp;" in document and "&#34;" in document
    root = ET.fromstring(document[len(XML_HEADER):])
    assert root.find("files/file").get("name") == name


def test_languages_xml_without_languages_has_only_total():
    document = languages_xml(Language(""), [])
    root = ET.fromstring(document[len(XML_HEADER):])
    section = root.find("languages")
    assert [child.tag for child in section] == ["total"]
    assert section.find("total").get("sum_files") == "0"