"""JSON and XML renderings of analysis results."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from clocount.analyzer import ClocFile
from clocount.languages import Language

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

_JSON_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_XML_ESCAPES = str.maketrans(
    {
        '"': "&#34;",
        "'": "&#39;",
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "\t": "&#x9;",
        "\n": "&#xA;",
        "\r": "&#xD;",
    }
)


@dataclass
class ClocLanguage:
    """Summary of one language (or of the total) for reports."""

    name: str = ""
    files_count: int = 0
    code: int = 0
    comments: int = 0
    blanks: int = 0


def _summary(language: Language) -> ClocLanguage:
    return ClocLanguage(
        name=language.name,
        files_count=len(language.files),
        code=language.code,
        comments=language.comments,
        blanks=language.blanks,
    )


def _total_summary(total: Language) -> ClocLanguage:
    return ClocLanguage(
        files_count=total.total,
        code=total.code,
        comments=total.comments,
        blanks=total.blanks,
    )


def _language_json(summary: ClocLanguage) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if summary.name:
        data["name"] = summary.name
    data["files"] = summary.files_count
    data["code"] = summary.code
    data["comment"] = summary.comments
    data["blank"] = summary.blanks
    return data


def _file_json(file: ClocFile) -> dict[str, Any]:
    return {
        "code": file.code,
        "comment": file.comments,
        "blank": file.blanks,
        "name": file.name,
        "language": file.lang,
    }


def languages_json(total: Language, languages: Iterable[Language]) -> dict[str, Any]:
    """Return the per-language report as JSON-ready data."""
    langs = [_language_json(_summary(lang)) for lang in languages]
    return {
        "languages": langs or None,
        "total": _language_json(_total_summary(total)),
    }


def files_json(total: Language, files: Iterable[ClocFile]) -> dict[str, Any]:
    """Return the per-file report as JSON-ready data."""
    entries = [_file_json(f) for f in files]
    return {
        "files": entries or None,
        "total": _language_json(_total_summary(total)),
    }


def dump_json(data: Any) -> str:
    """Serialise ``data`` compactly, escaping HTML-sensitive characters."""
    text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    return text.translate(_JSON_ESCAPES)


def _element(tag: str, attrs: Iterable[tuple[str, object]], depth: int) -> str:
    rendered = " ".join(f'{key}="{str(value).translate(_XML_ESCAPES)}"' for key, value in attrs)
    return f"{'  ' * depth}<{tag} {rendered}></{tag}>"


def _document(section: str, children: list[str]) -> str:
    lines = ["<results>", f"  <{section}>", *children, f"  </{section}>", "</results>"]
    return XML_HEADER + "\n".join(lines) + "\n"


def languages_xml(total: Language, languages: Iterable[Language]) -> str:
    """Return the per-language report as an XML document."""
    children = []
    for lang in languages:
        summary = _summary(lang)
        children.append(
            _element(
                "language",
                (
                    ("name", summary.name),
                    ("files_count", summary.files_count),
                    ("code", summary.code),
                    ("comment", summary.comments),
                    ("blank", summary.blanks),
                ),
                2,
            )
        )
    children.append(
        _element(
            "total",
            (
                ("sum_files", total.total),
                ("code", total.code),
                ("comment", total.comments),
                ("blank", total.blanks),
            ),
            2,
        )
    )
    return _document("languages", children)


def files_xml(total: Language, files: Iterable[ClocFile]) -> str:
    """Return the per-file report as an XML document."""
    children = [
        _element(
            "file",
            (
                ("code", f.code),
                ("comment", f.comments),
                ("blank", f.blanks),
                ("name", f.name),
                ("language", f.lang),
            ),
            2,
        )
        for f in files
    ]
    children.append(
        _element(
            "total",
            (("code", total.code), ("comment", total.comments), ("blank", total.blanks)),
            2,
        )
    )
    return _document("files", children)