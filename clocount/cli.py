"""Command line interface: count lines under paths and print a report."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Sequence
from importlib import metadata
from typing import Optional, TextIO

from clocount.analyzer import sort_files
from clocount.exts import EXTS
from clocount.languages import DefinedLanguages, sort_languages
from clocount.options import ClocOptions
from clocount.processor import Processor, Result
from clocount.report import (
    dump_json,
    files_json,
    files_xml,
    languages_json,
    languages_xml,
)

OUTPUT_TYPE_DEFAULT = "default"
OUTPUT_TYPE_CLOC_XML = "cloc-xml"
OUTPUT_TYPE_SLOCCOUNT = "sloccount"
OUTPUT_TYPE_JSON = "json"
OUTPUT_TYPE_MARKDOWN = "markdown"

FILE_HEADER = "File"
LANGUAGE_HEADER = "Language"
COMMON_HEADER = "files          blank        comment           code"
DEFAULT_OUTPUT_SEPARATOR = "-" * 219
DEFAULT_ROW_LEN = 79

SORT_CHOICES = ("name", "files", "blank", "comment", "code")

_WHITESPACE = re.compile(r"\s+", re.ASCII)


def insert_pipes_in_the_middle(text: str) -> str:
    """Replace each run of whitespace between words by a centred pipe."""
    words = text.split()
    spaces = _WHITESPACE.findall(text)
    parts = []
    for i, word in enumerate(words):
        if i < len(spaces):
            pad = " " * (len(spaces[i]) // 2 - 1)
            parts.append(f"{word}{pad}|{pad}")
        else:
            parts.append(f"{word} |")
    return "".join(parts)


def _markdown_rule(header_string: str, header_len: int) -> str:
    chars = []
    for i, ch in enumerate(header_string):
        if ch == "|":
            chars.append("|")
        elif i == 1:
            chars.append(":")
        elif header_string[i + 1 : i + 2] == "|" and i > header_len:
            chars.append(":")
        else:
            chars.append("-")
    return "".join(chars)


class OutputBuilder:
    """Writes an analysis result in the output format chosen on the command line."""

    def __init__(
        self, result: Result, opts: argparse.Namespace, out: Optional[TextIO] = None
    ) -> None:
        self.result = result
        self.opts = opts
        self.out = out if out is not None else sys.stdout
        self.row_len = DEFAULT_ROW_LEN

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _separator(self) -> str:
        return DEFAULT_OUTPUT_SEPARATOR[: self.row_len]

    def write_header(self) -> None:
        """Write the table header for text and markdown output."""
        max_path_len = self.result.max_path_length
        header_len = 28
        header = LANGUAGE_HEADER

        if self.opts.by_file:
            header_len = max_path_len + 1
            self.row_len = max_path_len + len(COMMON_HEADER) + 2
            header = FILE_HEADER

        if self.opts.output_type == OUTPUT_TYPE_DEFAULT:
            self._print(self._separator())
            self._print(f"{header:<{header_len}} {COMMON_HEADER}")
            self._print(self._separator())

        if self.opts.output_type == OUTPUT_TYPE_MARKDOWN:
            all_headers = f"{header}{' ' * header_len}{COMMON_HEADER}"
            header_string = "| " + insert_pipes_in_the_middle(all_headers)
            self._print(header_string)
            self._print(_markdown_rule(header_string, header_len))

    def write_footer(self) -> None:
        """Write the totals line for text and markdown output."""
        total = self.result.total
        width = self.result.max_path_length

        if self.opts.output_type == OUTPUT_TYPE_DEFAULT:
            self._print(self._separator())
            label_width = width if self.opts.by_file else 27
            self._print(
                f"{'TOTAL':<{label_width}} {total.total:>6} {total.blanks:>14} "
                f"{total.comments:>14} {total.code:>14}"
            )
            self._print(self._separator())

        if self.opts.output_type == OUTPUT_TYPE_MARKDOWN:
            if self.opts.by_file:
                self._print(f"| {'':<{width}} |{'':>10}|{'':>12}|{'':>14}|{'':>8} |")
                self._print(
                    f"| {'TOTAL':<{width}} |{total.total:>9} |{total.blanks:>11} "
                    f"|{total.comments:>13} |{total.code:>8} |"
                )
            else:
                self._print(f"| {'':>21}|{'':>22}|{'':>12}|{'':>14}|{'':>8} |")
                self._print(
                    f"| {'TOTAL':>20} |{total.total:>21} |{total.blanks:>11} "
                    f"|{total.comments:>13} |{total.code:>8} |"
                )

    def _write_by_file(self) -> None:
        total = self.result.total
        width = self.result.max_path_length
        files = sort_files(self.result.files.values(), self.opts.sort_tag)
        output_type = self.opts.output_type

        if output_type == OUTPUT_TYPE_CLOC_XML:
            self.out.write(files_xml(total, files))
        elif output_type == OUTPUT_TYPE_SLOCCOUNT:
            for f in files:
                project = ""
                if f.name.startswith("./") or f.name.startswith("/"):
                    parts = f.name.split(os.sep)
                    if len(parts) >= 3:
                        project = parts[1]
                self._print(f"{f.code}\t{f.lang}\t{project}\t{f.name}")
        elif output_type == OUTPUT_TYPE_JSON:
            self.out.write(dump_json(files_json(total, files)))
        elif output_type == OUTPUT_TYPE_MARKDOWN:
            for f in files:
                self._print(
                    f"| {f.name:<{width}} |{1:>8}  |{f.blanks:>11} "
                    f"|{f.comments:>13} |{f.code:>8} |"
                )
        else:
            for f in files:
                self._print(
                    f"{f.name:<{width}} {f.blanks:>21} {f.comments:>14} {f.code:>14}"
                )

    def _write_by_language(self) -> None:
        total = self.result.total
        languages = sort_languages(
            (lang for lang in self.result.languages.values() if lang.files),
            self.opts.sort_tag,
        )
        output_type = self.opts.output_type

        if output_type == OUTPUT_TYPE_CLOC_XML:
            self.out.write(languages_xml(total, languages))
        elif output_type == OUTPUT_TYPE_JSON:
            self.out.write(dump_json(languages_json(total, languages)))
        elif output_type == OUTPUT_TYPE_MARKDOWN:
            for lang in languages:
                self._print(
                    f"| {lang.name:<20} |{len(lang.files):>21} |{lang.blanks:>11} "
                    f"|{lang.comments:>13} |{lang.code:>8} |"
                )
        else:
            for lang in languages:
                self._print(
                    f"{lang.name:<27} {len(lang.files):>6} {lang.blanks:>14} "
                    f"{lang.comments:>14} {lang.code:>14}"
                )

    def write_result(self) -> None:
        """Write header, per-language or per-file rows, and footer."""
        self.write_header()
        if self.opts.by_file:
            self._write_by_file()
        else:
            self._write_by_language()
        self.write_footer()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clocount", usage="%(prog)s [OPTIONS] PATH[...]"
    )
    parser.add_argument("paths", nargs="*", metavar="PATH")
    parser.add_argument(
        "--by-file",
        action="store_true",
        help="report results for every encountered source file",
    )
    parser.add_argument(
        "--sort",
        dest="sort_tag",
        default="code",
        choices=SORT_CHOICES,
        help="sort based on a certain column",
    )
    parser.add_argument(
        "--output-type",
        default=OUTPUT_TYPE_DEFAULT,
        help="output type [values: default,markdown,cloc-xml,sloccount,json]",
    )
    parser.add_argument(
        "--exclude-ext", default="", help="exclude file name extensions (separated commas)"
    )
    parser.add_argument(
        "--include-lang", default="", help="include language name (separated commas)"
    )
    parser.add_argument("--match", default="", help="include file name (regex)")
    parser.add_argument("--not-match", default="", help="exclude file name (regex)")
    parser.add_argument("--match-d", dest="match_dir", default="", help="include dir name (regex)")
    parser.add_argument(
        "--not-match-d", dest="not_match_dir", default="", help="exclude dir name (regex)"
    )
    parser.add_argument(
        "--fullpath",
        action="store_true",
        help="apply match/not-match options to full file paths instead of base names",
    )
    parser.add_argument("--debug", action="store_true", help="dump debug log for developer")
    parser.add_argument("--skip-duplicated", action="store_true", help="skip duplicated files")
    parser.add_argument(
        "--show-lang", action="store_true", help="print about all languages and extensions"
    )
    parser.add_argument(
        "--version", dest="show_version", action="store_true", help="print version info"
    )
    parser.add_argument(
        "--exclude-dir",
        default="",
        help="exclude dir name (separated commas, it will cover not-match-d)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments; exits on invalid ones."""
    return _build_parser().parse_args(argv)


def _version() -> str:
    try:
        return metadata.version("clocount")
    except metadata.PackageNotFoundError:
        return ""


def _cloc_options(args: argparse.Namespace, languages: DefinedLanguages) -> ClocOptions:
    opts = ClocOptions()
    for ext in args.exclude_ext.split(","):
        opts.exclude_exts.add(EXTS.get(ext, ext))

    if args.match:
        opts.re_match = re.compile(args.match)
    if args.not_match:
        opts.re_not_match = re.compile(args.not_match)
    if args.match_dir:
        opts.re_match_dir = re.compile(args.match_dir)
    if args.not_match_dir:
        opts.re_not_match_dir = re.compile(args.not_match_dir)

    opts.exclude_dir.extend(args.exclude_dir.split(","))
    opts.include_langs.update(
        lang for lang in args.include_lang.split(",") if lang in languages.langs
    )

    opts.debug = args.debug
    opts.skip_duplicated = args.skip_duplicated
    opts.fullpath = args.fullpath
    return opts


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    languages = DefinedLanguages()

    if args.show_version:
        print(f"{_version()} ()")
        return 0

    if args.show_lang:
        print(languages.formatted())
        return 0

    if not args.paths:
        parser.print_help(sys.stdout)
        return 0

    if args.by_file and args.sort_tag == "files":
        print("`--sort files` option cannot be used in conjunction with the `--by-file` option")
        return 1

    opts = _cloc_options(args, languages)
    processor = Processor(languages, opts)
    try:
        result = processor.analyze(args.paths)
    except OSError as exc:
        print(f"fail clocount analyze. error: {exc}")
        return 0

    OutputBuilder(result, args).write_result()
    return 0


if __name__ == "__main__":
    sys.exit(main())