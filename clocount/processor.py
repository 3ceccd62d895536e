"""Run the analysis over a set of paths and gather per-file and per-language totals."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from clocount.analyzer import ClocFile, analyze_file
from clocount.languages import DefinedLanguages, Language
from clocount.options import ClocOptions
from clocount.walker import get_all_files


@dataclass
class Result:
    """Outcome of an analysis run."""

    total: Language
    files: dict[str, ClocFile] = field(default_factory=dict)
    languages: dict[str, Language] = field(default_factory=dict)
    max_path_length: int = 0


class Processor:
    """Counts lines in every recognised file under the given paths."""

    def __init__(
        self,
        langs: Optional[DefinedLanguages] = None,
        opts: Optional[ClocOptions] = None,
    ) -> None:
        self.langs = langs if langs is not None else DefinedLanguages()
        self.opts = opts if opts is not None else ClocOptions()

    def analyze(self, paths: Iterable[str]) -> Result:
        """Analyse every file under ``paths`` and return the collected counts."""
        total = Language("TOTAL", [], [("", "")])
        languages = get_all_files(paths, self.langs, self.opts)

        max_path_length = max(
            (len(path) for lang in languages.values() for path in lang.files),
            default=0,
        )

        files: dict[str, ClocFile] = {}
        for language in languages.values():
            for path in language.files:
                counted = analyze_file(path, language, self.opts)
                counted.lang = language.name
                language.code += counted.code
                language.comments += counted.comments
                language.blanks += counted.blanks
                files[path] = counted

            if not language.files:
                continue

            total.total += len(language.files)
            total.blanks += language.blanks
            total.comments += language.comments
            total.code += language.code

        return Result(
            total=total,
            files=files,
            languages=languages,
            max_path_length=max_path_length,
        )