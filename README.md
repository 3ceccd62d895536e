# clocount

`clocount` counts the blank lines, comment lines and code lines of source
files. It walks directories, works out each file's language from its name,
extension, shebang line or (for a few shared extensions) its content, and
reports totals per language or per file. Around two hundred languages are
known.

## Install

```
pip install .
```

## Command line

```
clocount [OPTIONS] PATH [PATH ...]
```

Examples:

```
clocount .
clocount --by-file --sort name src
clocount --output-type json .
clocount --output-type markdown --exclude-ext js,css .
clocount --include-lang Python,Go --not-match-d vendor .
clocount --show-lang
```

Options:

| Option | Meaning |
| --- | --- |
| `--by-file` | report results for every encountered source file |
| `--sort` | sort by `name`, `files`, `blank`, `comment` or `code` (default `code`) |
| `--output-type` | `default`, `markdown`, `cloc-xml`, `sloccount` or `json` |
| `--exclude-ext` | exclude file name extensions or language names (comma separated) |
| `--include-lang` | only count these languages (comma separated, unknown names ignored) |
| `--match` / `--not-match` | include / exclude file names by regular expression |
| `--match-d` / `--not-match-d` | include / exclude by regular expression on the file's directory |
| `--fullpath` | apply `--match` / `--not-match` to full paths instead of base names |
| `--exclude-dir` | do not descend into directories with these names (comma separated) |
| `--skip-duplicated` | keep files whose contents duplicate an earlier file; by default such duplicates are dropped |
| `--debug` | print a trace of how each line was classified |
| `--show-lang` | list every known language and its extensions |
| `--version` | print version information |

With no paths the help text is printed. `--sort files` cannot be combined
with `--by-file`; the command then prints a message and exits with status 1.
The `sloccount` output type is only used together with `--by-file`.

Any path whose text contains `.git`, `.hg`, `.svn`, `.bzr` or `.cvs` is
skipped, unless the root path given contains one of these itself. Symbolic
links are not followed.

Extensions shared by several languages (`.m`, `.v`, `.fs`, `.r`, `.ts`,
`.mo`) are resolved by simple content checks in
`clocount.detect.guess_ambiguous_language`, not by a full classifier.

## Library use

```python
from clocount.languages import DefinedLanguages
from clocount.options import ClocOptions
from clocount.processor import Processor

result = Processor(DefinedLanguages(), ClocOptions()).analyze(["."])
print(result.total.code, result.total.comments, result.total.blanks)
for name, stats in result.languages.items():
    print(name, len(stats.files), stats.code)
```

`Result` also holds `files` (a `ClocFile` per path) and `max_path_length`.

A single file or stream can be counted directly:

```python
import io
from clocount.analyzer import analyze_reader
from clocount.languages import Language
from clocount.options import ClocOptions

python = Language("Python", ["#"], [('"""', '"""')])
counts = analyze_reader("example.py", python, io.StringIO("x = 1\n# note\n"), ClocOptions())
print(counts.code, counts.comments, counts.blanks)
```

`analyze_file` does the same for a path; a file that cannot be opened gives
zero counts. `ClocOptions` also accepts `on_code`, `on_comment` and
`on_blank` callbacks, each called with the stripped text of every line of
that kind.

`sort_languages` (in `clocount.languages`) and `sort_files` (in
`clocount.analyzer`) order results by a sort tag. The results can be
rendered with `clocount.report`: `languages_json`, `files_json`,
`dump_json`, `languages_xml` and `files_xml`.