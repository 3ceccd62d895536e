"""Collect the files to analyse under a set of paths, grouped by language."""

from __future__ import annotations

import hashlib
import os
import stat
import sys
from collections.abc import Callable, Iterable
from typing import Optional

from clocount.detect import get_file_type
from clocount.exts import EXTS
from clocount.languages import DefinedLanguages, Language
from clocount.options import ClocOptions

_VCS_DIRS = (".bzr", ".cvs", ".hg", ".git", ".svn")


def check_md5sum(path: str, file_cache: set[str]) -> bool:
    """Return True if ``path`` is unreadable or its content was already seen."""
    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError:
        return True
    digest = hashlib.md5(content).hexdigest()
    if digest in file_cache:
        return True
    file_cache.add(digest)
    return False


def is_vcs_dir(path: str) -> bool:
    """Tell whether ``path`` mentions a version control directory."""
    if len(path) > 1 and path[0] == os.sep:
        path = path[1:]
    return any(name in path for name in _VCS_DIRS)


def check_default_ignore(path: str, is_dir: bool, is_vcs: bool) -> bool:
    """Return True for directories, and for VCS paths unless the root is one."""
    if is_dir:
        return True
    return not is_vcs and is_vcs_dir(path)


def _dir_of(path: str) -> str:
    head = os.path.dirname(path)
    return os.path.normpath(head) if head else "."


def check_option_match(path: str, name: str, opts: ClocOptions) -> bool:
    """Apply the match and not-match options to a file name and its directory."""
    target = path if opts.fullpath else name
    if opts.re_not_match is not None and opts.re_not_match.search(target):
        return False
    if opts.re_match is not None and not opts.re_match.search(target):
        return False

    directory = _dir_of(path)
    if opts.re_not_match_dir is not None and opts.re_not_match_dir.search(directory):
        return False
    if opts.re_match_dir is not None and not opts.re_match_dir.search(directory):
        return False
    return True


def _name_of(path: str) -> str:
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep if path else "."
    return os.path.basename(stripped)


def _walk(root: str, visit: Callable[[str, str, bool], bool]) -> None:
    """Visit ``root`` and, in lexical order, everything below it.

    ``visit`` gets the path, its base name and whether it is a directory; it
    returns False to keep the walk out of a directory. Symbolic links are
    not followed.
    """
    try:
        info = os.lstat(root)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return
    _visit_tree(root, _name_of(root), stat.S_ISDIR(info.st_mode), visit)


def _visit_tree(
    path: str, name: str, is_dir: bool, visit: Callable[[str, str, bool], bool]
) -> None:
    if not visit(path, name, is_dir) or not is_dir:
        return
    try:
        entries = sorted(os.listdir(path))
    except OSError as exc:
        print(exc, file=sys.stderr)
        return
    for entry in entries:
        child = os.path.normpath(os.path.join(path, entry))
        try:
            info = os.lstat(child)
        except OSError as exc:
            print(exc, file=sys.stderr)
            continue
        _visit_tree(child, entry, stat.S_ISDIR(info.st_mode), visit)


def get_all_files(
    paths: Iterable[str],
    languages: DefinedLanguages,
    opts: Optional[ClocOptions] = None,
) -> dict[str, Language]:
    """Return the files to analyse under ``paths``, keyed by language name."""
    opts = opts if opts is not None else ClocOptions()
    result: dict[str, Language] = {}
    file_cache: set[str] = set()

    for root in paths:
        vcs_in_root = is_vcs_dir(root)

        def visit(path: str, name: str, is_dir: bool) -> bool:
            if is_dir and name in opts.exclude_dir:
                return False
            if check_default_ignore(path, is_dir, vcs_in_root):
                return True
            if not check_option_match(path, name, opts):
                return True

            file_type = get_file_type(path, opts)
            if file_type is None:
                return True
            target = EXTS.get(file_type)
            if target is None:
                return True
            if target in opts.exclude_exts:
                return True
            if opts.include_langs and target not in opts.include_langs:
                return True

            if not opts.skip_duplicated and check_md5sum(path, file_cache):
                if opts.debug:
                    print(f"[ignore={path}] find same md5")
                return True

            if target not in result:
                result[target] = languages.langs[target].fresh_copy()
            result[target].files.append(path)
            return True

        _walk(root, visit)

    return result