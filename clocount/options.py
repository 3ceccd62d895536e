"""Options that control how files are selected and analysed."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

LineCallback = Callable[[str], None]


@dataclass
class ClocOptions:
    """Settings for a counting run.

    The ``on_code``, ``on_blank`` and ``on_comment`` callbacks, when set, are
    called with each stripped line of the matching kind.
    """

    debug: bool = False
    skip_duplicated: bool = False
    exclude_exts: set[str] = field(default_factory=set)
    include_langs: set[str] = field(default_factory=set)
    re_not_match: Optional[re.Pattern[str]] = None
    re_match: Optional[re.Pattern[str]] = None
    re_not_match_dir: Optional[re.Pattern[str]] = None
    re_match_dir: Optional[re.Pattern[str]] = None
    fullpath: bool = False
    exclude_dir: list[str] = field(default_factory=list)
    on_code: Optional[LineCallback] = None
    on_blank: Optional[LineCallback] = None
    on_comment: Optional[LineCallback] = None