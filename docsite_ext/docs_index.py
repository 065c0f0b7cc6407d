from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from .models import Page

# A page without an index counts as MISSING_LEFT when it is the left operand
# and as MISSING_RIGHT when it is the right one.
MISSING_LEFT = 100
MISSING_RIGHT = 101


def _compare(a: Page, b: Page) -> int:
    left = a.index if a.index is not None else MISSING_LEFT
    right = b.index if b.index is not None else MISSING_RIGHT
    return left - right


def build_index(pages: Iterable[Page], path_prefix: str) -> List[Page]:
    """
    Pages under ``path_prefix``, linked by their path and ordered by their index.
    """
    prefix = path_prefix + "/"
    selected = [p.with_href(p.path) for p in pages if p.path.startswith(prefix)]
    return sorted(selected, key=cmp_to_key(_compare))
