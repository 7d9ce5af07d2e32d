# -*- encoding: utf-8 -*-
# @File   : iterutil.py
# @Time   : 2024/11/02 21:52:08
# @Author : Kariko Lin

from collections.abc import Hashable, Iterable, Iterator
from typing import TypeVar

H = TypeVar('H', bound=Hashable)


def uniq(iterable: Iterable[H]) -> Iterator[H]:
    """Lazily yield each distinct element once, on its first appearance."""
    seen: set[H] = set()
    for i in iterable:
        if i in seen:
            continue
        seen.add(i)
        yield i
