# -*- encoding: utf-8 -*-
# @File   : lines.py
# @Time   : 2024/11/03 00:12:44
# @Author : Kariko Lin

"""What a single (already stripped) INI line is.

    ```ini
    ; comment, only `;` counts. `# foo` is an invalid line.
    var1 = val1             ; goes to [DEFAULT] before any header
    [ Group A ]             ; -> "Group A"
    var 3 = value = three   ; -> "var 3": "value = three"
    ```
"""

from enum import Enum
from typing import NamedTuple

COMMENT_PREFIX = ';'


class LineKind(Enum):
    BLANK = 'blank'
    COMMENT = 'comment'
    GROUP_HEADER = 'group header'
    ASSIGNMENT = 'assignment'
    # errors below.
    MISSING_CLOSING_BRACKET = 'missing closing bracket'
    MISSING_VARIABLE_NAME = 'missing variable name'
    INVALID = 'invalid'

    @property
    def is_error(self) -> bool:
        return self in _ERROR_KINDS


_ERROR_KINDS = frozenset({
    LineKind.MISSING_CLOSING_BRACKET,
    LineKind.MISSING_VARIABLE_NAME,
    LineKind.INVALID,
})


class ClassifiedLine(NamedTuple):
    kind: LineKind
    data: str
    # group name for headers, variable name for assignments.
    name: str | None = None
    value: str | None = None


def classify_line(line: str) -> ClassifiedLine:
    if not line:
        return ClassifiedLine(LineKind.BLANK, line)
    if line.startswith(COMMENT_PREFIX):
        return ClassifiedLine(LineKind.COMMENT, line)
    if line.startswith('['):
        if not line.endswith(']'):
            return ClassifiedLine(LineKind.MISSING_CLOSING_BRACKET, line)
        return ClassifiedLine(
            LineKind.GROUP_HEADER, line, name=line[1:-1].strip())
    if '=' in line:
        # only the first `=` splits, values may hold more of them.
        var, val = line.split('=', 1)
        var = var.rstrip()
        if not var:
            return ClassifiedLine(LineKind.MISSING_VARIABLE_NAME, line)
        return ClassifiedLine(
            LineKind.ASSIGNMENT, line, name=var, value=val.lstrip())
    return ClassifiedLine(LineKind.INVALID, line)
