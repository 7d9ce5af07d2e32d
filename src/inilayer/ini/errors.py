# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 22:05:37
# @Author : Kariko Lin

"""Errors raised while reading or writing configuration files.

Parse errors are *collected*, not raised one by one:
a failed read raises a single `IniReadError`
whose `errors` holds every problem found in one pass.
"""

from collections.abc import Iterable, Iterator
from os import PathLike, fspath


class FileError(Exception):
    """Base of every file related error. `file` is the path involved."""

    def __init__(self, file: str | PathLike[str], *args: object) -> None:
        super().__init__(*args)
        self.file = fspath(file)


class FileIOError(FileError):
    """The file could not be opened, read or written.

    `kind` names the underlying error class,
    e.g. `FileNotFoundError`, `PermissionError` or `UnicodeDecodeError`.
    """

    def __init__(self, file: str | PathLike[str], kind: str) -> None:
        super().__init__(file, kind)
        self.kind = kind

    @classmethod
    def from_error(
        cls, file: str | PathLike[str], err: OSError | UnicodeError
    ) -> 'FileIOError':
        ret = cls(file, type(err).__name__)
        ret.__cause__ = err
        return ret

    def __str__(self) -> str:
        return f'{self.kind} in file {self.file}'


class ParseError(FileError):
    msg = 'Unable to parse line'

    def __init__(
        self, file: str | PathLike[str], line: int, data: str
    ) -> None:
        super().__init__(file, line, data)
        self.line = line
        self.data = data

    def __str__(self) -> str:
        return f'{self.msg} at line {self.line} in {self.file}:\n\t{self.data}'

    def __repr__(self) -> str:
        return '%s(%r, line=%d, data=%r)' % (
            type(self).__name__, self.file, self.line, self.data)


class MissingClosingBracket(ParseError):
    msg = 'Missing closing bracket for group name'


class MissingVariableName(ParseError):
    # empty values are fine, empty names are not.
    msg = 'Assignment requires a variable name'


class InvalidLine(ParseError):
    msg = 'Expected a variable assignment'


class InvalidDocument(FileError):
    """A YAML/JSON document which is not `{group: {variable: value}}`."""

    def __init__(self, file: str | PathLike[str], reason: str) -> None:
        super().__init__(file, reason)
        self.reason = reason

    def __str__(self) -> str:
        return f'{self.reason} in file {self.file}'


class IniReadError(FileError):
    """Reading failed. `errors` lists every `FileIOError`/`ParseError`
    in the order they were met."""

    def __init__(
        self, file: str | PathLike[str], errors: Iterable[FileError]
    ) -> None:
        self.errors: list[FileError] = list(errors)
        super().__init__(file, self.errors)

    def __iter__(self) -> Iterator[FileError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __str__(self) -> str:
        head = f'{len(self.errors)} error(s) reading {self.file}'
        return '\n'.join([head, *(str(i) for i in self.errors)])
