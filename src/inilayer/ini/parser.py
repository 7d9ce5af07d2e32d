# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 01:04:45
# @Author : Kariko Lin

"""Read and write `IniConfig` instances.

File format:
- groups are declared by naming them within brackets;
- `=` assigns a variable, only the first one splits, values may hold more;
- whitespace around group names, variables and values is dropped,
  whitespace inside them is kept;
- `;` at the beginning of a line starts a comment;
- a variable set more than once keeps the last value read.

Reading collects *every* problem of a file in one pass.
You get either a complete `IniConfig` or an `IniReadError`, never half a config.
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from io import StringIO
from os import PathLike, fspath
from typing import IO, Any, Protocol
from warnings import warn

import chardet
import yaml

from ..abstract import FileHandler
from .errors import (
    FileError,
    FileIOError,
    IniReadError,
    InvalidDocument,
    InvalidLine,
    MissingClosingBracket,
    MissingVariableName,
    ParseError,
)
from .lines import COMMENT_PREFIX, LineKind, classify_line
from .model import DEFAULT_GROUP, IniConfig, Key

CHARDET_CONFIDENCE = 0.8

_LINE_ERRORS: dict[LineKind, type[ParseError]] = {
    LineKind.MISSING_CLOSING_BRACKET: MissingClosingBracket,
    LineKind.MISSING_VARIABLE_NAME: MissingVariableName,
    LineKind.INVALID: InvalidLine,
}


class LineSource(Protocol):
    async def readline(self) -> str: ...


class AsyncLineReader:
    """Let a blocking text stream be read line by line without
    blocking the event loop."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream

    async def readline(self) -> str:
        return await asyncio.to_thread(self._stream.readline)


class IniParser(FileHandler[IniConfig]):
    @staticmethod
    async def readstream(
        source: LineSource,
        filename: str | PathLike[str] = '<stream>',
        defaults: IniConfig | None = None
    ) -> IniConfig:
        """Parse lines from `source` until it returns `''`.

        `filename` only labels the errors.
        If given, `defaults` is overlaid by what was parsed.

        Raises:
            IniReadError: with all parse (or read) errors, in line order.
        """
        filename = fspath(filename)
        values: dict[Key, str] = {}
        errors: list[FileError] = []
        group = DEFAULT_GROUP
        cnt = 0

        while True:
            try:
                i = await source.readline()
            except OSError as e:
                # stream state is unknown after a failed read: stop here,
                # the line counter does not advance.
                errors.append(FileIOError.from_error(filename, e))
                logging.warning(f'Read failed after line {cnt} of {filename}: {e}')
                break
            if not i:
                break
            cnt += 1

            line = classify_line(i.strip())
            if line.kind is LineKind.GROUP_HEADER:
                # re-opening a group just continues it.
                group = line.name
            elif line.kind is LineKind.ASSIGNMENT:
                values[(group, line.name)] = line.value
            elif line.kind.is_error:
                err = _LINE_ERRORS[line.kind](filename, cnt, line.data)
                logging.warning(str(err))
                errors.append(err)

        if errors:
            raise IniReadError(filename, errors)
        logging.debug(f'{filename}: {cnt} lines, {len(values)} variables.')
        ret = IniConfig(values)
        return ret if defaults is None else defaults.merge_with(ret)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if (
            codec is None
            or codec['encoding'] is None
            or codec['confidence'] < CHARDET_CONFIDENCE
        ):
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            buf = raw.decode('gbk')
        return StringIO(buf)

    async def read_async(self, defaults: IniConfig | None = None) -> IniConfig:
        """Read the file this parser points to.

        A file that can't be opened is reported as a single `FileIOError`
        inside the raised `IniReadError`; nothing gets parsed then.
        """
        try:
            fp = await asyncio.to_thread(
                open, self._fn, 'r', encoding=self._codec)
        except OSError as e:
            logging.warning(f'Unable to open {self._fn}: {e}')
            raise IniReadError(
                self._fn, [FileIOError.from_error(self._fn, e)]) from e

        try:
            with fp:
                return await self.readstream(
                    AsyncLineReader(fp), self._fn, defaults)
        except UnicodeDecodeError:
            # wrong (or locale default) encoding, let chardet guess.
            logging.info(
                f'{self._fn} is not {self._codec or "locale"} encoded, '
                'guessing codec.')

        try:
            buf = await asyncio.to_thread(self._decode_file, self._fn)
        except (OSError, UnicodeDecodeError) as e:
            logging.warning(f'Unable to decode {self._fn}: {e}')
            raise IniReadError(
                self._fn, [FileIOError.from_error(self._fn, e)]) from e
        return await self.readstream(AsyncLineReader(buf), self._fn, defaults)

    def read(self, defaults: IniConfig | None = None) -> IniConfig:
        """Blocking `read_async()`. Don't call it from a running loop."""
        return asyncio.run(self.read_async(defaults))

    def write(self, instance: IniConfig) -> None:
        """Replace the file with `instance`, one `[group]` after another.

        Comments and blank lines of a previously read file are not kept.
        The write is neither atomic nor async: if it fails halfway,
        the partial file stays.

        Raises:
            FileIOError: the file could not be created or written.
        """
        for group in instance.groups():
            if reason := _unreadable_group(group):
                warn(f'Group {group!r} {reason}, '
                     'it will not read back as written.')
            for var, val in instance.group_by_key_value(group):
                if reason := _unreadable_variable(var):
                    warn(f'[{group}] {var!r} {reason}, '
                         'it will not read back as written.')
                if reason := _unreadable_value(val):
                    warn(f'[{group}] {var!r}: value {val!r} {reason}, '
                         'it will not read back as written.')

        try:
            with open(self._fn, 'w', encoding=self._codec) as fp:
                for group in instance.groups():
                    fp.write(f'[{group}]\n')
                    for var, val in instance.group_by_key_value(group):
                        fp.write(f'{var} = {val}\n')
        except OSError as e:
            logging.warning(f'Unable to write {self._fn}: {e}')
            raise FileIOError.from_error(self._fn, e) from e
        logging.info(f'Saved {len(instance)} variables to {self._fn}.')

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f'({self._codec})'


def _has_line_break(text: str) -> bool:
    # what universal newline `readline()` splits on.
    return '\n' in text or '\r' in text


# a `]` inside a group name is fine: `[a]b]` reads back as "a]b".
def _unreadable_group(group: str) -> str | None:
    if _has_line_break(group):
        return 'contains a line break'
    if group != group.strip():
        return 'has surrounding whitespace'
    return None


def _unreadable_variable(var: str) -> str | None:
    if not var:
        return 'is empty'
    if _has_line_break(var):
        return 'contains a line break'
    if '=' in var:
        return "contains '='"
    if var.startswith((COMMENT_PREFIX, '[')):
        return 'looks like a comment or group header'
    if var != var.strip():
        return 'has surrounding whitespace'
    return None


def _unreadable_value(val: str) -> str | None:
    if _has_line_break(val):
        return 'contains a line break'
    if val != val.strip():
        return 'has surrounding whitespace'
    return None


def _from_document(filename: str, data: Any) -> IniConfig:
    """`{group: {variable: value}}` -> `IniConfig`."""
    if data is None:
        return IniConfig()
    if not isinstance(data, Mapping):
        raise InvalidDocument(
            filename, f'expected a mapping of groups, got {type(data).__name__}')
    for group, pairs in data.items():
        if not isinstance(pairs, Mapping):
            raise InvalidDocument(
                filename, f'group {group!r} is not a mapping')
        for var, val in pairs.items():
            if isinstance(val, (Mapping, list)):
                raise InvalidDocument(
                    filename, f'[{group}] {var!r}: nested groups unsupported')
    return IniConfig.from_dict(data)


class IniYamlParser(FileHandler[IniConfig]):
    """`IniConfig` as YAML, one mapping per group."""

    def read(self) -> IniConfig:
        try:
            with open(self._fn, 'r', encoding=self._codec or 'utf-8') as fp:
                data = yaml.safe_load(fp)
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError.from_error(self._fn, e) from e
        except yaml.YAMLError as e:
            raise InvalidDocument(self._fn, f'invalid YAML: {e}') from e
        return _from_document(self._fn, data)

    def write(self, instance: IniConfig) -> None:
        try:
            with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
                yaml.safe_dump(
                    instance.to_dict(), fp,
                    allow_unicode=True,
                    default_flow_style=False,
                    sort_keys=False)
        except OSError as e:
            raise FileIOError.from_error(self._fn, e) from e


class IniJsonParser(FileHandler[IniConfig]):
    def read(self) -> IniConfig:
        try:
            with open(self._fn, 'r', encoding=self._codec or 'utf-8') as fp:
                data = json.load(fp)
        except (OSError, UnicodeDecodeError) as e:
            raise FileIOError.from_error(self._fn, e) from e
        except json.JSONDecodeError as e:
            raise InvalidDocument(self._fn, f'invalid JSON: {e}') from e
        return _from_document(self._fn, data)

    def write(self, instance: IniConfig, indent: int = 2) -> None:
        try:
            with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
                json.dump(instance.to_dict(), fp,
                          ensure_ascii=False, indent=indent)
        except OSError as e:
            raise FileIOError.from_error(self._fn, e) from e


def loads(text: str, source: str = '<string>') -> IniConfig:
    """Parse `text` as an INI file labelled `source`.

    Blocking, like `IniParser.read()`. Don't call it from a running loop;
    await `IniParser.readstream()` there instead.
    """
    return asyncio.run(
        IniParser.readstream(AsyncLineReader(StringIO(text)), source))


async def read_from_file(
    path: str | PathLike[str], encoding: str | None = None
) -> IniConfig:
    return await IniParser(path, encoding).read_async()


def write_to_file(
    config: IniConfig, path: str | PathLike[str],
    encoding: str | None = None
) -> None:
    IniParser(path, encoding).write(config)


async def read_layers(
    *paths: str | PathLike[str],
    defaults: IniConfig | None = None,
    encoding: str | None = None
) -> IniConfig:
    """Read `paths` in order, each one overriding those before it
    (and `defaults` first of all).

    Errors of every file are gathered into one `IniReadError`.
    """
    ret = defaults if defaults is not None else IniConfig()
    errors: list[FileError] = []
    for i in paths:
        try:
            layer = await IniParser(i, encoding).read_async()
        except IniReadError as e:
            errors.extend(e.errors)
            continue
        logging.info(f'Layering {fspath(i)} ({len(layer)} variables).')
        ret = ret.merge_with(layer)
    if errors:
        raise IniReadError(', '.join(fspath(i) for i in paths), errors)
    return ret
