# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 21:40:12
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """One file on disk, read into (or written from) a `T` instance."""

    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None
    ) -> None:
        self._fn = fspath(filename)
        # None means the locale default, as `open()` does.
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
