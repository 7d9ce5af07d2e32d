# -*- encoding: utf-8 -*-
# @File   : secure.py
# @Time   : 2024/11/04 20:47:31
# @Author : Kariko Lin

"""A string holder that zeroes its buffer when dropped.

Meant for secrets read from configuration, e.g. passwords.
It only promises that the erasure *runs*:
copies made before wrapping (the `str` you passed in, its encoded bytes),
copies made by `str(secret)`, and memory swapped to disk are out of reach.
"""

import ctypes
from functools import total_ordering
from hmac import compare_digest
from typing import NoReturn


def secure_erase(buf: bytearray) -> None:
    """Zero `buf` in place.

    `ctypes.memset` is a real C call,
    so no optimizer gets to skip it as a dead store.
    """
    if not buf:
        return
    view = (ctypes.c_char * len(buf)).from_buffer(buf)
    ctypes.memset(ctypes.addressof(view), 0, len(buf))
    del view  # release the export, `buf` may be resized again.


@total_ordering
class SecureString:
    __slots__ = ('__buf',)

    def __init__(self, value: str | bytes) -> None:
        self.__buf = bytearray()
        self.__buf.extend(
            value.encode('utf-8') if isinstance(value, str) else value)

    def erase(self) -> None:
        secure_erase(self.__buf)

    def __del__(self) -> None:
        self.erase()

    # can't stop the caller from keeping what these return.
    def __str__(self) -> str:
        return self.__buf.decode('utf-8')

    def __bytes__(self) -> bytes:
        return bytes(self.__buf)

    def __repr__(self) -> str:
        return 'SecureString(<%d bytes>)' % len(self.__buf)

    def __len__(self) -> int:
        return len(self.__buf)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SecureString):
            other = other.__buf
        elif isinstance(other, str):
            other = other.encode('utf-8')
        if not isinstance(other, (bytes, bytearray)):
            return NotImplemented
        return compare_digest(self.__buf, other)

    def __lt__(self, other: 'SecureString') -> bool:
        if not isinstance(other, SecureString):
            return NotImplemented
        return self.__buf < other.__buf

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> NoReturn:
        raise TypeError('SecureString cannot be copied')

    def __deepcopy__(self, memo: dict) -> NoReturn:
        raise TypeError('SecureString cannot be copied')

    def __reduce__(self) -> NoReturn:
        raise TypeError('SecureString cannot be pickled')
