# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 22:31:50
# @Author : Kariko Lin

"""
Group/variable/value store of a (layered) INI configuration.

An `IniConfig` is never changed in place.
`set()`, `set_default()` and `merge_with()` build a new instance,
so one config can be handed to as many readers as you like.

    ```python
    conf = (
        IniConfig()
        .set_default('log level', 'info')
        .set('Server', 'port', '8080')
        .merge_with(IniParser('app.ini').read())
    )
    conf['log level']           # DEFAULT group
    conf[('Server', 'port')]    # any group
    conf.get('Server', 'host')  # None when absent
    ```
"""

from collections.abc import Iterator, Mapping
from typing import Any

from ..iterutil import uniq

DEFAULT_GROUP = 'DEFAULT'

# (group, variable). linear scans per group; fine for config-sized data.
Key = tuple[str, str]


class IniConfig:
    __slots__ = ('__values',)

    def __init__(
        self, values: 'Mapping[Key, str] | IniConfig | None' = None
    ) -> None:
        if isinstance(values, IniConfig):
            values = values.__values
        elif values is not None and not isinstance(values, Mapping):
            raise TypeError(
                'IniConfig needs a mapping of (group, variable) -> value, '
                f'got {type(values).__name__}')
        # always a private copy, nobody else may hold this dict.
        self.__values: dict[Key, str] = dict(values) if values else {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> 'IniConfig':
        """Build from `{group: {variable: value}}`.

        Values are kept as `str()` of what was given,
        since YAML/JSON loaders may hand us ints or bools.
        A null value is the empty one, like `var =` in INI.
        """
        return cls({
            (str(group), str(var)): '' if val is None else str(val)
            for group, pairs in data.items()
            for var, val in pairs.items()
        })

    def to_dict(self) -> dict[str, dict[str, str]]:
        ret: dict[str, dict[str, str]] = {}
        for (group, var), val in self.__values.items():
            ret.setdefault(group, {})[var] = val
        return ret

    # ---- builders: the receiver stays as it was.

    def set(self, group: str, variable: str, value: str) -> 'IniConfig':
        """Return a copy with `variable` in `group` set to `value`.

        Handy to declare defaults before merging a parsed file on top.
        """
        ret = IniConfig(self.__values)
        ret.__values[(group, variable)] = value
        return ret

    def set_default(self, variable: str, value: str) -> 'IniConfig':
        return self.set(DEFAULT_GROUP, variable, value)

    def merge_with(self, other: 'IniConfig') -> 'IniConfig':
        """Return `self` overlaid by `other`.

        Variables present in both take the value of `other`.
        """
        ret = IniConfig(self.__values)
        ret.__values.update(other.__values)
        return ret

    # ---- queries

    def get(self, group: str, variable: str) -> str | None:
        return self.__values.get((group, variable))

    def get_default(self, variable: str) -> str | None:
        return self.get(DEFAULT_GROUP, variable)

    def groups(self) -> Iterator[str]:
        return uniq(group for group, _ in self.__values)

    def variables_in_group(self, group: str) -> Iterator[str]:
        return (var for g, var in self.__values if g == group)

    def group_by_key_value(self, group: str) -> Iterator[tuple[str, str]]:
        return (
            (var, val) for (g, var), val in self.__values.items()
            if g == group
        )

    def __getitem__(self, key: str | Key) -> str:
        """`conf['var']` looks in DEFAULT, `conf[('group', 'var')]` anywhere.

        Raises `KeyError` when absent: only index what you know is there.
        """
        if isinstance(key, str):
            key = (DEFAULT_GROUP, key)
        return self.__values[key]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            key = (DEFAULT_GROUP, key)
        return key in self.__values

    def __iter__(self) -> Iterator[Key]:
        return iter(self.__values)

    def __len__(self) -> int:
        return len(self.__values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniConfig):
            return NotImplemented
        return self.__values == other.__values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return 'IniConfig { .groups = %d, .cnt = %d }' % (
            len(list(self.groups())), len(self.__values))
