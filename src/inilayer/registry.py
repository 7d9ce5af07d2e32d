# -*- encoding: utf-8 -*-
# @File   : registry.py
# @Time   : 2024/11/04 19:26:03
# @Author : Kariko Lin

"""A process wide `IniConfig`, set exactly once.

    ```python
    set_global(IniParser('app.ini').read())
    ...
    global_config()['log level']
    ```
"""

import logging
from threading import Lock

from .ini.model import IniConfig

_lock = Lock()
_config: IniConfig | None = None


class GlobalAlreadySet(Exception):
    """`set_global()` was called twice. `config` is the rejected one."""

    def __init__(self, config: IniConfig) -> None:
        super().__init__('Global configuration was already initialized')
        self.config = config


class GlobalNotSet(RuntimeError):
    pass


def set_global(config: IniConfig) -> None:
    global _config
    with _lock:
        if _config is not None:
            raise GlobalAlreadySet(config)
        _config = config
    logging.debug(f'Global configuration set: {config!r}')


def global_config() -> IniConfig:
    """Raises `GlobalNotSet` when `set_global()` hasn't been called yet."""
    if _config is None:
        raise GlobalNotSet('Global configuration is not initialized')
    return _config
