# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:31:17
# @Author : Kariko Lin

import logging

from .ini import (
    DEFAULT_GROUP,
    IniConfig,
    IniParser,
    IniYamlParser,
    IniJsonParser,
    IniReadError,
    FileError,
    FileIOError,
    ParseError,
    MissingClosingBracket,
    MissingVariableName,
    InvalidLine,
    InvalidDocument,
    loads,
    read_from_file,
    read_layers,
    write_to_file
)
from .registry import set_global, global_config
from .secure import SecureString

__all__ = [
    'DEFAULT_GROUP', 'IniConfig',
    'IniParser', 'IniYamlParser', 'IniJsonParser',
    'IniReadError', 'FileError', 'FileIOError', 'ParseError',
    'MissingClosingBracket', 'MissingVariableName', 'InvalidLine',
    'InvalidDocument',
    'loads', 'read_from_file', 'read_layers', 'write_to_file',
    'set_global', 'global_config',
    'SecureString'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
