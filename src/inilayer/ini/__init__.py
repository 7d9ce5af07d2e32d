# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 01:18:53
# @Author : Kariko Lin

from .errors import (
    FileError,
    FileIOError,
    ParseError,
    MissingClosingBracket,
    MissingVariableName,
    InvalidLine,
    InvalidDocument,
    IniReadError
)
from .lines import LineKind, ClassifiedLine, classify_line
from .model import DEFAULT_GROUP, IniConfig
from .parser import (
    AsyncLineReader,
    IniParser,
    IniYamlParser,
    IniJsonParser,
    loads,
    read_from_file,
    read_layers,
    write_to_file
)
