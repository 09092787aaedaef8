# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/10 01:16:53
# @Author : Kariko Lin

import logging

from .consts import LineEnding
from .exceptions import (
    IniError,
    IniReadError,
    IniWriteError,
    IniParseError,
    KvpBeforeSection,
    UnsplittableKvp,
    UnrecognizedLine,
    UnsupportedLineEnding,
    NoBoundPathError
)
from .model import IniSection, IniDocument
from .parser import IniParser, load, loads, parse_string

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'LineEnding',
    'load', 'loads', 'parse_string',
    'IniError', 'IniReadError', 'IniWriteError', 'IniParseError',
    'KvpBeforeSection', 'UnsplittableKvp', 'UnrecognizedLine',
    'UnsupportedLineEnding', 'NoBoundPathError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
