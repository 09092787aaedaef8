# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/10 01:15:56
# @Author : Kariko Lin

import os
from enum import Enum

SECTION_START = '['
SECTION_END = ']'
KVP_SPLIT = '='
COMMENT_MARKS = ('#', ';')


class LineEnding(str, Enum):
    CRLF = '\r\n'
    LF = '\n'

    @classmethod
    def native(cls) -> 'LineEnding':
        """Host convention. Anything that isn't Windows gets `LF`."""
        return cls.CRLF if os.name == 'nt' else cls.LF
