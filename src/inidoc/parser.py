# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Note: the INI dialect here is **deliberately small**.

We do parsing based on the following rules:
1. Lines come in trimmed. Blank lines and lines starting with `#` or `;`
are skipped.
Comments have to take a whole line, there's no inline comment.
2. `[name]` opens a section; a repeated name reopens the old one.
3. `key=value` is split at the *first* `=`, both sides kept as is,
and it must come after some section header.
4. Anything else is an error, and the whole parse fails.
"""

import logging
from collections.abc import Iterable
from os import PathLike
from os.path import exists
from warnings import warn

from .abstract import FileHandler
from .consts import (
    COMMENT_MARKS, KVP_SPLIT, SECTION_END, SECTION_START, LineEnding
)
from .exceptions import KvpBeforeSection, UnrecognizedLine
from .model import IniDocument
from .textio import read_lines, read_text, split_lines, write_durable

logger = logging.getLogger(__name__)


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self,
        filename: str | PathLike[str],
        encoding: str | None = None, *,
        line_ending: LineEnding | str | None = None,
        sort_keys: bool = True
    ) -> None:
        super().__init__(filename, encoding)
        self._line_ending = line_ending
        self._sort = sort_keys

    @staticmethod
    def parselines(
        lines: Iterable[str], ins: IniDocument | None = None
    ) -> IniDocument:
        """解析拆好的行。传入`ins`则合并进已有文档（后者优先）。

        如没有特殊需求，直接调用`self.read()`或`loads()`便是。
        """
        if ins is None:
            ins = IniDocument()
        this_sect: dict[str, str] | None = None
        for lineno, i in enumerate(lines, 1):
            if not i or i[0] in COMMENT_MARKS:
                continue

            if i.startswith(SECTION_START) and (
                end := i.find(SECTION_END, 1)
            ) != -1:
                # drop one `[` and one `]`, whatever follows stays in the name.
                name = (i[1:end] + i[end + 1:]).strip()
                if name in ins.config_map:
                    warn(f'小节 [{name}] 重复出现，键值对将合并到先前的小节中。',
                         stacklevel=2)
                this_sect = ins.config_map.setdefault(name, {})
            elif KVP_SPLIT in i:
                if this_sect is None:
                    raise KvpBeforeSection(lineno, i)
                key, val = i.split(KVP_SPLIT, 1)
                this_sect[key] = val
            else:
                raise UnrecognizedLine(lineno, i)
        return ins

    def _new_document(self) -> IniDocument:
        return IniDocument(
            self._fn,
            line_ending=self._line_ending,
            encoding=self._codec or 'utf-8',
            sort_keys=self._sort)

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        文件不存在时返回绑定到该路径的空文档，方便新建配置。
        """
        ret = self._new_document()
        if not exists(self._fn):
            logger.info('%s not found, starting an empty document', self._fn)
            return ret
        text, ret.encoding = read_text(self._fn, self._codec)
        lines = split_lines(text)
        self.parselines(lines, ret)
        logger.debug('read %s: %d lines, %d sections',
                     self._fn, len(lines), len(ret))
        return ret

    def readfiles(self, *paths: str | PathLike[str]) -> IniDocument:
        """除读取`IniParser`实例指定的文件之外，还依次合并`paths`里的文件。

        同名小节合并，同名键后者覆盖前者。文档仍绑定在`self.filename`上。
        缺失的文件会被跳过并告警。
        """
        ret = self.read()
        for i in paths:
            if not exists(i):
                warn(f'在读取`{self._fn}`时，未找到`{i}`。', stacklevel=2)
                continue
            self.parselines(read_lines(i, self._codec), ret)
        return ret

    def write(self, instance: IniDocument) -> int:
        """Save `instance` to `self.filename`, not touching its bound path.

        Returns the file size after writing.
        """
        return write_durable(
            self._fn,
            instance.serialize(line_ending=self._line_ending),
            self._codec or instance.encoding)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


def load(
    path: str | PathLike[str],
    encoding: str | None = None, *,
    line_ending: LineEnding | str | None = None,
    sort_keys: bool = True
) -> IniDocument:
    """Load an INI file, bound to `path` for later `save()`.

    A missing file gives an empty document instead of an error.
    """
    return IniParser(
        path, encoding, line_ending=line_ending, sort_keys=sort_keys).read()


def loads(
    text: str, *,
    line_ending: LineEnding | str | None = None,
    sort_keys: bool = True
) -> IniDocument:
    """Parse INI text. The result has no bound path, so `save()` won't work
    until `path` is set manually."""
    lines = split_lines(text)
    ret = IniParser.parselines(
        lines, IniDocument(line_ending=line_ending, sort_keys=sort_keys))
    logger.debug('parsed %d lines, %d sections', len(lines), len(ret))
    return ret


parse_string = loads
