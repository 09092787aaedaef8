# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure, sections of plain `key=value` pairs.

As for reading text, just see `inidoc.parser`.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from os import PathLike, fspath

from .consts import KVP_SPLIT, SECTION_END, SECTION_START, LineEnding
from .exceptions import NoBoundPathError, UnsupportedLineEnding
from .textio import write_durable

logger = logging.getLogger(__name__)


def _ordered(keys: Iterable[str], sort_keys: bool) -> list[str]:
    return sorted(keys) if sort_keys else list(keys)


def resolve_line_ending(value: LineEnding | str | None) -> LineEnding:
    if value is None:
        return LineEnding.native()
    try:
        return LineEnding(value)
    except ValueError:
        raise UnsupportedLineEnding(value) from None


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    只是`IniDocument.config_map`里某个小节字典的视图，
    增删改都会直接落到文档上。
    所有键值对均*应该*是`str: str`类型，但运行时并不会对此作出限制。
    """

    def __init__(
        self, section_name: str, /,
        this_dict: dict[str, str], sort_keys: bool = True
    ) -> None:
        self._name = section_name
        # in case shared ptr to item of IniDocument.config_map
        self._data = this_dict
        self._sort = sort_keys

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(_ordered(self._data, self._sort))

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        """A detached copy, in iteration order."""
        return {k: self._data[k] for k in self}


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。支持以下形式的小节和键值对：

        ```ini
        [section]
        key=value
        ; 注释
        # 也是注释
        ```

    `config_map`是公开的原始字典，可以绕过各个方法直接读写，
    但调用者需要自己保证“小节名和键唯一、值为字符串”。

    本类*不做*任何线程同步，需要并发访问请自行加锁。
    """

    def __init__(
        self,
        path: str | PathLike[str] | None = None, *,
        line_ending: LineEnding | str | None = None,
        encoding: str = 'utf-8',
        sort_keys: bool = True
    ) -> None:
        self.config_map: dict[str, dict[str, str]] = {}
        self.path = path
        self.line_ending = line_ending
        self.encoding = encoding
        self.sort_keys = sort_keys

    @property
    def path(self) -> str | None:
        """文档绑定的文件路径，`save()`会写回这里。"""
        return self.__path

    @path.setter
    def path(self, value: str | PathLike[str] | None) -> None:
        self.__path = None if value is None else fspath(value)

    @property
    def line_ending(self) -> LineEnding:
        return self.__line_ending

    @line_ending.setter
    def line_ending(self, value: LineEnding | str | None) -> None:
        self.__line_ending = resolve_line_ending(value)

    def __getitem__(self, key: str) -> IniSection:
        return IniSection(key, self.config_map[key], self.sort_keys)

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str]
    ) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.config_map[key] = dict(value.items())

    def __delitem__(self, key: str) -> None:
        del self.config_map[key]

    def __contains__(self, key: object) -> bool:
        return key in self.config_map

    def __len__(self) -> int:
        return len(self.config_map)

    def __iter__(self) -> Iterator[str]:
        return iter(_ordered(self.config_map, self.sort_keys))

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return '<IniDocument %s { .sections = %d }>' % (
            self.path or '(unbound)', len(self))

    def setdefault(
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        if key not in self.config_map:
            self.config_map[key] = dict(default or {})
        return self[key]

    def get(  # type: ignore[override]
        self, section: str, key: str, default: str | None = None
    ) -> str | None:
        """获取`section`小节中`key`的值，找不到则返回`default`。

        注：值开头的*一个*空格会被去掉（`key= value`读出来是`value`）。
        """
        try:
            value = self.config_map[section][key]
        except KeyError:
            return default
        return value[1:] if value.startswith(' ') else value

    def set(self, section: str, key: str, value: str) -> None:
        """Insert or overwrite, creating the section when absent.

        Doesn't save the file.
        """
        self.config_map.setdefault(section, {})[key] = value

    def remove(self, section: str, key: str) -> None:
        """Remove a key. Missing section or key is a no-op."""
        if (pairs := self.config_map.get(section)) is not None:
            pairs.pop(key, None)

    def remove_section(self, section: str) -> None:
        self.config_map.pop(section, None)

    def serialize(
        self, *,
        line_ending: LineEnding | str | None = None,
        blank_lines: int = 0
    ) -> str:
        """Dump to INI text. An empty document gives an empty string.

        Comments and blank lines read from the source are not kept.
        """
        nl = (self.line_ending if line_ending is None
              else resolve_line_ending(line_ending)).value
        buf: list[str] = []
        for section in self:
            buf.append(f'{SECTION_START}{section}{SECTION_END}{nl}')
            pairs = self.config_map[section]
            for k in _ordered(pairs, self.sort_keys):
                buf.append(f'{k}{KVP_SPLIT}{pairs[k]}{nl}')
            buf.append(nl * blank_lines)
        return ''.join(buf)

    def save(self) -> int:
        """写回绑定的文件（不存在则创建，存在则清空重写）。

        返回写入后的文件大小（字节）。注意：原文件中的注释全部丢失。
        """
        if self.path is None:
            raise NoBoundPathError()
        size = write_durable(self.path, self.serialize(), self.encoding)
        logger.info('saved %s (%d bytes)', self.path, size)
        return size
