# -*- encoding: utf-8 -*-
# @File   : textio.py
# @Time   : 2024/10/12 23:04:18
# @Author : Kariko Lin

"""Line reading and durable writing.

Lines handed to the parser are trimmed on both ends,
and blank lines are kept as empty strings.
"""

import codecs
import logging
import os
from os import PathLike

import chardet

from .exceptions import IniReadError, IniWriteError

logger = logging.getLogger(__name__)

# below this the guess is usually garbage for short config files.
MIN_CONFIDENCE = 0.8


def split_lines(text: str) -> list[str]:
    """Split in-memory text the same way `read_lines()` splits a file."""
    return [i.strip() for i in text.split('\n')]


def _decode(raw: bytes, filename: str) -> tuple[str, str]:
    try:
        text = raw.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        err = e
    else:
        bom = raw.startswith(codecs.BOM_UTF8)
        return text, 'utf-8-sig' if bom else 'utf-8'

    codec = chardet.detect(raw)
    if codec['encoding'] is None or codec['confidence'] < MIN_CONFIDENCE:
        raise IniReadError(
            f'Failed to read file {filename}: unknown encoding') from err
    logger.debug('%s decoded as %s (confidence %.2f)',
                 filename, codec['encoding'], codec['confidence'])
    try:
        return raw.decode(codec['encoding']), codec['encoding']
    except (UnicodeDecodeError, LookupError) as e:
        raise IniReadError(f'Failed to read file {filename}') from e


def read_text(
    filename: str | PathLike[str], encoding: str | None = None
) -> tuple[str, str]:
    """读取并解码整个文件，返回`(文本, 实际使用的编码)`。

    `encoding` 为 `None` 时先按 UTF-8 解码，失败再交给`chardet`猜。
    """
    filename = os.fspath(filename)
    try:
        with open(filename, 'rb') as fp:
            raw = fp.read()
    except OSError as e:
        raise IniReadError(f'Failed to read file {filename}') from e

    if encoding is None:
        return _decode(raw, filename)
    try:
        return raw.decode(encoding), encoding
    except (UnicodeDecodeError, LookupError) as e:
        raise IniReadError(
            f'Failed to read file {filename} as {encoding}') from e


def read_lines(
    filename: str | PathLike[str], encoding: str | None = None
) -> list[str]:
    """读取整个文件并按行拆分，空行保留为空串。"""
    return split_lines(read_text(filename, encoding)[0])


def write_durable(
    filename: str | PathLike[str], text: str, encoding: str = 'utf-8'
) -> int:
    """Create or truncate `filename`, write `text` and sync it to disk.

    Returns the file size after writing. Text that can't be encoded
    leaves the old file alone.
    """
    try:
        data = text.encode(encoding)
    except (UnicodeEncodeError, LookupError) as e:
        raise IniWriteError(
            f'Failed to encode {os.fspath(filename)} as {encoding}') from e
    with open(filename, 'wb') as fp:
        fp.write(data)
        fp.flush()
        os.fsync(fp.fileno())
        return os.fstat(fp.fileno()).st_size
