# -*- encoding: utf-8 -*-
# @File   : exceptions.py
# @Time   : 2024/10/12 22:31:07
# @Author : Kariko Lin


class IniError(Exception):
    """Base of every error raised by `inidoc`."""
    pass


class IniReadError(IniError, OSError):
    """File exists, but we failed to read or decode it."""
    pass


class IniWriteError(IniError, ValueError):
    """Document text can't be encoded for saving; nothing was written."""
    pass


class IniParseError(IniError, ValueError):
    """To record malformed lines when parsing INI text."""
    reason = 'Config file was invalid'

    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f'{self.reason} (line {lineno}: {line!r})')
        self.lineno = lineno
        self.line = line


class KvpBeforeSection(IniParseError):
    reason = 'KVP entry found before section'


class UnsplittableKvp(IniParseError):
    """Kept as an error kind, but never raised: splitting at the first `=`
    always succeeds, and `=value` is a pair with an empty key."""
    reason = "KVP entry couldn't be split"


class UnrecognizedLine(IniParseError):
    reason = "line didn't hit any requirement"


class UnsupportedLineEnding(IniError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f'unsupported line ending: {value!r}')
        self.value = value


class NoBoundPathError(IniError):
    def __init__(self) -> None:
        super().__init__(
            'document has no bound path. '
            'This is likely because it was created from a string.')
