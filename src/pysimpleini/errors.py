# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:31:02
# @Author : Kariko Lin

"""Exceptions raised by pysimpleini.

`ConfigStore.load()` and `ConfigStore.save()` never raise these
(nor `OSError`); they log and return `False` instead.
Only the strict typed getters let an `IniParseError` reach the caller.
"""


class IniError(Exception):
    """Base class of every error defined by this package."""
    pass


class IniParseError(IniError, ValueError):
    """A strict getter found a missing or malformed value."""
    def __init__(
        self, section: str | None, key: str,
        value: str | None, expected: str
    ) -> None:
        self.section = section
        self.key = key
        self.value = value
        self.expected = expected
        where = key if section is None else f'[{section}] {key}'
        if value is None:
            msg = f'{where}: no value to parse as {expected}'
        else:
            msg = f'{where}: {value!r} is not a valid {expected}'
        super().__init__(msg)


class IniEmptySectionError(IniError):
    """The last section of a file holds no key-value pair.

    Such a file counts as a failed load, even if earlier sections
    were read fine.
    """
    def __init__(self, filename: str, section: str) -> None:
        self.filename = filename
        self.section = section
        super().__init__(f'{filename}: last section {section} is empty')


__all__ = ['IniError', 'IniParseError', 'IniEmptySectionError']
