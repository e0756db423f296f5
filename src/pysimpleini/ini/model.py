# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 21:48:19
# @Author : Kariko Lin

"""
Basically INI Structure: sections of `key = value` string pairs.

Pairs declared before any `[section]` header belong to the default section.
On disk (and in older callers) the default section is labelled `none`,
so that name is reserved: see `resolve_section()`.
"""

from collections.abc import MutableMapping
from enum import IntEnum
from typing import Iterator, NamedTuple

RESERVED_SECTION = 'none'

type SectionData = dict[str, str]


class Section(NamedTuple):
    """小节引用。`name is None`即默认小节（文件头部的游离键值对）。"""
    name: str | None = None

    @property
    def is_default(self) -> bool:
        return self.name is None

    @classmethod
    def from_header(cls, name: str) -> 'Section':
        """for parsing. A `[none]` header is the default section itself."""
        return DEFAULT_SECTION if name == RESERVED_SECTION else cls(name)

    def __str__(self) -> str:
        return '; default' if self.name is None else f'[{self.name}]'


DEFAULT_SECTION = Section()


def resolve_section(section: str | Section | None) -> Section | None:
    """Map a caller's section argument to the section it addresses.

    - `None`: the default section.
    - the literal `"none"`: nothing at all, so getters report not-found
      and setters do nothing. Default pairs are only reachable via `None`.
    - anything else: the named section.
    """
    if section is None:
        return DEFAULT_SECTION
    if isinstance(section, Section):
        return None if section.name == RESERVED_SECTION else section
    if section == RESERVED_SECTION:
        return None
    return Section(section)


class SavePolicy(IntEnum):
    """What happens to the in-memory cache once a save attempt is over."""
    KEEP = 0
    RELOAD = 1
    UNLOAD = 2

    @classmethod
    def of(cls, value: 'SavePolicy | int') -> 'SavePolicy':
        # plain ints wrap around; negatives keep the cache.
        if (value := int(value)) < 0:
            return cls.KEEP
        return cls(value % 3)


class IniDocument(MutableMapping[Section, SectionData]):
    """INI 文件表示，即`Section`到键值字典的映射。

    ```ini
    key = val  ; 默认小节，使用 self.header 访问

    [section]
    key233 = val666
    ```

    小节按插入顺序保存，序列化结果因此稳定。
    """
    def __init__(self) -> None:
        self.__raw: dict[Section, SectionData] = {}

    @property
    def header(self) -> SectionData | None:
        """位于文件头部的，不属于任何小节的游离键值对（若有）。"""
        return self.__raw.get(DEFAULT_SECTION)

    def __getitem__(self, key: Section) -> SectionData:
        return self.__raw[key]

    def __setitem__(self, key: Section, value: SectionData) -> None:
        # shouldn't keep ptr to external dict in key setting operation.
        self.__raw[key] = dict(value)

    def __delitem__(self, key: Section) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[Section]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return 'IniDocument { %s }' % ', '.join(
            '%s .cnt = %d' % (k, len(v)) for k, v in self.__raw.items())

    def named(self) -> Iterator[tuple[Section, SectionData]]:
        """Every section except the default one, in insertion order."""
        for sect, data in self.__raw.items():
            if not sect.is_default:
                yield sect, data

    def setdefault(
        self, key: Section, default: SectionData | None = None
    ) -> SectionData:
        """Return the live dict of `key`, adding it first if absent."""
        if key not in self.__raw:
            self.__raw[key] = {} if default is None else dict(default)
        return self.__raw[key]

    def clear(self) -> None:
        self.__raw.clear()
