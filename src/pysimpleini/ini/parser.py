# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 22:15:40
# @Author : Kariko Lin

"""Reads and writes the plain `key = value` INI dialect.

What a line means, checked in this order:
1. `#` in the first column: a comment, skipped. No inline comments.
2. exactly `[word]` (`[A-Za-z0-9_]+`, whole line): a section header.
3. anything containing ` = `: a pair, split on the first separator only,
   value kept verbatim.
Every other line is silently ignored.
"""

import re
from os import PathLike
from typing import TextIO

from .model import DEFAULT_SECTION, IniDocument, Section, SectionData
from ..abstract import FileHandler
from ..errors import IniEmptySectionError

SECTION_HEADER = re.compile(r'\[\w+\]', re.ASCII)
SEPARATOR = ' = '
DEFAULT_HEADER_COMMENT = 'Created by pysimpleini'


class IniFileHandler(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = 'utf-8',
        header_comment: str = DEFAULT_HEADER_COMMENT
    ) -> None:
        super().__init__(filename, encoding)
        self._comment = header_comment

    @staticmethod
    def readstream(buf: TextIO, name: str = '<stream>') -> IniDocument:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。

        Raises:
            IniEmptySectionError: the last section got no pair at all.
            Earlier sections don't matter, the whole read counts as failed.
        """
        ins = IniDocument()
        this_sect, pairs = DEFAULT_SECTION, {}
        while i := buf.readline():
            line = i.removesuffix('\n').removesuffix('\r')
            if line.startswith('#'):
                continue
            if SECTION_HEADER.fullmatch(line):
                # a repeated header replaces what was read before.
                ins[this_sect] = pairs
                this_sect, pairs = Section.from_header(line[1:-1]), {}
            elif len(pair := line.split(SEPARATOR, 1)) == 2:
                pairs[pair[0]] = pair[1]

        if not pairs:
            raise IniEmptySectionError(name, str(this_sect))
        ins[this_sect] = pairs
        return ins

    @staticmethod
    def writestream(
        instance: IniDocument, buf: TextIO,
        header_comment: str = DEFAULT_HEADER_COMMENT
    ) -> None:
        """Dump `instance` into `buf`: the writer comment,
        the default pairs (no header), then each named section."""
        buf.write(f'# {header_comment}\n')
        if (header := instance.header) is not None:
            buf.write('\n')
            IniFileHandler.__output_pairs(header, buf)
        for sect, data in instance.named():
            buf.write(f'\n[{sect.name}]\n')
            IniFileHandler.__output_pairs(data, buf)

    @staticmethod
    def __output_pairs(pairs: SectionData, buf: TextIO) -> None:
        for k, v in pairs.items():
            buf.write(f'{k}{SEPARATOR}{v}\n')

    def read(self) -> IniDocument:
        """读取`IniFileHandler`实例指定的文件。

        May raise `OSError`, `UnicodeDecodeError`
        or `IniEmptySectionError`.
        """
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return self.readstream(fp, self._fn)

    def write(self, instance: IniDocument) -> None:
        """覆盖保存到指定的 INI 文件。May raise `OSError`."""
        with open(self._fn, 'w', encoding=self._codec) as fp:
            self.writestream(instance, fp, self._comment)

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
