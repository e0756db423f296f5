# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 21:07:45
# @Author : Kariko Lin

from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import TypeVar

T = TypeVar('T')


class FileHandler[T](metaclass=ABCMeta):
    """Owns the backing file of a document of type `T`.

    Implementations open the file, hand a decoded line stream to a parser,
    and guarantee it is closed on every exit path.
    I/O failures propagate as `OSError` (or `UnicodeDecodeError`).
    """
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        self._fn = fspath(filename)
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def encoding(self) -> str:
        return self._codec

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
