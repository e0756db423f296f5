# -*- encoding: utf-8 -*-
# @File   : store.py
# @Time   : 2026/10/13 00:02:51
# @Author : Kariko Lin

"""Load once, look up and update in memory, then write back.

Every accessor comes in two forms, the section being optional:

    store.get('key')              # default section
    store.get('section', 'key')
    store.get(None, 'key')        # default section, spelled out

Values are kept as strings. Typed getters parse on demand:
`get_int()`/`get_float()` are strict and raise `IniParseError`,
`get_bool()` is lenient and falls back to `False`.
"""

import logging
import re
from os import PathLike
from typing import Any, overload
from warnings import warn

from .errors import IniEmptySectionError, IniParseError
from .ini.model import (
    RESERVED_SECTION,
    IniDocument,
    SavePolicy,
    Section,
    resolve_section
)
from .ini.parser import DEFAULT_HEADER_COMMENT, SECTION_HEADER, IniFileHandler

type SectionArg = str | Section | None

_INT_LITERAL = re.compile(r'[+-]?[0-9]+')
_UNSET: Any = object()


def _shift(section: Any, *rest: Any) -> tuple[Any, tuple[Any, ...]]:
    """Tell `(key, ...)` from `(section, key, ...)`.

    The short form leaves the last parameter unset.
    """
    if rest[-1] is _UNSET:
        return None, (section, *rest[:-1])
    return section, rest


def _section_label(section: SectionArg) -> str | None:
    return section.name if isinstance(section, Section) else section


def _check_number(caller: str, value: object) -> None:
    # `set_int('s', 'k')` would otherwise store under key 's' in the default.
    if isinstance(value, str):
        raise TypeError(f'{caller}() expects a number, got {value!r}')


class ConfigStore:
    """In-memory view of one INI file.

    Not thread-safe; callers sharing a store across threads must lock.
    """
    def __init__(
        self, path: str | PathLike[str], *,
        encoding: str = 'utf-8',
        header_comment: str = DEFAULT_HEADER_COMMENT
    ) -> None:
        self._handler = IniFileHandler(path, encoding, header_comment)
        self._data = IniDocument()

    @property
    def path(self) -> str:
        """The backing file. Fixed for the lifetime of the store."""
        return self._handler.filename

    @property
    def document(self) -> IniDocument:
        return self._data

    def load(self) -> bool:
        """(Re)build the cache from the backing file.

        Returns `False`, leaving the cache *empty*, if the file can't be read
        or its last section has no pair. Nothing is raised.
        """
        self._data.clear()
        try:
            doc = self._handler.read()
        except (OSError, UnicodeError, IniEmptySectionError) as e:
            logging.warning(f"INI not loaded: {self._handler}\n  {e}")
            return False
        self._data.update(doc)
        logging.debug(f"Loaded {len(self._data)} section(s) from {self.path}")
        return True

    def save(self, policy: SavePolicy | int = SavePolicy.KEEP) -> bool:
        """Overwrite the backing file with the cache.

        `policy` is applied afterwards *whether or not the write succeeded*:
        `UNLOAD` empties the cache, `RELOAD` empties it and calls `load()`.
        Returns `True` only if the file got written.
        """
        policy = SavePolicy.of(policy)
        try:
            self._handler.write(self._data)
            logging.debug(f"Saved {len(self._data)} section(s) to {self.path}")
            return True
        except (OSError, UnicodeError) as e:
            logging.warning(f"INI not saved: {self._handler}\n  {e}")
            return False
        finally:
            if policy is not SavePolicy.KEEP:
                self._data.clear()
            if policy is SavePolicy.RELOAD:
                self.load()

    def _get(self, section: SectionArg, key: str) -> str | None:
        if (ref := resolve_section(section)) is None:
            return None
        return self._data.get(ref, {}).get(key)

    @overload
    def get(self, key: str, /) -> str | None: ...
    @overload
    def get(self, section: SectionArg, key: str) -> str | None: ...

    def get(self, section: Any, key: Any = _UNSET) -> str | None:
        """`get([section,] key)`. `None` if the key can't be found.

        Note: `get('none', key)` is always `None`, even for pairs of the
        default section. Use `get(key)` or `get(None, key)` for those.
        """
        section, (key,) = _shift(section, key)
        return self._get(section, key)

    @overload
    def get_float(self, key: str, /) -> float: ...
    @overload
    def get_float(self, section: SectionArg, key: str) -> float: ...

    def get_float(self, section: Any, key: Any = _UNSET) -> float:
        section, (key,) = _shift(section, key)
        value = self._get(section, key)
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise IniParseError(
                _section_label(section), key, value, 'float') from e

    @overload
    def get_int(self, key: str, /) -> int: ...
    @overload
    def get_int(self, section: SectionArg, key: str) -> int: ...

    def get_int(self, section: Any, key: Any = _UNSET) -> int:
        """Base-10 only: an optional sign then digits, nothing around."""
        section, (key,) = _shift(section, key)
        value = self._get(section, key)
        if value is None or _INT_LITERAL.fullmatch(value) is None:
            raise IniParseError(_section_label(section), key, value, 'int')
        return int(value)

    @overload
    def get_bool(self, key: str, /) -> bool: ...
    @overload
    def get_bool(self, section: SectionArg, key: str) -> bool: ...

    def get_bool(self, section: Any, key: Any = _UNSET) -> bool:
        """`True` only for `true` in any case. Never raises."""
        section, (key,) = _shift(section, key)
        value = self._get(section, key)
        return value is not None and value.lower() == 'true'

    @overload
    def exists(self, key: str, /) -> bool: ...
    @overload
    def exists(self, section: SectionArg, key: str) -> bool: ...

    def exists(self, section: Any, key: Any = _UNSET) -> bool:
        section, (key,) = _shift(section, key)
        return self._get(section, key) is not None

    @overload
    def set(self, key: str, value: str, /) -> None: ...
    @overload
    def set(self, section: SectionArg, key: str, value: str) -> None: ...

    def set(self, section: Any, key: Any, value: Any = _UNSET) -> None:
        """`set([section,] key, value)`, creating the section if needed.

        Writing to the literal `"none"` section does nothing,
        default pairs go through `set(key, value)` or `set(None, ...)`.
        """
        section, (key, value) = _shift(section, key, value)
        if (ref := resolve_section(section)) is None:
            warn(
                f'"{RESERVED_SECTION}" is reserved for the default section, '
                f'"{key}" was not stored. Pass `None` as section instead.')
            return
        if (not ref.is_default and ref not in self._data
                and SECTION_HEADER.fullmatch(f'[{ref.name}]') is None):
            warn(
                f'[{ref.name}] is not a valid section header, '
                'its pairs will be read back into the previous section.')
        self._data.setdefault(ref)[key] = value

    @overload
    def set_float(self, key: str, value: float, /) -> None: ...
    @overload
    def set_float(
        self, section: SectionArg, key: str, value: float) -> None: ...

    def set_float(self, section: Any, key: Any, value: Any = _UNSET) -> None:
        section, (key, value) = _shift(section, key, value)
        _check_number('set_float', value)
        self.set(section, key, repr(float(value)))

    @overload
    def set_int(self, key: str, value: int, /) -> None: ...
    @overload
    def set_int(self, section: SectionArg, key: str, value: int) -> None: ...

    def set_int(self, section: Any, key: Any, value: Any = _UNSET) -> None:
        section, (key, value) = _shift(section, key, value)
        _check_number('set_int', value)
        self.set(section, key, str(int(value)))

    @overload
    def set_bool(self, key: str, value: bool, /) -> None: ...
    @overload
    def set_bool(
        self, section: SectionArg, key: str, value: bool) -> None: ...

    def set_bool(self, section: Any, key: Any, value: Any = _UNSET) -> None:
        section, (key, value) = _shift(section, key, value)
        self.set(section, key, 'true' if value else 'false')

    @overload
    def remove(self, key: str, /) -> bool: ...
    @overload
    def remove(self, section: SectionArg, key: str) -> bool: ...

    def remove(self, section: Any, key: Any = _UNSET) -> bool:
        """`remove([section,] key)`. `False` if there was nothing to drop.

        A named section goes away with its last key,
        since an empty last section would make the saved file unloadable.
        """
        section, (key,) = _shift(section, key)
        ref = resolve_section(section)
        if ref is None or key not in self._data.get(ref, {}):
            return False
        del self._data[ref][key]
        if not self._data[ref] and not ref.is_default:
            del self._data[ref]
        return True

    def sections(self) -> list[str]:
        """Names of the named sections, in insertion order."""
        return [sect.name for sect, _ in self._data.named()]

    def keys(self, section: SectionArg = None) -> list[str]:
        if (ref := resolve_section(section)) is None:
            return []
        return list(self._data.get(ref, {}))

    def __contains__(self, section: object) -> bool:
        if not isinstance(section, (str, Section)) and section is not None:
            return False
        ref = resolve_section(section)
        return ref is not None and ref in self._data

    def __repr__(self) -> str:
        return f'ConfigStore({self.path!r}, {self._data!r})'
