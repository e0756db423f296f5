# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:02:17
# @Author : Kariko Lin

import logging

from .errors import IniError, IniParseError, IniEmptySectionError
from .ini import IniDocument, IniFileHandler, SavePolicy, Section
from .store import ConfigStore

__all__ = [
    'ConfigStore', 'SavePolicy', 'Section',
    'IniDocument', 'IniFileHandler',
    'IniError', 'IniParseError', 'IniEmptySectionError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
