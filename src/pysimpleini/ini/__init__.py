# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:46:03
# @Author : Kariko Lin

from .model import (
    DEFAULT_SECTION,
    RESERVED_SECTION,
    IniDocument,
    SavePolicy,
    Section,
    SectionData,
    resolve_section
)
from .parser import IniFileHandler
