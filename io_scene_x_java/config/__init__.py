# -*- coding: utf-8 -*-
"""Configuration module"""

from .constants import *
from .export_settings import (
    DirectXExportSettings,
    JavaExportSettings,
)

__all__ = [
    'DirectXExportSettings',
    'JavaExportSettings',
]
