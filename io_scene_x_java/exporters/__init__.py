# -*- coding: utf-8 -*-
"""Exporters"""

from .base_exporter import BaseExporter
from .directx_exporter import DirectXExporter
from .java_exporter import JavaExporter

__all__ = [
    'BaseExporter',
    'DirectXExporter',
    'JavaExporter',
]
