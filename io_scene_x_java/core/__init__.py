# -*- coding: utf-8 -*-
# File: core/__init__.py
# Purpose: Core module init

"""
Export core
Scene snapshot, walker, mesh extraction and material registry
"""

__all__ = [
    'schema',
    'transform',
    'coordinate_converter',
    'scene_walker',
    'mesh_extractor',
    'material_registry',
    'context',
    'host',
]
