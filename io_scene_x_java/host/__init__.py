# -*- coding: utf-8 -*-
"""Blender host services (needs bpy)"""

from .blender_scene import (
    BlenderSceneReader,
    BlenderTessellator,
    BlenderTextureWriter,
    FaceHandle,
)

__all__ = [
    'BlenderSceneReader',
    'BlenderTessellator',
    'BlenderTextureWriter',
    'FaceHandle',
]
