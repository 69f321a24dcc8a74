# -*- coding: utf-8 -*-
"""
Exporter constants
"""

# DirectX .x text format
DIRECTX_VERSION_TAG = "xof 0303txt 0032"
DIRECTX_COMMENT = "// Blender -> DirectX, supports: faces, normals and textures"
DIRECTX_FLOAT_FORMAT = "%.4f"
DIRECTX_MATERIAL_POWER = "3.2"

# Rotation frame emitted around all meshes in "Blender" (rotated) mode
ROTATION_FRAME_ROWS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, -1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

# Java/GL source fragment
JAVA_FLOAT_FORMAT = "%9.5f"
JAVA_MATERIAL_FORMAT = "%.4f"
JAVA_LINE_INDENT = " " * 16
JAVA_COLOR_PREFIX = "Color_"
JAVA_TEXTURE_PREFIX = "Texture_"
JAVA_DEFAULT_COLOR = "Color_default"
JAVA_NULL = "null"

# Default material (always present, never textured)
DEFAULT_MATERIAL_NAME = "Default_Material"
DEFAULT_MATERIAL_RGB = (0.7, 0.7, 0.7)
DEFAULT_MATERIAL_ALPHA = 1.0

# Unit scales
INCHES_TO_METERS = 0.0254
DEFAULT_JAVA_UNIT_SCALE = INCHES_TO_METERS
DEFAULT_DIRECTX_UNIT_SCALE = 1.0

# Mesh request flags (host tessellation)
MESH_POINTS = 0
MESH_UVQ_FRONT = 1
MESH_UVQ_BACK = 2
MESH_NORMALS = 4

# File names
EXT_DIRECTX = ".x"
EXT_JAVA = ".java"
EXT_AUDIT = ".log"
TEXTURED_ONLY_SUFFIX = "-T"
UNTITLED_MODEL_NAME = "Untitled"
GENERATED_MESH_PREFIX = "mesh_"

# Progress is logged every N faces
PROGRESS_INTERVAL = 1000
