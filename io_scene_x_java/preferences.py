# -*- coding: utf-8 -*-
"""
Add-on preferences
Values read by DirectXExportSettings / JavaExportSettings.from_preferences
"""

import bpy
from bpy.types import AddonPreferences
from bpy.props import BoolProperty, FloatProperty

from .config.constants import DEFAULT_DIRECTX_UNIT_SCALE, DEFAULT_JAVA_UNIT_SCALE


class XJavaAddonPreferences(AddonPreferences):
    """DirectX / Java exporter settings"""
    bl_idname = __package__.split('.')[0]

    # ===== Units =====
    directx_unit_scale: FloatProperty(
        name="DirectX unit scale",
        description="Scale applied to exported .x positions",
        default=DEFAULT_DIRECTX_UNIT_SCALE,
        min=0.0001,
        max=1000.0
    )

    java_unit_scale: FloatProperty(
        name="Java unit scale",
        description="Scale applied to exported Java positions (0.0254: inches to meters)",
        default=DEFAULT_JAVA_UNIT_SCALE,
        min=0.0001,
        max=1000.0,
        precision=4
    )

    # ===== Materials =====
    alias_sanitized_names: BoolProperty(
        name="Merge materials with equal identifiers",
        description="Materials whose names sanitize to the same identifier share one entry; "
                    "when off, later ones get a numeric suffix",
        default=True
    )

    # ===== Logging =====
    write_audit: BoolProperty(
        name="Write audit log",
        description="Write <output>.log next to the exported file",
        default=False
    )

    verbose: BoolProperty(
        name="Verbose console output",
        description="Print info and warning lines to the console",
        default=True
    )

    def draw(self, context):
        layout = self.layout

        box = layout.box()
        box.label(text="Units", icon='ORIENTATION_GLOBAL')
        box.prop(self, "directx_unit_scale")
        box.prop(self, "java_unit_scale")

        box = layout.box()
        box.label(text="Materials", icon='MATERIAL')
        box.prop(self, "alias_sanitized_names")

        box = layout.box()
        box.label(text="Logging", icon='TEXT')
        box.prop(self, "write_audit")
        box.prop(self, "verbose")


def get_preferences(context):
    """Add-on preferences, None when the add-on is not registered under its package name"""
    addon = context.preferences.addons.get(XJavaAddonPreferences.bl_idname)
    return addon.preferences if addon is not None else None
