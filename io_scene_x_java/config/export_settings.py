# -*- coding: utf-8 -*-
"""
Export settings
Turns operator/preference properties into plain configuration objects
"""

from .constants import DEFAULT_DIRECTX_UNIT_SCALE, DEFAULT_JAVA_UNIT_SCALE


class DirectXExportSettings:
    """DirectX (.x) export configuration"""

    def __init__(self, textured_only=False, rotated=False):
        self.textured_only = textured_only
        self.rotated = rotated
        self.unit_scale = DEFAULT_DIRECTX_UNIT_SCALE  # raw host units
        self.alias_sanitized_names = True  # two names sanitizing alike share one material
        self.write_audit = False
        self.verbose = True

    @classmethod
    def from_preferences(cls, prefs, textured_only=False, rotated=False):
        """Create settings from the add-on preferences"""
        settings = cls(textured_only=textured_only, rotated=rotated)
        settings.unit_scale = prefs.directx_unit_scale
        settings.alias_sanitized_names = prefs.alias_sanitized_names
        settings.write_audit = prefs.write_audit
        settings.verbose = prefs.verbose
        return settings


class JavaExportSettings:
    """Java/GL source export configuration"""

    def __init__(self):
        self.unit_scale = DEFAULT_JAVA_UNIT_SCALE  # inches -> meters
        self.alias_sanitized_names = True
        self.write_audit = False
        self.verbose = True

    @classmethod
    def from_preferences(cls, prefs):
        """Create settings from the add-on preferences"""
        settings = cls()
        settings.unit_scale = prefs.java_unit_scale
        settings.alias_sanitized_names = prefs.alias_sanitized_names
        settings.write_audit = prefs.write_audit
        settings.verbose = prefs.verbose
        return settings
