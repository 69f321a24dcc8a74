# File: __init__.py
# Purpose: Add-on entry point
# Notes:
# - Registers the preferences and the export operators
# - bpy-dependent modules are imported inside register()/unregister() so the
#   exporter core can be imported (and tested) outside Blender

bl_info = {
    "name": "DirectX / Java Scene Exporter",
    "author": "io_scene_x_java contributors",
    "version": (1, 0, 0),
    "blender": (4, 0, 0),
    "location": "File > Export",
    "description": "Export the scene as a DirectX .x file or as Java/GL source",
    "category": "Import-Export",
}


def register():
    import bpy
    from .preferences import XJavaAddonPreferences
    from .export_operator import classes, menu_func_export

    bpy.utils.register_class(XJavaAddonPreferences)
    for cls in classes:
        bpy.utils.register_class(cls)
    bpy.types.TOPBAR_MT_file_export.append(menu_func_export)


def unregister():
    import bpy
    from .preferences import XJavaAddonPreferences
    from .export_operator import classes, menu_func_export

    bpy.types.TOPBAR_MT_file_export.remove(menu_func_export)
    for cls in reversed(classes):
        bpy.utils.unregister_class(cls)
    bpy.utils.unregister_class(XJavaAddonPreferences)


if __name__ == "__main__":
    register()
