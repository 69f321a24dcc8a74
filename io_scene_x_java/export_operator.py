# File: export_operator.py
# Purpose: File > Export menu entries and their operators
# Notes:
# - One DirectX operator with three menu entries (all faces / textured faces / for Blender)
# - Cancelling the file browser never reaches execute(): no file is written
# - Failures are reported in the UI; the traceback is in the console / audit log

import bpy
from bpy.props import EnumProperty, StringProperty
from bpy_extras.io_utils import ExportHelper

from .config.constants import EXT_DIRECTX, EXT_JAVA
from .config.export_settings import DirectXExportSettings, JavaExportSettings
from .export_processor import ExportProcessor
from .exporters.directx_exporter import DirectXExporter
from .exporters.java_exporter import JavaExporter
from .host.blender_scene import BlenderSceneReader, BlenderTessellator, BlenderTextureWriter
from .preferences import get_preferences
from .utils.logger import Logger


DIRECTX_MODES = {
    'ALL': dict(textured_only=False, rotated=False),
    'TEXTURED': dict(textured_only=True, rotated=False),
    'BLENDER': dict(textured_only=False, rotated=True),
}


def _run(operator, context, exporter) -> set:
    """Snapshot the scene, run one exporter, report the outcome"""
    reader = BlenderSceneReader(context)
    try:
        graph = reader.read()
        processor = ExportProcessor(exporter.logger)
        path = processor.process(exporter, graph, operator.filepath,
                                 BlenderTessellator(), BlenderTextureWriter(context.scene))
    except Exception as e:
        operator.report({'ERROR'}, f"Export failed: {e}")
        return {'CANCELLED'}
    finally:
        reader.release()

    if path is None:
        operator.report({'WARNING'}, "Nothing to export")
        return {'CANCELLED'}
    operator.report({'INFO'}, f"Exported to {path}")
    return {'FINISHED'}


class EXPORT_SCENE_OT_directx(bpy.types.Operator, ExportHelper):
    """Export the scene as a DirectX (.x) file"""
    bl_idname = "export_scene.directx_x"
    bl_label = "Export DirectX"
    bl_options = {'REGISTER', 'UNDO'}

    filename_ext = EXT_DIRECTX
    filter_glob: StringProperty(default="*.x", options={'HIDDEN'})

    mode: EnumProperty(
        name="Faces",
        description="Which faces to export and in which orientation",
        items=[
            ('ALL', "All faces", "Every visible face, both sides"),
            ('TEXTURED', "Textured faces", "Only face sides that carry a material"),
            ('BLENDER', "For Blender", "All faces with a flipped frame for re-import into Blender"),
        ],
        default='ALL'
    )

    def invoke(self, context, event):
        textured_only = DIRECTX_MODES[self.mode]["textured_only"]
        self.filepath = DirectXExporter.default_filename(bpy.data.filepath, textured_only)
        context.window_manager.fileselect_add(self)
        return {'RUNNING_MODAL'}

    def execute(self, context):
        prefs = get_preferences(context)
        options = DIRECTX_MODES[self.mode]
        if prefs is not None:
            settings = DirectXExportSettings.from_preferences(prefs, **options)
        else:
            settings = DirectXExportSettings(**options)
        logger = Logger(verbose=settings.verbose)
        return _run(self, context, DirectXExporter(settings, logger))


class EXPORT_SCENE_OT_java(bpy.types.Operator, ExportHelper):
    """Export the selection (or the whole scene) as Java/GL source"""
    bl_idname = "export_scene.java_gl"
    bl_label = "Export Java"
    bl_options = {'REGISTER', 'UNDO'}

    filename_ext = EXT_JAVA
    filter_glob: StringProperty(default="*.java", options={'HIDDEN'})

    def invoke(self, context, event):
        self.filepath = JavaExporter.default_filename(bpy.data.filepath)
        context.window_manager.fileselect_add(self)
        return {'RUNNING_MODAL'}

    def execute(self, context):
        prefs = get_preferences(context)
        settings = JavaExportSettings.from_preferences(prefs) if prefs is not None else JavaExportSettings()
        logger = Logger(verbose=settings.verbose)
        return _run(self, context, JavaExporter(settings, logger))


def menu_func_export(self, context):
    self.layout.operator(EXPORT_SCENE_OT_directx.bl_idname, text="DirectX (.x)").mode = 'ALL'
    self.layout.operator(EXPORT_SCENE_OT_directx.bl_idname, text="DirectX textured faces (.x)").mode = 'TEXTURED'
    self.layout.operator(EXPORT_SCENE_OT_directx.bl_idname, text="DirectX for Blender (.x)").mode = 'BLENDER'
    self.layout.operator(EXPORT_SCENE_OT_java.bl_idname, text="Java code (.java)")


classes = (
    EXPORT_SCENE_OT_directx,
    EXPORT_SCENE_OT_java,
)
