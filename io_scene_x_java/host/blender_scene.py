# File: host/blender_scene.py
# Purpose: Blender side of the export: scene snapshot, tessellation, texture writing
# Notes:
# - Scene collection children -> GROUP, mesh objects -> GROUP of FACE nodes
#   (one per polygon), collection instances -> COMPONENT_INSTANCE whose
#   children are the instanced collection's contents (shared between instances)
# - An object linked into several collections is read once, under the first
#   collection that reaches it
# - Object transforms are matrix_local, so parent_world @ local == world
# - Visible mesh objects are read with modifiers applied (evaluated depsgraph);
#   call release() once the export is done
# - Blender has no back-face material: back_material is always None

import os
import shutil
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

import bpy
from mathutils import Matrix

from ..config.constants import MESH_NORMALS, MESH_UVQ_BACK, MESH_UVQ_FRONT
from ..core.host import Tessellator, TextureWriter
from ..core.schema import Material, PolygonMesh, SceneGraph, SceneNode, Texture
from ..core.transform import from_rows


@dataclass
class FaceHandle:
    """SceneNode.source of a Blender polygon"""
    mesh: "bpy.types.Mesh"
    polygon_index: int
    triangles: List[tuple] = field(default_factory=list)   # loop indices per triangle
    image: Optional["bpy.types.Image"] = None


def find_base_color_image(material: "bpy.types.Material") -> Optional["bpy.types.Image"]:
    """Image texture linked to the Principled BSDF base color, if any"""
    if material is None or not material.use_nodes or material.node_tree is None:
        return None
    for node in material.node_tree.nodes:
        if node.type != 'BSDF_PRINCIPLED':
            continue
        for link in node.inputs['Base Color'].links:
            if link.from_node.type == 'TEX_IMAGE' and link.from_node.image is not None:
                return link.from_node.image
    return None


class BlenderSceneReader:
    """
    Takes one snapshot of the Blender scene.

    Usage:
        reader = BlenderSceneReader(context)
        graph = reader.read()
        ...
        reader.release()
    """

    def __init__(self, context, apply_modifiers: bool = True):
        self.context = context
        self.scene = context.scene
        self.apply_modifiers = apply_modifiers
        self.graph: Optional[SceneGraph] = None
        self._materials: Dict[str, Material] = {}
        self._images: Dict[str, Optional["bpy.types.Image"]] = {}
        self._object_handles: Dict[str, int] = {}      # placed objects only
        self._placed: Set[str] = set()
        self._definitions: Dict[str, List[int]] = {}
        self._evaluated: list = []

    # ====== Public ======

    def read(self) -> SceneGraph:
        self.graph = SceneGraph(path=bpy.data.filepath)
        self._object_handles.clear()
        self._placed.clear()
        for mat in bpy.data.materials:
            self.graph.add_material(self.material(mat))

        root = self.scene.collection
        for obj in root.objects:
            if obj.parent is None:
                self._add_object(obj, None, self._placed)
        for collection in root.children:
            self._add_collection(collection, None, self._placed)

        for obj in self.context.selected_objects:
            handle = self._object_handles.get(obj.name)
            if handle is not None:
                self.graph.select(handle)
        return self.graph

    def release(self) -> None:
        for obj_eval in self._evaluated:
            obj_eval.to_mesh_clear()
        self._evaluated.clear()

    def material(self, mat: "bpy.types.Material") -> Material:
        cached = self._materials.get(mat.name)
        if cached is not None:
            return cached
        r, g, b, a = mat.diffuse_color
        texture = None
        image = find_base_color_image(mat)
        if image is not None:
            filename = bpy.path.abspath(image.filepath) if image.filepath else image.name
            texture = Texture(filename=filename, width=image.size[0], height=image.size[1])
        result = Material(
            name=mat.name,
            color=(round(r * 255), round(g * 255), round(b * 255)),
            alpha=float(a),
            texture=texture,
        )
        self._materials[mat.name] = result
        self._images[mat.name] = image
        return result

    # ====== Internal ======

    def _add_collection(self, collection, parent: Optional[int], seen: Set[str]) -> int:
        handle = self.graph.add_group(collection.name, parent=parent,
                                      visible=not collection.hide_viewport, source=collection)
        for obj in collection.objects:
            if obj.parent is None and obj.name not in seen:
                self._add_object(obj, handle, seen)
        for child in collection.children:
            self._add_collection(child, handle, seen)
        return handle

    def _add_object(self, obj, parent: Optional[int], seen: Set[str]) -> Optional[int]:
        transform = from_rows(obj.matrix_local)
        visible = obj.visible_get()

        if obj.type == 'EMPTY' and obj.instance_type == 'COLLECTION' and obj.instance_collection:
            collection = obj.instance_collection
            offset = Matrix.Translation(-collection.instance_offset)
            handle = self.graph.add_component(obj.name, definition_name=collection.name, parent=parent,
                                              transform=from_rows(obj.matrix_local @ offset),
                                              visible=visible, source=obj)
            self.graph.node(handle).children.extend(self._definition(collection))
        elif obj.type == 'MESH':
            handle = self.graph.add_group(obj.name, parent=parent, transform=transform,
                                          visible=visible, source=obj)
            self._add_faces(obj, handle, visible)
        elif obj.children:
            handle = self.graph.add_group(obj.name, parent=parent, transform=transform,
                                          visible=visible, source=obj)
        else:
            return None

        seen.add(obj.name)
        if seen is self._placed:
            self._object_handles[obj.name] = handle
        for child in obj.children:
            self._add_object(child, handle, seen)
        return handle

    def _definition(self, collection) -> List[int]:
        """Handles of an instanced collection's contents, built once per collection"""
        if collection.name in self._definitions:
            return self._definitions[collection.name]
        self._definitions[collection.name] = []
        handles = []
        seen: Set[str] = set()
        for obj in collection.objects:
            if obj.parent is None and obj.name not in seen:
                handle = self._add_detached_object(obj, seen)
                if handle is not None:
                    handles.append(handle)
        for child in collection.children:
            handles.append(self._add_detached_group(child, seen))
        self._definitions[collection.name] = handles
        return handles

    def _add_detached_object(self, obj, seen: Set[str]) -> Optional[int]:
        # nodes owned by a definition are not model roots
        handle = self._add_object(obj, None, seen)
        if handle is not None:
            self.graph.roots.remove(handle)
        return handle

    def _add_detached_group(self, collection, seen: Set[str]) -> int:
        handle = self._add_collection(collection, None, seen)
        self.graph.roots.remove(handle)
        return handle

    def _add_faces(self, obj, parent: int, visible: bool) -> None:
        if visible and self.apply_modifiers:
            depsgraph = self.context.evaluated_depsgraph_get()
            obj_eval = obj.evaluated_get(depsgraph)
            mesh = obj_eval.to_mesh(preserve_all_data_layers=True, depsgraph=depsgraph)
            self._evaluated.append(obj_eval)
        else:
            mesh = obj.data
        mesh.calc_loop_triangles()

        triangles: Dict[int, List[tuple]] = {}
        for tri in mesh.loop_triangles:
            triangles.setdefault(tri.polygon_index, []).append(tuple(tri.loops))

        slots = obj.material_slots
        for polygon in mesh.polygons:
            material = None
            image = None
            if polygon.material_index < len(slots):
                mat = slots[polygon.material_index].material
                if mat is not None:
                    material = self.material(mat)
                    image = self._images.get(mat.name)
            source = FaceHandle(mesh, polygon.index, triangles.get(polygon.index, []), image)
            self.graph.add_face(parent=parent, material=material, source=source,
                                name=f"{obj.name}[{polygon.index}]")


class BlenderTessellator(Tessellator):
    """PolygonMesh of one Blender polygon, triangulated by loop_triangles"""

    def mesh(self, face: SceneNode, flags: int) -> PolygonMesh:
        handle: FaceHandle = face.source
        mesh = handle.mesh
        polygon = mesh.polygons[handle.polygon_index]
        loops = list(polygon.loop_indices)
        vertex_indices = [mesh.loops[li].vertex_index for li in loops]

        result = PolygonMesh(points=[tuple(mesh.vertices[vi].co) for vi in vertex_indices])
        if flags & MESH_NORMALS:
            if polygon.use_smooth:
                result.normals = [tuple(mesh.vertices[vi].normal) for vi in vertex_indices]
            else:
                result.normals = [tuple(polygon.normal) for _ in vertex_indices]

        uv_layer = mesh.uv_layers.active
        if uv_layer is not None:
            uvs = [tuple(uv_layer.data[li].uv) for li in loops]
            if flags & MESH_UVQ_FRONT:
                result.uvs_front = uvs
            if flags & MESH_UVQ_BACK:
                result.uvs_back = list(uvs)

        position = {li: n + 1 for n, li in enumerate(loops)}
        result.polygons = [tuple(position[li] for li in tri) for tri in handle.triangles]
        return result


class BlenderTextureWriter(TextureWriter):
    """
    Copies the image file bound to a face's material next to the export;
    packed or generated images are saved through the scene's render settings.
    """

    def __init__(self, scene=None):
        self.scene = scene

    def write(self, face: SceneNode, front: bool, filepath: str) -> bool:
        handle = face.source
        image = getattr(handle, "image", None)
        if image is None:
            return False
        source = bpy.path.abspath(image.filepath) if image.filepath else ""
        if image.packed_file is None and source and os.path.isfile(source):
            shutil.copyfile(source, filepath)
        else:
            image.save_render(filepath, scene=self.scene)
        return True
