# File: core/schema.py
# Purpose: Export data structures (dataclass)
# Notes:
# - SceneGraph is a one-shot snapshot of the host scene: a flat node table
#   addressed by integer handles, roots/selection are handle lists
# - Material uses identity equality; two materials with the same fields are
#   still two materials
# - PolygonMesh indices are 1-based and sign-encoded like the host's
#   polygon lists (negative = smoothing edge)

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple
from enum import Enum

from .transform import IDENTITY, Matrix4, Vec3, transform_point, transform_vector
from ..config.constants import DEFAULT_MATERIAL_NAME


# ==================== Enums ====================

class NodeKind(Enum):
    """Scene node variant"""
    FACE = "face"
    GROUP = "group"
    COMPONENT_INSTANCE = "component_instance"


# ==================== Materials ====================

@dataclass
class Texture:
    """Texture bound to a material"""
    filename: str = ""
    width: float = 0
    height: float = 0

    @property
    def has_size(self) -> bool:
        return bool(self.width) and bool(self.height)


@dataclass(eq=False)
class Material:
    """
    Host material.
    color is stored 0..255 per channel like the host does; rgb is normalized.
    """
    name: str
    color: Tuple[int, int, int] = (255, 255, 255)
    alpha: float = 1.0
    texture: Optional[Texture] = None

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return (self.color[0] / 255.0, self.color[1] / 255.0, self.color[2] / 255.0)


# ==================== Scene graph ====================

@dataclass
class SceneNode:
    """
    One entity of the snapshot.
    - FACE: material / back_material, geometry reachable through source
    - GROUP / COMPONENT_INSTANCE: ordered children, local transform,
      optional override material
    """
    kind: NodeKind
    name: str = ""
    transform: Matrix4 = IDENTITY
    visible: bool = True
    material: Optional[Material] = None
    back_material: Optional[Material] = None
    children: List[int] = field(default_factory=list)
    definition_name: str = ""      # component definition name
    source: Any = None             # opaque host handle (tessellation, texture writer)


class SceneGraph:
    """
    Arena of scene nodes.

    Usage:
        graph = SceneGraph(path="truck.blend")
        wheel = graph.add_group("Wheel", transform=translation(1, 0, 0))
        graph.add_face(parent=wheel, material=rubber, source=mesh)
    """

    def __init__(self, path: str = ""):
        self.path = path
        self.nodes: List[SceneNode] = []
        self.roots: List[int] = []
        self.selection: List[int] = []
        self.materials: List[Material] = []

    def _add(self, node: SceneNode, parent: Optional[int]) -> int:
        handle = len(self.nodes)
        self.nodes.append(node)
        if parent is None:
            self.roots.append(handle)
        else:
            self.node(parent).children.append(handle)
        return handle

    def add_face(self, parent: Optional[int] = None, material: Optional[Material] = None,
                 back_material: Optional[Material] = None, visible: bool = True,
                 source: Any = None, name: str = "") -> int:
        return self._add(SceneNode(NodeKind.FACE, name=name, visible=visible, material=material,
                                   back_material=back_material, source=source), parent)

    def add_group(self, name: str = "", parent: Optional[int] = None,
                  transform: Matrix4 = IDENTITY, material: Optional[Material] = None,
                  visible: bool = True, source: Any = None) -> int:
        return self._add(SceneNode(NodeKind.GROUP, name=name, transform=transform,
                                   visible=visible, material=material, source=source), parent)

    def add_component(self, name: str = "", definition_name: str = "",
                      parent: Optional[int] = None, transform: Matrix4 = IDENTITY,
                      material: Optional[Material] = None, visible: bool = True,
                      source: Any = None) -> int:
        return self._add(SceneNode(NodeKind.COMPONENT_INSTANCE, name=name,
                                   definition_name=definition_name, transform=transform,
                                   visible=visible, material=material, source=source), parent)

    def add_material(self, material: Material) -> Material:
        self.materials.append(material)
        return material

    def select(self, handle: int) -> None:
        self.selection.append(handle)

    def node(self, handle: int) -> SceneNode:
        return self.nodes[handle]

    def top_level(self) -> List[int]:
        """Active selection if any, else the model's top-level entities"""
        return list(self.selection) if self.selection else list(self.roots)


# ==================== Tessellated mesh ====================

@dataclass
class PolygonMesh:
    """
    Triangulated face geometry as returned by the host tessellator.
    points/normals/uvs are stored 0-based; accessors take the host's 1-based index.
    """
    points: List[Vec3] = field(default_factory=list)
    polygons: List[Tuple[int, ...]] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    uvs_front: List[Tuple[float, float]] = field(default_factory=list)
    uvs_back: List[Tuple[float, float]] = field(default_factory=list)

    @property
    def count_points(self) -> int:
        return len(self.points)

    def point_at(self, index: int) -> Vec3:
        return self.points[abs(index) - 1]

    def normal_at(self, index: int) -> Vec3:
        if not self.normals:
            return (0.0, 0.0, 0.0)
        return self.normals[abs(index) - 1]

    def uv_at(self, index: int, front: bool = True) -> Tuple[float, float]:
        uvs = self.uvs_front if front else self.uvs_back
        if not uvs:
            return (0.0, 0.0)
        return uvs[abs(index) - 1]

    def transformed(self, matrix: Matrix4) -> "PolygonMesh":
        """Copy with points moved by the full matrix and normals by its linear part"""
        return PolygonMesh(
            points=[transform_point(matrix, p) for p in self.points],
            polygons=list(self.polygons),
            normals=[transform_vector(matrix, n) for n in self.normals],
            uvs_front=list(self.uvs_front),
            uvs_back=list(self.uvs_back),
        )


# ==================== Walker output ====================

@dataclass
class FaceRecord:
    """(face, world transform, resolved front material, resolved back material)"""
    face: SceneNode
    transform: Matrix4
    material: Optional[Material] = None
    back_material: Optional[Material] = None


@dataclass
class GroupMarker:
    """Emitted by the Java walker when it enters a group / component instance"""
    kind: NodeKind
    name: str


@dataclass
class ExportStats:
    groups: int = 0
    components: int = 0
    faces: int = 0

    def summary(self) -> str:
        return f"{self.groups} group(s), {self.components} component(s), {self.faces} faces."


# ==================== Buffers ====================

class MeshMaterialList:
    """
    Per-mesh material reference list (MeshMaterialList block).
    Index 0 is always the default material.
    """

    def __init__(self):
        self.labels: List[str] = [DEFAULT_MATERIAL_NAME]

    def index_of(self, label: str) -> int:
        if label not in self.labels:
            self.labels.append(label)
        return self.labels.index(label)

    def __len__(self) -> int:
        return len(self.labels)


@dataclass
class MeshBuffer:
    """Merged geometry of one DirectX Mesh block"""
    name: str
    vertices: List[Vec3] = field(default_factory=list)
    normals: List[Vec3] = field(default_factory=list)
    texture_coords: List[Tuple[float, float]] = field(default_factory=list)
    faces: List[Tuple[int, int, int]] = field(default_factory=list)
    face_materials: List[int] = field(default_factory=list)
    materials: MeshMaterialList = field(default_factory=MeshMaterialList)
    start_index: int = 0           # running point offset of the source meshes

    @property
    def is_empty(self) -> bool:
        return not self.vertices


@dataclass
class JavaFaceRecord:
    """One `new TriangleStrip(...)` entry"""
    color_id: str
    texture_id: str
    points: List[str] = field(default_factory=list)
    normals: List[str] = field(default_factory=list)
    texcoords: Optional[List[str]] = None
