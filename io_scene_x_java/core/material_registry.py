# -*- coding: utf-8 -*-
"""
Material / texture registry

- Deduplication key: an integer assigned the first time a Material object is
  seen (identity, injective)
- Emitted label: the material name with every non-alphanumeric character
  removed. Two different materials may sanitize to the same label; the alias
  is reported (MAT001) and, in compatible mode, both share one emitted entry
- Texture files are written while resolving, once per material object and
  never twice to the same path
- Default_Material is pre-seeded at index 0 and never textured
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple

from .host import TextureWriter
from .schema import Material, MeshMaterialList, SceneNode
from ..config.constants import (
    DEFAULT_MATERIAL_ALPHA,
    DEFAULT_MATERIAL_NAME,
    DEFAULT_MATERIAL_RGB,
    JAVA_COLOR_PREFIX,
    JAVA_DEFAULT_COLOR,
    JAVA_MATERIAL_FORMAT,
    JAVA_NULL,
    JAVA_TEXTURE_PREFIX,
)
from ..utils.file_manager import FileManager
from ..writers.audit_writer import ErrorCode

__all__ = [
    'sanitize_identifier',
    'javify_id',
    'MaterialEntry',
    'MaterialAlias',
    'MaterialRegistry',
    'MeshMaterialList',
    'JavaMaterialTable',
]

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")
_NON_WORD = re.compile(r"[^A-Za-z0-9_]")


def sanitize_identifier(name: Optional[str]) -> str:
    """'Wood #1' -> 'Wood1'"""
    return _NON_ALNUM.sub("", name or "")


def javify_id(name: Optional[str], prefix: str) -> str:
    """'Dark Wood#1' -> prefix + 'Dark_Wood1'"""
    s = (name or "").replace(" ", "_")
    return prefix + _NON_WORD.sub("", s)


@dataclass
class MaterialEntry:
    """One emitted material record"""
    index: int
    label: str
    material: Optional[Material] = None
    texture_path: Optional[str] = None     # file written for this entry's texture

    @property
    def is_default(self) -> bool:
        return self.material is None

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return self.material.rgb if self.material is not None else DEFAULT_MATERIAL_RGB

    @property
    def alpha(self) -> float:
        return self.material.alpha if self.material is not None else DEFAULT_MATERIAL_ALPHA

    @property
    def texture_filename(self) -> str:
        if self.material is None or self.material.texture is None:
            return ""
        return self.material.texture.filename or ""


@dataclass
class MaterialAlias:
    """Two distinct materials whose names sanitize to the same label"""
    label: str
    first_name: str
    alias_name: str


class MaterialRegistry:
    """
    Per-export material registry (DirectX pipeline).

    Usage:
        registry = MaterialRegistry("out/truck.x", texture_writer, logger)
        entry = registry.resolve(face_record.material, face, front=True)
        mesh.materials.index_of(entry.label)
    """

    def __init__(self, output_path: str = "", texture_writer: Optional[TextureWriter] = None,
                 logger=None, alias_sanitized_names: bool = True):
        self.output_path = output_path
        self.texture_writer = texture_writer
        self.logger = logger
        self.alias_sanitized_names = alias_sanitized_names

        self.default = MaterialEntry(index=0, label=DEFAULT_MATERIAL_NAME)
        self.entries: List[MaterialEntry] = [self.default]
        self.aliases: List[MaterialAlias] = []
        self.written_textures: List[str] = []

        self._keys: Dict[int, int] = {}                 # id(material) -> identity key
        self._by_key: Dict[int, MaterialEntry] = {}
        self._by_label: Dict[str, MaterialEntry] = {DEFAULT_MATERIAL_NAME: self.default}
        self._materials: List[Material] = []            # keeps id() stable for the run
        self._written: Set[str] = set()

    # ====== Public ======

    def key_of(self, material: Material) -> Optional[int]:
        return self._keys.get(id(material))

    def resolve(self, material: Optional[Material], face: Optional[SceneNode] = None,
                front: bool = True) -> MaterialEntry:
        """
        Entry for a material; the same object always resolves to the same entry.
        The first sight of a textured material writes its texture through face/front.
        """
        if material is None:
            return self.default

        key = self._keys.get(id(material))
        if key is not None:
            return self._by_key[key]

        key = len(self._materials) + 1
        self._materials.append(material)
        self._keys[id(material)] = key

        texture_path = self._export_texture(material, face, front)

        label = sanitize_identifier(material.name) or f"Material{key}"
        existing = self._by_label.get(label)
        if existing is not None:
            alias = MaterialAlias(label, existing.material.name if existing.material else label,
                                  material.name)
            self.aliases.append(alias)
            self._warn(f"materials '{alias.first_name}' and '{alias.alias_name}' both sanitize to '{label}'",
                       ErrorCode.MAT001)
            if self.alias_sanitized_names:
                self._by_key[key] = existing
                return existing
            label = self._unique_label(label)

        entry = MaterialEntry(index=len(self.entries), label=label, material=material,
                              texture_path=texture_path)
        self.entries.append(entry)
        self._by_key[key] = entry
        self._by_label[label] = entry
        return entry

    def emitted(self) -> List[MaterialEntry]:
        """Entries written as Material blocks, excluding the default one"""
        return self.entries[1:]

    @property
    def has_aliases(self) -> bool:
        return bool(self.aliases)

    # ====== Internal ======

    def _unique_label(self, label: str) -> str:
        n = 2
        while f"{label}_{n}" in self._by_label:
            n += 1
        return f"{label}_{n}"

    def _export_texture(self, material: Material, face: Optional[SceneNode], front: bool) -> Optional[str]:
        texture = material.texture
        if texture is None or not texture.filename:
            return None
        path = FileManager.texture_output_path(self.output_path, texture.filename)
        if path in self._written:
            return path
        self._written.add(path)
        if self.texture_writer is None or face is None:
            return path
        if self.texture_writer.write(face, front, path):
            self.written_textures.append(path)
            self._info(f"<material={path}>")
        else:
            self._warn(f"texture of material '{material.name}' could not be written to {path}",
                       ErrorCode.TEX002)
        return path

    def _info(self, message: str) -> None:
        if self.logger:
            self.logger.info(message)

    def _warn(self, message: str, code: str) -> None:
        if self.logger:
            self.logger.warning(message, code=code)


# ==================== Java constants ====================

@dataclass
class JavaMaterialConstant:
    color_id: str
    rgb: Tuple[str, str, str]
    texture_id: Optional[str] = None
    texture_filename: str = ""


class JavaMaterialTable:
    """
    Java pipeline registry: one Color_<id> (and Texture_<id>) field per distinct
    javified name; Color_default is always declared by the preface.
    """

    def __init__(self, logger=None, alias_sanitized_names: bool = True):
        self.logger = logger
        self.alias_sanitized_names = alias_sanitized_names
        self.constants: List[JavaMaterialConstant] = []
        self.aliases: List[MaterialAlias] = []
        self._by_identity: Dict[int, Optional[JavaMaterialConstant]] = {}
        self._by_label: Dict[str, Tuple[Material, JavaMaterialConstant]] = {}
        self._materials: List[Material] = []

    def declare(self, material: Material) -> Optional[JavaMaterialConstant]:
        if id(material) in self._by_identity:
            return self._by_identity[id(material)]
        self._materials.append(material)

        if not material.name:
            self._by_identity[id(material)] = None
            return None

        label = javify_id(material.name, "")
        previous = self._by_label.get(label)
        if previous is not None:
            alias = MaterialAlias(label, previous[0].name, material.name)
            self.aliases.append(alias)
            if self.logger:
                self.logger.warning(f"materials '{alias.first_name}' and '{alias.alias_name}' "
                                    f"both map to '{JAVA_COLOR_PREFIX}{label}'", code=ErrorCode.MAT001)
            if self.alias_sanitized_names:
                self._by_identity[id(material)] = previous[1]
                return previous[1]
            n = 2
            while f"{label}_{n}" in self._by_label:
                n += 1
            label = f"{label}_{n}"

        r, g, b = material.rgb
        texture = material.texture
        constant = JavaMaterialConstant(
            color_id=JAVA_COLOR_PREFIX + label,
            rgb=(JAVA_MATERIAL_FORMAT % r, JAVA_MATERIAL_FORMAT % g, JAVA_MATERIAL_FORMAT % b),
        )
        if texture is not None and texture.filename:
            constant.texture_id = JAVA_TEXTURE_PREFIX + label
            constant.texture_filename = texture.filename
        self.constants.append(constant)
        self._by_identity[id(material)] = constant
        self._by_label[label] = (material, constant)
        return constant

    def ids_for(self, material: Optional[Material]) -> Tuple[str, str]:
        """(color id, texture id or 'null') referenced by a face"""
        if material is None:
            return JAVA_DEFAULT_COLOR, JAVA_NULL
        constant = self.declare(material)
        if constant is None:
            return JAVA_DEFAULT_COLOR, JAVA_NULL
        return constant.color_id, constant.texture_id or JAVA_NULL
