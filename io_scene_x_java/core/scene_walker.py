# File: core/scene_walker.py
# Purpose: Flatten the scene graph into (face, world transform, materials) records
# Notes:
# - Depth-first, pre-order, children in their given order
# - Explicit stack over node handles; each frame carries its accumulated
#   transform and inherited material (the push/pop inheritance stack)
# - Java walker: no visibility filter, no inheritance, no back material,
#   emits GroupMarker entries for the source comments
# - DirectX walker: visibility filter, front/back inheritance, optional
#   textured-only split

from typing import FrozenSet, List, Optional, Sequence, Union

from .schema import (
    ExportStats,
    FaceRecord,
    GroupMarker,
    Material,
    NodeKind,
    SceneGraph,
)
from .transform import IDENTITY, Matrix4, compose


class CyclicSceneError(ValueError):
    """A container is (transitively) its own descendant"""


def _push_children(stack: list, graph: SceneGraph, handles: Sequence[int], transform: Matrix4,
                   inherited: Optional[Material], ancestors: FrozenSet[int]) -> None:
    # reversed so the first child is popped first
    for handle in reversed(handles):
        if handle in ancestors:
            raise CyclicSceneError(f"scene node {handle} ('{graph.node(handle).name}') contains itself")
        stack.append((handle, transform, inherited, ancestors))


def flatten_directx(graph: SceneGraph,
                    handles: Sequence[int],
                    transform: Matrix4 = IDENTITY,
                    inherited: Optional[Material] = None,
                    textured_only: bool = False,
                    stats: Optional[ExportStats] = None) -> List[FaceRecord]:
    """
    DirectX walker.

    Args:
        graph: scene snapshot
        handles: entities to walk (children of one top-level entity, or loose faces)
        transform: world transform of those entities' parent
        inherited: material inherited from the parent (bottom of the stack)
        textured_only: split faces into one record per side carrying a material
        stats: counters updated in place

    Returns:
        List[FaceRecord] in traversal order
    """
    stats = stats if stats is not None else ExportStats()
    records: List[FaceRecord] = []
    stack: list = []
    _push_children(stack, graph, handles, transform, inherited, frozenset())

    while stack:
        handle, parent_transform, parent_material, ancestors = stack.pop()
        node = graph.node(handle)
        if not node.visible:
            continue

        if node.kind is NodeKind.FACE:
            front = node.material if node.material is not None else parent_material
            back = node.back_material if node.back_material is not None else parent_material
            if not textured_only:
                records.append(FaceRecord(node, parent_transform, front, back))
                stats.faces += 1
            else:
                if front is not None:
                    records.append(FaceRecord(node, parent_transform, front, None))
                    stats.faces += 1
                if back is not None:
                    records.append(FaceRecord(node, parent_transform, None, back))
                    stats.faces += 1

        elif node.kind is NodeKind.GROUP or node.kind is NodeKind.COMPONENT_INSTANCE:
            if node.kind is NodeKind.GROUP:
                stats.groups += 1
            else:
                stats.components += 1
            child_material = node.material if node.material is not None else parent_material
            _push_children(stack, graph, node.children, compose(parent_transform, node.transform),
                           child_material, ancestors | {handle})

        else:
            raise ValueError(f"unknown node kind: {node.kind}")

    return records


def flatten_java(graph: SceneGraph,
                 handles: Sequence[int],
                 transform: Matrix4 = IDENTITY) -> List[Union[FaceRecord, GroupMarker]]:
    """
    Java walker: faces keep their own material only, visibility is ignored.
    A GroupMarker precedes the records of every group / component instance.
    """
    entries: List[Union[FaceRecord, GroupMarker]] = []
    stack: list = []
    _push_children(stack, graph, handles, transform, None, frozenset())

    while stack:
        handle, parent_transform, _, ancestors = stack.pop()
        node = graph.node(handle)

        if node.kind is NodeKind.FACE:
            entries.append(FaceRecord(node, parent_transform, node.material, None))
        elif node.kind is NodeKind.GROUP:
            entries.append(GroupMarker(NodeKind.GROUP, node.name))
            _push_children(stack, graph, node.children, compose(parent_transform, node.transform),
                           None, ancestors | {handle})
        elif node.kind is NodeKind.COMPONENT_INSTANCE:
            entries.append(GroupMarker(NodeKind.COMPONENT_INSTANCE, node.name))
            _push_children(stack, graph, node.children, compose(parent_transform, node.transform),
                           None, ancestors | {handle})
        else:
            raise ValueError(f"unknown node kind: {node.kind}")

    return entries
