# -*- coding: utf-8 -*-
# File: core/transform.py
# Purpose: 4x4 affine transforms as row-major 16-tuples
# Notes:
# - Column-vector convention: p' = M * p, translation in the last column
# - compose(parent, local) == parent * local, accumulated root -> leaf
# - Host adapters convert their matrix type with from_rows()

from __future__ import annotations
from typing import Iterable, Sequence, Tuple

Matrix4 = Tuple[float, ...]
Vec3 = Tuple[float, float, float]


IDENTITY: Matrix4 = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


def from_rows(rows: Sequence[Sequence[float]]) -> Matrix4:
    """
    Rows (4x4 nested sequence, e.g. a mathutils.Matrix) -> row-major 16-tuple
    """
    flat = tuple(float(v) for row in rows for v in row)
    if len(flat) != 16:
        raise ValueError(f"expected a 4x4 matrix, got {len(flat)} values")
    return flat


def to_rows(m: Matrix4) -> Tuple[Tuple[float, float, float, float], ...]:
    return tuple(tuple(m[r*4:r*4 + 4]) for r in range(4))


def translation(x: float, y: float, z: float) -> Matrix4:
    return (
        1.0, 0.0, 0.0, float(x),
        0.0, 1.0, 0.0, float(y),
        0.0, 0.0, 1.0, float(z),
        0.0, 0.0, 0.0, 1.0,
    )


def scale(sx: float, sy: float, sz: float) -> Matrix4:
    return (
        float(sx), 0.0, 0.0, 0.0,
        0.0, float(sy), 0.0, 0.0,
        0.0, 0.0, float(sz), 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def compose(a: Matrix4, b: Matrix4) -> Matrix4:
    """
    Matrix product a * b (row-major).
    """
    out = [0.0] * 16
    for r in range(4):
        for c in range(4):
            s = 0.0
            for k in range(4):
                s += a[r*4 + k] * b[k*4 + c]
            out[r*4 + c] = s
    return tuple(out)


def compose_all(matrices: Iterable[Matrix4]) -> Matrix4:
    """
    Product of matrices in root-to-leaf order; identity for an empty chain.
    """
    result = IDENTITY
    for m in matrices:
        result = compose(result, m)
    return result


def transform_point(m: Matrix4, p: Sequence[float]) -> Vec3:
    x, y, z = p[0], p[1], p[2]
    return (
        m[0]*x + m[1]*y + m[2]*z + m[3],
        m[4]*x + m[5]*y + m[6]*z + m[7],
        m[8]*x + m[9]*y + m[10]*z + m[11],
    )


def transform_vector(m: Matrix4, v: Sequence[float]) -> Vec3:
    """
    Linear part only: no translation, no renormalization.
    """
    x, y, z = v[0], v[1], v[2]
    return (
        m[0]*x + m[1]*y + m[2]*z,
        m[4]*x + m[5]*y + m[6]*z,
        m[8]*x + m[9]*y + m[10]*z,
    )
