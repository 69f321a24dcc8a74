# File: core/coordinate_converter.py
# Purpose: Coordinate system conversion (host right-handed -> DirectX left-handed)
# Notes:
# - Non-rotated: (x, y, z) -> (-y, z, x)
# - Rotated ("Blender") mode keeps the vector as-is; the writer wraps all
#   meshes in a Frame whose matrix flips Y instead
# - Back-face normals are negated after conversion

from typing import Sequence, Tuple

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


class CoordinateConverter:
    """
    Handedness converter

    Conversion rule (non-rotated):
        host (X, Y, Z) -> DirectX (-Y, Z, X)

    Matrix form:
        [ 0 -1  0 ]
        [ 0  0  1 ]
        [ 1  0  0 ]
    """

    def __init__(self, rotated: bool = False):
        self.rotated = rotated

    def convert(self, v: Sequence[float]) -> Vec3:
        return counterclockwise(v, self.rotated)

    def convert_position(self, p: Sequence[float], unit_scale: float = 1.0) -> Vec3:
        return apply_unit_scale_vec3(self.convert(p), unit_scale)

    def convert_normal(self, n: Sequence[float], back: bool = False) -> Vec3:
        converted = self.convert(n)
        return negate(converted) if back else converted


# ==================== Helpers ====================

def counterclockwise(v: Sequence[float], rotated: bool = False) -> Vec3:
    """
    Convert a clockwise (right-handed) vector into the counterclockwise frame.
    (1, 2, 3) -> (-2, 3, 1); unchanged when rotated.
    """
    if rotated:
        return (v[0], v[1], v[2])
    return (-v[1], v[2], v[0])


def negate(v: Sequence[float]) -> Vec3:
    return (-v[0], -v[1], -v[2])


def apply_unit_scale_vec3(v: Sequence[float], scale: float) -> Vec3:
    return (v[0] * scale, v[1] * scale, v[2] * scale)


def texture_coordinate(uv: Sequence[float], texsize: Vec2 = (1.0, 1.0)) -> Vec2:
    """
    Host UV -> DirectX texture coordinate.
    The UV is first divided by the texture size, then U is shifted by +1 and V flipped.
    """
    u = uv[0] / texsize[0]
    v = uv[1] / texsize[1]
    return (u + 1, -v)
