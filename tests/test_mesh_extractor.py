import unittest

from io_scene_x_java.core.material_registry import JavaMaterialTable, MaterialRegistry
from io_scene_x_java.core.mesh_extractor import (
    DirectXMeshExtractor,
    JavaMeshExtractor,
    point_string,
    texture_size,
    triangle_indices,
)
from io_scene_x_java.core.schema import (
    FaceRecord,
    Material,
    MeshBuffer,
    NodeKind,
    PolygonMesh,
    SceneNode,
    Texture,
)
from io_scene_x_java.core.transform import IDENTITY, translation
from io_scene_x_java.writers.directx_writer import format_face, format_uv

from helpers import square, tessellator, triangle


def face(mesh, material=None, back_material=None):
    return SceneNode(NodeKind.FACE, material=material, back_material=back_material, source=mesh)


class IndexTest(unittest.TestCase):
    def test_sign_encoded(self):
        self.assertEqual(triangle_indices((2, -5, 9), 10), (11, 14, 18))

    def test_degenerate_polygon(self):
        with self.assertRaises(ValueError):
            triangle_indices((1, 2), 0)


class TextureSizeTest(unittest.TestCase):
    def test_only_inherited_textured_material(self):
        wood = Material("Wood", texture=Texture("wood.jpg", 256, 512))
        self.assertEqual(texture_size(wood, None), (256.0, 512.0))
        self.assertEqual(texture_size(wood, wood), (1.0, 1.0))
        self.assertEqual(texture_size(Material("Plain"), None), (1.0, 1.0))
        self.assertEqual(texture_size(None, None), (1.0, 1.0))


class DirectXMeshExtractorTest(unittest.TestCase):
    def setUp(self):
        self.registry = MaterialRegistry()

    def extractor(self, **kwargs):
        return DirectXMeshExtractor(tessellator, self.registry, **kwargs)

    def test_normal_mode_doubles_points(self):
        buffer = MeshBuffer("m")
        self.extractor().extract(buffer, FaceRecord(face(triangle()), IDENTITY))

        self.assertEqual(len(buffer.vertices), 6)
        self.assertEqual(buffer.vertices[0], buffer.vertices[1])
        self.assertEqual(buffer.faces, [(4, 2, 0), (1, 3, 5)])
        # +Z -> +Y after conversion, back copy negated
        self.assertEqual(buffer.normals[0], (0.0, 1.0, 0.0))
        self.assertEqual(buffer.normals[1], (-0.0, -1.0, -0.0))
        self.assertEqual(buffer.face_materials, [0, 0])
        self.assertEqual(buffer.start_index, 3)

    def test_offsets_accumulate(self):
        buffer = MeshBuffer("m")
        extractor = self.extractor()
        extractor.extract(buffer, FaceRecord(face(triangle()), IDENTITY))
        extractor.extract(buffer, FaceRecord(face(square()), IDENTITY))
        self.assertEqual(buffer.start_index, 7)
        self.assertEqual(buffer.faces[2], (10, 8, 6))
        self.assertEqual(buffer.faces[3], (7, 9, 11))
        self.assertEqual(len(buffer.face_materials), len(buffer.faces))

    def test_textured_only_faces(self):
        mesh = PolygonMesh(points=[(float(i), 0.0, 0.0) for i in range(9)], polygons=[(2, 5, 9)])
        front, back = Material("Front"), Material("Back")
        buffer = MeshBuffer("m", start_index=10)
        extractor = self.extractor(textured_only=True)
        extractor.extract(buffer, FaceRecord(face(mesh, front, back), IDENTITY, front, back))

        self.assertEqual(format_face(buffer.faces[0]), "3;18,14,11;")
        self.assertEqual(format_face(buffer.faces[1]), "3;11,14,18;")
        self.assertEqual(len(buffer.vertices), 9)
        self.assertEqual(buffer.face_materials, [1, 2])
        self.assertEqual(buffer.materials.labels, ["Default_Material", "Front", "Back"])

    def test_textured_only_back_side(self):
        back = Material("Back")
        buffer = MeshBuffer("m")
        extractor = self.extractor(textured_only=True)
        extractor.extract(buffer, FaceRecord(face(triangle(), None, back), IDENTITY, None, back))
        self.assertEqual(buffer.faces, [(0, 1, 2)])
        self.assertEqual(buffer.normals[0], (-0.0, -1.0, -0.0))
        self.assertEqual(buffer.face_materials, [1])

    def test_inherited_texture_scales_uvs(self):
        wood = Material("Wood", texture=Texture("wood.jpg", 256, 512))
        mesh = triangle(uvs=[(128, 256), (0, 0), (256, 512)])
        buffer = MeshBuffer("m")
        self.extractor().extract(buffer, FaceRecord(face(mesh), IDENTITY, wood, wood))
        self.assertEqual(format_uv(buffer.texture_coords[0]), "1.5000;-0.5000;")

    def test_own_texture_keeps_uvs(self):
        wood = Material("Wood", texture=Texture("wood.jpg", 256, 512))
        mesh = triangle(uvs=[(0.5, 0.25), (0, 0), (1, 1)])
        buffer = MeshBuffer("m")
        self.extractor().extract(buffer, FaceRecord(face(mesh, wood), IDENTITY, wood, None))
        self.assertEqual(format_uv(buffer.texture_coords[0]), "1.5000;-0.2500;")

    def test_world_transform_and_unit_scale(self):
        buffer = MeshBuffer("m")
        extractor = self.extractor(unit_scale=2.0)
        extractor.extract(buffer, FaceRecord(face(triangle()), translation(0, 0, 1)))
        # (1, 0, 1) -> (-0, 1, 1) * 2
        self.assertEqual(buffer.vertices[2], (-0.0, 2.0, 2.0))

    def test_rotated_keeps_axes(self):
        buffer = MeshBuffer("m")
        self.extractor(rotated=True).extract(buffer, FaceRecord(face(triangle()), IDENTITY))
        self.assertEqual(buffer.vertices[2], (1.0, 0.0, 0.0))


class JavaMeshExtractorTest(unittest.TestCase):
    def test_untextured(self):
        table = JavaMaterialTable()
        red = Material("Red", color=(255, 0, 0))
        extractor = JavaMeshExtractor(tessellator, table, 0.0254)
        record = extractor.extract(FaceRecord(face(triangle(), red), IDENTITY, red))

        self.assertEqual(record.color_id, "Color_Red")
        self.assertEqual(record.texture_id, "null")
        self.assertIsNone(record.texcoords)
        self.assertEqual(len(record.points), 3)
        self.assertEqual(record.points[1], point_string((1, 0, 0), 0.0254))
        self.assertEqual(record.points[1], "  0.02540f,  0.00000f,  0.00000f")
        self.assertEqual(record.normals[0], "  0.00000f,  0.00000f,  1.00000f")

    def test_textured(self):
        table = JavaMaterialTable()
        brick = Material("Brick", texture=Texture("brick.jpg"))
        extractor = JavaMeshExtractor(tessellator, table, 1.0)
        mesh = triangle(uvs=[(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)])
        record = extractor.extract(FaceRecord(face(mesh, brick), IDENTITY, brick))
        self.assertEqual(record.texture_id, "Texture_Brick")
        self.assertEqual(record.texcoords[1], "  1.00000f,  0.00000f")


if __name__ == '__main__':
    unittest.main()
