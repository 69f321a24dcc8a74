import os
import tempfile
import unittest

from io_scene_x_java.config.export_settings import DirectXExportSettings, JavaExportSettings
from io_scene_x_java.exporters import DirectXExporter, JavaExporter
from io_scene_x_java.core.schema import Material, SceneGraph, Texture
from io_scene_x_java.core.transform import translation
from io_scene_x_java.utils.logger import Logger

from helpers import RecordingTextureWriter, read, square, tessellator, triangle


def quiet(settings):
    settings.verbose = False
    return settings


class DirectXExporterTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "truck.x")
        self.logger = Logger(verbose=False)

    def tearDown(self):
        self.tmp.cleanup()

    def export(self, graph, writer=None, **options):
        exporter = DirectXExporter(quiet(DirectXExportSettings(**options)), self.logger)
        return exporter.export(graph, self.path, tessellator, writer)

    def test_default_filename(self):
        self.assertEqual(DirectXExporter.default_filename("/models/truck.skp"), "truck.x")
        self.assertEqual(DirectXExporter.default_filename("/models/truck.skp", True), "truck-T.x")
        self.assertEqual(DirectXExporter.default_filename(""), "Untitled.x")

    def test_empty_scene_writes_header_only(self):
        result = self.export(SceneGraph())
        self.assertEqual(result, self.path)
        text = read(self.path)
        self.assertTrue(text.startswith("xof 0303txt 0032\n"))
        self.assertNotIn("Mesh ", text)
        self.assertIn("Material Default_Material{ \n0.7;0.7;0.7;1.0;;\n", text)

    def test_wrong_extension(self):
        self.path = os.path.join(self.tmp.name, "truck.txt")
        with self.assertRaises(ValueError):
            self.export(SceneGraph())
        self.assertFalse(os.path.exists(self.path))

    def test_meshes_per_top_level_entity(self):
        red = Material("Red Paint", color=(255, 0, 0))
        g = SceneGraph("truck.skp")
        body = g.add_group("Body #1", material=red)
        g.add_face(parent=body, source=square())
        wheel = g.add_component("", definition_name="Wheel", transform=translation(1, 0, 0))
        g.add_face(parent=wheel, source=triangle())
        g.add_group("Hidden", visible=False)
        g.add_face(source=triangle())

        self.export(g)
        text = read(self.path)
        self.assertIn("Material RedPaint{", text)
        self.assertIn("Mesh Body1{\n 8;\n", text)
        self.assertIn("Mesh Wheel{\n 6;\n", text)
        self.assertIn("Mesh mesh_2{\n", text)
        self.assertNotIn("Hidden", text)
        self.assertLess(text.index("Material RedPaint{"), text.index("Mesh Body1{"))

    def test_empty_group_skipped(self):
        g = SceneGraph()
        g.add_group("Nothing")
        g.add_face(source=triangle())
        self.export(g)
        text = read(self.path)
        self.assertNotIn("Nothing", text)
        self.assertIn("Mesh mesh_0{", text)

    def test_textured_only(self):
        wood = Material("Wood", texture=Texture("wood.jpg", 64, 64))
        g = SceneGraph()
        group = g.add_group("G")
        g.add_face(parent=group, material=wood, source=triangle())
        g.add_face(parent=group, source=triangle())

        writer = RecordingTextureWriter()
        self.export(g, writer, textured_only=True)
        text = read(self.path)
        self.assertIn("Mesh G{\n 3;\n", text)
        self.assertIn(" 1;\n 3;2,1,0;;\n", text)
        self.assertIn('TextureFilename { "truck.xwood.jpg";', text)
        self.assertEqual(len(writer.calls), 1)
        self.assertTrue(os.path.exists(self.path + "wood.jpg"))

    def test_rotated(self):
        g = SceneGraph()
        g.add_face(source=triangle())
        self.export(g, rotated=True)
        text = read(self.path)
        self.assertIn("FrameTransformMatrix", text)
        self.assertIn("1.0000;0.0000;0.0000;", text)

    def test_invalid_path(self):
        exporter = DirectXExporter(quiet(DirectXExportSettings()), self.logger)
        with self.assertRaises(ValueError):
            exporter.export(SceneGraph(), os.path.join(self.tmp.name, "missing", "a.x"), tessellator)


class JavaExporterTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "truck.java")
        self.exporter = JavaExporter(quiet(JavaExportSettings()), Logger(verbose=False))

    def tearDown(self):
        self.tmp.cleanup()

    def test_names(self):
        self.assertEqual(JavaExporter.model_name("/models/truck.skp"), "Truck")
        self.assertEqual(JavaExporter.model_name(""), "Untitled")
        self.assertEqual(JavaExporter.default_filename("/models/truck.skp"), "truck.java")

    def test_nothing_to_export(self):
        self.assertIsNone(self.exporter.export(SceneGraph(), self.path, tessellator))
        self.assertFalse(os.path.exists(self.path))

    def test_empty_group_writes_nothing(self):
        g = SceneGraph("/models/truck.skp")
        g.add_group("Empty")
        self.assertIsNone(self.exporter.export(g, self.path, tessellator))
        self.assertFalse(os.path.exists(self.path))

    def test_wrong_extension(self):
        g = SceneGraph("/models/truck.skp")
        g.add_face(source=triangle())
        path = os.path.join(self.tmp.name, "truck.x")
        with self.assertRaises(ValueError):
            self.exporter.export(g, path, tessellator)
        self.assertFalse(os.path.exists(path))

    def test_selection_only(self):
        red = Material("Red", color=(255, 0, 0))
        g = SceneGraph("/models/truck.skp")
        g.add_material(red)
        body = g.add_group("Body")
        g.add_face(parent=body, material=red, source=triangle())
        other = g.add_group("Other")
        g.add_face(parent=other, source=triangle())
        g.select(body)

        result = self.exporter.export(g, self.path, tessellator)
        self.assertEqual(result, self.path)
        text = read(self.path)
        self.assertTrue(text.startswith("class TruckModel {\n"))
        self.assertIn("float [] Color_Red = { 1.0000f, 0.0000f, 0.0000f , 1f};", text)
        self.assertIn("// Group: Body", text)
        self.assertNotIn("// Group: Other", text)
        self.assertEqual(text.count("new TriangleStrip("), 1)
        self.assertIn("new TriangleStrip(Color_Red, null, ", text)

    def test_whole_model_without_selection(self):
        g = SceneGraph()
        g.add_face(source=triangle())
        g.add_face(source=triangle())
        self.exporter.export(g, self.path, tessellator)
        text = read(self.path)
        self.assertTrue(text.startswith("class UntitledModel {\n"))
        self.assertEqual(text.count("new TriangleStrip(Color_default, null, "), 2)


if __name__ == '__main__':
    unittest.main()
