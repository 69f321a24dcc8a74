import unittest

from io_scene_x_java.core.material_registry import JavaMaterialConstant
from io_scene_x_java.core.schema import GroupMarker, JavaFaceRecord, NodeKind
from io_scene_x_java.writers.java_writer import (
    JavaWriter,
    java_materials,
    java_preface,
    java_strip,
)


class JavaBlocksTest(unittest.TestCase):
    def test_preface(self):
        text = java_preface("Truck")
        self.assertTrue(text.startswith("class TruckModel {\n"))
        self.assertIn("float [] Color_default = { 0.7f, 0.7f, 0.7f, 1f };", text)

    def test_materials(self):
        constants = [
            JavaMaterialConstant("Color_Red", ("1.0000", "0.0000", "0.0000")),
            JavaMaterialConstant("Color_Brick", ("1.0000", "1.0000", "1.0000"), "Texture_Brick", "brick.jpg"),
        ]
        text = java_materials(constants)
        self.assertIn("    float [] Color_Red = { 1.0000f, 0.0000f, 0.0000f , 1f};\n", text)
        self.assertIn('    Texture Texture_Brick = WPBDApp.getApplication().getTextureResource("brick.jpg", '
                      'true, TextureIO.JPG);\n', text)

    def test_strip_without_texture(self):
        record = JavaFaceRecord("Color_default", "null", ["p"], ["n"])
        text = java_strip(record)
        self.assertTrue(text.startswith("        new TriangleStrip(Color_default, null, \n"))
        self.assertIn("            new float [] { // points\n                p,\n", text)
        self.assertTrue(text.endswith("            null),\n"))

    def test_strip_with_texture(self):
        record = JavaFaceRecord("Color_Brick", "Texture_Brick", ["p"], ["n"], ["t"])
        text = java_strip(record)
        self.assertIn("// texcoords\n                t,\n            }),\n", text)


class JavaWriterTest(unittest.TestCase):
    def test_build(self):
        entries = [
            GroupMarker(NodeKind.GROUP, "Body"),
            JavaFaceRecord("Color_default", "null", ["p"], ["n"]),
        ]
        text = JavaWriter("unused.java").build("Truck", [], entries)
        self.assertIn("    TriangleStrip [] strips = {\n        // Group: Body\n", text)
        self.assertIn("    };\n    public void display(GL gl) {", text)
        self.assertTrue(text.endswith("};\n"))


if __name__ == '__main__':
    unittest.main()
