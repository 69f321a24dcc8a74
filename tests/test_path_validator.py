import os
import tempfile
import unittest

from io_scene_x_java.utils.file_manager import FileManager
from io_scene_x_java.validators.path_validator import validate_output_path


class PathValidatorTest(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def test_valid(self):
        self.assertTrue(validate_output_path(os.path.join(self.tmp.name, "model.x"), ".x"))

    def test_empty(self):
        with self.assertRaises(ValueError):
            validate_output_path("")

    def test_directory(self):
        with self.assertRaises(ValueError):
            validate_output_path(self.tmp.name)

    def test_missing_parent(self):
        with self.assertRaises(ValueError):
            validate_output_path(os.path.join(self.tmp.name, "nope", "model.x"))

    def test_extension(self):
        with self.assertRaises(ValueError):
            validate_output_path(os.path.join(self.tmp.name, "model.txt"), ".x")


class FileManagerTest(unittest.TestCase):
    def test_base_name(self):
        self.assertEqual(FileManager.base_name("C:\\tex\\wood.jpg"), "wood.jpg")
        self.assertEqual(FileManager.base_name("/tex/wood.jpg"), "wood.jpg")

    def test_texture_paths(self):
        self.assertEqual(FileManager.texture_output_path("/out/truck.x", "C:\\tex\\wood.jpg"),
                         "/out/truck.xwood.jpg")
        self.assertEqual(FileManager.texture_reference("/out/truck.x", "wood.jpg"), "truck.xwood.jpg")

    def test_model_name(self):
        self.assertEqual(FileManager.model_name("/models/truck.skp", "Untitled"), "truck")
        self.assertEqual(FileManager.model_name("", "Untitled"), "Untitled")

    def test_audit_log_path(self):
        self.assertEqual(FileManager.audit_log_path("/out/truck.x", ".log"), "/out/truck.log")


if __name__ == '__main__':
    unittest.main()
