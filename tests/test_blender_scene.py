import unittest

try:
    import bpy
except ImportError:
    bpy = None

if bpy is not None:
    from io_scene_x_java.core.schema import NodeKind
    from io_scene_x_java.host.blender_scene import BlenderSceneReader


def quad_object(name):
    mesh = bpy.data.meshes.new(name)
    mesh.from_pydata([(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)], [], [(0, 1, 2, 3)])
    mesh.update()
    return bpy.data.objects.new(name, mesh)


def new_collection(name, parent):
    collection = bpy.data.collections.new(name)
    parent.children.link(collection)
    return collection


@unittest.skipIf(bpy is None, "requires Blender's bpy module")
class BlenderSceneReaderTest(unittest.TestCase):
    def setUp(self):
        bpy.ops.wm.read_factory_settings(use_empty=True)
        self.scene = bpy.context.scene

    def read(self):
        reader = BlenderSceneReader(bpy.context, apply_modifiers=False)
        try:
            return reader.read()
        finally:
            reader.release()

    def handles(self, graph, name):
        return [h for h, n in enumerate(graph.nodes) if n.name == name]

    def test_object_in_two_collections_read_once(self):
        quad = quad_object("Quad")
        new_collection("A", self.scene.collection).objects.link(quad)
        new_collection("B", self.scene.collection).objects.link(quad)

        graph = self.read()
        self.assertEqual(len(self.handles(graph, "Quad")), 1)
        self.assertEqual(len([n for n in graph.nodes if n.kind == NodeKind.FACE]), 1)
        quad_handle = self.handles(graph, "Quad")[0]
        self.assertEqual(graph.node(self.handles(graph, "A")[0]).children, [quad_handle])
        self.assertEqual(graph.node(self.handles(graph, "B")[0]).children, [])

    def test_instanced_collection_keeps_its_contents(self):
        quad = quad_object("Quad")
        parts = new_collection("Parts", self.scene.collection)
        parts.objects.link(quad)
        empty = bpy.data.objects.new("Instance", None)
        empty.instance_type = 'COLLECTION'
        empty.instance_collection = parts
        self.scene.collection.objects.link(empty)

        graph = self.read()
        component = graph.node(self.handles(graph, "Instance")[0])
        self.assertEqual(component.kind, NodeKind.COMPONENT_INSTANCE)
        self.assertEqual(len(component.children), 1)
        self.assertEqual(len(self.handles(graph, "Quad")), 2)


if __name__ == '__main__':
    unittest.main()
