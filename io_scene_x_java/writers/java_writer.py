# File: writers/java_writer.py
# Purpose: Write the Java/GL source fragment (<Name>Model class)
# Notes:
# - Layout: preface -> material constants -> `TriangleStrip [] strips = {`
#   -> one `new TriangleStrip(...)` per face -> `};` -> display() epilog
# - The fragment is meant to be pasted into a JOGL program, not compiled alone

from typing import Iterable, List, Union

from ..config.constants import JAVA_LINE_INDENT
from ..core.material_registry import JavaMaterialConstant
from ..core.schema import GroupMarker, JavaFaceRecord, NodeKind
from ..utils.file_manager import FileManager

JAVA_PREFACE = """\
    class TriangleStrip {
        TriangleStrip(float [] c, Texture t, float [] p, float [] n, float [] tc) {
            color = c;
            texture = t;
            points = p;
            normals = n;
            texCoords = tc;
        }
        float [] color;
        Texture texture;
        float [] points;
        float [] normals;
        float [] texCoords;
    };
    float [] Color_default = { 0.7f, 0.7f, 0.7f, 1f };
"""

JAVA_EPILOG = """\
    public void display(GL gl) {
        for (int i = 0; i < strips.length; i++) {
            TriangleStrip strip = strips[i];
            if (strip.color != null) {
                gl.glMaterialfv(GL.GL_FRONT_AND_BACK, GL.GL_AMBIENT_AND_DIFFUSE, strip.color, 0);
            }
            gl.glBegin(GL.GL_TRIANGLES);
            for (int j = 0; j < strip.points.length; j += 3) {
                gl.glNormal3fv(strip.normals, j);
                gl.glVertex3fv(strip.points, j);
            }
            gl.glEnd();
        }
    }
};
"""

TEXTURE_LOADER = 'WPBDApp.getApplication().getTextureResource("{filename}", true, TextureIO.JPG)'


def java_preface(model_name: str) -> str:
    return f"class {model_name}Model {{\n" + JAVA_PREFACE


def java_materials(constants: Iterable[JavaMaterialConstant]) -> str:
    text = ""
    for constant in constants:
        r, g, b = constant.rgb
        text += f"    float [] {constant.color_id} = {{ {r}f, {g}f, {b}f , 1f}};\n"
        if constant.texture_id:
            loader = TEXTURE_LOADER.format(filename=constant.texture_filename)
            text += f"    Texture {constant.texture_id} = {loader};\n"
    return text


def _float_block(comment: str, lines: List[str]) -> str:
    text = f"            new float [] {{ // {comment}\n"
    for line in lines:
        text += JAVA_LINE_INDENT + line + ",\n"
    return text


def java_strip(record: JavaFaceRecord) -> str:
    text = f"        new TriangleStrip({record.color_id}, {record.texture_id}, \n"
    text += _float_block("points", record.points)
    text += "            },\n"
    text += _float_block("normals", record.normals)
    text += "            },\n"
    if record.texcoords is not None:
        text += _float_block("texcoords", record.texcoords)
        text += "            }),\n"
    else:
        text += "            null),\n"
    return text


def java_marker(marker: GroupMarker) -> str:
    if marker.kind is NodeKind.GROUP:
        return f"        // Group: {marker.name}\n"
    return f"        // Component instance: {marker.name}\n"


class JavaWriter:
    """
    JavaWriter
    ----------
    Usage:
        writer = JavaWriter("out/truck.java")
        writer.write("Truck", table.constants, entries)
    """

    def __init__(self, filepath: str):
        self.filepath = filepath

    def build(self, model_name: str, constants: Iterable[JavaMaterialConstant],
              entries: Iterable[Union[JavaFaceRecord, GroupMarker]]) -> str:
        parts = [java_preface(model_name), java_materials(constants), "    TriangleStrip [] strips = {\n"]
        for entry in entries:
            if isinstance(entry, GroupMarker):
                parts.append(java_marker(entry))
            else:
                parts.append(java_strip(entry))
        parts.append("    };\n")
        parts.append(JAVA_EPILOG)
        return "".join(parts)

    def write(self, model_name: str, constants: Iterable[JavaMaterialConstant],
              entries: Iterable[Union[JavaFaceRecord, GroupMarker]]) -> str:
        text = self.build(model_name, constants, entries)
        FileManager.ensure_directory(self.filepath)
        with open(self.filepath, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        return self.filepath
