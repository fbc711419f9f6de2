# -*- coding: utf-8 -*-
import re

import numpy as np
import pytest

from objmesh.errors import MalformedDocument, UnparsableIndex
from objmesh.io import obj_parser
from objmesh.io.obj_parser import parse_obj, read_face, scan_floats
from objmesh.mesh.obj_mesh import MeshFormat, ObjMesh


def test_vertex_is_point_with_float32_components():
    doc = parse_obj("v 0.1 -2.5 3\nusemtl m\n")
    v = doc.vertices[0]
    assert v.w == 1.0
    assert v.x == float(np.float32(0.1))
    assert (v.y, v.z) == (-2.5, 3.0)


def test_normal_is_direction():
    doc = parse_obj("vn 0.0 1.0 0.0\nusemtl m\n")
    assert doc.normals[0].to_tuple() == (0.0, 1.0, 0.0, 0.0)
    assert doc.vertices == []


def test_face_indices_are_zero_based():
    meshes = [ObjMesh("m")]
    assert read_face("f 12//7", meshes) == 1
    assert meshes[0].vertex_indices == [11]
    assert meshes[0].normal_indices == [6]


def test_round_trip(round_trip_text):
    doc = parse_obj(round_trip_text)
    assert [v.to_tuple() for v in doc.vertices] == [(0, 0, 0, 1), (1, 0, 0, 1)]
    assert [n.to_tuple() for n in doc.normals] == [(0, 1, 0, 0)]
    assert len(doc.meshes) == 1
    mesh = doc.meshes[0]
    assert mesh.material == "mat1"
    assert mesh.vertex_indices == [0, 1]
    assert mesh.normal_indices == [0, 0]
    assert mesh.index_count == 2
    assert doc.format is MeshFormat.VERTEX_NORMAL
    assert doc.array_data().tolist() == [
        [0, 0, 0, 1], [0, 1, 0, 0], [1, 0, 0, 1], [0, 1, 0, 0],
    ]


def test_no_normals_gives_vertex_only():
    doc = parse_obj("v 0 0 0\nv 1 0 0\nv 0 1 0\nusemtl m\nf 1 2 3\n")
    assert doc.format is MeshFormat.VERTEX_ONLY
    assert doc.meshes[0].index_count == 0
    assert doc.array_data().shape == (0, 4)


@pytest.mark.parametrize("text", [
    "",
    "v 1 2 3\nv 4 5 6\n",
    "v 1 2 3\nvn 0 0 1\nf 1//1 1//1 1//1\n",
])
def test_without_usemtl_is_malformed(text):
    with pytest.raises(MalformedDocument):
        parse_obj(text)


def test_multi_mesh_default_build_is_first_mesh(two_meshes_text):
    doc = parse_obj(two_meshes_text)
    assert [m.material for m in doc.meshes] == ["front", "side"]
    assert doc.meshes[1].vertex_indices == [1, 2, 3]

    first = doc.array_data()
    assert len(first) == 6
    # нормаль второго меша в поток по умолчанию не попадает
    assert (1, 0, 0, 0) not in [tuple(p) for p in first.tolist()]

    second = doc.array_data(1)
    assert second[0::2].tolist() == [[1, 0, 0, 1], [0, 1, 0, 1], [0, 0, 1, 1]]
    assert second[1].tolist() == [1, 0, 0, 0]


def test_format_follows_first_mesh_only():
    # второй меш с нормалями, но документ помечен по первому
    text = ("v 0 0 0\nvn 0 0 1\n"
            "usemtl bare\nf 1 1 1\n"
            "usemtl lit\nf 1//1 1//1 1//1\n")
    doc = parse_obj(text)
    assert doc.meshes[1].has_normals
    assert doc.format is MeshFormat.VERTEX_ONLY
    assert doc.array_data(1).tolist() == [[0, 0, 0, 1]] * 3


def test_carriage_returns_are_harmless():
    text = "v 1.0 2.0 3.0\r\nvn 0 0 1\r\nusemtl mat1\r\nf 1//1 1//1 1//1\r\n"
    doc = parse_obj(text)
    assert doc.vertices[0].to_tuple() == (1, 2, 3, 1)
    assert doc.normals[0].to_tuple() == (0, 0, 1, 0)
    assert doc.meshes[0].material == "mat1"
    assert doc.meshes[0].vertex_indices == [0, 0, 0]


def test_short_and_long_numeric_lines():
    doc = parse_obj("v 1.5\nv 1 2 3 4\nusemtl m\n")
    assert doc.vertices[0].to_tuple() == (1.5, 0, 0, 1)
    assert doc.vertices[1].to_tuple() == (1, 2, 3, 1)


def test_scan_floats_forms():
    assert scan_floats("vn -0.5 .25 1.") == [-0.5, 0.25, 1.0]
    assert scan_floats("v 1-2 3") == [1.0, -2.0, 3.0]
    assert scan_floats("v - . x") == [0.0, 0.0, 0.0]


def test_unsupported_face_syntax_is_ignored():
    meshes = [ObjMesh("m")]
    assert read_face("f 1/1/1 2/2/2 3/3/3", meshes) == 0
    assert read_face("f 1 2 3", meshes) == 0
    assert meshes[0].vertex_indices == []


def test_other_records_are_ignored():
    doc = parse_obj("# comment\nvt 0.5 0.5\ns 1\no thing\nv 1 1 1\nusemtl m\n")
    assert len(doc.vertices) == 1
    assert doc.normals == []


def test_material_name_pattern():
    doc = parse_obj("usemtl Material.001\nusemtl\nusemtl   spaced\n")
    assert [m.material for m in doc.meshes] == ["Material", "", ""]


@pytest.mark.parametrize("face", ["f 0//1", "f 3//1", "f 1//2"])
def test_out_of_range_index_is_malformed(face):
    with pytest.raises(MalformedDocument):
        parse_obj(f"v 0 0 0\nv 1 1 1\nvn 0 0 1\nusemtl m\n{face}\n")


def test_non_ascii_digits_are_unparsable():
    with pytest.raises(UnparsableIndex):
        parse_obj("v 0 0 0\nvn 0 0 1\nusemtl m\nf \u0661//\u0661 1//1 1//1\n")
    with pytest.raises(UnparsableIndex):
        read_face("f 1//\u0661", [ObjMesh("m")])


def test_negative_mesh_index_rejected(two_meshes_text):
    doc = parse_obj(two_meshes_text)
    with pytest.raises(IndexError):
        doc.array_data(-1)
    with pytest.raises(IndexError):
        doc.mesh(2)


def test_patterns_are_precompiled():
    for pattern in (obj_parser.NEW_MESH_RE, obj_parser.VERTEX_NORMAL_RE, obj_parser.NUMBER_RE):
        assert isinstance(pattern, re.Pattern)
