import pytest

from abyss.vertex import Quad, Text, Triangle, Vertex


def test_vertex_create_widens_2d_position():
    v = Vertex.create((1.5, 2.5), (0.1, 0.2, 0.3, 0.4))
    assert v.pos == (1.5, 2.5, 0.0)
    assert v.col == (0.1, 0.2, 0.3, 0.4)


def test_vertex_create_defaults():
    v = Vertex.create((1, 2, 3), (1, 1, 1, 1))
    assert v.pos == (1.0, 2.0, 3.0)
    assert v.texinfo == (0.0, 0.0, 0.0)
    assert v.uvs == (1.0, 1.0)


def test_vertex_create_with_texcoord_and_texture():
    v = Vertex.create((0, 0), (1, 1, 1, 1), texture=5.0, texcoord=(0.25, 0.75))
    assert v.texinfo == (0.25, 0.75, 5.0)


def test_vertex_create_texture_only_sets_index():
    v = Vertex.create((0, 0), (1, 1, 1, 1), texture=3.0)
    assert v.texinfo[2] == 3.0
    assert v.texinfo[:2] == (0.0, 0.0)


def test_vertex_direct_texinfo():
    v = Vertex((0, 0, 0), (1, 1, 1, 1), (0.5, 0.5, 2.0), (2, 3))
    assert v.texinfo == (0.5, 0.5, 2.0)
    assert v.uvs == (2.0, 3.0)


def test_vertex_components_length_and_order():
    v = Vertex.create((1, 2), (3, 4, 5, 6), texture=7.0, texcoord=(8, 9), uvs=(10, 11))
    comps = v.components()
    assert len(comps) == 3 + 4 + 3 + 2
    assert comps[:3] == v.pos
    assert comps[-2:] == v.uvs


def test_vertex_rejects_bad_position():
    with pytest.raises(ValueError):
        Vertex.create((1,), (1, 1, 1, 1))


def test_vertex_rejects_bad_colour():
    with pytest.raises(ValueError):
        Vertex.create((1, 2), (1, 1, 1))


def test_triangle_iterates_vertices_in_order():
    a = Vertex.create((0, 0), (1, 1, 1, 1))
    b = Vertex.create((1, 0), (1, 1, 1, 1))
    c = Vertex.create((0, 1), (1, 1, 1, 1))
    assert list(Triangle(a, b, c)) == [a, b, c]


def test_quad_centre_is_half_size_from_corner():
    size, pos = (4.0, 6.0), (10.0, 20.0)
    q = Quad.create(size, pos)
    assert q.v.pos[0] - q.size[0] / 2 == pos[0]
    assert q.v.pos[1] - q.size[1] / 2 == pos[1]
    assert q.v.pos[2] == 0.0


def test_quad_drops_z_of_3d_position():
    q = Quad.create((2, 2), (1, 1, 9))
    assert q.v.pos[2] == 0.0


def test_quad_defaults_white_and_unit_uvs():
    q = Quad.create()
    assert q.v.col == (1.0, 1.0, 1.0, 1.0)
    assert q.v.uvs == (1.0, 1.0)
    assert q.size == (0.0, 0.0)


def test_quad_texture_index_forwarded():
    q = Quad.create((1, 1), (0, 0), texture=4.0)
    assert q.v.texinfo[2] == 4.0


def test_text_defaults_and_flat_position():
    t = Text("hello", (3, 4))
    assert t.pos == (3.0, 4.0, 0.0)
    assert t.scale == 1.0
    assert t.font == 0
    assert t.color == (1.0, 1.0, 1.0, 1.0)


def test_text_rejects_negative_font():
    with pytest.raises(ValueError):
        Text("x", (0, 0), font=-1)