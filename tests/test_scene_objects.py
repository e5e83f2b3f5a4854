import pytest

from pathtracer.geometry import Sphere, Triangle
from pathtracer.scene_objects import SceneObjects

CUBE = [
    (0.0, 0.0, 0.0),  # LDB
    (1.0, 0.0, 0.0),  # RDB
    (1.0, 0.0, 1.0),  # RDF
    (0.0, 0.0, 1.0),  # LDF
    (0.0, 1.0, 0.0),  # LUB
    (1.0, 1.0, 0.0),  # RUB
    (1.0, 1.0, 1.0),  # RUF
    (0.0, 1.0, 1.0),  # LUF
]


def _colours():
    return [(float(i),) * 8 for i in range(12)]


def test_new_scene_is_empty_and_keeps_order():
    scene = SceneObjects()
    assert scene.shapes == []
    sphere = Sphere((0.0, 0.0, 0.0), 1.0, (0.0,) * 8)
    triangle = Triangle((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0,) * 8)
    scene.add_sphere(sphere)
    scene.add_triangle(triangle)
    assert scene.shapes == [sphere, triangle]


def test_cuboid_adds_twelve_triangles_with_face_colours():
    scene = SceneObjects()
    colours = _colours()
    scene.add_cuboid(CUBE, colours)
    assert len(scene.shapes) == 12
    assert all(isinstance(shape, Triangle) for shape in scene.shapes)
    # down and back faces share B1/B2; D1/D2 are not used
    assert scene.shapes[0].colour == colours[6]
    assert scene.shapes[1].colour == colours[7]
    assert scene.shapes[2].colour == colours[10]
    assert scene.shapes[4].colour == colours[2]
    assert scene.shapes[6].colour == colours[4]
    assert scene.shapes[8].colour == colours[6]
    assert scene.shapes[10].colour == colours[8]
    used = {shape.colour for shape in scene.shapes}
    assert colours[0] not in used
    assert colours[1] not in used


def test_cuboid_is_hit_on_its_near_face():
    scene = SceneObjects()
    scene.add_cuboid(CUBE, _colours())
    ray = ((0.3, 0.6, -5.0), (0.0, 0.0, 1.0))
    hits = [shape.check_intersection(ray) for shape in scene.shapes]
    lams = [hit.lam for hit in hits if hit.intersects]
    assert lams
    assert min(lams) == pytest.approx(5.0)


def test_cuboid_rejects_wrong_counts():
    scene = SceneObjects()
    with pytest.raises(ValueError):
        scene.add_cuboid(CUBE[:7], _colours())
    with pytest.raises(ValueError):
        scene.add_cuboid(CUBE, _colours()[:11])
    assert scene.shapes == []