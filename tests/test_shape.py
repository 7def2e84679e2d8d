"""Tests for the shared Shape behaviour.

A minimal shape that records the local ray and point it receives is used to
check the world/object space mapping independently of any real geometry.
"""

import math

import pytest

from phongray.core.errors import NonInvertibleMatrixError
from phongray.core.matrix import Matrix4
from phongray.core.ray import Ray
from phongray.core.tuples import Point, Vector
from phongray.geometry.shape import Shape
from phongray.geometry.sphere import Sphere


class RecordingShape(Shape):
    """Shape whose local operations record their inputs."""

    def __init__(self, shape_id, transform=None, material=None):
        super().__init__(shape_id, transform, material)
        self.saved_ray = None

    def local_intersect(self, local_ray):
        self.saved_ray = local_ray
        return []

    def local_normal_at(self, local_point):
        return Vector(local_point.x, local_point.y, local_point.z)


class TestSpaceMapping:
    """Tests for world/object space conversion in the base class."""

    def test_intersect_uses_inverse_transform(self):
        """Test a scaled shape receives a shrunk ray."""
        s = RecordingShape(0, transform=Matrix4.scaling(2, 2, 2))
        s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert s.saved_ray.origin == Point(0, 0, -2.5)
        assert s.saved_ray.direction == Vector(0, 0, 0.5)

    def test_intersect_translated(self):
        """Test a translated shape receives a shifted ray."""
        s = RecordingShape(0, transform=Matrix4.translation(5, 0, 0))
        s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert s.saved_ray.origin == Point(-5, 0, -5)
        assert s.saved_ray.direction == Vector(0, 0, 1)

    def test_normal_of_translated_shape(self):
        """Test the normal is computed in object space."""
        s = RecordingShape(0, transform=Matrix4.translation(0, 1, 0))
        assert s.normal_at(Point(0, 1.70711, -0.70711)) == Vector(0, 0.70711, -0.70711)

    def test_normal_of_transformed_shape(self):
        """Test the normal under scale and rotation."""
        s = RecordingShape(0, transform=Matrix4.scaling(1, 0.5, 1) * Matrix4.rotation_z(math.pi / 5))
        half = math.sqrt(2) / 2
        assert s.normal_at(Point(0, half, -half)) == Vector(0, 0.97014, -0.24254)

    def test_world_to_object(self):
        """Test converting a world point into object space."""
        s = RecordingShape(0, transform=Matrix4.scaling(2, 2, 2))
        assert s.world_to_object(Point(2, 4, 6)) == Point(1, 2, 3)


class TestTransformCache:
    """Tests for cached inverse transforms."""

    def test_inverse_is_cached(self):
        """Test the inverse is computed once."""
        s = RecordingShape(0, transform=Matrix4.translation(1, 2, 3))
        assert s.inverse_transform is s.inverse_transform

    def test_setting_transform_resets_cache(self):
        """Test assigning a new transform invalidates the inverse."""
        s = RecordingShape(0)
        assert s.inverse_transform == Matrix4.identity()
        s.transform = Matrix4.translation(2, 3, 4)
        assert s.inverse_transform == Matrix4.translation(-2, -3, -4)
        assert s.normal_transform == Matrix4.translation(-2, -3, -4).transpose()

    def test_in_place_edit_moves_sphere(self):
        """Test writing a transform entry is seen by the next intersection."""
        s = Sphere(0)
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        assert [i.t for i in s.intersect(ray)] == [4.0, 6.0]
        s.transform[0, 3] = 5.0
        assert s.intersect(ray) == []

    def test_in_place_edit_updates_normal_transform(self):
        """Test writing a transform entry refreshes the inverse-transpose."""
        s = RecordingShape(0)
        assert s.normal_transform == Matrix4.identity()
        s.transform[1, 1] = 2.0
        assert s.inverse_transform == Matrix4.scaling(1, 0.5, 1)
        assert s.normal_transform == Matrix4.scaling(1, 0.5, 1)
        assert s.normal_at(Point(0, 2, 0)) == Vector(0, 1, 0)

    def test_singular_transform_fails_on_use(self):
        """Test a singular transform raises when the shape is queried."""
        s = RecordingShape(0, transform=Matrix4.scaling(0, 1, 1))
        with pytest.raises(NonInvertibleMatrixError):
            s.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))


class TestIdentity:
    """Tests for id-based equality."""

    def test_equal_ids_are_equal(self):
        """Test shapes with the same id compare equal regardless of state."""
        a = Sphere(7)
        b = Sphere(7, transform=Matrix4.translation(1, 0, 0))
        assert a == b
        assert hash(a) == hash(b)

    def test_distinct_ids_differ(self, builder):
        """Test two builder shapes with the same transform are different."""
        a = builder.sphere()
        b = builder.sphere()
        assert a != b
        assert a.id != b.id

    def test_shapes_usable_as_dict_keys(self, builder):
        """Test shapes hash by id."""
        a = builder.sphere()
        b = builder.plane()
        lookup = {a: "sphere", b: "plane"}
        assert lookup[a] == "sphere"
        assert lookup[b] == "plane"

    def test_repr(self):
        """Test repr names the concrete type and id."""
        assert repr(Sphere(3)) == "Sphere(id=3)"

    def test_shape_is_abstract(self):
        """Test the base class cannot be instantiated."""
        with pytest.raises(TypeError):
            Shape(0)
