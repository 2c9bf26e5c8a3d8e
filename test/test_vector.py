from geomcore.algorithms import \
    cross_product, \
    dot_product, \
    vector_angle, \
    vector_magnitude
from geomcore.common import \
    GeometryErrorReason, \
    InvalidArgumentError, \
    Line3D, \
    Plane3D, \
    Vector3D
import math
import numpy
from typing import Final
from unittest import TestCase


TOLERANCE: Final[float] = 1e-9
SAMPLE_VECTORS: Final[list[Vector3D]] = [
    Vector3D(x=1.0, y=0.0, z=0.0),
    Vector3D(x=0.0, y=-2.0, z=0.5),
    Vector3D(x=3.0, y=4.0, z=-5.0),
    Vector3D(x=-0.25, y=7.5, z=2.0),
    Vector3D(x=1e3, y=-1e-3, z=42.0)]


class TestVector3D(TestCase):

    def assertVectorAlmostEqual(
        self,
        actual: Vector3D,
        expected: Vector3D,
        tolerance: float = TOLERANCE
    ) -> None:
        self.assertAlmostEqual(actual.x, expected.x, delta=tolerance)
        self.assertAlmostEqual(actual.y, expected.y, delta=tolerance)
        self.assertAlmostEqual(actual.z, expected.z, delta=tolerance)

    def test_arithmetic_operators(self):
        a = Vector3D(x=1.0, y=2.0, z=3.0)
        b = Vector3D(x=-1.0, y=0.5, z=2.0)
        self.assertEqual(a + b, Vector3D(x=0.0, y=2.5, z=5.0))
        self.assertEqual(a - b, Vector3D(x=2.0, y=1.5, z=1.0))
        self.assertEqual(-a, Vector3D(x=-1.0, y=-2.0, z=-3.0))
        self.assertEqual(a * 2.0, Vector3D(x=2.0, y=4.0, z=6.0))
        self.assertEqual(2.0 * a, Vector3D(x=2.0, y=4.0, z=6.0))
        self.assertEqual(a / 2.0, Vector3D(x=0.5, y=1.0, z=1.5))

    def test_arithmetic_with_numpy_scalars(self):
        a = Vector3D(x=1.0, y=2.0, z=3.0)
        self.assertEqual(a * numpy.float32(2.0), Vector3D(x=2.0, y=4.0, z=6.0))
        self.assertEqual(a * numpy.float64(2.0), Vector3D(x=2.0, y=4.0, z=6.0))
        self.assertEqual(a * numpy.int64(2), Vector3D(x=2.0, y=4.0, z=6.0))
        self.assertEqual(a / numpy.float32(2.0), Vector3D(x=0.5, y=1.0, z=1.5))
        self.assertEqual(a / numpy.float64(2.0), Vector3D(x=0.5, y=1.0, z=1.5))
        product = a * numpy.float32(0.5)
        self.assertIs(type(product.x), float)
        with self.assertRaises(TypeError):
            _ = a * "2"

    def test_vector_is_immutable(self):
        a = Vector3D(x=1.0, y=2.0, z=3.0)
        with self.assertRaises(Exception):
            a.x = 5.0

    def test_cross_product_orthogonal_to_inputs(self):
        for a in SAMPLE_VECTORS:
            for b in SAMPLE_VECTORS:
                cross = a.cross(b)
                scale = max(1.0, a.magnitude() * b.magnitude())
                self.assertAlmostEqual(a.dot(cross) / scale, 0.0, delta=TOLERANCE)
                self.assertAlmostEqual(b.dot(cross) / scale, 0.0, delta=TOLERANCE)

    def test_cross_product_anticommutative(self):
        for a in SAMPLE_VECTORS:
            for b in SAMPLE_VECTORS:
                self.assertVectorAlmostEqual(a.cross(b), -b.cross(a))

    def test_angle_with_self_is_zero(self):
        for a in SAMPLE_VECTORS:
            self.assertAlmostEqual(a.angle_with(a), 0.0, delta=1e-6)

    def test_angle_with_in_range(self):
        for a in SAMPLE_VECTORS:
            for b in SAMPLE_VECTORS:
                angle = a.angle_with(b)
                self.assertGreaterEqual(angle, 0.0)
                self.assertLessEqual(angle, math.pi)
            self.assertAlmostEqual(a.angle_with(-a), math.pi, delta=1e-6)

    def test_angle_with_clamps_cosine(self):
        # cosine computes to slightly above 1 without clamping for some inputs
        a = Vector3D(x=0.1, y=0.2, z=0.3)
        b = a * 3.0
        self.assertFalse(math.isnan(a.angle_with(b)))

    def test_angle_with_zero_vector_fails(self):
        with self.assertRaises(InvalidArgumentError):
            Vector3D.zero().angle_with(Vector3D(x=1.0, y=0.0, z=0.0))

    def test_normalize(self):
        unit = Vector3D(x=3.0, y=0.0, z=4.0).normalize()
        self.assertVectorAlmostEqual(unit, Vector3D(x=0.6, y=0.0, z=0.8))
        self.assertAlmostEqual(unit.magnitude(), 1.0, delta=TOLERANCE)
        with self.assertRaises(InvalidArgumentError) as context:
            Vector3D(x=1e-12, y=0.0, z=0.0).normalize()
        self.assertEqual(context.exception.reason, GeometryErrorReason.INVALID_ARGUMENT)

    def test_parallel_and_perpendicular(self):
        x_axis = Vector3D(x=1.0, y=0.0, z=0.0)
        self.assertTrue(x_axis.are_parallel(Vector3D(x=-3.0, y=0.0, z=0.0)))
        self.assertFalse(x_axis.are_parallel(Vector3D(x=1.0, y=1.0, z=0.0)))
        self.assertTrue(x_axis.are_perpendicular(Vector3D(x=0.0, y=2.0, z=-1.0)))
        self.assertFalse(x_axis.are_perpendicular(Vector3D(x=0.1, y=2.0, z=-1.0)))
        self.assertTrue(Vector3D(x=1e-11, y=0.0, z=0.0).is_zero())

    def test_non_finite_component_rejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            Vector3D(x=float("nan"), y=0.0, z=0.0)
        self.assertEqual(context.exception.operand, "x")
        with self.assertRaises(InvalidArgumentError):
            Vector3D(x=0.0, y=float("inf"), z=0.0)
        with self.assertRaises(InvalidArgumentError):
            Line3D.model_validate({
                "point": {"x": 0.0, "y": 0.0, "z": float("-inf")},
                "direction": {"x": 1.0, "y": 0.0, "z": 0.0}})

    def test_from_list(self):
        self.assertEqual(Vector3D.from_list([1, 2, 3]), Vector3D(x=1.0, y=2.0, z=3.0))
        with self.assertRaises(InvalidArgumentError):
            Vector3D.from_list([1.0, 2.0])

    def test_serialization_round_trip_through_dict(self):
        line = Line3D(point=Vector3D(x=1.0, y=2.0, z=3.0), direction=Vector3D(x=0.0, y=0.0, z=1.0))
        self.assertEqual(Line3D.model_validate(line.model_dump()), line)


class TestPrimitives(TestCase):

    def test_line_zero_direction_rejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            Line3D(point=Vector3D.zero(), direction=Vector3D.zero())
        self.assertEqual(context.exception.operand, "direction")

    def test_line_point_at_parameter(self):
        line = Line3D(point=Vector3D(x=1.0, y=1.0, z=1.0), direction=Vector3D(x=0.0, y=2.0, z=0.0))
        self.assertEqual(line.point_at_parameter(1.5), Vector3D(x=1.0, y=4.0, z=1.0))

    def test_plane_zero_normal_rejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            Plane3D(point=Vector3D.zero(), normal=Vector3D.zero())
        self.assertEqual(context.exception.operand, "normal")

    def test_plane_distances_and_projection(self):
        plane = Plane3D(point=Vector3D(x=0.0, y=0.0, z=2.0), normal=Vector3D(x=0.0, y=0.0, z=-4.0))
        point = Vector3D(x=1.0, y=1.0, z=5.0)
        self.assertAlmostEqual(plane.distance_to_point(point), 3.0, delta=TOLERANCE)
        self.assertAlmostEqual(plane.signed_distance_to_point(point), -3.0, delta=TOLERANCE)
        self.assertEqual(plane.project_point(point), Vector3D(x=1.0, y=1.0, z=2.0))

    def test_plane_from_three_points(self):
        plane = Plane3D.from_three_points(
            Vector3D(x=0.0, y=0.0, z=1.0),
            Vector3D(x=1.0, y=0.0, z=1.0),
            Vector3D(x=0.0, y=1.0, z=1.0))
        self.assertAlmostEqual(plane.distance_to_point(Vector3D(x=5.0, y=-3.0, z=1.0)), 0.0, delta=TOLERANCE)
        self.assertTrue(plane.normal.are_parallel(Vector3D(x=0.0, y=0.0, z=1.0)))
        with self.assertRaises(InvalidArgumentError):
            Plane3D.from_three_points(
                Vector3D(x=0.0, y=0.0, z=0.0),
                Vector3D(x=1.0, y=1.0, z=1.0),
                Vector3D(x=2.0, y=2.0, z=2.0))


class TestVectorOperations(TestCase):

    def test_dot_product(self):
        result = dot_product(Vector3D(x=1.0, y=0.0, z=0.0), Vector3D(x=1.0, y=1.0, z=0.0))
        self.assertAlmostEqual(result.dot_product, 1.0, delta=TOLERANCE)
        self.assertAlmostEqual(result.angle_degrees, 45.0, delta=TOLERANCE)
        self.assertFalse(result.are_parallel)
        self.assertFalse(result.are_perpendicular)

    def test_dot_product_with_zero_vector(self):
        result = dot_product(Vector3D.zero(), Vector3D(x=1.0, y=1.0, z=0.0))
        self.assertEqual(result.dot_product, 0.0)
        self.assertEqual(result.angle_radians, 0.0)
        self.assertTrue(result.are_perpendicular)
        self.assertTrue(result.are_parallel)

    def test_cross_product(self):
        result = cross_product(Vector3D(x=2.0, y=0.0, z=0.0), Vector3D(x=0.0, y=3.0, z=0.0))
        self.assertEqual(result.cross_product, Vector3D(x=0.0, y=0.0, z=6.0))
        self.assertAlmostEqual(result.area_parallelogram, 6.0, delta=TOLERANCE)
        self.assertFalse(result.are_parallel)

    def test_vector_magnitude(self):
        result = vector_magnitude(Vector3D(x=0.0, y=3.0, z=4.0))
        self.assertAlmostEqual(result.magnitude, 5.0, delta=TOLERANCE)
        self.assertAlmostEqual(result.unit_vector.z, 0.8, delta=TOLERANCE)
        self.assertFalse(result.is_zero_vector)
        zero_result = vector_magnitude(Vector3D.zero())
        self.assertTrue(zero_result.is_zero_vector)
        self.assertEqual(zero_result.unit_vector, Vector3D.zero())

    def test_vector_angle(self):
        result = vector_angle(Vector3D(x=1.0, y=0.0, z=0.0), Vector3D(x=0.0, y=0.0, z=-7.0))
        self.assertAlmostEqual(result.angle_radians, math.pi / 2.0, delta=TOLERANCE)
        self.assertAlmostEqual(result.angle_degrees, 90.0, delta=TOLERANCE)
        self.assertAlmostEqual(result.cos_angle, 0.0, delta=TOLERANCE)
        with self.assertRaises(InvalidArgumentError):
            vector_angle(Vector3D.zero(), Vector3D(x=1.0, y=0.0, z=0.0))
