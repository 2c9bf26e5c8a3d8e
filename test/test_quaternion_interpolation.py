from geomcore.algorithms import \
    quaternion_lerp, \
    quaternion_slerp
from geomcore.common import \
    InvalidArgumentError, \
    Quaternion, \
    Vector3D
import math
import numpy
from scipy.spatial.transform import Rotation, Slerp
from typing import Final
from unittest import TestCase


TOLERANCE: Final[float] = 1e-9
Z_AXIS: Final[Vector3D] = Vector3D(x=0.0, y=0.0, z=1.0)


class TestQuaternion(TestCase):

    def test_rotation_matrix_matches_scipy(self):
        quaternions = [
            Quaternion.identity(),
            Quaternion.from_axis_angle(Vector3D(x=1.0, y=2.0, z=3.0), 0.3),
            Quaternion.from_axis_angle(Vector3D(x=-1.0, y=0.5, z=2.0), 2.1),
            Quaternion.from_axis_angle(Vector3D(x=0.0, y=1.0, z=0.0), math.pi)]
        for quaternion in quaternions:
            expected = Rotation.from_quat(quaternion.as_list()).as_matrix()
            actual = numpy.asarray(quaternion.to_rotation_matrix())
            self.assertTrue(numpy.allclose(actual, expected, atol=TOLERANCE))

    def test_rotate_vector(self):
        quaternion = Quaternion.from_axis_angle(Z_AXIS, math.pi / 2.0)
        rotated = quaternion.rotate_vector(Vector3D(x=1.0, y=0.0, z=0.0))
        self.assertAlmostEqual(rotated.x, 0.0, delta=TOLERANCE)
        self.assertAlmostEqual(rotated.y, 1.0, delta=TOLERANCE)
        self.assertAlmostEqual(rotated.z, 0.0, delta=TOLERANCE)

    def test_multiply_composes_rotations(self):
        eighth_turn = Quaternion.from_axis_angle(Z_AXIS, math.pi / 4.0)
        quarter_turn = Quaternion.from_axis_angle(Z_AXIS, math.pi / 2.0)
        composed = eighth_turn.multiply(eighth_turn)
        for actual, expected in zip(composed.as_list(), quarter_turn.as_list()):
            self.assertAlmostEqual(actual, expected, delta=TOLERANCE)

    def test_multiply_matches_scipy(self):
        q1 = Quaternion.from_axis_angle(Vector3D(x=1.0, y=0.0, z=1.0), 0.7)
        q2 = Quaternion.from_axis_angle(Vector3D(x=0.0, y=-1.0, z=0.2), 1.3)
        expected = (Rotation.from_quat(q1.as_list()) * Rotation.from_quat(q2.as_list())).as_matrix()
        actual = numpy.asarray(q1.multiply(q2).to_rotation_matrix())
        self.assertTrue(numpy.allclose(actual, expected, atol=TOLERANCE))

    def test_normalize(self):
        normalized = Quaternion(x=1.0, y=2.0, z=3.0, w=4.0).normalize()
        self.assertAlmostEqual(normalized.magnitude(), 1.0, delta=TOLERANCE)
        with self.assertRaises(InvalidArgumentError):
            Quaternion(x=0.0, y=0.0, z=0.0, w=0.0).normalize()

    def test_zero_axis_rejected(self):
        with self.assertRaises(InvalidArgumentError) as context:
            Quaternion.from_axis_angle(Vector3D.zero(), 1.0)
        self.assertEqual(context.exception.operand, "axis")

    def test_non_finite_component_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            Quaternion(x=0.0, y=0.0, z=0.0, w=float("nan"))


class TestQuaternionSlerp(TestCase):

    def assertSameRotation(
        self,
        actual: Quaternion,
        expected: Quaternion,
        tolerance: float = TOLERANCE
    ) -> None:
        # q and -q are the same rotation
        sign: float = 1.0 if actual.dot(expected) >= 0.0 else -1.0
        for actual_component, expected_component in zip(actual.as_list(), expected.as_list()):
            self.assertAlmostEqual(actual_component, sign * expected_component, delta=tolerance)

    def test_slerp_between_equal_quaternions(self):
        quaternion = Quaternion(x=1.0, y=2.0, z=3.0, w=4.0)
        expected = quaternion.normalize()
        for t in [0.0, 0.25, 0.5, 1.0]:
            result = quaternion_slerp(quaternion, quaternion, t)
            self.assertSameRotation(result, expected)

    def test_slerp_endpoints(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Z_AXIS, math.pi / 2.0)
        self.assertSameRotation(quaternion_slerp(start, end, 0.0), start)
        self.assertSameRotation(quaternion_slerp(start, end, 1.0), end)

    def test_slerp_halfway(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Z_AXIS, math.pi / 2.0)
        result = quaternion_slerp(start, end, 0.5)
        self.assertSameRotation(result, Quaternion.from_axis_angle(Z_AXIS, math.pi / 4.0))

    def test_slerp_result_is_unit(self):
        start = Quaternion(x=0.0, y=0.0, z=0.0, w=3.0)
        end = Quaternion(x=1.0, y=-1.0, z=0.5, w=0.2)
        for t in numpy.linspace(0.0, 1.0, 11):
            result = quaternion_slerp(start, end, float(t))
            self.assertAlmostEqual(result.magnitude(), 1.0, delta=TOLERANCE)

    def test_slerp_takes_shorter_arc(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Z_AXIS, math.pi / 2.0).negated()
        result = quaternion_slerp(start, end, 0.5)
        expected = Quaternion.from_axis_angle(Z_AXIS, math.pi / 4.0)
        for actual_component, expected_component in zip(result.as_list(), expected.as_list()):
            self.assertAlmostEqual(actual_component, expected_component, delta=TOLERANCE)

    def test_slerp_matches_scipy(self):
        start = Quaternion.from_axis_angle(Vector3D(x=1.0, y=2.0, z=3.0), 0.3)
        end = Quaternion.from_axis_angle(Vector3D(x=-1.0, y=0.5, z=2.0), 2.1)
        scipy_slerp = Slerp([0.0, 1.0], Rotation.from_quat([start.as_list(), end.as_list()]))
        for t in [0.1, 0.33, 0.5, 0.9]:
            expected = scipy_slerp([t]).as_matrix()[0]
            actual = numpy.asarray(quaternion_slerp(start, end, t).to_rotation_matrix())
            self.assertTrue(numpy.allclose(actual, expected, atol=1e-8))

    def test_nearly_identical_quaternions_use_linear_interpolation(self):
        axis = Vector3D(x=0.0, y=1.0, z=1.0)
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(axis, 1e-3)
        result = quaternion_slerp(start, end, 0.5)
        self.assertAlmostEqual(result.magnitude(), 1.0, delta=TOLERANCE)
        self.assertSameRotation(result, Quaternion.from_axis_angle(axis, 0.5e-3), tolerance=1e-6)
        self.assertSameRotation(result, quaternion_lerp(start, end, 0.5))

    def test_linear_threshold_is_configurable(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Z_AXIS, 0.5)
        slerp_result = quaternion_slerp(start, end, 0.5)
        lerp_result = quaternion_slerp(start, end, 0.5, linear_threshold=0.9)
        self.assertSameRotation(lerp_result, quaternion_lerp(start, end, 0.5))
        self.assertSameRotation(slerp_result, Quaternion.from_axis_angle(Z_AXIS, 0.25))

    def test_parameter_out_of_range(self):
        start = Quaternion.identity()
        end = Quaternion.from_axis_angle(Z_AXIS, 1.0)
        for t in [-0.1, 1.5, float("nan")]:
            with self.assertRaises(InvalidArgumentError) as context:
                quaternion_slerp(start, end, t)
            self.assertEqual(context.exception.operand, "t")

    def test_zero_quaternion_rejected(self):
        with self.assertRaises(InvalidArgumentError):
            quaternion_slerp(Quaternion(x=0.0, y=0.0, z=0.0, w=0.0), Quaternion.identity(), 0.5)
