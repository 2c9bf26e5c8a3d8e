from ..common import \
    EPSILON, \
    Vector3D
from .structures import \
    CrossProductResult, \
    DotProductResult, \
    VectorAngleResult, \
    VectorMagnitudeResult
import math


def dot_product(
    vector_1: Vector3D,
    vector_2: Vector3D,
    epsilon: float = EPSILON
) -> DotProductResult:
    """
    Dot product along with the angle and parallel/perpendicular flags.
    Angle is reported as 0 when either vector is zero.
    """
    angle_radians: float = 0.0
    if not vector_1.is_zero(epsilon=epsilon) and not vector_2.is_zero(epsilon=epsilon):
        angle_radians = vector_1.angle_with(vector_2, epsilon=epsilon)
    return DotProductResult(
        dot_product=vector_1.dot(vector_2),
        angle_radians=angle_radians,
        angle_degrees=math.degrees(angle_radians),
        are_perpendicular=vector_1.are_perpendicular(vector_2, epsilon=epsilon),
        are_parallel=vector_1.are_parallel(vector_2, epsilon=epsilon))


def cross_product(
    vector_1: Vector3D,
    vector_2: Vector3D,
    epsilon: float = EPSILON
) -> CrossProductResult:
    cross: Vector3D = vector_1.cross(vector_2)
    magnitude: float = cross.magnitude()
    return CrossProductResult(
        cross_product=cross,
        magnitude=magnitude,
        area_parallelogram=magnitude,
        are_parallel=magnitude < epsilon)


def vector_magnitude(
    vector: Vector3D,
    epsilon: float = EPSILON
) -> VectorMagnitudeResult:
    is_zero_vector: bool = vector.is_zero(epsilon=epsilon)
    unit_vector: Vector3D = Vector3D.zero() if is_zero_vector else vector.normalize(epsilon=epsilon)
    return VectorMagnitudeResult(
        magnitude=vector.magnitude(),
        unit_vector=unit_vector,
        is_zero_vector=is_zero_vector)


def vector_angle(
    vector_1: Vector3D,
    vector_2: Vector3D,
    epsilon: float = EPSILON
) -> VectorAngleResult:
    """
    Raises InvalidArgumentError if either vector is zero.
    """
    angle_radians: float = vector_1.angle_with(vector_2, epsilon=epsilon)
    return VectorAngleResult(
        angle_radians=angle_radians,
        angle_degrees=math.degrees(angle_radians),
        cos_angle=vector_1.dot(vector_2) / (vector_1.magnitude() * vector_2.magnitude()))
