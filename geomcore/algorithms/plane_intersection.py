from ..common import \
    DegenerateError, \
    EPSILON, \
    Line3D, \
    LinearAlgebraUtils, \
    Plane3D, \
    ValidationUtils, \
    Vector3D
from .structures import \
    LinePlaneIntersectionResult, \
    LinePlaneIntersectionType, \
    PlanePlaneIntersectionResult, \
    PlanePlaneIntersectionType
import logging
import math


logger = logging.getLogger(__name__)


def line_plane_intersection(
    line: Line3D,
    plane: Plane3D,
    epsilon: float = EPSILON
) -> LinePlaneIntersectionResult:
    ValidationUtils.require_nonzero_vector(line.direction, operand="line.direction", epsilon=epsilon)
    ValidationUtils.require_nonzero_vector(plane.normal, operand="plane.normal", epsilon=epsilon)

    normal_unit: Vector3D = plane.normal.normalize(epsilon=epsilon)
    direction_dot_normal: float = line.direction.dot(normal_unit)

    if abs(direction_dot_normal) < epsilon:
        distance_to_plane: float = plane.distance_to_point(line.point)
        line_is_in_plane: bool = distance_to_plane < epsilon
        intersection_type: LinePlaneIntersectionType = LinePlaneIntersectionType.PARALLEL
        if line_is_in_plane:
            intersection_type = LinePlaneIntersectionType.IN_PLANE
        logger.debug(f"Line is parallel to plane (in plane: {line_is_in_plane}).")
        return LinePlaneIntersectionResult(
            intersection_type=intersection_type,
            intersects=line_is_in_plane,
            intersection_point=line.point if line_is_in_plane else None,
            parameter=0.0 if line_is_in_plane else None,
            line_is_parallel=True,
            line_is_in_plane=line_is_in_plane,
            distance_to_plane=distance_to_plane)

    parameter: float = (plane.point - line.point).dot(normal_unit) / direction_dot_normal
    return LinePlaneIntersectionResult(
        intersection_type=LinePlaneIntersectionType.INTERSECTING,
        intersects=True,
        intersection_point=line.point_at_parameter(parameter),
        parameter=parameter,
        line_is_parallel=False,
        line_is_in_plane=False,
        distance_to_plane=0.0)


def _point_on_both_planes(
    normal_1: Vector3D,
    offset_1: float,
    normal_2: Vector3D,
    offset_2: float,
    line_direction: Vector3D,
    epsilon: float
) -> Vector3D:
    """
    Solve n1.p = offset_1, n2.p = offset_2 with the coordinate along the dominant axis
    of line_direction set to zero. The remaining 2x2 determinant equals that dominant
    component of n1 x n2, so it is as far from zero as possible.
    """
    abs_x: float = abs(line_direction.x)
    abs_y: float = abs(line_direction.y)
    abs_z: float = abs(line_direction.z)
    rhs: list[float] = [offset_1, offset_2]
    if abs_z >= abs_x and abs_z >= abs_y:
        x, y = LinearAlgebraUtils.solve_2x2(
            matrix=[[normal_1.x, normal_1.y], [normal_2.x, normal_2.y]], rhs=rhs, epsilon=epsilon)
        return Vector3D(x=x, y=y, z=0.0)
    elif abs_y >= abs_x:
        x, z = LinearAlgebraUtils.solve_2x2(
            matrix=[[normal_1.x, normal_1.z], [normal_2.x, normal_2.z]], rhs=rhs, epsilon=epsilon)
        return Vector3D(x=x, y=0.0, z=z)
    else:
        y, z = LinearAlgebraUtils.solve_2x2(
            matrix=[[normal_1.y, normal_1.z], [normal_2.y, normal_2.z]], rhs=rhs, epsilon=epsilon)
        return Vector3D(x=0.0, y=y, z=z)


def plane_plane_intersection(
    plane_1: Plane3D,
    plane_2: Plane3D,
    epsilon: float = EPSILON
) -> PlanePlaneIntersectionResult:
    """
    Raises DegenerateError if a point on the intersection line cannot be solved for,
    which can only come from floating point trouble with nearly parallel planes.
    """
    ValidationUtils.require_nonzero_vector(plane_1.normal, operand="plane1.normal", epsilon=epsilon)
    ValidationUtils.require_nonzero_vector(plane_2.normal, operand="plane2.normal", epsilon=epsilon)

    angle_radians: float = plane_1.angle_with(plane_2, epsilon=epsilon)
    angle_degrees: float = math.degrees(angle_radians)

    if plane_1.is_parallel_to(plane_2, epsilon=epsilon):
        are_coincident: bool = plane_1.distance_to_point(plane_2.point) < epsilon
        intersection_type: PlanePlaneIntersectionType = PlanePlaneIntersectionType.PARALLEL
        if are_coincident:
            intersection_type = PlanePlaneIntersectionType.COINCIDENT
        logger.debug(f"Planes are parallel (coincident: {are_coincident}).")
        return PlanePlaneIntersectionResult(
            intersection_type=intersection_type,
            intersects=are_coincident,
            intersection_line=None,
            are_parallel=True,
            are_coincident=are_coincident,
            angle_radians=angle_radians,
            angle_degrees=angle_degrees)

    direction: Vector3D = plane_1.normal.cross(plane_2.normal)
    try:
        point: Vector3D = _point_on_both_planes(
            normal_1=plane_1.normal,
            offset_1=plane_1.normal.dot(plane_1.point),
            normal_2=plane_2.normal,
            offset_2=plane_2.normal.dot(plane_2.point),
            line_direction=direction,
            epsilon=epsilon)
    except DegenerateError as e:
        logger.warning(f"Plane intersection subsystem is singular: {e.detail}")
        raise DegenerateError(
            message="Cannot find a point on the plane intersection line.",
            operand="plane1, plane2",
            detail=e.detail) from e

    return PlanePlaneIntersectionResult(
        intersection_type=PlanePlaneIntersectionType.INTERSECTING,
        intersects=True,
        intersection_line=Line3D(point=point, direction=direction),
        are_parallel=False,
        are_coincident=False,
        angle_radians=angle_radians,
        angle_degrees=angle_degrees)
