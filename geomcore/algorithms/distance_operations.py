from ..common import \
    EPSILON, \
    Line3D, \
    Plane3D, \
    ValidationUtils, \
    Vector3D
from .plane_intersection import line_plane_intersection
from .structures import \
    LinePlaneDistanceResult, \
    LinePlaneIntersectionResult, \
    PlaneProjectionResult, \
    PlaneSide, \
    PointLineDistanceResult, \
    PointPlaneDistanceResult, \
    PointProjectionResult, \
    VectorProjectionResult
import math


def point_line_distance(
    point: Vector3D,
    line: Line3D,
    epsilon: float = EPSILON
) -> PointLineDistanceResult:
    ValidationUtils.require_nonzero_vector(line.direction, operand="line.direction", epsilon=epsilon)

    # Let closest be the closest point on the line to the query point.
    # (point - closest) is perpendicular to the direction, so with closest = line.point + t * direction,
    # t = (point - line.point) . direction / |direction|^2
    parameter: float = (point - line.point).dot(line.direction) / line.direction.magnitude_squared()
    closest_point: Vector3D = line.point_at_parameter(parameter)
    perpendicular_vector: Vector3D = point - closest_point
    distance: float = perpendicular_vector.magnitude()
    return PointLineDistanceResult(
        distance=distance,
        closest_point_on_line=closest_point,
        parameter_on_line=parameter,
        perpendicular_vector=perpendicular_vector,
        point_is_on_line=distance < epsilon)


def point_plane_distance(
    point: Vector3D,
    plane: Plane3D,
    epsilon: float = EPSILON
) -> PointPlaneDistanceResult:
    ValidationUtils.require_nonzero_vector(plane.normal, operand="plane.normal", epsilon=epsilon)

    signed_distance: float = plane.signed_distance_to_point(point)
    distance: float = abs(signed_distance)
    point_is_on_plane: bool = distance < epsilon
    side_of_plane: PlaneSide
    if point_is_on_plane:
        side_of_plane = PlaneSide.ON_PLANE
    elif signed_distance > 0.0:
        side_of_plane = PlaneSide.POSITIVE
    else:
        side_of_plane = PlaneSide.NEGATIVE
    return PointPlaneDistanceResult(
        distance=distance,
        signed_distance=signed_distance,
        closest_point_on_plane=plane.project_point(point),
        point_is_on_plane=point_is_on_plane,
        side_of_plane=side_of_plane)


def line_plane_distance(
    line: Line3D,
    plane: Plane3D,
    epsilon: float = EPSILON
) -> LinePlaneDistanceResult:
    """
    Zero unless the line is parallel to the plane,
    in which case it is the distance from any point of the line to the plane.
    """
    intersection: LinePlaneIntersectionResult = line_plane_intersection(line=line, plane=plane, epsilon=epsilon)
    if intersection.line_is_parallel:
        return LinePlaneDistanceResult(
            distance=intersection.distance_to_plane,
            line_is_parallel=True,
            line_intersects_plane=intersection.line_is_in_plane,
            intersection_point=intersection.intersection_point,
            closest_point_on_line=line.point,
            closest_point_on_plane=plane.project_point(line.point))
    return LinePlaneDistanceResult(
        distance=0.0,
        line_is_parallel=False,
        line_intersects_plane=True,
        intersection_point=intersection.intersection_point,
        closest_point_on_line=intersection.intersection_point,
        closest_point_on_plane=intersection.intersection_point)


def vector_projection(
    vector: Vector3D,
    onto_vector: Vector3D,
    epsilon: float = EPSILON
) -> VectorProjectionResult:
    """
    Decompose vector into its component along onto_vector (projection)
    and the perpendicular remainder (rejection).
    """
    ValidationUtils.require_nonzero_vector(onto_vector, operand="onto_vector", epsilon=epsilon)

    dot: float = vector.dot(onto_vector)
    projection: Vector3D = onto_vector * (dot / onto_vector.magnitude_squared())
    angle_radians: float = 0.0
    if not vector.is_zero(epsilon=epsilon):
        angle_radians = vector.angle_with(onto_vector, epsilon=epsilon)
    return VectorProjectionResult(
        scalar_projection=dot / onto_vector.magnitude(),
        vector_projection=projection,
        rejection_vector=vector - projection,
        angle_radians=angle_radians,
        angle_degrees=math.degrees(angle_radians),
        vectors_are_parallel=vector.are_parallel(onto_vector, epsilon=epsilon),
        vectors_are_perpendicular=vector.are_perpendicular(onto_vector, epsilon=epsilon))


def project_point_onto_line(
    point: Vector3D,
    line: Line3D,
    epsilon: float = EPSILON
) -> PointProjectionResult:
    distance_result: PointLineDistanceResult = point_line_distance(point=point, line=line, epsilon=epsilon)
    return PointProjectionResult(
        projected_point=distance_result.closest_point_on_line,
        parameter_on_line=distance_result.parameter_on_line,
        distance_to_projection=distance_result.distance,
        is_on_line=distance_result.point_is_on_line)


def project_point_onto_plane(
    point: Vector3D,
    plane: Plane3D,
    epsilon: float = EPSILON
) -> PlaneProjectionResult:
    ValidationUtils.require_nonzero_vector(plane.normal, operand="plane.normal", epsilon=epsilon)

    projected_point: Vector3D = plane.project_point(point)
    distance: float = point.distance_to(projected_point)
    is_on_plane: bool = distance < epsilon
    return PlaneProjectionResult(
        projected_point=projected_point,
        distance_to_projection=distance,
        is_on_plane=is_on_plane,
        projection_direction=Vector3D.zero() if is_on_plane else projected_point - point)
