from ..common import \
    EPSILON, \
    Line3D, \
    ValidationUtils, \
    Vector3D
from .structures import \
    LineIntersectionResult, \
    LineIntersectionType, \
    LineSegmentIntersectionResult
import logging


logger = logging.getLogger(__name__)


class _ClosestPoints:
    parameter_1: float
    parameter_2: float
    closest_point_1: Vector3D
    closest_point_2: Vector3D

    def __init__(
        self,
        line_1: Line3D,
        line_2: Line3D,
        parameter_1: float,
        parameter_2: float
    ):
        self.parameter_1 = parameter_1
        self.parameter_2 = parameter_2
        self.closest_point_1 = line_1.point_at_parameter(parameter_1)
        self.closest_point_2 = line_2.point_at_parameter(parameter_2)

    def distance(self) -> float:
        return self.closest_point_1.distance_to(self.closest_point_2)


def _parameter_on_line(
    line: Line3D,
    point: Vector3D
) -> float:
    """
    Parameter on line of the projection of point onto line.
    """
    return line.direction.dot(point - line.point) / line.direction.magnitude_squared()


def _closest_points_between_lines(
    line_1: Line3D,
    line_2: Line3D
) -> _ClosestPoints:
    """
    Lines must not be parallel (callers test Line3D.is_parallel_to first).
    """
    # Minimize |(p1 + s1*u1) - (p2 + s2*u2)|^2 over unit directions u1, u2, so the system
    # does not depend on the lengths of the directions. The determinant 1 - (u1.u2)^2 is
    # computed as |u1 x u2|^2 to avoid cancellation for nearly parallel lines.
    length_1: float = line_1.direction.magnitude()
    length_2: float = line_2.direction.magnitude()
    unit_1: Vector3D = line_1.direction / length_1
    unit_2: Vector3D = line_2.direction / length_2
    w: Vector3D = line_1.point - line_2.point
    b: float = unit_1.dot(unit_2)
    d: float = unit_1.dot(w)
    e: float = unit_2.dot(w)
    denominator: float = unit_1.cross(unit_2).magnitude_squared()
    if denominator == 0.0:
        # only from underflow with extreme direction lengths
        return _ClosestPoints(
            line_1=line_1,
            line_2=line_2,
            parameter_1=_parameter_on_line(line=line_1, point=line_2.point),
            parameter_2=0.0)
    return _ClosestPoints(
        line_1=line_1,
        line_2=line_2,
        parameter_1=((b * e - d) / denominator) / length_1,
        parameter_2=((e - b * d) / denominator) / length_2)


def _closest_points_between_parallel_segments(
    line_1: Line3D,
    line_2: Line3D
) -> tuple[_ClosestPoints, bool]:
    """
    For parallel segments parameterized over [0, 1] (see Line3D.from_points).
    Returns the closest points and whether segment 2 projected onto segment 1 overlaps it.
    Where they overlap, the closest points are taken at the start of the overlap on segment 1,
    otherwise at the facing endpoints.
    """
    start_2: float = _parameter_on_line(line=line_1, point=line_2.point)
    end_2: float = _parameter_on_line(line=line_1, point=line_2.point_at_parameter(1.0))
    overlap_low: float = max(0.0, min(start_2, end_2))
    overlap_high: float = min(1.0, max(start_2, end_2))
    overlaps: bool = overlap_low <= overlap_high
    parameter_1: float
    if overlaps:
        parameter_1 = overlap_low
    elif overlap_high < 0.0:
        parameter_1 = 0.0
    else:
        parameter_1 = 1.0
    parameter_2: float = _parameter_on_line(line=line_2, point=line_1.point_at_parameter(parameter_1))
    closest_points: _ClosestPoints = _ClosestPoints(
        line_1=line_1,
        line_2=line_2,
        parameter_1=parameter_1,
        parameter_2=max(0.0, min(1.0, parameter_2)))
    return closest_points, overlaps


def line_line_intersection(
    line_1: Line3D,
    line_2: Line3D,
    epsilon: float = EPSILON
) -> LineIntersectionResult:
    """
    Classify two lines as coincident, parallel, intersecting, or skew,
    and report their closest points and the minimum distance between them.
    """
    ValidationUtils.require_nonzero_vector(line_1.direction, operand="line1.direction", epsilon=epsilon)
    ValidationUtils.require_nonzero_vector(line_2.direction, operand="line2.direction", epsilon=epsilon)

    if line_1.is_parallel_to(line_2, epsilon=epsilon):
        point_difference: Vector3D = line_2.point - line_1.point
        if point_difference.is_zero(epsilon=epsilon) or \
                point_difference.are_parallel(line_1.direction, epsilon=epsilon):
            logger.debug("Lines are coincident.")
            return LineIntersectionResult(
                intersection_type=LineIntersectionType.COINCIDENT,
                intersects=True,
                intersection_point=line_1.point,
                closest_point_line1=line_1.point,
                closest_point_line2=line_2.point,
                minimum_distance=0.0,
                parameter_line1=0.0,
                parameter_line2=0.0,
                are_parallel=True,
                are_skew=False,
                are_coincident=True)

        parameter_1: float = _parameter_on_line(line=line_1, point=line_2.point)
        closest_point_1: Vector3D = line_1.point_at_parameter(parameter_1)
        logger.debug("Lines are parallel.")
        return LineIntersectionResult(
            intersection_type=LineIntersectionType.PARALLEL,
            intersects=False,
            intersection_point=None,
            closest_point_line1=closest_point_1,
            closest_point_line2=line_2.point,
            minimum_distance=closest_point_1.distance_to(line_2.point),
            parameter_line1=parameter_1,
            parameter_line2=0.0,
            are_parallel=True,
            are_skew=False,
            are_coincident=False)

    closest_points: _ClosestPoints = _closest_points_between_lines(line_1=line_1, line_2=line_2)
    distance: float = closest_points.distance()
    intersects: bool = distance < epsilon
    logger.debug(f"Lines are {'intersecting' if intersects else 'skew'}, minimum distance {distance}.")
    return LineIntersectionResult(
        intersection_type=LineIntersectionType.INTERSECTING if intersects else LineIntersectionType.SKEW,
        intersects=intersects,
        intersection_point=closest_points.closest_point_1 if intersects else None,
        closest_point_line1=closest_points.closest_point_1,
        closest_point_line2=closest_points.closest_point_2,
        minimum_distance=distance,
        parameter_line1=closest_points.parameter_1,
        parameter_line2=closest_points.parameter_2,
        are_parallel=False,
        are_skew=not intersects,
        are_coincident=False)


def line_segment_intersection(
    segment_1_start: Vector3D,
    segment_1_end: Vector3D,
    segment_2_start: Vector3D,
    segment_2_end: Vector3D,
    epsilon: float = EPSILON
) -> LineSegmentIntersectionResult:
    """
    The segments intersect when their supporting lines meet (unclamped distance below epsilon)
    at parameters that both lie within [0, 1]. Reported closest points and distance are
    those after clamping the parameters to the segments.
    Parallel segments intersect when they are collinear and overlap, at the first point
    of the overlap along segment 1.
    """
    ValidationUtils.require_nonzero_vector(segment_1_end - segment_1_start, operand="segment1", epsilon=epsilon)
    ValidationUtils.require_nonzero_vector(segment_2_end - segment_2_start, operand="segment2", epsilon=epsilon)
    line_1: Line3D = Line3D.from_points(start=segment_1_start, end=segment_1_end)
    line_2: Line3D = Line3D.from_points(start=segment_2_start, end=segment_2_end)

    if line_1.is_parallel_to(line_2, epsilon=epsilon):
        parallel_points: _ClosestPoints
        overlaps: bool
        parallel_points, overlaps = _closest_points_between_parallel_segments(line_1=line_1, line_2=line_2)
        parallel_distance: float = parallel_points.distance()
        parallel_intersects: bool = overlaps and parallel_distance < epsilon
        logger.debug(f"Segments are parallel (overlapping: {overlaps}), minimum distance {parallel_distance}.")
        return LineSegmentIntersectionResult(
            intersects=parallel_intersects,
            intersection_point=parallel_points.closest_point_1 if parallel_intersects else None,
            closest_point_seg1=parallel_points.closest_point_1,
            closest_point_seg2=parallel_points.closest_point_2,
            minimum_distance=parallel_distance,
            intersection_on_both_segments=overlaps)

    closest_points: _ClosestPoints = _closest_points_between_lines(line_1=line_1, line_2=line_2)
    parameter_1: float = closest_points.parameter_1
    parameter_2: float = closest_points.parameter_2
    intersection_on_both_segments: bool = 0.0 <= parameter_1 <= 1.0 and 0.0 <= parameter_2 <= 1.0

    clamped_points: _ClosestPoints = _ClosestPoints(
        line_1=line_1,
        line_2=line_2,
        parameter_1=max(0.0, min(1.0, parameter_1)),
        parameter_2=max(0.0, min(1.0, parameter_2)))

    intersects: bool = intersection_on_both_segments and closest_points.distance() < epsilon
    return LineSegmentIntersectionResult(
        intersects=intersects,
        intersection_point=clamped_points.closest_point_1 if intersects else None,
        closest_point_seg1=clamped_points.closest_point_1,
        closest_point_seg2=clamped_points.closest_point_2,
        minimum_distance=clamped_points.distance(),
        intersection_on_both_segments=intersection_on_both_segments)
