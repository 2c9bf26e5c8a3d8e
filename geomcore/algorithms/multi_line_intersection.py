from ..common import \
    DegenerateError, \
    EPSILON, \
    InvalidArgumentError, \
    Line3D, \
    LinearAlgebraUtils, \
    ValidationUtils, \
    Vector3D
from .distance_operations import point_line_distance
from .structures import MultipleLineIntersectionResult
import logging
import numpy


logger = logging.getLogger(__name__)


def multiple_line_intersection(
    lines: list[Line3D],
    epsilon: float = EPSILON
) -> MultipleLineIntersectionResult:
    """
    Least-squares "intersection" of N >= 2 lines: the point x minimizing the sum over lines of
    the squared perpendicular distance |P_i (x - p_i)|^2, where P_i = I - d_i d_i^T / |d_i|^2
    projects onto the plane perpendicular to line i.
    Setting the gradient to zero gives the normal equations (sum P_i) x = sum P_i p_i,
    which are solved with Cramer's rule.
    Raises DegenerateError if the system is singular, e.g. when all lines are parallel.
    """
    if len(lines) < 2:
        raise InvalidArgumentError(
            message="At least 2 lines are required.",
            operand="lines",
            detail={"line_count": len(lines)})
    for line_index, line in enumerate(lines):
        ValidationUtils.require_nonzero_vector(
            line.direction, operand=f"lines[{line_index}].direction", epsilon=epsilon)

    a: numpy.ndarray = numpy.zeros((3, 3), dtype="float64")
    b: numpy.ndarray = numpy.zeros(3, dtype="float64")
    for line in lines:
        direction: numpy.ndarray = line.direction.as_numpy_array()
        projector: numpy.ndarray = \
            numpy.identity(3, dtype="float64") - numpy.outer(direction, direction) / numpy.dot(direction, direction)
        a += projector
        b += numpy.matmul(projector, line.point.as_numpy_array())

    solution: list[float]
    try:
        solution = LinearAlgebraUtils.solve_3x3_cramer(matrix=a, rhs=b, epsilon=epsilon)
    except DegenerateError as e:
        logger.warning(f"Least-squares system for {len(lines)} lines is singular: {e.detail}")
        raise DegenerateError(
            message="System is singular - lines may be parallel or coplanar.",
            operand="lines",
            detail=e.detail) from e
    best_point: Vector3D = Vector3D.from_list(solution)

    individual_distances: list[float] = [
        point_line_distance(point=best_point, line=line, epsilon=epsilon).distance
        for line in lines]
    return MultipleLineIntersectionResult(
        best_intersection_point=best_point,
        total_squared_distance=sum(distance * distance for distance in individual_distances),
        individual_distances=individual_distances,
        lines_processed=len(lines))
