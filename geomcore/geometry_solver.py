from .algorithms import \
    CrossProductResult, \
    DotProductResult, \
    LineIntersectionResult, \
    LinePlaneDistanceResult, \
    LinePlaneIntersectionResult, \
    LineSegmentIntersectionResult, \
    MultipleLineIntersectionResult, \
    PlanePlaneIntersectionResult, \
    PlaneProjectionResult, \
    PointLineDistanceResult, \
    PointPlaneDistanceResult, \
    PointProjectionResult, \
    RayIntersectionResult, \
    SphereSphereIntersectionResult, \
    VectorAngleResult, \
    VectorMagnitudeResult, \
    VectorProjectionResult, \
    cross_product, \
    cylinder_ray_intersection, \
    dot_product, \
    line_line_intersection, \
    line_plane_distance, \
    line_plane_intersection, \
    line_segment_intersection, \
    multiple_line_intersection, \
    plane_plane_intersection, \
    point_line_distance, \
    point_plane_distance, \
    project_point_onto_line, \
    project_point_onto_plane, \
    quaternion_lerp, \
    quaternion_slerp, \
    ray_aabb_intersection, \
    sphere_ray_intersection, \
    sphere_sphere_intersection, \
    vector_angle, \
    vector_magnitude, \
    vector_projection
from .common import \
    AxisAlignedBox, \
    Cylinder, \
    GeometryParameters, \
    Line3D, \
    Plane3D, \
    Quaternion, \
    Ray3D, \
    Sphere, \
    Vector3D
import logging


logger = logging.getLogger(__name__)


class GeometrySolver:
    """
    Holds a GeometryParameters and runs the geometry operations with its tolerances,
    for callers that configure the library once (e.g. from a file) rather than per call.
    """

    _parameters: GeometryParameters

    def __init__(
        self,
        parameters: GeometryParameters | None = None
    ):
        self._parameters = GeometryParameters() if parameters is None else parameters

    def get_parameters(self) -> GeometryParameters:
        return self._parameters

    def set_parameters(
        self,
        parameters: GeometryParameters
    ) -> None:
        logger.debug(f"Geometry parameters set to {parameters.model_dump()}.")
        self._parameters = parameters

    def dot_product(self, vector_1: Vector3D, vector_2: Vector3D) -> DotProductResult:
        return dot_product(vector_1, vector_2, epsilon=self._parameters.epsilon)

    def cross_product(self, vector_1: Vector3D, vector_2: Vector3D) -> CrossProductResult:
        return cross_product(vector_1, vector_2, epsilon=self._parameters.epsilon)

    def vector_magnitude(self, vector: Vector3D) -> VectorMagnitudeResult:
        return vector_magnitude(vector, epsilon=self._parameters.epsilon)

    def vector_angle(self, vector_1: Vector3D, vector_2: Vector3D) -> VectorAngleResult:
        return vector_angle(vector_1, vector_2, epsilon=self._parameters.epsilon)

    def vector_projection(self, vector: Vector3D, onto_vector: Vector3D) -> VectorProjectionResult:
        return vector_projection(vector, onto_vector, epsilon=self._parameters.epsilon)

    def line_line_intersection(self, line_1: Line3D, line_2: Line3D) -> LineIntersectionResult:
        return line_line_intersection(line_1, line_2, epsilon=self._parameters.epsilon)

    def line_segment_intersection(
        self,
        segment_1_start: Vector3D,
        segment_1_end: Vector3D,
        segment_2_start: Vector3D,
        segment_2_end: Vector3D
    ) -> LineSegmentIntersectionResult:
        return line_segment_intersection(
            segment_1_start, segment_1_end, segment_2_start, segment_2_end,
            epsilon=self._parameters.epsilon)

    def line_plane_intersection(self, line: Line3D, plane: Plane3D) -> LinePlaneIntersectionResult:
        return line_plane_intersection(line, plane, epsilon=self._parameters.epsilon)

    def plane_plane_intersection(self, plane_1: Plane3D, plane_2: Plane3D) -> PlanePlaneIntersectionResult:
        return plane_plane_intersection(plane_1, plane_2, epsilon=self._parameters.epsilon)

    def multiple_line_intersection(self, lines: list[Line3D]) -> MultipleLineIntersectionResult:
        return multiple_line_intersection(lines, epsilon=self._parameters.epsilon)

    def point_line_distance(self, point: Vector3D, line: Line3D) -> PointLineDistanceResult:
        return point_line_distance(point, line, epsilon=self._parameters.epsilon)

    def point_plane_distance(self, point: Vector3D, plane: Plane3D) -> PointPlaneDistanceResult:
        return point_plane_distance(point, plane, epsilon=self._parameters.epsilon)

    def line_plane_distance(self, line: Line3D, plane: Plane3D) -> LinePlaneDistanceResult:
        return line_plane_distance(line, plane, epsilon=self._parameters.epsilon)

    def project_point_onto_line(self, point: Vector3D, line: Line3D) -> PointProjectionResult:
        return project_point_onto_line(point, line, epsilon=self._parameters.epsilon)

    def project_point_onto_plane(self, point: Vector3D, plane: Plane3D) -> PlaneProjectionResult:
        return project_point_onto_plane(point, plane, epsilon=self._parameters.epsilon)

    def quaternion_lerp(self, quaternion_1: Quaternion, quaternion_2: Quaternion, t: float) -> Quaternion:
        return quaternion_lerp(quaternion_1, quaternion_2, t, epsilon=self._parameters.epsilon)

    def quaternion_slerp(self, quaternion_1: Quaternion, quaternion_2: Quaternion, t: float) -> Quaternion:
        return quaternion_slerp(
            quaternion_1, quaternion_2, t,
            epsilon=self._parameters.epsilon,
            linear_threshold=self._parameters.slerp_linear_threshold)

    def sphere_ray_intersection(self, sphere: Sphere, ray: Ray3D) -> RayIntersectionResult:
        return sphere_ray_intersection(sphere, ray, epsilon=self._parameters.epsilon)

    def ray_aabb_intersection(self, ray: Ray3D, box: AxisAlignedBox) -> RayIntersectionResult:
        return ray_aabb_intersection(ray, box, epsilon=self._parameters.epsilon)

    def cylinder_ray_intersection(self, cylinder: Cylinder, ray: Ray3D) -> RayIntersectionResult:
        return cylinder_ray_intersection(cylinder, ray, epsilon=self._parameters.epsilon)

    def sphere_sphere_intersection(self, sphere_1: Sphere, sphere_2: Sphere) -> SphereSphereIntersectionResult:
        return sphere_sphere_intersection(sphere_1, sphere_2, epsilon=self._parameters.epsilon)
