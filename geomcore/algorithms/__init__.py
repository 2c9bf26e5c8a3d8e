from .distance_operations import \
    line_plane_distance, \
    point_line_distance, \
    point_plane_distance, \
    project_point_onto_line, \
    project_point_onto_plane, \
    vector_projection
from .line_intersection import \
    line_line_intersection, \
    line_segment_intersection
from .multi_line_intersection import multiple_line_intersection
from .plane_intersection import \
    line_plane_intersection, \
    plane_plane_intersection
from .quaternion_interpolation import \
    quaternion_lerp, \
    quaternion_slerp
from .ray_intersection import \
    cylinder_ray_intersection, \
    ray_aabb_intersection, \
    sphere_ray_intersection
from .sphere_intersection import sphere_sphere_intersection
from .structures import \
    CrossProductResult, \
    DotProductResult, \
    IntersectionCircle, \
    LineIntersectionResult, \
    LineIntersectionType, \
    LinePlaneDistanceResult, \
    LinePlaneIntersectionResult, \
    LinePlaneIntersectionType, \
    LineSegmentIntersectionResult, \
    MultipleLineIntersectionResult, \
    PlanePlaneIntersectionResult, \
    PlanePlaneIntersectionType, \
    PlaneProjectionResult, \
    PlaneSide, \
    PointLineDistanceResult, \
    PointPlaneDistanceResult, \
    PointProjectionResult, \
    RayIntersectionResult, \
    RaySurfaceHit, \
    SphereSphereIntersectionResult, \
    SphereSphereIntersectionType, \
    VectorAngleResult, \
    VectorMagnitudeResult, \
    VectorProjectionResult
from .vector_operations import \
    cross_product, \
    dot_product, \
    vector_angle, \
    vector_magnitude
