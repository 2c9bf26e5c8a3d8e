from .distance_results import \
    LinePlaneDistanceResult, \
    PlaneProjectionResult, \
    PlaneSide, \
    PointLineDistanceResult, \
    PointPlaneDistanceResult, \
    PointProjectionResult
from .intersection_results import \
    LineIntersectionResult, \
    LineIntersectionType, \
    LinePlaneIntersectionResult, \
    LinePlaneIntersectionType, \
    LineSegmentIntersectionResult, \
    MultipleLineIntersectionResult, \
    PlanePlaneIntersectionResult, \
    PlanePlaneIntersectionType
from .solid_intersection_results import \
    IntersectionCircle, \
    RayIntersectionResult, \
    RaySurfaceHit, \
    SphereSphereIntersectionResult, \
    SphereSphereIntersectionType
from .vector_results import \
    CrossProductResult, \
    DotProductResult, \
    VectorAngleResult, \
    VectorMagnitudeResult, \
    VectorProjectionResult
