from ..common import \
    EPSILON, \
    Sphere, \
    Vector3D
from .structures import \
    IntersectionCircle, \
    SphereSphereIntersectionResult, \
    SphereSphereIntersectionType
import logging
import math


logger = logging.getLogger(__name__)


def sphere_sphere_intersection(
    sphere_1: Sphere,
    sphere_2: Sphere,
    epsilon: float = EPSILON
) -> SphereSphereIntersectionResult:
    """
    Classify how two sphere surfaces meet. Intersecting surfaces meet in a circle,
    tangent surfaces at a single point. Spheres whose centers are closer than epsilon
    are coincident when their radii also agree, otherwise one lies inside the other.
    """
    offset: Vector3D = sphere_2.center - sphere_1.center
    distance: float = offset.magnitude()
    radius_sum: float = sphere_1.radius + sphere_2.radius
    radius_difference: float = abs(sphere_1.radius - sphere_2.radius)

    intersection_type: SphereSphereIntersectionType
    if distance < epsilon:
        if radius_difference < epsilon:
            intersection_type = SphereSphereIntersectionType.COINCIDENT
        else:
            intersection_type = SphereSphereIntersectionType.ONE_INSIDE_OTHER
    elif distance > radius_sum + epsilon:
        intersection_type = SphereSphereIntersectionType.SEPARATE
    elif distance < radius_difference - epsilon:
        intersection_type = SphereSphereIntersectionType.ONE_INSIDE_OTHER
    elif abs(distance - radius_sum) < epsilon:
        intersection_type = SphereSphereIntersectionType.EXTERNAL_TANGENT
    elif abs(distance - radius_difference) < epsilon:
        intersection_type = SphereSphereIntersectionType.INTERNAL_TANGENT
    else:
        intersection_type = SphereSphereIntersectionType.INTERSECTING
    logger.debug(f"Spheres are {intersection_type}, centers {distance} apart.")

    intersection_circle: IntersectionCircle | None = None
    tangent_point: Vector3D | None = None
    if intersection_type == SphereSphereIntersectionType.INTERSECTING:
        unit: Vector3D = offset / distance
        # distance from the first center to the plane of the circle, along unit
        plane_offset: float = (sphere_1.radius ** 2 - sphere_2.radius ** 2 + distance ** 2) / (2.0 * distance)
        intersection_circle = IntersectionCircle(
            center=sphere_1.center + unit * plane_offset,
            radius=math.sqrt(max(0.0, sphere_1.radius ** 2 - plane_offset ** 2)),
            normal=unit)
    elif intersection_type == SphereSphereIntersectionType.EXTERNAL_TANGENT:
        tangent_point = sphere_1.center + (offset / distance) * sphere_1.radius
    elif intersection_type == SphereSphereIntersectionType.INTERNAL_TANGENT:
        # the point lies on the larger sphere, in the direction of the smaller sphere's center
        outward: float = 1.0 if sphere_1.radius >= sphere_2.radius else -1.0
        tangent_point = sphere_1.center + (offset / distance) * (outward * sphere_1.radius)

    return SphereSphereIntersectionResult(
        intersection_type=intersection_type,
        intersects=intersection_type not in (
            SphereSphereIntersectionType.SEPARATE,
            SphereSphereIntersectionType.ONE_INSIDE_OTHER),
        distance_between_centers=distance,
        intersection_circle=intersection_circle,
        tangent_point=tangent_point)
