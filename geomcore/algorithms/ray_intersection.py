from ..common import \
    AxisAlignedBox, \
    Cylinder, \
    EPSILON, \
    Ray3D, \
    Sphere, \
    Vector3D
from .structures import \
    RayIntersectionResult, \
    RaySurfaceHit
import logging
import math


logger = logging.getLogger(__name__)


def _ray_result(hits: list[RaySurfaceHit]) -> RayIntersectionResult:
    hits = sorted(hits, key=lambda hit: hit.distance)
    return RayIntersectionResult(
        intersects=len(hits) > 0,
        intersection_points=hits,
        closest_distance=hits[0].distance if len(hits) > 0 else None)


def _axis_vector(
    axis_index: int,
    value: float
) -> Vector3D:
    components: list[float] = [0.0, 0.0, 0.0]
    components[axis_index] = value
    return Vector3D.from_list(components)


def sphere_ray_intersection(
    sphere: Sphere,
    ray: Ray3D,
    epsilon: float = EPSILON
) -> RayIntersectionResult:
    """
    Points where the ray crosses the sphere's surface. A ray starting inside the sphere
    has only its exit point, and a tangent ray has a single point.
    Distances are measured along the ray from its origin.
    """
    direction: Vector3D = ray.direction.normalize(epsilon=epsilon)
    projection: float = (sphere.center - ray.origin).dot(direction)
    closest_to_center: Vector3D = ray.origin + direction * projection
    center_distance: float = closest_to_center.distance_to(sphere.center)
    if center_distance > sphere.radius + epsilon:
        logger.debug(f"Ray passes the sphere at distance {center_distance} from its center.")
        return _ray_result(hits=list())

    half_chord: float = math.sqrt(max(0.0, sphere.radius ** 2 - center_distance ** 2))
    distances: list[float] = [projection]
    if half_chord >= epsilon:
        distances = [projection - half_chord, projection + half_chord]
    hits: list[RaySurfaceHit] = list()
    for distance in distances:
        if distance < 0.0:
            continue  # behind the origin
        point: Vector3D = ray.origin + direction * distance
        hits.append(RaySurfaceHit(
            point=point,
            distance=distance,
            normal=(point - sphere.center).normalize(epsilon=epsilon)))
    return _ray_result(hits=hits)


def ray_aabb_intersection(
    ray: Ray3D,
    box: AxisAlignedBox,
    epsilon: float = EPSILON
) -> RayIntersectionResult:
    """
    Slab method. Reports the entry and exit points through the box surface.
    A ray starting inside the box has only its exit point.
    The normal of each point is that of the face whose slab bounds the crossing.
    """
    direction: Vector3D = ray.direction.normalize(epsilon=epsilon)
    origin_values: list[float] = ray.origin.as_list()
    direction_values: list[float] = direction.as_list()
    minimum_values: list[float] = box.minimum.as_list()
    maximum_values: list[float] = box.maximum.as_list()

    entry_distance: float = -math.inf
    exit_distance: float = math.inf
    entry_axis: int = 0
    exit_axis: int = 0
    for axis_index in range(0, 3):
        origin_value: float = origin_values[axis_index]
        direction_value: float = direction_values[axis_index]
        if abs(direction_value) < epsilon:
            # parallel to this slab, so the origin must already lie within it
            if origin_value < minimum_values[axis_index] or origin_value > maximum_values[axis_index]:
                logger.debug(f"Ray is parallel to and outside of the box slab on axis {axis_index}.")
                return _ray_result(hits=list())
            continue
        near_distance: float = (minimum_values[axis_index] - origin_value) / direction_value
        far_distance: float = (maximum_values[axis_index] - origin_value) / direction_value
        if near_distance > far_distance:
            near_distance, far_distance = far_distance, near_distance
        if near_distance > entry_distance:
            entry_distance = near_distance
            entry_axis = axis_index
        if far_distance < exit_distance:
            exit_distance = far_distance
            exit_axis = axis_index

    if exit_distance < 0.0 or entry_distance > exit_distance:
        logger.debug("Ray misses the box.")
        return _ray_result(hits=list())

    hits: list[RaySurfaceHit] = list()
    if entry_distance >= 0.0:
        hits.append(RaySurfaceHit(
            point=ray.origin + direction * entry_distance,
            distance=entry_distance,
            normal=_axis_vector(axis_index=entry_axis, value=-math.copysign(1.0, direction_values[entry_axis]))))
    if entry_distance < 0.0 or exit_distance - entry_distance >= epsilon:
        hits.append(RaySurfaceHit(
            point=ray.origin + direction * exit_distance,
            distance=exit_distance,
            normal=_axis_vector(axis_index=exit_axis, value=math.copysign(1.0, direction_values[exit_axis]))))
    return _ray_result(hits=hits)


def cylinder_ray_intersection(
    cylinder: Cylinder,
    ray: Ray3D,
    epsilon: float = EPSILON
) -> RayIntersectionResult:
    """
    Points where the ray crosses the lateral surface of the cylinder (end caps are not included).
    A ray parallel to the axis never crosses the lateral surface.
    """
    direction: Vector3D = ray.direction.normalize(epsilon=epsilon)
    axis: Vector3D = cylinder.axis.normalize(epsilon=epsilon)
    offset: Vector3D = ray.origin - cylinder.center
    axis_dot_direction: float = axis.dot(direction)
    axis_dot_offset: float = axis.dot(offset)

    # |offset + t*direction|^2 - (axis . (offset + t*direction))^2 = radius^2, quadratic in t
    a: float = axis.cross(direction).magnitude_squared()
    if a < epsilon:
        logger.debug("Ray is parallel to the cylinder axis.")
        return _ray_result(hits=list())
    b: float = 2.0 * (offset.dot(direction) - axis_dot_direction * axis_dot_offset)
    c: float = offset.magnitude_squared() - axis_dot_offset ** 2 - cylinder.radius ** 2
    discriminant: float = b * b - 4.0 * a * c
    if discriminant < 0.0:
        logger.debug("Ray misses the cylinder's infinite extension.")
        return _ray_result(hits=list())

    root: float = math.sqrt(discriminant)
    distances: list[float] = [(-b - root) / (2.0 * a)]
    if root / (2.0 * a) >= epsilon:
        distances.append((-b + root) / (2.0 * a))
    hits: list[RaySurfaceHit] = list()
    for distance in distances:
        if distance < 0.0:
            continue  # behind the origin
        point: Vector3D = ray.origin + direction * distance
        height_on_axis: float = axis.dot(point - cylinder.center)
        if abs(height_on_axis) > cylinder.height / 2.0 + epsilon:
            continue  # beyond an end of the cylinder
        point_on_axis: Vector3D = cylinder.center + axis * height_on_axis
        hits.append(RaySurfaceHit(
            point=point,
            distance=distance,
            normal=(point - point_on_axis).normalize(epsilon=epsilon)))
    return _ray_result(hits=hits)
