from .algorithms import \
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
    DegenerateError, \
    EPSILON, \
    GeometryConfigurationError, \
    GeometryError, \
    GeometryErrorReason, \
    GeometryParameters, \
    InvalidArgumentError, \
    Line3D, \
    Plane3D, \
    Quaternion, \
    Ray3D, \
    SLERP_LINEAR_THRESHOLD, \
    Sphere, \
    Vector3D
from .geometry_solver import GeometrySolver
