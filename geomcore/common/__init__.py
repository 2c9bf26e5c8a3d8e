from .constants import \
    EPSILON, \
    SLERP_LINEAR_THRESHOLD
from .exceptions import \
    DegenerateError, \
    GeometryConfigurationError, \
    GeometryError, \
    GeometryErrorReason, \
    InvalidArgumentError
from .parameters import GeometryParameters
from .structures import \
    AxisAlignedBox, \
    Cylinder, \
    Line3D, \
    Plane3D, \
    Quaternion, \
    Ray3D, \
    Sphere, \
    Vector3D
from .util import \
    IOUtils, \
    LinearAlgebraUtils, \
    ValidationUtils
