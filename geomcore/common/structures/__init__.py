from .line import Line3D
from .plane import Plane3D
from .quaternion import Quaternion
from .ray import Ray3D
from .solids import \
    AxisAlignedBox, \
    Cylinder, \
    Sphere
from .vector import Vector3D
