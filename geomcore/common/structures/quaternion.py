from ..constants import EPSILON
from ..exceptions import InvalidArgumentError
from .vector import Vector3D
import math
import numpy
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Quaternion(BaseModel):
    """
    Quaternion x*i + y*j + z*k + w, scalar part last (same order as scipy's Rotation.as_quat()).
    Represents a rotation only when of unit magnitude. q and -q represent the same rotation.
    """
    model_config = ConfigDict(frozen=True)

    x: float = Field()
    y: float = Field()
    z: float = Field()
    w: float = Field()

    @model_validator(mode="after")
    def _check_finite(self) -> 'Quaternion':
        for component_label in ("x", "y", "z", "w"):
            value: float = getattr(self, component_label)
            if not math.isfinite(value):
                raise InvalidArgumentError(
                    message=f"Quaternion component {component_label} must be finite, got {value}.",
                    operand=component_label)
        return self

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def dot(self, other: 'Quaternion') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def negated(self) -> 'Quaternion':
        return Quaternion(x=-self.x, y=-self.y, z=-self.z, w=-self.w)

    def normalize(
        self,
        epsilon: float = EPSILON
    ) -> 'Quaternion':
        magnitude: float = self.magnitude()
        if magnitude < epsilon:
            raise InvalidArgumentError(
                message="Quaternion cannot be zero.",
                detail={"magnitude": magnitude})
        return Quaternion(
            x=self.x / magnitude,
            y=self.y / magnitude,
            z=self.z / magnitude,
            w=self.w / magnitude)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other (apply other first, then self).
        """
        return Quaternion(
            x=self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            y=self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            z=self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
            w=self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z)

    def to_rotation_matrix(self) -> list[list[float]]:
        """
        Row-major 3x3 rotation matrix. Assumes a unit quaternion.
        """
        x2 = self.x * self.x
        y2 = self.y * self.y
        z2 = self.z * self.z
        xy = self.x * self.y
        xz = self.x * self.z
        yz = self.y * self.z
        wx = self.w * self.x
        wy = self.w * self.y
        wz = self.w * self.z
        return \
            [[1.0 - 2.0 * (y2 + z2), 2.0 * (xy - wz), 2.0 * (xz + wy)],
             [2.0 * (xy + wz), 1.0 - 2.0 * (x2 + z2), 2.0 * (yz - wx)],
             [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (x2 + y2)]]

    def rotate_vector(self, vector: Vector3D) -> Vector3D:
        rotated = numpy.matmul(numpy.asarray(self.to_rotation_matrix()), vector.as_numpy_array())
        return Vector3D.from_numpy_array(rotated)

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]

    @staticmethod
    def identity() -> 'Quaternion':
        return Quaternion(x=0.0, y=0.0, z=0.0, w=1.0)

    @staticmethod
    def from_axis_angle(
        axis: Vector3D,
        angle_radians: float,
        epsilon: float = EPSILON
    ) -> 'Quaternion':
        magnitude: float = axis.magnitude()
        if magnitude < epsilon:
            raise InvalidArgumentError(
                message="Axis vector cannot be zero.",
                operand="axis")
        half_angle: float = angle_radians * 0.5
        sin_half: float = math.sin(half_angle)
        return Quaternion(
            x=(axis.x / magnitude) * sin_half,
            y=(axis.y / magnitude) * sin_half,
            z=(axis.z / magnitude) * sin_half,
            w=math.cos(half_angle))
