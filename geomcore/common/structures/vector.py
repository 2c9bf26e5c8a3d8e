from ..constants import EPSILON
from ..exceptions import InvalidArgumentError
import math
import numbers
import numpy
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Vector3D(BaseModel):
    """
    Immutable 3D vector (or point). All components must be finite.
    """
    model_config = ConfigDict(frozen=True)

    x: float = Field()
    y: float = Field()
    z: float = Field()

    @model_validator(mode="after")
    def _check_finite(self) -> 'Vector3D':
        for component_label in ("x", "y", "z"):
            value: float = getattr(self, component_label)
            if not math.isfinite(value):
                raise InvalidArgumentError(
                    message=f"Vector component {component_label} must be finite, got {value}.",
                    operand=component_label)
        return self

    def __add__(self, other: 'Vector3D') -> 'Vector3D':
        return self.add(other)

    def __sub__(self, other: 'Vector3D') -> 'Vector3D':
        return self.subtract(other)

    def __neg__(self) -> 'Vector3D':
        return Vector3D(x=-self.x, y=-self.y, z=-self.z)

    def __mul__(self, scalar: float) -> 'Vector3D':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(float(scalar))

    def __rmul__(self, scalar: float) -> 'Vector3D':
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> 'Vector3D':
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(1.0 / float(scalar))

    def add(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(
            x=self.x + other.x,
            y=self.y + other.y,
            z=self.z + other.z)

    def subtract(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(
            x=self.x - other.x,
            y=self.y - other.y,
            z=self.z - other.z)

    def scale(self, scalar: float) -> 'Vector3D':
        return Vector3D(
            x=self.x * scalar,
            y=self.y * scalar,
            z=self.z * scalar)

    def dot(self, other: 'Vector3D') -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector3D') -> 'Vector3D':
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x)

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def distance_to(self, other: 'Vector3D') -> float:
        return self.subtract(other).magnitude()

    def normalize(
        self,
        epsilon: float = EPSILON
    ) -> 'Vector3D':
        magnitude: float = self.magnitude()
        if magnitude < epsilon:
            raise InvalidArgumentError(
                message="Cannot normalize zero vector.",
                detail={"magnitude": magnitude})
        return Vector3D(
            x=self.x / magnitude,
            y=self.y / magnitude,
            z=self.z / magnitude)

    def is_zero(
        self,
        epsilon: float = EPSILON
    ) -> bool:
        return self.magnitude() < epsilon

    def are_parallel(
        self,
        other: 'Vector3D',
        epsilon: float = EPSILON
    ) -> bool:
        return self.cross(other).magnitude() < epsilon

    def are_perpendicular(
        self,
        other: 'Vector3D',
        epsilon: float = EPSILON
    ) -> bool:
        return abs(self.dot(other)) < epsilon

    def angle_with(
        self,
        other: 'Vector3D',
        epsilon: float = EPSILON
    ) -> float:
        """
        Angle between the two vectors in radians, within [0, pi].
        """
        magnitude_1: float = self.magnitude()
        magnitude_2: float = other.magnitude()
        if magnitude_1 < epsilon or magnitude_2 < epsilon:
            raise InvalidArgumentError(
                message="Cannot compute angle with zero vector.",
                detail={"magnitude_1": magnitude_1, "magnitude_2": magnitude_2})
        cos_angle: float = self.dot(other) / (magnitude_1 * magnitude_2)
        # Rounding can push the cosine slightly outside [-1, 1], and acos would then fail
        cos_angle = max(-1.0, min(1.0, cos_angle))
        return math.acos(cos_angle)

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.z]

    def as_numpy_array(self) -> numpy.ndarray:
        return numpy.asarray([self.x, self.y, self.z], dtype="float64")

    @staticmethod
    def from_list(
        value_list: list[float]
    ) -> 'Vector3D':
        if len(value_list) != 3:
            raise InvalidArgumentError(message=f"Expected a list of 3 float. Got {str(value_list)}.")
        return Vector3D(x=float(value_list[0]), y=float(value_list[1]), z=float(value_list[2]))

    @staticmethod
    def from_numpy_array(
        value_array: numpy.ndarray
    ) -> 'Vector3D':
        return Vector3D.from_list(value_array.tolist())

    @staticmethod
    def zero() -> 'Vector3D':
        return Vector3D(x=0.0, y=0.0, z=0.0)
