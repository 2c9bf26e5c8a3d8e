from ..constants import EPSILON
from ..exceptions import InvalidArgumentError
from .vector import Vector3D
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Plane3D(BaseModel):
    """
    Plane through point, perpendicular to normal: {p | (p - point) . normal = 0}.
    The normal need not be unit length, but cannot be zero.
    Signed distances are positive on the side the normal points to.
    """
    model_config = ConfigDict(frozen=True)

    point: Vector3D = Field()
    normal: Vector3D = Field()

    @model_validator(mode="after")
    def _check_normal(self) -> 'Plane3D':
        if self.normal.is_zero():
            raise InvalidArgumentError(
                message="Normal vector cannot be zero.",
                operand="normal")
        return self

    def unit_normal(self) -> Vector3D:
        return self.normal.normalize()

    def distance_to_point(self, point: Vector3D) -> float:
        return abs(self.signed_distance_to_point(point))

    def signed_distance_to_point(self, point: Vector3D) -> float:
        return (point - self.point).dot(self.unit_normal())

    def project_point(self, point: Vector3D) -> Vector3D:
        return point - self.unit_normal() * self.signed_distance_to_point(point)

    def is_parallel_to(
        self,
        other: 'Plane3D',
        epsilon: float = EPSILON
    ) -> bool:
        return self.normal.are_parallel(other.normal, epsilon=epsilon)

    def angle_with(
        self,
        other: 'Plane3D',
        epsilon: float = EPSILON
    ) -> float:
        """
        Angle between the plane normals, in radians.
        """
        return self.normal.angle_with(other.normal, epsilon=epsilon)

    @staticmethod
    def from_three_points(
        point_1: Vector3D,
        point_2: Vector3D,
        point_3: Vector3D,
        epsilon: float = EPSILON
    ) -> 'Plane3D':
        normal: Vector3D = (point_2 - point_1).cross(point_3 - point_1)
        if normal.is_zero(epsilon=epsilon):
            raise InvalidArgumentError(message="Points are collinear - cannot define a plane.")
        return Plane3D(point=point_1, normal=normal)
