from ..constants import EPSILON
from ..exceptions import InvalidArgumentError
from .vector import Vector3D
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Line3D(BaseModel):
    """
    Infinite line through point, along direction: {point + t * direction | t real}.
    Direction need not be unit length, but cannot be zero.
    """
    model_config = ConfigDict(frozen=True)

    point: Vector3D = Field()
    direction: Vector3D = Field()

    @model_validator(mode="after")
    def _check_direction(self) -> 'Line3D':
        if self.direction.is_zero():
            raise InvalidArgumentError(
                message="Direction vector cannot be zero.",
                operand="direction")
        return self

    def point_at_parameter(self, t: float) -> Vector3D:
        return self.point + self.direction * t

    def is_parallel_to(
        self,
        other: 'Line3D',
        epsilon: float = EPSILON
    ) -> bool:
        return self.direction.are_parallel(other.direction, epsilon=epsilon)

    @staticmethod
    def from_points(
        start: Vector3D,
        end: Vector3D
    ) -> 'Line3D':
        """
        Line through start (t=0) and end (t=1).
        """
        return Line3D(point=start, direction=end - start)
