from ..exceptions import InvalidArgumentError
from .vector import Vector3D
from pydantic import BaseModel, ConfigDict, Field, model_validator


class Ray3D(BaseModel):
    """
    Half-line from origin along direction: {origin + t * direction | t >= 0}.
    """
    model_config = ConfigDict(frozen=True)

    origin: Vector3D = Field()
    direction: Vector3D = Field()

    @model_validator(mode="after")
    def _check_direction(self) -> 'Ray3D':
        if self.direction.is_zero():
            raise InvalidArgumentError(
                message="Direction vector cannot be zero.",
                operand="direction")
        return self

    def point_at_distance(self, distance: float) -> Vector3D:
        """
        Point reached after travelling distance along the ray (independent of direction length).
        """
        return self.origin + self.direction.normalize() * distance
