from ..exceptions import InvalidArgumentError
from .vector import Vector3D
import math
from pydantic import BaseModel, ConfigDict, Field, model_validator


def _require_positive_finite(
    value: float,
    operand: str
) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidArgumentError(
            message=f"{operand} must be positive and finite, got {value}.",
            operand=operand)


class Sphere(BaseModel):
    model_config = ConfigDict(frozen=True)

    center: Vector3D = Field()
    radius: float = Field()

    @model_validator(mode="after")
    def _check_radius(self) -> 'Sphere':
        _require_positive_finite(value=self.radius, operand="radius")
        return self


class AxisAlignedBox(BaseModel):
    """
    Box spanning [minimum, maximum] on each axis. Every axis must have nonzero extent.
    """
    model_config = ConfigDict(frozen=True)

    minimum: Vector3D = Field()
    maximum: Vector3D = Field()

    @model_validator(mode="after")
    def _check_extent(self) -> 'AxisAlignedBox':
        for component_label in ("x", "y", "z"):
            lower: float = getattr(self.minimum, component_label)
            upper: float = getattr(self.maximum, component_label)
            if lower >= upper:
                raise InvalidArgumentError(
                    message=f"Box minimum must be below maximum on {component_label}, got {lower} and {upper}.",
                    operand=f"minimum.{component_label}",
                    detail={"minimum": lower, "maximum": upper})
        return self

    def center(self) -> Vector3D:
        return (self.minimum + self.maximum) / 2.0


class Cylinder(BaseModel):
    """
    Finite right circular cylinder. center is the mid-point of the axis segment,
    which extends height / 2 to either side along axis.
    """
    model_config = ConfigDict(frozen=True)

    center: Vector3D = Field()
    axis: Vector3D = Field()
    radius: float = Field()
    height: float = Field()

    @model_validator(mode="after")
    def _check_dimensions(self) -> 'Cylinder':
        if self.axis.is_zero():
            raise InvalidArgumentError(
                message="Axis vector cannot be zero.",
                operand="axis")
        _require_positive_finite(value=self.radius, operand="radius")
        _require_positive_finite(value=self.height, operand="height")
        return self
