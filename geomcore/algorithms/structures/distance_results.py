from ...common.structures import Vector3D
from enum import StrEnum
from pydantic import BaseModel, Field
from typing import Final


class PlaneSide(StrEnum):
    POSITIVE: Final[str] = "positive"  # the side the plane normal points to
    NEGATIVE: Final[str] = "negative"
    ON_PLANE: Final[str] = "on_plane"


class PointLineDistanceResult(BaseModel):
    distance: float = Field()
    closest_point_on_line: Vector3D = Field()
    parameter_on_line: float = Field()
    perpendicular_vector: Vector3D = Field(description="From the closest point on the line to the query point")
    point_is_on_line: bool = Field()


class PointPlaneDistanceResult(BaseModel):
    distance: float = Field()
    signed_distance: float = Field()
    closest_point_on_plane: Vector3D = Field()
    point_is_on_plane: bool = Field()
    side_of_plane: PlaneSide = Field()


class LinePlaneDistanceResult(BaseModel):
    distance: float = Field()
    line_is_parallel: bool = Field()
    line_intersects_plane: bool = Field()
    intersection_point: Vector3D | None = Field(default=None)
    closest_point_on_line: Vector3D = Field()
    closest_point_on_plane: Vector3D = Field()


class PointProjectionResult(BaseModel):
    projected_point: Vector3D = Field()
    parameter_on_line: float = Field()
    distance_to_projection: float = Field()
    is_on_line: bool = Field()


class PlaneProjectionResult(BaseModel):
    projected_point: Vector3D = Field()
    distance_to_projection: float = Field()
    is_on_plane: bool = Field()
    projection_direction: Vector3D = Field(description="From the point to its projection, zero if on the plane")
