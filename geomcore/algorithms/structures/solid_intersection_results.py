from ...common.structures import Vector3D
from enum import StrEnum
from pydantic import BaseModel, Field
from typing import Final


class SphereSphereIntersectionType(StrEnum):
    SEPARATE: Final[str] = "separate"
    EXTERNAL_TANGENT: Final[str] = "external_tangent"
    INTERSECTING: Final[str] = "intersecting"
    INTERNAL_TANGENT: Final[str] = "internal_tangent"
    ONE_INSIDE_OTHER: Final[str] = "one_inside_other"
    COINCIDENT: Final[str] = "coincident"


class RaySurfaceHit(BaseModel):
    point: Vector3D = Field()
    distance: float = Field(description="From the ray origin, along the ray")
    normal: Vector3D = Field(description="Unit outward surface normal at point")


class RayIntersectionResult(BaseModel):
    intersects: bool = Field()
    intersection_points: list[RaySurfaceHit] = Field(default_factory=list)  # nearest first
    closest_distance: float | None = Field(default=None)


class IntersectionCircle(BaseModel):
    center: Vector3D = Field()
    radius: float = Field()
    normal: Vector3D = Field(description="Unit normal of the circle's plane, from the first sphere's center towards the second")


class SphereSphereIntersectionResult(BaseModel):
    intersection_type: SphereSphereIntersectionType = Field()
    intersects: bool = Field()
    distance_between_centers: float = Field()
    intersection_circle: IntersectionCircle | None = Field(default=None)
    tangent_point: Vector3D | None = Field(default=None)
