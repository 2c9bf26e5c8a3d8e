from ...common.structures import Line3D, Vector3D
from enum import StrEnum
from pydantic import BaseModel, Field
from typing import Final


class LineIntersectionType(StrEnum):
    COINCIDENT: Final[str] = "coincident"
    PARALLEL: Final[str] = "parallel"
    INTERSECTING: Final[str] = "intersecting"
    SKEW: Final[str] = "skew"


class LinePlaneIntersectionType(StrEnum):
    INTERSECTING: Final[str] = "intersecting"
    PARALLEL: Final[str] = "parallel"
    IN_PLANE: Final[str] = "in_plane"


class PlanePlaneIntersectionType(StrEnum):
    INTERSECTING: Final[str] = "intersecting"
    PARALLEL: Final[str] = "parallel"
    COINCIDENT: Final[str] = "coincident"


class LineIntersectionResult(BaseModel):
    intersection_type: LineIntersectionType = Field()
    intersects: bool = Field()
    intersection_point: Vector3D | None = Field(default=None)
    closest_point_line1: Vector3D = Field()
    closest_point_line2: Vector3D = Field()
    minimum_distance: float = Field()
    parameter_line1: float = Field()
    parameter_line2: float = Field()
    are_parallel: bool = Field()
    are_skew: bool = Field()
    are_coincident: bool = Field()


class LineSegmentIntersectionResult(BaseModel):
    intersects: bool = Field()
    intersection_point: Vector3D | None = Field(default=None)
    closest_point_seg1: Vector3D = Field()
    closest_point_seg2: Vector3D = Field()
    minimum_distance: float = Field(description="Between the closest points after clamping to the segments")
    intersection_on_both_segments: bool = Field(
        description="Both unclamped line parameters lie in [0, 1]. For parallel segments, their projections overlap")


class LinePlaneIntersectionResult(BaseModel):
    intersection_type: LinePlaneIntersectionType = Field()
    intersects: bool = Field()
    intersection_point: Vector3D | None = Field(default=None)
    parameter: float | None = Field(default=None)
    line_is_parallel: bool = Field()
    line_is_in_plane: bool = Field()
    distance_to_plane: float = Field()


class PlanePlaneIntersectionResult(BaseModel):
    intersection_type: PlanePlaneIntersectionType = Field()
    intersects: bool = Field()
    intersection_line: Line3D | None = Field(default=None)
    are_parallel: bool = Field()
    are_coincident: bool = Field()
    angle_radians: float = Field()
    angle_degrees: float = Field()


class MultipleLineIntersectionResult(BaseModel):
    best_intersection_point: Vector3D = Field()
    total_squared_distance: float = Field(description="Residual, sum of squared point-to-line distances")
    individual_distances: list[float] = Field()  # same order as the input lines
    lines_processed: int = Field()
