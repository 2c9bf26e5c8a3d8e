from ...common.structures import Vector3D
from pydantic import BaseModel, Field


class DotProductResult(BaseModel):
    dot_product: float = Field()
    angle_radians: float = Field()
    angle_degrees: float = Field()
    are_perpendicular: bool = Field()
    are_parallel: bool = Field()


class CrossProductResult(BaseModel):
    cross_product: Vector3D = Field()
    magnitude: float = Field()
    area_parallelogram: float = Field()
    are_parallel: bool = Field()


class VectorMagnitudeResult(BaseModel):
    magnitude: float = Field()
    unit_vector: Vector3D = Field()
    is_zero_vector: bool = Field()


class VectorAngleResult(BaseModel):
    angle_radians: float = Field()
    angle_degrees: float = Field()
    cos_angle: float = Field()


class VectorProjectionResult(BaseModel):
    scalar_projection: float = Field()
    vector_projection: Vector3D = Field()
    rejection_vector: Vector3D = Field()
    angle_radians: float = Field()
    angle_degrees: float = Field()
    vectors_are_parallel: bool = Field()
    vectors_are_perpendicular: bool = Field()
