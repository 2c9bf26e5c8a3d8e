from ..constants import EPSILON
from ..exceptions import InvalidArgumentError
from ..structures import Vector3D
import math


class ValidationUtils:
    """
    static class for precondition checks shared by the geometry algorithms.
    Each check raises InvalidArgumentError naming the offending operand.
    """

    def __init__(self):
        raise RuntimeError(f"{__class__.__name__} is not meant to be instantiated.")

    @staticmethod
    def require_nonzero_vector(
        vector: Vector3D,
        operand: str,
        epsilon: float = EPSILON
    ) -> None:
        magnitude: float = vector.magnitude()
        if magnitude < epsilon:
            raise InvalidArgumentError(
                message=f"{operand} cannot be zero.",
                operand=operand,
                detail={"magnitude": magnitude, "epsilon": epsilon})

    @staticmethod
    def require_finite(
        value: float,
        operand: str
    ) -> None:
        if not math.isfinite(value):
            raise InvalidArgumentError(
                message=f"{operand} must be finite, got {value}.",
                operand=operand)

    @staticmethod
    def require_in_range(
        value: float,
        operand: str,
        minimum: float,
        maximum: float
    ) -> None:
        ValidationUtils.require_finite(value=value, operand=operand)
        if value < minimum or value > maximum:
            raise InvalidArgumentError(
                message=f"{operand} must be between {minimum} and {maximum}, got {value}.",
                operand=operand,
                detail={"value": value, "minimum": minimum, "maximum": maximum})
