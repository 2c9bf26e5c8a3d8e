from .constants import EPSILON, SLERP_LINEAR_THRESHOLD
from .exceptions import GeometryConfigurationError
from .util import IOUtils
import logging
from pydantic import BaseModel, Field, ValidationError


logger = logging.getLogger(__name__)


class GeometryParameters(BaseModel):
    """
    Tunable numeric settings. Defaults match the module-level constants,
    so a default-constructed instance reproduces the library's default behaviour.
    """
    epsilon: float = Field(
        default=EPSILON, gt=0.0,
        description="Tolerance for zero/parallel/perpendicular/singularity tests.")
    slerp_linear_threshold: float = Field(
        default=SLERP_LINEAR_THRESHOLD, gt=0.0, lt=1.0,
        description="Above this |dot| between quaternions, slerp uses linear interpolation.")

    @staticmethod
    def from_file(filepath: str) -> 'GeometryParameters':
        """
        Load from an hjson (or json) file. Keys that are absent take their default values.
        """
        errors_for_dev: list[str] = list()
        parameters_dict: dict | None = IOUtils.hjson_read(
            filepath=filepath,
            on_error_for_user=logger.error,
            on_error_for_dev=errors_for_dev.append)
        if parameters_dict is None:
            raise GeometryConfigurationError(
                message=f"Failed to read geometry parameters from {filepath}.",
                operand=filepath,
                detail={"errors": errors_for_dev})
        try:
            return GeometryParameters(**parameters_dict)
        except ValidationError as e:
            raise GeometryConfigurationError(
                message=f"Geometry parameters in {filepath} are not valid.",
                operand=filepath,
                detail={"errors": [str(error["msg"]) for error in e.errors()]}) from e

    def to_file(self, filepath: str) -> None:
        errors_for_dev: list[str] = list()
        if not IOUtils.json_write(
            filepath=filepath,
            json_dict=self.model_dump(),
            on_error_for_user=logger.error,
            on_error_for_dev=errors_for_dev.append
        ):
            raise GeometryConfigurationError(
                message=f"Failed to write geometry parameters to {filepath}.",
                operand=filepath,
                detail={"errors": errors_for_dev})
