from .io_utils import IOUtils
from .linear_algebra_utils import LinearAlgebraUtils
from .validation_utils import ValidationUtils
