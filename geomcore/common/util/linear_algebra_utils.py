from ..constants import EPSILON
from ..exceptions import DegenerateError
import numpy


class LinearAlgebraUtils:
    """
    static class for the small fixed-size linear systems used by the geometry algorithms.
    Matrices are indexed [row][col].
    """

    def __init__(self):
        raise RuntimeError(f"{__class__.__name__} is not meant to be instantiated.")

    @staticmethod
    def determinant_2x2(
        matrix: numpy.ndarray | list[list[float]]
    ) -> float:
        m = matrix
        return float(m[0][0] * m[1][1] - m[0][1] * m[1][0])

    @staticmethod
    def determinant_3x3(
        matrix: numpy.ndarray | list[list[float]]
    ) -> float:
        # cofactor expansion along the first row
        m = matrix
        return float(
            m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
            - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
            + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0]))

    @staticmethod
    def solve_2x2(
        matrix: numpy.ndarray | list[list[float]],
        rhs: numpy.ndarray | list[float],
        epsilon: float = EPSILON
    ) -> list[float]:
        """
        Solve matrix * x = rhs by direct inversion of the 2x2 matrix.
        Raises DegenerateError if the determinant is (near) zero.
        """
        determinant: float = LinearAlgebraUtils.determinant_2x2(matrix)
        if abs(determinant) < epsilon:
            raise DegenerateError(
                message="2x2 system is singular.",
                detail={"determinant": determinant})
        m = matrix
        return [
            float((rhs[0] * m[1][1] - rhs[1] * m[0][1]) / determinant),
            float((rhs[1] * m[0][0] - rhs[0] * m[1][0]) / determinant)]

    @staticmethod
    def solve_3x3_cramer(
        matrix: numpy.ndarray | list[list[float]],
        rhs: numpy.ndarray | list[float],
        epsilon: float = EPSILON
    ) -> list[float]:
        """
        Solve matrix * x = rhs using Cramer's rule:
        x[i] = det(matrix with column i replaced by rhs) / det(matrix).
        Raises DegenerateError if the determinant is (near) zero.
        """
        coefficients: numpy.ndarray = numpy.asarray(matrix, dtype="float64")
        constants: numpy.ndarray = numpy.asarray(rhs, dtype="float64")
        determinant: float = LinearAlgebraUtils.determinant_3x3(coefficients)
        if abs(determinant) < epsilon:
            raise DegenerateError(
                message="3x3 system is singular.",
                detail={"determinant": determinant})
        solution: list[float] = list()
        for column_index in range(0, 3):
            replaced: numpy.ndarray = numpy.array(coefficients)
            replaced[:, column_index] = constants
            solution.append(LinearAlgebraUtils.determinant_3x3(replaced) / determinant)
        return solution
