from ..common import \
    EPSILON, \
    Quaternion, \
    SLERP_LINEAR_THRESHOLD, \
    ValidationUtils
import logging
import math


logger = logging.getLogger(__name__)


def quaternion_lerp(
    quaternion_1: Quaternion,
    quaternion_2: Quaternion,
    t: float,
    epsilon: float = EPSILON
) -> Quaternion:
    """
    Component-wise linear interpolation, renormalized.
    """
    return Quaternion(
        x=quaternion_1.x + t * (quaternion_2.x - quaternion_1.x),
        y=quaternion_1.y + t * (quaternion_2.y - quaternion_1.y),
        z=quaternion_1.z + t * (quaternion_2.z - quaternion_1.z),
        w=quaternion_1.w + t * (quaternion_2.w - quaternion_1.w)).normalize(epsilon=epsilon)


def quaternion_slerp(
    quaternion_1: Quaternion,
    quaternion_2: Quaternion,
    t: float,
    epsilon: float = EPSILON,
    linear_threshold: float = SLERP_LINEAR_THRESHOLD
) -> Quaternion:
    """
    Spherical linear interpolation between two orientations, t in [0, 1].
    Inputs are normalized first, and the result is always a unit quaternion.
    Raises InvalidArgumentError for t outside [0, 1] or a zero quaternion.
    """
    ValidationUtils.require_in_range(t, operand="t", minimum=0.0, maximum=1.0)
    q1: Quaternion = quaternion_1.normalize(epsilon=epsilon)
    q2: Quaternion = quaternion_2.normalize(epsilon=epsilon)

    dot: float = q1.dot(q2)
    if dot < 0.0:
        # q and -q are the same rotation, flipping one keeps us on the shorter arc
        q2 = q2.negated()
    dot_abs: float = abs(dot)

    if dot_abs > linear_threshold:
        # sin(theta_0) is close to zero, so the slerp weights are numerically unstable
        logger.debug(f"Quaternions nearly identical (|dot| = {dot_abs}), using linear interpolation.")
        return quaternion_lerp(quaternion_1=q1, quaternion_2=q2, t=t, epsilon=epsilon)

    theta_0: float = math.acos(dot_abs)
    sin_theta_0: float = math.sin(theta_0)
    theta: float = theta_0 * t
    sin_theta: float = math.sin(theta)
    s0: float = math.cos(theta) - dot_abs * sin_theta / sin_theta_0
    s1: float = sin_theta / sin_theta_0
    return Quaternion(
        x=s0 * q1.x + s1 * q2.x,
        y=s0 * q1.y + s1 * q2.y,
        z=s0 * q1.z + s1 * q2.z,
        w=s0 * q1.w + s1 * q2.w).normalize(epsilon=epsilon)
