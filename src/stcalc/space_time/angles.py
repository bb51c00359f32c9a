import math


def reduce_angle(degrees: float) -> float:
    """Reduce an angle of any magnitude into the interval [0, 360).

    Args:
        degrees: Angle in degrees, possibly spanning many full rotations

    Returns:
        float: Equivalent angle in [0, 360)
    """
    # fmod keeps the sign of the dividend, so negatives need one more turn
    reduced = math.fmod(degrees, 360.0)
    if reduced < 0:
        reduced += 360.0
    # -1e-17 + 360 rounds to 360.0
    if reduced >= 360.0:
        reduced = 0.0
    return reduced
