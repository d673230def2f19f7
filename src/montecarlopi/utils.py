from montecarlopi.config import PI_REFERENCE


def estimate_pi(points_inside: int, total_points: int) -> float:
    """Estimate pi from a hit count, NaN when nothing was sampled."""
    if total_points == 0:
        return float("nan")
    return 4 * points_inside / total_points

def percent_error(estimate: float, reference: float = PI_REFERENCE) -> float:
    """Relative deviation of `estimate` from `reference` in percent."""
    return abs(estimate - reference) / reference * 100
