"""
Estimated one-rep max (Epley, with reps in reserve counted as extra reps).
"""

EPLEY_DIVISOR = 30


def estimate_one_rep_max(weight, reps, rir=0):
    """
    Estimate the one-rep max for a single set.

    Args:
        weight: Load lifted (> 0)
        reps: Repetitions performed (>= 0)
        rir: Reps in reserve (>= 0), defaults to 0

    Returns:
        Estimated 1RM, unrounded
    """
    if reps == 0:
        return 0

    effective_reps = reps + rir
    if effective_reps <= 1:
        return weight

    return weight * (1 + effective_reps / EPLEY_DIVISOR)
