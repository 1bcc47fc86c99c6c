"""
Aspect Ratio Classifier.

Decides whether image dimensions fall within a tolerance window
around a target ratio.
"""

import math

from ..domain.errors import ConfigurationError
from ..domain.models import DEFAULT_TARGET_RATIO, DEFAULT_TOLERANCE_PERCENT

# Relative slack for ratios that sit exactly on a window edge
BOUNDARY_REL_TOL = 1e-9


def acceptable_range(
    target_ratio: float = DEFAULT_TARGET_RATIO,
    tolerance_percent: float = DEFAULT_TOLERANCE_PERCENT,
) -> tuple[float, float]:
    """
    Get the inclusive window of conforming ratios.

    Args:
        target_ratio: Expected width / height
        tolerance_percent: Allowed deviation as a percentage of the target

    Returns:
        Tuple of (min_acceptable, max_acceptable)
    """
    factor = tolerance_percent / 100
    return target_ratio * (1 - factor), target_ratio * (1 + factor)


def is_conforming(
    width: int,
    height: int,
    target_ratio: float = DEFAULT_TARGET_RATIO,
    tolerance_percent: float = DEFAULT_TOLERANCE_PERCENT,
) -> bool:
    """
    Check if width / height lies within the tolerance window.

    Both bounds are inclusive; a ratio within floating-point rounding
    of a bound counts as on the bound.

    Args:
        width: Width in pixels (> 0)
        height: Height in pixels (> 0)
        target_ratio: Expected width / height
        tolerance_percent: Allowed deviation as a percentage of the target

    Returns:
        True if the ratio conforms, False otherwise

    Raises:
        ValueError: If width or height is not positive
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Dimensions must be positive, got {width}x{height}")

    min_acceptable, max_acceptable = acceptable_range(target_ratio, tolerance_percent)
    actual_ratio = width / height
    if min_acceptable <= actual_ratio <= max_acceptable:
        return True
    return (
        math.isclose(actual_ratio, min_acceptable, rel_tol=BOUNDARY_REL_TOL)
        or math.isclose(actual_ratio, max_acceptable, rel_tol=BOUNDARY_REL_TOL)
    )


def parse_ratio(text: str) -> float:
    """
    Parse a ratio given as "16:9", "16/9" or "1.7778".

    Args:
        text: Ratio text

    Returns:
        Ratio as a float

    Raises:
        ConfigurationError: If text is not a positive ratio
    """
    value = text.strip()

    for separator in (':', '/'):
        if separator in value:
            left, _, right = value.partition(separator)
            try:
                numerator = float(left)
                denominator = float(right)
            except ValueError:
                raise ConfigurationError(f"Invalid ratio: {text!r}") from None
            if denominator == 0:
                raise ConfigurationError(f"Invalid ratio (zero denominator): {text!r}")
            ratio = numerator / denominator
            break
    else:
        try:
            ratio = float(value)
        except ValueError:
            raise ConfigurationError(f"Invalid ratio: {text!r}") from None

    if not math.isfinite(ratio) or ratio <= 0:
        raise ConfigurationError(f"Ratio must be positive: {text!r}")

    return ratio
