# svgtextbox/core/fontsize.py
"""
Font size selection: largest candidate size whose fit probe is true.
Binary search relies on fit being monotonic in size; a linear scan
takes over when the re-applied best size no longer fits.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from svgtextbox.core.config import SVGTEXTBOX_DEBUG
from svgtextbox.core.fit_predicate import fits
from svgtextbox.core.oracle import LayoutHandle

logger = logging.getLogger(__name__)

Probe = Callable[[int], bool]
"""Apply a size to the layout and report whether it fits."""


def make_probe(layout: LayoutHandle) -> Probe:
    """Probe that mutates layout to the given scaled size, then evaluates fit."""

    def probe(size: int) -> bool:
        layout.set_font_size(size)
        ok = fits(layout)
        if SVGTEXTBOX_DEBUG:
            logger.debug(f"probe size={size} fits={ok}")
        return ok

    return probe


def fit_partition_point(sizes: Sequence[int], apply_and_fit: Probe) -> int:
    """
    Index of the first size that does not fit, assuming fitting sizes come first.
    Sizes must be ascending.
    """
    lo, hi = 0, len(sizes)
    while lo < hi:
        mid = (lo + hi) // 2
        if apply_and_fit(sizes[mid]):
            lo = mid + 1
        else:
            hi = mid
    return lo


def _linear_fallback(sizes: Sequence[int], start: int, apply_and_fit: Probe) -> int | None:
    for i in range(start, -1, -1):
        if apply_and_fit(sizes[i]):
            return sizes[i]
    return None


def select_max_fitting_size(sizes: Sequence[int], apply_and_fit: Probe) -> int | None:
    """
    Largest fitting size from ascending sizes, or None when even the smallest fails.
    On return the probe has last been applied to the returned size.
    """
    if not sizes:
        return None
    index = fit_partition_point(sizes, apply_and_fit)
    if index == 0:
        return None
    best = sizes[index - 1]
    if apply_and_fit(best):
        return best
    logger.warning(
        f"Fit is not monotonic in font size: {best} fitted during search but not on re-apply; "
        "scanning smaller sizes"
    )
    return _linear_fallback(sizes, index - 2, apply_and_fit)


def check_fixed_size(size: int, apply_and_fit: Probe) -> bool:
    """Apply one size and report fit. Never adjusts the size."""
    return apply_and_fit(size)
