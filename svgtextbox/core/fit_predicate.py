# svgtextbox/core/fit_predicate.py
"""
Single fit judgement for a layout handle in its current state.
Combines the ellipsis flag, ink-extent bounds and a trailing-content check.
"""

from __future__ import annotations

from dataclasses import dataclass

from svgtextbox.core.geometry import rect_inside_box
from svgtextbox.core.oracle import LayoutHandle


@dataclass(frozen=True)
class FitReport:
    """The three fit signals; fits only when all hold."""
    not_ellipsized: bool
    within_bounds: bool
    nothing_dropped: bool

    @property
    def fits(self) -> bool:
        return self.not_ellipsized and self.within_bounds and self.nothing_dropped


def fit_report(layout: LayoutHandle) -> FitReport:
    """Evaluate each signal separately."""
    width, height = layout.box_size()
    return FitReport(
        not_ellipsized=not layout.is_ellipsized(),
        within_bounds=rect_inside_box(layout.ink_extents(), width, height),
        # Pango can drop trailing lines without reporting ellipsis.
        nothing_dropped=layout.last_visible_index() == layout.last_character_index(),
    )


def fits(layout: LayoutHandle) -> bool:
    """True if the layout shows all of its text inside its box."""
    return fit_report(layout).fits
