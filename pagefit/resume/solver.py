"""Scale solver for single-page layouts.

A bounded local search: at most one measurement at 1.0, five shrink
rounds, or one grow attempt. Each measurement is a full simulated render,
so the number of passes is kept small and predictable rather than optimal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from pagefit.resume.geometry import ScalePair
from pagefit.resume.measure import Measurement

MIN_SCALE = 0.75
MAX_SCALE = 1.15
MAX_SHRINK_ROUNDS = 5
SHRINK_SAFETY = 0.98
SPARSE_USAGE = 0.85
TARGET_USAGE = 0.92


class FitOutcome(str, Enum):
    FIT = "fit"
    SHRUNK = "shrunk"
    GROWN = "grown"
    GROWN_MIDPOINT = "grown_midpoint"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class ScaleSolution:
    """Solved scale plus how it was reached.

    measurement is the last measurement taken at the returned scale, or
    None when the scale was not measured (midpoint and degraded outcomes).
    """

    scale: ScalePair
    outcome: FitOutcome
    passes: int
    measurement: Optional[Measurement] = None


def fits(measurement: Measurement, usable_height: float) -> bool:
    return measurement.page_count == 1 and measurement.total_height <= usable_height


def solve_scale(
    measure: Callable[[float], Measurement],
    usable_height: float,
    min_scale: float = MIN_SCALE,
    max_scale: float = MAX_SCALE,
) -> ScaleSolution:
    """Find a scale at which measure() reports exactly one, well-filled page.

    measure(scale) must be deterministic. Overflowing content is shrunk in up
    to MAX_SHRINK_ROUNDS proportional steps, falling back to min_scale;
    sparse content is grown toward TARGET_USAGE of the page.
    """
    passes = 1
    base = measure(1.0)

    if base.page_count > 1 or base.total_height > usable_height:
        scale = 1.0
        current = base
        for _ in range(MAX_SHRINK_ROUNDS):
            ratio = usable_height / current.total_height
            scale = min(max_scale, max(min_scale, scale * ratio * SHRINK_SAFETY))
            current = measure(scale)
            passes += 1
            if fits(current, usable_height):
                return ScaleSolution(ScalePair.uniform(scale), FitOutcome.SHRUNK, passes, current)
        return ScaleSolution(ScalePair.uniform(min_scale), FitOutcome.DEGRADED, passes)

    usage = base.total_height / usable_height
    if usage < SPARSE_USAGE:
        target = min(max_scale, 1 + (TARGET_USAGE - usage))
        grown = measure(target)
        passes += 1
        if fits(grown, usable_height):
            return ScaleSolution(ScalePair.uniform(target), FitOutcome.GROWN, passes, grown)
        return ScaleSolution(ScalePair.uniform((1.0 + target) / 2), FitOutcome.GROWN_MIDPOINT, passes)

    return ScaleSolution(ScalePair(), FitOutcome.FIT, passes, base)
