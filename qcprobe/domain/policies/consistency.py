# qcprobe/domain/policies/consistency.py
"""
Agreement checks over the full indicator set of one attribute.

Discrete attributes (bit depth) use exact match: any disagreement counts.
Continuous attributes (frame rate) are noisy, so only gross disagreement or an
implausible resolved value is flagged.
"""
from __future__ import annotations

from typing import Iterable

from qcprobe.domain.dataclasses.attributes import Indicator

MAX_RATE_RATIO = 2.0
MIN_RATE_RATIO = 0.5
MIN_PLAUSIBLE_FPS = 0.1
MAX_PLAUSIBLE_FPS = 1000.0


def exact_match_consistent(indicators: Iterable[Indicator]) -> bool:
    values = [i.value for i in indicators if i.value]
    if len(values) <= 1:
        # not enough data to disagree
        return True
    first = values[0]
    return all(v == first for v in values[1:])


def rate_ratio_consistent(real: float, average: float) -> bool:
    if real <= 0 or average <= 0:
        return True
    ratio = real / average
    return MIN_RATE_RATIO <= ratio <= MAX_RATE_RATIO


def plausible_frame_rate(effective: float) -> bool:
    return MIN_PLAUSIBLE_FPS <= effective <= MAX_PLAUSIBLE_FPS


def frame_rate_consistent(real: float, average: float, effective: float) -> bool:
    """Both the real/average ratio and the resolved rate must pass."""
    return rate_ratio_consistent(real, average) and plausible_frame_rate(effective)
