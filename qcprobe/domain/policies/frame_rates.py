# qcprobe/domain/policies/frame_rates.py
from __future__ import annotations

from typing import Optional, Tuple

STANDARD_TOLERANCE = 0.1
VFR_TOLERANCE = 0.1
HIGH_FRAME_RATE = 60.0

# (label, fps); labels get a "p" or "i" suffix
PROGRESSIVE_STANDARDS: Tuple[Tuple[str, float], ...] = (
    ("23.976", 23.976), ("24", 24.0), ("25", 25.0), ("29.97", 29.97), ("30", 30.0),
    ("48", 48.0), ("50", 50.0), ("59.94", 59.94), ("60", 60.0), ("96", 96.0),
    ("100", 100.0), ("120", 120.0), ("240", 240.0), ("480", 480.0), ("1000", 1000.0),
)
NON_INTERLACED_FIELD_ORDERS = frozenset({"progressive", "unknown"})
INTERLACED_RATES = frozenset({"25", "29.97", "30", "50", "59.94", "60"})

CATEGORY_BANDS: Tuple[Tuple[float, str], ...] = (
    (20.0, "Very Low Frame Rate"),
    (30.0, "Cinema Frame Rate"),
    (50.0, "Standard Frame Rate"),
    (100.0, "High Frame Rate"),
    (250.0, "Very High Frame Rate"),
)


def categorize_frame_rate(fps: float, interlaced: bool = False) -> str:
    """Nearest named standard within tolerance, else a formatted custom rate."""
    if fps <= 0:
        return "Unknown"
    best: Optional[Tuple[str, float]] = None
    for label, rate in PROGRESSIVE_STANDARDS:
        delta = abs(fps - rate)
        if delta <= STANDARD_TOLERANCE and (best is None or delta < best[1]):
            best = (label, delta)
    if best is None:
        return f"{fps:.3f}p"
    label = best[0]
    suffix = "i" if interlaced and label in INTERLACED_RATES else "p"
    return f"{label}{suffix}"


def frame_rate_category(fps: float) -> str:
    if fps <= 0:
        return "Unknown"
    for upper, name in CATEGORY_BANDS:
        if fps < upper:
            return name
    return "Ultra High Frame Rate"


def is_variable_frame_rate(real: float, average: float) -> bool:
    if real <= 0 or average <= 0:
        return False
    return abs(real - average) > VFR_TOLERANCE


def is_interlaced(field_order: Optional[str]) -> bool:
    # Metadata only; no field analysis
    return bool(field_order) and field_order not in NON_INTERLACED_FIELD_ORDERS
