# qcprobe/domain/policies/composition_rules.py
from __future__ import annotations

import re
from typing import Tuple

from qcprobe.common.logging import get_logger
from qcprobe.domain.dataclasses.reports import ValidationReport
from qcprobe.domain.entities.composition import CompositionPlaylist, Segment, Track
from qcprobe.domain.enums.track_type import TrackType

logger = get_logger()

UUID_PATTERN = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
TIMECODE_PATTERN = re.compile(r"^\d{2}:\d{2}:\d{2}:\d{2}$")
_INTEGER = re.compile(r"^[+-]?\d+$")
# at least one non-zero digit
_POSITIVE = re.compile(r"^\+?0*[1-9]\d*$")

KNOWN_EDIT_RATES: Tuple[float, ...] = (23.976, 24, 25, 29.97, 30, 48, 50, 59.94, 60)
EDIT_RATE_TOLERANCE = 0.001

# (needles, type) tested in order against the lower-cased track id
TRACK_TYPE_HINTS: Tuple[Tuple[Tuple[str, ...], TrackType], ...] = (
    (("video", "pict"), TrackType.video),
    (("audio", "sound"), TrackType.audio),
    (("subtitle", "text"), TrackType.subtitle),
)


def is_uuid(value: str) -> bool:
    return bool(UUID_PATTERN.match(value or ""))


def infer_track_type(track_id: str) -> TrackType:
    text = (track_id or "").lower()
    for needles, track_type in TRACK_TYPE_HINTS:
        if any(n in text for n in needles):
            return track_type
    return TrackType.unknown


def parse_edit_rate(edit_rate: str) -> float:
    """
    Parse an edit rate of the form "num/den" with positive integers.
    Raises ValueError describing what is wrong.
    """
    parts = edit_rate.split("/")
    if len(parts) != 2:
        raise ValueError("edit rate must be in format 'num/den'")
    num, den = parts
    if not _POSITIVE.match(num):
        raise ValueError("invalid numerator in edit rate")
    if not _POSITIVE.match(den):
        raise ValueError("invalid denominator in edit rate")
    try:
        return int(num) / int(den)
    except (ValueError, OverflowError):
        raise ValueError("edit rate out of range") from None


def is_known_edit_rate(rate: float) -> bool:
    return any(abs(rate - known) < EDIT_RATE_TOLERANCE for known in KNOWN_EDIT_RATES)


def is_valid_duration(duration: str) -> bool:
    """Frame count (non-negative integer) or HH:MM:SS:FF timecode."""
    if _INTEGER.match(duration):
        return not duration.startswith("-") or duration.strip("-0") == ""
    return bool(TIMECODE_PATTERN.match(duration))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def validate_composition(cpl: CompositionPlaylist) -> ValidationReport:
    """
    Structural, referential and numeric checks over the whole hierarchy.
    Every check runs; none short-circuits. Document-level failures are issues,
    segment/track/resource findings are recommendations.
    """
    report = ValidationReport()
    _validate_document(cpl, report)
    for index, segment in enumerate(cpl.segments):
        _validate_segment(index, segment, report)
    return report


def _validate_document(cpl: CompositionPlaylist, report: ValidationReport) -> None:
    if not is_uuid(cpl.id):
        report.add_issue("CPL ID is not a valid UUID")

    if cpl.edit_rate:
        try:
            rate = parse_edit_rate(cpl.edit_rate)
        except ValueError as e:
            report.add_issue(f"Invalid edit rate: {e}")
        else:
            if not is_known_edit_rate(rate):
                logger.warning("Unusual frame rate detected in CPL: %.3f", rate)
                report.add_recommendation(f"Unusual edit rate {cpl.edit_rate} ({rate:.3f} fps) in CPL")

    if cpl.total_duration and not is_valid_duration(cpl.total_duration):
        report.add_issue("Invalid duration: duration must be in frames or timecode format (HH:MM:SS:FF)")

    if not cpl.segments:
        report.add_issue("CPL must contain at least one segment")
    if not cpl.track_types():
        report.add_issue("CPL must contain at least one virtual track")


def _validate_segment(index: int, segment: Segment, report: ValidationReport) -> None:
    logger.debug("Analyzing CPL segment %d (%s), %d tracks", index, segment.id, len(segment.tracks))

    if not is_uuid(segment.id):
        logger.warning("Segment ID is not a valid UUID: %s", segment.id)
        report.add_recommendation(f"Segment {segment.id or index} ID is not a valid UUID")

    if not segment.tracks:
        logger.warning("Segment %s contains no tracks", segment.id)
        report.add_recommendation(f"Segment {segment.id or index} must contain at least one track")
        return

    for track in segment.tracks:
        _validate_track(track, report)


def _validate_track(track: Track, report: ValidationReport) -> None:
    if not track.resources:
        logger.warning("Track contains no resources: %s", track.id)
        report.add_recommendation(f"Track {track.id} contains no resources")
        return

    expected_rate = track.resources[0].edit_rate
    for resource in track.resources:
        if not is_uuid(resource.id):
            logger.warning("Resource asset ID is not a valid UUID: %s", resource.id)
            report.add_recommendation(f"Resource {resource.id} in track {track.id} is not a valid UUID")
        # drift is reported, never fatal
        if resource.edit_rate != expected_rate:
            logger.warning(
                "Edit rate inconsistency in track %s: expected %s, got %s (asset %s)",
                track.id, expected_rate, resource.edit_rate, resource.id,
            )
            report.add_recommendation(
                f"Track {track.id} edit rate inconsistency: resource {resource.id} uses "
                f"{resource.edit_rate}, expected {expected_rate}"
            )
