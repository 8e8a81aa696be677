# qcprobe/services/imf/cpl.py
from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from qcprobe.common.logging import get_logger
from qcprobe.domain.dataclasses.analysis import CPLAnalysis
from qcprobe.domain.entities.composition import CompositionPlaylist, Resource, Segment, Track
from qcprobe.domain.enums.track_type import TrackType
from qcprobe.domain.errors import CompositionParseError
from qcprobe.domain.policies.composition_rules import infer_track_type, validate_composition

logger = get_logger()

DEFAULT_CPL_PATTERNS = ("CPL*.xml", "cpl*.xml")


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------
def find_cpl_files(package_dir: Path, patterns: Sequence[str] = DEFAULT_CPL_PATTERNS) -> List[Path]:
    """
    Candidate CPL files directly inside `package_dir`.
    Patterns are tried in order; matches of one pattern are sorted by name.
    A file matched by several patterns is listed once, at its first position.
    """
    found: List[Path] = []
    for pattern in patterns:
        for path in sorted(package_dir.glob(pattern)):
            if path.is_file() and path not in found:
                found.append(path)
    return found


# ---------------------------------------------------------------------------
# Parsing (namespace-agnostic: elements are matched by local name)
# ---------------------------------------------------------------------------
def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child(el: ET.Element, name: str) -> Optional[ET.Element]:
    for c in el:
        if _local(c.tag) == name:
            return c
    return None


def _children(el: Optional[ET.Element], name: str) -> List[ET.Element]:
    if el is None:
        return []
    return [c for c in el if _local(c.tag) == name]


def _text(el: ET.Element, name: str) -> str:
    c = _child(el, name)
    return (c.text or "").strip() if c is not None else ""


def _track_type(declared: Optional[str], track_id: str) -> TrackType:
    if declared:
        try:
            return TrackType(declared.strip().lower())
        except ValueError:
            pass
    return infer_track_type(track_id)


def _parse_resource(el: ET.Element) -> Resource:
    return Resource(
        id=_text(el, "Id"),
        edit_rate=_text(el, "EditRate"),
        intrinsic_duration=_text(el, "IntrinsicDuration"),
        entry_point=_text(el, "EntryPoint"),
        source_duration=_text(el, "SourceDuration"),
    )


def _parse_track(el: ET.Element) -> Track:
    track_id = _text(el, "TrackId") or _text(el, "Id")
    return Track(
        id=track_id,
        type=_track_type(el.get("type"), track_id),
        resources=tuple(_parse_resource(r) for r in _children(_child(el, "ResourceList"), "Resource")),
    )


def _parse_segment(el: ET.Element) -> Segment:
    sequences: Iterable[ET.Element] = []
    sequence_list = _child(el, "SequenceList")
    if sequence_list is not None:
        # Any *Sequence child is a virtual track (MainImageSequence, MainAudioSequence, ...)
        sequences = [c for c in sequence_list if _local(c.tag).endswith("Sequence")]
    return Segment(id=_text(el, "Id"), tracks=tuple(_parse_track(s) for s in sequences))


def parse_cpl_file(path: Path) -> CompositionPlaylist:
    """Read and parse one CPL document. Raises CompositionParseError."""
    logger.debug("Parsing CPL file %s", path)
    try:
        root = ET.parse(path).getroot()
    except OSError as e:
        raise CompositionParseError(f"failed to read CPL file {path}: {e}") from e
    except ET.ParseError as e:
        raise CompositionParseError(f"failed to parse CPL XML {path}: {e}") from e

    if _local(root.tag) != "CompositionPlaylist":
        raise CompositionParseError(f"{path} is not a CompositionPlaylist document (root <{_local(root.tag)}>)")

    return CompositionPlaylist(
        id=_text(root, "Id"),
        title=_text(root, "ContentTitleText") or _text(root, "ContentTitle"),
        edit_rate=_text(root, "EditRate"),
        total_duration=_text(root, "TotalRunningTime"),
        segments=tuple(_parse_segment(s) for s in _children(_child(root, "SegmentList"), "Segment")),
    )


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------
class CPLAnalyzer:
    """
    Locates the primary CPL of an IMF package, parses it and validates it.
    Only the first candidate is analyzed; every candidate is listed.
    """

    def __init__(self, patterns: Sequence[str] = DEFAULT_CPL_PATTERNS):
        self.patterns = tuple(patterns)

    def analyze(self, package_path: Path) -> CPLAnalysis:
        package_path = Path(package_path)
        candidates = find_cpl_files(package_path, self.patterns)
        analysis = CPLAnalysis(candidate_files=candidates)
        if not candidates:
            logger.info("No CPL found in %s", package_path)
            return analysis

        primary = candidates[0]
        if len(candidates) > 1:
            logger.info("Found %d CPL files in %s; analyzing %s", len(candidates), package_path, primary.name)

        cpl = parse_cpl_file(primary)
        self._summarize(analysis, primary, cpl)
        analysis.validation = validate_composition(cpl)

        logger.info(
            "CPL analysis completed: id=%s segments=%d track_types=%d",
            analysis.cpl_id, analysis.segment_count, analysis.virtual_track_count,
        )
        return analysis

    @staticmethod
    def _summarize(analysis: CPLAnalysis, path: Path, cpl: CompositionPlaylist) -> None:
        tracks = list(cpl.iter_tracks())
        analysis.cpl_exists = True
        analysis.cpl_file = path
        analysis.cpl_id = cpl.id
        analysis.title = cpl.title
        analysis.edit_rate = cpl.edit_rate
        analysis.duration = cpl.total_duration
        analysis.segment_count = len(cpl.segments)
        analysis.virtual_track_count = len(cpl.track_types())
        analysis.video_track_count = sum(1 for t in tracks if t.type == TrackType.video)
        analysis.audio_track_count = sum(1 for t in tracks if t.type == TrackType.audio)
        analysis.subtitle_track_count = sum(1 for t in tracks if t.type == TrackType.subtitle)
        analysis.segments = list(cpl.segments)
