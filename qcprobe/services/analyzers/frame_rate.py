# qcprobe/services/analyzers/frame_rate.py
from __future__ import annotations

from typing import Dict, Iterable

from qcprobe.common.logging import get_logger
from qcprobe.domain.dataclasses.analysis import FrameRateAnalysis
from qcprobe.domain.dataclasses.attributes import VideoFrameRate
from qcprobe.domain.dataclasses.reports import ValidationReport
from qcprobe.domain.entities.probe import StreamInfo
from qcprobe.domain.enums.codec_type import CodecType
from qcprobe.domain.policies.frame_rates import HIGH_FRAME_RATE, STANDARD_TOLERANCE
from qcprobe.domain.policies.resolution import resolve_frame_rate

logger = get_logger()

VERY_LOW_FPS = 5.0
EXTREME_FPS = 500.0
PULLDOWN_FPS = 23.976
NTSC_FPS = 29.97


class FrameRateAnalyzer:
    """Resolves the effective frame rate of every video stream and reports on the set."""

    def analyze(self, streams: Iterable[StreamInfo]) -> FrameRateAnalysis:
        analysis = FrameRateAnalysis()

        for stream in streams:
            if (stream.codec_type or "").lower() != CodecType.video:
                continue
            rate = resolve_frame_rate(stream)
            analysis.video_streams[stream.index] = rate

            fps = float(rate.value)
            analysis.max_frame_rate = max(analysis.max_frame_rate, fps)
            if analysis.min_frame_rate == 0 or fps < analysis.min_frame_rate:
                analysis.min_frame_rate = fps
            if not analysis.primary_standard:
                analysis.primary_standard = rate.standard

        rates = analysis.video_streams
        analysis.is_variable_frame_rate = any(r.is_variable_frame_rate for r in rates.values())
        analysis.is_high_frame_rate = analysis.max_frame_rate >= HIGH_FRAME_RATE
        analysis.has_multiple_frame_rates = _has_multiple_frame_rates(rates)
        analysis.is_interlaced = any(r.is_interlaced for r in rates.values())
        analysis.validation = self._validate(analysis)

        logger.debug(
            "Frame rate analysis: %d video streams, %.3f-%.3f fps, primary %s",
            len(rates), analysis.min_frame_rate, analysis.max_frame_rate, analysis.primary_standard or "-",
        )
        return analysis

    @staticmethod
    def _validate(analysis: FrameRateAnalysis) -> ValidationReport:
        report = ValidationReport()

        for index, rate in analysis.video_streams.items():
            fps = float(rate.value)
            if not rate.is_consistent:
                report.add_issue(f"Video stream {index} has inconsistent frame rate metadata")
            if 0 < fps < VERY_LOW_FPS:
                report.add_issue(f"Video stream {index} has very low frame rate: {fps:.3f} fps")
            elif fps > EXTREME_FPS:
                report.add_issue(f"Video stream {index} has extremely high frame rate: {fps:.3f} fps")
            if rate.is_variable_frame_rate:
                report.add_recommendation(
                    f"Video stream {index} uses variable frame rate - consider converting to "
                    "constant frame rate for better compatibility"
                )

        if analysis.is_high_frame_rate:
            report.add_recommendation(
                "High frame rate content detected - ensure delivery infrastructure supports HFR playback"
            )
        if analysis.has_multiple_frame_rates:
            report.add_recommendation(
                "Multiple frame rates detected - verify this is intentional for adaptive streaming"
            )
        if analysis.is_interlaced:
            report.add_recommendation(
                "Interlaced content detected - consider deinterlacing for modern viewing devices"
            )

        for index, rate in analysis.video_streams.items():
            fps = float(rate.value)
            if abs(fps - PULLDOWN_FPS) < STANDARD_TOLERANCE:
                report.add_recommendation(
                    f"Video stream {index} uses 23.976 fps - ensure proper pulldown handling for broadcast"
                )
            if abs(fps - NTSC_FPS) < STANDARD_TOLERANCE:
                report.add_recommendation(f"Video stream {index} uses 29.97 fps - verify NTSC compatibility")

        return report


def _has_multiple_frame_rates(rates: Dict[int, VideoFrameRate]) -> bool:
    values = [float(r.value) for r in rates.values()]
    if len(values) <= 1:
        return False
    first = values[0]
    return any(abs(v - first) > STANDARD_TOLERANCE for v in values[1:])
