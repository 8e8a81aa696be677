# qcprobe/services/analyzers/bit_depth.py
from __future__ import annotations

from typing import Iterable

from qcprobe.common.logging import get_logger
from qcprobe.domain.dataclasses.analysis import BitDepthAnalysis
from qcprobe.domain.dataclasses.reports import ValidationReport
from qcprobe.domain.entities.probe import StreamInfo
from qcprobe.domain.enums.codec_type import CodecType
from qcprobe.domain.policies.resolution import resolve_audio_bit_depth, resolve_video_bit_depth

logger = get_logger()

HDR_TRANSFERS = frozenset({"smpte2084", "arib-std-b67"})
HDR_MIN_BIT_DEPTH = 10
HIGH_RES_AUDIO_ABOVE = 24


class BitDepthAnalyzer:
    """
    Resolves video and audio bit depth per stream and reports on the set.
    Stateless; safe to share between threads.
    """

    def analyze(self, streams: Iterable[StreamInfo]) -> BitDepthAnalysis:
        analysis = BitDepthAnalysis()
        hdr_signalled = False

        for stream in streams:
            kind = (stream.codec_type or "").lower()
            if kind == CodecType.video:
                depth = resolve_video_bit_depth(stream)
                analysis.video_streams[stream.index] = depth
                analysis.max_video_bit_depth = max(analysis.max_video_bit_depth, depth.value)
                if (stream.color_transfer or "").lower() in HDR_TRANSFERS:
                    hdr_signalled = True
            elif kind == CodecType.audio:
                depth = resolve_audio_bit_depth(stream)
                analysis.audio_streams[stream.index] = depth
                analysis.max_audio_bit_depth = max(analysis.max_audio_bit_depth, depth.value)

        analysis.is_hdr = analysis.max_video_bit_depth >= HDR_MIN_BIT_DEPTH or hdr_signalled
        analysis.is_high_bit_depth = analysis.max_video_bit_depth > 8 or analysis.max_audio_bit_depth > 16
        analysis.validation = self._validate(analysis)

        logger.debug(
            "Bit depth analysis: %d video, %d audio streams, max video %d, max audio %d",
            len(analysis.video_streams), len(analysis.audio_streams),
            analysis.max_video_bit_depth, analysis.max_audio_bit_depth,
        )
        return analysis

    @staticmethod
    def _validate(analysis: BitDepthAnalysis) -> ValidationReport:
        report = ValidationReport()

        for index, video in analysis.video_streams.items():
            if not video.is_consistent:
                report.add_issue(f"Video stream {index} has inconsistent bit depth indicators")
        for index, audio in analysis.audio_streams.items():
            if not audio.is_consistent:
                report.add_issue(f"Audio stream {index} has inconsistent bit depth indicators")

        if analysis.max_video_bit_depth >= HDR_MIN_BIT_DEPTH:
            report.add_recommendation(
                "High bit depth video detected - ensure delivery pipeline supports 10+ bit content"
            )
        if analysis.max_audio_bit_depth > HIGH_RES_AUDIO_ABOVE:
            report.add_recommendation(
                "High resolution audio detected - verify compatibility with target playback devices"
            )

        if analysis.max_video_bit_depth == 8 and analysis.is_hdr:
            report.add_issue("HDR content detected with 8-bit depth - HDR typically requires 10+ bit depth")

        return report
