from pathlib import Path
from types import MappingProxyType

import pytest

from qcprobe.common.settings import FeatureFlags
from qcprobe.domain.entities.probe import FFprobeResult, FormatInfo, PacketInfo, ProbeErrorInfo
from qcprobe.domain.enums.error_severity import ErrorSeverity
from qcprobe.domain.enums.probe_step import ProbeStep
from qcprobe.domain.errors import ProbeError
from qcprobe.domain.policies.integrity_scoring import AVERROR_INVALIDDATA
from qcprobe.services.analyzers.integrity import DataIntegrityAnalyzer, extract_hashes


class FakeProbe:
    """Returns canned results per step; steps listed in `fail` raise ProbeError."""

    def __init__(self, results=None, fail=()):
        self.results = results or {}
        self.fail = set(fail)
        self.calls = []

    def probe(self, path: Path, step: ProbeStep) -> FFprobeResult:
        self.calls.append(step)
        if step in self.fail:
            raise ProbeError(f"{step} failed", stderr="boom", rc=1)
        return self.results.get(step, FFprobeResult())


def test_clean_evaluation():
    a = DataIntegrityAnalyzer().evaluate(hashes={"md5": "abc"})
    v = a.validation
    assert v.score == 100
    assert v.is_valid is True
    assert v.broadcast_compliant and v.streaming_compliant
    assert v.issues == [] and v.recommendations == [] and v.required_actions == []
    assert a.is_corrupted is False


def test_invalid_data_with_format_keyword():
    err = ProbeErrorInfo(code=AVERROR_INVALIDDATA, message="Invalid data: format not recognised")
    a = DataIntegrityAnalyzer().evaluate([err])
    assert a.errors[0].severity == ErrorSeverity.critical
    assert a.errors[0].type == "format_error"
    assert a.format_errors == 1
    assert a.bitstream_errors == 0
    # 100 - 30 - 20
    assert a.validation.score == 50
    assert a.is_corrupted is False
    assert a.validation.is_valid is False
    assert a.validation.issues == ["Low data integrity score detected", "1 format errors detected"]
    assert a.validation.required_actions == ["Fix format compliance issues"]
    assert "Generate data hashes for integrity verification" in a.validation.recommendations
    assert "Content may not meet broadcast standards" in a.validation.recommendations
    assert len(a.errors_by_severity(ErrorSeverity.critical)) == 1


def test_packets_count_and_continuity():
    packets = [PacketInfo(pts=10, dts=10), PacketInfo(pts=5, dts=11)]
    a = DataIntegrityAnalyzer().evaluate(packets=packets, hashes={"crc32": "1"})
    assert a.packet_errors == 2
    assert a.continuity_errors == 1
    # 100 - 2*5 - 10
    assert a.validation.score == 80
    # validity follows the score, even with a continuity issue listed
    assert a.validation.is_valid is True
    assert a.validation.issues == ["1 continuity errors detected"]
    assert a.validation.required_actions == ["Fix timestamp continuity issues"]
    assert a.validation.streaming_compliant is False


def test_analyze_runs_all_steps():
    probe = FakeProbe(results={
        ProbeStep.errors: FFprobeResult(error=ProbeErrorInfo(code=-22, message="bitstream glitch")),
        ProbeStep.hashes: FFprobeResult(format=FormatInfo(tags=MappingProxyType({"md5": "feed"}))),
        ProbeStep.packets: FFprobeResult(packets=(PacketInfo(pts=1, dts=1),)),
    })
    a = DataIntegrityAnalyzer(probe).analyze(Path("/media/x.mxf"))
    assert probe.calls == [ProbeStep.errors, ProbeStep.hashes, ProbeStep.packets]
    assert a.bitstream_errors == 1
    assert a.data_hashes == {"md5": "feed"}
    assert a.packet_errors == 1
    # 100 - 1 (warning) - 15 (bitstream) - 5 (packet)
    assert a.validation.score == 79


def test_failed_steps_are_skipped():
    probe = FakeProbe(fail={ProbeStep.errors, ProbeStep.hashes, ProbeStep.packets})
    a = DataIntegrityAnalyzer(probe).analyze(Path("/media/x.mxf"))
    assert a.errors == []
    assert a.validation.score == 100


def test_feature_flags_disable_optional_steps():
    probe = FakeProbe()
    flags = FeatureFlags(integrity_hashes=False, integrity_packets=False)
    DataIntegrityAnalyzer(probe, features=flags).analyze(Path("/media/x.mxf"))
    assert probe.calls == [ProbeStep.errors]


def test_analyze_without_probe_raises():
    with pytest.raises(ProbeError):
        DataIntegrityAnalyzer().analyze(Path("/media/x.mxf"))


def test_extract_hashes_prefers_data_hashes():
    r = FFprobeResult(
        format=FormatInfo(tags=MappingProxyType({"md5": "from-tags", "crc32": "c"})),
        data_hashes=MappingProxyType({"md5": "direct"}),
    )
    assert extract_hashes(r) == {"crc32": "c", "md5": "direct"}


def test_api_provider_is_evaluation_only():
    from qcprobe.services.api.deps import get_integrity_analyzer

    analyzer = get_integrity_analyzer()
    assert analyzer.probe is None
    assert analyzer.evaluate([], (), {}).validation.score == 100
    with pytest.raises(ProbeError):
        analyzer.analyze(Path("/media/x.mxf"))
