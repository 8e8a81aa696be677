from __future__ import annotations
from enum import StrEnum

class ProbeStep(StrEnum):
    errors = "errors"    # -show_error with error detection enabled
    hashes = "hashes"    # -show_data_hash
    packets = "packets"  # -show_packets
