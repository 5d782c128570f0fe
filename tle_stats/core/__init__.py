"""Public API for the decoder and aggregator primitives."""

from .aggregate import aggregate, render
from .decoder import decode, decode_frame, launch_year, split_frames
from .types import AggregateReport, DecodeResult, RawFrame, SatelliteRecord

__all__ = [
    "AggregateReport",
    "DecodeResult",
    "RawFrame",
    "SatelliteRecord",
    "aggregate",
    "decode",
    "decode_frame",
    "launch_year",
    "render",
    "split_frames",
]
