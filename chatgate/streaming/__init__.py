"""Streaming layer: SSE codec, directive handling and the stream processor."""

from .sse import encode_data, encode_done, encode_event, split_frames, data_payloads
from .directives import parse_directive_block, extract_directive_blocks
from .display_filter import DirectiveDisplayFilter
from .persistence import schedule_persist, wait_for_pending_saves
from .processor import DirectiveStreamProcessor, process_upstream_stream
from .events import (
    error_event,
    report_events,
    refresh_events,
    navigation_event,
    conversation_event,
)

__all__ = [
    "DirectiveDisplayFilter",
    "DirectiveStreamProcessor",
    "conversation_event",
    "data_payloads",
    "encode_data",
    "encode_done",
    "encode_event",
    "error_event",
    "extract_directive_blocks",
    "navigation_event",
    "parse_directive_block",
    "process_upstream_stream",
    "refresh_events",
    "report_events",
    "schedule_persist",
    "split_frames",
    "wait_for_pending_saves",
]
