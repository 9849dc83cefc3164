"""Unit tests for the streaming directive processor."""

from __future__ import annotations

import asyncio
from typing import Any

import orjson

from chatgate.state.executor import ExecutionReport
from chatgate.streaming.processor import DirectiveStreamProcessor, process_upstream_stream


class _RecordingExecutor:
    def __init__(self, navigation: str | None = None, fail: bool = False) -> None:
        self.calls: list[list[dict[str, Any]]] = []
        self.navigation = navigation
        self.fail = fail

    async def execute(self, actions: list[dict[str, Any]], user_id: str, workspace_id: str | None) -> ExecutionReport:
        self.calls.append(actions)
        if self.fail:
            raise RuntimeError("executor exploded")
        results = [{"action": action.get("k")} for action in actions]
        return ExecutionReport(results=results, navigation=self.navigation)


class _RecordingStore:
    def __init__(self) -> None:
        self.saved: list[tuple[str, str, str]] = []

    async def save_assistant_message(self, user_id: str, conversation_id: str, text: str) -> None:
        self.saved.append((user_id, conversation_id, text))


def _delta(content: str) -> str:
    event = {"id": "c1", "object": "chat.completion.chunk", "choices": [{"index": 0, "delta": {"content": content}}]}
    return f"data: {orjson.dumps(event).decode()}\n\n"


async def _chunks(parts: list[bytes]):
    for part in parts:
        yield part


def _collect(parts: list[bytes], executor: Any, **kwargs: Any) -> list[str]:
    async def scenario() -> list[str]:
        processor = DirectiveStreamProcessor(executor, user_id="u1", workspace_id="ws-1")
        frames = [frame async for frame in process_upstream_stream(_chunks(parts), processor, user_id="u1", **kwargs)]
        # let scheduled persistence run
        await asyncio.sleep(0)
        return frames

    return asyncio.run(scenario())


def _events(frames: list[str]) -> list[Any]:
    out: list[Any] = []
    for frame in frames:
        payload = frame[len("data: "):].strip()
        out.append(payload if payload == "[DONE]" else orjson.loads(payload))
    return out


def _visible(events: list[Any]) -> str:
    return "".join(
        event["choices"][0]["delta"]["content"]
        for event in events
        if isinstance(event, dict) and "choices" in event
    )


def test_marker_split_across_chunks() -> None:
    executor = _RecordingExecutor()
    first = _delta("Done.<claw")
    second = _delta('dos>{"actions":[{"k":"task.complete","taskId":"t1"}]}</clawdos>') + "data: [DONE]\n\n"
    events = _events(_collect([first.encode(), second.encode()], executor))

    assert _visible(events) == "Done."
    assert executor.calls == [[{"k": "task.complete", "taskId": "t1"}]]
    done_at = events.index("[DONE]")
    assert events[done_at + 1:] == [{"type": "task.refresh", "actions": [{"action": "task.complete"}]}]


def test_frames_split_mid_frame_are_reassembled() -> None:
    executor = _RecordingExecutor()
    body = (_delta("Hel") + _delta("lo") + "data: [DONE]\n\n").encode()
    parts = [body[:7], body[7:40], body[40:]]
    events = _events(_collect(parts, executor))
    assert _visible(events) == "Hello"
    assert events[-1] == "[DONE]"
    assert executor.calls == []


def test_multibyte_characters_split_across_chunks() -> None:
    body = (_delta("Привет") + "data: [DONE]\n\n").encode()
    cut = body.index("Привет".encode()) + 1
    events = _events(_collect([body[:cut], body[cut:]], _RecordingExecutor()))
    assert _visible(events) == "Привет"


def test_conversation_id_comes_first_and_text_is_persisted() -> None:
    store = _RecordingStore()
    executor = _RecordingExecutor()
    body = (_delta('Ok.<clawdos>{"actions":[{"k":"navigate","to":"/news"}]}</clawdos>') + "data: [DONE]\n\n").encode()
    events = _events(_collect([body], executor, conversation_id="conv-1", store=store))
    assert events[0] == {"type": "conversationId", "id": "conv-1"}
    assert store.saved == [("u1", "conv-1", "Ok.")]


def test_navigation_and_refresh_events_follow_sentinel() -> None:
    executor = _RecordingExecutor(navigation="/tasks")
    block = '<clawdos>{"actions":[{"k":"navigate","to":"/tasks"},{"k":"news.source.add"},{"k":"task.create"}]}</clawdos>'
    body = (_delta(block) + "data: [DONE]\n\n").encode()
    events = _events(_collect([body], executor))
    done_at = events.index("[DONE]")
    assert events[done_at + 1:] == [
        {"type": "navigation", "target": "/tasks"},
        {"type": "task.refresh", "actions": [{"action": "task.create"}]},
        {"type": "news.refresh", "actions": [{"action": "news.source.add"}]},
    ]


def test_body_without_sentinel_is_terminated() -> None:
    executor = _RecordingExecutor()
    body = _delta('Hi<clawdos>{"actions":[{"k":"task.reopen"}]}</clawdos>').rstrip("\n").encode()
    events = _events(_collect([body], executor))
    assert _visible(events) == "Hi"
    assert events[-2] == "[DONE]"
    assert executor.calls == [[{"k": "task.reopen"}]]


def test_non_text_and_non_json_payloads_pass_through() -> None:
    processor = DirectiveStreamProcessor(_RecordingExecutor(), user_id="u1", workspace_id=None)
    frames = processor.feed('data: {"usage":{"tokens":3}}\n\ndata: keepalive\n\ndata:\n\n')
    assert frames == ['data: {"usage":{"tokens":3}}\n\n', "data: keepalive\n\n"]
    assert not processor.done


def test_input_after_sentinel_is_ignored() -> None:
    processor = DirectiveStreamProcessor(_RecordingExecutor(), user_id="u1", workspace_id=None)
    frames = processor.feed("data: [DONE]\n\n" + _delta("late"))
    assert frames == ["data: [DONE]\n\n"]
    assert processor.feed(_delta("later")) == []
    assert processor.visible_text == ""


def test_raw_accumulator_keeps_most_recent_text() -> None:
    processor = DirectiveStreamProcessor(_RecordingExecutor(), user_id="u1", workspace_id=None, max_raw_chars=10)
    for piece in ("0123456789", "abcdef", "XYZ"):
        processor.feed(_delta(piece))
        assert len(processor.buffer.raw) <= 10
    assert processor.buffer.raw == "3456789abcdefXYZ"[-10:]


def test_trailing_block_survives_raw_cap() -> None:
    executor = _RecordingExecutor()
    filler = "".join(_delta("x" * 1000) for _ in range(70))
    block = '<clawdos>{"actions":[{"k":"task.create","title":"t"}]}</clawdos>'
    body = filler + _delta(block[:20]) + _delta(block[20:]) + "data: [DONE]\n\n"
    events = _events(_collect([body.encode()], executor))
    assert executor.calls == [[{"k": "task.create", "title": "t"}]]
    assert events[-1] == {"type": "task.refresh", "actions": [{"action": "task.create"}]}


def test_directives_run_once() -> None:
    executor = _RecordingExecutor()
    processor = DirectiveStreamProcessor(executor, user_id="u1", workspace_id=None)
    processor.feed(_delta('<clawdos>{"actions":[{"k":"task.delete"}]}</clawdos>') + "data: [DONE]\n\n")

    async def scenario() -> None:
        await processor.run_directives()
        assert await processor.run_directives() == []

    asyncio.run(scenario())
    assert len(executor.calls) == 1


def test_processing_fault_emits_one_generic_error() -> None:
    executor = _RecordingExecutor(fail=True)
    body = (_delta('x<clawdos>{"actions":[{"k":"task.delete"}]}</clawdos>') + "data: [DONE]\n\n").encode()
    events = _events(_collect([body], executor))
    assert events[-1] == {"type": "error", "message": "Stream processing failed"}
    assert events.count("[DONE]") == 1
