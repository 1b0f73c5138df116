from unittest.mock import AsyncMock

import pytest
from google.genai import errors, types

from genai_bridge.core.types.exceptions import (
    APIResponseError,
    MultipleCandidatesInStreamError,
    NoContentInResponseError,
    StopStreaming,
    StreamingError,
)
from genai_bridge.inference.stream_aggregator import (
    aggregate_stream,
    merge_stream_candidate,
)


def _get_chunk(*texts: str, finish_reason=None, token_count=None):
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model", parts=[types.Part(text=text) for text in texts]
                ),
                finish_reason=finish_reason,
                token_count=token_count,
            )
        ]
    )


class _RecordingStream:
    """Async iterator over chunks that records how many were read."""

    def __init__(self, chunks, error=None):
        self._chunks = list(chunks)
        self._error = error
        self.num_reads = 0
        self.closed = False

    async def aclose(self):
        self.closed = True

    def __aiter__(self):
        return self

    async def __anext__(self):
        self.num_reads += 1
        if self._chunks:
            return self._chunks.pop(0)
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration


class TestAggregateStream:
    @pytest.mark.asyncio
    async def test_aggregates_text(self):
        received = []
        stream = _RecordingStream(
            [
                _get_chunk("A", token_count=1),
                _get_chunk("B", token_count=2),
                _get_chunk("C", finish_reason=types.FinishReason.STOP, token_count=3),
            ]
        )

        response = await aggregate_stream(stream, received.append)

        assert received == [b"A", b"B", b"C"]
        assert len(response.choices) == 1
        assert response.choices[0].content == "ABC"
        assert response.choices[0].stop_reason == "STOP"

    @pytest.mark.asyncio
    async def test_async_callback(self):
        callback = AsyncMock()
        stream = _RecordingStream([_get_chunk("Hello"), _get_chunk(" world")])

        response = await aggregate_stream(stream, callback)

        assert [call.args[0] for call in callback.await_args_list] == [
            b"Hello",
            b" world",
        ]
        assert response.choices[0].content == "Hello world"

    @pytest.mark.asyncio
    async def test_multiple_candidates(self):
        chunk = types.GenerateContentResponse(
            candidates=[
                types.Candidate(content=types.Content(parts=[types.Part(text="x")])),
                types.Candidate(content=types.Content(parts=[types.Part(text="y")])),
            ]
        )
        received = []
        stream = _RecordingStream([chunk, _get_chunk("never read")])

        with pytest.raises(MultipleCandidatesInStreamError, match="got 2"):
            await aggregate_stream(stream, received.append)
        assert stream.num_reads == 1
        assert received == []

    @pytest.mark.asyncio
    async def test_chunk_without_candidates(self):
        stream = _RecordingStream([types.GenerateContentResponse(candidates=[])])

        with pytest.raises(NoContentInResponseError):
            await aggregate_stream(stream, lambda chunk: None)

    @pytest.mark.asyncio
    async def test_stop_streaming_returns_partial_response(self):
        received = []

        def _callback(chunk: bytes):
            received.append(chunk)
            if len(received) == 2:
                raise StopStreaming()

        stream = _RecordingStream(
            [_get_chunk("A"), _get_chunk("B"), _get_chunk("C"), _get_chunk("D")]
        )

        response = await aggregate_stream(stream, _callback)

        assert received == [b"A", b"B"]
        assert response.choices[0].content == "AB"
        assert stream.num_reads == 2

    @pytest.mark.asyncio
    async def test_callback_error_propagates(self):
        def _callback(chunk: bytes):
            raise RuntimeError("callback failed")

        with pytest.raises(RuntimeError, match="callback failed"):
            await aggregate_stream(_RecordingStream([_get_chunk("A")]), _callback)

    @pytest.mark.asyncio
    async def test_iterator_error(self):
        error = ConnectionError("stream reset")
        stream = _RecordingStream([_get_chunk("A")], error=error)

        with pytest.raises(StreamingError) as exc_info:
            await aggregate_stream(stream, lambda chunk: None)
        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        response = await aggregate_stream(_RecordingStream([]), lambda chunk: None)

        assert response.choices[0].content == ""
        assert response.choices[0].stop_reason == "FINISH_REASON_UNSPECIFIED"

    @pytest.mark.asyncio
    async def test_utf8_encoding(self):
        received = []
        stream = _RecordingStream([_get_chunk("héllo")])

        await aggregate_stream(stream, received.append)

        assert received == ["héllo".encode()]

    @pytest.mark.asyncio
    async def test_api_error_on_first_read(self):
        error = errors.ClientError(
            404, {"error": {"code": 404, "message": "not found", "status": "NOT_FOUND"}}
        )
        stream = _RecordingStream([], error=error)

        with pytest.raises(APIResponseError) as exc_info:
            await aggregate_stream(stream, lambda chunk: None)
        assert exc_info.value.__cause__ is error
        assert stream.closed

    @pytest.mark.asyncio
    async def test_stream_closed_after_stop_streaming(self):
        def _callback(chunk: bytes):
            raise StopStreaming()

        stream = _RecordingStream([_get_chunk("A"), _get_chunk("B")])

        await aggregate_stream(stream, _callback)

        assert stream.closed
        assert stream.num_reads == 1

    @pytest.mark.asyncio
    async def test_stream_closed_after_shape_error(self):
        stream = _RecordingStream([types.GenerateContentResponse(candidates=[])])

        with pytest.raises(NoContentInResponseError):
            await aggregate_stream(stream, lambda chunk: None)
        assert stream.closed

    @pytest.mark.asyncio
    async def test_stream_closed_at_natural_end(self):
        stream = _RecordingStream([_get_chunk("A")])

        await aggregate_stream(stream, lambda chunk: None)

        assert stream.closed

    @pytest.mark.asyncio
    async def test_stream_without_aclose(self):
        async def _chunks():
            yield _get_chunk("A")

        class _PlainIterator:
            def __init__(self):
                self._inner = _chunks()

            def __aiter__(self):
                return self

            async def __anext__(self):
                return await self._inner.__anext__()

        response = await aggregate_stream(_PlainIterator(), lambda chunk: None)

        assert response.choices[0].content == "A"


def test_merge_stream_candidate():
    candidate = types.Candidate(content=types.Content(parts=[]))
    safety_ratings = [
        types.SafetyRating(
            category=types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
            probability=types.HarmProbability.LOW,
        )
    ]

    merge_stream_candidate(
        candidate,
        _get_chunk("A", token_count=4).candidates[0],
    )
    merge_stream_candidate(
        candidate,
        types.Candidate(
            content=types.Content(role="model", parts=[types.Part(text="B")]),
            finish_reason=types.FinishReason.MAX_TOKENS,
            safety_ratings=safety_ratings,
        ),
    )

    assert [part.text for part in candidate.content.parts] == ["A", "B"]
    assert candidate.content.role == "model"
    assert candidate.finish_reason == types.FinishReason.MAX_TOKENS
    assert candidate.safety_ratings == safety_ratings
    assert candidate.token_count == 4


def test_merge_stream_candidate_sums_token_counts():
    candidate = types.Candidate(content=types.Content(parts=[]))

    for token_count in (1, 2, 3):
        merge_stream_candidate(
            candidate, _get_chunk("x", token_count=token_count).candidates[0]
        )

    assert candidate.token_count == 6
