# Copyright 2025 - Oumi
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Folds a Google AI response stream into a single response."""

import inspect
from collections.abc import AsyncIterator

from google.genai import errors, types

from genai_bridge.core.converters.response_converter import convert_candidates
from genai_bridge.core.types.content_response import ContentResponse
from genai_bridge.core.types.exceptions import (
    APIResponseError,
    MultipleCandidatesInStreamError,
    NoContentInResponseError,
    StopStreaming,
    StreamingError,
)
from genai_bridge.core.types.streaming import StreamingFunc
from genai_bridge.utils.logging import logger


def merge_stream_candidate(
    candidate: types.Candidate, chunk_candidate: types.Candidate
) -> None:
    """Folds the candidate of one stream chunk into the running candidate.

    Parts are appended in order. Role, finish reason, safety ratings and citation
    metadata take the chunk's latest values. Token counts are added up.
    """
    if candidate.content is None:
        candidate.content = types.Content(parts=[])
    if candidate.content.parts is None:
        candidate.content.parts = []

    chunk_content = chunk_candidate.content
    if chunk_content is not None:
        candidate.content.parts.extend(chunk_content.parts or [])
        candidate.content.role = chunk_content.role
    candidate.finish_reason = chunk_candidate.finish_reason
    candidate.safety_ratings = chunk_candidate.safety_ratings
    candidate.citation_metadata = chunk_candidate.citation_metadata
    candidate.token_count = (candidate.token_count or 0) + (
        chunk_candidate.token_count or 0
    )


async def _deliver(streaming_func: StreamingFunc, text: str) -> None:
    result = streaming_func(text.encode("utf-8"))
    if inspect.isawaitable(result):
        await result


async def aggregate_stream(
    stream: AsyncIterator[types.GenerateContentResponse],
    streaming_func: StreamingFunc,
) -> ContentResponse:
    """Consumes a response stream, forwarding new text to `streaming_func`.

    Only single-candidate streams are supported: merging divergent candidate
    streams is not defined.

    Consumption ends at the natural end of the stream, or as soon as the callback
    raises `StopStreaming`; in that case no further chunk is read and the
    response accumulated so far is returned. The stream is closed whenever
    consumption ends.

    Args:
        stream: Async iterator over the streamed responses.
        streaming_func: Called with each text part, UTF-8 encoded, in order.

    Returns:
        ContentResponse: A response holding the single aggregated choice.

    Raises:
        MultipleCandidatesInStreamError: If a chunk carries more than one candidate.
        NoContentInResponseError: If a chunk carries no candidate at all.
        APIResponseError: If the API rejects the streamed request.
        StreamingError: If reading the stream fails before its end.
        UnknownPartInResponseError: If the aggregated candidate has non-text parts.
    """
    candidate = types.Candidate(content=types.Content(parts=[]))
    try:
        num_chunks, stopped = await _consume(stream, streaming_func, candidate)
    finally:
        # Releases the underlying HTTP response when consumption ends early.
        aclose = getattr(stream, "aclose", None)
        if aclose is not None:
            await aclose()

    if stopped:
        logger.debug(f"Streaming stopped by callback after {num_chunks} chunks.")
    else:
        logger.debug(f"Stream finished after {num_chunks} chunks.")
    return convert_candidates([candidate])


async def _consume(
    stream: AsyncIterator[types.GenerateContentResponse],
    streaming_func: StreamingFunc,
    candidate: types.Candidate,
) -> tuple[int, bool]:
    iterator = stream.__aiter__()
    num_chunks = 0

    while True:
        try:
            response = await iterator.__anext__()
        except StopAsyncIteration:
            return num_chunks, False
        except errors.APIError as e:
            # The vendor sends the request on the first read, so API errors
            # surface here rather than when the stream is opened.
            raise APIResponseError(f"Google AI API error: {e}") from e
        except Exception as e:
            raise StreamingError(f"Response stream failed: {e}") from e

        num_chunks += 1
        chunk_candidates = response.candidates or []
        if not chunk_candidates:
            raise NoContentInResponseError()
        if len(chunk_candidates) > 1:
            raise MultipleCandidatesInStreamError(len(chunk_candidates))

        chunk_candidate = chunk_candidates[0]
        merge_stream_candidate(candidate, chunk_candidate)

        chunk_parts = chunk_candidate.content.parts if chunk_candidate.content else None
        for part in chunk_parts or []:
            if part.text is None:
                continue
            try:
                await _deliver(streaming_func, part.text)
            except StopStreaming:
                return num_chunks, True
