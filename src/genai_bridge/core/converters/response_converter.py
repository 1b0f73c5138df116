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


"""Converts Google AI SDK candidates into the uniform `ContentResponse`."""

from collections.abc import Sequence
from typing import Optional

from google.genai import types

from genai_bridge.core.types.content_response import (
    CITATIONS,
    SAFETY,
    ContentChoice,
    ContentResponse,
)
from genai_bridge.core.types.exceptions import UnknownPartInResponseError


def finish_reason_to_str(finish_reason: Optional[types.FinishReason]) -> str:
    """Returns the canonical display string of a finish reason, e.g. "STOP"."""
    if finish_reason is None:
        return types.FinishReason.FINISH_REASON_UNSPECIFIED.value
    if isinstance(finish_reason, types.FinishReason):
        return finish_reason.value
    return str(finish_reason)


def convert_candidate(candidate: types.Candidate) -> ContentChoice:
    """Converts a single candidate into a choice.

    Raises:
        UnknownPartInResponseError: If the candidate holds a non-text part.
    """
    texts: list[str] = []
    parts = candidate.content.parts if candidate.content else None
    for part in parts or []:
        if part.text is None:
            raise UnknownPartInResponseError()
        texts.append(part.text)

    return ContentChoice(
        content="".join(texts),
        stop_reason=finish_reason_to_str(candidate.finish_reason),
        generation_info={
            CITATIONS: candidate.citation_metadata,
            SAFETY: candidate.safety_ratings,
        },
    )


def convert_candidates(candidates: Sequence[types.Candidate]) -> ContentResponse:
    """Converts a sequence of candidates into a response, one choice per candidate.

    Responses are assumed to be text-only: any other part type fails the whole
    conversion and no partial response is returned.

    Args:
        candidates: The candidates, in the order the model produced them.

    Returns:
        ContentResponse: A response whose choices follow the candidates' order.

    Raises:
        UnknownPartInResponseError: If any candidate holds a non-text part.
    """
    return ContentResponse(
        choices=[convert_candidate(candidate) for candidate in candidates]
    )
