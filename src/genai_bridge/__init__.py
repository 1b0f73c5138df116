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


"""genai_bridge: a Google AI (Gemini) provider for LLM orchestration code.

The library translates a provider-agnostic message model into the `google-genai`
SDK's request types, calls the API (blocking or streaming) and translates the
answers back into a uniform `ContentResponse`.

Modules:
    - :mod:`~genai_bridge.core.types`: Messages, responses and exceptions.
    - :mod:`~genai_bridge.core.configs`: Provider and per-call parameters.
    - :mod:`~genai_bridge.core.converters`: Request and response converters.
    - :mod:`~genai_bridge.inference`: The Google AI inference engine.
    - :mod:`~genai_bridge.utils`: Logging, HTTP and image helpers.

Example:
    >>> from genai_bridge import GoogleAIInferenceEngine, MessageContent
    >>> from genai_bridge import ChatMessageType
    >>> engine = GoogleAIInferenceEngine(api_key="...")
    >>> response = engine.generate_content(
    ...     [MessageContent.from_text(ChatMessageType.HUMAN, "Hello")]
    ... )
    >>> print(response.choices[0].content)
"""

from genai_bridge.core.configs import GenerationParams, GoogleAIParams
from genai_bridge.core.types import (
    BinaryContent,
    ChatMessageType,
    ContentChoice,
    ContentResponse,
    ImageURLContent,
    MessageContent,
    StopStreaming,
    TextContent,
)
from genai_bridge.inference import GoogleAIInferenceEngine

__all__ = [
    "BinaryContent",
    "ChatMessageType",
    "ContentChoice",
    "ContentResponse",
    "GenerationParams",
    "GoogleAIInferenceEngine",
    "GoogleAIParams",
    "ImageURLContent",
    "MessageContent",
    "StopStreaming",
    "TextContent",
]
