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


"""Types module for the genai_bridge library.

This module provides the message, response and exception types shared by every
provider.

Exceptions:
    :class:`GenAIBridgeError`: Base class for user-facing errors.
    :class:`ConfigurationError`: Configuration-related errors.
    :class:`UnsupportedRoleError`: Message role can't be sent to the vendor.
    :class:`SystemRoleNotSupportedError`: System messages aren't supported.
    :class:`UnknownPartInResponseError`: Non-text part in a response.
    :class:`NoContentInResponseError`: Response without candidates.
    :class:`MultipleCandidatesInStreamError`: Ambiguous streaming chunk.
    :class:`InvalidMimeTypeError`: Malformed image MIME type.
    :class:`RemoteServiceError`: External service communication errors.
    :class:`StopStreaming`: Raised by streaming callbacks to stop a stream.
"""

from genai_bridge.core.types.content_response import (
    CITATIONS,
    SAFETY,
    ContentChoice,
    ContentResponse,
)
from genai_bridge.core.types.conversation import (
    BinaryContent,
    ChatMessageType,
    ContentPart,
    ImageURLContent,
    MessageContent,
    TextContent,
)
from genai_bridge.core.types.exceptions import (
    APIResponseError,
    ConfigurationError,
    EmbeddingError,
    GenAIBridgeError,
    ImageDownloadError,
    InvalidMimeTypeError,
    MultipleCandidatesInStreamError,
    NoContentInResponseError,
    RemoteServiceError,
    ResponseShapeError,
    StopStreaming,
    StreamingError,
    SystemRoleNotSupportedError,
    UnknownPartInResponseError,
    UnsupportedContentError,
    UnsupportedInputError,
    UnsupportedRoleError,
)
from genai_bridge.core.types.streaming import StreamingFunc

__all__ = [
    # Exceptions
    "GenAIBridgeError",
    "ConfigurationError",
    "UnsupportedInputError",
    "UnsupportedRoleError",
    "SystemRoleNotSupportedError",
    "UnsupportedContentError",
    "UnknownPartInResponseError",
    "ResponseShapeError",
    "NoContentInResponseError",
    "MultipleCandidatesInStreamError",
    "InvalidMimeTypeError",
    "RemoteServiceError",
    "APIResponseError",
    "ImageDownloadError",
    "StreamingError",
    "EmbeddingError",
    "StopStreaming",
    # Conversation types
    "BinaryContent",
    "ChatMessageType",
    "ContentPart",
    "ImageURLContent",
    "MessageContent",
    "TextContent",
    # Response types
    "CITATIONS",
    "SAFETY",
    "ContentChoice",
    "ContentResponse",
    "StreamingFunc",
]
