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


"""Custom exceptions for the genai_bridge library.

Every error raised by the Google AI provider derives from `GenAIBridgeError`, so
callers can catch the whole family at once or branch on a specific subclass.

Exception Hierarchy:
    GenAIBridgeError (base for all user-facing errors)
    ├── ConfigurationError (invalid or missing configuration)
    ├── UnsupportedInputError (input the provider cannot translate)
    │   ├── UnsupportedRoleError (message role has no vendor counterpart)
    │   │   └── SystemRoleNotSupportedError (system messages)
    │   ├── UnsupportedContentError (unknown content part kind)
    │   └── UnknownPartInResponseError (non-text part in a response)
    ├── ResponseShapeError (payload doesn't have the expected shape)
    │   ├── NoContentInResponseError (no candidates returned)
    │   ├── MultipleCandidatesInStreamError (>1 candidate in a stream chunk)
    │   └── InvalidMimeTypeError (malformed `Content-Type` on an image)
    └── RemoteServiceError (external service communication)
        ├── APIResponseError (the vendor API returned an error)
        ├── ImageDownloadError (an image URL could not be fetched)
        ├── StreamingError (the response stream broke mid-way)
        └── EmbeddingError (an embedding call failed)

    StopStreaming (raised by streaming callbacks to stop consumption)
"""

from typing import Optional


class GenAIBridgeError(Exception):
    """Base class for user-facing errors raised by this library."""

    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(GenAIBridgeError):
    """Raised when the provider can't be configured.

    Example:
        raise ConfigurationError(
            "No API key provided. Pass `api_key` or set GOOGLE_API_KEY."
        )
    """

    pass


# =============================================================================
# Unsupported Input Errors
# =============================================================================


class UnsupportedInputError(GenAIBridgeError):
    """Base class for inputs that can't be translated to the vendor format."""

    pass


class UnsupportedRoleError(UnsupportedInputError):
    """A message role has no counterpart in the vendor API.

    Also raised when a role is valid in general but not in its position, e.g.
    the last message of a chat must come from the user.
    """

    pass


class SystemRoleNotSupportedError(UnsupportedRoleError):
    """System messages aren't supported by this provider yet."""

    def __init__(self, message: str = "system role isn't supported yet"):
        """Initializes the error with a default message."""
        super().__init__(message)


class UnsupportedContentError(UnsupportedInputError):
    """A content part has a kind this provider doesn't know about."""

    pass


class UnknownPartInResponseError(UnsupportedInputError):
    """The model answered with a part that isn't plain text."""

    def __init__(self, message: str = "unknown part type in generation response"):
        """Initializes the error with a default message."""
        super().__init__(message)


# =============================================================================
# Response Shape Errors
# =============================================================================


class ResponseShapeError(GenAIBridgeError):
    """Base class for payloads that violate the expected protocol shape."""

    pass


class NoContentInResponseError(ResponseShapeError):
    """A blocking generation call returned no candidates."""

    def __init__(self, message: str = "no content in generation response"):
        """Initializes the error with a default message."""
        super().__init__(message)


class MultipleCandidatesInStreamError(ResponseShapeError):
    """A streaming chunk carried more than one candidate.

    Divergent candidate streams can't be merged into a single response.
    """

    def __init__(self, num_candidates: int):
        """Initializes the error.

        Args:
            num_candidates: The number of candidates found in the chunk.
        """
        super().__init__(
            f"expect single candidate in stream mode; got {num_candidates}"
        )
        self.num_candidates = num_candidates


class InvalidMimeTypeError(ResponseShapeError):
    """An image was served with a `Content-Type` that isn't `type/subtype`."""

    def __init__(self, mime_type: Optional[str] = None):
        """Initializes the error.

        Args:
            mime_type: The offending MIME type, if any.
        """
        super().__init__(f"invalid mime type on content: {mime_type!r}")
        self.mime_type = mime_type


# =============================================================================
# Remote Service Errors
# =============================================================================


class RemoteServiceError(GenAIBridgeError):
    """Base class for errors talking to a remote service."""

    pass


class APIResponseError(RemoteServiceError):
    """The Google AI API returned an error response."""

    pass


class ImageDownloadError(RemoteServiceError, OSError):
    """An image referenced by URL could not be downloaded or read."""

    pass


class StreamingError(RemoteServiceError):
    """The response stream failed before reaching its natural end."""

    pass


class EmbeddingError(RemoteServiceError):
    """An embedding call failed.

    The vectors computed before the failure are kept in `embeddings`, in input
    order, so callers can decide what to do with a partial result.
    """

    def __init__(self, message: str, embeddings: Optional[list[list[float]]] = None):
        """Initializes the error.

        Args:
            message: Description of the failure.
            embeddings: Embeddings collected before the failure.
        """
        super().__init__(message)
        self.embeddings: list[list[float]] = embeddings or []


# =============================================================================
# Control Flow
# =============================================================================


class StopStreaming(Exception):
    """Raised by a streaming callback to stop consuming the response stream.

    This is not an error: the generation call returns the response accumulated
    so far.
    """

    pass
