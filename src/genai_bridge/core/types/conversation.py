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


import base64
from enum import Enum
from typing import Annotated, Literal, Union

import pydantic


class ChatMessageType(str, Enum):
    """Role of the entity sending a message."""

    SYSTEM = "system"
    """Represents a system message."""

    HUMAN = "human"
    """Represents a message written by a human user."""

    AI = "ai"
    """Represents a message produced by the model."""

    GENERIC = "generic"
    """Represents a message from an unspecified speaker."""

    FUNCTION = "function"
    """Represents the result of a function call."""

    def __str__(self) -> str:
        """Return the string representation of the ChatMessageType enum.

        Returns:
            str: The string value of the ChatMessageType enum.
        """
        return self.value


class TextContent(pydantic.BaseModel):
    """A plain text content part."""

    model_config = pydantic.ConfigDict(frozen=True)

    type: Literal["text"] = "text"

    text: str
    """The text."""

    def __repr__(self) -> str:
        """Returns a string representation of the part."""
        return self.text


class BinaryContent(pydantic.BaseModel):
    """Raw bytes with an explicit MIME type, e.g. an inline PNG image."""

    model_config = pydantic.ConfigDict(frozen=True)

    type: Literal["binary"] = "binary"

    mime_type: str
    """MIME type of the payload, e.g. ``image/png``. Not validated here."""

    data: bytes
    """The raw payload."""

    @pydantic.field_serializer("data")
    def _encode_data(self, value: bytes) -> str:
        """Encode binary value as base64 ASCII string.

        This is needed for compatibility with JSON.
        """
        if len(value) == 0:
            return ""
        return base64.b64encode(value).decode("ascii")

    @pydantic.field_validator("data", mode="before")
    def _decode_data(cls, value: Union[str, bytes]) -> bytes:
        if isinstance(value, str):
            return base64.b64decode(value)
        return value

    def __repr__(self) -> str:
        """Returns a string representation of the part."""
        return f"<BINARY {self.mime_type} ({len(self.data)} bytes)>"


class ImageURLContent(pydantic.BaseModel):
    """An image referenced by URL. It is downloaded when the message is sent."""

    model_config = pydantic.ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"

    url: str
    """HTTP(S) URL of the image."""

    @pydantic.field_validator("url")
    def _check_url(cls, value: str) -> str:
        if not value:
            raise ValueError("Image URL must not be empty.")
        return value

    def __repr__(self) -> str:
        """Returns a string representation of the part."""
        return f"<IMAGE_URL {self.url}>"


ContentPart = Annotated[
    Union[TextContent, BinaryContent, ImageURLContent],
    pydantic.Field(discriminator="type"),
]
"""A unit of message content. The set of part kinds is closed."""


class MessageContent(pydantic.BaseModel):
    """A message: a role plus an ordered sequence of content parts."""

    model_config = pydantic.ConfigDict(frozen=True)

    role: ChatMessageType
    """The role of the entity sending the message."""

    parts: list[ContentPart] = pydantic.Field(default_factory=list)
    """Content parts, in order."""

    @classmethod
    def from_text(cls, role: ChatMessageType, *texts: str) -> "MessageContent":
        """Creates a message made of text parts only.

        Args:
            role: The role of the message.
            texts: One text part is created per string, in order.

        Returns:
            MessageContent: The new message.
        """
        return cls(role=role, parts=[TextContent(text=text) for text in texts])

    def __repr__(self) -> str:
        """Returns a string representation of the message."""
        return f"{str(self.role).upper()}: " + " | ".join(
            [repr(part) for part in self.parts]
        )
