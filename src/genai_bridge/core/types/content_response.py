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


"""Uniform response types returned by every provider."""

from dataclasses import dataclass, field
from typing import Any, Optional

CITATIONS: str = "citations"
"""`ContentChoice.generation_info` key holding the citation metadata."""

SAFETY: str = "safety"
"""`ContentChoice.generation_info` key holding the safety ratings."""


@dataclass
class ContentChoice:
    """One alternative answer produced by the model."""

    content: str = ""
    """The assembled text of the answer."""

    stop_reason: str = ""
    """Why the model stopped generating, e.g. ``STOP`` or ``MAX_TOKENS``."""

    generation_info: dict[str, Any] = field(default_factory=dict)
    """Provider metadata for this choice.

    Always holds exactly the `CITATIONS` and `SAFETY` keys, copied verbatim from
    the vendor response (values may be None).
    """


@dataclass
class ContentResponse:
    """The response to a generate-content call."""

    choices: list[ContentChoice] = field(default_factory=list)
    """Choices in the order the model produced them."""

    @property
    def first_choice(self) -> Optional[ContentChoice]:
        """Returns the first choice, or None if there is none."""
        return self.choices[0] if self.choices else None
