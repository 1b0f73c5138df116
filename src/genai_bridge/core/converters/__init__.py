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


"""Converters between the library's message model and the Google AI SDK model."""

from genai_bridge.core.converters.content_converter import (
    ROLE_MODEL,
    ROLE_USER,
    convert_content,
    convert_part,
    convert_parts,
    convert_role,
)
from genai_bridge.core.converters.response_converter import (
    convert_candidate,
    convert_candidates,
    finish_reason_to_str,
)

__all__ = [
    "ROLE_MODEL",
    "ROLE_USER",
    "convert_candidate",
    "convert_candidates",
    "convert_content",
    "convert_part",
    "convert_parts",
    "convert_role",
    "finish_reason_to_str",
]
