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


import aiohttp


def is_success_status_code(status_code: int) -> bool:
    """Check if a status code denotes a successful response."""
    return 200 <= status_code < 300


def get_failure_reason(response: aiohttp.ClientResponse) -> str:
    """Returns a short, human readable reason for a failed response."""
    if response.reason:
        return f"HTTP {response.status} {response.reason}"
    return f"HTTP {response.status}"
