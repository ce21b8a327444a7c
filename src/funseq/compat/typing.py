# Copyright 2025 CrownOps Engineering
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

"""Typing constructs that moved into the standard library after Python 3.11.

Names are taken from `typing` when the running interpreter provides them and
from `typing_extensions` otherwise. Type checkers always see the
`typing_extensions` versions so that a 3.11 target resolves cleanly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypedDict, Unpack

if TYPE_CHECKING:
    from typing_extensions import override
else:
    try:
        from typing import override  # py>=3.12
    except ImportError:
        from typing_extensions import override

__all__ = ["TypedDict", "Unpack", "override"]
