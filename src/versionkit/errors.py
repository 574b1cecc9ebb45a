# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for versionkit.

Every error raised by versionkit carries a stable :class:`ErrorCode`,
a human-readable message, and an optional hint telling the operator
how to fix the problem.

Only two kinds of failure exist in the resolution pipeline:

- :class:`MalformedContextError` is fatal: a pull-request build without
  a pull-request identifier cannot pick a suffix shape.
- :class:`MalformedVersionTagError` is recovered locally: the base
  version falls back to ``0.0.0`` and the error is reported to the
  caller as an advisory, never raised out of
  :func:`~versionkit.resolver.resolve`.
"""

from __future__ import annotations

import enum

__all__ = [
    'ErrorCode',
    'MalformedContextError',
    'MalformedVersionTagError',
    'VersionKitError',
]


class ErrorCode(str, enum.Enum):
    """Stable identifiers for versionkit errors."""

    CONFIG_INVALID = 'VK-CONFIG-INVALID'
    CONFIG_NOT_FOUND = 'VK-CONFIG-NOT-FOUND'
    CONTEXT_MALFORMED = 'VK-CONTEXT-MALFORMED'
    VERSION_TAG_MALFORMED = 'VK-VERSION-TAG-MALFORMED'


class VersionKitError(Exception):
    """Base class for all versionkit errors.

    Attributes:
        code: The stable error code.
        message: What went wrong.
        hint: How to fix it (may be empty).
    """

    def __init__(self, code: ErrorCode, message: str, *, hint: str = '') -> None:
        """Initialize the error."""
        self.code = code
        self.message = message
        self.hint = hint
        super().__init__(str(self))

    def __str__(self) -> str:
        """Render as ``[CODE] message`` with an optional hint line."""
        text = f'[{self.code.value}] {self.message}'
        if self.hint:
            text = f'{text}\n  hint: {self.hint}'
        return text


class MalformedContextError(VersionKitError):
    """The build context cannot be mapped to a version suffix."""

    def __init__(self, message: str, *, hint: str = '') -> None:
        """Initialize the error with the context-malformed code."""
        super().__init__(ErrorCode.CONTEXT_MALFORMED, message, hint=hint)


class MalformedVersionTagError(VersionKitError):
    """The last-known version tag does not parse as ``[<prefix>]MAJOR.MINOR.PATCH``."""

    def __init__(self, tag: str | None, prefix: str = 'v') -> None:
        """Initialize the error for the offending (or missing) tag."""
        self.tag = tag
        self.prefix = prefix
        if tag is None or not tag.strip():
            message = 'No previous version tag found, using 0.0.0 as baseline'
        else:
            message = f'Tag {tag!r} is not a [{prefix}]MAJOR.MINOR.PATCH version, defaulting to 0.0.0'
        super().__init__(
            ErrorCode.VERSION_TAG_MALFORMED,
            message,
            hint=f'Tag releases as {prefix}MAJOR.MINOR.PATCH (e.g. {prefix}1.2.3).',
        )
