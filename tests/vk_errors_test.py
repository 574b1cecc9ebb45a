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

"""Tests for versionkit.errors."""

from __future__ import annotations

from versionkit.errors import ErrorCode, MalformedContextError, MalformedVersionTagError, VersionKitError


class TestVersionKitError:
    """Tests for the error hierarchy."""

    def test_str_without_hint(self) -> None:
        """Test str without hint."""
        err = VersionKitError(ErrorCode.CONFIG_INVALID, 'bad value')
        assert str(err) == '[VK-CONFIG-INVALID] bad value'

    def test_str_with_hint(self) -> None:
        """Test str with hint."""
        err = VersionKitError(ErrorCode.CONFIG_INVALID, 'bad value', hint='fix it')
        assert str(err) == '[VK-CONFIG-INVALID] bad value\n  hint: fix it'

    def test_malformed_context(self) -> None:
        """Test malformed context."""
        err = MalformedContextError('no id')
        assert isinstance(err, VersionKitError)
        assert err.code == ErrorCode.CONTEXT_MALFORMED
        assert err.message == 'no id'

    def test_malformed_tag_messages(self) -> None:
        """Test malformed tag messages."""
        assert 'release-1' in MalformedVersionTagError('release-1').message
        assert MalformedVersionTagError(None).message.startswith('No previous version tag')
        assert MalformedVersionTagError('v1').hint
