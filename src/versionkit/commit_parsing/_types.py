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

"""Pure types for commit classification.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass or enum: no I/O, no logging,
no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommitCategory(Enum):
    """The fixed taxonomy every commit is classified into.

    Members are declared in release-notes section order, which is also
    the classifier's priority order.
    """

    BREAKING = 'breaking'
    FEATURE = 'feature'
    FIX = 'fix'
    DOCS = 'docs'
    CHORE = 'chore'
    OTHER = 'other'


class BumpType(Enum):
    """Semver bump types, ordered by precedence (highest first).

    The "strongest" bump wins when a release contains several kinds of
    change. For example, a release with both a ``feat:`` and a
    ``fix:`` commit is a ``MINOR`` bump (not ``PATCH``).
    """

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'


# Bump precedence: lower index = higher precedence.
BUMP_PRECEDENCE: list[BumpType] = [
    BumpType.MAJOR,
    BumpType.MINOR,
    BumpType.PATCH,
    BumpType.NONE,
]

# The bump each category causes on its own. A release takes the strongest
# bump among the categories it contains (see versionkit.versioning.bump_type).
CATEGORY_BUMP: dict[CommitCategory, BumpType] = {
    CommitCategory.BREAKING: BumpType.MAJOR,
    CommitCategory.FEATURE: BumpType.MINOR,
    CommitCategory.FIX: BumpType.PATCH,
    CommitCategory.DOCS: BumpType.PATCH,
    CommitCategory.CHORE: BumpType.PATCH,
    CommitCategory.OTHER: BumpType.PATCH,
}


def max_bump(a: BumpType, b: BumpType) -> BumpType:
    """Return the higher-precedence bump type.

    >>> max_bump(BumpType.MINOR, BumpType.PATCH)
    <BumpType.MINOR: 'minor'>
    >>> max_bump(BumpType.NONE, BumpType.MAJOR)
    <BumpType.MAJOR: 'major'>
    """
    a_idx = BUMP_PRECEDENCE.index(a)
    b_idx = BUMP_PRECEDENCE.index(b)
    return BUMP_PRECEDENCE[min(a_idx, b_idx)]


@dataclass(frozen=True)
class ClassifiedCommit:
    """A commit message paired with its category.

    Attributes:
        message: The original commit message, verbatim (subject and body).
        category: The category assigned by the classifier.
    """

    message: str
    category: CommitCategory

    @property
    def subject(self) -> str:
        """The first line of the message."""
        return self.message.strip().split('\n', 1)[0].strip()
