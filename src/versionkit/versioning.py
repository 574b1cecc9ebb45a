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

"""Semantic version parsing and bump calculation.

The bump is evaluated once per resolution, not per commit: the
highest-severity change in the release dominates and the counts only
matter as present/absent.

    ┌──────────────────────────┬───────────────────┐
    │ Commits since last tag   │ Next version      │
    ├──────────────────────────┼───────────────────┤
    │ ≥1 breaking              │ (M+1, 0, 0)       │
    │ 0 breaking, ≥1 feature   │ (M, m+1, 0)       │
    │ anything else            │ (M, m, p+1)       │
    └──────────────────────────┴───────────────────┘
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from versionkit.commit_parsing import CATEGORY_BUMP, BumpType, ClassifiedCommit, CommitCategory, max_bump
from versionkit.errors import MalformedVersionTagError

__all__ = [
    'BumpCounts',
    'Version',
    'bump',
    'bump_reason',
    'bump_type',
    'count_categories',
    'parse_version',
]

# MAJOR.MINOR.PATCH (optionally v-prefixed) followed by anything (pre-release, build metadata).
_VERSION_TAG_RE: re.Pattern[str] = re.compile(r'^v?(\d+)\.(\d+)\.(\d+)')


@dataclass(frozen=True, order=True)
class Version:
    """A ``MAJOR.MINOR.PATCH`` base version."""

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        """Reject negative components."""
        if min(self.major, self.minor, self.patch) < 0:
            raise ValueError(f'Version components must be non-negative: {self.major}.{self.minor}.{self.patch}')

    def __str__(self) -> str:
        """Render as ``MAJOR.MINOR.PATCH``."""
        return f'{self.major}.{self.minor}.{self.patch}'

    def to_tag(self, prefix: str = 'v') -> str:
        """Render as a git tag, e.g. ``v1.2.3``."""
        return f'{prefix}{self}'


ZERO = Version(0, 0, 0)


@dataclass(frozen=True)
class BumpCounts:
    """Number of classified commits per category."""

    breaking: int = 0
    feature: int = 0
    fix: int = 0
    docs: int = 0
    chore: int = 0
    other: int = 0

    def __post_init__(self) -> None:
        """Reject negative counts."""
        if min(self.breaking, self.feature, self.fix, self.docs, self.chore, self.other) < 0:
            raise ValueError('Commit counts must be non-negative')

    @property
    def total(self) -> int:
        """Total number of classified commits."""
        return self.breaking + self.feature + self.fix + self.docs + self.chore + self.other

    def by_category(self) -> dict[CommitCategory, int]:
        """Return the counts keyed by :class:`CommitCategory`."""
        return {
            CommitCategory.BREAKING: self.breaking,
            CommitCategory.FEATURE: self.feature,
            CommitCategory.FIX: self.fix,
            CommitCategory.DOCS: self.docs,
            CommitCategory.CHORE: self.chore,
            CommitCategory.OTHER: self.other,
        }


def parse_version(
    tag: str | None,
    prefix: str = 'v',
) -> tuple[Version, MalformedVersionTagError | None]:
    """Parse a ``<prefix>MAJOR.MINOR.PATCH[...]`` tag.

    A missing or malformed tag is not fatal: the base version falls back
    to ``0.0.0`` and the recovered error is returned alongside it so the
    caller can report it.

    Args:
        tag: The last known version tag, e.g. ``"v1.4.2"`` or
            ``"2.0.0-rc3+abc123"``. ``None`` means no tag exists.
        prefix: Tag prefix stripped before matching (``release-`` in
            ``release-1.4.2``). A bare ``v`` is accepted either way.

    Returns:
        ``(version, advisory)`` where ``advisory`` is ``None`` when the
        tag parsed cleanly.
    """
    if tag is None:
        return ZERO, MalformedVersionTagError(tag, prefix)
    text = tag.strip()
    if prefix and text.startswith(prefix):
        text = text[len(prefix) :]
    m = _VERSION_TAG_RE.match(text)
    if m is None:
        return ZERO, MalformedVersionTagError(tag, prefix)
    return Version(int(m.group(1)), int(m.group(2)), int(m.group(3))), None


def count_categories(commits: Iterable[ClassifiedCommit]) -> BumpCounts:
    """Aggregate classified commits into per-category counts."""
    tally = dict.fromkeys(CommitCategory, 0)
    for commit in commits:
        tally[commit.category] += 1
    return BumpCounts(
        breaking=tally[CommitCategory.BREAKING],
        feature=tally[CommitCategory.FEATURE],
        fix=tally[CommitCategory.FIX],
        docs=tally[CommitCategory.DOCS],
        chore=tally[CommitCategory.CHORE],
        other=tally[CommitCategory.OTHER],
    )


def bump_type(counts: BumpCounts) -> BumpType:
    """Return the bump a release with these counts receives.

    Each present category contributes its :data:`CATEGORY_BUMP` and the
    strongest one wins, so only presence matters: one breaking commit
    outweighs any number of features, and one feature outweighs any
    number of fixes. A resolution always bumps at least the patch.
    """
    kind = BumpType.PATCH
    for category, count in counts.by_category().items():
        if count > 0:
            kind = max_bump(kind, CATEGORY_BUMP[category])
    return kind


def bump(base: Version, counts: BumpCounts) -> Version:
    """Compute the next base version.

    Args:
        base: The last released version.
        counts: Aggregated commit counts since that release.

    Returns:
        The next ``MAJOR.MINOR.PATCH``. Always greater than ``base``.
    """
    kind = bump_type(counts)
    if kind is BumpType.MAJOR:
        return Version(base.major + 1, 0, 0)
    if kind is BumpType.MINOR:
        return Version(base.major, base.minor + 1, 0)
    return Version(base.major, base.minor, base.patch + 1)


def bump_reason(counts: BumpCounts) -> str:
    """Explain the increment chosen for ``counts`` in one sentence."""
    kind = bump_type(counts)
    if kind is BumpType.MAJOR:
        return f'Breaking change detected ({counts.breaking} breaking change(s))'
    if kind is BumpType.MINOR:
        return f'Feature(s) detected ({counts.feature} feature(s))'
    return 'Patch increment (only fixes/docs/chore commits)'
