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

"""Version resolution facade.

Composes the classifier, bump calculator, context resolver and notes
formatter into a single call::

    last tag ──► parse_version ──┐
                                 ├──► bump ──► + suffix ──► final version
    commits ──► classify ────────┤                              │
                                 └──────────► format_release_notes
    context ──► resolve_scenario ─────────────► suffix

Usage::

    from versionkit import BuildContext, resolve

    ctx = BuildContext(current_branch='main', default_branch='main',
                       short_revision='abc123', commit_count=2)
    result = resolve('v1.4.2', ['fix: null pointer', 'docs: update readme'], ctx)
    assert result.final_version == '1.4.3-rc2+abc123'

Resolution performs no I/O. When no commit carries any text, the
version is emitted unchanged: no bump and no suffix.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from versionkit.commit_parsing import BumpType, ClassifiedCommit, classify_commits
from versionkit.config import VersionKitConfig
from versionkit.context import BuildContext, Scenario, final_version, resolve_scenario, scenario_reason
from versionkit.logging import get_logger
from versionkit.notes import format_release_notes
from versionkit.versioning import BumpCounts, Version, bump, bump_reason, bump_type, count_categories, parse_version

logger = get_logger(__name__)

__all__ = [
    'ResolutionResult',
    'resolve',
]

_NO_CHANGES_REASON = 'No commits since last tag, version unchanged'


@dataclass(frozen=True)
class ResolutionResult:
    """Everything one resolution produced.

    Attributes:
        final_version: The version string to publish, suffix included.
        base_version: The ``MAJOR.MINOR.PATCH`` part of ``final_version``.
        scenario: The build scenario that chose the suffix.
        release_notes: The rendered markdown release notes.
        previous_version: The parsed last known version.
        last_tag: The last known version tag as supplied.
        bump: The increment applied (``NONE`` when nothing changed).
        counts: Commits per category.
        commits: The classified commits, in input order.
        version_reason: Why the base version was (or was not) bumped.
        suffix_reason: Why the suffix was (or was not) applied.
        advisories: Non-fatal anomalies recovered along the way.
    """

    final_version: str
    base_version: Version
    scenario: Scenario
    release_notes: str
    previous_version: Version
    last_tag: str = ''
    bump: BumpType = BumpType.NONE
    counts: BumpCounts = BumpCounts()
    commits: tuple[ClassifiedCommit, ...] = ()
    version_reason: str = ''
    suffix_reason: str = ''
    advisories: tuple[str, ...] = ()

    @property
    def commit_count(self) -> int:
        """Number of classified (non-empty) commits."""
        return len(self.commits)


def resolve(
    last_version: str | None,
    commits: Iterable[str],
    ctx: BuildContext,
    *,
    config: VersionKitConfig | None = None,
) -> ResolutionResult:
    """Resolve the next version and release notes.

    Args:
        last_version: The last known version tag, e.g. ``v1.4.2`` or, with
            ``config.tag_prefix`` set to ``release-``, ``release-1.4.2``.
            ``None`` or an unparsable value falls back to ``0.0.0``.
        commits: Raw commit messages since that tag, in history order.
        ctx: The build context.
        config: Formatting settings; defaults apply when omitted.

    Returns:
        A fresh :class:`ResolutionResult`.

    Raises:
        MalformedContextError: If ``ctx`` is a pull request without an
            identifier.
    """
    config = config or VersionKitConfig()
    scenario, suffix = resolve_scenario(ctx)

    previous, tag_error = parse_version(last_version, config.tag_prefix)
    advisories: list[str] = []
    if tag_error is not None:
        logger.warning('version_tag_malformed', tag=last_version, code=tag_error.code.value)
        advisories.append(tag_error.message)

    classified = classify_commits(commits)
    counts = count_categories(classified)
    logger.debug(
        'commits_classified',
        total=counts.total,
        breaking=counts.breaking,
        feature=counts.feature,
        fix=counts.fix,
        docs=counts.docs,
        chore=counts.chore,
        other=counts.other,
    )

    if not classified:
        version = str(previous)
        logger.info('version_unchanged', version=version, scenario=scenario.value)
        return ResolutionResult(
            final_version=version,
            base_version=previous,
            scenario=scenario,
            release_notes=format_release_notes(
                version,
                [],
                title=config.notes_title,
                emoji=config.section_emoji,
            ),
            previous_version=previous,
            last_tag=last_version or '',
            version_reason=_NO_CHANGES_REASON,
            suffix_reason=_NO_CHANGES_REASON,
            advisories=tuple(advisories),
        )

    base = bump(previous, counts)
    version = final_version(base, suffix)
    logger.info(
        'version_resolved',
        previous=str(previous),
        base=str(base),
        version=version,
        scenario=scenario.value,
    )

    return ResolutionResult(
        final_version=version,
        base_version=base,
        scenario=scenario,
        release_notes=format_release_notes(
            version,
            classified,
            title=config.notes_title,
            emoji=config.section_emoji,
        ),
        previous_version=previous,
        last_tag=last_version or '',
        bump=bump_type(counts),
        counts=counts,
        commits=tuple(classified),
        version_reason=bump_reason(counts),
        suffix_reason=scenario_reason(scenario, ctx),
        advisories=tuple(advisories),
    )
