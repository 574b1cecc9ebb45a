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

"""Build context resolution.

Decides which of four mutually exclusive scenarios a build is in and
what suffix its version receives. The decision list is evaluated in
order and the first matching condition wins::

    ┌───┬────────────────────┬──────────────────────────────┬────────────────────────┐
    │ # │ Scenario           │ Condition                    │ Suffix                 │
    ├───┼────────────────────┼──────────────────────────────┼────────────────────────┤
    │ 1 │ PULL_REQUEST       │ is_pull_request              │ -pr<id>+<rev>          │
    │ 2 │ NON_DEFAULT_BRANCH │ current_branch != default    │ -br+<rev>              │
    │ 3 │ RELEASE            │ is_release_requested         │ (none)                 │
    │ 4 │ MAIN_BUILD         │ otherwise                    │ -rc<commit_count>+<rev>│
    └───┴────────────────────┴──────────────────────────────┴────────────────────────┘

A release request on a non-default branch is ignored: rule 2 fires
before rule 3 is consulted.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from versionkit.errors import MalformedContextError
from versionkit.versioning import Version

__all__ = [
    'BuildContext',
    'Scenario',
    'final_version',
    'resolve_scenario',
    'scenario_reason',
]


class Scenario(str, enum.Enum):
    """The build scenario that determines the version suffix."""

    PULL_REQUEST = 'pull_request'
    NON_DEFAULT_BRANCH = 'non_default_branch'
    RELEASE = 'release'
    MAIN_BUILD = 'main_build'


@dataclass(frozen=True)
class BuildContext:
    """Where and how the build is running.

    Attributes:
        is_pull_request: The build was triggered by a pull request.
        pull_request_id: The pull request number. Required when
            ``is_pull_request`` is set.
        current_branch: The branch being built.
        default_branch: The repository's default branch.
        is_release_requested: A release was explicitly requested.
        short_revision: Abbreviated commit SHA of ``HEAD``.
        commit_count: Commits since the last version tag.
    """

    current_branch: str
    default_branch: str
    short_revision: str
    is_pull_request: bool = False
    pull_request_id: str | None = None
    is_release_requested: bool = False
    commit_count: int = 0

    def __post_init__(self) -> None:
        """Reject a negative commit count."""
        if self.commit_count < 0:
            raise ValueError(f'commit_count must be >= 0, got {self.commit_count}')


def _pull_request_id(ctx: BuildContext) -> str:
    pr_id = (ctx.pull_request_id or '').strip()
    if not pr_id:
        raise MalformedContextError(
            'Pull request build is missing its pull request identifier',
            hint='Pass the PR number (e.g. PR_NUMBER=42) for pull request builds.',
        )
    return pr_id


def resolve_scenario(ctx: BuildContext) -> tuple[Scenario, str]:
    """Pick the scenario and version suffix for a build.

    Args:
        ctx: The build context.

    Returns:
        ``(scenario, suffix)``. The suffix is empty for releases.

    Raises:
        MalformedContextError: If ``ctx`` is a pull request without an
            identifier.
    """
    if ctx.is_pull_request:
        return Scenario.PULL_REQUEST, f'-pr{_pull_request_id(ctx)}+{ctx.short_revision}'
    if ctx.current_branch != ctx.default_branch:
        return Scenario.NON_DEFAULT_BRANCH, f'-br+{ctx.short_revision}'
    if ctx.is_release_requested:
        return Scenario.RELEASE, ''
    return Scenario.MAIN_BUILD, f'-rc{ctx.commit_count}+{ctx.short_revision}'


def final_version(base: Version, suffix: str) -> str:
    """Join a base version and a scenario suffix."""
    return f'{base}{suffix}'


def scenario_reason(scenario: Scenario, ctx: BuildContext) -> str:
    """Explain why ``scenario`` was chosen for ``ctx``."""
    if scenario is Scenario.PULL_REQUEST:
        return f'Pull request build (PR #{ctx.pull_request_id})'
    if scenario is Scenario.NON_DEFAULT_BRANCH:
        return f'Non-default branch build ({ctx.current_branch})'
    if scenario is Scenario.RELEASE:
        return f'Release build on default branch ({ctx.default_branch})'
    return 'Main build (default branch, non-release)'
