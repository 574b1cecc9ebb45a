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

"""Release notes rendering.

Turns a list of :class:`~versionkit.commit_parsing.ClassifiedCommit`
into a markdown document. Example output::

    # Release 1.4.3

    ## Bug Fixes

    - fix: null pointer

    ## Documentation

    - docs: update readme

Sections always appear in the fixed order of :data:`SECTIONS`; a
section with no commits is omitted entirely. Within a section, commits
keep the order in which they were supplied.

Commit text is copied as-is apart from whitespace at the edges: leading
and trailing blank space of the whole message and trailing spaces on each
line are dropped, and body lines are indented two spaces so they stay
inside the bullet.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from versionkit.commit_parsing import ClassifiedCommit, CommitCategory

__all__ = [
    'DEFAULT_TITLE',
    'NO_CHANGES_NOTICE',
    'SECTIONS',
    'Section',
    'format_release_notes',
    'group_by_category',
]

DEFAULT_TITLE = 'Release {version}'
NO_CHANGES_NOTICE = 'No changes since last release.'


class Section(NamedTuple):
    """A release-notes heading bound to a commit category."""

    category: CommitCategory
    heading: str
    emoji: str


SECTIONS: tuple[Section, ...] = (
    Section(CommitCategory.BREAKING, 'Breaking Changes', '🚨'),
    Section(CommitCategory.FEATURE, 'New Features', '✨'),
    Section(CommitCategory.FIX, 'Bug Fixes', '🐛'),
    Section(CommitCategory.DOCS, 'Documentation', '📝'),
    Section(CommitCategory.CHORE, 'Maintenance & Refactoring', '⚙️'),
    Section(CommitCategory.OTHER, 'Other Changes', '🔀'),
)


def group_by_category(
    commits: Sequence[ClassifiedCommit],
) -> list[tuple[Section, list[ClassifiedCommit]]]:
    """Group commits into their sections, dropping empty sections.

    Returns:
        ``(section, commits)`` pairs in :data:`SECTIONS` order.
    """
    grouped: list[tuple[Section, list[ClassifiedCommit]]] = []
    for section in SECTIONS:
        members = [c for c in commits if c.category is section.category]
        if members:
            grouped.append((section, members))
    return grouped


def _bullet(message: str) -> list[str]:
    """Render one commit as a bullet, indenting continuation lines.

    The message is stripped first so leading blank lines never produce an
    empty bullet. Trailing spaces are dropped from every line and blank
    body lines stay empty.
    """
    first, *rest = message.strip().split('\n')
    lines = [f'- {first.rstrip()}']
    for line in rest:
        lines.append(f'  {line.rstrip()}' if line.strip() else '')
    return lines


def format_release_notes(
    version: str,
    commits: Sequence[ClassifiedCommit],
    *,
    title: str = DEFAULT_TITLE,
    emoji: bool = False,
) -> str:
    """Render release notes for ``version``.

    Args:
        version: The version being described (shown in the heading).
        commits: Classified commits, in the order they should be listed.
        title: Heading template. Every ``{version}`` is replaced and any
            other braces are kept literally.
        emoji: Prefix section headings with an emoji.

    Returns:
        A markdown document ending with a single newline.
    """
    lines = ['# ' + title.replace('{version}', version), '']

    if not commits:
        lines.append(NO_CHANGES_NOTICE)
        return '\n'.join(lines) + '\n'

    for section, members in group_by_category(commits):
        heading = f'{section.emoji} {section.heading}' if emoji else section.heading
        lines.append(f'## {heading}')
        lines.append('')
        for commit in members:
            lines.extend(_bullet(commit.message))
        lines.append('')

    return '\n'.join(lines).rstrip('\n') + '\n'
