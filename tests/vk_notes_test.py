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

"""Tests for versionkit.notes (release notes rendering)."""

from __future__ import annotations

import pytest
from versionkit.commit_parsing import ClassifiedCommit, CommitCategory, classify_commits
from versionkit.notes import NO_CHANGES_NOTICE, SECTIONS, format_release_notes, group_by_category


class TestFormatReleaseNotes:
    """Tests for format_release_notes()."""

    def test_fix_and_docs(self) -> None:
        """Test fix and docs."""
        commits = classify_commits(['fix: null pointer', 'docs: update readme'])
        notes = format_release_notes('1.4.3-rc2+abc123', commits)
        assert notes == (
            '# Release 1.4.3-rc2+abc123\n'
            '\n'
            '## Bug Fixes\n'
            '\n'
            '- fix: null pointer\n'
            '\n'
            '## Documentation\n'
            '\n'
            '- docs: update readme\n'
        )

    def test_empty_commits(self) -> None:
        """Test empty commits."""
        notes = format_release_notes('0.0.0', [])
        assert notes == f'# Release 0.0.0\n\n{NO_CHANGES_NOTICE}\n'
        assert '##' not in notes

    def test_section_order_is_fixed(self) -> None:
        """Sections follow the fixed order regardless of input order."""
        commits = classify_commits([
            'random change',
            'chore: tidy',
            'docs: guide',
            'fix: bug',
            'feat: thing',
            'feat!: rewrite',
        ])
        notes = format_release_notes('2.0.0', commits)
        headings = [line for line in notes.splitlines() if line.startswith('## ')]
        assert headings == [
            '## Breaking Changes',
            '## New Features',
            '## Bug Fixes',
            '## Documentation',
            '## Maintenance & Refactoring',
            '## Other Changes',
        ]

    def test_commit_order_preserved_within_section(self) -> None:
        """Test commit order preserved within section."""
        commits = classify_commits(['fix: second', 'feat: x', 'fix: first'])
        notes = format_release_notes('1.1.0', commits)
        assert notes.index('- fix: second') < notes.index('- fix: first')

    def test_message_verbatim(self) -> None:
        """Test message verbatim."""
        commits = classify_commits(['fix(Parser): Handle `None` & <tags>'])
        notes = format_release_notes('1.0.1', commits)
        assert '- fix(Parser): Handle `None` & <tags>\n' in notes

    def test_multiline_message_indented(self) -> None:
        """Continuation lines stay under their bullet."""
        commits = classify_commits(['feat: api\n\nAdds the v2 endpoints.'])
        notes = format_release_notes('1.1.0', commits)
        assert '- feat: api\n\n  Adds the v2 endpoints.\n' in notes

    def test_only_breaking_section(self) -> None:
        """Test only breaking section."""
        notes = format_release_notes('3.0.0', classify_commits(['feat!: new auth model']))
        assert '## Breaking Changes' in notes
        assert '## New Features' not in notes

    def test_emoji(self) -> None:
        """Test emoji."""
        notes = format_release_notes('1.0.1', classify_commits(['fix: x']), emoji=True)
        assert '## 🐛 Bug Fixes' in notes

    def test_custom_title(self) -> None:
        """Test custom title."""
        notes = format_release_notes('1.0.0', [], title='MyApp v{version}')
        assert notes.startswith('# MyApp v1.0.0\n')

    @pytest.mark.parametrize(
        ('title', 'expected'),
        [
            ('Release {version} {date}', '# Release 1.0.0 {date}\n'),
            ('{version} {}', '# 1.0.0 {}\n'),
            ('{version} / {0}', '# 1.0.0 / {0}\n'),
            ('{version} ({version})', '# 1.0.0 (1.0.0)\n'),
        ],
    )
    def test_title_keeps_other_braces(self, title: str, expected: str) -> None:
        """Test title keeps other braces."""
        notes = format_release_notes('1.0.0', [], title=title)
        assert notes.startswith(expected)

    def test_message_edges_trimmed(self) -> None:
        """Leading blank lines and trailing spaces are dropped from a message."""
        commits = [ClassifiedCommit('\n\n  fix: x  \n\nbody  \n', CommitCategory.FIX)]
        notes = format_release_notes('1.0.1', commits)
        assert '## Bug Fixes\n\n- fix: x\n\n  body\n' in notes


class TestGroupByCategory:
    """Tests for group_by_category()."""

    def test_drops_empty_sections(self) -> None:
        """Test drops empty sections."""
        commits = [ClassifiedCommit('x', CommitCategory.OTHER)]
        grouped = group_by_category(commits)
        assert len(grouped) == 1
        section, members = grouped[0]
        assert section.heading == 'Other Changes'
        assert members == commits

    def test_sections_cover_every_category(self) -> None:
        """Test sections cover every category."""
        assert [s.category for s in SECTIONS] == list(CommitCategory)
