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

"""Tests for versionkit.summary (CI summaries and step outputs)."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from versionkit.context import BuildContext
from versionkit.resolver import ResolutionResult, resolve
from versionkit.summary import _heredoc_delimiter, format_summary_table, github_output, print_summary, summary_markdown


def _main_build_result() -> ResolutionResult:
    ctx = BuildContext(current_branch='main', default_branch='main', short_revision='abc123', commit_count=2)
    return resolve('v1.4.2', ['fix: null pointer', 'docs: update readme'], ctx)


def _unchanged_result() -> ResolutionResult:
    ctx = BuildContext(current_branch='main', default_branch='main', short_revision='abc123')
    return resolve('v1.4.2', [], ctx)


class TestSummaryMarkdown:
    """Tests for summary_markdown()."""

    def test_table_rows(self) -> None:
        """Test table rows."""
        text = summary_markdown(_main_build_result())
        assert '| Field | Value |' in text
        assert '| Last tag | `v1.4.2` |' in text
        assert '| Commits since | `2` |' in text
        assert '| Base version | `1.4.2 → 1.4.3` |' in text
        assert '| Final version | `1.4.3-rc2+abc123` |' in text
        assert '| Scenario | `main_build` |' in text

    def test_reasons(self) -> None:
        """Test reasons."""
        text = summary_markdown(_main_build_result())
        assert '**Version increment:** Patch increment' in text
        assert '**Suffix applied:** Main build' in text

    def test_unchanged(self) -> None:
        """Test unchanged."""
        text = summary_markdown(_unchanged_result())
        assert '| Base version | `1.4.2` |' in text
        assert '**Reason:** No commits since last tag, version unchanged' in text
        assert 'Version increment' not in text

    def test_advisories(self) -> None:
        """Test advisories."""
        ctx = BuildContext(current_branch='main', default_branch='main', short_revision='r', is_release_requested=True)
        text = summary_markdown(resolve(None, ['fix: x'], ctx))
        assert '| Last tag | `(none)` |' in text
        assert 'No previous version tag found' in text


class TestRichSummary:
    """Tests for print_summary() and format_summary_table()."""

    def test_format_summary_table(self) -> None:
        """Test format summary table."""
        text = format_summary_table(_main_build_result())
        assert 'Final version' in text
        assert '1.4.3-rc2+abc123' in text
        assert 'Main build' in text

    def test_markup_in_values_is_escaped(self) -> None:
        """Advisories containing brackets render literally."""
        ctx = BuildContext(current_branch='main', default_branch='main', short_revision='r', is_release_requested=True)
        text = format_summary_table(resolve('garbage', ['fix: x'], ctx))
        assert '[v]MAJOR.MINOR.PATCH' in text

    def test_print_to_console(self) -> None:
        """Test print to console."""
        buf = StringIO()
        print_summary(_main_build_result(), console=Console(file=buf, width=100))
        assert 'Last tag' in buf.getvalue()


class TestGithubOutput:
    """Tests for github_output()."""

    def test_layout(self) -> None:
        """Test layout."""
        result = _main_build_result()
        text = github_output(result)
        assert text.startswith('version=1.4.3-rc2+abc123\ncommit_count=2\nnotes<<EOF\n# Release 1.4.3-rc2+abc123\n')
        assert text.endswith('- docs: update readme\nEOF\n')

    def test_delimiter_avoids_collision(self) -> None:
        """Test delimiter avoids collision."""
        assert _heredoc_delimiter('a\nb') == 'EOF'
        assert _heredoc_delimiter('a\nEOF\nb') == '_EOF_'
        assert _heredoc_delimiter('EOF\n_EOF_') == '__EOF__'
