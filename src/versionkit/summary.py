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

"""Version calculation summaries.

Renders a :class:`~versionkit.resolver.ResolutionResult` for the places
a CI job reports it:

- :func:`summary_markdown`: a markdown table for a job summary page.
- :func:`print_summary` / :func:`format_summary_table`: a Rich table
  for terminal logs.
- :func:`github_output`: ``key=value`` step outputs, with the release
  notes in a heredoc block.

Nothing here writes files; callers decide where the text goes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from versionkit.resolver import ResolutionResult

__all__ = [
    'format_summary_table',
    'github_output',
    'print_summary',
    'summary_markdown',
]

_TITLE = '📌 VERSION CALCULATION SUMMARY'


def _rows(result: ResolutionResult) -> list[tuple[str, str]]:
    if result.base_version == result.previous_version:
        base = f'{result.base_version}'
    else:
        base = f'{result.previous_version} → {result.base_version}'
    return [
        ('Last tag', result.last_tag or '(none)'),
        ('Commits since', str(result.commit_count)),
        ('Base version', base),
        ('Final version', result.final_version),
        ('Scenario', result.scenario.value),
    ]


def summary_markdown(result: ResolutionResult) -> str:
    """Render the summary as a markdown table with the bump reasons."""
    lines = [f'## {_TITLE}', '', '| Field | Value |', '|-------|-------|']
    for field, value in _rows(result):
        lines.append(f'| {field} | `{value}` |')
    lines.append('')
    if result.version_reason == result.suffix_reason:
        lines.append(f'💡 **Reason:** {result.version_reason}')
    else:
        lines.append(f'💡 **Version increment:** {result.version_reason}')
        lines.append(f'💡 **Suffix applied:** {result.suffix_reason}')
    for advisory in result.advisories:
        lines.append(f'⚠️ {advisory}')
    return '\n'.join(lines) + '\n'


def print_summary(result: ResolutionResult, *, console: Console | None = None) -> None:
    """Print the summary as a Rich table.

    Args:
        result: The resolution to describe.
        console: Rich console to print to. Defaults to a stderr console
            so stdout stays clean for captured output.
    """
    if console is None:
        console = Console(stderr=True)

    table = Table(
        title=_TITLE,
        show_header=True,
        header_style='bold',
        show_edge=False,
        pad_edge=False,
    )
    table.add_column('Field', style='bold')
    table.add_column('Value')
    for field, value in _rows(result):
        table.add_row(field, escape(value))
    console.print(table)

    console.print(f'[dim]Version increment:[/dim] {escape(result.version_reason)}')
    console.print(f'[dim]Suffix applied:[/dim]    {escape(result.suffix_reason)}')
    for advisory in result.advisories:
        console.print(f'[yellow]warning:[/yellow] {escape(advisory)}')


def format_summary_table(result: ResolutionResult, *, color: bool = False) -> str:
    """Capture :func:`print_summary` output as a string."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=color, width=100)
    print_summary(result, console=console)
    return buf.getvalue().rstrip('\n')


def _heredoc_delimiter(body: str) -> str:
    delimiter = 'EOF'
    lines = set(body.split('\n'))
    while delimiter in lines:
        delimiter = f'_{delimiter}_'
    return delimiter


def github_output(result: ResolutionResult) -> str:
    """Render step outputs: ``version``, ``commit_count`` and ``notes``.

    The notes use the multi-line ``name<<DELIMITER`` syntax. The
    delimiter is chosen so it never collides with a line of the notes.
    """
    notes = result.release_notes.rstrip('\n')
    delimiter = _heredoc_delimiter(notes)
    lines = [
        f'version={result.final_version}',
        f'commit_count={result.commit_count}',
        f'notes<<{delimiter}',
        notes,
        delimiter,
    ]
    return '\n'.join(lines) + '\n'
