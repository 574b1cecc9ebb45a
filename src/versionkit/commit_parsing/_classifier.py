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

r"""Conventional commit classifier.

Maps a raw commit message onto exactly one :class:`CommitCategory`.
The rules are evaluated top to bottom and the first match wins::

    ┌──────────┬──────────────────────────────────────────────────────────┐
    │ Category │ Rule                                                     │
    ├──────────┼──────────────────────────────────────────────────────────┤
    │ BREAKING │ ``BREAKING CHANGE:`` anywhere, or ``type(scope)!:``      │
    │          │ at the start of the subject line                         │
    │ FEATURE  │ subject starts with ``feat``                             │
    │ FIX      │ subject starts with ``fix``                              │
    │ DOCS     │ subject starts with ``doc`` / ``docs``                   │
    │ CHORE    │ subject starts with ``chore``, ``refactor``, ``style``,  │
    │          │ ``test``, ``ci`` or ``build``                            │
    │ OTHER    │ everything else                                          │
    └──────────┴──────────────────────────────────────────────────────────┘

All matching is case-insensitive. Prefix matching is loose:
``feature:`` counts as a feature and ``docs(api):`` as documentation.

Pure implementation: depends only on ``re`` and :mod:`._types`.
No I/O, no logging, no side effects.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import NamedTuple

from versionkit.commit_parsing._types import ClassifiedCommit, CommitCategory

# "BREAKING CHANGE:" footer (or anywhere in the body).
BREAKING_FOOTER_PATTERN: re.Pattern[str] = re.compile(r'BREAKING CHANGE:', re.IGNORECASE)

# Subject line: type!: or type(scope)!:
BREAKING_SUBJECT_PATTERN: re.Pattern[str] = re.compile(
    r'^[a-z]+'  # type
    r'(?:\([^)]+\))?'  # optional scope in parens
    r'!:',  # breaking change indicator + colon
    re.IGNORECASE,
)

CHORE_PREFIXES: tuple[str, ...] = ('chore', 'refactor', 'style', 'test', 'ci', 'build')


class _Rule(NamedTuple):
    """One row of the classification table."""

    category: CommitCategory
    matches: Callable[[str, str], bool]


def _is_breaking(message: str, subject: str) -> bool:
    return bool(BREAKING_FOOTER_PATTERN.search(message) or BREAKING_SUBJECT_PATTERN.match(subject))


def _starts_with(*prefixes: str) -> Callable[[str, str], bool]:
    lowered = tuple(p.lower() for p in prefixes)

    def _match(_message: str, subject: str) -> bool:
        return subject.lower().startswith(lowered)

    return _match


# Order is significant: the first matching rule decides the category.
CLASSIFICATION_RULES: tuple[_Rule, ...] = (
    _Rule(CommitCategory.BREAKING, _is_breaking),
    _Rule(CommitCategory.FEATURE, _starts_with('feat')),
    _Rule(CommitCategory.FIX, _starts_with('fix')),
    _Rule(CommitCategory.DOCS, _starts_with('doc')),
    _Rule(CommitCategory.CHORE, _starts_with(*CHORE_PREFIXES)),
)


def subject_line(message: str) -> str:
    """Return the first non-blank line of a commit message."""
    stripped = message.strip()
    if not stripped:
        return ''
    return stripped.split('\n', 1)[0].strip()


def classify(message: str) -> CommitCategory:
    """Classify a single commit message.

    Args:
        message: The commit message (subject, or subject and body).

    Returns:
        The first matching :class:`CommitCategory`. Empty or
        whitespace-only messages are :attr:`CommitCategory.OTHER`.
    """
    if not message.strip():
        return CommitCategory.OTHER
    subject = subject_line(message)
    for rule in CLASSIFICATION_RULES:
        if rule.matches(message, subject):
            return rule.category
    return CommitCategory.OTHER


def classify_commits(messages: Iterable[str]) -> list[ClassifiedCommit]:
    """Classify an ordered sequence of commit messages.

    Empty and whitespace-only messages carry no information and are
    dropped. The relative order of the remaining messages is preserved.

    Args:
        messages: Raw commit messages, in the order supplied by the
            history collaborator.

    Returns:
        One :class:`ClassifiedCommit` per non-empty message.
    """
    return [ClassifiedCommit(message=m, category=classify(m)) for m in messages if m.strip()]
