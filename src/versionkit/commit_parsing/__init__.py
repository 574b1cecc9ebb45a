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

r"""Commit message classification.

This subpackage turns raw commit messages into a fixed taxonomy of
:class:`CommitCategory` values. The same classification drives both
the version bump and the release-notes sections, so the two can never
disagree.

Usage::

    from versionkit.commit_parsing import CommitCategory, classify, classify_commits

    assert classify('feat(auth): add OAuth2') == CommitCategory.FEATURE
    assert classify('fix(api)!: drop v1 endpoints') == CommitCategory.BREAKING

    # Footers count too:
    msg = 'feat: new API\\n\\nBREAKING CHANGE: removed v1 endpoints'
    assert classify(msg) == CommitCategory.BREAKING

    commits = classify_commits(['fix: null pointer', '', 'docs: readme'])
    assert [c.category for c in commits] == [CommitCategory.FIX, CommitCategory.DOCS]
"""

from versionkit.commit_parsing._classifier import (
    BREAKING_FOOTER_PATTERN,
    BREAKING_SUBJECT_PATTERN,
    CHORE_PREFIXES,
    CLASSIFICATION_RULES,
    classify,
    classify_commits,
    subject_line,
)
from versionkit.commit_parsing._types import (
    BUMP_PRECEDENCE,
    CATEGORY_BUMP,
    BumpType,
    ClassifiedCommit,
    CommitCategory,
    max_bump,
)

__all__ = [
    'BREAKING_FOOTER_PATTERN',
    'BREAKING_SUBJECT_PATTERN',
    'BUMP_PRECEDENCE',
    'CATEGORY_BUMP',
    'CHORE_PREFIXES',
    'CLASSIFICATION_RULES',
    'BumpType',
    'ClassifiedCommit',
    'CommitCategory',
    'classify',
    'classify_commits',
    'max_bump',
    'subject_line',
]
