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

"""versionkit: conventional-commit version resolution and release notes.

Given the commit messages since the last release tag and a description
of the running build, versionkit computes the next semantic version
(with a pre-release/build suffix for non-release builds) and renders
categorized release notes from the same classification.
"""

from versionkit.commit_parsing import BumpType, ClassifiedCommit, CommitCategory, classify, classify_commits
from versionkit.config import VersionKitConfig, context_from_env, load_config
from versionkit.context import BuildContext, Scenario, resolve_scenario
from versionkit.errors import ErrorCode, MalformedContextError, MalformedVersionTagError, VersionKitError
from versionkit.logging import configure_logging
from versionkit.notes import format_release_notes
from versionkit.resolver import ResolutionResult, resolve
from versionkit.versioning import BumpCounts, Version, bump, parse_version

__version__ = '0.1.0'

__all__ = [
    'BuildContext',
    'BumpCounts',
    'BumpType',
    'ClassifiedCommit',
    'CommitCategory',
    'ErrorCode',
    'MalformedContextError',
    'MalformedVersionTagError',
    'ResolutionResult',
    'Scenario',
    'Version',
    'VersionKitConfig',
    'VersionKitError',
    'bump',
    'classify',
    'classify_commits',
    'configure_logging',
    'context_from_env',
    'format_release_notes',
    'load_config',
    'parse_version',
    'resolve',
    'resolve_scenario',
]
