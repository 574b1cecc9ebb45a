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

"""Configuration for versionkit.

Settings live in ``versionkit.toml`` at the repository root, or in the
``[tool.versionkit]`` table of ``pyproject.toml`` when no dedicated
file exists::

    # versionkit.toml
    default_branch = "main"
    tag_prefix = "v"
    notes_title = "Release {version}"
    section_emoji = false

Every key is optional. Unknown keys and wrongly typed values are
rejected with :class:`~versionkit.errors.VersionKitError`.

The build context is never read from the process environment
implicitly. :func:`context_from_env` converts an explicit mapping
(usually ``os.environ`` in a CI step) into a
:class:`~versionkit.context.BuildContext`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from versionkit.context import BuildContext
from versionkit.errors import ErrorCode, MalformedContextError, VersionKitError
from versionkit.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    'CONFIG_FILENAME',
    'VersionKitConfig',
    'context_from_env',
    'load_config',
    'parse_config',
]

CONFIG_FILENAME = 'versionkit.toml'

_TRUTHY = frozenset({'1', 'true', 'yes'})


@dataclass(frozen=True)
class VersionKitConfig:
    """Resolved versionkit settings.

    Attributes:
        default_branch: Branch used when the build context does not name
            the repository's default branch.
        tag_prefix: Prefix of version tags (``v`` in ``v1.2.3``).
        notes_title: Release-notes heading; ``{version}`` is substituted.
        section_emoji: Prefix release-notes section headings with an emoji.
    """

    default_branch: str = 'main'
    tag_prefix: str = 'v'
    notes_title: str = 'Release {version}'
    section_emoji: bool = False


_STRING_KEYS = ('default_branch', 'tag_prefix', 'notes_title')
_BOOL_KEYS = ('section_emoji',)
_ALLOWED_KEYS = frozenset(_STRING_KEYS + _BOOL_KEYS)


def _invalid(message: str, hint: str = '') -> VersionKitError:
    return VersionKitError(ErrorCode.CONFIG_INVALID, message, hint=hint)


def parse_config(raw: Mapping[str, Any]) -> VersionKitConfig:
    """Validate a raw config table and build a :class:`VersionKitConfig`.

    Args:
        raw: The parsed TOML table (plain Python values).

    Returns:
        The validated configuration; absent keys keep their defaults.

    Raises:
        VersionKitError: On unknown keys or invalid values.
    """
    unknown = sorted(set(raw) - _ALLOWED_KEYS)
    if unknown:
        raise _invalid(
            f'Unknown key(s) in versionkit config: {", ".join(unknown)}',
            hint=f'Allowed keys: {", ".join(sorted(_ALLOWED_KEYS))}',
        )

    for key in _STRING_KEYS:
        if key in raw and not isinstance(raw[key], str):
            raise _invalid(f'{key} must be a string, got {type(raw[key]).__name__}')
    for key in _BOOL_KEYS:
        if key in raw and not isinstance(raw[key], bool):
            raise _invalid(f'{key} must be a boolean, got {type(raw[key]).__name__}')

    if 'default_branch' in raw and not raw['default_branch'].strip():
        raise _invalid('default_branch must not be empty')
    if 'notes_title' in raw and '{version}' not in raw['notes_title']:
        raise _invalid(
            'notes_title must contain the {version} placeholder',
            hint='e.g. notes_title = "Release {version}"',
        )

    return VersionKitConfig(**{k: raw[k] for k in _ALLOWED_KEYS if k in raw})


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomlkit.parse(path.read_text(encoding='utf-8')).unwrap()
    except TOMLKitError as exc:
        raise _invalid(f'Cannot parse {path}: {exc}') from exc


def load_config(root: Path) -> VersionKitConfig:
    """Load settings from ``root``.

    Looks for ``versionkit.toml`` first, then for ``[tool.versionkit]``
    in ``pyproject.toml``. Falls back to defaults when neither exists.

    Args:
        root: Repository root directory.

    Raises:
        VersionKitError: If ``root`` is not a directory or the config
            is invalid.
    """
    if not root.is_dir():
        raise VersionKitError(
            ErrorCode.CONFIG_NOT_FOUND,
            f'Repository root {root} is not a directory',
        )

    config_path = root / CONFIG_FILENAME
    if config_path.is_file():
        logger.debug('config_loaded', path=str(config_path))
        return parse_config(_read_toml(config_path))

    pyproject_path = root / 'pyproject.toml'
    if pyproject_path.is_file():
        table = _read_toml(pyproject_path).get('tool', {}).get('versionkit')
        if table is not None:
            if not isinstance(table, dict):
                raise _invalid('[tool.versionkit] must be a table')
            logger.debug('config_loaded', path=str(pyproject_path))
            return parse_config(table)

    logger.debug('config_defaults', root=str(root))
    return VersionKitConfig()


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, '').strip().lower() in _TRUTHY


def context_from_env(
    env: Mapping[str, str],
    *,
    config: VersionKitConfig | None = None,
) -> BuildContext:
    """Build a :class:`BuildContext` from CI variables.

    Recognized variables: ``IS_PULL_REQUEST``, ``PR_NUMBER``,
    ``CURRENT_BRANCH``, ``DEFAULT_BRANCH``, ``IS_RELEASE``,
    ``SHORT_SHA`` and ``COMMIT_COUNT``. Boolean variables accept
    ``1``/``true``/``yes`` (case-insensitive).

    Args:
        env: The variables, e.g. ``os.environ``.
        config: Supplies ``default_branch`` when ``DEFAULT_BRANCH`` is unset.
            An unset ``CURRENT_BRANCH`` means the default branch.

    Raises:
        MalformedContextError: If ``COMMIT_COUNT`` is not a
            non-negative integer.
    """
    config = config or VersionKitConfig()
    default_branch = env.get('DEFAULT_BRANCH', '').strip() or config.default_branch

    raw_count = env.get('COMMIT_COUNT', '0').strip() or '0'
    if not raw_count.isdecimal():
        raise MalformedContextError(
            f'COMMIT_COUNT must be a non-negative integer, got {raw_count!r}',
        )

    return BuildContext(
        is_pull_request=_flag(env, 'IS_PULL_REQUEST'),
        pull_request_id=env.get('PR_NUMBER', '').strip() or None,
        current_branch=env.get('CURRENT_BRANCH', '').strip() or default_branch,
        default_branch=default_branch,
        is_release_requested=_flag(env, 'IS_RELEASE'),
        short_revision=env.get('SHORT_SHA', '').strip(),
        commit_count=int(raw_count),
    )
