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

"""Structured logging for versionkit.

versionkit is a library that usually runs inside a CI step, so logging
stays scoped to the ``versionkit`` logger namespace and never touches
the root logger. Every resolution stage emits one structlog event::

    version_tag_malformed   warning  the last tag did not parse (advisory)
    commits_classified      debug    per-category counts
    version_unchanged       info     no commits, version emitted as-is
    version_resolved        info     previous, bumped and final version

Events go to stderr by default so stdout stays free for the version
string and release notes a CI step captures.

Usage::

    from versionkit.logging import configure_logging

    configure_logging(verbose=True, json_log=True)
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'versionkit'


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Route versionkit events to ``stream`` through structlog.

    Calling it again replaces the handler installed by the previous call.

    Args:
        verbose: Include ``commits_classified`` debug events.
        quiet: Only advisories (warnings) and errors.
        json_log: One JSON object per line instead of console output.
        stream: Destination; defaults to ``sys.stderr``.

    Returns:
        The handler attached to the ``versionkit`` logger.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    stream = stream or sys.stderr

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if json_log:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    handler = logging.StreamHandler(stream)
    handler.set_name(LOGGER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        ),
    )

    root = logging.getLogger(LOGGER_NAME)
    for old in [h for h in root.handlers if h.get_name() == LOGGER_NAME]:
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return handler


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger under the ``versionkit`` namespace."""
    return structlog.get_logger(name)
