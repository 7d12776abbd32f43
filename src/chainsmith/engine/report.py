"""
Reporting adapter: renders MutationResults through logging.
"""

from __future__ import annotations

import logging
from typing import Callable

from chainsmith.core import MutationResult

logger = logging.getLogger(__name__)

Reporter = Callable[[MutationResult], None]


def report_result(result: MutationResult, log: logging.Logger = logger):
    """Log success lines at INFO and soft problems at WARNING."""
    for message in result.messages:
        log.info(message)
    for warning in result.warnings:
        log.warning(warning)
    if result.details:
        log.debug(f"{result.operation}: {result.details}")
