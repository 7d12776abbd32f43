"""
Helpers for walking and merging the untyped JSON tree of a chain spec.

The tree is a recursive variant: dicts of named children, lists, and
scalars. Nothing here copies; every helper works on the caller's objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

KeyPath = tuple[str, ...]


def get_path(node: Any, path: KeyPath) -> Any | None:
    """
    Follow `path` through nested dicts.

    Returns the value at the end of the path, or None if any step is
    missing, null, or not an object.
    """
    current = node
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def format_path(path: KeyPath) -> str:
    return ".".join(path)


@dataclass
class MergeReport:
    """Key paths touched by a merge."""
    updated: list[KeyPath] = field(default_factory=list)
    mismatched: list[tuple[KeyPath, Any]] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.mismatched


def merge(updates: dict, target: Any, report: MergeReport | None = None, prefix: KeyPath = ()) -> MergeReport:
    """
    Apply the sparse tree `updates` onto `target` in place.

    Only keys already present in `target` are written. An object update
    recurses; anything else (lists included) replaces the target value
    wholesale. Keys missing from `target` are recorded as mismatches and
    skipped, at any depth, while their siblings still apply.

    Args:
        updates: Sparse update tree
        target: Object to update (a non-dict target accepts no keys)
        report: Report to append to (a new one is created if omitted)
        prefix: Key path of `target`, used for reporting

    Returns:
        The MergeReport listing updated and rejected key paths
    """
    if report is None:
        report = MergeReport()

    existing = target if isinstance(target, dict) else {}

    for key, value in updates.items():
        path = prefix + (key,)

        if key not in existing:
            report.mismatched.append((path, value))
            continue

        if isinstance(value, dict):
            merge(value, existing[key], report, path)
        else:
            existing[key] = value
            report.updated.append(path)
            logger.debug(f"[ {format_path(path)}: {value} ]")

    return report
