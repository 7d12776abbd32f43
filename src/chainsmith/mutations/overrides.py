"""
Generic genesis overrides.

Applies a sparse update tree onto `genesis`, only touching keys that
already exist there.
"""

from __future__ import annotations

from chainsmith.core import Issue, MutationResult, format_path, merge

CHANGE_GENESIS_CONFIG = "change_genesis_config"


def change_genesis_config(doc: dict, updates: dict) -> MutationResult:
    """
    Deep-merge `updates` into the document's genesis.

    Each key that does not exist in the genesis is rejected with
    Issue.KEY_MISMATCH; the remaining keys still apply.
    """
    result = MutationResult(operation=CHANGE_GENESIS_CONFIG)
    result.note("Updating Chain Genesis Configuration")

    genesis = doc.get("genesis")
    if not isinstance(genesis, dict):
        result.warn(Issue.SECTION_ABSENT, "genesis not found in chain spec")
        return result

    report = merge(updates, genesis)

    for path in report.updated:
        result.note(f"Updated Genesis Configuration [ key : {format_path(path)} ]")
    if not report.clean:
        for path, value in report.mismatched:
            result.warn(Issue.KEY_MISMATCH, f"Bad Genesis Configuration [ {format_path(path)}: {value} ]")

    result.changed = bool(report.updated)
    result.details["updated"] = [format_path(path) for path in report.updated]
    result.details["mismatched"] = [format_path(path) for path, _ in report.mismatched]
    return result
