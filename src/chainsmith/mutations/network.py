"""
Network-level mutations that do not depend on a runtime section.
"""

from __future__ import annotations

from typing import Iterable

from chainsmith.core import MutationResult

ADD_BOOT_NODES = "add_boot_nodes"


def add_boot_nodes(doc: dict, addresses: Iterable[str]) -> MutationResult:
    """Replace the boot node list with the de-duplicated `addresses`."""
    boot_nodes = list(dict.fromkeys(addresses))
    doc["bootNodes"] = boot_nodes

    name = doc.get("name", "")
    result = MutationResult(operation=ADD_BOOT_NODES, changed=True)
    if boot_nodes:
        result.note(f"{name} Added Boot Nodes: " + ", ".join(boot_nodes))
    else:
        result.note(f"{name} Clear Boot Nodes")
    return result
