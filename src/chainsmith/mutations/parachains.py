"""
Parachain and HRMP channel registration.

Unlike the authority mutations, a missing registry here is fatal: the
functions raise RegistryNotFound instead of returning a soft no-op.
"""

from __future__ import annotations

from dataclasses import dataclass

from chainsmith.core import MutationResult, RegistryNotFound
from chainsmith.spec.locator import locate_hrmp, locate_paras, locate_runtime_config

ADD_PARACHAIN = "add_parachain"
ADD_HRMP_CHANNEL = "add_hrmp_channel"


@dataclass(frozen=True)
class HrmpChannel:
    """A preopened HRMP channel between two parachains."""
    sender: int
    recipient: int
    max_capacity: int
    max_message_size: int

    @classmethod
    def parse(cls, text: str) -> "HrmpChannel":
        """Parse `sender:recipient:max_capacity:max_message_size`."""
        parts = text.split(":")
        if len(parts) != 4:
            raise ValueError(f"Expected sender:recipient:capacity:size, got {text!r}")
        return cls(*(int(part) for part in parts))

    def as_entry(self) -> list[int]:
        return [self.sender, self.recipient, self.max_capacity, self.max_message_size]


def as_payload(data: str | bytes) -> str:
    """Head state / WASM payload as stored in a chain spec (bytes become 0x-hex)."""
    if isinstance(data, (bytes, bytearray)):
        return "0x" + bytes(data).hex()
    return data


def add_parachain(
    doc: dict,
    para_id: int | str,
    head: str | bytes,
    wasm: str | bytes,
    parachain: bool = True,
) -> MutationResult:
    """
    Register a parachain at genesis.

    Appends `[para_id, [head, wasm, parachain]]` to the paras registry.

    Raises:
        RegistryNotFound: If the runtime has no paras registry
    """
    paras = locate_paras(locate_runtime_config(doc))
    if paras is None:
        raise RegistryNotFound("paras")

    para_id = int(para_id)
    paras.append([para_id, [as_payload(head), as_payload(wasm), parachain]])

    result = MutationResult(operation=ADD_PARACHAIN, changed=True)
    result.note(f"Added Genesis Parachain {para_id}")
    return result


def add_hrmp_channel(doc: dict, channel: HrmpChannel) -> MutationResult:
    """
    Append a channel to `preopenHrmpChannels`.

    Raises:
        RegistryNotFound: If the runtime has no HRMP channel list
    """
    hrmp = locate_hrmp(locate_runtime_config(doc))
    if hrmp is None:
        raise RegistryNotFound("hrmp")

    hrmp["preopenHrmpChannels"].append(channel.as_entry())

    result = MutationResult(operation=ADD_HRMP_CHANNEL, changed=True)
    result.note(f"Added HRMP channel {channel.sender} -> {channel.recipient}")
    return result
