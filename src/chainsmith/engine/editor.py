"""
File-backed chain spec editor.

Every operation is a full cycle against the chain spec on disk: read, locate,
mutate, write. Nothing is cached between calls, and there is no locking,
so callers must not edit the same path concurrently.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from chainsmith import mutations
from chainsmith.accounts import KeyFromSeed, Node
from chainsmith.core import MutationContext, MutationResult
from chainsmith.engine.config import EditorConfig
from chainsmith.engine.report import Reporter, report_result
from chainsmith.mutations import GenesisAuthorityKey, HrmpChannel
from chainsmith.spec import codec
from chainsmith.spec.locator import KeyKind, has_session_keys

logger = logging.getLogger(__name__)

# Reference (usually a path) -> raw payload
PayloadLoader = Callable[[str], str | bytes]


def read_payload_file(path: Path | str) -> str:
    """
    Load a head state or WASM file as the hex string stored in a chain spec.

    Files that already hold a 0x-prefixed hex string are used verbatim;
    anything else is read as binary and hex-encoded.
    """
    path = Path(path)
    raw = path.read_bytes()
    if raw.startswith(b"0x"):
        try:
            return raw.decode("ascii").strip()
        except UnicodeDecodeError:
            pass
    return mutations.as_payload(raw)


class ChainSpecEditor:
    """
    Applies the mutation catalogue to a chain spec file.

    Fatal errors (ParseError, WriteError, RegistryNotFound) propagate to
    the caller, which decides whether they end the process.
    """

    def __init__(
        self,
        path: Path | str,
        config: EditorConfig | None = None,
        context: MutationContext | None = None,
        reporter: Reporter | None = None,
    ):
        """
        Args:
            path: Chain spec file to edit
            config: Editor configuration (defaults if omitted)
            context: Run context; share one across editors of the same run
            reporter: Called with every MutationResult
        """
        self.path = Path(path)
        self.config = config or EditorConfig()
        self.context = context or self.config.new_context()
        self.reporter = reporter or report_result

    def _apply(self, mutate: Callable[[dict], MutationResult]) -> MutationResult:
        doc = codec.read(self.path)
        result = mutate(doc)
        if result.changed:
            codec.write(self.path, doc)
        self.reporter(result)
        return result

    def load(self) -> dict:
        """Read the chain spec without modifying it."""
        return codec.read(self.path)

    def has_session_keys(self) -> bool:
        return has_session_keys(self.load())

    def clear_authorities(self) -> MutationResult:
        return self._apply(lambda doc: mutations.clear_authorities(doc, self.context))

    def add_balances(self, nodes: Iterable[Node]) -> MutationResult:
        nodes = list(nodes)
        return self._apply(lambda doc: mutations.add_balances(doc, nodes, self.context))

    def node_key(self, node: Node, use_stash: bool = True) -> GenesisAuthorityKey:
        return mutations.get_node_key(node, use_stash, self.context.ss58_format)

    def add_authority(
        self,
        node: Node,
        key: GenesisAuthorityKey | None = None,
        kind: KeyKind = KeyKind.SESSION,
    ) -> MutationResult:
        if key is None:
            key = self.node_key(node)
        return self._apply(lambda doc: mutations.add_authority(doc, node, key, kind))

    def add_aura_authority(self, node: Node) -> MutationResult:
        return self._apply(lambda doc: mutations.add_aura_authority(doc, node))

    def add_grandpa_authority(self, node: Node) -> MutationResult:
        return self._apply(lambda doc: mutations.add_grandpa_authority(doc, node, self.context))

    def add_staking(self, node: Node) -> MutationResult:
        return self._apply(lambda doc: mutations.add_staking(doc, node, self.context))

    def add_collator_selection(self, node: Node) -> MutationResult:
        return self._apply(lambda doc: mutations.add_collator_selection(doc, node))

    def generate_nominators(
        self,
        count: int,
        validators: list[str],
        key_from_seed: KeyFromSeed,
        max_nominations: int | None = None,
    ) -> MutationResult:
        if max_nominations is None:
            max_nominations = self.config.max_nominations
        return self._apply(lambda doc: mutations.generate_nominators(
            doc, count, max_nominations, validators, key_from_seed, self.context,
        ))

    def add_parachain(
        self,
        para_id: int | str,
        head: str | bytes,
        wasm: str | bytes,
        parachain: bool = True,
        loader: PayloadLoader | None = None,
    ) -> MutationResult:
        """
        Register a parachain; `loader` resolves head/wasm references first.

        Raises:
            RegistryNotFound: If the chain spec has no paras registry
        """
        if loader is not None:
            head = loader(head)
            wasm = loader(wasm)
        return self._apply(lambda doc: mutations.add_parachain(doc, para_id, head, wasm, parachain))

    def add_hrmp_channels(self, channels: Iterable[HrmpChannel]) -> list[MutationResult]:
        """
        Add preopened HRMP channels, persisting after each one.

        A RegistryNotFound raised part-way leaves earlier channels written.
        """
        logger.info("Adding Genesis HRMP Channels")
        results = []
        for channel in channels:
            results.append(self._apply(lambda doc: mutations.add_hrmp_channel(doc, channel)))
        return results

    def add_boot_nodes(self, addresses: Iterable[str]) -> MutationResult:
        addresses = list(addresses)
        return self._apply(lambda doc: mutations.add_boot_nodes(doc, addresses))

    def change_genesis_config(self, updates: dict) -> MutationResult:
        return self._apply(lambda doc: mutations.change_genesis_config(doc, updates))
