"""
Editor configuration.

Defaults match what a freshly launched test network expects; a TOML file
can override any of them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from chainsmith.accounts import DEFAULT_SS58_FORMAT
from chainsmith.core import DEFAULT_STAKING_BOND, MutationContext

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Configuration for a chain spec editing run."""

    # Bond used for staking/nominators when none was captured from the chain spec
    fallback_bond: int = DEFAULT_STAKING_BOND

    # Voting weight given to every added grandpa authority
    grandpa_weight: int = 1

    # Network prefix for SS58-encoded beefy keys
    ss58_format: int = DEFAULT_SS58_FORMAT

    # Upper bound on validators nominated by each random nominator
    max_nominations: int = 16

    # Random seed for nominator selection
    seed: int | None = None

    @classmethod
    def from_file(cls, path: Path | str) -> "EditorConfig":
        """Load configuration from a TOML file."""
        import tomllib

        path = Path(path)
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls(
            fallback_bond=int(data.get("fallback_bond", DEFAULT_STAKING_BOND)),
            grandpa_weight=int(data.get("grandpa_weight", 1)),
            ss58_format=int(data.get("ss58_format", DEFAULT_SS58_FORMAT)),
            max_nominations=int(data.get("max_nominations", 16)),
            seed=data.get("seed"),
        )
        logger.debug(f"Loaded editor config from {path}: {config}")
        return config

    def new_context(self) -> MutationContext:
        """Create the run context for one orchestration run."""
        context = MutationContext(
            fallback_bond=self.fallback_bond,
            grandpa_weight=self.grandpa_weight,
            ss58_format=self.ss58_format,
        )
        if self.seed is not None:
            context.set_seed(self.seed)
        return context
