"""
Run-scoped state shared by the mutations of one orchestration run.

Holds the staking bond captured when authorities are cleared, so later
balance and staking additions can use it as their default.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field

DEFAULT_STAKING_BOND = 1_000_000_000_000


@dataclass
class MutationContext:
    """
    Mutable state threaded through every mutation of a run.

    Build one per run (see EditorConfig.new_context) instead of relying on
    call ordering against a module-level variable.
    """
    staking_bond: int | None = None
    fallback_bond: int = DEFAULT_STAKING_BOND
    grandpa_weight: int = 1
    ss58_format: int = 42
    rng: random.Random = field(default_factory=random.Random)

    def set_seed(self, seed: int):
        """Set random seed for reproducibility."""
        self.rng = random.Random(seed)

    def capture_bond(self, bond: int) -> bool:
        """
        Record the run's default bond.

        Only the first capture sticks; returns True if this call set it.
        """
        if self.staking_bond is not None:
            return False
        self.staking_bond = bond
        return True

    @property
    def has_bond(self) -> bool:
        return self.staking_bond is not None

    @property
    def bond(self) -> int:
        """The captured bond, or the fallback constant if none was captured."""
        if self.staking_bond is None:
            return self.fallback_bond
        return self.staking_bond
