"""
Core primitives: tree merging, run context, mutation outcomes and errors.
"""

from chainsmith.core.tree import (
    KeyPath,
    get_path,
    format_path,
    MergeReport,
    merge,
)
from chainsmith.core.context import (
    DEFAULT_STAKING_BOND,
    MutationContext,
)
from chainsmith.core.mutation import (
    Issue,
    MutationResult,
)
from chainsmith.core.errors import (
    ChainSpecError,
    ParseError,
    WriteError,
    RegistryNotFound,
)

__all__ = [
    # tree
    "KeyPath",
    "get_path",
    "format_path",
    "MergeReport",
    "merge",
    # context
    "DEFAULT_STAKING_BOND",
    "MutationContext",
    # mutation
    "Issue",
    "MutationResult",
    # errors
    "ChainSpecError",
    "ParseError",
    "WriteError",
    "RegistryNotFound",
]
