"""
Reading, writing and navigating chain spec documents.
"""

from chainsmith.spec.codec import (
    parse,
    serialize,
    convert_exponentials,
    read,
    write,
)
from chainsmith.spec.locator import (
    Candidate,
    Resolution,
    KeyKind,
    resolve,
    locate_runtime_config,
    locate_paras,
    locate_hrmp,
    locate_authority_keys,
    has_session_keys,
)

__all__ = [
    # codec
    "parse",
    "serialize",
    "convert_exponentials",
    "read",
    "write",
    # locator
    "Candidate",
    "Resolution",
    "KeyKind",
    "resolve",
    "locate_runtime_config",
    "locate_paras",
    "locate_hrmp",
    "locate_authority_keys",
    "has_session_keys",
]
