"""
File-backed editing engine, configuration and reporting.
"""

from chainsmith.engine.config import EditorConfig
from chainsmith.engine.report import Reporter, report_result
from chainsmith.engine.editor import (
    ChainSpecEditor,
    PayloadLoader,
    read_payload_file,
)

__all__ = [
    "EditorConfig",
    "Reporter",
    "report_result",
    "ChainSpecEditor",
    "PayloadLoader",
    "read_payload_file",
]
