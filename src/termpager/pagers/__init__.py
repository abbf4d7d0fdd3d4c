"""Pager strategies.

Submodules:
- abstract: Shared contract and write outcome type
- basic: In-process pagination with page break prompts
- system: Native pager program fed through a pipe
- null: Passthrough when paging is disabled
"""

from .abstract import Pager, WriteResult, WriteStatus, validate_arguments
from .basic import BasicPager, PageCursor, default_prompt
from .null import NullPager
from .system import (
    PagerProcess,
    SystemPager,
    command_exists,
    exec_available,
    find_executable,
    run_command,
)

__all__ = [
    "Pager",
    "WriteResult",
    "WriteStatus",
    "validate_arguments",
    "BasicPager",
    "PageCursor",
    "default_prompt",
    "NullPager",
    "PagerProcess",
    "SystemPager",
    "command_exists",
    "exec_available",
    "find_executable",
    "run_command",
]
