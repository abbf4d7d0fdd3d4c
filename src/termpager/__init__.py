"""termpager: paginate text output in the terminal.

Text is either re-flowed and paged in-process with a continuation prompt
between screens (BasicPager), streamed into a native pager program such as
less (SystemPager), or passed straight through when paging is disabled
(NullPager).

Usage:
    import termpager

    termpager.page(long_text)
    termpager.page(path="notes.txt")

    def produce(pager):
        for line in lines:
            pager.write_line(line)

    termpager.page(callback=produce)
"""

from .config import PagerConfig
from .errors import (
    ConfigurationError,
    Error,
    InvalidArgument,
    PagerClosed,
    PagerError,
)
from .pagers import (
    BasicPager,
    NullPager,
    Pager,
    SystemPager,
    WriteResult,
    WriteStatus,
)
from .selection import create_pager, page, select_pager

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "page",
    "create_pager",
    "select_pager",
    # Pagers
    "Pager",
    "BasicPager",
    "NullPager",
    "SystemPager",
    "WriteResult",
    "WriteStatus",
    "PagerConfig",
    # Errors
    "PagerError",
    "Error",
    "ConfigurationError",
    "InvalidArgument",
    "PagerClosed",
]
