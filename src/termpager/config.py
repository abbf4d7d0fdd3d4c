"""Pager command configuration.

The system pager picks its executable from an ordered list of candidate
commands. The environment-derived part of that list is gathered here so
resolution itself only ever deals with plain strings.

Precedence:
    1. GIT_PAGER environment variable
    2. PAGER environment variable
    3. git's core.pager setting (only queried when git is installed)
    4. Built-in fallbacks, most capable first
"""

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

OVERRIDE_VAR = "GIT_PAGER"
PAGER_VAR = "PAGER"

FALLBACK_COMMANDS = (
    "less -r",
    "more -r",
    "most",
    "pg",
    "cat",
    "pager",
    "pspg",
)


def git_pager() -> Optional[str]:
    """Query git for its configured pager.

    Returns:
        The first configured core.pager value, or None if git is missing,
        fails, or has no pager configured.
    """
    if shutil.which("git") is None:
        return None

    try:
        proc = subprocess.run(
            ["git", "config", "--get-all", "core.pager"],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        logger.debug("git config lookup failed: %s", e)
        return None

    if proc.returncode != 0:
        return None

    for line in proc.stdout.splitlines():
        if line.strip():
            return line.strip()
    return None


@dataclass(frozen=True)
class PagerConfig:
    """Candidate pager commands in precedence order.

    Attributes:
        override_var: Value of GIT_PAGER, if set.
        pager_var: Value of PAGER, if set.
        vcs_pager: Pager configured in git, if any.
        fallbacks: Built-in commands tried last.
    """

    override_var: Optional[str] = None
    pager_var: Optional[str] = None
    vcs_pager: Optional[str] = None
    fallbacks: Tuple[str, ...] = FALLBACK_COMMANDS

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        vcs_lookup: Optional[Callable[[], Optional[str]]] = git_pager,
    ) -> "PagerConfig":
        """Build a config from environment variables and git settings.

        Args:
            environ: Mapping to read variables from (default: os.environ).
            vcs_lookup: Callable returning git's pager, or None to skip it.
        """
        if environ is None:
            environ = os.environ

        vcs_pager = vcs_lookup() if vcs_lookup is not None else None
        config = cls(
            override_var=environ.get(OVERRIDE_VAR),
            pager_var=environ.get(PAGER_VAR),
            vcs_pager=vcs_pager,
        )
        logger.debug("pager candidates: %s", config.candidates())
        return config

    def candidates(self) -> Tuple[Optional[str], ...]:
        """All candidate commands in precedence order, unset ones included."""
        return (self.override_var, self.pager_var, self.vcs_pager) + tuple(
            self.fallbacks
        )
