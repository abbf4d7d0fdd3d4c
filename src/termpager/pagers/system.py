"""Paging through a native pager program.

The pager command is resolved once per instance from explicit commands or
from the configured candidates (see termpager.config). The program is only
started on the first write; its stdin is a pipe we write to and its stdout
is left attached to the terminal.

Once the program exits (e.g. the user pressed q in less), writes fail with
a broken pipe which is reported as PagerClosed.
"""

import errno
import logging
import shutil
import subprocess
from typing import Optional

from ..config import PagerConfig
from ..errors import ConfigurationError
from .abstract import Pager, WriteResult, terminate_line

logger = logging.getLogger(__name__)


def command_exists(command: str) -> bool:
    """Check whether a program is on the search path."""
    return shutil.which(command) is not None


def _base_command(command: str) -> str:
    parts = command.split()
    return parts[0] if parts else ""


def find_executable(*commands: str, config: Optional[PagerConfig] = None) -> Optional[str]:
    """Find the first available pager command.

    Args:
        *commands: Commands to choose from. When given, the configured
            candidates are not considered at all.
        config: Candidate configuration (default: read from the environment).

    Returns:
        The first command whose program exists, or None.
    """
    if commands:
        candidates = commands
    else:
        if config is None:
            config = PagerConfig.from_environment()
        candidates = config.candidates()

    seen = set()
    for candidate in candidates:
        if candidate is None:
            continue
        candidate = candidate.strip()
        if not candidate or candidate in seen:
            continue
        seen.add(candidate)
        if command_exists(_base_command(candidate)):
            return candidate

    return None


def exec_available(*commands: str, config: Optional[PagerConfig] = None) -> bool:
    """Check if any pager command is available."""
    return find_executable(*commands, config=config) is not None


def run_command(command: str) -> bool:
    """Run a command once without input to check that it works.

    Returns:
        True if the command ran and exited successfully.
    """
    try:
        proc = subprocess.run(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        logger.debug("dry run of %r failed: %s", command, e)
        return False

    if proc.returncode != 0:
        logger.debug(
            "dry run of %r exited with %d: %s",
            command,
            proc.returncode,
            proc.stderr.decode("utf-8", "replace").strip(),
        )
        return False
    return True


class PagerProcess:
    """A running pager program and the pipe feeding its stdin."""

    def __init__(self, command: str, *, encoding: str = "utf-8"):
        self.command = command
        self.encoding = encoding
        self.process = subprocess.Popen(command, shell=True, stdin=subprocess.PIPE)
        self.pid = self.process.pid
        logger.debug("started pager %r (pid %d)", command, self.pid)

    @property
    def closed_message(self) -> str:
        return f"The pager process (`{self.command}`) was closed"

    def write(self, text: str) -> WriteResult:
        """Send text to the pager's stdin."""
        stdin = self.process.stdin
        try:
            stdin.write(text.encode(self.encoding))
            stdin.flush()
        except BrokenPipeError:
            logger.debug("pager %r closed its input", self.command)
            return WriteResult.closed(self.closed_message)
        except ValueError:
            # write to closed file
            return WriteResult.closed(self.closed_message)
        except OSError as e:
            if e.errno not in (errno.EPIPE, errno.EINVAL):
                raise
            return WriteResult.closed(self.closed_message)
        return WriteResult.written()

    def close(self) -> bool:
        """Close stdin and wait for the pager to exit.

        Returns:
            True if the pager exited successfully.
        """
        stdin = self.process.stdin
        if stdin is not None and not stdin.closed:
            try:
                stdin.close()
            except BrokenPipeError:
                # Unflushed data the pager never read
                pass

        try:
            returncode = self.process.wait()
        except ChildProcessError:
            # Already reaped elsewhere; the process has ended
            return True

        logger.debug("pager %r exited with %d", self.command, returncode)
        return returncode == 0


class SystemPager(Pager):
    """Pager that streams text into a native pager program."""

    def __init__(
        self,
        *,
        command=None,
        config: Optional[PagerConfig] = None,
        **options,
    ):
        """Create a system pager.

        Args:
            command: Pager command, or list of commands to pick from. When
                omitted the configured candidates are used.
            config: Candidate configuration (default: from the environment).
            **options: input, output and enabled, see Pager.

        Raises:
            ConfigurationError: If no pager executable can be found.
        """
        super().__init__(**options)
        self._config = config
        self._pager_command: Optional[str] = None
        self._pager_io: Optional[PagerProcess] = None

        if isinstance(command, str):
            commands = (command,)
        else:
            commands = tuple(command or ())
        self.resolve_command(*commands)

        if self._pager_command is None:
            raise ConfigurationError(
                f"{type(self).__name__} cannot be used on your system due to "
                "lack of appropriate pager executable. Install `less` like "
                "pager or try using `BasicPager` instead."
            )

    @property
    def pager_command(self) -> Optional[str]:
        """The resolved pager command."""
        return self._pager_command

    @property
    def process(self) -> Optional[PagerProcess]:
        """The running pager, if one was started."""
        return self._pager_io

    def resolve_command(self, *commands: str) -> Optional[str]:
        """Resolve the pager command.

        The resolved command is cached; it's only looked up again when new
        candidate commands are given.
        """
        if self._pager_command is None or commands:
            self._pager_command = find_executable(*commands, config=self._config)
            logger.debug("resolved pager command: %r", self._pager_command)
        return self._pager_command

    def _send(
        self, text: str, *, newline: bool = False, final: bool = False
    ) -> WriteResult:
        if newline:
            text = terminate_line(text)
        if self._pager_io is None:
            self._pager_io = self._spawn_pager()
        return self._pager_io.write(text)

    def close(self) -> bool:
        if self._pager_io is None:
            return True
        pager_io, self._pager_io = self._pager_io, None
        return pager_io.close()

    def _spawn_pager(self) -> PagerProcess:
        # In case there's a previous pager running
        self.close()

        command = self._pager_command
        if not run_command(command):
            # Unsupported flag or similar, try the bare program
            command = _base_command(command)
            logger.debug("falling back to %r", command)

        return PagerProcess(command)
