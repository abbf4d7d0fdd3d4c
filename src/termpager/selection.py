"""Choosing a pager strategy.

Selection order:
    1. NullPager when paging is disabled
    2. SystemPager when a pager executable can be found
    3. BasicPager otherwise
"""

import logging
from typing import Callable, Optional, Tuple, Type

from .config import PagerConfig
from .pagers import BasicPager, NullPager, Pager, SystemPager, find_executable
from .pagers.abstract import validate_arguments

logger = logging.getLogger(__name__)


def select_pager(enabled: bool, executable: Optional[str]) -> Type[Pager]:
    """Pick the pager class for a configuration.

    Args:
        enabled: Whether paging is enabled.
        executable: Resolved pager command, or None if none was found.

    Returns:
        The pager class to use.
    """
    if not enabled:
        return NullPager
    if executable is not None:
        return SystemPager
    return BasicPager


def _commands(command) -> tuple:
    if command is None:
        return ()
    if isinstance(command, str):
        return (command,)
    return tuple(command)


COMMON_OPTIONS = ("input", "output", "enabled")

PAGER_OPTIONS = {
    NullPager: COMMON_OPTIONS,
    BasicPager: COMMON_OPTIONS + ("width", "height", "prompt"),
    SystemPager: COMMON_OPTIONS + ("command", "config"),
}


def _options_for(pager_class: Type[Pager], options: dict) -> dict:
    """Keep only the options a pager class accepts."""
    accepted = PAGER_OPTIONS.get(pager_class, COMMON_OPTIONS)
    return {key: value for key, value in options.items() if key in accepted}


def _resolve(
    *,
    enabled: bool,
    command,
    config: Optional[PagerConfig],
) -> Tuple[Type[Pager], Optional[str]]:
    executable = None
    if enabled:
        executable = find_executable(*_commands(command), config=config)
    pager_class = select_pager(enabled, executable)
    logger.debug("selected %s (executable: %r)", pager_class.__name__, executable)
    return pager_class, executable


def resolve_pager_class(
    *,
    enabled: bool = True,
    command=None,
    config: Optional[PagerConfig] = None,
) -> Type[Pager]:
    """Resolve the executable (when enabled) and select a pager class."""
    pager_class, _ = _resolve(enabled=enabled, command=command, config=config)
    return pager_class


def _build_options(pager_class, executable, options: dict) -> dict:
    """Constructor options, with the command already resolved."""
    options = dict(options, command=executable)
    return _options_for(pager_class, options)


def create_pager(
    *,
    enabled: bool = True,
    command=None,
    config: Optional[PagerConfig] = None,
    **options,
) -> Pager:
    """Create the best available pager.

    Args:
        enabled: Disable paging to get a passthrough pager.
        command: Pager command(s) to use instead of the configured candidates.
        config: Candidate configuration (default: from the environment).
        **options: input, output, width, height, prompt. Options a selected
            pager doesn't understand are ignored.
    """
    pager_class, executable = _resolve(enabled=enabled, command=command, config=config)
    options = dict(options, enabled=enabled, config=config)
    return pager_class(**_build_options(pager_class, executable, options))


def page(
    text: Optional[str] = None,
    *,
    path=None,
    callback: Optional[Callable[[Pager], None]] = None,
    enabled: bool = True,
    command=None,
    config: Optional[PagerConfig] = None,
    **options,
) -> None:
    """Paginate text, a file, or the output of a callback.

    Exactly one of text, path and callback may be given. The user quitting
    or the pager program exiting early simply ends the output.

    Raises:
        InvalidArgument: If more than one of text, path and callback is given.
        ConfigurationError: If a system pager was selected but can't be used.
    """
    validate_arguments(text, path, callback)
    pager_class, executable = _resolve(enabled=enabled, command=command, config=config)
    options = dict(options, enabled=enabled, config=config)
    pager_class.run(
        text,
        path=path,
        callback=callback,
        **_build_options(pager_class, executable, options),
    )
