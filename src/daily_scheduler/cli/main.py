# src/daily_scheduler/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, hooks the console conflict printer into
the registry and runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import conflict_printer, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def console_level_from_name(name: object, default: int = logging.WARNING) -> int:
    """Map 'DEBUG'/'info'/... to a logging level; anything else gives `default`."""
    level = getattr(logging, str(name).strip().upper(), None)
    # logging also exposes non-level attributes (BASIC_FORMAT, root, ...).
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    return default


def main() -> None:
    settings = get_settings()

    console_level = console_level_from_name(getattr(settings, "log_level", "WARNING"))

    log_dir = settings.log_dir if settings.log_to_file else None
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (log_file=%s)...", settings.app_name, log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    if settings.notify_on_console:
        state.registry.subscribe(conflict_printer())

    try:
        run_console_loop(state)
    finally:
        # Nothing is persisted; the schedule lives only for this session.
        logger.info("Bye. %d task(s) were scheduled.", len(state.registry))


if __name__ == "__main__":
    main()
