"""Page logging demo - Main Entry Point."""

import logging
import sys
from typing import Optional
from . import config
from .adapters import (
    InMemoryDocument,
    LoggingConsoleAdapter,
    StdoutConsoleAdapter
)
from .log import Log

# Table-driven console backends
CONSOLE_BACKENDS = {
    'stdout': StdoutConsoleAdapter,
    'logging': LoggingConsoleAdapter,
}


def build_log(document: Optional[InMemoryDocument] = None) -> Log:
    """Mount adapters from config and create the logger."""
    console_class = CONSOLE_BACKENDS.get(config.CONSOLE_BACKEND)
    if console_class is None:
        raise ValueError(f"Unknown console backend: {config.CONSOLE_BACKEND}")

    return Log(
        config.TEXTAREA_ID,
        config.CONSOLE_ENABLED,
        config.TEXTAREA_ENABLED,
        console=console_class(),
        document=document
    )


def main() -> None:
    """Bootstrap a textarea, run the self test, print the page."""
    # Validate config (early return)
    if config.CONSOLE_BACKEND not in CONSOLE_BACKENDS:
        print(
            f"ERROR: PAGELOG_CONSOLE must be one of "
            f"{', '.join(CONSOLE_BACKENDS)}",
            file=sys.stderr
        )
        sys.exit(1)

    try:
        rows = int(config.TEXTAREA_ROWS)
        cols = int(config.TEXTAREA_COLS)
    except ValueError:
        print("ERROR: PAGELOG_TEXTAREA_ROWS/COLS must be integers", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(levelname)s %(name)s: %(message)s",
    )

    document = InMemoryDocument()
    log = build_log(document)
    log.append_textarea_element(
        config.DEFAULT_TEXTAREA_ID, rows, cols, config.TEXTAREA_ATTRIBUTES
    )
    log.self_test()

    print(document.render())


if __name__ == "__main__":
    main()
