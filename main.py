# main.py
from __future__ import annotations
import curses
import logging
import os
import sys
from typing import List, Optional

from app.config import Config, parse_args
from app.errors import TrainerError
from services.game import run_session
from ui.session_summary import format_summary
from utils.file_handler import resolve_ngrams

# short wait after ESC so Alt+key sequences still decode
os.environ.setdefault("ESCDELAY", "25")


def setup_logging(config: Config) -> None:
    # curses owns the terminal, so log to the file only
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.FileHandler(config.log_file, encoding="utf-8")],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.exception("Unhandled exception", exc_info=(exctype, value, tb))
        sys.__excepthook__(exctype, value, tb)
        sys.exit(1)

    sys.excepthook = excepthook


def main(argv: Optional[List[str]] = None) -> int:
    try:
        config = parse_args(argv)
    except TrainerError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(config)

    try:
        ngrams = resolve_ngrams(config.ngram_file)
    except TrainerError as e:
        logging.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 2
    logging.info("loaded %d n-grams", len(ngrams))

    state = curses.wrapper(run_session, config, ngrams)
    print(format_summary(state))
    return 0


if __name__ == "__main__":
    sys.exit(main())
