from __future__ import annotations
import argparse
from dataclasses import dataclass
from typing import List, Optional

from app.validation import validate_config

DEFAULT_LOG_FILE = "ngram_typer.log"


@dataclass
class Config:
    top: int = 50
    combi: int = 4
    rep: int = 3
    need_wpm: int = 35
    need_acc: int = 95
    layout: Optional[str] = None
    ngram_file: Optional[str] = None
    poll_ms: int = 16
    log_file: str = DEFAULT_LOG_FILE
    seed: Optional[int] = None

    @property
    def use_emulation(self) -> bool:
        return self.layout is not None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ngram-typer",
        description="Terminal touch-typing practice built from frequent n-grams.",
    )
    p.add_argument("--top", type=int, default=Config.top, help="Size of the n-gram pool (most frequent first).")
    p.add_argument("--combi", type=int, default=Config.combi, help="N-grams per chain.")
    p.add_argument("--rep", type=int, default=Config.rep, help="How many times the chain repeats in a lesson.")
    p.add_argument("--wpm", dest="need_wpm", type=int, default=Config.need_wpm, help="WPM needed to pass a lesson.")
    p.add_argument("--acc", dest="need_acc", type=int, default=Config.need_acc, help="Accuracy (%%) needed to pass a lesson.")
    p.add_argument("--layout", choices=("dvorak", "colemak"), default=None,
                   help="Emulate this layout on a QWERTY keyboard.")
    p.add_argument("--ngrams", dest="ngram_file", default=None,
                   help="File with one n-gram per line (optionally followed by a count).")
    p.add_argument("--poll-ms", type=int, default=Config.poll_ms, help="Input poll timeout per frame.")
    p.add_argument("--log-file", default=DEFAULT_LOG_FILE, help="Where to write the log.")
    p.add_argument("--seed", type=int, default=None, help="Seed for lesson generation.")
    return p


def parse_args(argv: Optional[List[str]] = None) -> Config:
    ns = build_parser().parse_args(argv)
    config = Config(
        top=ns.top,
        combi=ns.combi,
        rep=ns.rep,
        need_wpm=ns.need_wpm,
        need_acc=ns.need_acc,
        layout=ns.layout,
        ngram_file=ns.ngram_file,
        poll_ms=ns.poll_ms,
        log_file=ns.log_file,
        seed=ns.seed,
    )
    validate_config(config)
    return config
