from app.errors import ConfigError


def _require(cond: bool, message: str):
    if not cond:
        raise ConfigError(message)


def validate_config(config) -> None:
    """Reject settings the game loop cannot recover from.

    combi == 0 would produce an empty lesson, which pauses input for good,
    so it is refused here rather than in the generator.
    """
    _require(config.top >= 1, f"--top must be at least 1 (got {config.top})")
    _require(config.combi >= 1, f"--combi must be at least 1 (got {config.combi})")
    _require(config.rep >= 1, f"--rep must be at least 1 (got {config.rep})")
    _require(config.need_wpm >= 0, f"--wpm must not be negative (got {config.need_wpm})")
    _require(
        0 <= config.need_acc <= 100,
        f"--acc must be between 0 and 100 (got {config.need_acc})",
    )
    _require(config.poll_ms >= 0, f"--poll-ms must not be negative (got {config.poll_ms})")
