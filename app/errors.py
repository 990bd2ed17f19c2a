class TrainerError(Exception):
    """Base error for the trainer."""


class ConfigError(TrainerError):
    pass


class NgramSourceError(TrainerError):
    pass
