# config.py

from dataclasses import dataclass, fields

DEFAULT_DURATION_SECONDS = 60

# Older callers pass the round length as `time_limit`.
_ALIASES = {'time_limit': 'duration_seconds'}


class GameConfigError(ValueError):
    """Raised when a session is started with options that make no sense."""


@dataclass
class GameConfig:
    """Options for one session.

    Attributes:
        duration_seconds: Length of the round in real seconds. Must be a positive integer.
    """

    duration_seconds: int = DEFAULT_DURATION_SECONDS

    def validate(self):
        d = self.duration_seconds
        if isinstance(d, bool) or not isinstance(d, int):
            raise GameConfigError(f"duration_seconds must be an integer, got {d!r}")
        if d <= 0:
            raise GameConfigError(f"duration_seconds must be positive, got {d}")
        return self

    @classmethod
    def from_mapping(cls, options):
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise GameConfigError(f"unknown config option: {key!r}")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, config):
        """Accept None, a mapping, or a GameConfig and return a validated GameConfig."""
        if config is None:
            config = cls()
        elif isinstance(config, dict):
            config = cls.from_mapping(config)
        elif not isinstance(config, cls):
            raise GameConfigError(f"unsupported config type: {type(config).__name__}")
        return config.validate()
