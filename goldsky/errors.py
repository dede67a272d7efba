"""Exception types raised by the game core."""


class GoldSkyError(Exception):
    """Base class for errors raised by goldsky."""


class ConfigError(GoldSkyError):
    """A GameConfig value is out of range or inconsistent with another one."""
