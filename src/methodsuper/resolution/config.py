"""
Configuration for super resolution.

Defines chain construction and walk settings. Instances accept keyword
overrides for any of these keys.
"""

from methodsuper.exceptions import ConfigError

# Chain construction and walking settings
RESOLUTION_CONFIG = {
    "exclude_trivial": True,     # Drop ancestors every fresh class shares
    "cache_chains": True,        # Reuse built chains per root
    "max_super_steps": 256,      # Upper bound on steps in resolve_all
}


def resolution_settings(**overrides) -> dict:
    """
    Merge keyword overrides into RESOLUTION_CONFIG.

    Args:
        **overrides: Replacement values for known keys (None means default)

    Returns:
        New settings dict

    Raises:
        ConfigError: For unknown keys or a non-positive step limit
    """
    unknown = set(overrides) - set(RESOLUTION_CONFIG)
    if unknown:
        raise ConfigError(f"Unknown resolution settings: {sorted(unknown)}")

    settings = dict(RESOLUTION_CONFIG)
    settings.update({key: value for key, value in overrides.items() if value is not None})

    if int(settings["max_super_steps"]) < 1:
        raise ConfigError("max_super_steps must be at least 1")
    return settings
