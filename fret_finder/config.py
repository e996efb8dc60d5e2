"""Default configuration for Fret Finder components."""

from typing import Any, Dict

from .logger import get_logger

logger = get_logger(__name__)

# A tuning of None means standard tuning.
DEFAULT_CONFIGS: Dict[str, Dict[str, Any]] = {
    "guitar": {
        "num_frets": 21,
        "tuning": None,
    },
    "diagram": {
        "size": "small",
    },
}


def get_config(name: str) -> Dict[str, Any]:
    """Get a copy of the default configuration with the given name.

    Args:
        name: Configuration name ('guitar' or 'diagram')

    Returns:
        Configuration dictionary, empty if the name is unknown
    """
    if name not in DEFAULT_CONFIGS:
        logger.error(f"Unknown configuration: {name}")
        return {}
    return DEFAULT_CONFIGS[name].copy()
