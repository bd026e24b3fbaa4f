from .loader import CONFIG_FILENAME, get_config, load_config, reset_config, set_config
from .models import AssertgConfig, DescriptionStyle, RepresentationPreset

__all__ = [
    "CONFIG_FILENAME",
    "AssertgConfig",
    "DescriptionStyle",
    "RepresentationPreset",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
