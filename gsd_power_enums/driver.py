import logging
from typing import Optional, TextIO

from gsd_power_enums.globals import DEFAULT_ENUM_TYPE, DEFAULT_FLAGS_TYPE
from gsd_power_enums.printer import output_enum_values, output_flags_values
from gsd_power_enums.registry import EnumRegistry, default_registry

log = logging.getLogger(__name__)


def run(registry: Optional[EnumRegistry] = None, stream: Optional[TextIO] = None,
        flags_type: str = DEFAULT_FLAGS_TYPE, enum_type: str = DEFAULT_ENUM_TYPE) -> None:
    """Print the flags group, then the enum group, as `NAME = VALUE;` lines"""
    if registry is None: registry = default_registry()
    log.debug("Writing flags values of %s", flags_type)
    output_flags_values(registry, flags_type, stream)
    log.debug("Writing enum values of %s", enum_type)
    output_enum_values(registry, enum_type, stream)
