from enum import IntEnum, IntFlag

import pytest

from gsd_power_enums.registry import EnumRegistry


class SampleFlags(IntFlag):
    FOO = 1
    BAR = 2
    BAZ = 4


class SampleEnum(IntEnum):
    OFF = 0
    ON = 1


@pytest.fixture
def sample_registry():
    registry = EnumRegistry()
    registry.register("SampleFlags", SampleFlags)
    registry.register("SampleEnum", SampleEnum)
    return registry
