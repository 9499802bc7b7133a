import sys
from typing import Iterable, Optional, TextIO

from gsd_power_enums.registry import EnumerantEntry, EnumRegistry


def format_entry(entry: EnumerantEntry) -> str: return f"{entry.name} = {entry.value};"


def output_values(entries: Iterable[EnumerantEntry], stream: Optional[TextIO] = None) -> None:
    if stream is None: stream = sys.stdout
    for entry in entries: stream.write(format_entry(entry) + "\n")


# lookups finish before the first write, so a failed lookup prints nothing for its group
def output_flags_values(registry: EnumRegistry, type_id: str, stream: Optional[TextIO] = None) -> None:
    output_values(registry.lookup_flags(type_id), stream)


def output_enum_values(registry: EnumRegistry, type_id: str, stream: Optional[TextIO] = None) -> None:
    output_values(registry.lookup_enum(type_id), stream)
