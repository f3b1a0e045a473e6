"""Item property boxes: pixel information and protection scheme type."""

from __future__ import annotations

import dataclasses
from typing import Any, List

from mediabox.box import Box, FullBox, Property
from mediabox.stream import BinaryStream
from mediabox.utils import pad

_INDENT = "    "


@dataclasses.dataclass
class PixiChannel:
    """Bit depth of one image channel."""

    bits_per_channel: int = 0

    @property
    def name(self) -> str:
        return "Channel"

    @classmethod
    def from_stream(cls, stream: BinaryStream) -> "PixiChannel":
        return cls(stream.read_uint8())

    def displayable_properties(self) -> List[Property]:
        return [("Bits per channel", str(self.bits_per_channel))]

    def describe(self, indent_level: int = 0) -> str:
        lines = [_INDENT * indent_level + f"[{self.name}]"]
        props = self.displayable_properties()
        width = max(len(key) for key, _ in props)
        prefix = _INDENT * (indent_level + 1)
        lines.extend(f"{prefix}{pad(key, width)}: {value}" for key, value in props)
        return "\n".join(lines)


class PIXI(FullBox):
    """Pixel information property: one bit depth per channel."""

    def __init__(self) -> None:
        super().__init__("pixi")
        self.channels: List[PixiChannel] = []

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        super().read_data(parser, stream)
        count = stream.read_uint8()
        for _ in range(count):
            self.add_channel(PixiChannel.from_stream(stream))

    def add_channel(self, channel: PixiChannel) -> None:
        self.channels.append(channel)

    def displayable_properties(self) -> List[Property]:
        # Version and flags are deliberately not listed for this box.
        return Box.displayable_properties(self) + [("Channels", str(len(self.channels)))]

    def describe(self, indent_level: int = 0) -> str:
        parts = [super().describe(indent_level)]
        parts.extend(channel.describe(indent_level + 1) for channel in self.channels)
        return "\n".join(parts)


def _prefers_pascal(parser: Any) -> bool:
    string_type = getattr(parser, "preferred_string_type", None)
    return str(getattr(string_type, "name", "")).upper() == "PASCAL"


class SCHM(FullBox):
    """Scheme type box of a protected sample entry."""

    def __init__(self) -> None:
        super().__init__("schm")
        self.scheme_type = ""
        self.scheme_version = 0
        self.scheme_uri = ""

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        super().read_data(parser, stream)
        self.scheme_type = stream.read_four_cc()
        self.scheme_version = stream.read_big_endian_uint32()
        if self.flags & 0x000001:
            if _prefers_pascal(parser):
                self.scheme_uri = stream.read_pascal_string()
            else:
                self.scheme_uri = stream.read_null_terminated_string()

    def displayable_properties(self) -> List[Property]:
        return super().displayable_properties() + [
            ("Scheme type", self.scheme_type),
            ("Scheme version", str(self.scheme_version)),
            ("Scheme URI", self.scheme_uri),
        ]