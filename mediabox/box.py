"""Generic boxes: plain, full (versioned) and container boxes."""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

from mediabox.stream import BinaryStream, DataStream
from mediabox.utils import pad, to_hex_string

Property = Tuple[str, str]

_INDENT = "    "


class Box:
    """A box whose content is kept as raw bytes."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.data = b""

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        """Read the box content from ``stream``, which holds only this box."""
        self.data = stream.read_all()

    def displayable_properties(self) -> List[Property]:
        """Name/value pairs shown in the box description."""
        return []

    def describe(self, indent_level: int = 0) -> str:
        """Return a human-readable, indented description of the box."""
        lines = [_INDENT * indent_level + f"[{self.name}]"]
        props = self.displayable_properties()
        if props:
            width = max(len(key) for key, _ in props)
            prefix = _INDENT * (indent_level + 1)
            lines.extend(f"{prefix}{pad(key, width)}: {value}" for key, value in props)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe(0)


class FullBox(Box):
    """A box starting with a one-byte version and 24-bit flags."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.version = 0
        self.flags = 0

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        self.version = stream.read_uint8()
        self.flags = int.from_bytes(stream.read(3), "big")

    def displayable_properties(self) -> List[Property]:
        return super().displayable_properties() + [
            ("Version", str(self.version)),
            ("Flags", to_hex_string(self.flags, 32)),
        ]


class ContainerBox(Box):
    """A box whose content is a sequence of child boxes."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.boxes: List[Box] = []

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        """Read child boxes until the stream is exhausted.

        Boxes are created with ``parser.create_box``. If the parser has a true
        ``skip_mdat_data`` attribute, ``mdat`` payloads are skipped.
        """
        while stream.has_bytes_available():
            length = stream.read_big_endian_uint32()
            name = stream.read_four_cc()
            header = 8
            if length == 1:
                length = stream.read_big_endian_uint64()
                header = 16
            elif length == 0:
                length = stream.available_bytes() + header
            if length < header:
                raise ValueError(f"Invalid length for box {name!r}: {length}")
            box = parser.create_box(name)
            if name == "mdat" and getattr(parser, "skip_mdat_data", False):
                stream.seek(length - header)
            else:
                box.read_data(parser, DataStream(stream.read(length - header)))
            self.add_box(box)

    def add_box(self, box: Optional[Box]) -> None:
        if box is not None:
            self.boxes.append(box)

    def describe(self, indent_level: int = 0) -> str:
        parts = [super().describe(indent_level)]
        parts.extend(box.describe(indent_level + 1) for box in self.boxes)
        return "\n".join(parts)

    def __iter__(self) -> Iterator[Box]:
        return iter(self.boxes)

    def __len__(self) -> int:
        return len(self.boxes)


class File(ContainerBox):
    """The top-level container holding every box of a media file."""

    def __init__(self) -> None:
        super().__init__("file")


class URL(FullBox):
    """Data entry URL box."""

    def __init__(self) -> None:
        super().__init__("url ")


class URN(FullBox):
    """Data entry URN box."""

    def __init__(self) -> None:
        super().__init__("urn ")