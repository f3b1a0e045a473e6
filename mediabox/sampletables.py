"""Sample table boxes: sample descriptions, sync samples and time-to-sample."""

from __future__ import annotations

import dataclasses
from typing import Any, Iterator, List, Optional

from mediabox.box import Box, ContainerBox, FullBox, Property
from mediabox.stream import BinaryStream


class STSD(FullBox):
    """Sample description box: a versioned header followed by sample entries."""

    def __init__(self) -> None:
        super().__init__("stsd")
        self.boxes: List[Box] = []

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        super().read_data(parser, stream)
        # The entry count is implied by the child boxes that follow.
        stream.read_big_endian_uint32()
        container = ContainerBox("????")
        container.read_data(parser, stream)
        self.boxes = list(container.boxes)

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


class STSS(FullBox):
    """Sync sample box: the numbers of the random-access samples."""

    def __init__(self) -> None:
        super().__init__("stss")
        self.sample_numbers: List[int] = []

    @property
    def entry_count(self) -> int:
        return len(self.sample_numbers)

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        super().read_data(parser, stream)
        count = stream.read_big_endian_uint32()
        self.sample_numbers.extend(stream.read_big_endian_uint32() for _ in range(count))

    def displayable_properties(self) -> List[Property]:
        props = super().displayable_properties()
        props.extend(("Sample Number", str(number)) for number in self.sample_numbers)
        return props


@dataclasses.dataclass(frozen=True)
class TimeToSampleEntry:
    """One run of samples sharing the same duration."""

    sample_count: int
    sample_offset: int


class STTS(FullBox):
    """Time-to-sample box: runs of sample counts and their durations."""

    def __init__(self) -> None:
        super().__init__("stts")
        self.entries: List[TimeToSampleEntry] = []

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        super().read_data(parser, stream)
        count = stream.read_big_endian_uint32()
        for _ in range(count):
            sample_count = stream.read_big_endian_uint32()
            sample_offset = stream.read_big_endian_uint32()
            self.entries.append(TimeToSampleEntry(sample_count, sample_offset))

    def displayable_properties(self) -> List[Property]:
        props = super().displayable_properties()
        for entry in self.entries:
            props.append(("Sample Count", str(entry.sample_count)))
            props.append(("Sample Offset", str(entry.sample_offset)))
        return props