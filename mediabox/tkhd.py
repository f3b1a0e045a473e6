"""Track header box."""

from __future__ import annotations

from typing import Any, List, Tuple

from mediabox.box import FullBox, Property
from mediabox.stream import BinaryStream, Matrix


class TKHD(FullBox):
    """Track header: timing, layering, volume, transform and display size."""

    def __init__(self) -> None:
        super().__init__("tkhd")
        self.creation_time = 0
        self.modification_time = 0
        self.track_id = 0
        self.duration = 0
        self.layer = 0
        self.alternate_group = 0
        self.volume = 0
        self.matrix = Matrix()
        self.width = 0.0
        self.height = 0.0
        self._reserved1 = 0
        self._reserved2: Tuple[int, int] = (0, 0)
        self._reserved3 = 0

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        super().read_data(parser, stream)
        read_wide = stream.read_big_endian_uint64 if self.version == 1 else stream.read_big_endian_uint32

        self.creation_time = read_wide()
        self.modification_time = read_wide()
        self.track_id = stream.read_big_endian_uint32()
        self._reserved1 = stream.read_big_endian_uint32()
        self.duration = read_wide()

        self._reserved2 = (stream.read_big_endian_uint32(), stream.read_big_endian_uint32())

        self.layer = stream.read_big_endian_uint16()
        self.alternate_group = stream.read_big_endian_uint16()
        self.volume = stream.read_big_endian_uint16()
        self._reserved3 = stream.read_big_endian_uint16()

        self.matrix = stream.read_matrix()
        self.width = stream.read_big_endian_fixed_point(16, 16)
        self.height = stream.read_big_endian_fixed_point(16, 16)

    def displayable_properties(self) -> List[Property]:
        return super().displayable_properties() + [
            ("Creation time", str(self.creation_time)),
            ("Modification time", str(self.modification_time)),
            ("Track ID", str(self.track_id)),
            ("Duration", str(self.duration)),
            ("Layer", str(self.layer)),
            ("Alternate group", str(self.alternate_group)),
            ("Volume", str(self.volume)),
            ("Matrix", str(self.matrix)),
            ("Width", f"{self.width:f}"),
            ("Height", f"{self.height:f}"),
        ]