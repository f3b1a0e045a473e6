"""Item reference boxes that link one item to a list of other items."""

from __future__ import annotations

from typing import Any, List

from mediabox.box import Box, Property
from mediabox.stream import BinaryStream
from mediabox.utils import to_string


class SingleItemTypeReferenceBox(Box):
    """A reference of one type from one item to several others.

    The width of the item IDs depends on the version of the enclosing ``iref``
    box, which the parser exposes through ``parser.get_info("iref")``. Without
    that context the content is kept as raw bytes.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.from_item_id = 0
        self.to_item_ids: List[int] = []

    def read_data(self, parser: Any, stream: BinaryStream) -> None:
        iref = parser.get_info("iref")
        if iref is None:
            super().read_data(parser, stream)
            return

        version = getattr(iref, "version", None)
        if version == 0:
            read_id = stream.read_big_endian_uint16
        elif version == 1:
            read_id = stream.read_big_endian_uint32
        else:
            return

        self.from_item_id = read_id()
        count = stream.read_big_endian_uint16()
        for _ in range(count):
            self.add_to_item_id(read_id())

    def add_to_item_id(self, value: int) -> None:
        self.to_item_ids.append(value)

    def displayable_properties(self) -> List[Property]:
        return super().displayable_properties() + [
            ("From item ID", str(self.from_item_id)),
            ("To item IDs", to_string(self.to_item_ids)),
        ]


class THMB(SingleItemTypeReferenceBox):
    """Thumbnail reference."""

    def __init__(self) -> None:
        super().__init__("thmb")


class CDSC(SingleItemTypeReferenceBox):
    """Content description reference."""

    def __init__(self) -> None:
        super().__init__("cdsc")