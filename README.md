# mediabox

Pure-Python building blocks for reading the box structure of ISO base media
files: MP4, QuickTime-style movies and HEIF/HEIC images.

The package provides binary streams, generic box classes and decoders for a
set of specific box types. You supply a small factory object that decides
which class to create for each four-character box type; the container boxes
then walk the tree and decode what they find.

## Installation

```
pip install mediabox
```

## Modules

- `mediabox.stream` — `DataStream` (bytes in memory) and `FileStream` (a file
  on disk, usable as a context manager), both subclasses of `BinaryStream`.
  They read signed and unsigned integers in big, little or native byte
  order, fixed-point numbers (`read_big_endian_fixed_point(16, 16)`),
  four-character codes, Pascal, fixed-length and NUL-terminated strings, and
  3x3 transformation matrices (`Matrix`). Reading past the end raises
  `EOFError`; seeking outside the data raises `ValueError`. `get(pos, length)`
  reads at an absolute position without moving the stream.
- `mediabox.box` — `Box` (content kept as raw bytes in `data`), `FullBox`
  (reads `version` and 24-bit `flags`), `ContainerBox` (reads child boxes,
  including 64-bit and to-end-of-data sizes), `File` (the top-level
  container), and the data-reference boxes `URL` and `URN`. Every box has
  `displayable_properties()` and `describe(indent_level)`, which returns an
  indented text dump.
- `mediabox.tkhd` — `TKHD`, the track header (times, track ID, duration,
  layer, volume, matrix, width and height), for versions 0 and 1.
- `mediabox.sampletables` — `STSD` (sample descriptions as child boxes),
  `STSS` (`sample_numbers`) and `STTS` (`entries` of `TimeToSampleEntry`).
- `mediabox.references` — `SingleItemTypeReferenceBox` and its subclasses
  `THMB` and `CDSC`, holding `from_item_id` and `to_item_ids`.
- `mediabox.properties` — `PIXI` with its `PixiChannel` list, and `SCHM`
  (scheme type, version and, when flag 1 is set, URI).
- `mediabox.utils` — `pad`, `to_string` and `to_hex_string(value, bits)`.
  For 64-bit values `to_hex_string` shows only the low 32 bits, padded to
  sixteen digits.
- `mediabox.casts` — `numeric_cast(value, target)` converts to an `IntType`
  or to `float` and raises `NumericCastError` when the value does not fit.

## Usage

The object passed as the first argument of `read_data` must have
`create_box(name)`. `ContainerBox` skips `mdat` payloads when it has a true
`skip_mdat_data` attribute; the reference boxes call `get_info("iref")` and
keep their content as raw bytes when it returns `None`; `SCHM` reads a Pascal
string when `preferred_string_type.name` is `"PASCAL"` and a NUL-terminated
one otherwise.

```python
from mediabox.box import Box, ContainerBox, File
from mediabox.properties import PIXI, SCHM
from mediabox.sampletables import STSD, STSS, STTS
from mediabox.stream import FileStream
from mediabox.tkhd import TKHD

CONTAINERS = {"moov", "trak", "mdia", "minf", "stbl", "dinf", "sinf", "schi"}
DECODERS = {"tkhd": TKHD, "stsd": STSD, "stss": STSS, "stts": STTS,
            "pixi": PIXI, "schm": SCHM}


class Boxes:
    skip_mdat_data = True

    def create_box(self, name):
        if name in CONTAINERS:
            return ContainerBox(name)
        return DECODERS.get(name, Box)() if name in DECODERS else Box(name)

    def get_info(self, key):
        return None


with FileStream("movie.mp4") as stream:
    media = File()
    media.read_data(Boxes(), stream)

print(media.describe(0))
```

## What this package does not do

- There is no ready-made entry point that checks whether the input is an ISO
  media file, keeps a registry of box types or tracks `iref` context: you
  provide the factory object yourself, as above.
- Only the box types listed under *Modules* are decoded. Others, such as
  `ftyp`, `mvhd`, `meta`, `hdlr` or `iloc`, are read as plain `Box` objects
  with their content in `data`.
- There is no command-line tool, and nothing is ever written back to a file.

## Running the tests

```
pip install -e .[test]
pytest
```