"""Loading levels from Tiled maps and laying out their tiles."""

from __future__ import annotations

import base64
import binascii
import bisect
import gzip
import logging
import os
import struct
import xml.etree.ElementTree as ET
import zlib
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from .pipes import Pipe

log = logging.getLogger(__name__)

EMPTY_TILE = 0xF
DEFAULT_NAME = "Unnamed"
_GID_MASK = 0x0FFFFFFF
_LAYER_TAGS = {"layer", "objectgroup", "imagelayer", "group"}


class LevelError(Exception):
    """Raised when a level cannot be loaded."""

    @classmethod
    def io(cls, err: object) -> LevelError:
        return cls(f"I/O error while loading level: {err}")

    @classmethod
    def tiled(cls, err: object) -> LevelError:
        return cls(f"Tiled error while loading level: {err}")

    @classmethod
    def missing_layer(cls) -> LevelError:
        return cls("Level is missing layer 0")


@dataclass
class LevelData:
    size: tuple[int, int]
    tiles: list[int]


@dataclass
class Level:
    """A loaded level."""

    id: str
    name: str
    prepare_time: float
    data: LevelData


@dataclass
class TilePlacement:
    """A pipe placed in the world for one tile of a level."""

    tile: int
    pipe: Pipe
    x: float
    y: float
    z: float


def _int_attr(element: ET.Element, name: str, default: int | None = None) -> int:
    value = element.get(name)
    if value is None:
        if default is None:
            raise LevelError.tiled(f"<{element.tag}> is missing attribute '{name}'")
        return default
    try:
        return int(value)
    except ValueError:
        raise LevelError.tiled(f"invalid value for '{name}': {value!r}") from None


def _decode_gids(data: ET.Element) -> list[int]:
    encoding = data.get("encoding")
    compression = data.get("compression")
    if encoding is None:
        return [_int_attr(tile, "gid", 0) for tile in data.findall("tile")]
    text = data.text or ""
    if encoding == "csv":
        try:
            return [int(part) for part in (p.strip() for p in text.split(",")) if part]
        except ValueError as exc:
            raise LevelError.tiled(f"invalid csv tile data: {exc}") from None
    if encoding != "base64":
        raise LevelError.tiled(f"unknown tile data encoding '{encoding}'")
    try:
        raw = base64.b64decode("".join(text.split()), validate=True)
    except binascii.Error as exc:
        raise LevelError.tiled(f"invalid base64 tile data: {exc}") from None
    try:
        if compression == "zlib":
            raw = zlib.decompress(raw)
        elif compression == "gzip":
            raw = gzip.decompress(raw)
        elif compression:
            raise LevelError.tiled(f"unsupported tile data compression '{compression}'")
    except (zlib.error, OSError, EOFError) as exc:
        raise LevelError.tiled(f"corrupt compressed tile data: {exc}") from None
    if len(raw) % 4:
        raise LevelError.tiled("tile data is not a whole number of tiles")
    return [gid for (gid,) in struct.iter_unpack("<I", raw)]


def _layer_gids(layer: ET.Element, width: int, height: int, infinite: bool) -> dict[tuple[int, int], int]:
    data = layer.find("data")
    if data is None:
        raise LevelError.tiled("tile layer has no data")
    if infinite:
        gids: dict[tuple[int, int], int] = {}
        for chunk in data.findall("chunk"):
            cx, cy = _int_attr(chunk, "x"), _int_attr(chunk, "y")
            cw = _int_attr(chunk, "width")
            chunk_el = ET.Element("data", data.attrib)
            chunk_el.text = chunk.text
            chunk_el.extend(chunk.findall("tile"))
            for index, gid in enumerate(_decode_gids(chunk_el)):
                row, column = divmod(index, cw)
                gids[(cx + column, cy + row)] = gid
        return gids
    layer_width = _int_attr(layer, "width", width)
    layer_height = _int_attr(layer, "height", height)
    return {
        divmod(index, layer_width)[::-1]: gid
        for index, gid in enumerate(_decode_gids(data))
        if index < layer_width * layer_height
    }


def _load_tileset_firstgids(
    root: ET.Element, path: str, read_resource: Callable[[str], bytes]
) -> list[int]:
    firstgids = []
    for tileset in root.findall("tileset"):
        firstgids.append(_int_attr(tileset, "firstgid"))
        source = tileset.get("source")
        if source is None:
            continue
        tileset_path = os.path.normpath(os.path.join(os.path.dirname(path), source))
        try:
            content = read_resource(tileset_path)
        except OSError as exc:
            raise LevelError.io(exc) from exc
        try:
            tileset_root = ET.fromstring(content)
        except ET.ParseError as exc:
            raise LevelError.tiled(f"{tileset_path}: {exc}") from exc
        if tileset_root.tag != "tileset":
            raise LevelError.tiled(f"{tileset_path} is not a tileset")
    return sorted(firstgids)


def _level_name(root: ET.Element) -> str:
    properties = root.find("properties")
    if properties is None:
        return DEFAULT_NAME
    for prop in properties.findall("property"):
        if prop.get("name") == "level_name" and prop.get("type", "string") == "string":
            value = prop.get("value")
            return value if value is not None else (prop.text or "")
    return DEFAULT_NAME


def parse_level(data: bytes | str, path: str, read_resource: Callable[[str], bytes]) -> Level:
    """Parse a TMX map into a level.

    ``read_resource`` is given the path of each external tileset and
    returns its bytes; an ``OSError`` from it becomes a ``LevelError``.
    """
    path = str(path)
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise LevelError.tiled(exc) from exc
    if root.tag != "map":
        raise LevelError.tiled(f"expected <map>, found <{root.tag}>")
    width, height = _int_attr(root, "width"), _int_attr(root, "height")
    infinite = root.get("infinite") == "1"
    firstgids = _load_tileset_firstgids(root, path, read_resource)

    first_layer = next((child for child in root if child.tag in _LAYER_TAGS), None)
    if first_layer is None or first_layer.tag != "layer":
        raise LevelError.missing_layer()
    gids = _layer_gids(first_layer, width, height, infinite)

    def tile_id(gid: int) -> int:
        gid &= _GID_MASK
        if gid == 0:
            return EMPTY_TILE
        position = bisect.bisect_right(firstgids, gid)
        if position == 0:
            raise LevelError.tiled(f"tile gid {gid} belongs to no tileset")
        return gid - firstgids[position - 1]

    tiles = [tile_id(gids.get((x, y), 0)) for y in range(height) for x in range(width)]
    return Level(
        id=path,
        name=_level_name(root),
        prepare_time=0.0,
        # The level is treated as square, sized by the map's width.
        data=LevelData(size=(width, width), tiles=tiles),
    )


def load_level(path: str | os.PathLike[str]) -> Level:
    """Load a level from a TMX file on disk."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise LevelError.io(exc) from exc
    return parse_level(data, str(path), lambda p: Path(p).read_bytes())


def layout_tiles(level: Level, archetypes: Mapping[int, Pipe]) -> list[TilePlacement]:
    """Place a copy of the matching pipe at the centre of every known tile."""
    size_x, size_y = level.data.size
    offset_x, offset_y = size_x / 2, size_y / 2
    placements = []
    for index, tile in enumerate(level.data.tiles):
        row, column = divmod(index, size_x)
        pipe = archetypes.get(tile)
        if pipe is None:
            log.warning("Level has unknown pipe: %s", tile)
            continue
        log.info("Spawning pipe %s", tile)
        placements.append(
            TilePlacement(
                tile=tile,
                pipe=pipe.clone(),
                x=column * 2.0 - offset_x,
                y=0.0,
                z=row * 2.0 - offset_y,
            )
        )
    return placements


def tiles_of(placements: Iterable[TilePlacement]) -> list[int]:
    """Tile ids of a sequence of placements, in order."""
    return [placement.tile for placement in placements]