"""Map model built from OpenStreetMap XML data."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import IntEnum

_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_EARTH_RADIUS = 6378137.0
_DEG_TO_RAD = 2.0 * math.pi / 360.0


def _atof(text: str) -> float:
    """Parse the leading number of ``text``; return 0.0 if there is none."""
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class Node:
    """A map point; ``x`` is longitude and ``y`` latitude until normalised."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Way:
    """An ordered list of node indices."""

    nodes: list[int] = field(default_factory=list)


class RoadType(IntEnum):
    INVALID = 0
    UNCLASSIFIED = 1
    SERVICE = 2
    RESIDENTIAL = 3
    TERTIARY = 4
    SECONDARY = 5
    PRIMARY = 6
    TRUNK = 7
    MOTORWAY = 8
    FOOTWAY = 9


@dataclass
class Road:
    way: int
    type: RoadType


@dataclass
class Railway:
    way: int


@dataclass
class Multipolygon:
    """Outer and inner rings, given as way indices."""

    outer: list[int] = field(default_factory=list)
    inner: list[int] = field(default_factory=list)


@dataclass
class Building(Multipolygon):
    pass


@dataclass
class Leisure(Multipolygon):
    pass


@dataclass
class Water(Multipolygon):
    pass


class LanduseType(IntEnum):
    INVALID = 0
    COMMERCIAL = 1
    CONSTRUCTION = 2
    GRASS = 3
    FOREST = 4
    INDUSTRIAL = 5
    RAILWAY = 6
    RESIDENTIAL = 7


@dataclass
class Landuse(Multipolygon):
    type: LanduseType = LanduseType.INVALID


_ROAD_TYPES = {
    "motorway": RoadType.MOTORWAY,
    "trunk": RoadType.TRUNK,
    "primary": RoadType.PRIMARY,
    "secondary": RoadType.SECONDARY,
    "tertiary": RoadType.TERTIARY,
    "residential": RoadType.RESIDENTIAL,
    "living_street": RoadType.RESIDENTIAL,
    "service": RoadType.SERVICE,
    "unclassified": RoadType.UNCLASSIFIED,
    "footway": RoadType.FOOTWAY,
    "bridleway": RoadType.FOOTWAY,
    "steps": RoadType.FOOTWAY,
    "path": RoadType.FOOTWAY,
    "pedestrian": RoadType.FOOTWAY,
}

_LANDUSE_TYPES = {
    "commercial": LanduseType.COMMERCIAL,
    "construction": LanduseType.CONSTRUCTION,
    "grass": LanduseType.GRASS,
    "forest": LanduseType.FOREST,
    "industrial": LanduseType.INDUSTRIAL,
    "railway": LanduseType.RAILWAY,
    "residential": LanduseType.RESIDENTIAL,
}

_LEISURE_NATURALS = {"wood", "tree_row", "scrub", "grassland"}


def road_type_from_string(value: str) -> RoadType:
    """Map an OSM ``highway`` value to a road type."""
    return _ROAD_TYPES.get(value, RoadType.INVALID)


def landuse_type_from_string(value: str) -> LanduseType:
    """Map an OSM ``landuse`` value to a landuse type."""
    return _LANDUSE_TYPES.get(value, LanduseType.INVALID)


def _track_rec(open_ways, ways, used, nodes) -> bool:
    if not nodes:
        for i, way_num in enumerate(open_ways):
            if used[i]:
                continue
            used[i] = True
            nodes[:] = ways[way_num].nodes
            if _track_rec(open_ways, ways, used, nodes):
                return True
            nodes.clear()
            used[i] = False
        return False

    head, tail = nodes[0], nodes[-1]
    if head == tail and len(nodes) > 1:
        return True
    for i, way_num in enumerate(open_ways):
        if used[i]:
            continue
        way_nodes = ways[way_num].nodes
        if not way_nodes:
            continue
        way_head, way_tail = way_nodes[0], way_nodes[-1]
        if way_head != tail and way_tail != tail:
            continue
        used[i] = True
        length = len(nodes)
        nodes.extend(way_nodes if way_head == tail else reversed(way_nodes))
        if _track_rec(open_ways, ways, used, nodes):
            return True
        del nodes[length:]
        used[i] = False
    return False


def _track(open_ways: list[int], ways: list[Way]) -> list[int]:
    """Chain open ways into one closed ring; mark consumed ways with -1."""
    used = [False] * len(open_ways)
    nodes: list[int] = []
    if _track_rec(open_ways, ways, used, nodes):
        for i, was_used in enumerate(used):
            if was_used:
                open_ways[i] = -1
    return nodes


class Model:
    """Roads, railways and areas of a map, in normalised coordinates."""

    def __init__(self, xml):
        self.nodes: list[Node] = []
        self.ways: list[Way] = []
        self.roads: list[Road] = []
        self.railways: list[Railway] = []
        self.buildings: list[Building] = []
        self.leisures: list[Leisure] = []
        self.waters: list[Water] = []
        self.landuses: list[Landuse] = []
        self.min_lat = 0.0
        self.max_lat = 0.0
        self.min_lon = 0.0
        self.max_lon = 0.0
        self._metric_scale = 1.0

        self._load_data(xml)
        self._adjust_coordinates()
        self.roads.sort(key=lambda road: road.type)

    @property
    def metric_scale(self) -> float:
        """Length in metres of one unit of normalised coordinates."""
        return self._metric_scale

    def _load_data(self, xml) -> None:
        try:
            root = ET.fromstring(xml)
        except ET.ParseError as exc:
            raise ValueError("failed to parse the xml file") from exc

        bounds = root.findall("bounds") if root.tag == "osm" else []
        if not bounds:
            raise ValueError("map's bounds are not defined")
        first = bounds[0]
        self.min_lat = _atof(first.get("minlat", ""))
        self.max_lat = _atof(first.get("maxlat", ""))
        self.min_lon = _atof(first.get("minlon", ""))
        self.max_lon = _atof(first.get("maxlon", ""))

        node_ids: dict[str, int] = {}
        for element in root.findall("node"):
            node_ids[element.get("id", "")] = len(self.nodes)
            self.nodes.append(
                Node(x=_atof(element.get("lon", "")), y=_atof(element.get("lat", "")))
            )

        way_ids: dict[str, int] = {}
        for element in root.findall("way"):
            way_num = len(self.ways)
            way_ids[element.get("id", "")] = way_num
            way = Way()
            self.ways.append(way)
            for child in element:
                if child.tag == "nd":
                    ref = child.get("ref", "")
                    if ref in node_ids:
                        way.nodes.append(node_ids[ref])
                elif child.tag == "tag":
                    self._classify_way(way_num, child.get("k", ""), child.get("v", ""))

        for element in root.findall("relation"):
            self._load_relation(element, way_ids)

    def _classify_way(self, way_num: int, category: str, kind: str) -> None:
        if category == "highway":
            road_type = road_type_from_string(kind)
            if road_type != RoadType.INVALID:
                self.roads.append(Road(way=way_num, type=road_type))
        if category == "railway":
            self.railways.append(Railway(way=way_num))
        elif category == "building":
            self.buildings.append(Building(outer=[way_num]))
        elif (
            category == "leisure"
            or (category == "natural" and kind in _LEISURE_NATURALS)
            or (category == "landcover" and kind == "grass")
        ):
            self.leisures.append(Leisure(outer=[way_num]))
        elif category == "natural" and kind == "water":
            self.waters.append(Water(outer=[way_num]))
        elif category == "landuse":
            landuse_type = landuse_type_from_string(kind)
            if landuse_type != LanduseType.INVALID:
                self.landuses.append(Landuse(outer=[way_num], type=landuse_type))

    def _load_relation(self, element, way_ids: dict[str, int]) -> None:
        outer: list[int] = []
        inner: list[int] = []
        for child in element:
            if child.tag == "member":
                if child.get("type", "") != "way":
                    continue
                ref = child.get("ref", "")
                if ref not in way_ids:
                    continue
                target = outer if child.get("role", "") == "outer" else inner
                target.append(way_ids[ref])
            elif child.tag == "tag":
                category = child.get("k", "")
                kind = child.get("v", "")
                if category == "building":
                    self.buildings.append(Building(outer=outer, inner=inner))
                    break
                if category == "natural" and kind == "water":
                    water = Water(outer=outer, inner=inner)
                    self.waters.append(water)
                    self._build_rings(water)
                    break
                if category == "landuse":
                    landuse_type = landuse_type_from_string(kind)
                    if landuse_type != LanduseType.INVALID:
                        landuse = Landuse(outer=outer, inner=inner, type=landuse_type)
                        self.landuses.append(landuse)
                        self._build_rings(landuse)
                    break

    def _adjust_coordinates(self) -> None:
        def lat2ym(lat: float) -> float:
            return math.log(math.tan(lat * _DEG_TO_RAD / 2 + math.pi / 4)) / 2 * _EARTH_RADIUS

        def lon2xm(lon: float) -> float:
            return lon * _DEG_TO_RAD / 2 * _EARTH_RADIUS

        min_x = lon2xm(self.min_lon)
        min_y = lat2ym(self.min_lat)
        dx = lon2xm(self.max_lon) - min_x
        dy = lat2ym(self.max_lat) - min_y
        self._metric_scale = min(dx, dy)
        for node in self.nodes:
            node.x = (lon2xm(node.x) - min_x) / self._metric_scale
            node.y = (lat2ym(node.y) - min_y) / self._metric_scale

    def _build_rings(self, polygon: Multipolygon) -> None:
        polygon.outer = self._close_rings(polygon.outer)
        polygon.inner = self._close_rings(polygon.inner)

    def _close_rings(self, way_nums: list[int]) -> list[int]:
        def is_closed(way: Way) -> bool:
            return len(way.nodes) > 1 and way.nodes[0] == way.nodes[-1]

        closed = [num for num in way_nums if is_closed(self.ways[num])]
        open_ways = [num for num in way_nums if not is_closed(self.ways[num])]
        while open_ways:
            new_nodes = _track(open_ways, self.ways)
            if not new_nodes:
                break
            open_ways = [num for num in open_ways if num >= 0]
            closed.append(len(self.ways))
            self.ways.append(Way(nodes=new_nodes))
        return closed