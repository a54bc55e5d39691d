"""Built-in San Francisco Bay Area map.

Map coordinates are screen-like: x grows eastwards, y southwards.
"""

from __future__ import annotations

from typing import List, Tuple

from .store import CityGraph

BAY_AREA_CITIES: List[Tuple[str, int, int]] = [
    ("Cupertino", 150, 250),
    ("San Francisco", 120, 100),
    ("San Jose", 180, 300),
    ("Oakland", 150, 110),
    ("Palo Alto", 150, 200),
    ("Mountain View", 160, 220),
    ("Sunnyvale", 170, 240),
    ("Santa Clara", 175, 270),
    ("Fremont", 220, 250),
    ("Hayward", 190, 160),
    ("Berkeley", 140, 90),
    ("Walnut Creek", 210, 100),
    ("San Mateo", 130, 150),
    ("Redwood City", 140, 175),
    ("Daly City", 110, 120),
    ("Sacramento", 350, 50),
    ("Los Angeles", 400, 500),
    ("San Diego", 450, 600),
    ("Las Vegas", 600, 400),
    ("Phoenix", 800, 550),
]

BAY_AREA_ROADS: List[Tuple[str, str]] = [
    ("Cupertino", "Sunnyvale"),
    ("Cupertino", "Palo Alto"),
    ("Cupertino", "San Jose"),
    ("Sunnyvale", "Mountain View"),
    ("Mountain View", "Palo Alto"),
    ("Palo Alto", "Redwood City"),
    ("Redwood City", "San Mateo"),
    ("San Mateo", "San Francisco"),
    ("San Mateo", "Daly City"),
    ("Daly City", "San Francisco"),
    ("San Francisco", "Berkeley"),
    ("Berkeley", "Oakland"),
    ("Oakland", "Hayward"),
    ("Oakland", "Walnut Creek"),
    ("Hayward", "Fremont"),
    ("Fremont", "San Jose"),
    ("Santa Clara", "San Jose"),
    ("Santa Clara", "Sunnyvale"),
    ("San Francisco", "Sacramento"),
    ("Sacramento", "Las Vegas"),
    ("San Jose", "Los Angeles"),
    ("Los Angeles", "San Diego"),
    ("Los Angeles", "Las Vegas"),
    ("Las Vegas", "Phoenix"),
    ("San Diego", "Phoenix"),
]


def build_bay_area_map(dedupe_roads: bool = False) -> CityGraph:
    """Build the built-in map with all of its cities and roads."""
    graph = CityGraph(dedupe_roads=dedupe_roads)
    for name, x, y in BAY_AREA_CITIES:
        graph.add_node(name, x, y)
    for u_name, v_name in BAY_AREA_ROADS:
        graph.add_edge(u_name, v_name)
    return graph
