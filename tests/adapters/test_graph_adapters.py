"""Tests for the graph repository and solver adapters."""

import logging
import math

import pytest

from citymap.adapters.graph import (
    BayAreaGraphRepository,
    CSVGraphRepository,
    DijkstraPathSolver,
    PrimTreeSolver,
)
from citymap.config import GraphConfig
from citymap.domain.errors import CityNotFoundError, GraphLoadError, NoRouteFoundError
from citymap.graph.store import CityGraph


def write_map(directory, cities, roads):
    (directory / "cities.csv").write_text(
        "name,x,y\n" + "".join(f"{name},{x},{y}\n" for name, x, y in cities),
        encoding="utf-8",
    )
    (directory / "roads.csv").write_text(
        "from_city,to_city\n" + "".join(f"{u},{v}\n" for u, v in roads),
        encoding="utf-8",
    )


@pytest.fixture
def triangle_dir(tmp_path):
    write_map(
        tmp_path,
        [("A", 0, 0), ("B", 3, 0), ("C", 3, 4)],
        [("A", "B"), ("B", "C"), ("A", "C")],
    )
    return tmp_path


@pytest.fixture
def split_graph():
    graph = CityGraph()
    graph.add_node("X", 0, 0)
    graph.add_node("Y", 10, 10)
    return graph


class TestCSVGraphRepository:
    """Test suite for CSVGraphRepository."""

    def test_load_reads_cities_and_roads(self, triangle_dir):
        repository = CSVGraphRepository(GraphConfig(data_dir=triangle_dir))

        graph = repository.load()

        assert graph.city_names() == ["A", "B", "C"]
        assert graph.edge_count() == 3

    def test_load_is_cached(self, triangle_dir):
        repository = CSVGraphRepository(GraphConfig(data_dir=triangle_dir))

        assert repository.load() is repository.load()

    def test_clear_cache_reloads(self, triangle_dir):
        repository = CSVGraphRepository(GraphConfig(data_dir=triangle_dir))
        first = repository.load()

        repository.clear_cache()

        assert repository.load() is not first

    def test_roads_with_unknown_city_are_skipped(self, tmp_path):
        write_map(tmp_path, [("A", 0, 0), ("B", 3, 0)], [("A", "B"), ("A", "Atlantis")])

        graph = CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()

        assert graph.edge_count() == 1

    def test_skipped_road_is_logged(self, tmp_path, caplog):
        write_map(tmp_path, [("A", 0, 0)], [("A", "Atlantis")])

        with caplog.at_level(logging.DEBUG, logger="citymap.adapters.graph.csv_repository"):
            graph = CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()

        assert graph.neighbors("A") == ()
        assert "Skipping road with unknown city" in caplog.text

    def test_blank_rows_are_skipped(self, tmp_path):
        (tmp_path / "cities.csv").write_text("name,x,y\nA,0,0\n,,\nB,3,0\n", encoding="utf-8")
        (tmp_path / "roads.csv").write_text("from_city,to_city\n,\nA,B\n", encoding="utf-8")

        graph = CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()

        assert len(graph) == 2
        assert graph.edge_count() == 1

    def test_duplicate_roads_follow_dedupe_setting(self, tmp_path):
        write_map(tmp_path, [("A", 0, 0), ("B", 3, 0)], [("A", "B"), ("B", "A")])

        faithful = CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()
        deduped = CSVGraphRepository(GraphConfig(data_dir=tmp_path, dedupe_roads=True)).load()

        assert faithful.edge_count() == 2
        assert deduped.edge_count() == 1

    def test_missing_file_raises_graph_load_error(self, tmp_path):
        repository = CSVGraphRepository(GraphConfig(data_dir=tmp_path))

        with pytest.raises(GraphLoadError) as excinfo:
            repository.load()

        assert excinfo.value.file_path == str(tmp_path / "cities.csv")
        assert isinstance(excinfo.value.cause, OSError)

    def test_bad_coordinate_raises_graph_load_error(self, tmp_path):
        write_map(tmp_path, [("A", "east", 0)], [])

        with pytest.raises(GraphLoadError):
            CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()

    def test_undecodable_roads_raise_graph_load_error(self, tmp_path):
        write_map(tmp_path, [("A", 0, 0), ("B", 3, 0)], [])
        (tmp_path / "roads.csv").write_bytes(b"from_city,to_city\nA,\xff\xfe\n")

        with pytest.raises(GraphLoadError) as excinfo:
            CSVGraphRepository(GraphConfig(data_dir=tmp_path)).load()

        assert excinfo.value.file_path == str(tmp_path / "roads.csv")
        assert isinstance(excinfo.value.cause, UnicodeDecodeError)

    def test_get_city_and_list_cities(self, triangle_dir):
        repository = CSVGraphRepository(GraphConfig(data_dir=triangle_dir))

        assert repository.get_city("C").x == 3
        assert repository.get_city("Atlantis") is None
        assert [node.name for node in repository.list_cities()] == ["A", "B", "C"]

    def test_bundled_data_matches_built_in_map(self):
        csv_graph = CSVGraphRepository(GraphConfig()).load()
        built_in = BayAreaGraphRepository().load()

        assert csv_graph.city_names() == built_in.city_names()
        assert set(csv_graph.all_edges()) == set(built_in.all_edges())


class TestBayAreaGraphRepository:
    def test_load_builds_twenty_cities(self):
        repository = BayAreaGraphRepository()

        assert len(repository.load()) == 20
        assert repository.load() is repository.load()

    def test_list_cities_sorted(self):
        names = [node.name for node in BayAreaGraphRepository().list_cities()]

        assert names == sorted(names)


class TestDijkstraPathSolver:
    def test_solve_returns_route(self):
        graph = BayAreaGraphRepository().load()

        result = DijkstraPathSolver().solve(graph, "Cupertino", "Sunnyvale")

        assert result.cities == ("Cupertino", "Sunnyvale")
        assert result.distance == pytest.approx(math.hypot(20, 10))

    def test_solve_same_city(self):
        graph = BayAreaGraphRepository().load()

        result = DijkstraPathSolver().solve(graph, "Oakland", "Oakland")

        assert result.is_empty
        assert result.distance == 0.0

    def test_solve_unknown_city_raises(self):
        graph = BayAreaGraphRepository().load()

        with pytest.raises(CityNotFoundError) as excinfo:
            DijkstraPathSolver().solve(graph, "Oakland", "Atlantis")

        assert excinfo.value.city == "Atlantis"

    def test_solve_unreachable_raises(self, split_graph):
        with pytest.raises(NoRouteFoundError) as excinfo:
            DijkstraPathSolver().solve(split_graph, "X", "Y")

        assert (excinfo.value.start, excinfo.value.end) == ("X", "Y")

    def test_solve_safe_returns_degenerate_result(self, split_graph):
        solver = DijkstraPathSolver()

        unreachable = solver.solve_safe(split_graph, "X", "Y")
        unknown = solver.solve_safe(split_graph, "X", "Atlantis")

        assert unreachable.is_empty and math.isinf(unreachable.distance)
        assert unknown.is_empty and math.isinf(unknown.distance)


class TestPrimTreeSolver:
    def test_solve_spans_bay_area(self):
        graph = BayAreaGraphRepository().load()

        result = PrimTreeSolver().solve(graph)

        assert result.num_edges == 19

    def test_partial_tree_logs_warning(self, split_graph, caplog):
        with caplog.at_level(logging.WARNING, logger="citymap.adapters.graph.prim_solver"):
            result = PrimTreeSolver().solve(split_graph)

        assert result.is_empty
        assert "does not reach every city" in caplog.text
