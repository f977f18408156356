"""Tests for the configuration-backed graph repository."""

import pytest

from route_planner.adapters.graph import DemoGraphRepository
from route_planner.config import DEMO_LOCATIONS, GraphConfig
from route_planner.domain.errors import ConfigurationError


class TestDemoGraphRepository:
    """Test suite for DemoGraphRepository."""

    @pytest.fixture
    def repository(self):
        return DemoGraphRepository(GraphConfig())

    def test_load_builds_demo_graph(self, repository):
        engine = repository.load()

        assert engine.locations == tuple(DEMO_LOCATIONS)
        assert engine.cost("Dallas", "Atlanta") == 780
        assert engine.cost("Boston", "Seattle") == 2480

    def test_load_is_cached(self, repository):
        assert repository.load() is repository.load()

    def test_clear_cache_rebuilds(self, repository):
        first = repository.load()
        repository.clear_cache()

        assert repository.load() is not first

    def test_list_locations(self, repository):
        assert repository.list_locations() == DEMO_LOCATIONS

    def test_custom_graph(self):
        config = GraphConfig(locations=["X", "Y"], edges=[("X", "Y", 2.5)])

        engine = DemoGraphRepository(config).load()

        assert engine.shortest_path("X", "Y").total_cost == 2.5

    def test_duplicate_location_is_configuration_error(self):
        config = GraphConfig(locations=["X", "X"], edges=[])

        with pytest.raises(ConfigurationError) as excinfo:
            DemoGraphRepository(config).load()

        assert excinfo.value.setting_name == "locations"

    def test_edge_to_unknown_location_is_configuration_error(self):
        config = GraphConfig(locations=["X", "Y"], edges=[("X", "Z", 1)])

        with pytest.raises(ConfigurationError) as excinfo:
            DemoGraphRepository(config).load()

        assert excinfo.value.setting_name == "edges"

    def test_negative_edge_is_configuration_error(self):
        config = GraphConfig(locations=["X", "Y"], edges=[("X", "Y", -4)])

        with pytest.raises(ConfigurationError) as excinfo:
            DemoGraphRepository(config).load()

        assert excinfo.value.cause is not None
