"""Tests for the model layer: RoadNetwork, Parcel, VillageState and move()."""

from __future__ import annotations

import copy
import dataclasses
import logging

import pytest

from meadowfield.model import (
    NetworkConfigError,
    Parcel,
    RoadNetwork,
    VillageState,
    build_network,
    make_state,
    move,
    parse_edge,
)


class TestParseEdge:
    """Tests for parse_edge()."""

    def test_splits_on_separator(self):
        """An edge should split into its two endpoints."""
        assert parse_edge("Alice's House-Cabin") == ("Alice's House", "Cabin")

    def test_custom_separator(self):
        """A different separator should be honored."""
        assert parse_edge("A|B", separator="|") == ("A", "B")

    @pytest.mark.parametrize("edge", ["Cabin", "A-B-C", "-Cabin", "Cabin-", ""])
    def test_malformed_edges_rejected(self, edge):
        """Anything but two non-empty names should raise."""
        with pytest.raises(NetworkConfigError):
            parse_edge(edge)


class TestBuildNetwork:
    """Tests for build_network()."""

    def test_edges_are_symmetric(self):
        """Every edge should be reachable in both directions."""
        edges = ["A-B", "B-C", "C-A", "D-A"]
        network = build_network(edges)

        for edge in edges:
            a, b = edge.split("-")
            assert b in network[a]
            assert a in network[b]

    def test_insertion_order_preserved(self):
        """Neighbor lists and locations should keep first-seen order."""
        network = build_network(["A-B", "A-C", "D-A"])

        assert network["A"] == ("B", "C", "D")
        assert network.locations == ("A", "B", "C", "D")

    def test_duplicate_edges_kept(self):
        """Duplicate edges should duplicate adjacency entries."""
        network = build_network(["A-B", "A-B", "B-A"])

        assert network["A"] == ("B", "B", "B")
        assert network["B"] == ("A", "A", "A")
        assert network.edge_count == 3

    def test_only_edge_endpoints_are_locations(self):
        """Locations exist only by appearing in an edge."""
        network = build_network(["A-B"])

        assert set(network) == {"A", "B"}
        assert "C" not in network
        assert len(network) == 2

    def test_empty_edge_list(self):
        """No edges should give an empty network."""
        network = build_network([])

        assert len(network) == 0
        assert network.locations == ()

    def test_malformed_edge_fails_fast(self):
        """A malformed edge should raise and name its position."""
        with pytest.raises(NetworkConfigError, match="Edge 1"):
            build_network(["A-B", "B to C", "C-D"])

    def test_config_error_is_value_error(self):
        """NetworkConfigError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            build_network(["nope"])

    def test_accepts_generator(self):
        """Any iterable of edges should work."""
        network = build_network(f"{a}-{b}" for a, b in [("A", "B"), ("B", "C")])

        assert network["B"] == ("A", "C")


class TestRoadNetwork:
    """Tests for the RoadNetwork mapping."""

    def test_is_read_only(self):
        """The network should not support item assignment or list mutation."""
        network = build_network(["A-B"])

        with pytest.raises(TypeError):
            network["C"] = ("A",)  # type: ignore[index]
        with pytest.raises(AttributeError):
            network["A"].append("C")  # type: ignore[attr-defined]

    def test_source_mapping_is_copied(self):
        """Changing the mapping passed in should not affect the network."""
        adjacency = {"A": ["B"], "B": ["A"]}
        network = RoadNetwork(adjacency)

        adjacency["A"].append("C")
        adjacency["C"] = ["A"]

        assert network["A"] == ("B",)
        assert "C" not in network

    def test_neighbors_of_unknown_place(self):
        """Unknown places should have no neighbors rather than raise."""
        network = build_network(["A-B"])

        assert network.neighbors("Z") == ()
        with pytest.raises(KeyError):
            network["Z"]

    def test_is_adjacent(self):
        """is_adjacent() should follow the roads in both directions."""
        network = build_network(["A-B", "B-C"])

        assert network.is_adjacent("A", "B")
        assert network.is_adjacent("B", "A")
        assert not network.is_adjacent("A", "C")
        assert not network.is_adjacent("Z", "A")

    def test_equality_by_content(self):
        """Two networks built from the same edges should compare equal."""
        assert build_network(["A-B"]) == build_network(["A-B"])
        assert build_network(["A-B"]) != build_network(["A-C"])

    def test_repr(self):
        """repr should summarize size."""
        assert repr(build_network(["A-B", "B-C"])) == "RoadNetwork(locations=3, edges=2)"


class TestParcel:
    """Tests for the Parcel dataclass."""

    def test_fields(self):
        """Parcel should expose place and address."""
        parcel = Parcel(place="Shop", address="Farm")

        assert parcel.place == "Shop"
        assert parcel.address == "Farm"
        assert not parcel.delivered

    def test_delivered_when_at_address(self):
        """A parcel at its address counts as delivered."""
        assert Parcel(place="Farm", address="Farm").delivered

    def test_is_frozen(self):
        """Parcel fields should not be assignable."""
        parcel = Parcel(place="Shop", address="Farm")

        with pytest.raises(dataclasses.FrozenInstanceError):
            parcel.place = "Cabin"  # type: ignore[misc]

    def test_equality_by_value(self):
        """Parcels with the same fields should be equal and hash alike."""
        assert Parcel("Shop", "Farm") == Parcel("Shop", "Farm")
        assert len({Parcel("Shop", "Farm"), Parcel("Shop", "Farm")}) == 1


class TestVillageState:
    """Tests for the VillageState dataclass."""

    def test_list_of_parcels_stored_as_tuple(self):
        """A list passed in should be copied into a tuple."""
        parcels = [Parcel("Shop", "Farm")]
        state = VillageState("Post Office", parcels)

        parcels.append(Parcel("Cabin", "Farm"))

        assert isinstance(state.parcels, tuple)
        assert state.parcels == (Parcel("Shop", "Farm"),)

    def test_default_has_no_parcels(self):
        """A state with no parcels is complete."""
        state = VillageState("Post Office")

        assert state.parcels == ()
        assert state.is_complete

    def test_is_frozen(self):
        """State fields should not be assignable."""
        state = VillageState("Post Office")

        with pytest.raises(dataclasses.FrozenInstanceError):
            state.place = "Cabin"  # type: ignore[misc]

    def test_carried_parcels(self):
        """carried() should list parcels at the robot's place."""
        state = make_state("Shop", [("Shop", "Farm"), ("Cabin", "Farm"), ("Shop", "Cabin")])

        assert state.carried() == (Parcel("Shop", "Farm"), Parcel("Shop", "Cabin"))

    def test_make_state(self):
        """make_state() should build parcels from pairs."""
        state = make_state("Post Office", [("Shop", "Farm")])

        assert state == VillageState("Post Office", (Parcel("Shop", "Farm"),))


class TestMove:
    """Tests for the move() transition."""

    def test_delivers_parcel(self, tiny_network):
        """Moving to a parcel's address with it in hand delivers it."""
        first = make_state("Post Office", [("Post Office", "Alice's House")])

        following = move(first, "Alice's House", tiny_network)

        assert following.place == "Alice's House"
        assert following.parcels == ()
        assert first.place == "Post Office"

    def test_illegal_move_returns_same_state(self, tiny_network):
        """A destination without a direct road returns the input state itself."""
        first = make_state("Post Office", [("Post Office", "Alice's House")])

        result = move(first, "Bob's House", tiny_network)

        assert result is first
        assert result == first

    def test_unknown_origin_is_illegal(self, tiny_network):
        """A robot at a place off the network cannot move anywhere."""
        state = make_state("Nowhere", [])

        assert move(state, "Post Office", tiny_network) is state

    def test_move_to_current_place_without_self_road(self, village):
        """Staying in place is only legal with a road from a place to itself."""
        state = make_state("Post Office", [("Post Office", "Cabin")])

        assert move(state, "Post Office", village) is state

    def test_method_form(self, tiny_network):
        """VillageState.move() should match the module function."""
        first = make_state("Post Office", [("Post Office", "Alice's House")])

        assert first.move("Alice's House", tiny_network) == move(
            first, "Alice's House", tiny_network
        )

    def test_carries_colocated_parcels_only(self, village):
        """Parcels at the robot's place move along; others stay where they are."""
        state = make_state(
            "Post Office",
            [
                ("Post Office", "Cabin"),
                ("Post Office", "Shop"),
                ("Farm", "Town Hall"),
            ],
        )

        result = move(state, "Marketplace", village)

        assert result.place == "Marketplace"
        assert result.parcels == (
            Parcel("Marketplace", "Cabin"),
            Parcel("Marketplace", "Shop"),
            Parcel("Farm", "Town Hall"),
        )

    def test_delivers_only_arrivals(self, village):
        """Only carried parcels addressed to the destination are dropped off."""
        state = make_state(
            "Alice's House",
            [
                ("Alice's House", "Cabin"),
                ("Alice's House", "Post Office"),
                ("Shop", "Cabin"),
            ],
        )

        result = move(state, "Cabin", village)

        assert result.parcels == (
            Parcel("Cabin", "Post Office"),
            Parcel("Shop", "Cabin"),
        )

    def test_picking_up_does_not_deliver(self, village):
        """Arriving where a parcel waits does not move or deliver it."""
        state = make_state("Post Office", [("Marketplace", "Farm")])

        result = move(state, "Marketplace", village)

        assert result.parcels == (Parcel("Marketplace", "Farm"),)

    def test_does_not_mutate_input(self, village):
        """move() should leave the input state and network untouched."""
        state = make_state("Post Office", [("Post Office", "Marketplace"), ("Shop", "Farm")])
        before = copy.deepcopy(state)
        network_before = dict(village)

        move(state, "Marketplace", village)
        move(state, "Alice's House", village)
        move(state, "Farm", village)

        assert state == before
        assert dict(village) == network_before

    def test_branching_from_same_state(self, village):
        """Several hypothetical moves from one state should not interfere."""
        state = make_state("Post Office", [("Post Office", "Cabin")])

        left = move(state, "Alice's House", village)
        right = move(state, "Marketplace", village)

        assert left.parcels == (Parcel("Alice's House", "Cabin"),)
        assert right.parcels == (Parcel("Marketplace", "Cabin"),)
        assert state.parcels == (Parcel("Post Office", "Cabin"),)

    def test_no_delivered_parcels_after_legal_move(self, village):
        """No parcel in the resulting state should sit at its address."""
        state = make_state(
            "Town Hall",
            [("Town Hall", "Shop"), ("Town Hall", "Farm"), ("Shop", "Marketplace")],
        )

        for destination in village["Town Hall"]:
            result = move(state, destination, village)
            assert all(p.place != p.address for p in result.parcels)

    def test_illegal_move_logged(self, tiny_network, caplog):
        """Illegal moves should be reported at DEBUG."""
        state = make_state("Post Office", [])

        with caplog.at_level(logging.DEBUG, logger="meadowfield"):
            move(state, "Cabin", tiny_network)

        assert "No road from 'Post Office' to 'Cabin'" in caplog.text
