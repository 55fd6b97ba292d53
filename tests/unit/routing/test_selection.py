"""Tests for route selection and recommendation text."""

import pytest

from xroute.errors import NoRouteFoundError
from xroute.models import Objective
from xroute.routing.selection import RouteSelector, describe_path
from xroute.routing.types import EMPTY_PATH, RouteRequest
from tests.helpers import ALLBRIDGE, ARBITRUM, BASE, ETHEREUM, MAYAN, SOLANA, WORMHOLE, make_hop

REQUEST = RouteRequest(source=SOLANA, destination=ETHEREUM, amount=1000, max_hops=3)


class TestRanking:
    def test_lowest_score_wins(self) -> None:
        cheap = (make_hop(bridge=ALLBRIDGE, cost=8.0),)
        pricey = (make_hop(bridge=WORMHOLE, cost=12.0),)
        result = RouteSelector().select_best([pricey, cheap], Objective.COST, REQUEST)
        assert result.path == cheap

    def test_tie_prefers_fewer_hops(self) -> None:
        two_hop = (
            make_hop(SOLANA, BASE, cost=4.0),
            make_hop(BASE, ETHEREUM, cost=6.0),
        )
        direct = (make_hop(cost=10.0, reliability=0.9),)
        result = RouteSelector().select_best([two_hop, direct], Objective.COST, REQUEST)
        assert result.path == direct

    def test_tie_then_prefers_reliability(self) -> None:
        shaky = (make_hop(bridge=MAYAN, cost=10.0, reliability=0.9),)
        solid = (make_hop(bridge=WORMHOLE, cost=10.0, reliability=0.99),)
        result = RouteSelector().select_best([shaky, solid], Objective.COST, REQUEST)
        assert result.path == solid

    def test_full_tie_keeps_discovery_order(self) -> None:
        first = (make_hop(bridge=WORMHOLE, cost=10.0),)
        second = (make_hop(bridge=MAYAN, cost=10.0),)
        result = RouteSelector().select_best([first, second], Objective.COST, REQUEST)
        assert result.path == first

    def test_rank_orders_all_candidates(self) -> None:
        paths = [(make_hop(cost=c),) for c in (3.0, 1.0, 2.0)]
        ranked = RouteSelector().rank(paths, Objective.COST)
        assert [r.score.score for r in ranked] == [1.0, 2.0, 3.0]
        assert [r.discovery_index for r in ranked] == [1, 2, 0]

    def test_no_candidates_raises(self) -> None:
        with pytest.raises(NoRouteFoundError) as exc_info:
            RouteSelector().select_best([], Objective.COST, REQUEST)
        assert exc_info.value.source == SOLANA
        assert exc_info.value.max_hops == 3


class TestRecommendation:
    def test_totals_are_exact_sums(self) -> None:
        path = (
            make_hop(SOLANA, BASE, cost=4.15, time=240, reliability=0.94),
            make_hop(BASE, ETHEREUM, cost=13.7, time=60, reliability=0.99),
        )
        result = RouteSelector().select_best([path], Objective.BALANCE, REQUEST)
        assert result.total_cost == sum(hop.estimated_cost for hop in path)
        assert result.total_time == sum(hop.estimated_time for hop in path)
        assert result.success_probability == 0.94 * 0.99
        assert result.total_hops == 2

    def test_received_amounts_apply_slippage(self) -> None:
        path = (make_hop(cost=10.0),)
        result = RouteSelector(slippage_tolerance=1.0).select_best([path], Objective.COST, REQUEST)
        assert result.expected_received == 990.0
        assert result.min_received == pytest.approx(980.1)

    def test_empty_path_recommendation(self) -> None:
        request = RouteRequest(source=SOLANA, destination=SOLANA, amount=500, max_hops=3)
        result = RouteSelector().select_best([EMPTY_PATH], Objective.SPEED, request)
        assert result.total_cost == 0
        assert result.total_time == 0
        assert result.total_hops == 0
        assert result.success_probability == 1.0
        assert result.is_same_chain
        assert result.expected_received == 500

    def test_records_scoring_factors(self) -> None:
        result = RouteSelector().select_best([(make_hop(cost=10.0),)], Objective.COST, REQUEST)
        assert result.objective == Objective.COST
        assert result.score == 10.0
        assert [f.name for f in result.scoring_factors] == ["cost", "time"]


class TestDescribePath:
    def test_same_chain_does_not_mention_bridge(self) -> None:
        text = describe_path(EMPTY_PATH, SOLANA)
        assert "bridge" not in text.lower()
        assert SOLANA in text

    def test_single_hop_names_bridge(self) -> None:
        text = describe_path((make_hop(bridge=MAYAN),), SOLANA)
        assert MAYAN in text

    def test_multi_hop_mentions_bridge(self) -> None:
        path = (
            make_hop(SOLANA, ETHEREUM, bridge=ALLBRIDGE),
            make_hop(ETHEREUM, ARBITRUM, bridge=WORMHOLE),
        )
        text = describe_path(path, SOLANA)
        assert "bridge" in text
        assert ALLBRIDGE in text and WORMHOLE in text
