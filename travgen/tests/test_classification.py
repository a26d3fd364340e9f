"""Tests for trade code and zone classification."""

import pytest

from travgen.classification import (
    TRADE_RULES,
    Requirement,
    assign_zone,
    classify,
    trade_codes,
)
from travgen.schemas import TradeCode, WorldProfile, Zone


def make_profile(**overrides) -> WorldProfile:
    """A profile that matches no trade code and is Green, with overrides."""
    values = dict(
        size=7,
        atmosphere=7,
        hydrographics=9,
        population=8,
        government=5,
        law=5,
        tech=8,
    )
    values.update(overrides)
    return WorldProfile(**values)


class TestRequirement:
    def test_range_inclusive(self):
        req = Requirement("population", low=4, high=6)
        assert req.holds(make_profile(population=4))
        assert req.holds(make_profile(population=6))
        assert not req.holds(make_profile(population=3))
        assert not req.holds(make_profile(population=7))

    def test_membership(self):
        req = Requirement("atmosphere", values=frozenset({6, 8}))
        assert req.holds(make_profile(atmosphere=8))
        assert not req.holds(make_profile(atmosphere=7))


class TestTradeCodes:
    def test_baseline_has_no_codes(self):
        """Having no trade code at all is a valid outcome."""
        assert trade_codes(make_profile()) == frozenset()

    def test_eighteen_rules(self):
        assert len(TRADE_RULES) == 18
        assert {rule.code for rule in TRADE_RULES} == set(TradeCode)

    @pytest.mark.parametrize(
        "overrides,code",
        [
            (dict(atmosphere=6, hydrographics=6, population=6), TradeCode.AGRICULTURAL),
            (dict(size=0, atmosphere=0, hydrographics=0), TradeCode.ASTEROID),
            (dict(population=0, government=0, law=0), TradeCode.BARREN),
            (dict(atmosphere=2, hydrographics=0), TradeCode.DESERT),
            (dict(atmosphere=10, hydrographics=1), TradeCode.FLUID_OCEANS),
            (dict(size=5, atmosphere=4, hydrographics=8), TradeCode.GARDEN),
            (dict(population=9), TradeCode.HIGH_POPULATION),
            (dict(tech=12), TradeCode.HIGH_TECH),
            (dict(atmosphere=1, hydrographics=1), TradeCode.ICE_CAPPED),
            (dict(atmosphere=9, population=9), TradeCode.INDUSTRIAL),
            (dict(population=3), TradeCode.LOW_POPULATION),
            (dict(tech=5), TradeCode.LOW_TECH),
            (dict(atmosphere=3, hydrographics=3, population=6), TradeCode.NON_AGRICULTURAL),
            (dict(population=4), TradeCode.NON_INDUSTRIAL),
            (dict(atmosphere=5, hydrographics=3), TradeCode.POOR),
            (dict(atmosphere=8, population=7), TradeCode.RICH),
            (dict(atmosphere=0), TradeCode.VACUUM),
            (dict(hydrographics=10), TradeCode.WATER_WORLD),
        ],
    )
    def test_each_code_at_its_bound(self, overrides, code):
        assert code in trade_codes(make_profile(**overrides))

    def test_just_outside_bounds(self):
        assert TradeCode.HIGH_TECH not in trade_codes(make_profile(tech=11))
        assert TradeCode.LOW_TECH not in trade_codes(make_profile(tech=6))
        assert TradeCode.LOW_POPULATION not in trade_codes(make_profile(population=0))
        assert TradeCode.GARDEN not in trade_codes(
            make_profile(size=4, atmosphere=6, hydrographics=6)
        )

    def test_industrial_atmosphere_list(self):
        """Atmosphere 3 is skipped by the industrial list."""
        assert TradeCode.INDUSTRIAL not in trade_codes(make_profile(atmosphere=3, population=10))
        assert TradeCode.INDUSTRIAL in trade_codes(make_profile(atmosphere=4, population=10))

    def test_codes_are_not_exclusive(self):
        """An asteroid belt is also a vacuum world, and can be barren and low tech."""
        codes = trade_codes(
            make_profile(
                size=0, atmosphere=0, hydrographics=0,
                population=0, government=0, law=0, tech=2,
            )
        )
        assert codes == {
            TradeCode.ASTEROID,
            TradeCode.BARREN,
            TradeCode.LOW_TECH,
            TradeCode.VACUUM,
        }

    def test_idempotent(self):
        profile = make_profile(atmosphere=6, hydrographics=6, population=6, tech=13)
        assert trade_codes(profile) == trade_codes(profile)
        assert classify(profile) == classify(profile)


class TestZone:
    def test_green_by_default(self):
        assert assign_zone(make_profile()) == Zone.GREEN

    @pytest.mark.parametrize(
        "overrides",
        [
            dict(atmosphere=10),
            dict(atmosphere=15),
            dict(government=0),
            dict(government=7),
            dict(government=10),
            dict(law=0),
            dict(law=9),
        ],
    )
    def test_amber_triggers(self, overrides):
        assert assign_zone(make_profile(**overrides)) == Zone.AMBER

    def test_government_eleven_is_green(self):
        assert assign_zone(make_profile(government=11)) == Zone.GREEN

    def test_never_red(self):
        for atmosphere in range(16):
            for law in range(10):
                zone = assign_zone(make_profile(atmosphere=atmosphere, law=law))
                assert zone in (Zone.GREEN, Zone.AMBER)
