"""Tests for normalized locations, tents and region scalars"""

import math

import pytest
from varmodel.core.location import NormalizedLocation, norm_loc
from varmodel.core.region import VariationRegion
from varmodel.core.tent import Tent


class TestNormalizedLocation:
    """Equality, hashing and ordering contract of NormalizedLocation"""

    def test_absent_axis_differs_from_zero(self):
        """An axis at 0 is not the same as a missing axis"""
        assert NormalizedLocation({"wght": 0.0}) != NormalizedLocation({})

    def test_structural_equality_and_hash(self):
        """Equal coordinates give equal locations and hashes"""
        a = NormalizedLocation({"wght": 1, "wdth": 0.5})
        b = NormalizedLocation([("wdth", 0.5), ("wght", 1.0)])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_negative_zero_is_zero(self):
        """-0.0 is stored as 0.0"""
        loc = NormalizedLocation({"wght": -0.0})
        assert loc == NormalizedLocation({"wght": 0.0})
        assert math.copysign(1.0, loc["wght"]) == 1.0

    def test_nan_rejected(self):
        """NaN coordinates raise ValueError"""
        with pytest.raises(ValueError):
            NormalizedLocation({"wght": float("nan")})

    def test_total_order(self):
        """Locations sort by their (axis, value) items"""
        locs = [norm_loc(wght=1.0), norm_loc(wght=-1.0), norm_loc(wdth=0.5), norm_loc()]
        assert sorted(locs) == [norm_loc(), norm_loc(wdth=0.5), norm_loc(wght=-1.0), norm_loc(wght=1.0)]

    def test_with_position_returns_new_location(self):
        """with_position leaves the original untouched"""
        loc = norm_loc(wght=1.0)
        moved = loc.with_position("wdth", 0.5)
        assert moved == norm_loc(wght=1.0, wdth=0.5)
        assert loc == norm_loc(wght=1.0)

    def test_non_zero_helpers(self):
        """has, has_non_zero, non_zero_axes and is_default"""
        loc = norm_loc(wght=0.0, wdth=-0.5)
        assert loc.has("wght")
        assert not loc.has_non_zero("wght")
        assert loc.has_non_zero("wdth")
        assert not loc.has_non_zero("opsz")
        assert loc.non_zero_axes() == ("wdth",)
        assert norm_loc(wght=0.0).is_default()


class TestTent:
    """Construction invariant and validation of Tent"""

    def test_positive_peak_forces_lower_to_zero(self):
        """A positive peak starts at 0"""
        assert Tent.new(-1.0, 2.0, 3.0) == Tent(0.0, 2.0, 3.0)

    def test_negative_peak_forces_upper_to_zero(self):
        """A negative peak ends at 0"""
        assert Tent.new(-1.0, -0.5, 1.0) == Tent(-1.0, -0.5, 0.0)

    def test_zero_peak_forces_upper_to_zero(self):
        """A zero peak is treated like a negative one"""
        assert Tent.new(-1.0, 0.0, 1.0) == Tent(-1.0, 0.0, 0.0)

    def test_validate(self):
        """Tents must be ordered and must not straddle 0"""
        assert Tent(0.0, 0.0, 0.0).validate()
        assert Tent(0.0, 0.5, 1.0).validate()
        assert not Tent(-1.0, 0.0, 1.0).validate()
        assert not Tent(0.5, 0.2, 1.0).validate()

    def test_str_marks_invalid(self):
        """Invalid tents say so in their text form"""
        assert str(Tent(0.0, 2.0, 3.0)) == "Tent {0, 2, 3}"
        assert str(Tent(-1.0, 0.0, 1.0)) == "Tent {-1, 0, 1 (invalid)}"


class TestScalarAt:
    """VariationRegion.scalar_at, mirroring fontTools supportScalar"""

    def test_default_for_default(self):
        """The empty region has full influence at the default"""
        # >>> supportScalar({}, {})
        assert VariationRegion().scalar_at(NormalizedLocation()) == 1.0

    def test_off_default_for_default(self):
        """The empty region has full influence everywhere"""
        # >>> supportScalar({'wght': .2}, {})
        assert VariationRegion().scalar_at(norm_loc(Weight=0.2)) == 1.0

    def test_off_default_for_simple_weight(self):
        """Influence rises linearly toward the peak"""
        # >>> supportScalar({'wght': .2}, {'wght': (0, 2, 3)})
        region = VariationRegion({"Weight": Tent.new(0.0, 2.0, 3.0)})
        assert region.scalar_at(norm_loc(Weight=0.2)) == pytest.approx(0.1)

    def test_for_weight(self):
        """Influence falls linearly past the peak"""
        # >>> supportScalar({'wght': 2.5}, {'wght': (0, 2, 4)})
        region = VariationRegion({"Weight": Tent.new(0.0, 2.0, 4.0)})
        assert region.scalar_at(norm_loc(Weight=2.5)) == 0.75

    def test_for_weight_width_fixup(self):
        """A sentinel width tent doesn't change the weight scalar"""
        # a peak of 0 means no influence under font rules
        region = VariationRegion({
            "Weight": Tent.new(0.0, 2.0, 4.0),
            "Width": Tent.new(-1.0, 0.0, 1.0),
        })
        assert region.scalar_at(norm_loc(Weight=2.5, Width=0.0)) == 0.75

    def test_invalid_tent_contributes_nothing(self):
        """Invalid tents are skipped"""
        region = VariationRegion({
            "Weight": Tent.new(0.0, 2.0, 4.0),
            "Width": Tent(-1.0, 0.0, 1.0),
        })
        assert region.scalar_at(norm_loc(Weight=2.5, Width=0.5)) == 0.75

    def test_for_weight_width_corner(self):
        """Axes missing from the region don't participate"""
        region = VariationRegion({"Weight": Tent.new(0.0, 1.0, 1.0)})
        assert region.scalar_at(norm_loc(Weight=1.0, Width=1.0)) == 1.0

    def test_sentinel_tent_always_active(self):
        """The (0, 0, 0) tent never limits influence"""
        region = VariationRegion({"wght": Tent(0.0, 0.0, 0.0)})
        for value in (-1.0, -0.3, 0.0, 0.7, 1.0):
            assert region.scalar_at(norm_loc(wght=value)) == 1.0

    def test_outside_support_is_zero(self):
        """Any axis outside its tent zeroes the scalar"""
        region = VariationRegion({
            "wght": Tent.new(0.0, 1.0, 1.0),
            "wdth": Tent.new(0.0, 0.5, 1.0),
        })
        assert region.scalar_at(norm_loc(wght=-0.5, wdth=0.5)) == 0.0
        assert region.scalar_at(norm_loc(wght=1.0, wdth=1.0)) == 0.0

    def test_missing_axis_in_location_counts_as_zero(self):
        """Axes missing from the location count as 0"""
        region = VariationRegion({"wght": Tent.new(0.0, 1.0, 1.0)})
        assert region.scalar_at(NormalizedLocation()) == 0.0

    def test_with_tents_copies(self):
        """with_tents returns a new region"""
        region = VariationRegion({"wght": Tent.new(0.0, 1.0, 1.0)})
        clipped = region.with_tents({"wght": Tent(0.5, 1.0, 1.0)})
        assert region["wght"] == Tent(0.0, 1.0, 1.0)
        assert clipped["wght"] == Tent(0.5, 1.0, 1.0)
