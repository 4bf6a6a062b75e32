"""Tests for listing sample → community market statistics."""

from dataclasses import fields
from decimal import Decimal

import pytest

from src.engine.community_stats import aggregate_listings
from src.models.listing import CommunityStats, ListingRecord


class TestEmptySample:
    def test_all_fields_zero(self):
        stats = aggregate_listings([], total_count=0)
        for f in fields(stats):
            value = getattr(stats, f.name)
            assert value is not None
            assert value == 0

    def test_total_ignored_without_sample(self):
        """No sample means no stats at all, even if upstream reports matches."""
        assert aggregate_listings([], total_count=37) == CommunityStats()


class TestSampleStats:
    def test_active_listings_is_upstream_total(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=412)
        assert stats.active_listings == 412

    def test_prices(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=5)
        assert stats.min_price == 300_000
        assert stats.max_price == 1_200_000
        assert stats.median_price == 520_000
        assert stats.avg_price == 654_000

    def test_even_count_median_uses_upper_middle(self):
        listings = [ListingRecord(price=p) for p in (400_000, 100_000, 300_000, 200_000)]
        stats = aggregate_listings(listings, total_count=4)
        assert stats.median_price == 300_000

    def test_sqft_metrics_skip_unknown_sqft(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=5)
        assert stats.avg_sqft == 1875
        # mean of 300, 400, 400, 300
        assert stats.price_per_sqft == 350

    def test_price_per_sqft_is_mean_of_ratios(self):
        listings = [
            ListingRecord(price=100_000, sqft=1000),  # 100/sqft
            ListingRecord(price=900_000, sqft=3000),  # 300/sqft
        ]
        stats = aggregate_listings(listings, total_count=2)
        # total price / total sqft would give 250
        assert stats.price_per_sqft == 200

    def test_no_sqft_anywhere(self):
        listings = [ListingRecord(price=500_000), ListingRecord(price=600_000)]
        stats = aggregate_listings(listings, total_count=2)
        assert stats.avg_sqft == 0
        assert stats.price_per_sqft == 0

    def test_days_on_market_missing_counts_as_zero(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=5)
        assert stats.avg_days_on_market == 16

    def test_beds_baths_one_decimal(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=5)
        assert stats.avg_bedrooms == Decimal("2.6")
        assert stats.avg_bathrooms == Decimal("2.2")

    def test_rounds_half_up(self):
        listings = [ListingRecord(price=1), ListingRecord(price=2)]
        stats = aggregate_listings(listings, total_count=2)
        assert stats.avg_price == 2

    def test_unknown_sqft_excluded_from_size_metrics(self):
        listings = [
            ListingRecord(price=400_000, sqft=2000, bedrooms=3, bathrooms=Decimal("2")),
            ListingRecord(price=600_000, sqft=0, bedrooms=3, bathrooms=Decimal("2")),
        ]
        stats = aggregate_listings(listings, total_count=2)
        assert stats.avg_sqft == 2000
        assert stats.price_per_sqft == 200
        assert stats.under_500k == 1
        assert stats.range_500k_to_750k == 1
        assert stats.range_750k_to_1m == 0
        assert stats.over_1m == 0


class TestPriceTiers:
    def test_tiers_sum_to_sample(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=999)
        assert stats.under_500k == 2
        assert stats.range_500k_to_750k == 1
        assert stats.range_750k_to_1m == 1
        assert stats.over_1m == 1
        assert stats.tier_total == len(sample_listings)

    @pytest.mark.parametrize("price,tier", [
        (0, "under_500k"),
        (499_999, "under_500k"),
        (500_000, "range_500k_to_750k"),
        (749_999, "range_500k_to_750k"),
        (750_000, "range_750k_to_1m"),
        (999_999, "range_750k_to_1m"),
        (1_000_000, "over_1m"),
    ])
    def test_boundaries_half_open(self, price, tier):
        stats = aggregate_listings([ListingRecord(price=price)], total_count=1)
        assert getattr(stats, tier) == 1
        assert stats.tier_total == 1

    def test_min_median_avg_max_ordering(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=5)
        assert stats.min_price <= stats.median_price <= stats.max_price
        assert stats.min_price <= stats.avg_price <= stats.max_price


class TestPropertyTypes:
    def test_type_counts(self, sample_listings):
        stats = aggregate_listings(sample_listings, total_count=5)
        assert stats.single_family_count == 2
        assert stats.condo_count == 1
        assert stats.townhouse_count == 1

    def test_single_family_attached(self):
        stats = aggregate_listings(
            [ListingRecord(price=1, property_type="Single Family Attached")], total_count=1
        )
        assert stats.single_family_count == 1
        assert stats.condo_count == 0
        assert stats.townhouse_count == 0

    def test_case_insensitive(self):
        stats = aggregate_listings([ListingRecord(price=1, property_type="CONDOMINIUM")], total_count=1)
        assert stats.condo_count == 1

    def test_missing_type_matches_nothing(self):
        stats = aggregate_listings([ListingRecord(price=1, property_type=None)], total_count=1)
        assert stats.single_family_count == stats.condo_count == stats.townhouse_count == 0

    def test_categories_not_exclusive(self):
        stats = aggregate_listings(
            [ListingRecord(price=1, property_type="Townhouse / Condo")], total_count=1
        )
        assert stats.condo_count == 1
        assert stats.townhouse_count == 1
