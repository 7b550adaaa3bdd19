"""Tests for the HS classification scorer and display jitter."""

import random

import pytest

from exportdesk.core.classification import ClassificationScorer, apply_confidence_jitter
from exportdesk.data.tariff_catalog import TARIFF_CATALOG, lookup_tariff
from exportdesk.schemas.shipment import ClassificationMatch, ClassificationQuery


@pytest.fixture
def scorer() -> ClassificationScorer:
    return ClassificationScorer()


def _hs(matches):
    return [m.entry.hs_code for m in matches]


class TestScore:

    def test_category_subcategory_and_keywords_are_capped_at_99(self, scorer):
        argan = lookup_tariff("1515.30")
        query = ClassificationQuery(
            category="agri",
            subcategory="oils",
            free_text_description="Pure ARGAN OIL for cosmetic use",
        )
        # 40 + 30 + 4 keywords * 8 = 102 -> capped
        assert scorer.score(argan, query) == 99

    def test_keyword_points_only(self, scorer):
        carpet = lookup_tariff("5701.10")
        query = ClassificationQuery(free_text_description="berber wool rug, handmade")
        # rug, berber, wool, handmade
        assert scorer.score(carpet, query) == 32

    def test_no_match_scores_zero(self, scorer):
        carpet = lookup_tariff("5701.10")
        query = ClassificationQuery(
            category="marine", subcategory="fresh", free_text_description="frozen hake"
        )
        assert scorer.score(carpet, query) == 0

    def test_subcategory_without_category(self, scorer):
        olive = lookup_tariff("1509.10")
        query = ClassificationQuery(subcategory="oils", free_text_description="")
        assert scorer.score(olive, query) == 30

    @pytest.mark.parametrize("description", [
        "",
        "argan oil",
        "wire harness wiring automotive cable set vehicle wiring renault stellantis",
        "fish frozen fish atlantic hake sea bream poisson octopus",
    ])
    def test_score_always_within_bounds(self, scorer, description):
        query = ClassificationQuery(category="agri", subcategory="oils",
                                    free_text_description=description)
        for entry in TARIFF_CATALOG:
            assert 0 <= scorer.score(entry, query) <= 99


class TestRank:

    def test_argan_oil_ranking(self, scorer):
        query = ClassificationQuery(
            category="agri",
            subcategory="oils",
            free_text_description="Pure argan oil for cosmetic use",
        )
        matches = scorer.rank(query)

        assert _hs(matches) == ["1515.30", "1509.10", "1515.50", "0910.99"]
        assert [m.confidence for m in matches] == [99, 70, 70, 40]

    def test_ties_keep_catalog_order(self, scorer):
        query = ClassificationQuery(category="mfg", subcategory="crafts",
                                    free_text_description="")
        matches = scorer.rank(query)

        assert _hs(matches) == ["6913.10", "4602.19", "8544.30", "8544.42"]
        assert [m.confidence for m in matches] == [70, 70, 40, 40]

    def test_zero_scores_are_excluded(self, scorer):
        query = ClassificationQuery(free_text_description="berber wool rug")
        matches = scorer.rank(query, limit=10)

        assert _hs(matches) == ["5701.10", "5702.31"]
        assert all(m.confidence > 0 for m in matches)

    def test_sorted_descending(self, scorer):
        query = ClassificationQuery(category="agri", free_text_description="saffron and cumin seeds")
        matches = scorer.rank(query, limit=25)
        confidences = [m.confidence for m in matches]
        assert confidences == sorted(confidences, reverse=True)

    def test_limit(self, scorer):
        query = ClassificationQuery(category="agri", free_text_description="")
        assert len(scorer.rank(query, limit=2)) == 2
        assert len(scorer.rank(query, limit=25)) == 9

    @pytest.mark.parametrize("description", ["", "   "])
    def test_empty_query_returns_no_matches(self, scorer, description):
        query = ClassificationQuery(free_text_description=description)
        assert scorer.rank(query) == []

    def test_custom_catalog(self, scorer):
        catalog = [lookup_tariff("8544.30"), lookup_tariff("8544.42")]
        query = ClassificationQuery(free_text_description="power cable")
        matches = scorer.rank(query, catalog=catalog)
        # 8544.42: cable, power cable
        assert _hs(matches) == ["8544.42"]
        assert matches[0].confidence == 16

    def test_ranking_is_deterministic(self, scorer):
        query = ClassificationQuery(category="marine", free_text_description="frozen octopus")
        assert scorer.rank(query) == scorer.rank(query)


class TestJitter:

    def _matches(self, confidences):
        entries = TARIFF_CATALOG[:len(confidences)]
        return [ClassificationMatch(entry=e, confidence=c) for e, c in zip(entries, confidences)]

    def test_jitter_stays_within_spread_and_bounds(self):
        matches = self._matches([99, 70, 60, 50])
        jittered = apply_confidence_jitter(matches, random.Random(7))

        for before, after in zip(matches, jittered):
            assert 45 <= after.confidence <= 99
            assert abs(after.confidence - before.confidence) <= 3

    def test_jitter_clamps_low_scores_to_floor(self):
        matches = self._matches([8, 16])
        jittered = apply_confidence_jitter(matches, random.Random(1))
        assert [m.confidence for m in jittered] == [45, 45]

    def test_jitter_keeps_order_and_input(self):
        matches = self._matches([70, 70, 40])
        jittered = apply_confidence_jitter(matches, random.Random(3))

        assert [m.entry.hs_code for m in jittered] == [m.entry.hs_code for m in matches]
        assert [m.confidence for m in matches] == [70, 70, 40]

    def test_seeded_jitter_is_reproducible(self):
        matches = self._matches([90, 80, 70])
        first = apply_confidence_jitter(matches, random.Random(42))
        second = apply_confidence_jitter(matches, random.Random(42))
        assert first == second


def test_lookup_tariff_ignores_separators():
    assert lookup_tariff("151530").hs_code == "1515.30"
    assert lookup_tariff(" 1515.30 ").hs_code == "1515.30"
    assert lookup_tariff("9999.99") is None
    assert lookup_tariff("") is None
