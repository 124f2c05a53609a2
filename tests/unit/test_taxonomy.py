"""
Tests for the validated emotion taxonomy.

Covers:
- Tree invariants enforced at build time (TaxonomyError)
- Read-only exposure of the shipped tables
- Ring lookups and display colors
"""

import pytest

from resilience.emotions.taxonomy import TAXONOMY, EmotionTaxonomy, get_taxonomy
from resilience.emotions.types import CoreEmotion
from resilience.errors import ResilienceError, TaxonomyError

VARIANTS = {core.value: (core.value.lower(),) for core in CoreEmotion}


class TestTaxonomyValidation:
    """Tests for EmotionTaxonomy.from_tables invariants"""

    def test_unknown_core_in_variants(self):
        with pytest.raises(TaxonomyError, match="Unknown core emotion"):
            EmotionTaxonomy.from_tables({**VARIANTS, "Boredom": ("bored",)}, {}, {})

    def test_core_without_variants(self):
        variants = {**VARIANTS, "Trust": ()}
        with pytest.raises(TaxonomyError, match="Trust"):
            EmotionTaxonomy.from_tables(variants, {}, {})

    def test_secondary_with_unknown_core(self):
        with pytest.raises(TaxonomyError):
            EmotionTaxonomy.from_tables(VARIANTS, {"Bored": "Boredom"}, {})

    def test_tertiary_with_unknown_parent(self):
        with pytest.raises(TaxonomyError, match="unknown secondary"):
            EmotionTaxonomy.from_tables(VARIANTS, {"Lonely": "Sadness"}, {"Isolated": "Alone"})

    def test_name_on_two_rings_under_different_cores(self):
        secondaries = {"Anxious": "Fear", "Content": "Joy"}
        tertiaries = {"Anxious": "Content"}
        with pytest.raises(TaxonomyError, match="rolls up"):
            EmotionTaxonomy.from_tables(VARIANTS, secondaries, tertiaries)

    def test_name_on_two_rings_under_same_core_is_allowed(self):
        taxonomy = EmotionTaxonomy.from_tables(
            VARIANTS, {"Anxious": "Fear", "Nervous": "Fear"}, {"Anxious": "Nervous"}
        )
        assert taxonomy.core_of_tertiary("Anxious") is CoreEmotion.FEAR

    def test_taxonomy_error_is_a_value_error(self):
        assert issubclass(TaxonomyError, ResilienceError)
        assert issubclass(TaxonomyError, ValueError)


class TestShippedTaxonomy:
    """Tests for the module-level TAXONOMY built from taxonomy_data"""

    def test_get_taxonomy_returns_shared_instance(self):
        assert get_taxonomy() is TAXONOMY

    def test_every_core_has_variants_in_wheel_order(self):
        assert TAXONOMY.cores == tuple(CoreEmotion)
        for core in CoreEmotion:
            assert TAXONOMY.variants[core]

    def test_every_tertiary_rolls_up_to_a_core(self):
        for tertiary in TAXONOMY.tertiary_names():
            assert TAXONOMY.core_of_tertiary(tertiary) in CoreEmotion

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            TAXONOMY.secondary_to_core["Bored"] = CoreEmotion.SADNESS  # type: ignore[index]
        with pytest.raises(TypeError):
            TAXONOMY.variants[CoreEmotion.JOY] = ("glee",)  # type: ignore[index]

    def test_variants_are_lowercase(self):
        for variants in TAXONOMY.variants.values():
            assert all(variant == variant.lower() for variant in variants)

    def test_find_secondary_is_case_insensitive(self):
        assert TAXONOMY.find_secondary("lonely") == "Lonely"
        assert TAXONOMY.find_secondary("not-an-emotion") is None

    def test_tertiary_lineage(self):
        assert TAXONOMY.tertiary_to_secondary["Frightened"] == "Scared"
        assert TAXONOMY.core_of_tertiary("Frightened") is CoreEmotion.FEAR

    def test_first_children_follow_registration_order(self):
        assert TAXONOMY.first_secondary(CoreEmotion.JOY) == "Content"
        assert TAXONOMY.first_tertiary("Content") == "Pleased"

    def test_known_terms_include_core_names(self):
        terms = dict(TAXONOMY.known_terms())
        assert terms["fear"] is CoreEmotion.FEAR
        assert terms["anxious"] is CoreEmotion.FEAR

    def test_color_lookup(self):
        assert TAXONOMY.color_for("Joy") == "#F9D71C"
        assert TAXONOMY.color_for("anxious") == "#9C27B0"
        assert TAXONOMY.color_for("Bored") is None
