"""
Tests for content_audit.slugs
"""

import pytest

from content_audit.slugs import expected_slug, is_slug_coherent, normalize_name


class TestNormalizeName:
    def test_folds_case_and_accents(self):
        assert normalize_name("  Col de l'Iséran ") == "col de l'iseran"

    def test_cedilla(self):
        assert normalize_name("Façade") == "facade"


class TestExpectedSlug:
    @pytest.mark.parametrize("name,slug", [
        ("Col du Galibier", "col-du-galibier"),
        ("L'Alpe d'Huez", "l-alpe-d-huez"),
        ("Passo dello Stelvio", "passo-dello-stelvio"),
        ("Col de la Bonette (Restefond)", "col-de-la-bonette-restefond"),
        ("Côte de Domancy", "cote-de-domancy"),
        ("--Mont  Ventoux--", "mont-ventoux"),
    ])
    def test_examples(self, name, slug):
        assert expected_slug(name) == slug


class TestSlugCoherence:
    def test_exact_match(self):
        assert is_slug_coherent("col-du-galibier", "Col du Galibier")

    def test_slug_contained_in_expected(self):
        assert is_slug_coherent("galibier", "Col du Galibier")

    def test_expected_contained_in_slug(self):
        assert is_slug_coherent("col-du-galibier-2642m", "Col du Galibier")

    def test_unrelated_slug(self):
        assert not is_slug_coherent("tourmalet-pass", "Col du Tourmalet")

    def test_precomputed_expected(self):
        assert is_slug_coherent("galibier", "ignored", expected="col-du-galibier")
