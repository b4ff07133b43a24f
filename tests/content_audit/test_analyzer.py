"""
Tests for content_audit.analyzer
"""

from content_audit.analyzer import UNNAMED, analyze_collection, check_record
from content_audit.loader import LoadError, LoadResult, load_directory


class TestCheckRecord:
    def test_complete_col(self, record_factory):
        check = check_record(record_factory("cols", "Col du Galibier"), "cols")
        assert check.completeness == 100
        assert check.missing_fields == []
        assert check.missing_critical == []
        assert check.incoherent_slug is None

    def test_missing_french_description(self, record_factory):
        record = record_factory("cols", "Col du Galibier", description={"en": "Climb"})
        check = check_record(record, "cols")
        assert check.missing_critical == ["description.fr"]
        assert check.missing_fields == []

    def test_incoherent_slug(self, record_factory):
        record = record_factory("training", "Galibier Prep", slug="ventoux-plan")
        assert check_record(record, "training").incoherent_slug == "galibier-prep"

    def test_slug_check_needs_name_and_slug(self):
        check = check_record({"slug": "anything"}, "recipes")
        assert check.incoherent_slug is None
        assert check.name == UNNAMED

    def test_unexpected_fields(self, record_factory):
        record = record_factory("plans", "Plan Montagne", legacy_id=12)
        assert check_record(record, "plans").unexpected_fields == ["legacy_id"]


class TestAnalyzeCollection:
    def test_sample_cols(self, content_tree):
        result = analyze_collection("cols", load_directory(str(content_tree / "cols" / "enriched")))

        assert result.total == 5
        assert result.valid_structure == 3
        assert [f.file for f in result.invalid_structure] == ["alpe-d-huez.json"]
        assert result.invalid_structure[0].fields == [
            "videos", "three_d_model", "weather", "services", "testimonials",
        ]
        assert result.completeness == {"excellent": 3, "good": 1, "partial": 0, "minimal": 0}
        assert [(f.file, f.fields) for f in result.missing_critical] == [
            ("col-du-tourmalet.json", ["description.fr"]),
        ]
        assert [(s.current_slug, s.expected_slug) for s in result.incoherent_slugs] == [
            ("tourmalet-pass", "col-du-tourmalet"),
        ]
        assert [(s.kind, s.files) for s in result.similar_names] == [
            ("exact", ["col-du-tourmalet.json", "tourmalet-copy.json"]),
        ]
        assert [(d.field, d.value) for d in result.duplicate_keys] == [("id", "col-du-tourmalet")]
        assert [e.file for e in result.load_errors] == ["broken.json"]
        assert result.statistics["by_region"] == {"Alpes": 2, "Pyrénées": 2}
        assert result.statistics["by_difficulty"] == {"9": 1, "8": 3}

    def test_missing_directory(self, tmp_path):
        result = analyze_collection("training", load_directory(str(tmp_path / "missing")))
        assert not result.directory_exists
        assert result.total == 0
        assert result.completeness["excellent"] == 0

    def test_unnamed_record(self):
        loaded = LoadResult(directory="x", records=[("a.json", {"slug": "a"})])
        result = analyze_collection("plans", loaded)
        assert result.invalid_structure[0].name == UNNAMED
        assert result.completeness["minimal"] == 1

    def test_load_errors_count_in_total(self):
        loaded = LoadResult(directory="x", errors=[LoadError("a.json", "Invalid JSON")])
        result = analyze_collection("recipes", loaded)
        assert result.total == 1
        assert result.valid_structure == 0

    def test_to_dict_is_serializable(self, content_tree):
        import json

        result = analyze_collection("cols", load_directory(str(content_tree / "cols" / "enriched")))
        data = json.loads(json.dumps(result.to_dict()))
        assert data["content_type"] == "cols"
        assert data["duplicate_keys"][0]["value"] == "col-du-tourmalet"
