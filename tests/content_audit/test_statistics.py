"""
Tests for content_audit.statistics
"""

from content_audit.statistics import compute_statistics, recipe_total_minutes, to_number


class TestColsStatistics:
    def test_breakdowns(self):
        stats = compute_statistics("cols", [
            ("a.json", {"country": "France", "region": "Alpes", "difficulty": 8.7}),
            ("b.json", {"location": {"country": "Italie", "region": "Dolomites"}, "difficulty": 8}),
            ("c.json", {"difficulty": "hard"}),
        ])
        assert stats["by_country"] == {"France": 1, "Italie": 1, "unknown": 1}
        assert stats["by_region"] == {"Alpes": 1, "Dolomites": 1, "unknown": 1}
        assert stats["by_difficulty"] == {"8": 2, "hard": 1}


class TestTrainingStatistics:
    def test_duration_buckets(self):
        stats = compute_statistics("training", [
            ("a.json", {"type": "endurance", "level": "beginner", "duration": 4}),
            ("b.json", {"type": "endurance", "level": "advanced", "duration": 8}),
            ("c.json", {"type": "hiit", "duration": 12}),
            ("d.json", {"type": "hiit"}),
        ])
        assert stats["by_type"] == {"endurance": 2, "hiit": 2}
        assert stats["by_level"] == {"beginner": 1, "advanced": 1, "unknown": 2}
        assert stats["by_duration"] == {"short": 1, "medium": 1, "long": 1, "unknown": 1}


class TestRecipeStatistics:
    def test_total_minutes(self):
        assert recipe_total_minutes({"total": 45}) == 45
        assert recipe_total_minutes({"prep": 10, "cook": 25}) == 35
        assert recipe_total_minutes(15) == 15
        assert recipe_total_minutes({"servings": 2}) is None
        assert recipe_total_minutes(None) is None

    def test_duration_buckets(self):
        stats = compute_statistics("recipes", [
            ("a.json", {"category": "breakfast", "duration": {"prep": 10, "cook": 5}}),
            ("b.json", {"category": "breakfast", "duration": {"total": 60}}),
            ("c.json", {"category": "dinner", "duration": 90}),
        ])
        assert stats["by_category"] == {"breakfast": 2, "dinner": 1}
        assert stats["by_duration"] == {"quick": 1, "medium": 1, "long": 1}


class TestPlanStatistics:
    def test_by_category(self):
        stats = compute_statistics("plans", [("a.json", {"category": "race"}), ("b.json", {})])
        assert stats == {"by_category": {"race": 1, "unknown": 1}}


class TestNumbers:
    def test_non_finite_values_are_not_numbers(self):
        assert to_number("inf") is None
        assert to_number(float("nan")) is None
        assert to_number(float("-inf")) is None
        assert to_number(10 ** 400) is None
        assert to_number("8.5") == 8.5
        assert to_number(True) is None

    def test_non_finite_difficulty_counts_as_unknown(self):
        stats = compute_statistics("cols", [
            ("a.json", {"difficulty": "inf"}),
            ("b.json", {"difficulty": float("nan")}),
            ("c.json", {"difficulty": 7}),
        ])
        assert stats["by_difficulty"] == {"unknown": 2, "7": 1}
