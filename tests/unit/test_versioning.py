"""Tests for Version — parsing, total ordering, snapshot equality."""

from __future__ import annotations

import pytest

from distrosync.models.versioning import Comparison, Version, compare, is_unstable

SAMPLES = [
    "1.0",
    "1.0.0",
    "1.2.0",
    "1.2.0-SNAPSHOT",
    "1.2.0-snapshot",
    "1.10",
    "2.0-beta",
    "1.x",
    "",
]


class TestParse:
    def test_numeric_segments(self):
        v = Version.parse("1.11.5")
        assert v.segments == (1, 11, 5)
        assert v.is_unstable is False

    def test_snapshot_qualifier_dropped(self):
        v = Version.parse("1.2.0-SNAPSHOT")
        assert v.segments == (1, 2, 0)
        assert v.is_unstable is True

    def test_snapshot_qualifier_case_insensitive(self):
        assert Version.parse("1.2.0-Snapshot").is_unstable is True
        assert is_unstable("1.2.0-snapshot") is True

    def test_text_segment_kept(self):
        assert Version.parse("2.0-beta_1").segments == (2, 0, "beta", 1)

    def test_empty_string_does_not_raise(self):
        v = Version.parse("")
        assert v.segments == ()

    def test_frozen(self):
        v = Version.parse("1.0")
        with pytest.raises(Exception):
            v.raw = "2.0"  # type: ignore[misc]


class TestCompare:
    def test_numeric_not_lexical(self):
        assert compare("1.10", "1.9") is Comparison.HIGHER

    def test_shorter_prefix_is_lower(self):
        assert compare("1.2", "1.2.0") is Comparison.LOWER
        assert compare("1.2.0", "1.2") is Comparison.HIGHER

    def test_identical_releases_equal(self):
        assert compare("1.2.0", "1.2.0") is Comparison.EQUAL

    def test_snapshots_equal(self):
        a, b = Version.parse("1.2.0-SNAPSHOT"), Version.parse("1.2.0-SNAPSHOT")
        assert compare(a, b) is Comparison.EQUAL
        assert a.is_unstable and b.is_unstable

    def test_snapshots_equal_across_qualifier_case(self):
        assert compare("1.2.0-SNAPSHOT", "1.2.0-snapshot") is Comparison.EQUAL

    def test_release_higher_than_snapshot(self):
        assert compare("1.2.0", "1.2.0-SNAPSHOT") is Comparison.HIGHER
        assert compare("1.2.0-SNAPSHOT", "1.2.0") is Comparison.LOWER

    def test_snapshot_of_next_version_is_higher(self):
        assert compare("1.3.0-SNAPSHOT", "1.2.0") is Comparison.HIGHER

    def test_releases_equal_only_if_identical(self):
        assert compare("1.2.0", "1.2.00") is not Comparison.EQUAL

    def test_lexical_fallback_for_text_segment(self):
        # "x" vs "2" falls back to string comparison: "x" > "2"
        assert compare("1.x", "1.2") is Comparison.HIGHER
        assert compare("1.2", "1.x") is Comparison.LOWER

    def test_lexical_fallback_between_text_segments(self):
        assert compare("2.0-alpha", "2.0-beta") is Comparison.LOWER

    def test_mixed_fallback_is_not_transitive(self):
        assert compare("2", "10") is Comparison.LOWER
        assert compare("10", "1rc1") is Comparison.LOWER
        assert compare("2", "1rc1") is Comparison.HIGHER

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_antisymmetric(self, a, b):
        assert compare(a, b) is compare(b, a).inverse()

    @pytest.mark.parametrize("a", SAMPLES)
    def test_reflexive(self, a):
        assert compare(a, a) is Comparison.EQUAL


class TestOperators:
    def test_rich_comparisons(self):
        assert Version.parse("1.0") < Version.parse("1.1")
        assert Version.parse("1.1") >= Version.parse("1.1")
        assert Version.parse("1.0-SNAPSHOT") == Version.parse("1.0-snapshot")

    def test_sorted(self):
        versions = [Version.parse(v) for v in ("1.10", "1.2.0", "1.2.0-SNAPSHOT", "1.2")]
        assert [v.raw for v in sorted(versions)] == ["1.2", "1.2.0-SNAPSHOT", "1.2.0", "1.10"]

    def test_equal_snapshots_hash_alike(self):
        assert hash(Version.parse("3.0-SNAPSHOT")) == hash(Version.parse("3.0-snapshot"))

    def test_method_matches_function(self):
        assert Version.parse("2.0").compare(Version.parse("1.0")) is Comparison.HIGHER
