"""Tests for wcag_skills.motion module."""

import pytest

from wcag_skills.motion import (
    MAX_AUTO_DURATION,
    MAX_FLASHES_PER_SECOND,
    PAUSE_CONTROL_RECOMMENDATION,
    assess_animation,
    check_duration,
    check_flashing,
    check_reduced_motion,
    is_compliant,
    parse_bool,
)


class TestCheckReducedMotion:
    """Test the check_reduced_motion function."""

    def test_preference_flags_any_animation(self):
        """Test a short, non-flashing fade is still flagged."""
        result = check_reduced_motion(0.3, "fade", True)
        assert result["compliant"] is False
        assert len(result["issues"]) == 1

    def test_no_preference(self):
        assert check_reduced_motion(0.3, "fade", False)["compliant"] is True

    @pytest.mark.parametrize("kind", ["carousel", "hero-slideshow", "news ticker", "marquee"])
    def test_long_auto_advancing_content(self, kind):
        result = check_reduced_motion(MAX_AUTO_DURATION + 1, kind, False)
        assert result["compliant"] is False
        assert PAUSE_CONTROL_RECOMMENDATION in result["recommendations"]

    def test_short_carousel_is_fine(self):
        assert check_reduced_motion(MAX_AUTO_DURATION, "carousel", False)["compliant"] is True

    def test_high_risk_type_gets_soft_recommendation(self):
        result = check_reduced_motion(1, "parallax", False)
        assert result["compliant"] is True
        assert result["recommendations"] == [
            "Consider providing option to disable or reduce motion intensity"
        ]


class TestCheckFlashing:
    """Test the check_flashing function."""

    def test_limit_is_inclusive(self):
        assert check_flashing(MAX_FLASHES_PER_SECOND)["compliant"] is True

    def test_above_limit(self):
        result = check_flashing(4)
        assert result["compliant"] is False
        assert result["issues"] == ["Flashing frequency (4 flashes/s) exceeds 3 flashes/s limit"]
        assert len(result["recommendations"]) == 3


class TestCheckDuration:
    """Test the check_duration function."""

    def test_within_limit(self):
        assert check_duration(5)["compliant"] is True

    def test_over_limit(self):
        result = check_duration(5.5)
        assert result["compliant"] is False
        assert "5.5s" in result["issues"][0]


class TestAssessAnimation:
    """Test the assess_animation aggregation."""

    def test_long_carousel(self):
        result = assess_animation(6, "carousel", 0, False)
        assert result["compliance"] == {
            "reducedMotion": True,
            "flashing": True,
            "duration": False,
        }
        assert PAUSE_CONTROL_RECOMMENDATION in result["recommendations"]
        assert not is_compliant(result)

    def test_flashing_fails_regardless_of_type(self):
        result = assess_animation(1, "fade", 10, False)
        assert result["compliance"]["flashing"] is False
        assert result["compliance"]["duration"] is True

    def test_reduced_motion_overrides_passing_checks(self):
        result = assess_animation(1, "fade", 0, True)
        assert result["compliance"]["reducedMotion"] is False
        assert result["compliance"]["flashing"] is True
        assert result["compliance"]["duration"] is True
        assert not is_compliant(result)

    def test_compliant_animation(self):
        result = assess_animation(2, "Fade", 0, False)
        assert is_compliant(result)
        assert result["issues"] == []
        assert result["animation"] == {"duration": 2, "type": "fade", "flashes": 0}

    def test_recommendations_are_deduplicated(self):
        result = assess_animation(12, "carousel", 5, True)
        assert len(result["recommendations"]) == len(set(result["recommendations"]))
        assert len(result["issues"]) == 4


class TestParseBool:
    """Test the parse_bool function."""

    @pytest.mark.parametrize("value", [True, "true", "TRUE", "1", "yes"])
    def test_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", [False, "false", "0", "no", ""])
    def test_false(self, value):
        assert parse_bool(value) is False

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_bool("maybe")
