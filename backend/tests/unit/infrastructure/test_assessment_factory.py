"""Unit tests for the settings-aware assessment factory."""

import pytest

from fitcalc.application.body_metrics.queries.assess_profile import (
    AssessProfileQuery,
    AssessProfileQueryHandler,
)
from fitcalc.domain.body_metrics.core.value_objects import Goal, ProfileDraft, Sex
from fitcalc.infrastructure.assessment_factory import (
    create_assess_profile_query,
    get_settings,
    reset_settings,
)
from fitcalc.infrastructure.config import CalculatorSettings


@pytest.fixture(autouse=True)
def reset_singleton():
    """Reset settings singleton before and after each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def draft() -> ProfileDraft:
    return ProfileDraft(sex=Sex.MALE, age=30, height_cm=180.0, weight_kg=80.0)


class TestGetSettings:
    """Test lazy settings singleton."""

    def test_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_reads_environment_on_first_call(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FITCALC_PROTEIN_PER_KG", "1.5")

        assert get_settings().protein_per_kg == 1.5

    def test_reset_reloads(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("FITCALC_PROTEIN_PER_KG", raising=False)
        first = get_settings()
        monkeypatch.setenv("FITCALC_PROTEIN_PER_KG", "2.0")

        reset_settings()

        assert get_settings() is not first
        assert get_settings().protein_per_kg == 2.0


class TestCreateAssessProfileQuery:
    """Test query defaults taken from settings."""

    def test_explicit_settings(self, draft):
        settings = CalculatorSettings(
            protein_per_kg=1.0, protein_per_pound=False, measurements_optional=False
        )

        query = create_assess_profile_query(draft, Goal.LOSE, 70.0, settings=settings)

        assert isinstance(query, AssessProfileQuery)
        assert query.goal == Goal.LOSE
        assert query.target_weight == 70.0
        assert query.protein_per_kg == 1.0
        assert query.protein_per_pound is False
        assert query.measurements_optional is False

    def test_environment_settings_reach_the_handler(
        self, draft, monkeypatch: pytest.MonkeyPatch
    ):
        monkeypatch.setenv("FITCALC_PROTEIN_PER_KG", "1.0")
        monkeypatch.setenv("FITCALC_PROTEIN_PER_POUND", "false")

        query = create_assess_profile_query(draft)
        assessment = AssessProfileQueryHandler().handle(query)

        # Legacy protein: ideal target 71.28 kg × 1.0 g/kg
        assert assessment.results.protein_intake == pytest.approx(71.28)
        assert assessment.goal_plan.macros.protein_g == 80
