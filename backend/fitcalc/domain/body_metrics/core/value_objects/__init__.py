"""Value objects for body metrics domain."""

from .activity_level import PAL_MULTIPLIERS, ActivityLevel
from .bmi import BMI_BANDS, BMICategory, BMIResult
from .calculation_result import CalculationResult
from .calorie_targets import CalorieTargets, WeeklyFatLoss
from .goal import Goal, MacroDistribution
from .goal_plan import GoalPlan, TargetWeightBounds
from .goal_recommendations import GoalRecommendations
from .macro_split import MacroSplit
from .sex import Sex
from .unit_system import HeightUnit, LengthUnit, UnitSystem, WeightUnit
from .user_profile import Measurements, ProfileDraft, UserProfile
from .validation_result import ValidationResult
from .weight_range import WeightRange
from .whr import WHR_BANDS, WHRBand, WHRCategory, WHRResult

__all__ = [
    "ActivityLevel",
    "PAL_MULTIPLIERS",
    "BMICategory",
    "BMI_BANDS",
    "BMIResult",
    "CalculationResult",
    "CalorieTargets",
    "WeeklyFatLoss",
    "Goal",
    "MacroDistribution",
    "GoalPlan",
    "TargetWeightBounds",
    "GoalRecommendations",
    "MacroSplit",
    "Sex",
    "UnitSystem",
    "WeightUnit",
    "HeightUnit",
    "LengthUnit",
    "Measurements",
    "ProfileDraft",
    "UserProfile",
    "ValidationResult",
    "WeightRange",
    "WHRCategory",
    "WHRBand",
    "WHR_BANDS",
    "WHRResult",
]
