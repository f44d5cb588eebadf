"""Calculation services for body metrics."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .calorie_service import KCAL_PER_KG_FAT, KCAL_PER_LB_FAT, CalorieTargetService
from .goal_plan_service import GoalPlanService
from .goal_recommendation_service import GoalRecommendationService
from .protein_service import ProteinService
from .safety_policy import SafetyPolicy
from .tdee_service import TDEEService
from .weight_range_service import WeightRangeService
from .whr_service import WHRService

__all__ = [
    "BMRService",
    "TDEEService",
    "BMIService",
    "WHRService",
    "WeightRangeService",
    "SafetyPolicy",
    "CalorieTargetService",
    "KCAL_PER_LB_FAT",
    "KCAL_PER_KG_FAT",
    "ProteinService",
    "GoalRecommendationService",
    "GoalPlanService",
]
