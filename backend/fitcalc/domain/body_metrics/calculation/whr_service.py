"""WHRService - waist-to-hip ratio and fat-distribution type."""

from typing import Optional

from ..core.exceptions.domain_errors import DegenerateMeasurementError
from ..core.value_objects.sex import Sex
from ..core.value_objects.user_profile import Measurements
from ..core.value_objects.whr import WHRCategory, WHRResult


class WHRService:
    """Calculate WHR and classify fat distribution.

    Thresholds are inclusive upper bounds on the ratio, the same for
    both sexes: <= 0.85 Peripheral, <= 0.90 Balanced, <= 0.94 Central,
    otherwise Risky.
    """

    def calculate(self, waist_cm: float, hips_cm: float) -> float:
        """Calculate waist / hips.

        Raises:
            DegenerateMeasurementError: If hips is zero
        """
        if hips_cm == 0:
            raise DegenerateMeasurementError("hips_cm", hips_cm)
        return waist_cm / hips_cm

    def categorize(self, whr: float, sex: Sex) -> WHRCategory:
        """Classify a ratio. sex is accepted for call-site symmetry only."""
        for category in WHRCategory:
            upper_bound = category.band.upper_bound
            if upper_bound is None or whr <= upper_bound:
                return category
        return WHRCategory.RISKY

    def assess(self, measurements: Measurements, sex: Sex) -> Optional[WHRResult]:
        """Build the WHR result, or None unless both waist and hips are known."""
        if not measurements.has_waist_and_hips():
            return None

        value = self.calculate(measurements.waist_cm, measurements.hips_cm)
        return WHRResult.from_category(value, self.categorize(value, sex))
