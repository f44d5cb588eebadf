"""BMIService - Body Mass Index and WHO category."""

from ..core.exceptions.domain_errors import DegenerateMeasurementError
from ..core.value_objects.bmi import BMICategory, BMIResult


class BMIService:
    """Calculate BMI and look up its category.

    Formula:
        BMI = weight(kg) / height(m)^2

    Categories are half-open bands [lower, upper), scanned in order:
    Underweight [0, 18.5), Normal weight [18.5, 25), Overweight [25, 30),
    Obese I [30, 35), Obese II [35, 40), Obese III [40, 100).
    Values matching no band (>= 100, or negative) fall back to Obese III.
    """

    def calculate(self, weight_kg: float, height_cm: float) -> float:
        """Calculate BMI.

        Raises:
            DegenerateMeasurementError: If height is zero
        """
        if height_cm == 0:
            raise DegenerateMeasurementError("height_cm", height_cm)
        height_m = height_cm / 100
        return weight_kg / (height_m * height_m)

    def categorize(self, bmi: float) -> BMICategory:
        """Find the band containing bmi.

        Example:
            >>> BMIService().categorize(25.0)
            <BMICategory.OVERWEIGHT: 'Overweight'>
        """
        for category in BMICategory:
            if category.contains(bmi):
                return category
        return BMICategory.OBESE_III

    def assess(self, weight_kg: float, height_cm: float) -> BMIResult:
        """Calculate BMI and wrap it with its category."""
        value = self.calculate(weight_kg, height_cm)
        return BMIResult.from_category(value, self.categorize(value))
