# complycube/analysis/__init__.py

"""Pure analysis helpers applied to ComplyCube responses."""

from .risk import analyze_screening_result, assess_overall_risk
from complycube.utils.validators import CompanyDataQuality, validate_company_data

__all__ = [
    "analyze_screening_result",
    "assess_overall_risk",
    "CompanyDataQuality",
    "validate_company_data",
]
