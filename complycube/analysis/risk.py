# complycube/analysis/risk.py

"""
Risk classification of screening results.

Deterministic, no I/O: maps a screening outcome and its match breakdown to
a risk level plus analyst recommendations.
"""

from typing import Any, Iterable, Union

from complycube.models.screening import (
    RiskAssessment,
    RiskLevel,
    ScreeningCheckResult,
    ScreeningOutcome,
)

HIGH_CONFIDENCE_THRESHOLD = 0.8
MANY_MATCHES_THRESHOLD = 10


def analyze_screening_result(
    result: Union[ScreeningCheckResult, dict[str, Any]],
) -> RiskAssessment:
    """
    Analyze a screening result for risk assessment.

    Args:
        result: ScreeningCheckResult, or a dict in the API's wire format.

    Returns:
        RiskAssessment with the risk level, recommendations and a summary.
    """
    if not isinstance(result, ScreeningCheckResult):
        result = ScreeningCheckResult.model_validate(result)

    summary = result.breakdown.summary
    matches = result.breakdown.matches
    recommendations: list[str] = []

    if result.outcome == ScreeningOutcome.CLEAR:
        risk_level = RiskLevel.LOW
        recommendations.append("Client cleared for onboarding")

    elif result.outcome == ScreeningOutcome.ATTENTION:
        risk_level = RiskLevel.LOW
        high_confidence = [m for m in matches if (m.confidence or 0.0) > HIGH_CONFIDENCE_THRESHOLD]

        if summary.pep_matches > 0 or summary.watchlist_matches > 0:
            if high_confidence:
                risk_level = RiskLevel.CRITICAL
                recommendations.append("Manual review required - high confidence matches found")
                recommendations.append("Consider enhanced due diligence")
            else:
                risk_level = RiskLevel.HIGH
                recommendations.append("Manual review recommended")

        # Adverse media escalates LOW only, never downgrades
        if summary.adverse_media_matches > 0:
            if risk_level == RiskLevel.LOW:
                risk_level = RiskLevel.MEDIUM
            recommendations.append("Review adverse media findings")

        if summary.total_matches > MANY_MATCHES_THRESHOLD:
            recommendations.append("Multiple matches found - prioritize high confidence results")

    else:
        risk_level = RiskLevel.MEDIUM
        recommendations.append("Screening could not be processed - retry recommended")

    summary_text = (
        f"{result.outcome.upper()} result with {summary.total_matches} total matches "
        f"({summary.pep_matches} PEP, {summary.watchlist_matches} watchlist, "
        f"{summary.adverse_media_matches} adverse media)"
    )

    return RiskAssessment(
        risk_level=risk_level,
        recommendations=recommendations,
        summary=summary_text,
    )


def assess_overall_risk(results: Iterable[Union[ScreeningCheckResult, dict[str, Any]]]) -> str:
    """Roll several screening results up into a single onboarding verdict."""
    levels = [analyze_screening_result(r).risk_level for r in results]

    if RiskLevel.CRITICAL in levels:
        return "CRITICAL - Immediate review required"
    if RiskLevel.HIGH in levels:
        return "HIGH - Enhanced due diligence recommended"
    return "ACCEPTABLE - Standard onboarding may proceed"
