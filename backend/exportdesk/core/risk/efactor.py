"""E-Factor — weather-driven logistics cost multiplier.

E-Factor > 1.0 means shipping through the monitored ports is currently
riskier (and slower) than baseline; the landed-cost calculation
multiplies its total by this coefficient.

    multiplier = 1.0 + wind contribution + congestion contribution

Wind contribution comes from the worst wind across all ports. Congestion
is simulated from expected delay days (high wind, storm alerts, low
visibility) at +0.05 per day. Only max/count/sum are used, so sample
order never changes the result.
"""

import logging

from exportdesk.core.rounding import round_half_up
from exportdesk.schemas.shipment import (
    CongestionTier,
    PortWeatherSample,
    RiskAssessment,
    RiskBreakdown,
    StormRiskTier,
)

logger = logging.getLogger(__name__)

BASE_COEFFICIENT = 1.0
DELAY_DAY_COST = 0.05
LOW_VISIBILITY_METERS = 1000

# (wind threshold in knots, contribution), checked highest first
WIND_BANDS: tuple[tuple[float, float], ...] = (
    (25, 0.20),  # port shutdown risk
    (18, 0.08),
    (12, 0.03),
)


class WeatherDataUnavailableError(ValueError):
    """No weather sample was available for any monitored port."""


class EFactorAggregator:
    """Aggregate per-port weather samples into a RiskAssessment."""

    def compute(self, samples: list[PortWeatherSample]) -> RiskAssessment:
        """Compute the E-Factor multiplier and its breakdown.

        Raises WeatherDataUnavailableError for an empty sample set rather
        than returning the 1.0 baseline.
        """
        if not samples:
            raise WeatherDataUnavailableError(
                "Could not obtain weather data for any monitored port"
            )

        max_wind = max(s.wind_speed_knots for s in samples)
        storm_count = sum(1 for s in samples if s.has_storm_alert)
        low_vis_count = sum(1 for s in samples if s.visibility_meters < LOW_VISIBILITY_METERS)

        wind_contribution = self._wind_contribution(max_wind)
        delay_days = self._wind_delay(max_wind) + storm_count + 0.5 * low_vis_count
        congestion_contribution = round_half_up(delay_days * DELAY_DAY_COST, 4)
        multiplier = round_half_up(
            BASE_COEFFICIENT + wind_contribution + congestion_contribution, 4
        )

        logger.debug(
            f"E-Factor x{multiplier} (max wind {max_wind} kn, {storm_count} storm, "
            f"{low_vis_count} low-vis, {delay_days} delay days)"
        )

        return RiskAssessment(
            multiplier=multiplier,
            port_congestion_tier=self._congestion_tier(delay_days),
            storm_risk_tier=self._storm_tier(max_wind, storm_count),
            breakdown=RiskBreakdown(
                base_coefficient=BASE_COEFFICIENT,
                wind_contribution=wind_contribution,
                congestion_contribution=congestion_contribution,
                estimated_delay_days=delay_days,
            ),
            samples=tuple(samples),
        )

    @staticmethod
    def _wind_contribution(max_wind: float) -> float:
        for threshold, contribution in WIND_BANDS:
            if max_wind > threshold:
                return contribution
        return 0.0

    @staticmethod
    def _wind_delay(max_wind: float) -> int:
        if max_wind > 25:
            return 2
        if max_wind > 18:
            return 1
        return 0

    @staticmethod
    def _congestion_tier(delay_days: float) -> CongestionTier:
        if delay_days >= 4:
            return CongestionTier.CRITICAL
        if delay_days >= 2:
            return CongestionTier.HIGH
        if delay_days >= 1:
            return CongestionTier.MEDIUM
        return CongestionTier.LOW

    @staticmethod
    def _storm_tier(max_wind: float, storm_count: int) -> StormRiskTier:
        if storm_count >= 2 or max_wind > 25:
            return StormRiskTier.SEVERE
        if storm_count >= 1 or max_wind > 18:
            return StormRiskTier.MODERATE
        if max_wind > 12:
            return StormRiskTier.LOW
        return StormRiskTier.NONE
