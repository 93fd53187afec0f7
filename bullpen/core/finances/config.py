"""Financial model constants."""

from dataclasses import dataclass, field
from typing import Mapping

from bullpen.core.enums import Tier


@dataclass(frozen=True)
class SponsorshipBand:
    minimum: int
    maximum: int
    min_tier: Tier

    def value(self, multiplier: float) -> float:
        return self.minimum + (self.maximum - self.minimum) * multiplier


@dataclass(frozen=True)
class FinancialConfig:
    """Revenue and expense knobs for the season money model."""

    concession_per_fan: float = 12.0
    parking_drive_pct: float = 0.25
    parking_price: int = 20
    merchandise_per_fan: float = 8.0

    local_sponsorship: SponsorshipBand = SponsorshipBand(25_000, 500_000, Tier.LOW_A)
    regional_sponsorship: SponsorshipBand = SponsorshipBand(150_000, 2_000_000, Tier.HIGH_A)
    national_sponsorship: SponsorshipBand = SponsorshipBand(2_000_000, 10_000_000, Tier.TRIPLE_A)

    maintenance_pct: float = 0.05
    debt_interest_rate: float = 0.08

    # Debt / annual budget thresholds
    warning_threshold: float = 0.5
    critical_threshold: float = 1.0
    imminent_threshold: float = 1.5
    bankrupt_threshold: float = 2.0

    base_salaries: Mapping[Tier, int] = field(
        default_factory=lambda: {
            Tier.LOW_A: 10_000,
            Tier.HIGH_A: 30_000,
            Tier.DOUBLE_A: 100_000,
            Tier.TRIPLE_A: 300_000,
            Tier.MLB: 750_000,
        }
    )


DEFAULT_FINANCIAL_CONFIG = FinancialConfig()
