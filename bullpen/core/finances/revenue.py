"""Season revenue streams. Every stream is rounded to whole dollars."""

import math
from dataclasses import dataclass

from bullpen.core.enums import Tier
from bullpen.core.finances.config import DEFAULT_FINANCIAL_CONFIG, FinancialConfig


@dataclass
class RevenueBreakdown:
    tickets: int = 0
    concessions: int = 0
    parking: int = 0
    merchandise: int = 0
    sponsorships: int = 0

    @property
    def total(self) -> int:
        return (
            self.tickets
            + self.concessions
            + self.parking
            + self.merchandise
            + self.sponsorships
        )

    def to_dict(self) -> dict:
        return {
            "tickets": self.tickets,
            "concessions": self.concessions,
            "parking": self.parking,
            "merchandise": self.merchandise,
            "sponsorships": self.sponsorships,
            "total": self.total,
        }


def calculate_ticket_revenue(total_attendance: int, ticket_price: float) -> int:
    return round(total_attendance * ticket_price)


def calculate_concession_revenue(
    total_attendance: int,
    stadium_quality: int,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
) -> int:
    """Attendance x $12, lifted up to 50% by stadium quality."""
    quality_multiplier = 1 + stadium_quality / 200
    return round(total_attendance * config.concession_per_fan * quality_multiplier)


def calculate_parking_revenue(
    total_attendance: int, config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG
) -> int:
    drivers = math.floor(total_attendance * config.parking_drive_pct)
    return drivers * config.parking_price


def calculate_merchandise_revenue(
    total_attendance: int,
    city_pride: int,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
) -> int:
    return round(total_attendance * config.merchandise_per_fan * (city_pride / 100))


def calculate_sponsorship_revenue(
    tier: Tier,
    city_pride: int,
    national_recognition: int,
    won_championship: bool,
    config: FinancialConfig = DEFAULT_FINANCIAL_CONFIG,
) -> int:
    """
    Sum of up to three sponsorship bands.

    Local deals exist everywhere, regional from High-A and national from
    Triple-A. Each band pays min + (max - min) * multiplier.
    """
    pride = city_pride / 100
    recognition = national_recognition / 100

    total = 0.0
    if tier >= config.local_sponsorship.min_tier:
        total += config.local_sponsorship.value(0.3 + pride * 0.7)
    if tier >= config.regional_sponsorship.min_tier:
        total += config.regional_sponsorship.value(0.2 + pride * 0.4 + recognition * 0.4)
    if tier >= config.national_sponsorship.min_tier:
        championship_bonus = 0.3 if won_championship else 0.0
        total += config.national_sponsorship.value(0.1 + recognition * 0.6 + championship_bonus)
    return round(total)
