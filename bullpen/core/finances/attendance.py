"""Season attendance model."""

from dataclasses import dataclass
from typing import Optional

from bullpen.core.rng import RandomSource, default_source, uniform


@dataclass
class AttendanceResult:
    average_attendance: int
    total_attendance: int
    attendance_rate: float

    def to_dict(self) -> dict:
        return {
            "average_attendance": self.average_attendance,
            "total_attendance": self.total_attendance,
            "attendance_rate": self.attendance_rate,
        }


def calculate_attendance(
    stadium_capacity: int,
    win_pct: float,
    city_pride: int,
    unemployment_rate: float,
    stadium_quality: int,
    total_home_games: int,
    fan_mult: float = 1.0,
    source: Optional[RandomSource] = None,
) -> AttendanceResult:
    """
    Estimate average and total home attendance for a season.

    Starts from 40% of capacity and scales by winning (power 1.5),
    pride, unemployment, stadium quality, the entertainment district
    bonus and a +/-10% variance draw. The per-game average never exceeds
    capacity.
    """
    source = default_source(source)

    attendance = stadium_capacity * 0.4
    attendance *= (max(win_pct, 0.0) / 0.5) ** 1.5
    attendance *= 0.7 + (city_pride / 100) * 0.8
    attendance *= 1 - (unemployment_rate / 100) * 0.5
    attendance *= 0.8 + (stadium_quality / 100) * 0.4
    attendance *= fan_mult
    attendance *= uniform(source, 0.9, 1.1)

    average = max(0, min(round(attendance), stadium_capacity))
    rate = average / stadium_capacity if stadium_capacity > 0 else 0.0
    return AttendanceResult(
        average_attendance=average,
        total_attendance=average * max(0, total_home_games),
        attendance_rate=rate,
    )
