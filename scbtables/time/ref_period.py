from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re

import pandas as pd
from pandas.tseries.offsets import MonthEnd


class RefFreq(str, Enum):
    A = "A"
    Q = "Q"
    M = "M"


@dataclass(frozen=True)
class RefPeriod:
    """A PxWeb time code such as 2020M02, 2020K1 or 2020."""

    freq: RefFreq
    year: int
    period: int

    @staticmethod
    def parse(s: str) -> "RefPeriod":
        text = str(s).strip()
        if not text:
            raise ValueError("Reference period string is required.")

        match = re.match(r"^(\d{4})M(\d{2})$", text, re.IGNORECASE)
        if not match:
            match = re.match(r"^(\d{4})-(\d{2})$", text)
        if match:
            year = int(match.group(1))
            month = int(match.group(2))
            if not 1 <= month <= 12:
                raise ValueError(f"Invalid reference period month: {text}")
            return RefPeriod(RefFreq.M, year, month)

        # SCB publishes quarters as K (kvartal) even in the English API
        match = re.match(r"^(\d{4})[KkQq]([1-4])$", text)
        if match:
            return RefPeriod(RefFreq.Q, int(match.group(1)), int(match.group(2)))

        match = re.match(r"^(\d{4})$", text)
        if match:
            return RefPeriod(RefFreq.A, int(match.group(1)), 1)

        raise ValueError(
            "Invalid reference period format. Expected YYYY, YYYYKq, YYYYQq, "
            "YYYYMmm or YYYY-MM."
        )

    def to_key(self) -> str:
        if self.freq == RefFreq.A:
            return f"{self.year:04d}"
        if self.freq == RefFreq.Q:
            return f"{self.year:04d}K{self.period}"
        if self.freq == RefFreq.M:
            return f"{self.year:04d}M{self.period:02d}"
        raise ValueError(f"Unsupported reference frequency: {self.freq}")

    def end_obs_date(self) -> pd.Timestamp:
        if self.freq == RefFreq.A:
            ts = pd.Timestamp(self.year, 12, 31, tz="UTC")
        elif self.freq == RefFreq.Q:
            month = self.period * 3
            ts = pd.Timestamp(self.year, month, 1, tz="UTC") + MonthEnd(0)
        elif self.freq == RefFreq.M:
            ts = pd.Timestamp(self.year, self.period, 1, tz="UTC") + MonthEnd(0)
        else:
            raise ValueError(f"Unsupported reference frequency: {self.freq}")
        return ts.floor("D")
