from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class TimeFrame(str, Enum):
    ONE_HOUR = "1H"
    ONE_DAY = "24H"
    ONE_WEEK = "7D"
    ONE_MONTH = "30D"

    @classmethod
    def parse(cls, value) -> "TimeFrame":
        """Return the matching timeframe, or 24H for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.ONE_DAY

    @classmethod
    def is_known(cls, value) -> bool:
        if isinstance(value, cls):
            return True
        return str(value).strip().upper() in {tf.value for tf in cls}

    @property
    def is_intraday(self) -> bool:
        return self in (TimeFrame.ONE_HOUR, TimeFrame.ONE_DAY)


class TimeFrameParams(NamedTuple):
    point_count: int
    interval_ms: int
    volatility: float


MINUTE_MS = 60 * 1000
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS

TIMEFRAME_PARAMS = {
    TimeFrame.ONE_HOUR: TimeFrameParams(60, MINUTE_MS, 0.01),
    TimeFrame.ONE_DAY: TimeFrameParams(24, HOUR_MS, 0.05),
    TimeFrame.ONE_WEEK: TimeFrameParams(7, DAY_MS, 0.15),
    TimeFrame.ONE_MONTH: TimeFrameParams(30, DAY_MS, 0.30),
}


def params_for(timeframe) -> TimeFrameParams:
    return TIMEFRAME_PARAMS[TimeFrame.parse(timeframe)]


class SamplePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: int            # epoch milliseconds
    label: str
    price: str                # token price, 4 decimals
    secondary_price: Optional[str] = None   # sugar INR/kg, 2 decimals


class DisplayStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_price: str
    percent_change: float
    current_secondary_price: Optional[str] = None

    @property
    def is_positive(self) -> bool:
        return self.percent_change >= 0

    @classmethod
    def placeholder(cls, secondary_price: Optional[str] = "38.00") -> "DisplayStats":
        """Readout shown before any series exists."""
        return cls(current_price="0.0000", percent_change=0.0,
                   current_secondary_price=secondary_price)


Series = Tuple[SamplePoint, ...]
