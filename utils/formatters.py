import math

TIMEFRAME_CAPTIONS = {
    "1H": "Last hour",
    "24H": "Last 24 hours",
    "7D": "Last 7 days",
    "30D": "Last 30 days",
}

POSITIVE_COLOR = "#22c55e"
NEGATIVE_COLOR = "#ef4444"


def _is_blank(val):
    if val is None:
        return True
    return isinstance(val, float) and math.isnan(val)


def format_price(val, decimals=4):
    """
    Format a token price as $X.XXXX.
    - Accepts floats or the decimal strings stored on samples.
    - Returns empty string for None/NaN.
    """
    if _is_blank(val):
        return ""
    try:
        return f"${float(val):,.{decimals}f}"
    except (TypeError, ValueError):
        return str(val)


def format_change(val):
    """
    Format a percent change with an explicit sign: +1.23% / -0.80%.
    Zero counts as a gain, matching the chart colour.
    """
    if _is_blank(val):
        return ""
    try:
        val = float(val)
    except (TypeError, ValueError):
        return str(val)
    sign = "+" if val >= 0 else ""
    return f"{sign}{val:.2f}%"


def format_proxy_price(val):
    """Sugar price readout: ₹38.00/kg."""
    if _is_blank(val):
        return ""
    try:
        return f"₹{float(val):,.2f}/kg"
    except (TypeError, ValueError):
        return str(val)


def change_color(val) -> str:
    if _is_blank(val):
        return POSITIVE_COLOR
    return POSITIVE_COLOR if float(val) >= 0 else NEGATIVE_COLOR


def timeframe_caption(timeframe) -> str:
    key = getattr(timeframe, "value", timeframe)
    return TIMEFRAME_CAPTIONS.get(key, TIMEFRAME_CAPTIONS["30D"])
