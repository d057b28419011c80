import pandas as pd
import plotly.graph_objects as go

from utils.formatters import POSITIVE_COLOR, NEGATIVE_COLOR


def _fill(color: str, opacity: float) -> str:
    r, g, b = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    return f"rgba({r},{g},{b},{opacity})"


def price_area_chart(df: pd.DataFrame, positive: bool = True, layout_cfg: dict | None = None):
    layout_cfg = layout_cfg or {}
    color = POSITIVE_COLOR if positive else NEGATIVE_COLOR
    fig = go.Figure(data=[
        go.Scatter(
            x=df["label"], y=df["price"],
            mode="lines",
            line=dict(color=color, width=2, shape="spline"),
            fill="tozeroy",
            fillgradient=dict(
                type="vertical",
                colorscale=[(0.0, _fill(color, 0.0)), (1.0, _fill(color, 0.3))],
            ),
            name="Price",
            hovertemplate="Time: %{x}<br>$%{y}<extra>Price</extra>",
        )
    ])
    prices = df["price"]
    pad = ((prices.max() - prices.min()) * 0.1 or prices.max() * 0.01) if len(prices) else 0
    fig.update_layout(
        template="plotly_dark" if layout_cfg.get("theme", "dark") == "dark" else "plotly_white",
        height=layout_cfg.get("height", 300),
        margin=dict(l=5, r=5, t=10, b=0),
        showlegend=False,
        xaxis=dict(showgrid=False, showline=False, ticks="", tickfont=dict(color="#888", size=12)),
        yaxis=dict(
            showgrid=True, gridcolor="#333", griddash="dash", zeroline=False,
            tickprefix="$", tickfont=dict(color="#888", size=12),
            range=[prices.min() - pad, prices.max() + pad] if len(prices) else None,
        ),
    )
    return fig
