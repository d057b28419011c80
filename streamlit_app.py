import os

import streamlit as st
from dotenv import load_dotenv
from streamlit_autorefresh import st_autorefresh

from sugar_token.config import load_config
from sugar_token.data.provider import series_to_frame
from sugar_token.models.series import TimeFrame
from sugar_token.session.chart_session import ChartSession
from charts.plotly_charts import price_area_chart
from utils.formatters import (
    change_color, format_change, format_price, format_proxy_price, timeframe_caption,
)

load_dotenv()
st.set_page_config(page_title="Sugar Token", layout="wide")

REFRESH_SECONDS = float(os.getenv("SUGAR_TOKEN_REFRESH_SECONDS", "1"))


def get_session() -> tuple[ChartSession, bool]:
    """
    One ChartSession per browser session, mounted on first render.
    - No background ticker: the page ticks once per autorefresh rerun, so
      nothing keeps running after the tab goes away.
    - Returns (session, just_mounted).
    """
    if "chart_session" not in st.session_state:
        cfg = load_config(os.getenv("SUGAR_TOKEN_CONFIG"), tick_interval_seconds=REFRESH_SECONDS)
        session = ChartSession(TimeFrame.ONE_DAY, config=cfg, autostart=False)
        session.mount()
        st.session_state.chart_session = session
        return session, True
    return st.session_state.chart_session, False


session, just_mounted = get_session()
if not just_mounted:
    session.tick_once()

st_autorefresh(interval=int(session.config.tick_interval_seconds * 1000), key="sugar_token_refresh")

title_col, buttons_col = st.columns([3, 2])
title_col.markdown("### Sugar Token Price")
for col, tf in zip(buttons_col.columns(len(TimeFrame)), TimeFrame):
    active = tf == session.timeframe
    if col.button(tf.value, key=f"tf_{tf.value}", type="primary" if active else "secondary"):
        if not active:
            session.switch_timeframe(tf)
            st.rerun()

snap = session.snapshot()
stats = snap.stats
color = change_color(stats.percent_change)

st.markdown(
    f"<span style='font-size:2rem;font-weight:700'>{format_price(stats.current_price)}</span> "
    f"<span style='color:{color};font-weight:500'>{format_change(stats.percent_change)}</span>",
    unsafe_allow_html=True,
)
st.caption(timeframe_caption(snap.timeframe))
st.caption(f"Based on Indian sugar price: {format_proxy_price(stats.current_secondary_price)}")

df = series_to_frame(snap.series, tz=session.config.display_timezone)
st.plotly_chart(price_area_chart(df, positive=stats.is_positive), use_container_width=True)
