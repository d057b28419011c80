from charts.plotly_charts import price_area_chart
from sugar_token.data.provider import generate, series_to_frame
from sugar_token.data.random_source import make_rng
from utils.formatters import NEGATIVE_COLOR, POSITIVE_COLOR


def test_price_area_chart_plots_labels_and_prices(fixed_now):
    df = series_to_frame(generate("24H", rng=make_rng(1), now=fixed_now))
    fig = price_area_chart(df, positive=True)
    trace = fig.data[0]
    assert list(trace.x) == list(df["label"])
    assert list(trace.y) == list(df["price"])
    assert trace.line.color == POSITIVE_COLOR
    assert fig.layout.yaxis.tickprefix == "$"


def test_price_area_chart_negative_colour(fixed_now):
    df = series_to_frame(generate("7D", rng=make_rng(2), now=fixed_now))
    fig = price_area_chart(df, positive=False, layout_cfg={"height": 400})
    assert fig.data[0].line.color == NEGATIVE_COLOR
    assert fig.layout.height == 400
