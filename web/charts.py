"""
Interactive Plotly chart for the web dashboard.

price_target_chart returns a go.Figure that can be:
  - Serialized to JSON via plotly.io.to_json(fig)
  - Served via Flask API as JSON for client-side rendering

Three series share the 13 monthly category labels: historical price, the
projected compound path, and the target point.
"""
import plotly.graph_objects as go

from web.chart_data import COLORS, SERIES_LABELS

THEME = {
    "bg": "#F0F1F6",
    "plot_bg": "#FFFFFF",
    "grid": "#E4E7ED",
    "text": "#1E272E",
    "text_dim": "#636E72",
}

FONT_FAMILY = "system-ui, -apple-system, sans-serif"


def _base_layout(title, height=420, **overrides):
    """Shared layout defaults."""
    layout = dict(
        title=dict(text=title, font=dict(size=18, color=THEME["text"])),
        paper_bgcolor=THEME["bg"],
        plot_bgcolor=THEME["plot_bg"],
        font=dict(family=FONT_FAMILY, color=THEME["text"]),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5),
        margin=dict(l=70, r=30, t=80, b=50),
        height=height,
    )
    layout.update(overrides)
    return layout


def price_target_chart(snapshot, title="Bitcoin Price vs Target"):
    """
    Line chart of the three snapshot series.

    Args:
        snapshot: web.chart_data.ChartSnapshot
        title: chart title
    """
    labels = list(snapshot.labels)
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=labels,
        y=list(snapshot.historical),
        name=SERIES_LABELS["historical"],
        mode="lines+markers",
        line=dict(color=COLORS["historical"], width=3, shape="spline", smoothing=0.2),
        marker=dict(size=4),
        fill="tozeroy",
        fillcolor=COLORS["historical_fill"],
        connectgaps=False,
        hovertemplate="%{x}<br>$%{y:,.0f}<extra>" + SERIES_LABELS["historical"] + "</extra>",
    ))

    fig.add_trace(go.Scatter(
        x=labels,
        y=list(snapshot.projected),
        name=SERIES_LABELS["projected"],
        mode="lines",
        line=dict(color=COLORS["projected"], width=2, dash="dash", shape="spline", smoothing=0.4),
        connectgaps=False,
        hovertemplate="%{x}<br>$%{y:,.0f}<extra>" + SERIES_LABELS["projected"] + "</extra>",
    ))

    fig.add_trace(go.Scatter(
        x=labels,
        y=list(snapshot.target),
        name=SERIES_LABELS["target"],
        mode="lines+markers",
        line=dict(color=COLORS["target"], width=2, dash="dot"),
        marker=dict(size=8, symbol="star"),
        connectgaps=False,
        hovertemplate="%{x}<br>$%{y:,.0f}<extra>" + SERIES_LABELS["target"] + "</extra>",
    ))

    fig.update_layout(**_base_layout(
        title,
        hovermode="x unified",
        xaxis=dict(
            type="category",
            categoryorder="array",
            categoryarray=labels,
            gridcolor=THEME["grid"],
            nticks=8,
        ),
        yaxis=dict(
            gridcolor=THEME["grid"],
            tickprefix="$",
            tickformat=",.0f",
            rangemode="normal",
        ),
    ))
    return fig
