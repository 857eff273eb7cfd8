"""Plotting functions that might be useful. Based on plotly"""

from plotly import graph_objects as go
from plotly import io as pio

from lagrangefe.models import LagrangePolynomial


def set_plotly_template():
    plot_temp = pio.templates["plotly_dark"]
    plot_temp.layout.width = 400
    plot_temp.layout.height = 300
    plot_temp.layout.autosize = False
    pio.templates.default = plot_temp


def estimate_figure(model: LagrangePolynomial, steps: int = 100) -> go.Figure:
    """Samples as markers and the fitted polynomial on [0, 1] as a line"""

    estimates = model.estimate(steps).to_frame()

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=model.samples.x,
            y=model.samples.y,
            mode="markers",
            name="samples",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=estimates["x"].to_numpy(),
            y=estimates["estimate"].to_numpy(),
            mode="lines",
            name=f"degree {model.degree}",
        )
    )
    fig.update_layout(xaxis_title="lambda", yaxis_title="dG/dlambda")

    return fig
