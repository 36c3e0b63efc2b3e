from .plotly_viz import build_plotly_figure, write_plotly_html

__all__ = [
    "build_plotly_figure",
    "write_plotly_html",
]
