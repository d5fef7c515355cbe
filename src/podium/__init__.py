"""Olympic results aggregation for flow, heatmap and choropleth views."""

__version__ = "0.1.0"
