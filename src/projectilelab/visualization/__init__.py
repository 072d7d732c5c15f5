"""Matplotlib and plotly presentation of launches."""
