"""Streamlit dashboard for the calculator."""
