"""Streamlit pages for the CDMS console."""
