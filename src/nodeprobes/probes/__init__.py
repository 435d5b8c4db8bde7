"""Probe catalog, selection and rendering."""
