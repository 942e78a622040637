"""Mullai land claim backend: rule evaluation, workflow state, geocoding and reports."""
