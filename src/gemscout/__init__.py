"""Scouting toolkit that filters and ranks athletes from tabular exports."""
