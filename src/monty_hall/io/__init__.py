"""Tabular I/O helpers."""

from .tabular import read_trial_results_csv, write_summary_csv, write_trial_results_csv

__all__ = ["read_trial_results_csv", "write_summary_csv", "write_trial_results_csv"]
