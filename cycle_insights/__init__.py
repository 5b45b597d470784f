"""
Cycle phase inference and prediction for the PCOS wellness tracker.
"""
