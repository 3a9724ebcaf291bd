"""
Overview Infrastructure Layer
=============================

Statement builders for the ticket side of the overview reports.
"""
