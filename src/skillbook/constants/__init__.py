"""Constant tables shared across Skillbook modules."""
