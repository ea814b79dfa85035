"""Operator-editable runtime settings."""
