"""Helpers shared by the schema model and the validation engine."""
