"""Annotated models shared by the unit, integration and CLI tests."""
