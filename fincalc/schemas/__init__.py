"""Pydantic data contracts for calculator inputs and results."""
