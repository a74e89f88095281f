"""Operational scripts, run with ``python -m projecthub.scripts.<name>``."""
