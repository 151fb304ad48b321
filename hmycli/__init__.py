"""Harmony blockchain helpers: addresses, chain ids, fixed-point amounts, staking input checks and an offline CLI."""

__version__ = "0.1.0"