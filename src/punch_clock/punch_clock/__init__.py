"""Punch Clock package.

A personal time-tracking journal organized by feature modules (journal,
punch, report) with a thin click controller layer over service and
repository layers.
"""
from __future__ import annotations

__version__ = "0.1.0"
