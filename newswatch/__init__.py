"""
newswatch - analytical core for headline monitoring.
"""

__version__ = "0.1.0"
