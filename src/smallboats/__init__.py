"""
Daily, weekly, monthly and yearly tables of small boat arrivals in the English Channel
"""

import importlib.metadata

__version__ = importlib.metadata.version("smallboats")
