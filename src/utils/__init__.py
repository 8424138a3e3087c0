"""
Utility modules for the data.gov dataset search crawler
"""

from .selectors import SEARCH, PAGINATION, DATASET, DATASET_LAYOUT

__all__ = ['SEARCH', 'PAGINATION', 'DATASET', 'DATASET_LAYOUT']
