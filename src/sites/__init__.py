# Sites module - Website locator layer
# v1.0 - Initial creation
#
# This module provides site-specific logic for reaching the page the
# crawlers extract from.

from src.sites.base_site import BaseSite
from src.sites.data_gov import DataGovSite

__all__ = ['BaseSite', 'DataGovSite']
