# Crawlers module - Data extraction layer
# v1.0 - Initial creation
#
# Structure:
# - base_crawler.py: Abstract base class for all crawlers
# - datagov/: Crawlers for data.gov search results

from src.crawlers.base_crawler import BaseCrawler
from src.crawlers.datagov import DatasetSearchCrawler, DatasetRecord

__all__ = ['BaseCrawler', 'DatasetSearchCrawler', 'DatasetRecord']
