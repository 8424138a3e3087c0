# data.gov crawlers - Crawlers for www.data.gov / catalog.data.gov
# v1.0 - Initial creation

from src.crawlers.datagov.dataset_search import (
    DatasetSearchCrawler,
    check_page_number,
    click_on_page,
    extract_records,
)
from src.crawlers.datagov.models import DatasetRecord

__all__ = [
    'DatasetSearchCrawler',
    'DatasetRecord',
    'check_page_number',
    'click_on_page',
    'extract_records',
]
