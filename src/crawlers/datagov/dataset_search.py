# Dataset Search Crawler - Extracts dataset results from data.gov search pages
# v1.0 - Initial creation
#
# This crawler focuses ONLY on:
# - Detecting whether a results page number is reachable
# - Clicking through the pagination bar
# - Extracting organization / dataset name / resource formats per result
#
# The search itself is run by DataGovSite

import logging
from typing import List, Optional

from playwright.async_api import Page

from src.crawlers.base_crawler import BaseCrawler
from src.crawlers.datagov.models import DatasetRecord
from src.utils.selectors import DATASET, DATASET_LAYOUT, PAGINATION

logger = logging.getLogger(__name__)


# Runs in the page. For each container returns the innerText of every
# grandchild, grouped by child: [[[text, ...], ...], ...]
DATASET_SNAPSHOT_JS = '''(selector) => {
    const snapshot = [];
    for (const node of document.querySelectorAll(selector)) {
        const children = [];
        for (const child of node.children) {
            children.push(Array.from(child.children, grandchild => grandchild.innerText));
        }
        snapshot.push(children);
    }
    return snapshot;
}'''

PAGE_LINK_TEXTS_JS = 'els => els.map(el => el.innerText)'


async def check_page_number(page: Page, page_number: int) -> bool:
    """
    Check whether page_number is shown in the pagination bar.

    Args:
        page: Playwright page showing a results page
        page_number: Page number to look for

    Returns:
        bool: True if a pagination anchor's text equals the number exactly
    """
    texts = await page.eval_on_selector_all(PAGINATION["page_links"], PAGE_LINK_TEXTS_JS)
    return str(page_number) in texts


async def click_on_page(page: Page, page_number: int) -> bool:
    """
    Click the first pagination anchor whose text contains page_number.

    Matching is by containment, unlike check_page_number. A missing anchor
    is a no-op; callers check existence first.

    Args:
        page: Playwright page showing a results page
        page_number: Page number to open

    Returns:
        bool: True if an anchor was clicked
    """
    anchor = await page.query_selector(PAGINATION["page_link_xpath"].format(page_number=page_number))
    if not anchor:
        logger.debug(f"No pagination link for page {page_number}")
        return False

    await anchor.click()
    return True


def _child_texts(children: List[Optional[List[Optional[str]]]], index: int) -> List[Optional[str]]:
    if index < len(children) and children[index] is not None:
        return children[index]
    return []


def parse_dataset_node(children: List[Optional[List[Optional[str]]]]) -> DatasetRecord:
    """
    Build a record from one container snapshot.

    Missing positions give None (or an empty format list). Formats are read
    in order and stop at the first missing entry.
    """
    organization_texts = _child_texts(children, DATASET_LAYOUT["organization"])
    name_texts = _child_texts(children, DATASET_LAYOUT["dataset_name"])

    data_formats = []
    for text in _child_texts(children, DATASET_LAYOUT["resources"]):
        if text is None:
            break
        data_formats.append(text.strip())

    return DatasetRecord(
        organization=organization_texts[0] if organization_texts else None,
        dataset_name=name_texts[0] if name_texts else None,
        data_formats=data_formats,
    )


async def extract_records(page: Page) -> List[DatasetRecord]:
    """
    Extract one record per dataset-content container, in document order.

    Args:
        page: Playwright page showing a results page

    Returns:
        List of DatasetRecord (empty if the page has no results)
    """
    snapshot = await page.evaluate(DATASET_SNAPSHOT_JS, DATASET["container"])
    return [parse_dataset_node(children) for children in snapshot or []]


class DatasetSearchCrawler(BaseCrawler):
    """
    Crawler for data.gov dataset search results.

    Expects to be called AFTER the search has been submitted and the first
    results page has loaded. Walks page 1, 2, ... for as long as the next
    number is present in the pagination bar; the total page count is never
    read up front.

    Data extracted per result:
    - organization: Publishing organization
    - dataset_name: Dataset title
    - data_formats: Resource format labels (e.g. CSV, JSON), in display order
    """

    def __init__(self, page: Page, **kwargs):
        super().__init__(page, **kwargs)
        self.pages_scraped = 0

    async def crawl(self) -> List[DatasetRecord]:
        """
        Execute the crawl.

        Workflow per page n (starting at 1):
        1. Stop if n is not in the pagination bar
        2. Click page n and wait for network idle
        3. Extract the page's records and append them

        Returns:
            All records, page 1 first

        Raises:
            playwright.async_api.Error: On any navigation or evaluation failure;
                records gathered so far are discarded
        """
        results: List[DatasetRecord] = []
        page_number = 1

        while await check_page_number(self.page, page_number):
            logger.info(f"Opening results page {page_number}")
            await self.navigate(lambda: click_on_page(self.page, page_number))

            records = await extract_records(self.page)
            logger.info(f"Extracted {len(records)} records from page {page_number}")

            results.extend(records)
            page_number += 1

        self.pages_scraped = page_number - 1
        logger.info(f"Pagination ended at page {page_number}: {self.pages_scraped} pages, {len(results)} records")
        return results
