# data.gov Site - Website locator for www.data.gov
# v1.0 - Initial creation
#
# Handles:
# - Opening the home page
# - Typing a query into the header search box and submitting it

import logging
from playwright.async_api import Page

from src.config import DATA_GOV_URL, NAVIGATION_TIMEOUT, TYPE_DELAY
from src.sites.base_site import BaseSite
from src.utils.selectors import SEARCH

logger = logging.getLogger(__name__)


class DataGovSite(BaseSite):
    """
    Website locator for the data.gov open-data portal.

    The header search box submits to the catalog's dataset search, which
    renders the first results page.
    """

    SITE_NAME = "data.gov"
    BASE_URL = DATA_GOV_URL

    def __init__(self, page: Page, type_delay: int = TYPE_DELAY):
        super().__init__(page)
        self.type_delay = type_delay

    async def search(self, query: str) -> None:
        """
        Type the query like a user would and submit with Enter.

        Args:
            query: Search text

        Raises:
            playwright.async_api.Error: If the search box is missing or the
                results page never reaches network idle
        """
        search_input = SEARCH["search_input"]

        logger.info(f"Searching for '{query}'")
        await self.page.click(search_input)
        await self.page.type(search_input, query, delay=self.type_delay)

        async with self.page.expect_navigation(wait_until='networkidle', timeout=NAVIGATION_TIMEOUT):
            await self.page.keyboard.press('Enter')

        logger.info(f"Search results loaded: {self.page.url}")
