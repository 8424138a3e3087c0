# Base Site - Abstract base class for all website locators
# v1.1 - Navigation waits raise on timeout instead of returning False
#
# Provides common functionality for:
# - Opening the site's landing page
# - Waiting for the network to go idle after navigation

import logging
from abc import ABC, abstractmethod
from playwright.async_api import Page

from src.config import NAVIGATION_TIMEOUT

logger = logging.getLogger(__name__)


class BaseSite(ABC):
    """
    Abstract base class for website locators.

    Each site implementation handles:
    1. Opening its landing page
    2. Running a search so the page shows the first results page
    """

    # Subclasses should override these
    SITE_NAME: str = "BaseSite"
    BASE_URL: str = ""

    def __init__(self, page: Page):
        """
        Initialize site with a Playwright page.

        Args:
            page: Playwright page object owned by the browser session
        """
        self.page = page

    @abstractmethod
    async def search(self, query: str) -> None:
        """
        Run a search and wait until the results page has settled.

        Args:
            query: Search text
        """
        pass

    async def open(self) -> None:
        """
        Navigate to BASE_URL and wait for network idle.

        Raises:
            playwright.async_api.Error: If the page fails to load or never goes idle
        """
        logger.info(f"Opening {self.SITE_NAME}: {self.BASE_URL}")
        await self.page.goto(self.BASE_URL, wait_until='networkidle', timeout=NAVIGATION_TIMEOUT)
        logger.info(f"Loaded: {self.page.url}")

    def __repr__(self) -> str:
        return f"{self.SITE_NAME}(url={self.page.url})"
