"""
Base Crawler - Abstract base class for all crawlers
v1.1 - Crawlers return their records and let errors propagate to the entry point

This provides common functionality and enforces a consistent interface
for all crawler implementations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, List
from playwright.async_api import Page

from src.config import NAVIGATION_TIMEOUT

logger = logging.getLogger(__name__)


class BaseCrawler(ABC):
    """
    Abstract base class for all crawlers.

    Provides common utilities for:
    - Waiting for a click-triggered navigation to reach network idle
    """

    def __init__(self, page: Page, navigation_timeout: int = NAVIGATION_TIMEOUT):
        """
        Initialize base crawler.

        Args:
            page: Playwright page object, already showing the first results page
            navigation_timeout: Max wait for network idle after navigation (ms)
        """
        self.page = page
        self.navigation_timeout = navigation_timeout

    @abstractmethod
    async def crawl(self) -> List[Any]:
        """
        Execute the crawl.

        Returns:
            Records extracted across all pages, in page order
        """
        pass

    async def navigate(self, action: Callable[[], Awaitable[Any]]) -> Any:
        """
        Run an action that triggers navigation and wait for network idle.

        The wait is armed before the action runs so a fast navigation is
        not missed.

        Args:
            action: Coroutine function that clicks/presses something

        Returns:
            Whatever the action returned

        Raises:
            playwright.async_api.TimeoutError: If no navigation settles in time
        """
        async with self.page.expect_navigation(wait_until='networkidle', timeout=self.navigation_timeout):
            result = await action()
        return result
