"""
Browser Session Manager - Playwright browser lifecycle
v1.0 - Launches Chromium, or attaches to a running Chrome over CDP when CDP_URL is set

This module provides a simple wrapper around Playwright so the crawler only
ever sees a single Page. The session owns the browser; close() must run on
every exit path.
"""

import logging
from typing import Optional
from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright

from src.config import CDP_URL, DEFAULT_TIMEOUT, HEADLESS, NAVIGATION_TIMEOUT

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    Owns one Playwright browser and the page the crawler drives.

    With no cdp_url a fresh Chromium is launched and closed again by close().
    With a cdp_url the session attaches to an existing Chrome and close() only
    disconnects.
    """

    def __init__(self, headless: bool = HEADLESS, cdp_url: str = CDP_URL):
        """
        Initialize browser session.

        Args:
            headless: Launch Chromium without a visible window
            cdp_url: CDP endpoint of an already-running Chrome (empty to launch)
        """
        self.headless = headless
        self.cdp_url = cdp_url
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    async def launch(self) -> Page:
        """
        Start Playwright, open the browser and a new page.

        Returns:
            Page: The page the crawler will drive

        Raises:
            RuntimeError: If the browser cannot be started or reached
        """
        try:
            self.playwright = await async_playwright().start()

            if self.cdp_url:
                logger.info(f"Connecting to Chrome via CDP: {self.cdp_url}")
                self.browser = await self.playwright.chromium.connect_over_cdp(self.cdp_url)
            else:
                logger.info(f"Launching Chromium (headless={self.headless})")
                self.browser = await self.playwright.chromium.launch(headless=self.headless)

            self.context = await self.browser.new_context()
            self.page = await self.context.new_page()
            self.page.set_default_timeout(DEFAULT_TIMEOUT)
            self.page.set_default_navigation_timeout(NAVIGATION_TIMEOUT)
            logger.info("Created new page")
            return self.page

        except Exception as e:
            logger.error(f"Failed to start browser: {e}")
            raise RuntimeError(f"Browser launch failed: {e}") from e

    async def close(self) -> None:
        """
        Close the page, the browser and stop Playwright.

        Safe to call after a partial launch. Each step runs even if an
        earlier one failed; cleanup errors are logged, never raised, so they
        cannot hide the error that ended the crawl.
        """
        if self.context:
            try:
                await self.context.close()
                logger.info("Closed browser context")
            except Exception as e:
                logger.error(f"Error closing browser context: {e}")
            finally:
                self.context = None
                self.page = None

        if self.browser:
            try:
                # Over CDP this disconnects without killing the user's Chrome
                await self.browser.close()
                logger.info("Closed browser")
            except Exception as e:
                logger.error(f"Error closing browser: {e}")
            finally:
                self.browser = None

        if self.playwright:
            try:
                await self.playwright.stop()
                logger.info("Stopped Playwright")
            except Exception as e:
                logger.error(f"Error stopping Playwright: {e}")
            finally:
                self.playwright = None

    def __repr__(self) -> str:
        """String representation of browser session."""
        status = "open" if self.page else "closed"
        target = self.cdp_url or "chromium"
        return f"BrowserSession(target={target}, status={status})"
