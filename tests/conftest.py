"""
Shared fakes for crawler tests.

FakePage stands in for a Playwright Page on a tiny data.gov-like site:
results_pages maps page number -> {"links": [...], "datasets": [...]}, where
"links" are the pagination anchor texts and "datasets" the container
snapshots that the in-page script would return.
"""

import copy
import re

import pytest


def dataset_node(organization="USDA", name="Crop Data", formats=("CSV", "JSON")):
    """Snapshot of one div.dataset-content: children -> grandchild texts."""
    return [[organization], [name], ["A dataset description"], list(formats)]


class FakeAnchor:
    def __init__(self, page, text):
        self.page = page
        self.text = text

    async def click(self):
        self.page.clicked.append(self.text)
        if self.text.strip().isdigit():
            self.page.pending = int(self.text)


class FakeNavigation:
    def __init__(self, page, wait_until, timeout):
        self.page = page
        self.wait_until = wait_until
        self.timeout = timeout

    async def __aenter__(self):
        self.page.pending = None
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type:
            return False
        if self.page.pending is None:
            raise TimeoutError("Timeout exceeded while waiting for navigation")
        self.page.current = self.page.pending
        self.page.navigations.append(self.page.pending)
        self.page.wait_policies.append(self.wait_until)
        return False


class FakeKeyboard:
    def __init__(self, page):
        self.page = page

    async def press(self, key):
        self.page.pressed.append(key)
        if key == "Enter" and self.page.typed:
            # Submitting the search lands on results page 1
            self.page.pending = 1


class FakePage:
    def __init__(self, results_pages=None, goto_error=None, extract_error_on=None):
        self.results_pages = results_pages or {}
        self.goto_error = goto_error
        self.extract_error_on = extract_error_on
        self.url = "about:blank"
        self.current = None
        self.pending = None
        self.keyboard = FakeKeyboard(self)

        self.gotos = []
        self.clicked_selectors = []
        self.typed = []
        self.pressed = []
        self.clicked = []
        self.navigations = []
        self.wait_policies = []
        self.link_queries = 0

    def _current(self):
        return self.results_pages.get(self.current, {"links": [], "datasets": []})

    async def goto(self, url, wait_until=None, timeout=None):
        self.gotos.append((url, wait_until))
        if self.goto_error:
            raise self.goto_error
        self.url = url

    async def click(self, selector):
        self.clicked_selectors.append(selector)

    async def type(self, selector, text, delay=None):
        self.typed.append((selector, text, delay))

    def expect_navigation(self, wait_until=None, timeout=None):
        return FakeNavigation(self, wait_until, timeout)

    async def eval_on_selector_all(self, selector, script):
        self.link_queries += 1
        return list(self._current()["links"])

    async def query_selector(self, selector):
        needle = re.search(r"contains\(\., '(.*)'\)", selector).group(1)
        for text in self._current()["links"]:
            if needle in text:
                return FakeAnchor(self, text)
        return None

    async def evaluate(self, script, arg=None):
        if self.extract_error_on is not None and self.current == self.extract_error_on:
            raise RuntimeError(f"Execution context was destroyed on page {self.current}")
        return copy.deepcopy(self._current()["datasets"])


class FakeSession:
    def __init__(self, page, launch_error=None):
        self.page = page
        self.launch_error = launch_error
        self.launch_calls = 0
        self.close_calls = 0

    async def launch(self):
        self.launch_calls += 1
        if self.launch_error:
            raise self.launch_error
        return self.page

    async def close(self):
        self.close_calls += 1


@pytest.fixture
def two_page_site():
    """Two results pages, one dataset each, no page 3 link."""
    return {
        1: {"links": ["1", "2", "Next"], "datasets": [dataset_node("USDA", "Crop Yields", ["CSV"])]},
        2: {"links": ["Prev", "1", "2"], "datasets": [dataset_node("NOAA", "Rainfall", ["JSON", "XML"])]},
    }
