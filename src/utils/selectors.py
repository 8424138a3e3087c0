"""
DOM selectors for the data.gov search pages

These are the only coupling to the site's markup. A markup change on the
site silently breaks extraction (empty fields), it does not raise.
"""

# Home page
SEARCH = {
    "search_input": "#search-header",
}

# Results page
PAGINATION = {
    # Anchors whose visible text is a page number
    "page_links": "div.pagination a",
    # First list-item anchor containing the page number
    "page_link_xpath": "xpath=//li/a[contains(., '{page_number}')]",
}

DATASET = {
    "container": "div.dataset-content",
}

# Child positions inside a div.dataset-content container
DATASET_LAYOUT = {
    "organization": 0,   # children[0].children[0]
    "dataset_name": 1,   # children[1].children[0]
    "resources": 3,      # children[3].children[*]
}
