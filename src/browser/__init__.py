"""
Browser management modules
v1.0 - BrowserSession (launch or attach over CDP)
"""

from .browser_session import BrowserSession

__all__ = ['BrowserSession']
