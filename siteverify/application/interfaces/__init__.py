"""Application interfaces (ports) implemented by infrastructure."""
from .site_verify_client import ISiteVerifyClient, SiteVerifyConnectionError

__all__ = ["ISiteVerifyClient", "SiteVerifyConnectionError"]
