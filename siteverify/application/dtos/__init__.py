"""Data Transfer Objects - Request contracts"""
from .site_verify_request import SiteVerifyRequest

__all__ = ["SiteVerifyRequest"]
