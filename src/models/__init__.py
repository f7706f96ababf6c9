"""
Data models for the dataproxy page protocol
"""

from .page import Column, Header, PageData, PageMeta, PageRequest, ResultSet

__all__ = ["Column", "Header", "PageData", "PageMeta", "PageRequest", "ResultSet"]
