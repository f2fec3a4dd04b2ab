"""
API client layer for the Glo Boards API

HTTP transport shared by every resource service.
"""
from .client import APIClient

__all__ = ['APIClient']
