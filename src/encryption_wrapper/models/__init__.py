"""
Configuration models for the encryption wrapper.
"""

from .proxy_options import ProxyOptions

__all__ = ["ProxyOptions"]
