"""Client-side URL builder for an imgproxy-compatible image proxy."""

from imgproxy_url.errors import FormatError
from imgproxy_url.services.options import Options
from imgproxy_url.services.url_builder import UrlBuilder

__all__ = ["FormatError", "Options", "UrlBuilder"]
