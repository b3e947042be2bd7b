from .options import Options, format_value, supported_options
from .url_builder import UrlBuilder

__all__ = ["Options", "UrlBuilder", "format_value", "supported_options"]
