"""Assemble and sign image proxy URLs."""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import Optional

from imgproxy_url.services.options import Options
from imgproxy_url.utils.encoding import decode_hex, urlsafe_b64_no_pad

logger = logging.getLogger(__name__)

UNSAFE_SIGNATURE = "unsafe"

__all__ = ["UNSAFE_SIGNATURE", "UrlBuilder", "encode_source_url", "escape_plain_source_url"]


def encode_source_url(source_url: str) -> str:
    """Return ``source_url`` as URL-safe base64 without padding."""

    return urlsafe_b64_no_pad(source_url.encode("utf-8"))


def escape_plain_source_url(source_url: str) -> str:
    """Escape the two characters the proxy treats specially in plain sources.

    ``?`` would start a query string on the proxy URL and ``@`` separates the
    output extension; nothing else is touched.
    """

    return source_url.replace("?", "%3F").replace("@", "%40")


class UrlBuilder:
    """Build processing URLs for a single proxy deployment.

    ``key`` and ``salt`` are hex strings. Both must be present for URLs to be
    signed; otherwise the signature segment is ``unsafe``. ``signature`` pins a
    fixed signature segment and takes precedence over both.
    """

    def __init__(
        self,
        base_url: str,
        key: Optional[str] = None,
        salt: Optional[str] = None,
        encode: bool = True,
        signature: Optional[str] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.encode = encode
        self.signature = signature or None
        self._key = decode_hex(key, name="key") if key else None
        self._salt = decode_hex(salt, name="salt") if salt else None

    @property
    def signed(self) -> bool:
        """``True`` when URLs carry a signature other than ``unsafe``."""

        if self.signature:
            return True
        return self._key is not None and self._salt is not None

    def build_path(
        self,
        source_url: str,
        options: Optional[Options] = None,
        extension: Optional[str] = None,
    ) -> str:
        """Return the part of the URL covered by the signature."""

        if options is None:
            options = Options()
        serialized = options.to_string()
        # An empty option set contributes no segment rather than an empty one.
        path = f"/{serialized}" if serialized else ""

        if self.encode:
            path += f"/{encode_source_url(source_url)}"
            if extension is not None:
                path += f".{extension}"
        else:
            path += f"/plain/{escape_plain_source_url(source_url)}"
            if extension is not None:
                path += f"@{extension}"
        return path

    def sign_path(self, path: str) -> str:
        """Return the signature segment for ``path``."""

        if self.signature:
            return self.signature
        if self._key is None or self._salt is None:
            return UNSAFE_SIGNATURE
        digest = hmac.new(self._key, self._salt + path.encode("utf-8"), hashlib.sha256)
        return urlsafe_b64_no_pad(digest.digest())

    def build_url(
        self,
        source_url: str,
        options: Optional[Options] = None,
        extension: Optional[str] = None,
    ) -> str:
        path = self.build_path(source_url, options, extension)
        logger.debug("built proxy path %s (signed=%s)", path, self.signed)
        return f"{self.base_url}/{self.sign_path(path)}{path}"

    def __repr__(self) -> str:
        return (
            f"UrlBuilder(base_url={self.base_url!r}, encode={self.encode}, "
            f"signed={self.signed})"
        )
