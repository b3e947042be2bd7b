from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from imgproxy_url.config import get_url_builder
from imgproxy_url.errors import FormatError
from imgproxy_url.schemas import BuildUrlRequest, BuildUrlResponse, ProxyStatus
from imgproxy_url.services.options import Options
from imgproxy_url.services.url_builder import UrlBuilder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/imgproxy", tags=["imgproxy"])


def resolve_url_builder() -> UrlBuilder:
    try:
        return get_url_builder()
    except FormatError as exc:
        logger.warning("imgproxy signing misconfigured: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="signing misconfigured",
        ) from exc


@router.post("/url", response_model=BuildUrlResponse)
def build_url(
    payload: BuildUrlRequest, builder: UrlBuilder = Depends(resolve_url_builder)
) -> BuildUrlResponse:
    try:
        options = Options(payload.options)
    except TypeError as exc:
        raise HTTPException(
            status_code=422,
            detail=f"invalid option arguments: {exc}",
        ) from exc
    url = builder.build_url(payload.source_url, options, payload.extension)
    return BuildUrlResponse(url=url, signed=builder.signed)


@router.get("/health", response_model=ProxyStatus)
def proxy_status(builder: UrlBuilder = Depends(resolve_url_builder)) -> ProxyStatus:
    return ProxyStatus(signed=builder.signed, encode=builder.encode)


__all__ = ["resolve_url_builder", "router"]
