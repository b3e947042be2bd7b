from __future__ import annotations

import base64
import hashlib
import hmac
import re

import pytest

from imgproxy_url.errors import FormatError
from imgproxy_url.services.options import Options
from imgproxy_url.services.url_builder import (
    UNSAFE_SIGNATURE,
    UrlBuilder,
    encode_source_url,
    escape_plain_source_url,
)

from .conftest import BASE_URL, KEY, SALT, SOURCE_URL


def _expected_signature(key: str, salt: str, path: str) -> str:
    digest = hmac.new(
        bytes.fromhex(key), bytes.fromhex(salt) + path.encode(), hashlib.sha256
    ).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()


def _encoded(url: str) -> str:
    return base64.urlsafe_b64encode(url.encode()).rstrip(b"=").decode()


def _plain() -> UrlBuilder:
    return UrlBuilder(BASE_URL, encode=False)


def _size_options() -> Options:
    return Options({"width": 300, "height": 400})


def test_plain_url_without_credentials() -> None:
    options = Options({"width": 300, "height": 400, "resizingType": "fill", "gravity": "sm"})
    url = _plain().build_url(SOURCE_URL, options)
    assert url == (
        "https://imgproxy.example.com/unsafe/"
        "width:300/height:400/resizing_type:fill/gravity:sm/"
        "plain/https://example.com/images/image.jpg"
    )


def test_base_url_trailing_slash_is_stripped() -> None:
    builder = UrlBuilder("https://p.example.com/", encode=False)
    url = builder.build_url("https://e.com/i.jpg", Options({"width": 300}))
    assert url == "https://p.example.com/unsafe/width:300/plain/https://e.com/i.jpg"


@pytest.mark.parametrize("options", [None, Options()])
def test_plain_url_without_options(options) -> None:
    url = _plain().build_url(SOURCE_URL, options)
    assert url == f"{BASE_URL}/unsafe/plain/{SOURCE_URL}"


def test_plain_url_with_extension() -> None:
    url = _plain().build_url(SOURCE_URL, _size_options(), "png")
    assert url == f"{BASE_URL}/unsafe/width:300/height:400/plain/{SOURCE_URL}@png"


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        (
            "https://example.com/images/image.jpg?width=100",
            "https://example.com/images/image.jpg%3Fwidth=100",
        ),
        (
            "https://example.com/images/user@example.jpg",
            "https://example.com/images/user%40example.jpg",
        ),
        (
            "https://example.com/a b/c%20d#frag.jpg?x=1&y=@",
            "https://example.com/a b/c%20d#frag.jpg%3Fx=1&y=%40",
        ),
        ("s3://bucket/key.jpg", "s3://bucket/key.jpg"),
    ],
)
def test_plain_mode_escapes_only_query_and_at(source, expected) -> None:
    assert escape_plain_source_url(source) == expected
    url = _plain().build_url(source, Options({"width": 300}))
    assert url == f"{BASE_URL}/unsafe/width:300/plain/{expected}"


def test_base64_mode_is_default() -> None:
    builder = UrlBuilder(BASE_URL)
    url = builder.build_url(SOURCE_URL, _size_options())
    assert url == f"{BASE_URL}/unsafe/width:300/height:400/{_encoded(SOURCE_URL)}"


def test_base64_mode_with_extension() -> None:
    url = UrlBuilder(BASE_URL, encode=True).build_url(SOURCE_URL, _size_options(), "png")
    assert url == f"{BASE_URL}/unsafe/width:300/height:400/{_encoded(SOURCE_URL)}.png"
    assert "=" not in url.rsplit("/", 1)[-1]


@pytest.mark.parametrize(
    "source",
    [
        "https://example.com/images/image.jpg?width=100",
        "https://example.com/images/user@example.jpg",
        "https://example.com/??>>",
        "a",
    ],
)
def test_base64_mode_uses_url_safe_alphabet_without_padding(source) -> None:
    encoded = encode_source_url(source)
    assert re.fullmatch(r"[A-Za-z0-9_-]+", encoded)
    assert encoded == _encoded(source)
    url = UrlBuilder(BASE_URL).build_url(source, Options({"width": 300}))
    assert url == f"{BASE_URL}/unsafe/width:300/{encoded}"


@pytest.mark.parametrize("encode", [False, True])
def test_signed_url_matches_independent_hmac(encode) -> None:
    builder = UrlBuilder(BASE_URL, KEY, SALT, encode=encode)
    url = builder.build_url(SOURCE_URL, _size_options(), "png")

    if encode:
        path = f"/width:300/height:400/{_encoded(SOURCE_URL)}.png"
    else:
        path = f"/width:300/height:400/plain/{SOURCE_URL}@png"
    signature = _expected_signature(KEY, SALT, path)

    assert builder.signed
    assert url == f"{BASE_URL}/{signature}{path}"
    assert "/unsafe/" not in url
    assert re.fullmatch(r"[A-Za-z0-9_-]{43}", signature)


def test_signed_complex_url() -> None:
    options = (
        Options()
        .set_preset("sharp")
        .set_resize("fill", 300, 400, False)
        .set_gravity("sm")
        .set_watermark(0.5, "ce", 10, 10, 0.2)
        .set_quality(80)
        .set_format("png")
    )
    builder = UrlBuilder(BASE_URL, KEY, SALT, encode=False)
    path = (
        "/preset:sharp/resize:fill:300:400:0/gravity:sm/"
        f"watermark:0.5:ce:10:10:0.2/quality:80/format:png/plain/{SOURCE_URL}"
    )
    assert builder.build_path(SOURCE_URL, options) == path
    assert builder.build_url(SOURCE_URL, options) == (
        f"{BASE_URL}/{_expected_signature(KEY, SALT, path)}{path}"
    )


def test_signature_matches_published_reference_vector() -> None:
    builder = UrlBuilder(
        "http://imgproxy.example.com",
        key="736563726574",
        salt="68656C6C6F",
    )
    path = "/rs:fill:300:400:0/g:sm/aHR0cDovL2V4YW1w/bGUuY29tL2ltYWdl/cy9jdXJpb3NpdHku/anBn.png"
    assert builder.sign_path(path) == "oKfUtW34Dvo2BGQehJFR4Nr0_rIjOtdtzJ3QFsUcXH8"


def test_build_is_deterministic() -> None:
    builder = UrlBuilder(BASE_URL, KEY, SALT)
    options = _size_options()
    assert builder.build_url(SOURCE_URL, options) == builder.build_url(SOURCE_URL, options)


@pytest.mark.parametrize(
    ("key", "salt"),
    [(KEY, None), (None, SALT), (KEY, ""), ("", SALT), (None, None)],
)
def test_missing_key_or_salt_is_unsafe(key, salt) -> None:
    builder = UrlBuilder(BASE_URL, key, salt, encode=False)
    assert not builder.signed
    assert builder.sign_path("/width:1/plain/x") == UNSAFE_SIGNATURE
    assert builder.build_url(SOURCE_URL).startswith(f"{BASE_URL}/unsafe/plain/")


@pytest.mark.parametrize(
    ("key", "salt"),
    [
        ("zz", SALT),
        (KEY, "not-hex"),
        ("abc", SALT),
        (KEY, "0g"),
        ("01 23", SALT),
        (KEY, "ab\t cd"),
    ],
)
def test_malformed_hex_fails_at_construction(key, salt) -> None:
    with pytest.raises(FormatError):
        UrlBuilder(BASE_URL, key, salt)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="must be hex"):
        UrlBuilder(BASE_URL, "xyz", SALT)


def test_fixed_signature_overrides_credentials() -> None:
    builder = UrlBuilder(BASE_URL, KEY, SALT, encode=False, signature="custom-signature")
    url = builder.build_url(SOURCE_URL, Options())
    assert url == f"{BASE_URL}/custom-signature/plain/{SOURCE_URL}"


def test_build_url_does_not_mutate_options() -> None:
    options = _size_options()
    UrlBuilder(BASE_URL, KEY, SALT).build_url(SOURCE_URL, options, "webp")
    assert options.to_string() == "width:300/height:400"


def test_repr_hides_credentials() -> None:
    text = repr(UrlBuilder(BASE_URL, KEY, SALT))
    assert KEY not in text and SALT not in text
    assert "signed=True" in text


def test_surrounding_whitespace_in_hex_is_tolerated() -> None:
    builder = UrlBuilder(BASE_URL, f" {KEY}\n", SALT)
    assert builder.sign_path("/x") == UrlBuilder(BASE_URL, KEY, SALT).sign_path("/x")


def test_fixed_signature_counts_as_signed() -> None:
    builder = UrlBuilder("https://p", signature="fixed")
    assert builder.signed
    assert builder.build_url("x") == "https://p/fixed/eA"
