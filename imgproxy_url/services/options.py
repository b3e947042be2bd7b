"""Processing options rendered into the proxy's path grammar.

Each directive is stored as an ordered list of positional arguments and
rendered as ``name:arg1:arg2`` with directives joined by ``/``. Setters return
the same instance so calls can be chained::

    Options().set_width(300).set_height(400).set_gravity("sm")
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, Iterator, List, Mapping, Sequence, Union
from urllib.parse import quote_plus, unquote_plus

from imgproxy_url.utils.encoding import b64decode_text, b64encode_text

logger = logging.getLogger(__name__)

Scalar = Union[bool, int, float, str, None]

OPTION_SEPARATOR = "/"
ARGUMENTS_SEPARATOR = ":"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def format_value(value: Any) -> str:
    """Render a single argument value.

    ``True``/``False`` become ``1``/``0``, ``None`` an empty string. Floats
    with an integral value drop the fractional part.
    """

    if value is True:
        return "1"
    if value is False:
        return "0"
    if value is None:
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    return ""


def normalize_option_name(name: str) -> str:
    """Map ``resizingType``/``ResizingType``/``resizing-type`` to ``resizing_type``."""

    snake = _CAMEL_BOUNDARY.sub(r"_\1", name.strip())
    return snake.replace("-", "_").replace(" ", "_").lower()


def _as_list(value: Any) -> List[Scalar]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class Options:
    """Ordered set of processing directives."""

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._options: Dict[str, List[Scalar]] = {}
        for key, value in (options or {}).items():
            self._apply(key, value)

    def _apply(self, key: str, value: Any) -> None:
        name = normalize_option_name(key)
        setter = _SETTERS.get(name)
        if setter is None:
            logger.debug("ignoring unknown option %s", key)
            return
        if name in _LIST_ARGUMENT_OPTIONS:
            setter(self, value)
        elif isinstance(value, Mapping):
            setter(self, **{normalize_option_name(k): v for k, v in value.items()})
        elif isinstance(value, (list, tuple)):
            setter(self, *value)
        else:
            setter(self, value)

    def _set(self, name: str, *values: Scalar) -> Options:
        args = list(values)
        # Only trailing omissions are dropped; inner ones keep their position.
        while args and args[-1] is None:
            args.pop()
        self._options[name] = args
        return self

    def _first(self, name: str) -> Any:
        values = self._options.get(name)
        if not values:
            return None
        return values[0]

    def _values(self, name: str) -> List[Scalar] | None:
        values = self._options.get(name)
        return list(values) if values is not None else None

    # -- serialization -------------------------------------------------

    def to_string(self) -> str:
        parts: List[str] = []
        for name, values in self._options.items():
            rendered = [format_value(value) for value in values]
            if any(rendered):
                parts.append(name + ARGUMENTS_SEPARATOR + ARGUMENTS_SEPARATOR.join(rendered))
            else:
                parts.append(name)
        return OPTION_SEPARATOR.join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Options({self.to_string()!r})"

    def to_dict(self) -> Dict[str, List[Scalar]]:
        return {name: list(values) for name, values in self._options.items()}

    def copy(self) -> Options:
        clone = Options()
        clone._options = self.to_dict()
        return clone

    def get(self, name: str) -> List[Scalar] | None:
        """Return the raw stored arguments for ``name`` (encoded fields stay encoded)."""

        return self._values(name)

    def unset(self, name: str) -> Options:
        self._options.pop(name, None)
        return self

    def set_custom(self, name: str, *values: Scalar) -> Options:
        """Store a directive the typed setters do not cover."""

        return self._set(name, *values)

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._options))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Options):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # -- resizing ------------------------------------------------------

    def set_resizing_type(self, type: str) -> Options:
        """``fit``, ``fill``, ``fill-down``, ``force`` or ``auto``."""

        return self._set("resizing_type", type)

    def get_resizing_type(self) -> str | None:
        return self._first("resizing_type")

    def set_width(self, width: int) -> Options:
        return self._set("width", width)

    def get_width(self) -> int | None:
        return self._first("width")

    def set_height(self, height: int) -> Options:
        return self._set("height", height)

    def get_height(self) -> int | None:
        return self._first("height")

    def set_min_width(self, width: int) -> Options:
        return self._set("min-width", width)

    def get_min_width(self) -> int | None:
        return self._first("min-width")

    def set_min_height(self, height: int) -> Options:
        return self._set("min-height", height)

    def get_min_height(self) -> int | None:
        return self._first("min-height")

    def set_zoom(self, zoom: float | Sequence[float]) -> Options:
        """Set a single zoom factor for both axes or an ``[x, y]`` pair."""

        return self._set("zoom", *_as_list(zoom))

    def get_zoom(self) -> List[Scalar] | None:
        return self._values("zoom")

    def set_dpr(self, dpr: float) -> Options:
        return self._set("dpr", dpr)

    def get_dpr(self) -> float | None:
        return self._first("dpr")

    def set_enlarge(self, enlarge: bool) -> Options:
        return self._set("enlarge", enlarge)

    def get_enlarge(self) -> bool | None:
        return self._first("enlarge")

    def set_extend(self, extend: bool, gravity: str | None = None) -> Options:
        return self._set("extend", extend, gravity)

    def get_extend(self) -> List[Scalar] | None:
        return self._values("extend")

    def set_extend_aspect_ratio(
        self, extend: bool, gravity: str | None = None
    ) -> Options:
        return self._set("extend_aspect_ratio", extend, gravity)

    def get_extend_aspect_ratio(self) -> List[Scalar] | None:
        return self._values("extend_aspect_ratio")

    def set_gravity(
        self, type: str, x_offset: float | None = None, y_offset: float | None = None
    ) -> Options:
        return self._set("gravity", type, x_offset, y_offset)

    def get_gravity(self) -> List[Scalar] | None:
        return self._values("gravity")

    def set_crop(
        self, width: int, height: int, x: int | None = None, y: int | None = None
    ) -> Options:
        return self._set("crop", width, height, x, y)

    def get_crop(self) -> List[Scalar] | None:
        return self._values("crop")

    def set_padding(
        self,
        top: int,
        right: int | None = None,
        bottom: int | None = None,
        left: int | None = None,
    ) -> Options:
        return self._set("padding", top, right, bottom, left)

    def get_padding(self) -> List[Scalar] | None:
        return self._values("padding")

    def set_trim(
        self,
        threshold: float,
        color: str | None = None,
        equal_hor: bool | None = None,
        equal_ver: bool | None = None,
    ) -> Options:
        return self._set("trim", threshold, color, equal_hor, equal_ver)

    def get_trim(self) -> List[Scalar] | None:
        return self._values("trim")

    def set_auto_rotate(self, auto_rotate: bool) -> Options:
        return self._set("auto_rotate", auto_rotate)

    def get_auto_rotate(self) -> bool | None:
        return self._first("auto_rotate")

    def set_rotate(self, angle: int) -> Options:
        return self._set("rotate", angle)

    def get_rotate(self) -> int | None:
        return self._first("rotate")

    def set_background(self, color: str) -> Options:
        """Hex color (``ffffff``) or ``r:g:b`` triple."""

        return self._set("background", color)

    def get_background(self) -> str | None:
        return self._first("background")

    def set_blur(self, sigma: float) -> Options:
        return self._set("blur", sigma)

    def get_blur(self) -> float | None:
        return self._first("blur")

    def set_sharpen(self, sigma: float) -> Options:
        return self._set("sharpen", sigma)

    def get_sharpen(self) -> float | None:
        return self._first("sharpen")

    def set_pixelate(self, size: int) -> Options:
        return self._set("pixelate", size)

    def get_pixelate(self) -> int | None:
        return self._first("pixelate")

    def set_watermark(
        self,
        opacity: float,
        position: str | None = None,
        x_offset: float | None = None,
        y_offset: float | None = None,
        scale: float | None = None,
    ) -> Options:
        return self._set("watermark", opacity, position, x_offset, y_offset, scale)

    def get_watermark(self) -> List[Scalar] | None:
        return self._values("watermark")

    # -- metadata and output -------------------------------------------

    def set_strip_metadata(self, strip: bool) -> Options:
        return self._set("strip_metadata", strip)

    def get_strip_metadata(self) -> bool | None:
        return self._first("strip_metadata")

    def set_keep_copyright(self, keep: bool) -> Options:
        return self._set("keep_copyright", keep)

    def get_keep_copyright(self) -> bool | None:
        return self._first("keep_copyright")

    def set_strip_color_profile(self, strip: bool) -> Options:
        return self._set("strip_color_profile", strip)

    def get_strip_color_profile(self) -> bool | None:
        return self._first("strip_color_profile")

    def set_quality(self, quality: int) -> Options:
        return self._set("quality", quality)

    def get_quality(self) -> int | None:
        return self._first("quality")

    def set_format_quality(self, format: str, quality: int) -> Options:
        return self._set("format_quality", format, quality)

    def get_format_quality(self) -> List[Scalar] | None:
        return self._values("format_quality")

    def set_max_bytes(self, max_bytes: int) -> Options:
        return self._set("max_bytes", max_bytes)

    def get_max_bytes(self) -> int | None:
        return self._first("max_bytes")

    def set_format(self, format: str) -> Options:
        return self._set("format", format)

    def get_format(self) -> str | None:
        return self._first("format")

    def set_resize(
        self,
        type: str,
        width: int | None = None,
        height: int | None = None,
        enlarge: bool | None = None,
        extend: bool | None = None,
    ) -> Options:
        """Meta-option combining resizing type, size, enlarge and extend."""

        return self._set("resize", type, width, height, enlarge, extend)

    def get_resize(self) -> List[Scalar] | None:
        return self._values("resize")

    def set_size(
        self,
        width: int | None = None,
        height: int | None = None,
        enlarge: bool | None = None,
        extend: bool | None = None,
    ) -> Options:
        return self._set("size", width, height, enlarge, extend)

    def get_size(self) -> List[Scalar] | None:
        return self._values("size")

    def set_resizing_algorithm(self, algorithm: str) -> Options:
        return self._set("resizing_algorithm", algorithm)

    def get_resizing_algorithm(self) -> str | None:
        return self._first("resizing_algorithm")

    def set_enforce_thumbnail(self, enforce: bool) -> Options:
        return self._set("enforce_thumbnail", enforce)

    def get_enforce_thumbnail(self) -> bool | None:
        return self._first("enforce_thumbnail")

    def set_preset(self, presets: str | Sequence[str]) -> Options:
        return self._set("preset", *_as_list(presets))

    def get_preset(self) -> List[Scalar] | None:
        return self._values("preset")

    def set_cache_buster(self, buster: str) -> Options:
        return self._set("cache_buster", buster)

    def get_cache_buster(self) -> str | None:
        return self._first("cache_buster")

    def set_filename(self, filename: str, encode: bool = True) -> Options:
        """Set the ``Content-Disposition`` filename.

        With ``encode`` the name is stored as base64 and flagged ``1``;
        otherwise it is form-urlencoded and flagged ``0``.
        """

        if encode:
            return self._set("filename", b64encode_text(filename), True)
        return self._set("filename", quote_plus(filename), False)

    def get_filename(self) -> str | None:
        values = self._options.get("filename")
        if not values or not isinstance(values[0], str):
            return None
        encoded = values[1] if len(values) > 1 else True
        if encoded:
            return b64decode_text(values[0])
        return unquote_plus(values[0]) or None

    def set_expires(self, seconds: int) -> Options:
        """Unix timestamp after which the proxy answers 404."""

        return self._set("expires", seconds)

    def get_expires(self) -> int | None:
        return self._first("expires")

    def set_skip_processing(self, extensions: str | Sequence[str]) -> Options:
        return self._set("skip_processing", *_as_list(extensions))

    def get_skip_processing(self) -> List[Scalar] | None:
        return self._values("skip_processing")

    def set_raw(self, raw: bool) -> Options:
        return self._set("raw", raw)

    def get_raw(self) -> bool | None:
        return self._first("raw")

    def set_return_attachment(self, attachment: bool) -> Options:
        return self._set("return_attachment", attachment)

    def get_return_attachment(self) -> bool | None:
        return self._first("return_attachment")

    # -- color adjustments and effects ---------------------------------

    def set_background_alpha(self, alpha: float) -> Options:
        return self._set("background_alpha", alpha)

    def get_background_alpha(self) -> float | None:
        return self._first("background_alpha")

    def set_adjust(
        self,
        brightness: float | None = None,
        contrast: float | None = None,
        saturation: float | None = None,
    ) -> Options:
        return self._set("adjust", brightness, contrast, saturation)

    def get_adjust(self) -> List[Scalar] | None:
        return self._values("adjust")

    def set_brightness(self, brightness: float) -> Options:
        return self._set("brightness", brightness)

    def get_brightness(self) -> float | None:
        return self._first("brightness")

    def set_contrast(self, contrast: float) -> Options:
        return self._set("contrast", contrast)

    def get_contrast(self) -> float | None:
        return self._first("contrast")

    def set_saturation(self, saturation: float) -> Options:
        return self._set("saturation", saturation)

    def get_saturation(self) -> float | None:
        return self._first("saturation")

    def set_monochrome(self, intensity: float, color: str | None = None) -> Options:
        return self._set("monochrome", intensity, color)

    def get_monochrome(self) -> List[Scalar] | None:
        return self._values("monochrome")

    def set_duotone(
        self,
        intensity: float,
        color1: str | None = None,
        color2: str | None = None,
    ) -> Options:
        return self._set("duotone", intensity, color1, color2)

    def get_duotone(self) -> List[Scalar] | None:
        return self._values("duotone")

    def set_unsharp_masking(
        self,
        sigma: float,
        amount: float | None = None,
        threshold: float | None = None,
    ) -> Options:
        return self._set("unsharp_masking", sigma, amount, threshold)

    def get_unsharp_masking(self) -> List[Scalar] | None:
        return self._values("unsharp_masking")

    def set_blur_detections(self, type: str, sigma: float | None = None) -> Options:
        return self._set("blur_detections", type, sigma)

    def get_blur_detections(self) -> List[Scalar] | None:
        return self._values("blur_detections")

    def set_draw_detections(
        self,
        type: str,
        color: str | None = None,
        thickness: float | None = None,
    ) -> Options:
        return self._set("draw_detections", type, color, thickness)

    def get_draw_detections(self) -> List[Scalar] | None:
        return self._values("draw_detections")

    def set_objects_position(
        self,
        type: str,
        expand: bool | None = None,
        gravity: float | None = None,
        no_overlap: bool | None = None,
    ) -> Options:
        return self._set("objects_position", type, expand, gravity, no_overlap)

    def get_objects_position(self) -> List[Scalar] | None:
        return self._values("objects_position")

    def set_colorize(
        self,
        opacity: float,
        color: str | None = None,
        keep_alpha: bool | None = None,
    ) -> Options:
        return self._set("colorize", opacity, color, keep_alpha)

    def get_colorize(self) -> List[Scalar] | None:
        return self._values("colorize")

    def set_gradient(
        self,
        opacity: float,
        color: str | None = None,
        direction: str | None = None,
        start: float | None = None,
        stop: float | None = None,
    ) -> Options:
        return self._set("gradient", opacity, color, direction, start, stop)

    def get_gradient(self) -> List[Scalar] | None:
        return self._values("gradient")

    # -- watermarks ----------------------------------------------------

    def set_watermark_url(self, url: str) -> Options:
        return self._set("watermark_url", b64encode_text(url))

    def get_watermark_url(self) -> str | None:
        return b64decode_text(self._first("watermark_url"))

    def set_watermark_text(
        self,
        text: str,
        font: str | None = None,
        font_size: float | None = None,
        color: str | None = None,
        wrap: bool | None = None,
    ) -> Options:
        return self._set(
            "watermark_text", b64encode_text(text), font, font_size, color, wrap
        )

    def get_watermark_text(self) -> List[Scalar] | None:
        """Return the stored arguments with the text decoded back from base64."""

        values = self._values("watermark_text")
        if values:
            values[0] = b64decode_text(values[0])
        return values

    def set_watermark_size(self, width: int, height: int) -> Options:
        return self._set("watermark_size", width, height)

    def get_watermark_size(self) -> List[Scalar] | None:
        return self._values("watermark_size")

    def set_watermark_rotate(self, angle: float) -> Options:
        return self._set("watermark_rotate", angle)

    def get_watermark_rotate(self) -> float | None:
        return self._first("watermark_rotate")

    def set_watermark_shadow(
        self,
        opacity: float,
        sigma: float | None = None,
        x_offset: int | None = None,
        y_offset: int | None = None,
    ) -> Options:
        return self._set("watermark_shadow", opacity, sigma, x_offset, y_offset)

    def get_watermark_shadow(self) -> List[Scalar] | None:
        return self._values("watermark_shadow")

    def set_style(self, style: str) -> Options:
        """CSS applied to SVG sources."""

        return self._set("style", b64encode_text(style))

    def get_style(self) -> str | None:
        return b64decode_text(self._first("style"))

    # -- format specific -----------------------------------------------

    def set_dpi(self, dpi: int) -> Options:
        return self._set("dpi", dpi)

    def get_dpi(self) -> int | None:
        return self._first("dpi")

    def set_jpeg_options(
        self,
        progressive: bool | None = None,
        no_subsample: bool | None = None,
        trellis_quant: bool | None = None,
        overshoot_deringing: bool | None = None,
        optimize_scans: bool | None = None,
        quant_table: int | None = None,
    ) -> Options:
        return self._set(
            "jpeg_options",
            progressive,
            no_subsample,
            trellis_quant,
            overshoot_deringing,
            optimize_scans,
            quant_table,
        )

    def get_jpeg_options(self) -> List[Scalar] | None:
        return self._values("jpeg_options")

    def set_png_options(
        self,
        interlaced: bool | None = None,
        quantize: bool | None = None,
        quantize_colors: int | None = None,
    ) -> Options:
        return self._set("png_options", interlaced, quantize, quantize_colors)

    def get_png_options(self) -> List[Scalar] | None:
        return self._values("png_options")

    def set_webp_options(
        self, compression: str | None = None, smart_subsample: bool | None = None
    ) -> Options:
        return self._set("webp_options", compression, smart_subsample)

    def get_webp_options(self) -> List[Scalar] | None:
        return self._values("webp_options")

    def set_autoquality(
        self,
        method: str,
        target: str | None = None,
        min_quality: int | None = None,
        max_quality: int | None = None,
        allowed_error: float | None = None,
    ) -> Options:
        return self._set(
            "autoquality", method, target, min_quality, max_quality, allowed_error
        )

    def get_autoquality(self) -> List[Scalar] | None:
        return self._values("autoquality")

    # -- pages, animation and video ------------------------------------

    def set_page(self, page: int) -> Options:
        return self._set("page", page)

    def get_page(self) -> int | None:
        return self._first("page")

    def set_pages(self, pages: int) -> Options:
        return self._set("pages", pages)

    def get_pages(self) -> int | None:
        return self._first("pages")

    def set_disable_animation(self, disable: bool) -> Options:
        return self._set("disable_animation", disable)

    def get_disable_animation(self) -> bool | None:
        return self._first("disable_animation")

    def set_video_thumbnail_second(self, second: float) -> Options:
        return self._set("video_thumbnail_second", second)

    def get_video_thumbnail_second(self) -> float | None:
        return self._first("video_thumbnail_second")

    def set_video_thumbnail_keyframes(self, keyframes: bool) -> Options:
        return self._set("video_thumbnail_keyframes", keyframes)

    def get_video_thumbnail_keyframes(self) -> bool | None:
        return self._first("video_thumbnail_keyframes")

    def set_video_thumbnail_tile(
        self,
        step: float,
        columns: int | None = None,
        rows: int | None = None,
        tile_width: int | None = None,
        tile_height: int | None = None,
        extend_tile: bool | None = None,
        trim: bool | None = None,
        fill: bool | None = None,
        focus_x: float | None = None,
        focus_y: float | None = None,
    ) -> Options:
        return self._set(
            "video_thumbnail_tile",
            step,
            columns,
            rows,
            tile_width,
            tile_height,
            extend_tile,
            trim,
            fill,
            focus_x,
            focus_y,
        )

    def get_video_thumbnail_tile(self) -> List[Scalar] | None:
        return self._values("video_thumbnail_tile")

    def set_video_thumbnail_animation(
        self,
        step: float,
        delay: int | None = None,
        frames: int | None = None,
        frame_width: int | None = None,
        frame_height: int | None = None,
        extend_frame: bool | None = None,
        trim: bool | None = None,
        fill: bool | None = None,
        focus_x: float | None = None,
        focus_y: float | None = None,
    ) -> Options:
        return self._set(
            "video_thumbnail_animation",
            step,
            delay,
            frames,
            frame_width,
            frame_height,
            extend_frame,
            trim,
            fill,
            focus_x,
            focus_y,
        )

    def get_video_thumbnail_animation(self) -> List[Scalar] | None:
        return self._values("video_thumbnail_animation")

    # -- source handling -----------------------------------------------

    def set_fallback_image_url(self, url: str) -> Options:
        return self._set("fallback_image_url", b64encode_text(url))

    def get_fallback_image_url(self) -> str | None:
        return b64decode_text(self._first("fallback_image_url"))

    def set_hashsum(self, type: str, hashsum: str | None = None) -> Options:
        return self._set("hashsum", type, hashsum)

    def get_hashsum(self) -> List[Scalar] | None:
        return self._values("hashsum")

    def set_max_src_resolution(self, resolution: float) -> Options:
        """Maximum source resolution in megapixels."""

        return self._set("max_src_resolution", resolution)

    def get_max_src_resolution(self) -> float | None:
        return self._first("max_src_resolution")

    def set_max_src_file_size(self, size: int) -> Options:
        return self._set("max_src_file_size", size)

    def get_max_src_file_size(self) -> int | None:
        return self._first("max_src_file_size")

    def set_max_animation_frames(self, frames: int) -> Options:
        return self._set("max_animation_frames", frames)

    def get_max_animation_frames(self) -> int | None:
        return self._first("max_animation_frames")

    def set_max_animation_frame_resolution(self, resolution: float) -> Options:
        return self._set("max_animation_frame_resolution", resolution)

    def get_max_animation_frame_resolution(self) -> float | None:
        return self._first("max_animation_frame_resolution")


_LIST_ARGUMENT_OPTIONS = frozenset({"zoom", "preset", "skip_processing"})

_SETTERS: Dict[str, Callable[..., Options]] = {
    "resizing_type": Options.set_resizing_type,
    "width": Options.set_width,
    "height": Options.set_height,
    "min_width": Options.set_min_width,
    "min_height": Options.set_min_height,
    "zoom": Options.set_zoom,
    "dpr": Options.set_dpr,
    "enlarge": Options.set_enlarge,
    "extend": Options.set_extend,
    "extend_aspect_ratio": Options.set_extend_aspect_ratio,
    "gravity": Options.set_gravity,
    "crop": Options.set_crop,
    "padding": Options.set_padding,
    "trim": Options.set_trim,
    "auto_rotate": Options.set_auto_rotate,
    "rotate": Options.set_rotate,
    "background": Options.set_background,
    "blur": Options.set_blur,
    "sharpen": Options.set_sharpen,
    "pixelate": Options.set_pixelate,
    "watermark": Options.set_watermark,
    "strip_metadata": Options.set_strip_metadata,
    "keep_copyright": Options.set_keep_copyright,
    "strip_color_profile": Options.set_strip_color_profile,
    "quality": Options.set_quality,
    "format_quality": Options.set_format_quality,
    "max_bytes": Options.set_max_bytes,
    "format": Options.set_format,
    "resize": Options.set_resize,
    "size": Options.set_size,
    "resizing_algorithm": Options.set_resizing_algorithm,
    "enforce_thumbnail": Options.set_enforce_thumbnail,
    "preset": Options.set_preset,
    "cache_buster": Options.set_cache_buster,
    "filename": Options.set_filename,
    "expires": Options.set_expires,
    "skip_processing": Options.set_skip_processing,
    "raw": Options.set_raw,
    "return_attachment": Options.set_return_attachment,
    "background_alpha": Options.set_background_alpha,
    "adjust": Options.set_adjust,
    "brightness": Options.set_brightness,
    "contrast": Options.set_contrast,
    "saturation": Options.set_saturation,
    "monochrome": Options.set_monochrome,
    "duotone": Options.set_duotone,
    "unsharp_masking": Options.set_unsharp_masking,
    "blur_detections": Options.set_blur_detections,
    "draw_detections": Options.set_draw_detections,
    "objects_position": Options.set_objects_position,
    "colorize": Options.set_colorize,
    "gradient": Options.set_gradient,
    "watermark_url": Options.set_watermark_url,
    "watermark_text": Options.set_watermark_text,
    "watermark_size": Options.set_watermark_size,
    "watermark_rotate": Options.set_watermark_rotate,
    "watermark_shadow": Options.set_watermark_shadow,
    "style": Options.set_style,
    "dpi": Options.set_dpi,
    "jpeg_options": Options.set_jpeg_options,
    "png_options": Options.set_png_options,
    "webp_options": Options.set_webp_options,
    "autoquality": Options.set_autoquality,
    "page": Options.set_page,
    "pages": Options.set_pages,
    "disable_animation": Options.set_disable_animation,
    "video_thumbnail_second": Options.set_video_thumbnail_second,
    "video_thumbnail_keyframes": Options.set_video_thumbnail_keyframes,
    "video_thumbnail_tile": Options.set_video_thumbnail_tile,
    "video_thumbnail_animation": Options.set_video_thumbnail_animation,
    "fallback_image_url": Options.set_fallback_image_url,
    "hashsum": Options.set_hashsum,
    "max_src_resolution": Options.set_max_src_resolution,
    "max_src_file_size": Options.set_max_src_file_size,
    "max_animation_frames": Options.set_max_animation_frames,
    "max_animation_frame_resolution": Options.set_max_animation_frame_resolution,
}


def supported_options() -> List[str]:
    """Return the snake_case names accepted by the mapping constructor."""

    return sorted(_SETTERS)


__all__ = [
    "ARGUMENTS_SEPARATOR",
    "OPTION_SEPARATOR",
    "Options",
    "Scalar",
    "format_value",
    "normalize_option_name",
    "supported_options",
]
