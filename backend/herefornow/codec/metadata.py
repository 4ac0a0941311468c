"""Token metadata JSON and the nested data URIs.

    token_uri = "data:application/json;base64," + b64(json)
    json.image = "data:image/svg+xml;base64," + b64(svg)
"""

from __future__ import annotations

import json
import logging
from typing import Any

from herefornow.codec.amounts import format_amount
from herefornow.codec.b64 import b64decode, b64encode
from herefornow.codec.config import DEFAULT_LAYOUT, LayoutConfig
from herefornow.codec.errors import DataURIError, InvalidInputError, require_non_negative_int
from herefornow.codec.svg import generate_svg
from herefornow.models.renderer_config import RendererConfig

logger = logging.getLogger(__name__)

JSON_URI_PREFIX = "data:application/json;base64,"
SVG_URI_PREFIX = "data:image/svg+xml;base64,"


def data_uri(prefix: str, payload: str | bytes) -> str:
    raw = payload.encode("utf-8") if isinstance(payload, str) else payload
    return prefix + b64encode(raw)


def _strip_prefix(uri: str, prefix: str) -> str:
    if not isinstance(uri, str) or not uri.startswith(prefix):
        raise DataURIError(f"expected a URI starting with {prefix!r}")
    return uri[len(prefix):]


def build_attributes(
    presence_count: int,
    held_amount: int | None,
    config: RendererConfig,
) -> list[dict[str, Any]]:
    attributes: list[dict[str, Any]] = [
        {"trait_type": config.presence_trait, "value": presence_count},
    ]
    if held_amount is not None:
        attributes.append({
            "trait_type": config.held_trait,
            "value": format_amount(held_amount, unit=config.unit_label),
        })
    return attributes


def build_metadata(
    presence_count: int,
    held_amount: int | None = None,
    config: RendererConfig | None = None,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> dict[str, Any]:
    """Metadata document with the SVG embedded as a data URI.

    Key order is fixed: name, description, author, urls, image, attributes.
    ``author`` and ``urls`` are omitted when not configured.
    """
    config = config or RendererConfig()
    require_non_negative_int(presence_count, "presence_count")
    if held_amount is not None:
        require_non_negative_int(held_amount, "held_amount")

    svg = generate_svg(presence_count, layout)

    doc: dict[str, Any] = {"name": config.name, "description": config.description}
    if config.author:
        doc["author"] = config.author
    if config.urls:
        doc["urls"] = list(config.urls)
    doc["image"] = data_uri(SVG_URI_PREFIX, svg)
    doc["attributes"] = build_attributes(presence_count, held_amount, config)
    return doc


def encode_metadata(doc: dict[str, Any]) -> bytes:
    """Compact UTF-8 JSON; quotes and control characters are escaped.

    Raises:
        InvalidInputError: a string holds a lone surrogate.
    """
    try:
        return json.dumps(doc, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidInputError(f"metadata text is not encodable as UTF-8: {e.reason}") from e


def build_token_uri(
    presence_count: int,
    held_amount: int | None = None,
    config: RendererConfig | None = None,
    layout: LayoutConfig = DEFAULT_LAYOUT,
) -> str:
    """``data:application/json;base64,...`` wrapping the metadata document."""
    payload = encode_metadata(build_metadata(presence_count, held_amount, config, layout))
    uri = data_uri(JSON_URI_PREFIX, payload)
    logger.debug("Token URI for %d present: %d bytes", presence_count, len(uri))
    return uri


def parse_token_uri(uri: str) -> dict[str, Any]:
    """Decode a token URI back to its metadata dict.

    Raises:
        DataURIError: wrong prefix, bad base64, or a payload that is not a
            JSON object (including over-deep nesting and lone surrogates).
    """
    raw = b64decode(_strip_prefix(uri, JSON_URI_PREFIX))
    try:
        doc = json.loads(raw.decode("utf-8"))
        # \uXXXX escapes can decode to lone surrogates
        encode_metadata(doc)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataURIError(f"token URI payload is not JSON: {e}") from e
    except InvalidInputError as e:
        raise DataURIError(f"token URI payload has invalid text: {e}") from e
    except RecursionError:
        raise DataURIError("token URI payload is nested too deeply") from None
    if not isinstance(doc, dict):
        raise DataURIError("token URI payload is not a JSON object")
    return doc


def decode_image(doc: dict[str, Any]) -> str:
    """Extract the SVG markup from a decoded metadata document."""
    image = doc.get("image")
    raw = b64decode(_strip_prefix(image, SVG_URI_PREFIX))
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DataURIError("embedded image is not UTF-8") from e
