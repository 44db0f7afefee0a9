"""Upload endpoint: JSON request in, Notion page out.

:func:`handle_upload` is framework-agnostic.  Mount it behind any HTTP
server or serverless runtime by passing the request method and raw body
and translating the returned :class:`HandlerResponse`.

Request body::

    {"title": "...", "markdownContent": "...",
     "notionToken": "...", "parentPageId": "..."}

``externalToken`` and ``parentContainerId`` are accepted as aliases for
the last two fields.

Response mapping:

=====================================  ======  ============================
situation                              status  body
=====================================  ======  ============================
method is not ``POST``                 405     ``Method not allowed``
missing or empty field                 400     ``{"error": "Missing ..."}``
Notion rejects page creation           remote  ``{"error": "Notion API Error: ..."}``
Notion rejects an append               remote  ``{"error": "Notion API Error appending blocks: ..."}``
anything else                          500     ``{"error": "Server Error: ..."}``
success                                200     the created page object
=====================================  ======  ============================
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from mdnotion.async_client import AsyncMdNotionClient
from mdnotion.errors import MdNotionValidationError, NotionAPIError
from mdnotion.models import HandlerResponse
from mdnotion.observability import get_logger

log = get_logger("mdnotion.handler")

REQUIRED_FIELDS: tuple[str, ...] = ("title", "markdownContent", "notionToken", "parentPageId")

_FIELD_ALIASES: dict[str, str] = {
    "externalToken": "notionToken",
    "parentContainerId": "parentPageId",
}

_JSON_HEADERS = {"Content-Type": "application/json"}
_CORS_JSON_HEADERS = {**_JSON_HEADERS, "Access-Control-Allow-Origin": "*"}


def _json_response(status: int, payload: Any, headers: dict[str, str]) -> HandlerResponse:
    return HandlerResponse(status=status, body=json.dumps(payload), headers=dict(headers))


def parse_upload_request(body: str | bytes | dict[str, Any]) -> dict[str, str]:
    """Decode *body* and return the four required fields.

    Raises
    ------
    ValueError
        If *body* is not valid JSON or not a JSON object.
    MdNotionValidationError
        If any required field is missing or empty.
    """
    data = json.loads(body) if isinstance(body, (str, bytes)) else body
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")

    fields = dict(data)
    for alias, name in _FIELD_ALIASES.items():
        if not fields.get(name) and fields.get(alias):
            fields[name] = fields[alias]

    missing = [name for name in REQUIRED_FIELDS if not fields.get(name)]
    if missing:
        raise MdNotionValidationError(
            message=f"Missing required fields: {', '.join(REQUIRED_FIELDS)}",
            context={"missing": missing},
        )
    return {name: fields[name] for name in REQUIRED_FIELDS}


async def handle_upload(
    method: str,
    body: str | bytes | dict[str, Any],
    *,
    client_factory: Callable[..., AsyncMdNotionClient] = AsyncMdNotionClient,
) -> HandlerResponse:
    """Create a Notion page from an upload request.

    Parameters
    ----------
    method:
        The HTTP method of the incoming request.
    body:
        Raw JSON body, or an already decoded object.
    client_factory:
        Called as ``client_factory(token)`` to build the client used for
        this request.

    Returns
    -------
    HandlerResponse
        Never raises; every failure is mapped to a status code.
    """
    if method != "POST":
        return HandlerResponse(status=405, body="Method not allowed")

    try:
        try:
            request = parse_upload_request(body)
        except MdNotionValidationError as exc:
            return _json_response(400, {"error": exc.message}, _JSON_HEADERS)

        async with client_factory(request["notionToken"]) as client:
            result = await client.create_page_with_markdown(
                parent_id=request["parentPageId"],
                title=request["title"],
                markdown=request["markdownContent"],
            )
        return _json_response(200, result.page, _CORS_JSON_HEADERS)

    except NotionAPIError as exc:
        appending = exc.path.startswith("/blocks/")
        prefix = "Notion API Error appending blocks" if appending else "Notion API Error"
        log.error(
            prefix,
            extra={"extra_fields": {"status_code": exc.status_code, "path": exc.path}},
        )
        return _json_response(
            exc.status_code,
            {"error": f"{prefix}: {exc.status_code} - {exc.body}"},
            _CORS_JSON_HEADERS,
        )
    except Exception as exc:
        log.exception("Server Error")
        return _json_response(500, {"error": f"Server Error: {exc}"}, _CORS_JSON_HEADERS)
