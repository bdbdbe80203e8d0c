r"""Parse exported API collections into structured folder and endpoint trees.

This module turns the JSON payload exported by API clients (Postman
collection v2.x) into dataclasses that the HTML generator consumes. Each raw
item is classified exactly once: an item carrying an ``item`` list is a
:class:`Folder`, anything else is an :class:`Endpoint`. Downstream code
dispatches on those types instead of re-inspecting the raw shape.

Example
-------
>>> from collection_pages.collection_parser import parse_collection
>>> payload = {"info": {"name": "Demo"}, "item": [{"name": "Users", "item": []}]}
>>> collection = parse_collection(payload)
>>> collection.items[0].name
'Users'
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ

from ._constants import DEFAULT_METHOD

if typ.TYPE_CHECKING:
    from pathlib import Path


class CollectionError(ValueError):
    """Raised when the input collection is missing, unparsable, or malformed."""


@dc.dataclass(slots=True)
class KeyValue:
    """Key/value entry used for query parameters, headers, and form fields.

    Attributes
    ----------
    key : str
        Entry name; empty when the source omits it.
    value : str
        Entry value; empty when the source omits it.
    description : str
        Free-form description attached to the entry.
    type : str or None
        Form-data field type (``"text"`` or ``"file"``) when provided.
    """

    key: str
    value: str = ""
    description: str = ""
    type: str | None = None


@dc.dataclass(slots=True)
class Url:
    """Request URL in raw form plus its optional structured parts."""

    raw: str
    path: list[str] | None = None
    query: list[KeyValue] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class RequestBody:
    """Request payload tagged by its ``mode`` (``raw``, ``formdata``, ...)."""

    mode: str | None
    raw: str = ""
    language: str | None = None
    formdata: list[KeyValue] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Request:
    """HTTP request definition attached to an endpoint."""

    method: str = DEFAULT_METHOD
    url: Url | None = None
    headers: list[KeyValue] = dc.field(default_factory=list)
    body: RequestBody | None = None
    description: str = ""


@dc.dataclass(slots=True)
class ResponseExample:
    """Saved example response for an endpoint.

    Attributes
    ----------
    name : str
        Label given to the example in the source collection.
    status : str
        Reason phrase such as ``"OK"``; may be empty.
    code : int or None
        HTTP status code when recorded.
    headers : list[KeyValue]
        Response headers, searched for ``Content-Type``.
    preview_language : str or None
        Explicit preview language hint (``_postman_previewlanguage``).
    body : str or None
        Raw body text, ``None`` when the example has no body.
    """

    name: str = ""
    status: str = ""
    code: int | None = None
    headers: list[KeyValue] = dc.field(default_factory=list)
    preview_language: str | None = None
    body: str | None = None


@dc.dataclass(slots=True)
class Endpoint:
    """Leaf node describing one request and its example responses."""

    name: str
    description: str = ""
    request: Request | None = None
    responses: list[ResponseExample] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class Folder:
    """Named grouping of nested folders and endpoints."""

    name: str
    description: str = ""
    children: list[Node] = dc.field(default_factory=list)


Node = Folder | Endpoint


@dc.dataclass(slots=True)
class Collection:
    """Root of a parsed collection."""

    name: str
    description: str = ""
    items: list[Node] = dc.field(default_factory=list)


def load_collection(path: Path) -> Collection:
    """Read and parse a collection JSON file.

    Parameters
    ----------
    path : Path
        Filesystem path to the exported collection.

    Returns
    -------
    Collection
        Parsed collection tree.

    Raises
    ------
    CollectionError
        If the file does not exist, is not valid JSON, or does not have the
        shape of a collection.
    """
    if not path.exists():
        msg = f"Input file '{path}' does not exist."
        raise CollectionError(msg)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        msg = f"Input file '{path}' is not valid JSON: {exc}"
        raise CollectionError(msg) from exc
    except RecursionError as exc:
        msg = f"Input file '{path}' is nested too deeply to parse."
        raise CollectionError(msg) from exc
    return parse_collection(payload)


def parse_collection(payload: typ.Any) -> Collection:
    """Convert a decoded collection payload into a :class:`Collection`.

    Parameters
    ----------
    payload : Any
        Result of decoding the collection JSON document.

    Returns
    -------
    Collection
        Collection with every raw item converted into a ``Folder`` or
        ``Endpoint``. Source order is preserved at every level.

    Raises
    ------
    CollectionError
        If the payload is not an object, lacks an ``info`` object, or holds
        item lists that are not lists of objects.
    """
    if not isinstance(payload, dict):
        msg = "Collection must be a JSON object."
        raise CollectionError(msg)
    info = payload.get("info")
    if not isinstance(info, dict):
        msg = "Collection is missing its 'info' object."
        raise CollectionError(msg)

    collection = Collection(
        name=_text(info.get("name")),
        description=_description(info.get("description")),
    )
    raw_items = payload.get("item", [])
    if raw_items is None:
        raw_items = []
    if not isinstance(raw_items, list):
        msg = "Collection 'item' must be a list."
        raise CollectionError(msg)

    # Explicit stack keeps very deep folder trees clear of the recursion limit.
    pending: list[tuple[list[typ.Any], list[Node], str]] = [
        (raw_items, collection.items, "item")
    ]
    while pending:
        raw_children, target, location = pending.pop()
        for index, raw in enumerate(raw_children):
            if not isinstance(raw, dict):
                msg = f"Entry {location}[{index}] must be an object."
                raise CollectionError(msg)
            if is_folder(raw):
                folder = Folder(
                    name=_text(raw.get("name")),
                    description=_description(raw.get("description")),
                )
                target.append(folder)
                pending.append((raw["item"], folder.children, f"{location}[{index}].item"))
            else:
                target.append(_parse_endpoint(raw))
    return collection


def is_folder(raw: typ.Mapping[str, typ.Any]) -> bool:
    """Return ``True`` when a raw item carries a child ``item`` list."""
    return isinstance(raw.get("item"), list)


def _parse_endpoint(raw: typ.Mapping[str, typ.Any]) -> Endpoint:
    request_raw = raw.get("request")
    request: Request | None
    match request_raw:
        case dict():
            request = _parse_request(request_raw)
        case str() if request_raw:
            request = Request(url=Url(raw=request_raw))
        case _:
            request = None
    responses = [
        _parse_response(entry)
        for entry in _as_list(raw.get("response"))
        if isinstance(entry, dict)
    ]
    return Endpoint(
        name=_text(raw.get("name")),
        description=_description(raw.get("description")),
        request=request,
        responses=responses,
    )


def _parse_request(raw: typ.Mapping[str, typ.Any]) -> Request:
    method = _text(raw.get("method")).strip() or DEFAULT_METHOD
    return Request(
        method=method,
        url=_parse_url(raw.get("url")),
        headers=_parse_pairs(raw.get("header")),
        body=_parse_body(raw.get("body")),
        description=_description(raw.get("description")),
    )


def _parse_url(raw: typ.Any) -> Url | None:
    match raw:
        case str():
            return Url(raw=raw)
        case dict():
            path = raw.get("path")
            segments: list[str] | None
            match path:
                case list():
                    segments = [_path_segment(segment) for segment in path]
                case str() if path:
                    segments = [segment for segment in path.split("/") if segment]
                case _:
                    segments = None
            return Url(
                raw=_text(raw.get("raw")),
                path=segments,
                query=_parse_pairs(raw.get("query")),
            )
        case _:
            return None


def _parse_body(raw: typ.Any) -> RequestBody | None:
    if not isinstance(raw, dict):
        return None
    language = None
    options = raw.get("options")
    if isinstance(options, dict):
        raw_options = options.get("raw")
        if isinstance(raw_options, dict):
            language = _optional_text(raw_options.get("language"))
    return RequestBody(
        mode=_optional_text(raw.get("mode")),
        raw=_text(raw.get("raw")),
        language=language,
        formdata=_parse_pairs(raw.get("formdata")),
    )


def _parse_response(raw: typ.Mapping[str, typ.Any]) -> ResponseExample:
    code = raw.get("code")
    body = raw.get("body")
    return ResponseExample(
        name=_text(raw.get("name")),
        status=_text(raw.get("status")),
        code=code if isinstance(code, int) and not isinstance(code, bool) else None,
        headers=_parse_pairs(raw.get("header")),
        preview_language=_optional_text(raw.get("_postman_previewlanguage")),
        body=body if isinstance(body, str) else None,
    )


def _parse_pairs(raw: typ.Any) -> list[KeyValue]:
    pairs: list[KeyValue] = []
    for entry in _as_list(raw):
        if not isinstance(entry, dict):
            continue
        pairs.append(
            KeyValue(
                key=_text(entry.get("key")),
                value=_text(entry.get("value")),
                description=_description(entry.get("description")),
                type=_optional_text(entry.get("type")),
            )
        )
    return pairs


def _as_list(value: typ.Any) -> list[typ.Any]:
    return value if isinstance(value, list) else []


def _description(value: typ.Any) -> str:
    """Return description text from plain strings or ``{"content": ...}`` objects."""
    if isinstance(value, dict):
        value = value.get("content")
    return value if isinstance(value, str) else ""


def _path_segment(value: typ.Any) -> str:
    """Return a path segment given as text or as a ``{"type", "value"}`` object."""
    if isinstance(value, dict):
        value = value.get("value")
    return _text(value)


def _text(value: typ.Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _optional_text(value: typ.Any) -> str | None:
    text = _text(value).strip()
    return text or None


__all__ = [
    "Collection",
    "CollectionError",
    "Endpoint",
    "Folder",
    "KeyValue",
    "Node",
    "Request",
    "RequestBody",
    "ResponseExample",
    "Url",
    "is_folder",
    "load_collection",
    "parse_collection",
]
