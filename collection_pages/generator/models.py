"""Shared dataclasses passed from the endpoint renderer to its template."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class ResponseModel:
    """Template data for one example response.

    Attributes
    ----------
    label : str
        Example name and status (for example ``"Found · 200 OK"``); may be empty.
    content_type : str or None
        Content type shown above the body; ``None`` for plain text.
    body_html : str
        Highlighted body markup, empty when the example has no body.
    collapsed : bool
        Whether the body renders height-limited with an expand button.
    """

    label: str
    content_type: str | None
    body_html: str
    collapsed: bool


@dc.dataclass(slots=True)
class EndpointModel:
    """Structured data passed to the endpoint template.

    Attributes
    ----------
    anchor : str
        Document-unique element id.
    name : str
        Endpoint display name.
    has_request : bool
        ``False`` renders only the placeholder message.
    method : str
        HTTP method label.
    method_class : str
        Lower-cased method used as the badge CSS class.
    url : str
        Display URL or path with template variables cleaned.
    description_html : str
        Rendered description, empty when absent.
    query_params : list[dict[str, str]]
        Rows with ``key``, ``value`` and ``description_html``.
    headers : list[dict[str, str]]
        Rows with ``key`` and ``value``.
    raw_body_html : str
        Highlighted raw request body, empty when absent.
    form_fields : list[dict[str, str]]
        Rows with ``key``, ``value`` and ``type`` for form-data bodies.
    responses : list[ResponseModel]
        Example responses in source order.
    """

    anchor: str
    name: str
    has_request: bool = True
    method: str = ""
    method_class: str = ""
    url: str = ""
    description_html: str = ""
    query_params: list[dict[str, str]] = dc.field(default_factory=list)
    headers: list[dict[str, str]] = dc.field(default_factory=list)
    raw_body_html: str = ""
    form_fields: list[dict[str, str]] = dc.field(default_factory=list)
    responses: list[ResponseModel] = dc.field(default_factory=list)


__all__ = ["EndpointModel", "ResponseModel"]
