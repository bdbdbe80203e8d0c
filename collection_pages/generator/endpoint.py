"""Render a single collection endpoint into an HTML fragment.

:class:`EndpointRenderer` extracts the request and example responses of one
:class:`~collection_pages.collection_parser.Endpoint`, normalizes values for
display, and renders ``endpoint.jinja``. Missing optional data drops the
matching subsection; an endpoint without a request renders a placeholder.

Example
-------
>>> from collection_pages.collection_parser import Endpoint
>>> from collection_pages.generator.endpoint import EndpointRenderer
>>> renderer = EndpointRenderer()  # doctest: +SKIP
>>> renderer.render(["Users"], Endpoint(name="Get User"))  # doctest: +SKIP
'<div class="endpoint" id="endpoint-users-get-user">...'
"""

from __future__ import annotations

import typing as typ
from html import escape
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from collection_pages._constants import (
    DEFAULT_LANGUAGE_TAG,
    DEFAULT_METHOD,
    HIDDEN_QUERY_KEYS,
)
from collection_pages.translations import Translations, load_translations

from .anchors import endpoint_anchor
from .content import format_response
from .models import EndpointModel, ResponseModel
from .renderer import HtmlContentRenderer
from .variables import clean_template_variables

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from collection_pages.collection_parser import (
        Endpoint,
        KeyValue,
        Request,
        ResponseExample,
    )

    from .renderer import ProseRenderer

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return the Jinja environment used for document templates."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class EndpointRenderer:
    """Turn an endpoint and its ancestor path into a self-contained fragment."""

    def __init__(
        self,
        *,
        translations: Translations | None = None,
        prose: ProseRenderer | None = None,
        code: HtmlContentRenderer | None = None,
        env: Environment | None = None,
    ) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        translations : Translations, optional
            Label table; defaults to English.
        prose : ProseRenderer, optional
            Renderer for description markup; defaults to ``code``.
        code : HtmlContentRenderer, optional
            Highlighter used for request and response bodies.
        env : Environment, optional
            Jinja environment that can load ``endpoint.jinja``.
        """
        self.translations = translations or load_translations()
        self.code = code or HtmlContentRenderer()
        self.prose: ProseRenderer = prose or self.code
        self.env = env or build_environment()
        self.template = self.env.get_template("endpoint.jinja")

    def render(
        self,
        path: cabc.Sequence[str],
        endpoint: Endpoint,
        *,
        anchor: str | None = None,
    ) -> str:
        """Render ``endpoint`` nested under the folder names in ``path``.

        Parameters
        ----------
        path : Sequence[str]
            Ancestor folder names, outermost first.
        endpoint : Endpoint
            Endpoint to render.
        anchor : str, optional
            Element id to use; defaults to :func:`endpoint_anchor` of the path
            and endpoint name.

        Returns
        -------
        str
            HTML fragment wrapped in ``<div class="endpoint" id="...">``.
        """
        model = self.build_model(path, endpoint, anchor=anchor)
        return self.template.render(endpoint=model, t=self.translations)

    def build_model(
        self,
        path: cabc.Sequence[str],
        endpoint: Endpoint,
        *,
        anchor: str | None = None,
    ) -> EndpointModel:
        """Collect the template data for ``endpoint`` without rendering it."""
        anchor = anchor or endpoint_anchor(path, endpoint.name)
        request = endpoint.request
        if request is None:
            return EndpointModel(anchor=anchor, name=endpoint.name, has_request=False)

        method = request.method or DEFAULT_METHOD
        description = endpoint.description or request.description
        form_fields: list[dict[str, str]] = []
        raw_body_html = ""
        body = request.body
        if body is not None and body.mode == "raw" and body.raw:
            raw_body_html = self.code.code_block(
                clean_template_variables(body.raw), body.language or DEFAULT_LANGUAGE_TAG
            )
        elif body is not None and body.mode == "formdata" and body.formdata:
            form_fields = [
                {
                    "key": field.key,
                    "value": clean_template_variables(field.value),
                    "type": field.type or "text",
                }
                for field in body.formdata
            ]

        return EndpointModel(
            anchor=anchor,
            name=endpoint.name,
            method=method,
            method_class=method.lower(),
            url=display_url(request),
            description_html=self.prose.render(description) if description else "",
            query_params=[
                {
                    "key": param.key,
                    "value": clean_template_variables(param.value),
                    "description_html": _multiline(param.description),
                }
                for param in visible_query_params(request)
            ],
            headers=[
                {"key": header.key, "value": clean_template_variables(header.value)}
                for header in request.headers
            ],
            raw_body_html=raw_body_html,
            form_fields=form_fields,
            responses=[self._response_model(entry) for entry in endpoint.responses],
        )

    def _response_model(self, response: ResponseExample) -> ResponseModel:
        formatted = format_response(response)
        body_html = ""
        if formatted.body:
            body_html = self.code.code_block(formatted.body, formatted.language)
        return ResponseModel(
            label=_response_label(response),
            content_type=None
            if formatted.is_default_content_type
            else formatted.content_type,
            body_html=body_html,
            collapsed=bool(formatted.body) and formatted.collapsed,
        )


def display_url(request: Request) -> str:
    """Return the structured path (``/a/b``) when present, else the raw URL."""
    url = request.url
    if url is None:
        return ""
    if url.path is not None:
        return "/" + "/".join(clean_template_variables(segment) for segment in url.path)
    return clean_template_variables(url.raw)


def visible_query_params(request: Request) -> list[KeyValue]:
    """Return query parameters minus unnamed and credential-bearing ones."""
    if request.url is None:
        return []
    return [
        param
        for param in request.url.query
        if param.key and param.key.lower() not in HIDDEN_QUERY_KEYS
    ]


def _response_label(response: ResponseExample) -> str:
    status = " ".join(
        part for part in (str(response.code or ""), response.status) if part
    )
    return " · ".join(part for part in (response.name, status) if part)


def _multiline(text: str) -> str:
    """Escape ``text`` and turn real or literal ``\\n`` breaks into ``<br>``."""
    return escape(text).replace("\n", "<br>").replace("\\n", "<br>")


__all__ = [
    "EndpointRenderer",
    "TEMPLATES_DIR",
    "build_environment",
    "display_url",
    "visible_query_params",
]
