"""Utilities for turning parsed collections into HTML documentation fragments."""

from .anchors import AnchorRegistry, endpoint_anchor, folder_anchor, slugify
from .content import FormattedBody, format_response
from .endpoint import EndpointRenderer, build_environment
from .link_rewriter import ExternalLinkExtension
from .markdown_extras import DescriptionExtrasExtension
from .models import EndpointModel, ResponseModel
from .renderer import HtmlContentRenderer, ProseRenderer
from .variables import clean_template_variables
from .walker import TreeWalker, WalkResult

__all__ = [
    "AnchorRegistry",
    "DescriptionExtrasExtension",
    "EndpointModel",
    "EndpointRenderer",
    "ExternalLinkExtension",
    "FormattedBody",
    "HtmlContentRenderer",
    "ProseRenderer",
    "ResponseModel",
    "TreeWalker",
    "WalkResult",
    "build_environment",
    "clean_template_variables",
    "endpoint_anchor",
    "folder_anchor",
    "format_response",
    "slugify",
]
