"""Tests for strikethrough, bare URL and task list support in descriptions."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from collection_pages.generator import HtmlContentRenderer


@pytest.fixture(scope="module")
def renderer() -> HtmlContentRenderer:
    return HtmlContentRenderer()


def _soup(renderer: HtmlContentRenderer, text: str) -> BeautifulSoup:
    return BeautifulSoup(renderer.markdown(text), "html.parser")


def test_strikethrough(renderer: HtmlContentRenderer) -> None:
    soup = _soup(renderer, "Use ~~v1~~ v2 instead.")
    struck = soup.find("del")
    assert struck is not None
    assert struck.get_text() == "v1"
    assert "~~" not in soup.get_text()


def test_single_tilde_left_alone(renderer: HtmlContentRenderer) -> None:
    soup = _soup(renderer, "Roughly ~5 requests per second.")
    assert soup.find("del") is None
    assert "~5" in soup.get_text()


def test_bare_url_becomes_external_link(renderer: HtmlContentRenderer) -> None:
    soup = _soup(renderer, "Docs live at https://example.com/api_docs/v2_ref.")
    link = soup.find("a")
    assert link is not None
    assert link["href"] == "https://example.com/api_docs/v2_ref"
    assert link.get_text() == "https://example.com/api_docs/v2_ref"
    assert link["target"] == "_blank"
    assert soup.find("em") is None


def test_explicit_links_are_not_doubled(renderer: HtmlContentRenderer) -> None:
    soup = _soup(
        renderer,
        "See [the guide](https://example.com/guide) or <https://example.com/faq>.",
    )
    hrefs = [link["href"] for link in soup.find_all("a")]
    assert hrefs == ["https://example.com/guide", "https://example.com/faq"]


def test_urls_in_code_stay_text(renderer: HtmlContentRenderer) -> None:
    soup = _soup(renderer, "Call `https://example.com/ping` to check.")
    assert soup.find("a") is None
    code = soup.find("code")
    assert code is not None
    assert code.get_text() == "https://example.com/ping"


def test_task_list_items(renderer: HtmlContentRenderer) -> None:
    soup = _soup(renderer, "- [x] create token\n- [ ] call endpoint\n- plain item")
    items = soup.find_all("li")
    assert [item.get("class") for item in items] == [
        ["task-list-item"],
        ["task-list-item"],
        None,
    ]
    first, second = (item.find("input") for item in items[:2])
    assert first is not None
    assert second is not None
    assert first.has_attr("checked")
    assert not second.has_attr("checked")
    assert first.has_attr("disabled")
    assert items[0].get_text(strip=True) == "create token"
    assert items[2].find("input") is None
