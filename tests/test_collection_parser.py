"""Unit tests for collection parsing and node classification."""

from __future__ import annotations

import json
import re
import typing as typ

import pytest

from collection_pages.collection_parser import (
    CollectionError,
    Endpoint,
    Folder,
    is_folder,
    load_collection,
    parse_collection,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_sample_tree_shape(sample_payload: dict[str, typ.Any]) -> None:
    collection = parse_collection(sample_payload)
    assert collection.name == "Sample API"
    users, ping = collection.items
    assert isinstance(users, Folder)
    assert isinstance(ping, Endpoint)
    assert [type(child).__name__ for child in users.children] == ["Endpoint", "Folder"]
    admin = users.children[1]
    assert isinstance(admin, Folder)
    assert admin.children[0].name == "Create User"


def test_request_fields_normalized(sample_payload: dict[str, typ.Any]) -> None:
    users = parse_collection(sample_payload).items[0]
    assert isinstance(users, Folder)
    get_user = users.children[0]
    assert isinstance(get_user, Endpoint)
    request = get_user.request
    assert request is not None
    assert request.method == "GET"
    assert request.url is not None
    assert request.url.path == ["users", "{{id}}"]
    assert [param.key for param in request.url.query] == ["token"]
    assert [header.key for header in request.headers] == ["Accept", "X-Tenant"]
    response = get_user.responses[0]
    assert (response.name, response.code, response.status) == ("Found", 200, "OK")


def test_raw_body_language_hint(sample_payload: dict[str, typ.Any]) -> None:
    users = parse_collection(sample_payload).items[0]
    assert isinstance(users, Folder)
    admin = users.children[1]
    assert isinstance(admin, Folder)
    create = admin.children[0]
    assert isinstance(create, Endpoint)
    assert create.request is not None
    assert create.request.url is not None
    assert create.request.url.raw == "{{baseUrl}}/admin/users"
    assert create.request.url.path is None
    assert create.request.body is not None
    assert create.request.body.mode == "raw"
    assert create.request.body.language == "json"


def test_empty_item_list_is_still_a_folder() -> None:
    collection = parse_collection({"info": {"name": "x"}, "item": [{"name": "Empty", "item": []}]})
    assert isinstance(collection.items[0], Folder)
    assert collection.items[0].children == []


@pytest.mark.parametrize(
    "raw",
    [
        {"name": "No children"},
        {"name": "Null children", "item": None},
        {"name": "Dict children", "item": {"name": "x"}},
    ],
)
def test_items_without_child_list_are_endpoints(raw: dict[str, typ.Any]) -> None:
    assert not is_folder(raw)
    collection = parse_collection({"info": {"name": "x"}, "item": [raw]})
    assert isinstance(collection.items[0], Endpoint)


def test_missing_method_defaults_to_get() -> None:
    collection = parse_collection(
        {"info": {"name": "x"}, "item": [{"name": "e", "request": {"url": "/a"}}]}
    )
    endpoint = collection.items[0]
    assert isinstance(endpoint, Endpoint)
    assert endpoint.request is not None
    assert endpoint.request.method == "GET"


def test_object_path_segments_use_their_value() -> None:
    collection = parse_collection(
        {
            "info": {"name": "x"},
            "item": [
                {
                    "name": "Get Order",
                    "request": {
                        "url": {
                            "raw": "{{baseUrl}}/orders/:id",
                            "path": [
                                "orders",
                                {"type": "string", "value": ":id"},
                                {"type": "any"},
                            ],
                        }
                    },
                }
            ],
        }
    )
    endpoint = collection.items[0]
    assert isinstance(endpoint, Endpoint)
    assert endpoint.request is not None
    assert endpoint.request.url is not None
    assert endpoint.request.url.path == ["orders", ":id", ""]


def test_object_descriptions_are_flattened() -> None:
    collection = parse_collection(
        {
            "info": {"name": "x", "description": {"content": "Intro", "type": "text/markdown"}},
            "item": [],
        }
    )
    assert collection.description == "Intro"


def test_order_is_preserved() -> None:
    names = [f"Endpoint {n}" for n in range(20)]
    collection = parse_collection(
        {"info": {"name": "x"}, "item": [{"name": "F", "item": [{"name": n} for n in names]}]}
    )
    folder = collection.items[0]
    assert isinstance(folder, Folder)
    assert [child.name for child in folder.children] == names


def test_deep_nesting_does_not_recurse() -> None:
    raw: dict[str, typ.Any] = {"name": "leaf"}
    for depth in range(3000):
        raw = {"name": f"level {depth}", "item": [raw]}
    collection = parse_collection({"info": {"name": "Deep"}, "item": [raw]})
    node = collection.items[0]
    depth = 0
    while isinstance(node, Folder):
        node = node.children[0]
        depth += 1
    assert depth == 3000
    assert node.name == "leaf"


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ([], "must be a JSON object"),
        ({"item": []}, "missing its 'info' object"),
        ({"info": {"name": "x"}, "item": "nope"}, "'item' must be a list"),
        ({"info": {"name": "x"}, "item": [1]}, "item[0] must be an object"),
        (
            {"info": {"name": "x"}, "item": [{"name": "F", "item": ["bad"]}]},
            "item[0].item[0] must be an object",
        ),
    ],
)
def test_shape_errors(payload: typ.Any, message: str) -> None:
    with pytest.raises(CollectionError, match=re.escape(message)):
        parse_collection(payload)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CollectionError, match="does not exist"):
        load_collection(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CollectionError, match="is not valid JSON"):
        load_collection(path)


def test_load_round_trip(tmp_path: Path, sample_payload: dict[str, typ.Any]) -> None:
    path = tmp_path / "collection.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    assert load_collection(path).name == "Sample API"
