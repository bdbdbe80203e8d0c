"""Shared fixtures for collection_pages tests."""

from __future__ import annotations

import copy
import json
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

SAMPLE_PAYLOAD: dict[str, typ.Any] = {
    "info": {
        "name": "Sample API",
        "description": "Use the `token` query parameter to authenticate.",
        "schema": "https://schema.getpostman.com/json/collection/v2.1.0/collection.json",
    },
    "item": [
        {
            "name": "Users",
            "description": "Manage **user** accounts.",
            "item": [
                {
                    "name": "Get User",
                    "request": {
                        "method": "GET",
                        "header": [
                            {"key": "Accept", "value": "application/json"},
                            {"key": "X-Tenant", "value": "{{tenant}}"},
                        ],
                        "url": {
                            "raw": "{{baseUrl}}/users/{{id}}?token={{token}}",
                            "host": ["{{baseUrl}}"],
                            "path": ["users", "{{id}}"],
                            "query": [{"key": "token", "value": "{{token}}"}],
                        },
                    },
                    "response": [
                        {
                            "name": "Found",
                            "code": 200,
                            "status": "OK",
                            "header": [
                                {"key": "Content-Type", "value": "application/json"}
                            ],
                            "body": '{"a":1}',
                        }
                    ],
                },
                {
                    "name": "Admin",
                    "item": [
                        {
                            "name": "Create User",
                            "request": {
                                "method": "POST",
                                "url": "{{baseUrl}}/admin/users",
                                "body": {
                                    "mode": "raw",
                                    "raw": '{"name": "{{userName}}"}',
                                    "options": {"raw": {"language": "json"}},
                                },
                            },
                        }
                    ],
                },
            ],
        },
        {"name": "Ping"},
    ],
}


@pytest.fixture
def sample_payload() -> dict[str, typ.Any]:
    """Return a fresh copy of a small collection with nested folders."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def sample_collection_file(tmp_path: Path, sample_payload: dict[str, typ.Any]) -> Path:
    """Write the sample collection to disk and return its path."""
    path = tmp_path / "collection.json"
    path.write_text(json.dumps(sample_payload), encoding="utf-8")
    return path
