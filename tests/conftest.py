"""Shared fixtures and the conformance fixture loader for routa.

Conformance fixtures live in tests/conformance/*.yaml. Each document
holds a route table config plus request cases; ``expect: null`` means
the request must resolve to NOT_FOUND.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from routa import HandlerRegistry, HandlerRegistryBuilder, RouteTable
from routa.testing import FormatHandler, register

CONFORMANCE_DIR = Path(__file__).resolve().parent / "conformance"


@dataclass
class ConformanceCase:
    """A single request case from a conformance fixture."""

    fixture_name: str
    case_name: str
    routes: dict[str, Any]
    method: str
    path: str
    expect: str | None


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_fixture_documents() -> list[dict[str, Any]]:
    """Load every YAML document under tests/conformance/."""
    docs: list[dict[str, Any]] = []
    for yaml_file in sorted(CONFORMANCE_DIR.glob("*.yaml")):
        with yaml_file.open(encoding="utf-8") as f:
            for doc in yaml.safe_load_all(f):
                if doc is None:
                    continue
                doc["_source"] = yaml_file.name
                docs.append(doc)
    return docs


def load_conformance_cases() -> list[ConformanceCase]:
    """Flatten positive fixture documents into per-request cases."""
    cases: list[ConformanceCase] = []
    for doc in load_fixture_documents():
        if doc.get("expect_error", False):
            continue
        for case in doc["cases"]:
            request = case["request"]
            cases.append(
                ConformanceCase(
                    fixture_name=doc["name"],
                    case_name=case["name"],
                    routes={"routes": doc["routes"]},
                    method=str(request["method"]),
                    path=str(request["path"]),
                    expect=case["expect"],
                )
            )
    return cases


def make_registry() -> HandlerRegistry[str]:
    """Build a registry with the test handlers."""
    builder: HandlerRegistryBuilder[str] = HandlerRegistryBuilder()
    return register(builder).build()


# ─── Fixtures ───────────────────────────────────────────────────────────────


@pytest.fixture
def table() -> RouteTable[str]:
    """The three reference routes: user by id, post by slug, category page."""
    t: RouteTable[str] = RouteTable()
    t.register("GET", "/user/:id(int)", FormatHandler("User {id}"))
    t.register("POST", "/post/:slug(string)", FormatHandler("Post {slug}"))
    t.register(
        "GET",
        "/category/:name(string)/:page(int)",
        FormatHandler("Category {name}, Page {page}"),
    )
    return t
