"""Unit tests for placeholder substitution."""

from __future__ import annotations

import pytest

from sprout.core import render


class TestRender:
    def test_substitutes_bound_variable(self) -> None:
        assert render("Hello {{projectName}}", {"projectName": "Foo"}) == "Hello Foo"

    def test_allows_whitespace_inside_braces(self) -> None:
        assert render("{{  projectName }}", {"projectName": "Foo"}) == "Foo"

    def test_substitutes_every_occurrence(self) -> None:
        content = "{{projectName}}/{{ projectName }}"
        assert render(content, {"projectName": "app"}) == "app/app"

    def test_unknown_variable_renders_empty(self) -> None:
        assert render("[{{unknown}}]", {"projectName": "Foo"}) == "[]"

    def test_unknown_variable_with_no_bindings(self) -> None:
        assert render("{{ unknown }}", {}) == ""

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "plain text\n",
            "line one\r\nline two\r\n",
            "function f() { return {a: 1}; }",
            "{ {projectName} }",
            "{{ not a name }}",
            "{% block %}{# comment #}",
            "unicode ✓ λ →",
        ],
    )
    def test_passthrough_without_placeholders(self, content: str) -> None:
        assert render(content, {"projectName": "Foo"}) == content

    def test_non_string_values_are_stringified(self) -> None:
        assert render("v{{ version }}", {"version": 2}) == "v2"

    def test_surrounding_text_is_preserved(self) -> None:
        content = '{\n  "name": "{{ projectName }}",\n  "private": true\n}\n'
        expected = '{\n  "name": "demo",\n  "private": true\n}\n'
        assert render(content, {"projectName": "demo"}) == expected
