#!/usr/bin/env python3
"""
Test module for name pattern rendering.
File: tests/test_template_engine.py

Usage:  python test_template_engine.py
        pytest test_template_engine.py
"""

import sys

from datetime import datetime
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from attachment_renamer.renamer.template_engine import TemplateEngine, render_template, stringify_value
from tests.helpers import run_test_group


APRIL_8 = datetime(2022, 4, 8, 14, 5, 9)


def test_plain_variable():
    assert render_template("{{fileName}}", {"fileName": "My note"}) == "My note"


def test_variable_with_date():
    result = render_template("{{imageNameKey}}-{{DATE:YYYYMMDD}}", {"imageNameKey": "foo"}, now=APRIL_8)
    assert result == "foo-20220408"


def test_unknown_variable_renders_empty():
    assert render_template("{{unknown}}x", {}) == "x"
    assert render_template("a{{ }}b", {"fileName": "n"}) == "ab"


def test_literal_only_pattern():
    assert render_template("screenshot", {"fileName": "n"}) == "screenshot"


def test_empty_pattern():
    assert render_template("", {"fileName": "n"}) == ""


def test_all_tokens_replaced():
    engine = TemplateEngine()
    context = {"fileName": "Note", "dirName": "Daily", "dirPath": "Journal/Daily"}
    result = engine.render("{{dirPath}}/{{fileName}}-{{dirName}}-{{DATE:HHmm}}", context, now=APRIL_8)
    assert result == "Journal/Daily/Note-Daily-1405"
    assert "{{" not in result


def test_every_date_directive_uses_same_instant():
    result = render_template("{{DATE:YYYY}}{{DATE:MM}}{{DATE:DD}}", {}, now=APRIL_8)
    assert result == "20220408"


def test_frontmatter_directive():
    frontmatter = {"project": "apollo", "tags": ["a", "b"], "draft": True}
    assert render_template("{{frontmatter:project}}", {}, frontmatter) == "apollo"
    assert render_template("{{frontmatter:tags}}", {}, frontmatter) == "a,b"
    assert render_template("{{frontmatter:draft}}", {}, frontmatter) == "true"
    assert render_template("{{frontmatter:missing}}-x", {}, frontmatter) == "-x"
    assert render_template("{{frontmatter:project}}", {}, None) == ""


def test_stringify_value():
    assert stringify_value(None) == ""
    assert stringify_value(3) == "3"
    assert stringify_value(False) == "false"
    assert stringify_value(["x", 1]) == "x,1"


def test_parse_template_and_required_variables():
    engine = TemplateEngine()
    template = "{{imageNameKey}}-{{DATE:YYYY}}-{{frontmatter:k}}-{{fileName}}"
    assert engine.parse_template(template) == ["imageNameKey", "DATE:YYYY", "frontmatter:k", "fileName"]
    assert engine.get_required_variables(template) == {"imageNameKey", "fileName"}
    assert engine.parse_template("") == []


def test_preview_substitution():
    engine = TemplateEngine()
    preview = engine.preview_substitution("{{fileName}}-{{DATE:YY}}", {"fileName": "n"}, now=APRIL_8)
    assert preview["result"] == "n-22"
    assert preview["substitutions"] == [
        {"token": "fileName", "value": "n"},
        {"token": "DATE:YY", "value": "22"},
    ]


def test_unbalanced_braces_are_literal():
    assert render_template("{{fileName", {"fileName": "n"}) == "{{fileName"
    assert render_template("{fileName}", {"fileName": "n"}) == "{fileName}"


def main() -> int:
    return run_test_group("Testing name pattern rendering", [
        test_plain_variable,
        test_variable_with_date,
        test_unknown_variable_renders_empty,
        test_literal_only_pattern,
        test_empty_pattern,
        test_all_tokens_replaced,
        test_every_date_directive_uses_same_instant,
        test_frontmatter_directive,
        test_stringify_value,
        test_parse_template_and_required_variables,
        test_preview_substitution,
        test_unbalanced_braces_are_literal,
    ])


if __name__ == "__main__":
    sys.exit(main())


# End of file #
