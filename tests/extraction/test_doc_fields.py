"""Tests for the markdown documentation extractor."""

from __future__ import annotations

from pathlib import Path

from schema_checker.extraction import DocumentationExtractor

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def _fixture_text() -> str:
    return (FIXTURES / "docs" / "vpc.html.markdown").read_text(encoding="utf-8")


def test_extracts_arguments_and_attributes() -> None:
    resource = DocumentationExtractor().extract(_fixture_text(), "website/docs/r/vpc.html.markdown")

    assert resource.name == "alicloud_vpc"
    assert list(resource.arguments) == ["cidr_block", "vpc_name", "description"]
    assert list(resource.attributes) == ["id", "status"]

    cidr_block = resource.arguments["cidr_block"]
    assert cidr_block.required is True
    assert cidr_block.force_new is True
    assert cidr_block.optional is None
    assert cidr_block.description == "The CIDR block for the VPC."

    assert resource.arguments["vpc_name"].optional is True
    assert resource.attributes["status"].description == "The status of the VPC."


def test_extraction_is_repeatable() -> None:
    extractor = DocumentationExtractor()
    text = _fixture_text()

    first = extractor.extract(text, "vpc.html.markdown")
    second = extractor.extract(text, "vpc.html.markdown")

    assert first == second


def test_resource_name_uses_provider_namespace() -> None:
    extractor = DocumentationExtractor(provider="example")

    assert extractor.resource_name("docs/r/nat_gateway.html.markdown") == "example_nat_gateway"


def test_sub_headings_stay_in_section() -> None:
    text = "\n".join(
        [
            "## Argument Reference",
            "",
            "* `name` - (Required) The name.",
            "",
            "### Block rule",
            "",
            "* `port` - (Optional, ForceNew) The port.",
            "",
            "## Import",
            "",
            "* `ignored` - (Optional) Not an argument.",
        ]
    )

    resource = DocumentationExtractor().extract(text, "listener.html.markdown")

    assert list(resource.arguments) == ["name", "port"]
    assert resource.arguments["port"].optional is True
    assert resource.arguments["port"].force_new is True


def test_attributes_section_ends_arguments_section() -> None:
    text = "\n".join(
        [
            "## Argument Reference",
            "* `name` - (Optional) The name.",
            "## Attributes Reference",
            "* `status` - The status.",
        ]
    )

    resource = DocumentationExtractor().extract(text, "eip.html.markdown")

    assert list(resource.arguments) == ["name"]
    assert list(resource.attributes) == ["status"]


def test_modifier_keywords_are_case_sensitive() -> None:
    text = "## Argument Reference\n* `name` - (optional, required) The name.\n"

    field = DocumentationExtractor().extract(text, "eip.html.markdown").arguments["name"]

    assert field.optional is None
    assert field.required is None


def test_argument_without_modifier_is_still_documented() -> None:
    text = "## Argument Reference\n* `tags` - A mapping of tags to assign to the resource.\n"

    field = DocumentationExtractor().extract(text, "eip.html.markdown").arguments["tags"]

    assert field.optional is None
    assert field.description == "A mapping of tags to assign to the resource."


def test_bullets_without_name_are_dropped() -> None:
    text = "## Attributes Reference\n* `` - Nothing.\n* plain bullet\n"

    resource = DocumentationExtractor().extract(text, "eip.html.markdown")

    assert resource.attributes == {}


def test_headings_inside_code_blocks_do_not_close_sections() -> None:
    text = "\n".join(
        [
            "## Argument Reference",
            "```",
            "# comment",
            "```",
            "* `name` - (Required) The name.",
        ]
    )

    resource = DocumentationExtractor().extract(text, "eip.html.markdown")

    assert list(resource.arguments) == ["name"]
