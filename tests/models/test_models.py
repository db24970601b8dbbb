import pytest

from schema_checker.models import Field, Violation, ViolationKind


def test_field_requires_name():
    with pytest.raises(ValueError):
        Field(name="")


def test_attribute_count_ignores_description():
    field = Field(name="name", type="TypeString", optional=False, description="The name.")

    assert field.attribute_count() == 2


def test_declares_only_true_flags():
    field = Field(name="name", optional=True, required=False)

    assert field.declares("optional") is True
    assert field.declares("required") is False
    assert field.declares("force_new") is False

    with pytest.raises(ValueError):
        field.declares("computed")


def test_merge_overlays_present_attributes():
    field = Field(name="tags", type="TypeMap")
    field.merge(Field(name="tags", optional=True))

    assert field.type == "TypeMap"
    assert field.optional is True


def test_compatibility_diagnostic_format():
    violation = Violation(
        kind=ViolationKind.OPTIONAL_TO_REQUIRED,
        field="region",
        context="alicloud/resource_alicloud_vpc.go",
    )

    assert violation.category == "compatibility"
    assert violation.diagnostic == (
        "[Incompatible Change]: attribute must not change from optional to required "
        "for region in alicloud/resource_alicloud_vpc.go"
    )


def test_documentation_diagnostic_format():
    violation = Violation(kind=ViolationKind.MISSING_DOC_FIELD, field="status", context="alicloud_vpc")

    assert violation.category == "documentation"
    assert violation.diagnostic.startswith("[Inconsistent Document]: ")
    assert violation.diagnostic.endswith("for status in alicloud_vpc")
