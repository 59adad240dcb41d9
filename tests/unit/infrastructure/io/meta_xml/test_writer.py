"""Unit tests for metadata file writing."""

from dataclasses import replace
from pathlib import Path
from xml.etree import ElementTree as ET

import pytest

from checkstyle_meta.domain.entities import ModuleDetails, ModulePropertyDetails
from checkstyle_meta.infrastructure.io.exceptions import MetadataWriteError
from checkstyle_meta.infrastructure.io.meta_xml import (
    build_metadata_tree,
    serialize_metadata_tree,
    write_module_metadata,
)

EXPECTED_FILTER_DOCUMENT = """\
<?xml version="1.0" encoding="UTF-8"?>
<checkstyle-metadata>
    <module>
        <filter name="MyFilter" fully-qualified-name="org.example.MyFilter" \
parent="com.puppycrawl.tools.checkstyle.Checker">
            <description><![CDATA[Suppresses everything.]]></description>
            <properties>
                <property name="file" type="Pattern" default-value="null">
                    <description><![CDATA[File pattern.]]></description>
                </property>
            </properties>
            <message-keys>
                <message-key key="suppressed"/>
            </message-keys>
        </filter>
    </module>
</checkstyle-metadata>
"""


class TestSerializeMetadataTree:
    def test_exact_layout(self, external_filter: ModuleDetails):
        details = replace(
            external_filter,
            properties=(
                ModulePropertyDetails(
                    name="file",
                    type="Pattern",
                    default_value="null",
                    description="File pattern.",
                ),
            ),
            violation_message_keys=frozenset({"suppressed"}),
        )
        payload = serialize_metadata_tree(build_metadata_tree(details))
        assert payload.decode("utf-8") == EXPECTED_FILTER_DOCUMENT

    def test_markup_in_description_is_not_escaped(self, check_details: ModuleDetails):
        payload = serialize_metadata_tree(build_metadata_tree(check_details))
        assert (
            b"<![CDATA[Checks for long methods & <b>constructors</b>.]]>" in payload
        )

    def test_attribute_values_are_escaped(self, external_filter: ModuleDetails):
        details = replace(external_filter, parent='a"b<c')
        payload = serialize_metadata_tree(build_metadata_tree(details))
        assert ET.fromstring(payload)[0][0].get("parent") == 'a"b<c'

    def test_cdata_terminator_splits_the_section(self, external_filter: ModuleDetails):
        details = replace(external_filter, description="ends with ]]> here")
        payload = serialize_metadata_tree(build_metadata_tree(details))
        assert (
            b"<description><![CDATA[ends with ]]]]><![CDATA[> here]]></description>"
            in payload
        )


class TestWriteModuleMetadata:
    def test_writes_under_checkstyle_layout(
        self, check_details: ModuleDetails, resources_root: Path
    ):
        written = write_module_metadata(
            check_details, resources_root=resources_root, separator="/"
        )

        expected = resources_root / (
            "com/puppycrawl/tools/checkstyle/meta/checks/sizes/MethodLengthCheck.xml"
        )
        assert written == expected
        assert expected.is_file()

    def test_round_trip_through_parser(
        self, check_details: ModuleDetails, resources_root: Path
    ):
        written = write_module_metadata(
            check_details, resources_root=resources_root, separator="/"
        )
        assert written is not None

        module = ET.parse(written).getroot().find("module/check")
        assert module is not None
        assert module.get("name") == "MethodLength"
        assert module.get("fully-qualified-name") == check_details.fully_qualified_name
        assert module.get("parent") == check_details.parent
        assert module.findtext("description") == check_details.description

        properties = module.findall("properties/property")
        assert [p.get("name") for p in properties] == ["max", "countEmpty"]
        assert list(properties[0].attrib) == ["name", "type", "default-value"]
        assert list(properties[1].attrib) == [
            "name",
            "type",
            "default-value",
            "validation-type",
        ]
        assert properties[0].findtext("description") == (
            "Specify the maximum number of lines allowed."
        )
        assert [k.get("key") for k in module.findall("message-keys/message-key")] == [
            "maxLen.constructor",
            "maxLen.method",
        ]

    def test_uses_four_space_indentation(
        self, check_details: ModuleDetails, resources_root: Path
    ):
        written = write_module_metadata(
            check_details, resources_root=resources_root, separator="/"
        )
        assert written is not None
        lines = written.read_text(encoding="utf-8").splitlines()
        assert lines[1] == "<checkstyle-metadata>"
        assert lines[2] == "    <module>"
        assert lines[3].startswith("        <check ")

    def test_empty_description_writes_nothing(
        self, external_filter: ModuleDetails, resources_root: Path
    ):
        details = replace(external_filter, description="")

        result = write_module_metadata(
            details, resources_root=resources_root, separator="/"
        )

        assert result is None
        assert not resources_root.exists()

    def test_empty_description_leaves_existing_file_untouched(
        self, external_filter: ModuleDetails, resources_root: Path
    ):
        existing = resources_root / "checkstylemeta-MyFilter.xml"
        existing.parent.mkdir(parents=True)
        existing.write_text("previous", encoding="utf-8")

        result = write_module_metadata(
            replace(external_filter, description=""),
            resources_root=resources_root,
            separator="/",
        )

        assert result is None
        assert existing.read_text(encoding="utf-8") == "previous"

    def test_overwrites_existing_file(
        self, external_filter: ModuleDetails, resources_root: Path
    ):
        existing = resources_root / "checkstylemeta-MyFilter.xml"
        existing.parent.mkdir(parents=True)
        existing.write_text("previous content that is longer than needed" * 50)

        written = write_module_metadata(
            external_filter, resources_root=resources_root, separator="/"
        )

        assert written == existing
        text = existing.read_text(encoding="utf-8")
        assert "previous" not in text
        assert text.rstrip().endswith("</checkstyle-metadata>")

    def test_same_input_same_output(
        self, check_details: ModuleDetails, resources_root: Path
    ):
        first = write_module_metadata(
            check_details, resources_root=resources_root, separator="/"
        )
        assert first is not None
        content = first.read_bytes()
        second = write_module_metadata(
            check_details, resources_root=resources_root, separator="/"
        )
        assert second == first
        assert first.read_bytes() == content

    def test_unwritable_location_raises(
        self, external_filter: ModuleDetails, tmp_path: Path
    ):
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("")

        with pytest.raises(MetadataWriteError) as excinfo:
            write_module_metadata(
                external_filter, resources_root=blocker, separator="/"
            )

        assert excinfo.value.qualified_name == "org.example.MyFilter"
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_description_with_cdata_terminator_reads_back(
        self, external_filter: ModuleDetails, resources_root: Path
    ):
        description = "Use <![CDATA[x]]> in javadoc, or ]]> alone]]>"
        details = replace(external_filter, description=description)

        written = write_module_metadata(
            details, resources_root=resources_root, separator="/"
        )

        assert written == resources_root / "checkstylemeta-MyFilter.xml"
        module = ET.parse(written).getroot().find("module/filter")
        assert module is not None
        assert module.findtext("description") == description
