"""Tests for the reflective schema generator."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import pytest

from servicecatalog_schema.api import json_field
from servicecatalog_schema.api.meta import Empty, Int64, ListMeta, ObjectMeta, TypeMeta
from servicecatalog_schema.schemagen import (
    PackageDescriptor,
    SchemaGenerationError,
    SchemaGenerator,
    generate_schema,
)

PACKAGE = PackageDescriptor(__name__, "example.io", "io.example.model", "example_")
VERSION = __name__.rsplit(".", 1)[-1]


@dataclass
class Part:
    name: str = json_field("name", "Name of the part", default="")
    weight: float = json_field("weight", default=0.0)


@dataclass
class Node:
    value: str = json_field("value", default="")
    children: List["Node"] = json_field("children", default_factory=list)


@dataclass
class Widget:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    size: int = json_field("size", "Number of parts", default=0)
    enabled: bool = json_field("enabled", default=False)
    generation: Int64 = json_field("generation", default=0)
    checksum: bytes = json_field("checksum", default=b"")
    nickname: Optional[str] = json_field("nickname")
    parts: List[Part] = json_field("parts", default_factory=list)
    ports: List[int] = json_field("ports", default_factory=list)
    labels: Dict[str, str] = json_field("labels", default_factory=dict)
    created: datetime = json_field("created")
    marker: Empty = json_field("marker", default_factory=Empty)
    extra: Any = json_field("extra")
    cache: Optional[object] = json_field("-")
    tree: Optional[Node] = json_field("tree")


@dataclass
class WidgetList:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ListMeta = json_field("metadata", default_factory=ListMeta)
    items: List[Widget] = json_field("items", default_factory=list)


@dataclass
class Root:
    widget: Widget = json_field(default_factory=Widget)
    widget_list: WidgetList = json_field(default_factory=WidgetList)


class Opaque:
    pass


@dataclass
class WithOpaque:
    thing: Opaque = json_field("thing")


@dataclass
class WithIntKeys:
    by_id: Dict[int, str] = json_field("byId", default_factory=dict)


@dataclass
class WithUnion:
    either: "int | str" = json_field("either", default=0)


@dataclass
class WithSkippedUnion:
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    cache: Union[int, str] = json_field("-", default=0)


@dataclass
class SkippedRoot:
    holder: WithSkippedUnion = json_field(default_factory=WithSkippedUnion)


TYPE_MAP = {datetime: str, Empty: str}


@pytest.fixture
def schema():
    return generate_schema(Root, [PACKAGE], TYPE_MAP)


@pytest.fixture
def widget(schema):
    return schema.definitions["example_Widget"]


class TestDocument:
    def test_root_must_be_a_dataclass(self):
        with pytest.raises(SchemaGenerationError, match="Only dataclass types"):
            generate_schema(Opaque, [PACKAGE], TYPE_MAP)

    def test_header(self, schema):
        assert schema.id == "http://fabric8.io/fabric8/v2/Root#"
        assert schema.schema_uri == "http://json-schema.org/schema#"
        assert schema.type == "object"
        assert schema.additional_properties is True

    def test_header_has_no_description(self, schema):
        assert "description" not in schema.model_dump(by_alias=True, exclude_none=True)

    def test_root_fields_become_references(self, schema):
        assert list(schema.properties) == ["widget", "widget_list"]
        assert schema.properties["widget"].reference == "#/definitions/example_Widget"
        assert schema.properties["widget"].java_type == "io.example.model.Widget"

    def test_root_is_not_a_definition(self, schema):
        assert "example_Root" not in schema.definitions

    def test_every_reference_resolves(self, schema):
        def references(descriptor):
            if descriptor is None:
                return
            if descriptor.reference:
                yield descriptor.reference
            for child in (descriptor.properties or {}).values():
                yield from references(child)
            yield from references(descriptor.items)
            yield from references(descriptor.map_value_type)

        for definition in schema.definitions.values():
            for ref in references(definition):
                assert ref.removeprefix("#/definitions/") in schema.definitions

    def test_serializes_by_alias_without_unset_facets(self, schema):
        dumped = schema.model_dump(by_alias=True, exclude_none=True)
        assert dumped["$schema"] == "http://json-schema.org/schema#"
        assert dumped["definitions"]["example_Widget"]["properties"]["size"] == {
            "type": "integer",
            "description": "Number of parts",
        }
        assert dumped["definitions"]["example_Widget"]["properties"]["labels"]["additionalProperty"] == {
            "type": "string",
        }


class TestProperties:
    def test_scalars(self, widget):
        props = widget.properties
        assert props["size"].type == "integer"
        assert props["size"].description == "Number of parts"
        assert props["enabled"].type == "boolean"
        assert props["checksum"].type == "string"
        assert props["nickname"].type == "string"

    def test_int64_keeps_a_long_java_type(self, widget):
        generation = widget.properties["generation"]
        assert generation.type == "integer"
        assert generation.existing_java_type == "Long"

    def test_float_is_a_number(self, schema):
        assert schema.definitions["example_Part"].properties["weight"].type == "number"

    def test_substituted_types_become_strings(self, widget):
        assert widget.properties["created"].type == "string"
        assert widget.properties["marker"].type == "string"
        assert widget.properties["marker"].reference is None

    def test_any_is_left_open(self, widget):
        assert widget.properties["extra"].model_dump(exclude_none=True) == {}

    def test_skipped_field(self, widget):
        assert "cache" not in widget.properties
        assert "-" not in widget.properties

    def test_array_of_dataclasses(self, widget):
        parts = widget.properties["parts"]
        assert parts.type == "array"
        assert parts.items.reference == "#/definitions/example_Part"
        assert parts.java_type == "java.util.ArrayList<io.example.model.Part>"

    def test_array_of_primitives_boxes_java_type(self, widget):
        ports = widget.properties["ports"]
        assert ports.items.type == "integer"
        assert ports.java_type == "java.util.ArrayList<Integer>"

    def test_map(self, widget):
        labels = widget.properties["labels"]
        assert labels.type == "object"
        assert labels.map_value_type.type == "string"
        assert labels.additional_properties is None
        assert labels.java_type == "java.util.Map<String,String>"

    def test_recursive_types_terminate(self, schema):
        node = schema.definitions["example_Node"]
        assert node.properties["children"].items.reference == "#/definitions/example_Node"


class TestNaming:
    def test_described_module_uses_prefix_and_java_package(self, schema):
        part = schema.definitions["example_Part"]
        assert part.java_type == "io.example.model.Part"
        assert part.additional_properties is True

    def test_other_modules_use_module_path(self, schema):
        name = "servicecatalog_schema_api_meta_ObjectMeta"
        assert name in schema.definitions
        assert schema.definitions[name].java_type == "ObjectMeta"

    def test_qualified_name_replaces_separators(self):
        generator = SchemaGenerator([PACKAGE])
        Part.__module__, original = "some.module-name/x", Part.__module__
        try:
            assert generator.qualified_name(Part) == "some_module_name_x_Part"
        finally:
            Part.__module__ = original


class TestKinds:
    def test_inlined_type_meta_becomes_api_version_and_kind(self, widget):
        api_version = widget.properties["apiVersion"]
        kind = widget.properties["kind"]
        assert api_version.default == f"example.io/{VERSION}"
        assert api_version.required is True
        assert kind.default == "Widget"
        assert kind.required is True
        assert "type_meta" not in widget.properties

    def test_java_interfaces(self, schema):
        assert schema.definitions["example_Widget"].java_interfaces == [
            "io.fabric8.kubernetes.api.model.HasMetadata"
        ]
        assert schema.definitions["example_WidgetList"].java_interfaces == [
            "io.fabric8.kubernetes.api.model.KubernetesResource",
            "io.fabric8.kubernetes.api.model.KubernetesResourceList",
        ]
        assert schema.definitions["example_Part"].java_interfaces is None

    def test_resources_only_hold_kinds(self, schema):
        assert set(schema.resources) == {"widget", "widgetlist"}
        assert "size" in schema.resources["widget"].properties

    def test_type_meta_outside_described_modules_is_merged(self):
        schema = generate_schema(Root, [], TYPE_MAP)
        widget = schema.definitions[f"{__name__.replace('.', '_')}_Widget"]
        assert widget.properties["kind"].type == "string"
        assert widget.properties["kind"].default is None
        assert schema.resources == {}


class TestErrors:
    def test_unsupported_type_names_the_field(self):
        with pytest.raises(SchemaGenerationError, match="WithOpaque.thing"):
            generate_schema(WithOpaque, [PACKAGE], TYPE_MAP)

    def test_map_keys_must_be_strings(self):
        with pytest.raises(SchemaGenerationError, match="map keys must be strings"):
            generate_schema(WithIntKeys, [PACKAGE], TYPE_MAP)

    def test_unions_are_rejected(self):
        with pytest.raises(SchemaGenerationError, match="Unions"):
            generate_schema(WithUnion, [PACKAGE], TYPE_MAP)

    def test_skipped_fields_are_never_described(self):
        schema = generate_schema(SkippedRoot, [], TYPE_MAP)
        holder = schema.definitions[f"{__name__.replace('.', '_')}_WithSkippedUnion"]
        assert "cache" not in holder.properties
        assert holder.java_interfaces == ["io.fabric8.kubernetes.api.model.HasMetadata"]
