"""
Reflective schema generator

Walks the dataclasses reachable from a root dataclass, using their type hints
and field metadata, and describes each of them as a JSON schema definition
annotated with the Java types a model generator should emit.

Field metadata understood:
- json: property name (defaults to the attribute name, "-" skips the field)
- description: property description
- inline: merge the field's own properties into the enclosing type
"""

import dataclasses
import re
import types
from typing import Any, Union, get_args, get_origin, get_type_hints

from ..common import indented_log, logger
from .descriptors import JSONObjectDescriptor, JSONPropertyDescriptor, JSONSchema

HAS_METADATA = "io.fabric8.kubernetes.api.model.HasMetadata"
KUBERNETES_RESOURCE = "io.fabric8.kubernetes.api.model.KubernetesResource"
KUBERNETES_RESOURCE_LIST = "io.fabric8.kubernetes.api.model.KubernetesResourceList"

JAVA_BOXED_TYPES = {
    "bool": "Boolean",
    "char": "Character",
    "short": "Short",
    "int": "Integer",
    "long": "Long",
    "float": "Float",
    "double": "Double",
}


class SchemaGenerationError(Exception):
    pass


def generate_schema(root, packages, type_map=None) -> JSONSchema:
    """Generate the schema of ``root`` and every dataclass reachable from it.

    Args:
        root: Dataclass whose fields are the top-level schema properties
        packages: PackageDescriptors naming the types of known modules
        type_map: Types to substitute before a type is described

    Raises:
        SchemaGenerationError: root is not a dataclass, or a reachable field
            has a type that cannot be described
    """
    return SchemaGenerator(packages, type_map).generate(root)


def is_dataclass_type(t) -> bool:
    return isinstance(t, type) and dataclasses.is_dataclass(t)


def _is_int64(t) -> bool:
    return getattr(t, "__supertype__", None) is int and t.__name__ == "Int64"


def _supertype(t):
    while hasattr(t, "__supertype__"):
        t = t.__supertype__
    return t


def _unwrap_optional(t):
    if get_origin(t) in (Union, types.UnionType):
        args = [a for a in get_args(t) if a is not type(None)]
        if len(args) != 1:
            raise SchemaGenerationError(f"Unions of several types are not supported: {t!r}")
        return args[0]
    return t


class SchemaGenerator:
    def __init__(self, packages, type_map=None):
        self.packages = {p.module: p for p in packages}
        self.type_map = dict(type_map or {})
        self.types = {}
        self.kinds = set()

    def generate(self, root) -> JSONSchema:
        if not is_dataclass_type(root):
            raise SchemaGenerationError(f"Only dataclass types can be converted, got {root!r}")

        logger().info(f"Generating schema for {root.__module__}.{root.__name__}")
        schema = JSONSchema(id=f"http://fabric8.io/fabric8/v2/{root.__name__}#")
        root_descriptor = self.object_descriptor(root)
        schema.properties = root_descriptor.properties
        schema.additional_properties = root_descriptor.additional_properties

        if self.types:
            schema.definitions = {}
            schema.resources = {}
            for t, descriptor in self.types.items():
                schema.definitions[self.qualified_name(t)] = JSONPropertyDescriptor(
                    type="object",
                    properties=descriptor.properties,
                    additional_properties=descriptor.additional_properties,
                    java_type=self.java_type(t),
                    java_interfaces=self.java_interfaces(t),
                )
                if t in self.kinds:
                    schema.resources[t.__name__.lower()] = descriptor

        logger().info(f"Generated {len(self.types)} definitions, {len(self.kinds)} of them kinds")
        return schema

    def resolve(self, t):
        """Strip Optional and apply the type substitutions"""
        t = _unwrap_optional(t)
        return _unwrap_optional(self.type_map.get(t, t))

    def qualified_name(self, t) -> str:
        package = self.packages.get(t.__module__)
        if package is not None:
            return package.prefix + t.__name__
        prefix = re.sub(r"[./-]", "_", t.__module__)
        return f"{prefix}_{t.__name__}"

    def java_type(self, t) -> str:
        t = self.resolve(t)
        if is_dataclass_type(t):
            package = self.packages.get(t.__module__)
            if package is None:
                return t.__name__
            return f"{package.java_package}.{t.__name__}"
        if _is_int64(t):
            return "Long"

        t = _supertype(t)
        if t is bool:
            return "bool"
        if t is int:
            return "int"
        if t is float:
            return "double"
        if t in (str, bytes):
            return "String"
        if t is Any:
            return "Object"

        origin = get_origin(t)
        args = get_args(t)
        if t is list or origin is list:
            return self.java_type_array_list(args[0] if args else Any)
        if t is dict or origin is dict:
            return f"java.util.Map<String,{self.java_type_wrap_primitive(args[1] if args else Any)}>"
        return getattr(t, "__name__", str(t))

    def java_type_wrap_primitive(self, t) -> str:
        java_type = self.java_type(t)
        return JAVA_BOXED_TYPES.get(java_type, java_type)

    def java_type_array_list(self, t) -> str:
        return f"java.util.ArrayList<{self.java_type_wrap_primitive(t)}>"

    def java_interfaces(self, t):
        hints = get_type_hints(t)
        field_types = {
            getattr(self.resolve(hints[f.name]), "__name__", None)
            for f in dataclasses.fields(t)
            if f.metadata.get("json") != "-"
        }
        if "ObjectMeta" in field_types:
            return [HAS_METADATA]
        if "ListMeta" in field_types:
            return [KUBERNETES_RESOURCE, KUBERNETES_RESOURCE_LIST]
        return None

    def object_descriptor(self, t) -> JSONObjectDescriptor:
        logger().debug(f"Describing {t.__module__}.{t.__name__}")
        with indented_log():
            return JSONObjectDescriptor(properties=self.struct_properties(t), additional_properties=True)

    def struct_properties(self, t) -> dict:
        try:
            hints = get_type_hints(t)
        except (NameError, TypeError) as e:
            raise SchemaGenerationError(f"Could not resolve the type hints of {t.__name__}: {e}") from e

        package = self.packages.get(t.__module__)
        properties = {}
        for f in dataclasses.fields(t):
            name = f.metadata.get("json", f.name)
            if name == "-":
                continue
            field_type = hints.get(f.name, f.type)
            context = f"{t.__name__}.{f.name}"

            if f.metadata.get("inline"):
                inline_type = self.resolve(field_type)
                if not is_dataclass_type(inline_type):
                    raise SchemaGenerationError(f"{context}: only dataclasses can be inlined, got {inline_type!r}")
                if inline_type.__name__ == "TypeMeta" and package is not None:
                    self.kinds.add(t)
                    properties.update(self.kind_properties(t, package))
                else:
                    properties.update(self.struct_properties(inline_type))
                continue

            properties[name] = self.property_descriptor(field_type, f.metadata.get("description"), context)
        return properties

    def kind_properties(self, t, package) -> dict:
        version = package.module.rsplit(".", 1)[-1]
        return {
            "apiVersion": JSONPropertyDescriptor(
                type="string",
                default=f"{package.api_group}/{version}",
                required=True,
            ),
            "kind": JSONPropertyDescriptor(
                type="string",
                default=t.__name__,
                required=True,
            ),
        }

    def property_descriptor(self, t, description=None, context=None) -> JSONPropertyDescriptor:
        t = self.resolve(t)
        if t is Any:
            return JSONPropertyDescriptor()
        if _is_int64(t):
            return JSONPropertyDescriptor(type="integer", description=description, existing_java_type="Long")

        t = _supertype(t)
        if t is bool:
            return JSONPropertyDescriptor(type="boolean", description=description)
        if t is int:
            return JSONPropertyDescriptor(type="integer", description=description)
        if t is float:
            return JSONPropertyDescriptor(type="number", description=description)
        if t in (str, bytes):
            return JSONPropertyDescriptor(type="string", description=description)

        origin = get_origin(t)
        args = get_args(t)
        if t is list or origin is list:
            item_type = args[0] if args else Any
            return JSONPropertyDescriptor(
                type="array",
                description=description,
                items=self.property_descriptor(item_type, context=context),
                java_type=self.java_type_array_list(item_type),
            )
        if t is dict or origin is dict:
            key_type, value_type = args if args else (str, Any)
            if _supertype(self.resolve(key_type)) is not str:
                raise SchemaGenerationError(f"{context}: map keys must be strings, got {key_type!r}")
            return JSONPropertyDescriptor(
                type="object",
                description=description,
                map_value_type=self.property_descriptor(value_type, context=context),
                java_type=f"java.util.Map<String,{self.java_type_wrap_primitive(value_type)}>",
            )
        if is_dataclass_type(t):
            if t not in self.types:
                # registered before walking the fields so self-references terminate
                self.types[t] = JSONObjectDescriptor()
                self.types[t] = self.object_descriptor(t)
            return JSONPropertyDescriptor(
                reference=f"#/definitions/{self.qualified_name(t)}",
                java_type=self.java_type(t),
            )

        raise SchemaGenerationError(f"{context}: unsupported type {t!r}")
