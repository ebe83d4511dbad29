from typing import Dict, List, NamedTuple, Optional
from pydantic import BaseModel, ConfigDict, Field


class PackageDescriptor(NamedTuple):
    """How types defined in one module are named in the generated schema"""
    module: str
    api_group: str
    java_package: str
    prefix: str


class JSONPropertyDescriptor(BaseModel):
    """A single property or definition.

    Flat union of the scalar, reference, object, array and map facets. Unset
    facets are left as None and dropped on serialization. The map value type
    serializes as ``additionalProperty`` because ``additionalProperties`` is
    already taken by the object facet.
    """
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[str] = None
    description: Optional[str] = None
    default: Optional[str] = None
    required: Optional[bool] = None
    reference: Optional[str] = Field(default=None, alias="$ref")
    java_type: Optional[str] = Field(default=None, alias="javaType")
    existing_java_type: Optional[str] = Field(default=None, alias="existingJavaType")
    java_interfaces: Optional[List[str]] = Field(default=None, alias="javaInterfaces")
    properties: Optional[Dict[str, "JSONPropertyDescriptor"]] = None
    additional_properties: Optional[bool] = Field(default=None, alias="additionalProperties")
    items: Optional["JSONPropertyDescriptor"] = None
    map_value_type: Optional["JSONPropertyDescriptor"] = Field(default=None, alias="additionalProperty")


class JSONObjectDescriptor(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    properties: Dict[str, JSONPropertyDescriptor] = Field(default_factory=dict)
    additional_properties: bool = Field(default=True, alias="additionalProperties")


class JSONSchema(BaseModel):
    """Top-level generated document"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    schema_uri: str = Field(default="http://json-schema.org/schema#", alias="$schema")
    type: str = "object"
    definitions: Optional[Dict[str, JSONPropertyDescriptor]] = None
    properties: Dict[str, JSONPropertyDescriptor] = Field(default_factory=dict)
    additional_properties: bool = Field(default=True, alias="additionalProperties")
    resources: Optional[Dict[str, JSONObjectDescriptor]] = None


JSONPropertyDescriptor.model_rebuild()
