"""Kubernetes object metadata types shared by every API group."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, NewType, Optional

from . import json_field

Time = datetime
Int64 = NewType("Int64", int)
UID = NewType("UID", str)


@dataclass
class Empty:
    """Marker type without fields"""


@dataclass
class TypeMeta:
    kind: str = json_field("kind", "Kind is a string value representing the REST resource this object represents", default="")
    api_version: str = json_field("apiVersion", "APIVersion defines the versioned schema of this representation of an object", default="")


@dataclass
class OwnerReference:
    api_version: str = json_field("apiVersion", "API version of the referent", default="")
    kind: str = json_field("kind", "Kind of the referent", default="")
    name: str = json_field("name", "Name of the referent", default="")
    uid: UID = json_field("uid", "UID of the referent", default="")
    controller: Optional[bool] = json_field("controller", "If true, this reference points to the managing controller")
    block_owner_deletion: Optional[bool] = json_field("blockOwnerDeletion")


@dataclass
class ObjectMeta:
    name: str = json_field("name", default="")
    generate_name: str = json_field("generateName", default="")
    namespace: str = json_field("namespace", default="")
    self_link: str = json_field("selfLink", default="")
    uid: UID = json_field("uid", default="")
    resource_version: str = json_field("resourceVersion", default="")
    generation: Int64 = json_field("generation", "A sequence number representing a specific generation of the desired state", default=0)
    creation_timestamp: Time = json_field("creationTimestamp")
    deletion_timestamp: Optional[Time] = json_field("deletionTimestamp")
    deletion_grace_period_seconds: Optional[Int64] = json_field("deletionGracePeriodSeconds")
    labels: Dict[str, str] = json_field("labels", default_factory=dict)
    annotations: Dict[str, str] = json_field("annotations", default_factory=dict)
    owner_references: List[OwnerReference] = json_field("ownerReferences", default_factory=list)
    finalizers: List[str] = json_field("finalizers", default_factory=list)
    cluster_name: str = json_field("clusterName", default="")


@dataclass
class ListMeta:
    self_link: str = json_field("selfLink", default="")
    resource_version: str = json_field("resourceVersion", default="")
    continue_: str = json_field("continue", default="")


@dataclass
class RawExtension:
    """Embedded object kept in its serialized form"""

    raw: bytes = json_field("Raw", default=b"")
    extension: Any = json_field("-")
