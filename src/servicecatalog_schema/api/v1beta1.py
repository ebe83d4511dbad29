"""servicecatalog.k8s.io/v1beta1 API types.

Mirrors the v1beta1 service catalog API: brokers, classes and plans advertised
by brokers, provisioned instances and bindings to them. Only the attributes
are modelled, the types exist to be reflected over.
"""

from dataclasses import dataclass
from typing import Dict, List, NewType, Optional

from . import json_field
from .meta import Int64, ListMeta, ObjectMeta, RawExtension, Time, TypeMeta

ConditionStatus = NewType("ConditionStatus", str)
ServiceBrokerConditionType = NewType("ServiceBrokerConditionType", str)
ServiceBrokerRelistBehavior = NewType("ServiceBrokerRelistBehavior", str)
ServiceInstanceConditionType = NewType("ServiceInstanceConditionType", str)
ServiceInstanceOperation = NewType("ServiceInstanceOperation", str)
ServiceInstanceProvisionStatus = NewType("ServiceInstanceProvisionStatus", str)
ServiceInstanceDeprovisionStatus = NewType("ServiceInstanceDeprovisionStatus", str)
ServiceBindingConditionType = NewType("ServiceBindingConditionType", str)
ServiceBindingOperation = NewType("ServiceBindingOperation", str)
ServiceBindingUnbindStatus = NewType("ServiceBindingUnbindStatus", str)


# References

@dataclass
class ObjectReference:
    namespace: str = json_field("namespace", default="")
    name: str = json_field("name", default="")


@dataclass
class LocalObjectReference:
    name: str = json_field("name", default="")


@dataclass
class ClusterObjectReference:
    name: str = json_field("name", default="")


@dataclass
class SecretKeyReference:
    name: str = json_field("name", "The name of the secret in the pod's namespace to select from", default="")
    key: str = json_field("key", "The key of the secret to select from", default="")


@dataclass
class ParametersFromSource:
    secret_key_ref: Optional[SecretKeyReference] = json_field("secretKeyRef")


@dataclass
class UserInfo:
    """Identity of the user that made a request"""

    username: str = json_field("username", default="")
    uid: str = json_field("uid", default="")
    groups: List[str] = json_field("groups", default_factory=list)
    extra: Dict[str, List[str]] = json_field("extra", default_factory=dict)


# Brokers

@dataclass
class ClusterBasicAuthConfig:
    secret_ref: Optional[ObjectReference] = json_field("secretRef", "Reference to a Secret containing username and password")


@dataclass
class ClusterBearerTokenAuthConfig:
    secret_ref: Optional[ObjectReference] = json_field("secretRef", "Reference to a Secret containing the bearer token")


@dataclass
class ClusterServiceBrokerAuthInfo:
    basic: Optional[ClusterBasicAuthConfig] = json_field("basic")
    bearer: Optional[ClusterBearerTokenAuthConfig] = json_field("bearer")


@dataclass
class BasicAuthConfig:
    secret_ref: Optional[LocalObjectReference] = json_field("secretRef")


@dataclass
class BearerTokenAuthConfig:
    secret_ref: Optional[LocalObjectReference] = json_field("secretRef")


@dataclass
class ServiceBrokerAuthInfo:
    basic: Optional[BasicAuthConfig] = json_field("basic")
    bearer: Optional[BearerTokenAuthConfig] = json_field("bearer")


@dataclass
class CommonServiceBrokerSpec:
    url: str = json_field("url", "The URL to communicate with the broker via", default="")
    insecure_skip_tls_verify: bool = json_field("insecureSkipTLSVerify", default=False)
    ca_bundle: bytes = json_field("caBundle", "PEM encoded CA bundle used to validate the broker's serving certificate", default=b"")
    relist_behavior: ServiceBrokerRelistBehavior = json_field("relistBehavior", default="")
    relist_duration: Optional[str] = json_field("relistDuration")
    relist_requests: Int64 = json_field("relistRequests", default=0)


@dataclass
class ClusterServiceBrokerSpec:
    common: CommonServiceBrokerSpec = json_field(inline=True, default_factory=CommonServiceBrokerSpec)
    auth_info: Optional[ClusterServiceBrokerAuthInfo] = json_field("authInfo")


@dataclass
class ServiceBrokerSpec:
    common: CommonServiceBrokerSpec = json_field(inline=True, default_factory=CommonServiceBrokerSpec)
    auth_info: Optional[ServiceBrokerAuthInfo] = json_field("authInfo")


@dataclass
class ServiceBrokerCondition:
    type: ServiceBrokerConditionType = json_field("type", default="")
    status: ConditionStatus = json_field("status", default="")
    last_transition_time: Time = json_field("lastTransitionTime")
    reason: str = json_field("reason", default="")
    message: str = json_field("message", default="")


@dataclass
class CommonServiceBrokerStatus:
    conditions: List[ServiceBrokerCondition] = json_field("conditions", default_factory=list)
    reconciled_generation: Int64 = json_field("reconciledGeneration", default=0)
    operation_start_time: Optional[Time] = json_field("operationStartTime")
    last_catalog_retrieval_time: Optional[Time] = json_field("lastCatalogRetrievalTime")


@dataclass
class ClusterServiceBrokerStatus:
    common: CommonServiceBrokerStatus = json_field(inline=True, default_factory=CommonServiceBrokerStatus)


@dataclass
class ServiceBrokerStatus:
    common: CommonServiceBrokerStatus = json_field(inline=True, default_factory=CommonServiceBrokerStatus)


@dataclass
class ClusterServiceBroker:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    spec: ClusterServiceBrokerSpec = json_field("spec", default_factory=ClusterServiceBrokerSpec)
    status: ClusterServiceBrokerStatus = json_field("status", default_factory=ClusterServiceBrokerStatus)


@dataclass
class ClusterServiceBrokerList:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ListMeta = json_field("metadata", default_factory=ListMeta)
    items: List[ClusterServiceBroker] = json_field("items", default_factory=list)


@dataclass
class ServiceBroker:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    spec: ServiceBrokerSpec = json_field("spec", default_factory=ServiceBrokerSpec)
    status: ServiceBrokerStatus = json_field("status", default_factory=ServiceBrokerStatus)


@dataclass
class ServiceBrokerList:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ListMeta = json_field("metadata", default_factory=ListMeta)
    items: List[ServiceBroker] = json_field("items", default_factory=list)


# Classes

@dataclass
class CommonServiceClassSpec:
    external_name: str = json_field("externalName", "The name of this service as advertised by the broker", default="")
    external_id: str = json_field("externalID", default="")
    description: str = json_field("description", default="")
    bindable: bool = json_field("bindable", default=False)
    binding_retrievable: bool = json_field("bindingRetrievable", default=False)
    plan_updatable: bool = json_field("planUpdatable", default=False)
    external_metadata: Optional[RawExtension] = json_field("externalMetadata")
    tags: List[str] = json_field("tags", default_factory=list)
    requires: List[str] = json_field("requires", default_factory=list)
    default_provision_parameters: Optional[RawExtension] = json_field("defaultProvisionParameters")


@dataclass
class ClusterServiceClassSpec:
    common: CommonServiceClassSpec = json_field(inline=True, default_factory=CommonServiceClassSpec)
    cluster_service_broker_name: str = json_field("clusterServiceBrokerName", default="")


@dataclass
class CommonServiceClassStatus:
    removed_from_broker_catalog: bool = json_field("removedFromBrokerCatalog", default=False)


@dataclass
class ClusterServiceClassStatus:
    common: CommonServiceClassStatus = json_field(inline=True, default_factory=CommonServiceClassStatus)


@dataclass
class ClusterServiceClass:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    spec: ClusterServiceClassSpec = json_field("spec", default_factory=ClusterServiceClassSpec)
    status: ClusterServiceClassStatus = json_field("status", default_factory=ClusterServiceClassStatus)


@dataclass
class ClusterServiceClassList:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ListMeta = json_field("metadata", default_factory=ListMeta)
    items: List[ClusterServiceClass] = json_field("items", default_factory=list)


# Plans

@dataclass
class CommonServicePlanSpec:
    external_name: str = json_field("externalName", default="")
    external_id: str = json_field("externalID", default="")
    description: str = json_field("description", default="")
    free: bool = json_field("free", default=False)
    bindable: Optional[bool] = json_field("bindable", "Overrides the bindable flag of the owning class")
    external_metadata: Optional[RawExtension] = json_field("externalMetadata")
    instance_create_parameter_schema: Optional[RawExtension] = json_field("instanceCreateParameterSchema")
    instance_update_parameter_schema: Optional[RawExtension] = json_field("instanceUpdateParameterSchema")
    service_binding_create_parameter_schema: Optional[RawExtension] = json_field("serviceBindingCreateParameterSchema")
    service_binding_create_response_schema: Optional[RawExtension] = json_field("serviceBindingCreateResponseSchema")
    default_provision_parameters: Optional[RawExtension] = json_field("defaultProvisionParameters")


@dataclass
class ClusterServicePlanSpec:
    common: CommonServicePlanSpec = json_field(inline=True, default_factory=CommonServicePlanSpec)
    cluster_service_broker_name: str = json_field("clusterServiceBrokerName", default="")
    cluster_service_class_ref: ClusterObjectReference = json_field("clusterServiceClassRef", default_factory=ClusterObjectReference)


@dataclass
class CommonServicePlanStatus:
    removed_from_broker_catalog: bool = json_field("removedFromBrokerCatalog", default=False)


@dataclass
class ClusterServicePlanStatus:
    common: CommonServicePlanStatus = json_field(inline=True, default_factory=CommonServicePlanStatus)


@dataclass
class ClusterServicePlan:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    spec: ClusterServicePlanSpec = json_field("spec", default_factory=ClusterServicePlanSpec)
    status: ClusterServicePlanStatus = json_field("status", default_factory=ClusterServicePlanStatus)


@dataclass
class ClusterServicePlanList:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ListMeta = json_field("metadata", default_factory=ListMeta)
    items: List[ClusterServicePlan] = json_field("items", default_factory=list)


# Instances

@dataclass
class PlanReference:
    cluster_service_class_external_name: str = json_field("clusterServiceClassExternalName", default="")
    cluster_service_plan_external_name: str = json_field("clusterServicePlanExternalName", default="")
    cluster_service_class_external_id: str = json_field("clusterServiceClassExternalID", default="")
    cluster_service_plan_external_id: str = json_field("clusterServicePlanExternalID", default="")
    cluster_service_class_name: str = json_field("clusterServiceClassName", default="")
    cluster_service_plan_name: str = json_field("clusterServicePlanName", default="")


@dataclass
class ServiceInstanceSpec:
    plan_reference: PlanReference = json_field(inline=True, default_factory=PlanReference)
    cluster_service_class_ref: Optional[ClusterObjectReference] = json_field("clusterServiceClassRef")
    cluster_service_plan_ref: Optional[ClusterObjectReference] = json_field("clusterServicePlanRef")
    parameters: Optional[RawExtension] = json_field("parameters")
    parameters_from: List[ParametersFromSource] = json_field("parametersFrom", default_factory=list)
    external_id: str = json_field("externalID", default="")
    user_info: Optional[UserInfo] = json_field("userInfo")
    update_requests: Int64 = json_field("updateRequests", "Incremented to force the controller to resend an update request", default=0)


@dataclass
class ServiceInstanceCondition:
    type: ServiceInstanceConditionType = json_field("type", default="")
    status: ConditionStatus = json_field("status", default="")
    last_transition_time: Time = json_field("lastTransitionTime")
    reason: str = json_field("reason", default="")
    message: str = json_field("message", default="")


@dataclass
class ServiceInstancePropertiesState:
    cluster_service_plan_external_name: str = json_field("clusterServicePlanExternalName", default="")
    cluster_service_plan_external_id: str = json_field("clusterServicePlanExternalID", default="")
    parameters: Optional[RawExtension] = json_field("parameters")
    parameters_checksum: str = json_field("parameterChecksum", default="")
    user_info: Optional[UserInfo] = json_field("userInfo")


@dataclass
class ServiceInstanceStatus:
    conditions: List[ServiceInstanceCondition] = json_field("conditions", default_factory=list)
    async_op_in_progress: bool = json_field("asyncOpInProgress", default=False)
    orphan_mitigation_in_progress: bool = json_field("orphanMitigationInProgress", default=False)
    last_operation: Optional[str] = json_field("lastOperation")
    dashboard_url: Optional[str] = json_field("dashboardURL")
    current_operation: ServiceInstanceOperation = json_field("currentOperation", default="")
    reconciled_generation: Int64 = json_field("reconciledGeneration", default=0)
    observed_generation: Int64 = json_field("observedGeneration", default=0)
    operation_start_time: Optional[Time] = json_field("operationStartTime")
    in_progress_properties: Optional[ServiceInstancePropertiesState] = json_field("inProgressProperties")
    external_properties: Optional[ServiceInstancePropertiesState] = json_field("externalProperties")
    provision_status: ServiceInstanceProvisionStatus = json_field("provisionStatus", default="")
    deprovision_status: ServiceInstanceDeprovisionStatus = json_field("deprovisionStatus", default="")
    default_provision_parameters: Optional[RawExtension] = json_field("defaultProvisionParameters")


@dataclass
class ServiceInstance:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    spec: ServiceInstanceSpec = json_field("spec", default_factory=ServiceInstanceSpec)
    status: ServiceInstanceStatus = json_field("status", default_factory=ServiceInstanceStatus)


@dataclass
class ServiceInstanceList:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ListMeta = json_field("metadata", default_factory=ListMeta)
    items: List[ServiceInstance] = json_field("items", default_factory=list)


# Bindings

@dataclass
class ServiceBindingSpec:
    instance_ref: LocalObjectReference = json_field("instanceRef", "The instance this binding is for", default_factory=LocalObjectReference)
    parameters: Optional[RawExtension] = json_field("parameters")
    parameters_from: List[ParametersFromSource] = json_field("parametersFrom", default_factory=list)
    secret_name: str = json_field("secretName", "Name of the secret to create with the binding credentials", default="")
    external_id: str = json_field("externalID", default="")
    user_info: Optional[UserInfo] = json_field("userInfo")


@dataclass
class ServiceBindingCondition:
    type: ServiceBindingConditionType = json_field("type", default="")
    status: ConditionStatus = json_field("status", default="")
    last_transition_time: Time = json_field("lastTransitionTime")
    reason: str = json_field("reason", default="")
    message: str = json_field("message", default="")


@dataclass
class ServiceBindingPropertiesState:
    parameters: Optional[RawExtension] = json_field("parameters")
    parameters_checksum: str = json_field("parameterChecksum", default="")
    user_info: Optional[UserInfo] = json_field("userInfo")


@dataclass
class ServiceBindingStatus:
    conditions: List[ServiceBindingCondition] = json_field("conditions", default_factory=list)
    async_op_in_progress: bool = json_field("asyncOpInProgress", default=False)
    last_operation: Optional[str] = json_field("lastOperation")
    current_operation: ServiceBindingOperation = json_field("currentOperation", default="")
    reconciled_generation: Int64 = json_field("reconciledGeneration", default=0)
    operation_start_time: Optional[Time] = json_field("operationStartTime")
    in_progress_properties: Optional[ServiceBindingPropertiesState] = json_field("inProgressProperties")
    external_properties: Optional[ServiceBindingPropertiesState] = json_field("externalProperties")
    orphan_mitigation_in_progress: bool = json_field("orphanMitigationInProgress", default=False)
    unbind_status: ServiceBindingUnbindStatus = json_field("unbindStatus", default="")


@dataclass
class ServiceBinding:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ObjectMeta = json_field("metadata", default_factory=ObjectMeta)
    spec: ServiceBindingSpec = json_field("spec", default_factory=ServiceBindingSpec)
    status: ServiceBindingStatus = json_field("status", default_factory=ServiceBindingStatus)


@dataclass
class ServiceBindingList:
    type_meta: TypeMeta = json_field(inline=True, default_factory=TypeMeta)
    metadata: ListMeta = json_field("metadata", default_factory=ListMeta)
    items: List[ServiceBinding] = json_field("items", default_factory=list)
