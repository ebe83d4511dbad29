"""Inputs of the schema generation: the reflected kinds and how to name them."""

from dataclasses import dataclass, field
from datetime import datetime

from .api import v1beta1
from .api.meta import Empty
from .schemagen import PackageDescriptor


@dataclass
class Schema:
    """The core types of the Service Catalog"""

    ClusterServiceBroker: v1beta1.ClusterServiceBroker = field(default_factory=v1beta1.ClusterServiceBroker)
    ClusterServiceBrokerList: v1beta1.ClusterServiceBrokerList = field(default_factory=v1beta1.ClusterServiceBrokerList)
    ClusterServiceClass: v1beta1.ClusterServiceClass = field(default_factory=v1beta1.ClusterServiceClass)
    ClusterServiceClassList: v1beta1.ClusterServiceClassList = field(default_factory=v1beta1.ClusterServiceClassList)
    ClusterServicePlan: v1beta1.ClusterServicePlan = field(default_factory=v1beta1.ClusterServicePlan)
    ClusterServicePlanList: v1beta1.ClusterServicePlanList = field(default_factory=v1beta1.ClusterServicePlanList)
    ServiceInstance: v1beta1.ServiceInstance = field(default_factory=v1beta1.ServiceInstance)
    ServiceInstanceList: v1beta1.ServiceInstanceList = field(default_factory=v1beta1.ServiceInstanceList)
    ServiceBinding: v1beta1.ServiceBinding = field(default_factory=v1beta1.ServiceBinding)
    ServiceBindingList: v1beta1.ServiceBindingList = field(default_factory=v1beta1.ServiceBindingList)
    ServiceBroker: v1beta1.ServiceBroker = field(default_factory=v1beta1.ServiceBroker)
    ServiceBrokerList: v1beta1.ServiceBrokerList = field(default_factory=v1beta1.ServiceBrokerList)


PACKAGES = (
    PackageDescriptor(
        v1beta1.__name__,
        "servicecatalog.k8s.io",
        "me.snowdrop.servicecatalog.api.model",
        "servicecatalog_",
    ),
)

# Timestamps and the empty marker are plain strings on the wire
TYPE_MAP = {
    datetime: str,
    Empty: str,
}
