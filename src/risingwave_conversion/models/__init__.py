from . import v1alpha1, v1alpha2
from .base_resource import API_GROUP, KIND, ResourceBase

__all__ = ["API_GROUP", "KIND", "ResourceBase", "v1alpha1", "v1alpha2"]
