"""Main converter that orchestrates v1alpha1 → v1alpha2 conversion"""

from __future__ import annotations

import copy
import logging
from typing import NoReturn

from risingwave_conversion.exceptions import ConversionNotSupportedError
from risingwave_conversion.models import v1alpha1, v1alpha2

from .components import ComponentExpander
from .pod_template import PodTemplateConverter
from .scale_view import ScaleViewLockLedger
from .status import StatusTranslator
from .storage import MetaStoreMapper, StateStoreMapper
from .validation import ForwardConvertibilityValidator

logger = logging.getLogger(__name__)


class RisingWaveConverter:
    """
    Converts whole RisingWave objects to and from the hub version.

    The storage mappers and the component expander build the spec, the
    status translator and the lock ledger build the status. Each of them is
    stateless, so one converter can serve concurrent callers.
    """

    def __init__(self, *, strict: bool = True) -> None:
        """
        Args:
            strict: Validate forward-convertibility before converting.
                Without it, ambiguous sources convert with last-writer-wins.
        """
        self._strict = strict
        self._validator = ForwardConvertibilityValidator()
        self._pod_templates = PodTemplateConverter()
        self._meta_store = MetaStoreMapper()
        self._state_store = StateStoreMapper()
        self._components = ComponentExpander(self._pod_templates)
        self._status = StatusTranslator()
        self._ledger = ScaleViewLockLedger()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def convert_forward(self, src: v1alpha1.RisingWave) -> v1alpha2.RisingWave:
        """
        Convert a v1alpha1 object to the hub version.

        The source is never modified and shares nothing with the result.

        Raises:
            ConversionValidationError: In strict mode, when the source is
                not forward-convertible.
        """
        name = src.metadata.get("name", "")
        if self._strict:
            self._validator.validate(src)

        dst = v1alpha2.RisingWave(
            metadata=copy.deepcopy(src.metadata),
            spec=self._convert_spec(src.spec),
            status=self._status.convert(src.status),
        )
        dst.status.scale_view_locks = self._ledger.to_hub(src.status.scale_views)

        logger.info(
            "Converted RisingWave %r to %s (%d scale view lock(s))",
            name,
            v1alpha2.API_VERSION,
            len(dst.status.scale_view_locks),
        )
        return dst

    def convert_backward(self, src: v1alpha2.RisingWave) -> NoReturn:
        """
        Convert a hub object back to v1alpha1.

        Not supported: v1alpha2 carries state v1alpha1 cannot express, and
        returning a partial object would lose data silently.

        Raises:
            ConversionNotSupportedError: Always.
        """
        logger.error(
            "Refusing to convert RisingWave %r back to %s",
            src.metadata.get("name", ""),
            v1alpha1.API_VERSION,
        )
        raise ConversionNotSupportedError(v1alpha2.API_VERSION, v1alpha1.API_VERSION)

    # ------------------------------------------------------------------ #
    # Private conversion methods
    # ------------------------------------------------------------------ #

    def _convert_spec(self, src: v1alpha1.RisingWaveSpec) -> v1alpha2.RisingWaveSpec:
        glob = src.global_
        replicas = glob.replicas
        components = src.components

        return v1alpha2.RisingWaveSpec(
            use_kruise_workloads=src.enable_open_kruise,
            sync_prometheus_service_monitor=src.enable_default_service_monitor,
            frontend_service_type=glob.service_type,
            additional_frontend_service_metadata=v1alpha2.PartialObjectMeta(
                labels=copy.deepcopy(glob.service_meta.labels),
                annotations=copy.deepcopy(glob.service_meta.annotations),
            ),
            meta_store=self._meta_store.convert(src.storages.meta),
            state_store=self._state_store.convert(src.storages.object),
            image=glob.image,
            pod_template=self._pod_templates.convert(glob.template),
            configuration=self._convert_configuration(src.configuration),
            meta_component=self._components.expand(
                replicas.meta, components.meta.restart_at, components.meta.groups
            ),
            frontend_component=self._components.expand(
                replicas.frontend,
                components.frontend.restart_at,
                components.frontend.groups,
            ),
            compute_component=self._components.expand_compute(
                replicas.compute, components.compute, src.storages.pvc_templates
            ),
            compactor_component=self._components.expand(
                replicas.compactor,
                components.compactor.restart_at,
                components.compactor.groups,
            ),
        )

    @staticmethod
    def _convert_configuration(
        src: v1alpha1.Configuration,
    ) -> v1alpha2.NodeConfiguration:
        if src.config_map is None:
            return v1alpha2.NodeConfiguration()
        return v1alpha2.NodeConfiguration(
            config_map=v1alpha2.NodeConfigurationConfigMapSource(
                name=src.config_map.name,
                key=src.config_map.key,
                optional=src.config_map.optional,
            )
        )
