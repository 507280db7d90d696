import logging

from .astropy_provider import AstropyEphemerisProvider
from .base import EphemerisProvider
from .low_precision import LowPrecisionEphemerisProvider

logger = logging.getLogger(__name__)

_PROVIDERS = {
    AstropyEphemerisProvider.name: AstropyEphemerisProvider,
    LowPrecisionEphemerisProvider.name: LowPrecisionEphemerisProvider,
}


def get_ephemeris_provider(config) -> EphemerisProvider:
    backend = getattr(config, "ephemeris_backend", None) or AstropyEphemerisProvider.name
    provider_cls = _PROVIDERS.get(backend)
    if provider_cls is None:
        raise ValueError(f"Unknown ephemeris backend: {backend}")
    logger.debug("Using %s ephemeris provider", backend)
    return provider_cls()


__all__ = [
    "AstropyEphemerisProvider",
    "EphemerisProvider",
    "LowPrecisionEphemerisProvider",
    "get_ephemeris_provider",
]
