"""
es_scaler - Elasticsearch metric adapter for an external autoscaler.

Runs a search template, reads one number out of the response and exposes it as
an activity signal and an external metric value.
"""

__version__ = "1.0.0"
__license__ = "MIT"


# Lazy imports: "import es_scaler" alone loads no subpackage
def __getattr__(name):
    if name == "ElasticsearchScaler":
        from .app.scaler import ElasticsearchScaler
        return ElasticsearchScaler
    elif name == "ScalerConfig":
        from .domain import ScalerConfig
        return ScalerConfig
    elif name == "ResolvedMetadata":
        from .domain import ResolvedMetadata
        return ResolvedMetadata
    elif name == "load_scaler_config":
        from .config.loader import load_scaler_config
        return load_scaler_config
    raise AttributeError(f"module 'es_scaler' has no attribute '{name}'")


__all__ = [
    "ElasticsearchScaler",
    "ResolvedMetadata",
    "ScalerConfig",
    "load_scaler_config",
]
