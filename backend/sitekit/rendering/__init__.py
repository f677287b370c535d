from .config_loader import RuntimeConfig, load_runtime_config
from .composition import AnalyticsPlan, compose_analytics, meta_name_for_platform, verification_meta_tags
from .script_injector import PageDocument, ScriptInjector

__all__ = [
    "AnalyticsPlan",
    "PageDocument",
    "RuntimeConfig",
    "ScriptInjector",
    "compose_analytics",
    "load_runtime_config",
    "meta_name_for_platform",
    "verification_meta_tags",
]
