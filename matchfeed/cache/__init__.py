from .policy import CacheDecision, CacheKind, build_cache_control, classify_request, resolve_cache_seconds

__all__ = ["CacheDecision", "CacheKind", "build_cache_control", "classify_request", "resolve_cache_seconds"]
