"""Route layer — pattern matching, per-route settings, and discovery."""

from routemap.routes.discovery import discover_routes
from routemap.routes.matcher import RouteMatcher, compile_route_pattern
from routemap.routes.resolver import (
    CompiledOverride,
    ResolvedRouteConfig,
    compile_overrides,
    is_ignored,
    resolve_route_config,
)

__all__ = [
    "CompiledOverride",
    "ResolvedRouteConfig",
    "RouteMatcher",
    "compile_overrides",
    "compile_route_pattern",
    "discover_routes",
    "is_ignored",
    "resolve_route_config",
]
