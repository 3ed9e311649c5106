"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TrackingConfig:
    """Change tracking configuration."""

    max_traversal_nodes: int = 50000
    positional_state_prefix: str = "state"
    track_initial_mount: bool = True


@dataclass
class BreadcrumbConfig:
    """Breadcrumb path configuration."""

    max_items: int = 4


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class RenderScanConfig:
    """Top-level renderscan configuration."""

    tracking: TrackingConfig = field(default_factory=TrackingConfig)
    breadcrumb: BreadcrumbConfig = field(default_factory=BreadcrumbConfig)
    log: LogConfig = field(default_factory=LogConfig)
