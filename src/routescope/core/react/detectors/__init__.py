from __future__ import annotations

from .base import RouterDetector
from .data_router import DataRouterDetector
from .factory import RouterDetectorFactory, find_router_files
from .jsx import JsxRouterDetector
from .object import ObjectRouterDetector

__all__ = [
    "RouterDetector",
    "RouterDetectorFactory",
    "JsxRouterDetector",
    "ObjectRouterDetector",
    "DataRouterDetector",
    "find_router_files",
]
