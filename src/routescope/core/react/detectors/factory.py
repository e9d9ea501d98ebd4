from __future__ import annotations

"""
Router Detector Factory.

Holds the ordered strategy list and dispatches files through it. The first
strategy reporting a router wins, so a file satisfying several strategies
is attributed to the earliest registered one.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from routescope.core.react.detectors.base import RouterDetector
from routescope.core.react.detectors.data_router import DataRouterDetector
from routescope.core.react.detectors.jsx import JsxRouterDetector
from routescope.core.react.detectors.object import ObjectRouterDetector
from routescope.domain.models import RouterFileInfo


class RouterDetectorFactory:
    """
    Ordered registry of detection strategies.

    Registers JSX, object and data-router detectors, in that order, unless
    an explicit list is given.
    """

    def __init__(
            self,
            detectors: Optional[Iterable[RouterDetector]] = None,
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._detectors: List[RouterDetector] = []

        if detectors is None:
            detectors = (JsxRouterDetector(), ObjectRouterDetector(), DataRouterDetector())
        for detector in detectors:
            self.register_detector(detector)

    @property
    def detectors(self) -> List[RouterDetector]:
        """Registered strategies in dispatch order (a copy)."""
        return list(self._detectors)

    def register_detector(self, detector: RouterDetector) -> None:
        """Append a strategy at the lowest priority."""
        self._detectors.append(detector)
        self._logger.debug(f"Registered router detector for type: {detector.router_type.value}")

    def detect(self, file_path: str, logger: Optional[logging.Logger] = None) -> RouterFileInfo:
        """
        Try each strategy in order and return the first positive result.

        Args:
            file_path: Candidate file.
            logger: Optional override of the factory logger.

        Returns:
            RouterFileInfo: First positive verdict, or a negative one.
        """
        log = logger or self._logger

        for detector in self._detectors:
            result = detector.detect(file_path, log)
            if result.is_router:
                log.debug(f"Detector for {detector.router_type.value} identified file as router: {file_path}")
                return result

        log.debug(f"No detector identified file as router: {file_path}")
        return RouterFileInfo.negative(file_path)

    def find_router_files(
            self,
            file_paths: Iterable[str],
            logger: Optional[logging.Logger] = None,
    ) -> List[RouterFileInfo]:
        """
        Detect every file concurrently and keep the routers.

        Files share no state; results keep input order.

        Args:
            file_paths: Candidate files.
            logger: Optional override of the factory logger.

        Returns:
            List[RouterFileInfo]: Positive results only.
        """
        log = logger or self._logger
        paths = list(file_paths)
        log.info(f"Searching for React Router definition files in {len(paths)} files...")

        if not paths:
            return []

        with ThreadPoolExecutor(thread_name_prefix="RouterDetector") as executor:
            results = list(executor.map(lambda p: self.detect(p, log), paths))

        routers = [r for r in results if r.is_router]
        log.info(f"Found {len(routers)} React Router definition files")
        return routers


def find_router_files(
        file_paths: Iterable[str],
        logger: Optional[logging.Logger] = None,
) -> List[RouterFileInfo]:
    """Module-level shortcut using a factory with the default strategies."""
    return RouterDetectorFactory(logger=logger).find_router_files(file_paths)
