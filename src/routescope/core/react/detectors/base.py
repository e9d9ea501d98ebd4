from __future__ import annotations

"""
Base Definitions for Router Detection Strategies.

A strategy recognizes one flavour of React router-definition file through
two gates evaluated in order: an import gate (the routing library is
imported) and a usage gate (its components or factories appear). Only a
file passing both gates gets the finer ``determine_router_type`` pass.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from routescope.domain.models import RouterFileInfo, RouterType
from routescope.infra.fs import read_text


class RouterDetector(ABC):
    """
    Abstract base class for router-definition detectors.

    Subclasses declare ``import_patterns`` and ``component_patterns`` as
    literal substrings and implement ``determine_router_type``.
    """

    import_patterns: Tuple[str, ...] = ()
    component_patterns: Tuple[str, ...] = ()

    @property
    @abstractmethod
    def router_type(self) -> RouterType:
        """The router flavour this detector reports."""

    def has_router_imports(self, content: str) -> bool:
        return any(p in content for p in self.import_patterns)

    def has_router_components(self, content: str) -> bool:
        return any(p in content for p in self.component_patterns)

    @abstractmethod
    def determine_router_type(self, file_path: str) -> RouterType:
        """
        Re-read the file and look for markers specific to this flavour.

        Args:
            file_path: File that already passed both gates.

        Returns:
            RouterType: This detector's type, or UNKNOWN.
        """

    def detect(self, file_path: str, logger: Optional[logging.Logger] = None) -> RouterFileInfo:
        """
        Run the gated detection pipeline on one file.

        Read failures and gate misses yield a negative result; nothing is raised.

        Args:
            file_path: Candidate file.
            logger: Optional logger; defaults to this module's logger.

        Returns:
            RouterFileInfo: Positive only when a concrete type was determined.
        """
        log = logger or logging.getLogger(__name__)
        log.debug(f"Checking file for router definitions: {file_path}")

        try:
            content = read_text(file_path)
        except OSError as e:
            log.debug(f"Could not read {file_path}: {e}")
            return RouterFileInfo.negative(file_path)

        if not self.has_router_imports(content):
            log.debug(f"No router imports found in: {file_path}")
            return RouterFileInfo.negative(file_path)

        if not self.has_router_components(content):
            log.debug(f"No router components found in: {file_path}")
            return RouterFileInfo.negative(file_path)

        router_type = self.determine_router_type(file_path)
        if router_type == RouterType.UNKNOWN:
            return RouterFileInfo.negative(file_path)

        log.debug(f"Found router file: {file_path} (type: {router_type.value})")
        return RouterFileInfo(file_path=file_path, is_router=True, router_type=router_type)

    def _read_or_none(self, file_path: str) -> Optional[str]:
        try:
            return read_text(file_path)
        except OSError:
            return None


# Import gates shared by the react-router flavours
REACT_ROUTER_IMPORTS: Tuple[str, ...] = (
    "from 'react-router'",
    'from "react-router"',
    "from 'react-router-dom'",
    'from "react-router-dom"',
)
