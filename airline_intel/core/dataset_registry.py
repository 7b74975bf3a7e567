from __future__ import annotations

import logging
from typing import Dict, List, Type, TypeVar

from .bundles import BUNDLE_TYPES, DatasetBundle
from .exceptions import NotFoundError, UnsupportedShapeError

logger = logging.getLogger(__name__)

B = TypeVar("B")


class DatasetRegistry:
    """
    Registry of the named, read-only dataset bundles the reports are drawn from

    Purpose:
    - Decouples the report pages from where the bundles come from: pages only know bundle names
    - Single place where bundle names are resolved, so a page/bundle mismatch fails loudly

    Design Notes:
    - Bundles are registered once at startup, then the registry is frozen
    - Enforces invariants:
        * only known bundle shapes can be registered
        * each bundle name is unique across the registry
        * no registration after {@link freeze()}
    - Reads never mutate anything, so a frozen registry can be shared across requests
    """

    def __init__(self):
        self._bundles: Dict[str, DatasetBundle] = {}
        self._frozen = False

    def register(self, name: str, bundle: DatasetBundle) -> None:
        """
        Register a bundle under the given name

        :param name: the lookup name used by report pages
        :param bundle: one of the bundle shapes from {@link airline_intel.core.bundles}

        Raises:
            RuntimeError: if the registry is already frozen
            TypeError: if bundle is not a known bundle shape
            ValueError: if a bundle with the same name already exists
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register '{name}': registry is frozen")

        if not isinstance(bundle, BUNDLE_TYPES):
            raise TypeError(f"Bundle '{name}' has unsupported type {type(bundle).__name__}")

        if name in self._bundles:
            raise ValueError(f"Bundle '{name}' already registered")

        self._bundles[name] = bundle
        logger.debug("bundle_registered", extra={"bundle": name, "shape": type(bundle).__name__})

    def freeze(self) -> DatasetRegistry:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> DatasetBundle:
        """
        Look up a bundle by name

        Raises:
            NotFoundError: if no bundle with the given name exists in the registry
        """
        try:
            return self._bundles[name]
        except KeyError:
            raise NotFoundError(f"Bundle '{name}' not found") from None

    def get_typed(self, name: str, expected: Type[B]) -> B:
        """
        Same as {@link get()}, but also checks the bundle shape.

        Raises:
            NotFoundError: unknown name
            UnsupportedShapeError: the bundle exists but is not an `expected` instance
        """
        bundle = self.get(name)
        if not isinstance(bundle, expected):
            raise UnsupportedShapeError(
                f"Bundle '{name}' is a {type(bundle).__name__}, expected {expected.__name__}"
            )
        return bundle

    def names(self) -> List[str]:
        return list(self._bundles.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)
