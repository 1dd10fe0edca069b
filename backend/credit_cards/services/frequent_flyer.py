"""Frequent flyer number validation capability consumed by the evaluator."""

import inspect
import logging
import weakref
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from credit_cards.core.enums import ValidationMode

logger = logging.getLogger(__name__)

LookupListener = Callable[[], None]
ListenerRef = Callable[[], Optional[LookupListener]]


class FrequentFlyerNumberValidator(ABC):
    """
    Abstract base class for frequent flyer number validation services.

    Concrete validators supply the license key of the underlying service
    subscription and the lookup itself. This base class owns the validation
    mode and notifies registered listeners once per is_valid() call, whether
    the lookup returned or raised. Bound-method listeners are held weakly so
    a subscriber is dropped once its owner is garbage collected.
    """

    def __init__(self, validation_mode: ValidationMode = ValidationMode.QUICK):
        """
        Initialize the validator.

        Args:
            validation_mode: Initial lookup depth
        """
        self._validation_mode = validation_mode
        self._lookup_listeners: List[ListenerRef] = []

    @property
    @abstractmethod
    def license_key(self) -> str:
        """License key of the validation service ("OK", "EXPIRED", ...)."""

    @property
    def validation_mode(self) -> ValidationMode:
        return self._validation_mode

    @validation_mode.setter
    def validation_mode(self, mode: ValidationMode) -> None:
        self._validation_mode = mode

    @property
    def lookup_listener_count(self) -> int:
        """Number of listeners still alive."""
        return len(self._live_listeners())

    def add_lookup_listener(self, listener: LookupListener) -> None:
        """Register a callback fired after every completed lookup."""
        self._live_listeners()
        if inspect.ismethod(listener):
            self._lookup_listeners.append(weakref.WeakMethod(listener))
        else:
            self._lookup_listeners.append(lambda: listener)

    def remove_lookup_listener(self, listener: LookupListener) -> None:
        """
        Unregister a previously added callback.

        Raises:
            ValueError: If the listener was never registered
        """
        for ref in self._lookup_listeners:
            if ref() == listener:
                self._lookup_listeners.remove(ref)
                return
        raise ValueError("Lookup listener is not registered")

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        Check a frequent flyer number against the validation service.

        Args:
            frequent_flyer_number: Number to check, passed through unmodified

        Returns:
            True if the service accepts the number
        """
        try:
            return self._lookup(frequent_flyer_number)
        finally:
            self._notify_lookup_performed()

    @abstractmethod
    def _lookup(self, frequent_flyer_number: Optional[str]) -> bool:
        """Perform the actual lookup; may raise on service failure."""

    def _live_listeners(self) -> List[LookupListener]:
        # Prune references whose owners were collected
        live = []
        alive_refs = []
        for ref in self._lookup_listeners:
            listener = ref()
            if listener is not None:
                live.append(listener)
                alive_refs.append(ref)
        self._lookup_listeners = alive_refs
        return live

    def _notify_lookup_performed(self) -> None:
        listeners = self._live_listeners()
        logger.debug(
            f"Lookup performed in {self._validation_mode.value} mode, "
            f"notifying {len(listeners)} listener(s)"
        )
        for listener in listeners:
            listener()
