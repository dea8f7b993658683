"""State managers for handling application-wide mutable state.

This module provides task-safe state management using asyncio.Lock.
All state managers inherit from StateManager ABC. Nothing here is
persisted; state lives for the process lifetime only.
"""

import asyncio
from abc import ABC, abstractmethod

from weather_lookup.models.weather import Coordinates, PresentationModel, TemperatureUnit, WeatherSnapshot
from weather_lookup.presentation import derive


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide serialized access to mutable application state.
    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during app shutdown)."""
        pass


class WeatherStateManager(StateManager):
    """Holds the selected temperature unit and the last fetched snapshot.

    The presentation itself is never stored; it is re-derived from the
    snapshot and the unit on every read.
    """

    def __init__(self):
        """Initialize the weather state manager."""
        self._unit: TemperatureUnit = TemperatureUnit.CELSIUS
        self._snapshot: WeatherSnapshot | None = None
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Initialize the weather state manager."""
        pass

    async def cleanup(self) -> None:
        """Reset to defaults on shutdown."""
        async with self._lock:
            self._unit = TemperatureUnit.CELSIUS
            self._snapshot = None

    async def get_unit(self) -> TemperatureUnit:
        """Get the currently selected unit."""
        async with self._lock:
            return self._unit

    async def set_unit(self, unit: TemperatureUnit) -> None:
        """Select the unit used for subsequent presentations."""
        async with self._lock:
            self._unit = unit

    async def get_snapshot(self) -> WeatherSnapshot | None:
        """Get the last fetched snapshot, or None if nothing was fetched yet."""
        async with self._lock:
            return self._snapshot

    async def set_snapshot(self, snapshot: WeatherSnapshot) -> None:
        """Replace the last fetched snapshot."""
        async with self._lock:
            self._snapshot = snapshot

    async def current_presentation(self, hour: int) -> tuple[WeatherSnapshot, TemperatureUnit, PresentationModel] | None:
        """Derive the presentation for the stored snapshot and unit.

        Args:
            hour: Local hour of day for the icon's day/night fallback

        Returns:
            (snapshot, unit, presentation) read under one lock, or None if no snapshot exists
        """
        async with self._lock:
            snapshot, unit = self._snapshot, self._unit
        if snapshot is None:
            return None
        return snapshot, unit, derive(snapshot, unit, hour)


class LocationStateManager(StateManager):
    """Tracks the last device location reported by the client."""

    def __init__(self):
        """Initialize the location state manager."""
        self._location: Coordinates | None = None
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Initialize the location state manager."""
        pass

    async def cleanup(self) -> None:
        """Forget the location on shutdown."""
        async with self._lock:
            self._location = None

    async def get_location(self) -> Coordinates | None:
        """Get the last reported location, or None if none was reported."""
        async with self._lock:
            return self._location

    async def set_location(self, location: Coordinates) -> None:
        """Record a new device location."""
        async with self._lock:
            self._location = location
