"""Base registry interface for flashlib registries."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

T = TypeVar('T')


class BaseRegistry(ABC, Generic[T]):
    """Abstract base class for registries.

    Defines the interface for registration, retrieval and management that
    every flashlib registry implements.
    """

    @abstractmethod
    def register(self, name: str, obj: T, **metadata) -> None:
        """Register an object with the registry.

        Args:
            name: Name for the object
            obj: The object to register
            **metadata: Additional metadata about the object
        """
        pass

    @abstractmethod
    def get(self, name: str, expected_type: Optional[Type] = None) -> T:
        """Get an object by name with optional type checking.

        Args:
            name: Name of the object to retrieve
            expected_type: Optional type for type checking

        Returns:
            The registered object

        Raises:
            KeyError: If the object doesn't exist
            TypeError: If the object doesn't match the expected type
        """
        pass

    @abstractmethod
    def contains(self, name: str) -> bool:
        """Check if an object exists in the registry."""
        pass

    @abstractmethod
    def list(self, filter_criteria: Optional[Dict[str, Any]] = None) -> List[str]:
        """List registered names matching criteria.

        Args:
            filter_criteria: Optional criteria to filter results

        Returns:
            List of names matching the criteria
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all registrations from the registry."""
        pass

    @abstractmethod
    def remove(self, name: str) -> bool:
        """Remove a registration from the registry.

        Returns:
            True if the object was found and removed, False if not found
        """
        pass

    @abstractmethod
    def update(self, name: str, obj: T, **metadata) -> bool:
        """Update or replace an existing registration.

        Returns:
            True if an existing object was updated, False if this was a new registration
        """
        pass
