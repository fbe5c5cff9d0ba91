"""
Base Service Classes and Utilities

This module provides the foundation for all service layer implementations including
base classes, error handling, result types, and common service patterns.
"""

import logging
from typing import Any, Dict, Optional, Generic, TypeVar, Callable
from datetime import datetime, timezone
from abc import ABC
from dataclasses import dataclass
from functools import wraps

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, error_code: str = None, details: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "SERVICE_ERROR"
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)


class ValidationError(ServiceError):
    """Malformed input: empty or oversized text, negative window."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value})
        self.field = field
        self.value = value


class NotFoundError(ServiceError):
    """Resource not found error."""

    def __init__(self, resource_type: str, identifier: Any):
        message = f"{resource_type} not found: {identifier}"
        super().__init__(message, "NOT_FOUND", {"resource_type": resource_type, "identifier": identifier})
        self.resource_type = resource_type
        self.identifier = identifier


class MembershipError(ServiceError):
    """Caller is not a member of the group it acts on."""

    def __init__(self, group_id: Any, principal: Any):
        super().__init__(
            f"Caller is not a member of group {group_id}",
            "MEMBERSHIP_ERROR",
            {"group_id": group_id, "principal": principal}
        )


class CapacityError(ServiceError):
    """Group has reached its member limit."""

    def __init__(self, group_id: Any, limit: int):
        super().__init__(
            f"Group {group_id} is full ({limit} members)",
            "CAPACITY_ERROR",
            {"group_id": group_id, "limit": limit}
        )
        self.limit = limit


@dataclass
class ServiceResult(Generic[T]):
    """Standard result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: Optional[ServiceError] = None
    metadata: Dict[str, Any] = None

    def __post_init__(self):
        if self.metadata is None:
            self.metadata = {}

    @classmethod
    def success_result(cls, data: T, metadata: Dict[str, Any] = None) -> 'ServiceResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata or {})

    @classmethod
    def error_result(cls, error: ServiceError, metadata: Dict[str, Any] = None) -> 'ServiceResult[T]':
        """Create an error result."""
        return cls(success=False, error=error, metadata=metadata or {})

    def unwrap(self) -> T:
        """Return the data of a successful result, raise the error otherwise."""
        if not self.success:
            raise self.error
        return self.data


def service_method(func: Callable) -> Callable:
    """Decorator for service methods with automatic error handling and logging."""

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        method_name = f"{self.__class__.__name__}.{func.__name__}"
        logger.info(f"[{method_name}] Starting operation")

        try:
            # Validate service state
            if hasattr(self, '_validate_service_state'):
                self._validate_service_state()

            # Execute the method
            result = func(self, *args, **kwargs)

            # Log success
            if isinstance(result, ServiceResult):
                if result.success:
                    logger.info(f"[{method_name}] Operation completed successfully")
                else:
                    logger.error(f"[{method_name}] Operation failed: {result.error.message}")
            else:
                logger.info(f"[{method_name}] Operation completed")

            return result

        except ServiceError as e:
            logger.error(f"[{method_name}] Service error: {e.message}")
            return ServiceResult.error_result(e)
        except Exception as e:
            logger.exception(f"[{method_name}] Unexpected error: {e}")
            error = ServiceError(f"Internal error in {method_name}: {str(e)}", "INTERNAL_ERROR")
            return ServiceResult.error_result(error)

    return wrapper


class BaseService(ABC):
    """Abstract base class for all services."""

    def __init__(self, name: str = None):
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"services.{self.name}")
        self._initialized = False
        self._configuration = {}

    def initialize(self, config: Dict[str, Any] = None) -> None:
        """Initialize the service with configuration."""
        self._configuration = config or {}
        self._initialized = True
        self.logger.info(f"Service {self.name} initialized")

    def _validate_service_state(self) -> None:
        """Validate that the service is properly initialized."""
        if not self._initialized:
            raise ServiceError(f"Service {self.name} not initialized", "SERVICE_NOT_INITIALIZED")

    def get_config(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._configuration.get(key, default)
