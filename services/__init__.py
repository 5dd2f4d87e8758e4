"""
ENI limits service interfaces
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from enilimits.core.models import InstanceTypeInfo

class InstanceTypeSource(ABC):
    """Interface for sources of the provider's instance type catalog"""

    @abstractmethod
    def get_instance_types(self, timeout: Optional[float] = None) -> List[InstanceTypeInfo]:
        """
        Fetch the current instance type catalog

        Args:
            timeout: Upper bound in seconds for the whole fetch (None for no bound)

        Returns:
            List of InstanceTypeInfo objects, one per instance type

        Raises:
            NetworkError: If the source cannot be reached
            APIError: If the source rejects the request
        """
        pass
