"""
ENI limits registry

Maps instance types to the number of network interfaces they can attach and
the number of IPv4/IPv6 addresses each interface can hold. The registry is
seeded from the static table on first use and can be updated from
user-defined mappings (agent configuration) or from the EC2 API.
"""

import logging
import re
import threading
from typing import Dict, Mapping, Optional, Tuple

from enilimits.core.exceptions import LimitFormatError, LimitParseError
from enilimits.core.models import Limits
from enilimits.core.static_limits import STATIC_ENI_LIMITS
from enilimits.services import InstanceTypeSource
from enilimits.utils.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)

# Plain base-10 integers only, no underscores or non-ASCII digits
_INTEGER_PATTERN = re.compile(r'^[+-]?[0-9]+$')

def parse_limit_string(limit_string: str) -> Limits:
    """
    Parse a limit string of the form "<adapters>,<ipv4>,<ipv6>"

    Whitespace anywhere in the string is ignored, e.g. " 4 , 15 , 15 ".

    Args:
        limit_string: Limit string to parse

    Returns:
        Limits with the three counts set and no hypervisor type

    Raises:
        LimitFormatError: If the string does not hold exactly three fields
        LimitParseError: If a field is not a non-negative integer
    """
    fields = "".join(limit_string.split()).split(",")
    if len(fields) != 3:
        raise LimitFormatError(f"invalid limit value: {limit_string!r}", limit_string)

    values = []
    for field in fields:
        if not _INTEGER_PATTERN.match(field):
            raise LimitParseError(f"invalid integer {field!r} in limit value {limit_string!r}", limit_string)
        value = int(field)
        if value < 0:
            raise LimitParseError(f"negative count {field!r} in limit value {limit_string!r}", limit_string)
        values.append(value)

    return Limits(adapters=values[0], ipv4=values[1], ipv6=values[2])

class LimitsRegistry:
    """Thread-safe registry of per-instance-type ENI limits"""

    def __init__(self, seed: Optional[Mapping[str, Limits]] = None):
        """
        Initialize the registry

        The seed table is not loaded until the first lookup or update.

        Args:
            seed: Table to populate from (default: the static ENI limits)
        """
        self._seed = STATIC_ENI_LIMITS if seed is None else seed
        self._limits: Dict[str, Limits] = {}
        self._lock = ReadWriteLock()
        self._populate_lock = threading.Lock()
        self._populated = False

    @property
    def populated(self) -> bool:
        """Whether the seed table has been loaded"""
        return self._populated

    def _ensure_populated(self) -> None:
        # Flag is only set once population has completed
        if self._populated:
            return
        with self._populate_lock:
            if self._populated:
                return
            self._populate()
            self._populated = True

    def _populate(self) -> None:
        """Load the seed table into the registry"""
        limits = dict(self._seed)
        with self._lock.write_locked():
            self._limits = limits
        logger.debug(f"Populated ENI limits registry with {len(limits)} static entries")

    def get(self, instance_type: str) -> Tuple[Limits, bool]:
        """
        Look up the limits of an instance type

        Args:
            instance_type: Instance type, e.g. "m5.large" (case-sensitive)

        Returns:
            Tuple of (limits, found). When found is False the limits are the
            zero value and must not be used.
        """
        self._ensure_populated()

        with self._lock.read_locked():
            limit = self._limits.get(instance_type)
        if limit is None:
            return Limits(), False
        return limit, True

    def __contains__(self, instance_type: str) -> bool:
        return self.get(instance_type)[1]

    def __len__(self) -> int:
        self._ensure_populated()
        with self._lock.read_locked():
            return len(self._limits)

    def snapshot(self) -> Dict[str, Limits]:
        """Return a copy of all entries"""
        self._ensure_populated()
        with self._lock.read_locked():
            return dict(self._limits)

    def update_from_user_defined_mappings(self, mappings: Mapping[str, str]) -> None:
        """
        Add or overwrite limits from user-defined limit strings

        The batch is applied under one exclusive hold. Parsing stops at the
        first invalid string; entries applied before it are kept.

        Args:
            mappings: Instance type to limit string, e.g. {"m5.large": "4,15,15"}

        Raises:
            LimitFormatError: If a limit string does not hold three fields
            LimitParseError: If a limit string holds an invalid integer
        """
        self._ensure_populated()

        with self._lock.write_locked():
            for instance_type, limit_string in mappings.items():
                self._limits[instance_type] = parse_limit_string(limit_string)
        logger.debug(f"Applied {len(mappings)} user-defined ENI limit mappings")

    def update_from_ec2_api(self, client: InstanceTypeSource, timeout: Optional[float] = None) -> None:
        """
        Add or overwrite limits from the provider's instance type catalog

        The catalog is fetched before any lock is taken. Instance types missing
        from the catalog keep their current limits.

        Args:
            client: Source of the instance type catalog
            timeout: Upper bound in seconds for the fetch

        Raises:
            NetworkError: Propagated from the client; nothing is written
            APIError: Propagated from the client; nothing is written
        """
        instance_types = client.get_instance_types(timeout=timeout)

        self._ensure_populated()

        with self._lock.write_locked():
            for info in instance_types:
                self._limits[info.instance_type] = info.to_limits()
        logger.debug(f"Updated ENI limits for {len(instance_types)} instance types from EC2 API")

_default_registry: Optional[LimitsRegistry] = None
_default_registry_lock = threading.Lock()

def get_default_registry() -> LimitsRegistry:
    """Return the process-wide registry, creating it on first use"""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = LimitsRegistry()
        return _default_registry

def reset_default_registry() -> None:
    """Drop the process-wide registry (for tests)"""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None

def get(instance_type: str) -> Tuple[Limits, bool]:
    """Look up an instance type in the process-wide registry"""
    return get_default_registry().get(instance_type)

def update_from_user_defined_mappings(mappings: Mapping[str, str]) -> None:
    """Apply user-defined limit strings to the process-wide registry"""
    get_default_registry().update_from_user_defined_mappings(mappings)

def update_from_ec2_api(client: InstanceTypeSource, timeout: Optional[float] = None) -> None:
    """Refresh the process-wide registry from the EC2 API"""
    get_default_registry().update_from_ec2_api(client, timeout=timeout)
