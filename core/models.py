"""
Data models for ENI limits
"""

from dataclasses import dataclass, asdict
from typing import Dict, Optional, Any

@dataclass(frozen=True)
class Limits:
    """Network interface limits of one instance type"""
    adapters: int = 0
    ipv4: int = 0
    ipv6: int = 0
    hypervisor_type: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert limits to a plain dictionary"""
        return asdict(self)

@dataclass
class InstanceTypeInfo:
    """Instance type description as reported by the provider catalog"""
    instance_type: str
    maximum_network_interfaces: Optional[int] = None
    ipv4_addresses_per_interface: Optional[int] = None
    ipv6_addresses_per_interface: Optional[int] = None
    hypervisor: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "InstanceTypeInfo":
        """
        Build from one item of a DescribeInstanceTypes response

        Args:
            item: Entry of the ``InstanceTypes`` list

        Returns:
            InstanceTypeInfo with missing fields left unset
        """
        network_info = item.get("NetworkInfo") or {}
        return cls(
            instance_type=item["InstanceType"],
            maximum_network_interfaces=network_info.get("MaximumNetworkInterfaces"),
            ipv4_addresses_per_interface=network_info.get("Ipv4AddressesPerInterface"),
            ipv6_addresses_per_interface=network_info.get("Ipv6AddressesPerInterface"),
            hypervisor=item.get("Hypervisor"),
        )

    def to_limits(self) -> Limits:
        """
        Convert to a limits entry

        Unset counts become 0 and an unset hypervisor becomes an empty string.
        """
        return Limits(
            adapters=self.maximum_network_interfaces or 0,
            ipv4=self.ipv4_addresses_per_interface or 0,
            ipv6=self.ipv6_addresses_per_interface or 0,
            hypervisor_type=self.hypervisor or "",
        )
