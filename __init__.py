"""
ENI limits - network interface and IP address limits per EC2 instance type
"""

__version__ = "1.0.0"

from enilimits.core.exceptions import (
    ENILimitsError,
    LimitFormatError,
    LimitParseError,
)
from enilimits.core.models import InstanceTypeInfo, Limits
from enilimits.services.limits import (
    LimitsRegistry,
    get,
    get_default_registry,
    parse_limit_string,
    update_from_ec2_api,
    update_from_user_defined_mappings,
)
