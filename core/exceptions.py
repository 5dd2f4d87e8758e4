"""
Custom exceptions for ENI limits
"""

class ENILimitsError(Exception):
    """Base exception for all ENI limits errors"""
    pass

class ConfigurationError(ENILimitsError):
    """Error in configuration settings"""
    pass

class NetworkError(ENILimitsError):
    """Network connectivity issues"""
    def __init__(self, message, service=None):
        self.service = service
        super().__init__(message)

class APIError(ENILimitsError):
    """Errors from external APIs"""
    def __init__(self, service, message, status_code=None, error_code=None):
        self.service = service
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(f"{service} API error: {message}")

class RateLimitError(APIError):
    """Request throttled by an API"""
    def __init__(self, service, error_code=None, status_code=429):
        message = f"Rate limit exceeded for {service}"
        if error_code:
            message += f" ({error_code})"
        super().__init__(service, message, status_code=status_code, error_code=error_code)

class LimitStringError(ENILimitsError):
    """Error converting a limit string into a limit entry"""
    def __init__(self, message, value=None):
        self.value = value
        super().__init__(message)

class LimitFormatError(LimitStringError):
    """Limit string does not have exactly three comma-separated fields"""
    pass

class LimitParseError(LimitStringError):
    """Limit string field is not a valid non-negative integer"""
    pass
