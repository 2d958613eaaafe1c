# wordpass middleware
from wordpass.middleware.rate_limit import RateLimitConfig, RateLimiter

__all__ = ["RateLimitConfig", "RateLimiter"]
