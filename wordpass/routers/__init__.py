# wordpass API routers
from wordpass.routers import health, passphrase

__all__ = ["health", "passphrase"]
