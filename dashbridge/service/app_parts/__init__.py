"""Request bodies and route handlers backing ``dashbridge.service.app``."""
