from .client import OpenAISdkProvider

__all__ = ["OpenAISdkProvider"]
