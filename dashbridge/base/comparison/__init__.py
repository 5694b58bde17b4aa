from .comparator import ProviderComparator, describe_failure

__all__ = ["ProviderComparator", "describe_failure"]
