from .satisfaction import build_dataset_registry

__all__ = ["build_dataset_registry"]
