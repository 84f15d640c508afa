"""kubefilter -- predicate filters for Kubernetes events."""

__version__ = "0.1.0"
