"""CloudFront distribution, origin, function and access-control models driven by Kubernetes Ingresses."""

__version__ = "0.1.0"

__all__ = [
    "aws_models",
    "cdn_class",
    "cdn_status",
    "certificate",
    "distribution",
    "functions",
    "ingress_ref",
    "oac",
    "oac_lister",
    "origin",
    "settings",
]