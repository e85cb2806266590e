"""
guard

Deployment tooling for the guard Kubernetes webhook authenticator.
"""

__version__ = "0.1.0"
