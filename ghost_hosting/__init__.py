"""
ghost_hosting

Collects, validates and persists the deployment configuration for a Ghost
blog on AWS, then hands it to cdktf for provisioning.
"""

__version__ = "0.1.0"
