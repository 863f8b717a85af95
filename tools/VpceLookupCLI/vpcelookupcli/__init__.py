"""VpceLookupCLI - operator tooling for the VPC endpoint IP lookup custom resource."""

__version__ = "1.0.0"
