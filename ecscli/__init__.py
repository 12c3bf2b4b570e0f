"""Home-directory, config-destination, cache, AMI, version and compose helpers for a container cluster CLI."""

__version__ = "0.3.0"