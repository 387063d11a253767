"""Quant Cloud Init.

Resolves the deployment environment and image tag suffix for the current
GitHub ref, validates Quant Cloud access and logs Docker into the Quant Cloud
Image Registry.
"""

__version__ = "0.1.0"
