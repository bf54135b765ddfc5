"""A simulated SSD with a write-back command buffer, and test-shell commands that drive an SSD program."""

__version__ = "0.1.0"