"""Business operations on top of the external adapters."""
