"""Services layered on top of the Multikey converters."""
