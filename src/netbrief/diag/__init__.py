"""Capability-aware diagnostic sections for netbrief."""

# Submodules are not imported here so that the styled console dependencies
# are only loaded once the startup check has confirmed they exist.

__all__: list[str] = []
