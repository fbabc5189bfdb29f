"""Feature gate names."""

# Passes the ``group`` and ``dist`` keys through to the build configuration
TEMPLATE_SELECTION = "template_selection"
