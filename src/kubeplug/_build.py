"""Release metadata stamped by the release pipeline.

Left as ``unknown`` in source checkouts.
"""

GIT_COMMIT = "unknown"
