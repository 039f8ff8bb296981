"""Default CSS selector for pagination links."""

# Anchors anywhere inside an element with class "pagination"
DEFAULT_SELECTOR = ".pagination a"
