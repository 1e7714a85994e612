from __future__ import annotations

from services.catalog import CatalogLoader, default_loader


def get_loader() -> CatalogLoader:
    """Overridable in tests through ``app.dependency_overrides``."""
    return default_loader()
