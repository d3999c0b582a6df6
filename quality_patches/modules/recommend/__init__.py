"""
Recommend module - Version-filtered lookup in the quality patches catalog.
"""

from .catalog import PatchCatalogEntry, load_patch_catalog, parse_catalog_entry
from .recommend import filter_catalog, recommended_patches, RecommendPatchesModule
from .version import MAGENTO_PACKAGES, detect_magento_version, normalize_version

__all__ = [
    "PatchCatalogEntry",
    "load_patch_catalog",
    "parse_catalog_entry",
    "filter_catalog",
    "recommended_patches",
    "RecommendPatchesModule",
    "MAGENTO_PACKAGES",
    "detect_magento_version",
    "normalize_version",
]
