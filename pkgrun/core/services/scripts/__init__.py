"""
Script services — build the script table and handle unresolved actions.

    from pkgrun.core.services.scripts import build_script_table, suggest
"""

from pkgrun.core.services.scripts.dependency_bins import (
    collect_dependency_bins,
    load_pnp_metadata,
)
from pkgrun.core.services.scripts.fallback import Reporter, run_fallback
from pkgrun.core.services.scripts.suggestion import edit_distance, suggest
from pkgrun.core.services.scripts.table import build_script_table, local_bin_dirs

__all__ = [
    "Reporter",
    "build_script_table",
    "collect_dependency_bins",
    "edit_distance",
    "load_pnp_metadata",
    "local_bin_dirs",
    "run_fallback",
    "suggest",
]
