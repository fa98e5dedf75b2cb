"""Configuration classes for campusnav components."""

import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class GraphConfig:
    """Configuration for LabeledGraph behavior."""

    # Run the full consistency pass after every mutation. Meant for tests.
    check_invariants: bool = field(
        default_factory=lambda: _env_flag("CAMPUSNAV_CHECK_INVARIANTS")
    )


@dataclass
class CampusConfig:
    """Configuration for campus data loading."""

    # Field delimiter of the building and path data files
    delimiter: str = "\t"

    # Whether the first row of each data file is a header
    has_header: bool = True

    # Decimal places used when printing distances and coordinates
    display_precision: int = 0


# Global configuration instances
GRAPH_CONFIG = GraphConfig()
CAMPUS_CONFIG = CampusConfig()
