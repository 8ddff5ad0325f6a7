"""distrosync: distribution resolution and upgrade differentials.

Resolves a distro specifier (descriptor file or artifact coordinate) into a
descriptor, and computes the additions, removals, upgrades and downgrades
needed to bring an installed server to that descriptor.
"""

__version__ = "0.1.0"
__description__ = "Distribution resolution and upgrade differential engine"

from distrosync.core.differential import compute_differential
from distrosync.core.resolver import DistroResolver
from distrosync.models.versioning import Version, compare

__all__ = ["DistroResolver", "Version", "compare", "compute_differential", "__version__"]
