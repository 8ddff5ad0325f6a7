"""Upgrade differential engine — installed artifacts vs. target artifacts.

For every target artifact the installed list is scanned for the same
artifact (see :func:`is_same_artifact`). An installed artifact with the
exact same id is preferred, and each installed artifact pairs with at most
one target:

- target strictly higher  -> platform upgrade, or an update entry
- target strictly lower   -> platform downgrade, or a downgrade entry
- equal (including two equal snapshots) -> nothing
- no installed match      -> add

Installed artifacts left unpaired are deleted, except the platform
artifact: removing it aborts the whole computation with
:class:`CoreArtifactDeletionError`.

The engine is a pure function. Collections are built locally and the frozen
:class:`UpgradeDifferential` is only constructed once every check passed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from distrosync.models.artifacts import Artifact
from distrosync.models.descriptor import DistroDescriptor
from distrosync.models.differential import ArtifactChange, UpgradeDifferential
from distrosync.models.versioning import Comparison, compare

logger = logging.getLogger(__name__)

SameArtifactPredicate = Callable[[Artifact, Artifact], bool]


class CoreArtifactDeletionError(RuntimeError):
    """Raised when a differential would remove the platform artifact."""

    def __init__(self, artifact: Artifact) -> None:
        self.artifact = artifact
        super().__init__(
            f"Only modules can be deleted; removing the platform artifact "
            f"{artifact.coordinate} is not possible"
        )


def is_same_artifact(left: Artifact, right: Artifact) -> bool:
    """Identity rule: equal short names (artifact id up to the first ``-``)."""
    return left.identity == right.identity


def _claim(
    installed: Sequence[Artifact],
    new: Artifact,
    claimed: set[int],
    same_artifact: SameArtifactPredicate,
) -> int | None:
    """Index of the installed artifact *new* replaces, marked as claimed.

    An exact ``artifact_id`` match wins over the first predicate match, so
    ``appointment-omod`` and ``appointment-scheduling-omod`` pair with
    themselves. Each installed artifact is claimed at most once.
    """
    candidates = [
        index
        for index, old in enumerate(installed)
        if index not in claimed and same_artifact(old, new)
    ]
    if not candidates:
        return None
    exact = [i for i in candidates if installed[i].artifact_id == new.artifact_id]
    index = exact[0] if exact else candidates[0]
    claimed.add(index)
    return index


def compute_differential(
    installed: Sequence[Artifact],
    target: Sequence[Artifact],
    *,
    same_artifact: SameArtifactPredicate = is_same_artifact,
) -> UpgradeDifferential:
    """Compute the changes that move *installed* to *target*.

    Raises
    ------
    CoreArtifactDeletionError
        If the installed platform artifact has no counterpart in *target*.
    """
    platform_artifact: Artifact | None = None
    platform_upgraded: bool | None = None
    updates: list[ArtifactChange] = []
    downgrades: list[ArtifactChange] = []
    to_add: list[Artifact] = []
    to_delete: list[Artifact] = []

    claimed: set[int] = set()

    for new in target:
        index = _claim(installed, new, claimed, same_artifact)
        if index is None:
            logger.debug("Adding %s", new.coordinate)
            to_add.append(new)
            continue

        old = installed[index]
        direction = compare(new.version, old.version)
        if direction is Comparison.EQUAL:
            logger.debug("Unchanged %s", new.coordinate)
            continue

        upgrade = direction is Comparison.HIGHER
        if new.is_platform:
            platform_artifact = new
            platform_upgraded = upgrade
            logger.debug(
                "Platform %s %s -> %s",
                "upgrade" if upgrade else "downgrade",
                old.version,
                new.version,
            )
        elif upgrade:
            updates.append(ArtifactChange(old=old, new=new))
        else:
            downgrades.append(ArtifactChange(old=old, new=new))

    for index, old in enumerate(installed):
        if index in claimed:
            continue
        if old.is_platform:
            raise CoreArtifactDeletionError(old)
        logger.debug("Deleting %s", old.coordinate)
        to_delete.append(old)

    differential = UpgradeDifferential(
        platform_artifact=platform_artifact,
        platform_upgraded=platform_upgraded,
        updates=updates,
        downgrades=downgrades,
        to_add=to_add,
        to_delete=to_delete,
    )
    logger.info(
        "Differential: platform=%s updates=%d downgrades=%d add=%d delete=%d",
        platform_artifact.version if platform_artifact else "unchanged",
        len(updates),
        len(downgrades),
        len(to_add),
        len(to_delete),
    )
    return differential


def calculate_update_differential(
    installed: Sequence[Artifact],
    descriptor: DistroDescriptor,
    *,
    same_artifact: SameArtifactPredicate = is_same_artifact,
) -> UpgradeDifferential:
    """Differential between an installed server and a descriptor's artifacts."""
    return compute_differential(
        installed, descriptor.target_artifacts(), same_artifact=same_artifact
    )
