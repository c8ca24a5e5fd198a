"""Single-pass classification of a node tree by standard naming."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from rigforge.constants import FEATURE_PREFIX
from rigforge.core.scene_graph import SceneNode
from rigforge.naming.parser import (
    AttachmentDescriptor, AttachmentKind, FeatureDescriptor,
    parse_attachment_name, parse_feature_name,
)

logger = logging.getLogger(__name__)

NodeIndex = dict[str, SceneNode]


class SkipReason(Enum):
    MALFORMED_FEATURE = "too few segments after Feature_"
    NO_AXES = "no X/Y/Z axis in feature name"
    UNSUPPORTED_OPERATION = "operation has no control"
    DUPLICATE_NAME = "duplicate name; later node wins the index"


@dataclass(frozen=True)
class SkippedName:
    name: str
    reason: SkipReason


@dataclass
class ScanResult:
    """Classified nodes of one scanned tree."""
    features: list[FeatureDescriptor] = field(default_factory=list)
    attachments: list[AttachmentDescriptor] = field(default_factory=list)
    pivots: list[AttachmentDescriptor] = field(default_factory=list)
    index: NodeIndex = field(default_factory=dict)
    skipped: list[SkippedName] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.features and not self.attachments

    def skipped_names(self, reason: SkipReason) -> list[str]:
        return [s.name for s in self.skipped if s.reason is reason]

    def summary(self) -> str:
        return (
            f"{len(self.features)} features, {len(self.attachments)} attachments, "
            f"{len(self.pivots)} pivots"
        )


def scan_scene(root: SceneNode) -> ScanResult:
    """Walk *root* once and classify every named node.

    Feature parsing takes precedence over attachment parsing.  Every named
    node lands in the index; the scene itself is never modified.
    """
    result = ScanResult()

    def _classify(node: SceneNode) -> None:
        name = node.name
        if not name:
            return

        if name in result.index:
            result.skipped.append(SkippedName(name, SkipReason.DUPLICATE_NAME))
        result.index[name] = node

        feature = parse_feature_name(name)
        if feature is not None:
            result.features.append(replace(feature, node=node))
            if not feature.axes:
                result.skipped.append(SkippedName(name, SkipReason.NO_AXES))
            elif feature.kind is None:
                result.skipped.append(SkippedName(name, SkipReason.UNSUPPORTED_OPERATION))
            return
        if name.startswith(FEATURE_PREFIX):
            result.skipped.append(SkippedName(name, SkipReason.MALFORMED_FEATURE))
            return

        attachment = parse_attachment_name(name)
        if attachment is None:
            return
        attachment = replace(attachment, node=node)
        if attachment.kind is AttachmentKind.ATTACHED:
            result.attachments.append(attachment)
        else:
            result.pivots.append(attachment)

    root.traverse(_classify)

    if result.is_empty:
        logger.info("No standard naming objects found under %r", root.name)
    for skipped in result.skipped:
        logger.debug("Skipped %r: %s", skipped.name, skipped.reason.value)
    return result
