"""Attachment propagation: glue ``Attached_`` nodes to their pivots."""

import logging
from typing import Iterable, Optional

from rigforge.constants import ATTACHED_PREFIX, PIVOT_PREFIX
from rigforge.core.scene_graph import SceneNode
from rigforge.naming.parser import AttachmentDescriptor

logger = logging.getLogger(__name__)


def resolve_driver(
    attachment: AttachmentDescriptor, index: dict[str, SceneNode],
) -> Optional[SceneNode]:
    """Find the node an attachment follows: ``Pivot_<name>``, then ``Attached_<name>``."""
    driver = index.get(f"{PIVOT_PREFIX}{attachment.target_name}")
    if driver is None:
        driver = index.get(f"{ATTACHED_PREFIX}{attachment.target_name}")
    return driver


def propagate_attachments(
    attachments: Iterable[AttachmentDescriptor],
    index: dict[str, SceneNode],
) -> int:
    """Move every attachment onto its driver's world position.

    One flat pass in list order.  The driver's world position is expressed
    in the attachment's parent space and written as its local position.
    Dangling references are left where they are.  Returns the number of
    attachments moved.
    """
    moved = 0
    for attachment in attachments:
        node = attachment.node
        if node is None:
            continue
        driver = resolve_driver(attachment, index)
        if driver is None:
            logger.debug("No pivot for %r; left in place", attachment.full_name)
            continue

        world_pos = driver.get_world_position()
        if node.parent is not None:
            local_pos = node.parent.world_to_local(world_pos)
        else:
            local_pos = world_pos
        node.set_position(*local_pos)
        moved += 1
    return moved
