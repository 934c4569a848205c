"""
Source id resolution for branch pipelines.

Each segment names its parent segment. CTAP's brancher locates the parent's
output through ``srcid``: the chain of ancestor segment ids, each followed
by ``#``, ending with the parent's own stepSet label.

For segments ``[A, B(parent=A), C(parent=B)]`` labelled ``_x`` the
resolved srcids are ``""``, ``"A#1_x"`` and ``"A#B#1_x"``.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

from ctapgen.core.models import PipeSegment

logger = logging.getLogger(__name__)

SEPARATOR = "#"


@dataclass
class SegmentLink:
    """Resolved hierarchy of one segment.

    Attributes
    ----------
    segment_id : str
        Identifier of the segment
    own_label : str
        ``"1" + step_id``, the label children use to reference this segment
    ancestor_chain : str
        ``#``-terminated ids of all ancestors, oldest first
    srcid : str
        Rendered source id, empty for the first segment
    resolved : bool
        False when the parent reference named no previously declared segment
    """

    segment_id: str
    own_label: str
    ancestor_chain: str
    srcid: str
    resolved: bool = True


def own_label(segment: PipeSegment) -> str:
    return "1" + segment.step_id


def resolve_hierarchy(segments: List[PipeSegment]) -> List[SegmentLink]:
    """
    Compute the srcid of every segment, left to right.

    Parameters
    ----------
    segments : list of PipeSegment
        Segments in declaration order

    Returns
    -------
    links : list of SegmentLink
        One link per segment, same order

    Notes
    -----
    An unknown or self-referencing parent contributes an empty chain and
    label; the link is marked unresolved instead of raising.
    """
    table: Dict[str, Tuple[str, str]] = {}
    links: List[SegmentLink] = []

    for index, segment in enumerate(segments):
        label = own_label(segment)

        if index == 0:
            link = SegmentLink(segment.segment_id, label, "", "")
        else:
            parent = segment.src_id
            resolved = parent in table
            if not resolved:
                logger.debug(
                    "Segment %r refers to undeclared pipe %r", segment.segment_id, parent
                )
            parent_label, parent_chain = table.get(parent, ("", ""))
            chain = parent_chain + parent + SEPARATOR
            link = SegmentLink(
                segment.segment_id, label, chain, chain + parent_label, resolved
            )

        table[segment.segment_id] = (link.own_label, link.ancestor_chain)
        links.append(link)

    return links
