"""Reply tree construction.

The store holds comments as flat records linked by parent_id. Readers get a
forest (ordered root comments with nested replies) rebuilt from a full
snapshot on every fetch.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

import logfire

from board.domain.model import Comment
from board.domain.value import CommentId


@dataclass
class CommentNode:
    """Node in a comment reply tree.

    A view over one comment and its direct replies; never persisted.
    """

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id


def build_comment_forest(comments: Sequence[Comment]) -> list[CommentNode]:
    """Build the reply forest from a flat comment snapshot.

    Algorithm (two passes, O(n)):
    1. Map every comment id to an empty node (first record wins on duplicates)
    2. Walk the records again in the same order; roots are collected in
       encounter order, replies are appended to their parent's node

    A reply whose parent is missing from the snapshot is an orphan: it is
    logged and left out, as is everything below it. A bad record never
    fails the read.

    Args:
        comments: All comments, ordered by created_at ascending

    Returns:
        Root nodes in input order, replies nested in input order
    """
    nodes: dict[CommentId, CommentNode] = {}
    for comment in comments:
        if comment.id in nodes:
            logfire.warn("Duplicate comment id in snapshot", comment_id=str(comment.id))
            continue
        nodes[comment.id] = CommentNode(comment=comment)

    roots: list[CommentNode] = []
    placed: set[CommentId] = set()
    for comment in comments:
        node = nodes[comment.id]
        if node.comment is not comment or comment.id in placed:
            continue
        placed.add(comment.id)

        if comment.parent_id is None:
            roots.append(node)
            continue

        parent = nodes.get(comment.parent_id)
        if parent is None:
            logfire.warn(
                "Orphaned comment omitted from tree",
                comment_id=str(comment.id),
                parent_id=str(comment.parent_id),
            )
            continue
        parent.replies.append(node)

    return roots


def iter_forest(forest: Sequence[CommentNode]) -> Iterator[tuple[CommentNode, int]]:
    """Yield every node with its depth, pre-order, without recursion."""
    stack = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))


def count_nodes(forest: Sequence[CommentNode]) -> int:
    """Total number of nodes in a forest."""
    return sum(1 for _ in iter_forest(forest))
