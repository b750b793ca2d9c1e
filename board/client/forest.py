"""Walks over a fetched reply forest."""

from collections.abc import Iterator, Sequence

from board.application.usecase.comment import CommentNodeResponse


def walk(
    forest: Sequence[CommentNodeResponse],
) -> Iterator[tuple[CommentNodeResponse, int]]:
    """Yield (node, depth) for every node in pre-order, roots at depth 0."""
    stack = [(node, 0) for node in reversed(forest)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((reply, depth + 1) for reply in reversed(node.replies))


def node_ids(forest: Sequence[CommentNodeResponse]) -> set[str]:
    return {node.comment_id for node, _ in walk(forest)}
