from typing import Callable, Iterable, List


def smaller_or_equal(node, pivot) -> bool:
    """Check whether ``node`` weighs no more than ``pivot``.

    Used when ordering the initial leaves, so a newcomer is placed after
    every node of equal frequency.

    :param node: Node already in the forest.
    :type node: huffman.CodeNode
    :param pivot: Node being inserted.
    :type pivot: huffman.CodeNode
    :returns: ``True`` if ``node.freq <= pivot.freq``.
    :rtype: bool
    """
    return node.freq <= pivot.freq


def smaller(node, pivot) -> bool:
    """Check whether ``node`` weighs strictly less than ``pivot``.

    Used when re-inserting merged subtrees, so the new subtree stops in
    front of the first node of equal frequency.

    :param node: Node already in the forest.
    :type node: huffman.CodeNode
    :param pivot: Node being inserted.
    :type pivot: huffman.CodeNode
    :returns: ``True`` if ``node.freq < pivot.freq``.
    :rtype: bool
    """
    return node.freq < pivot.freq


def insert(node, forest: List, pred: Callable) -> None:
    """Insert ``node`` into ``forest`` where ``pred`` first stops holding.

    :param node: Node to insert.
    :type node: huffman.CodeNode
    :param forest: Frequency-sorted list of nodes, modified in place.
    :type forest: List[huffman.CodeNode]
    :param pred: One of :func:`smaller` or :func:`smaller_or_equal`.
    :type pred: Callable[[CodeNode, CodeNode], bool]
    :returns: None
    :rtype: None
    """
    index = 0
    while index < len(forest) and pred(forest[index], node):
        index += 1
    forest.insert(index, node)


def insertion_sort(nodes: Iterable) -> List:
    """Return ``nodes`` sorted ascending by frequency, ties in input order."""
    result: List = []
    for node in nodes:
        insert(node, result, smaller_or_equal)
    return result
