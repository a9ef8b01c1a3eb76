"""
Serialization of the Huffman tree into a node table.

Layout (little-endian):
    node_count          uint16
    node_count records in preorder, each:
        id              uint16
        symbol          uint8   (0 for internal nodes)
        left_child_id   uint16  (0 for leaves)
        right_child_id  uint16  (0 for leaves)

The first record is the root. Codes are not stored, the decoder
regenerates them from the tree shape.
"""

import struct
from typing import BinaryIO

from huffcoder.errors import HeaderError, TreeTableError
from huffcoder.huffman_tree import MAX_NODES, NO_CHILD, NO_SYMBOL, HuffmanTree

ID_STRUCT = struct.Struct("<H")
RECORD_STRUCT = struct.Struct("<HBHH")


def write_tree_table(tree: HuffmanTree, out_stream: BinaryIO) -> int:
    """
    Write the node count and one record per node in preorder.

    Args:
        tree: Built tree with a root
        out_stream: Stream to write the table to

    Returns:
        Number of bytes written
    """
    written = out_stream.write(ID_STRUCT.pack(tree.node_count))
    for node in tree.preorder():
        symbol = 0 if node.symbol == NO_SYMBOL else node.symbol
        written += out_stream.write(
            RECORD_STRUCT.pack(node.id, symbol, node.left, node.right)
        )
    return written


def read_tree_table(in_stream: BinaryIO) -> HuffmanTree:
    """
    Read a node table and rebuild the tree, then regenerate codes.

    Args:
        in_stream: Stream positioned right after the symbol count header

    Returns:
        The reconstructed HuffmanTree

    Raises:
        HeaderError: If the node count is missing or out of range
        TreeTableError: If the records do not form a strict binary tree
    """
    raw = in_stream.read(ID_STRUCT.size)
    if len(raw) != ID_STRUCT.size:
        raise HeaderError("Missing node count")
    (node_count,) = ID_STRUCT.unpack(raw)
    if not 1 <= node_count <= MAX_NODES:
        raise HeaderError(f"Invalid node count: {node_count}")

    # every id is allocated before child references are resolved
    tree = HuffmanTree()
    for _ in range(node_count):
        tree.new_node(0)

    seen = set()
    for i in range(node_count):
        raw = in_stream.read(RECORD_STRUCT.size)
        if len(raw) != RECORD_STRUCT.size:
            raise TreeTableError(
                f"Node table truncated after {i} of {node_count} records"
            )
        node_id, symbol, left, right = RECORD_STRUCT.unpack(raw)

        _check_id(node_id, node_count, "Node")
        if node_id in seen:
            raise TreeTableError(f"Node {node_id} is defined twice")
        seen.add(node_id)
        if i == 0:
            tree.root_id = node_id

        node = tree.node(node_id)
        if (left == NO_CHILD) != (right == NO_CHILD):
            raise TreeTableError(f"Node {node_id} has exactly one child")
        if left == NO_CHILD:
            node.symbol = symbol
        else:
            _check_id(left, node_count, "Left child")
            _check_id(right, node_count, "Right child")
            node.left, node.right = left, right

    _check_shape(tree)
    tree.codes_generation()
    return tree


def _check_id(node_id: int, node_count: int, what: str) -> None:
    if not 1 <= node_id <= node_count:
        raise TreeTableError(
            f"{what} id {node_id} is outside the table (1..{node_count})"
        )


def _check_shape(tree: HuffmanTree) -> None:
    """
    Every node must be reached exactly once from the root,
    and leaf symbols must be unique.
    """
    visited = set()
    symbols = set()
    stack = [tree.root_id]
    while stack:
        node_id = stack.pop()
        if node_id in visited:
            raise TreeTableError(f"Node {node_id} is referenced more than once")
        visited.add(node_id)
        node = tree.node(node_id)
        if node.is_leaf():
            if node.symbol in symbols:
                raise TreeTableError(f"Symbol {node.symbol} has more than one leaf")
            symbols.add(node.symbol)
        else:
            stack.extend((node.right, node.left))

    if len(visited) != tree.node_count:
        raise TreeTableError(
            f"{tree.node_count - len(visited)} nodes are not reachable from the root"
        )
