"""
Huffman tree - node arena, frequency counting,
tree building and code generation
"""

import heapq
from collections import defaultdict
from typing import Iterator

from bitarray import bitarray

# id 0 never names a real node; it marks "no child"
NO_CHILD = 0
# internal nodes carry no byte value
NO_SYMBOL = -1
# 256 leaves + 255 internal nodes
MAX_NODES = 511


class Node:
    """
    Class object for Node in Huffman's Tree
    """

    def __init__(
        self,
        node_id: int,
        weight: int,
        symbol: int = NO_SYMBOL,
        left: int = NO_CHILD,
        right: int = NO_CHILD,
    ):
        """
        Function initializes the structure of a node.

        :param node_id: int, position of the node in its tree (from 1)
        :param weight: int, frequency of the byte, or sum of the children
        :param symbol: int, byte value held by a leaf
        :param left: int, id of the left child, NO_CHILD for leaves
        :param right: int, id of the right child, NO_CHILD for leaves
        """
        self.id = node_id
        self.weight = weight
        self.symbol = symbol
        self.left = left
        self.right = right
        self.code = ""

    def is_leaf(self) -> bool:
        return self.left == NO_CHILD

    def __lt__(self, other):
        return (self.weight, self.id) < (other.weight, other.id)

    def __repr__(self):
        return (
            f"Node(id={self.id}, weight={self.weight}, symbol={self.symbol}, "
            f"left={self.left}, right={self.right})"
        )


class HuffmanTree:
    """
    Class object for Huffman Tree. Nodes live in a per-tree arena
    indexed by id, children are referenced by id.
    """

    def __init__(self):
        self.nodes: list[Node] = []
        self.root_id = NO_CHILD
        self.res_codes: dict[int, str] = {}

    def new_node(
        self,
        weight: int,
        symbol: int = NO_SYMBOL,
        left: int = NO_CHILD,
        right: int = NO_CHILD,
    ) -> Node:
        """
        Allocate the next node of this tree. Ids start at 1.
        """
        if len(self.nodes) >= MAX_NODES:
            raise ValueError(f"A byte tree cannot hold more than {MAX_NODES} nodes")
        node = Node(len(self.nodes) + 1, weight, symbol, left, right)
        self.nodes.append(node)
        return node

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id - 1]

    @property
    def root(self) -> Node | None:
        if self.root_id == NO_CHILD:
            return None
        return self.node(self.root_id)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @staticmethod
    def char_frequency(data: bytes) -> dict[int, int]:
        """
        Function builds dictionary with frequency
        of each byte for given data, in order of first occurrence.

        :param data: bytes to count
        :return: dict, {byte: count}
        """
        char_frequency_dict = defaultdict(int)
        for el in data:
            char_frequency_dict[el] += 1

        return dict(char_frequency_dict)

    @classmethod
    def from_data(cls, data: bytes) -> "HuffmanTree":
        """
        Build the tree and codes for the given bytes.
        """
        return cls.build_from_freq(cls.char_frequency(data))

    @classmethod
    def build_from_freq(cls, freq_dict: dict[int, int]) -> "HuffmanTree":
        """
        Build a Huffman tree from a {byte: frequency} mapping,
        generate the prefix codes and return the instance.

        Leaves get ids 1..k in the mapping's order, merged nodes
        get the following ids in order of creation.
        """
        tree = cls()
        leaves = [tree.new_node(freq, symbol) for symbol, freq in freq_dict.items()]
        if not leaves:
            return tree

        heapq.heapify(leaves)
        nodes = leaves
        while len(nodes) > 1:
            # two smallest nodes become left and right children
            l = heapq.heappop(nodes)
            r = heapq.heappop(nodes)
            parent = tree.new_node(l.weight + r.weight, NO_SYMBOL, l.id, r.id)
            heapq.heappush(nodes, parent)

        tree.root_id = nodes[0].id
        tree.codes_generation()
        return tree

    def codes_generation(self, node: Node | None = None, curr_code: str = ""):
        """
        Recursive function that generates code for each leaf,
        preorder traversal of the tree. Left edge is '0', right edge is '1'.

        A tree made of a single leaf gives that leaf the code '0',
        otherwise its code would be empty and carry no bits.

        :param node: node to start traversal from
        :param curr_code: str, code accumulated so far
        """
        if node is None:
            self.res_codes = {}
            node = self.root
            if node is None:
                return
            if node.is_leaf():
                node.code = "0"
                self.res_codes[node.symbol] = node.code
                return

        node.code = curr_code
        if node.is_leaf():
            self.res_codes[node.symbol] = curr_code
            return

        self.codes_generation(self.node(node.left), curr_code + "0")
        self.codes_generation(self.node(node.right), curr_code + "1")

    def preorder(self) -> Iterator[Node]:
        """
        Yield nodes root first, then the left subtree, then the right one.
        """
        if self.root is None:
            return
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            if not node.is_leaf():
                stack.append(self.node(node.right))
                stack.append(self.node(node.left))

    def leaves(self) -> list[Node]:
        return [node for node in self.nodes if node.is_leaf()]

    def is_degenerate(self) -> bool:
        """True when the whole tree is one leaf."""
        return self.root is not None and self.root.is_leaf()

    def code_table(self) -> dict[int, bitarray]:
        """
        Codes as bitarrays, ready to be written by BitWriter.
        """
        return {
            sym: bitarray(code, endian="little") for sym, code in self.res_codes.items()
        }

    def payload_bits(self, freq_dict: dict[int, int]) -> int:
        """
        Exact number of payload bits needed to encode data
        with the given byte frequencies.
        """
        return sum(freq * len(self.res_codes[sym]) for sym, freq in freq_dict.items())
