from typing import Dict, Iterable, Iterator, List, Sequence, Union

from ordering import insert, insertion_sort, smaller

SENTINEL = "?"  #: Appended by the decoder when bits run out mid-path


class HuffmanError(ValueError):
    """Base class for errors raised by the Huffman coder."""


class InvalidInput(HuffmanError):
    """Raised when a code tree cannot be built from the given alphabet."""


class SymbolNotFound(HuffmanError):
    """Raised when encoding a symbol that has no leaf in the tree.

    :ivar symbol: The symbol that could not be located.
    :type symbol: str
    """

    def __init__(self, symbol: str):
        super().__init__(
            f"Tried to encode {symbol!r} but it is not part of the alphabet"
        )
        self.symbol = symbol


class Leaf:
    """Leaf of a code tree holding one symbol.

    :ivar symbol: Single-character symbol.
    :type symbol: str
    :ivar freq: Frequency given for ``symbol`` at construction.
    :type freq: int
    """

    __slots__ = ("symbol", "freq")

    def __init__(self, symbol: str, freq: int):
        self.symbol = symbol
        self.freq = freq

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.freq})"


class Internal:
    """Branch of a code tree; a ``False`` bit selects ``left``.

    :ivar left: Subtree reached by a ``False`` bit.
    :type left: Leaf | Internal
    :ivar right: Subtree reached by a ``True`` bit.
    :type right: Leaf | Internal
    :ivar freq: Sum of the children's frequencies.
    :type freq: int
    """

    __slots__ = ("left", "right", "freq")

    def __init__(self, left: "CodeNode", right: "CodeNode"):
        self.left = left
        self.right = right
        self.freq = left.freq + right.freq

    def __repr__(self):
        return f"Internal({self.left!r}, {self.right!r})"


CodeNode = Union[Leaf, Internal]


def _validate(symbols: Sequence[str], frequencies: Sequence[int]) -> None:
    if len(symbols) < 2 or len(symbols) != len(frequencies):
        raise InvalidInput(
            "Need at least two symbols and exactly one frequency per symbol "
            f"(got {len(symbols)} symbols, {len(frequencies)} frequencies)"
        )
    for symbol in symbols:
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise InvalidInput(f"Symbol must be a single character: {symbol!r}")
    for freq in frequencies:
        if isinstance(freq, bool) or not isinstance(freq, int) or freq < 0:
            raise InvalidInput(
                f"Frequency must be a non-negative integer: {freq!r}"
            )


def build_tree(symbols: Sequence[str], frequencies: Sequence[int]) -> Internal:
    """Build a code tree by repeatedly merging the two lightest subtrees.

    Leaves are ordered with :func:`ordering.insertion_sort` (equal
    frequencies keep input order). Each merge takes the first two nodes of
    the forest, the first becoming the left child, and puts the merged
    subtree back with :func:`ordering.smaller`, in front of any node of the
    same frequency. ``n`` symbols take exactly ``n - 1`` merges.

    :param symbols: Single-character symbols of the alphabet.
    :type symbols: Sequence[str]
    :param frequencies: Weight of each symbol, same length as ``symbols``.
    :type frequencies: Sequence[int]
    :returns: Root of the finished tree.
    :rtype: Internal
    :raises InvalidInput: If fewer than two symbols are given, the lengths
        differ, or a symbol/frequency is malformed.
    """
    symbols = list(symbols)
    frequencies = list(frequencies)
    _validate(symbols, frequencies)

    forest = insertion_sort(
        Leaf(symbol, freq) for symbol, freq in zip(symbols, frequencies)
    )
    while len(forest) > 1:
        merged = Internal(forest.pop(0), forest.pop(0))
        insert(merged, forest, smaller)
    return forest[0]


def find_path(root: CodeNode, symbol: str) -> List[bool]:
    """Locate ``symbol`` with a left-first depth-first search.

    Right siblings still to visit are kept on a stack; when a leaf does not
    match, the path is rewound to its last left turn, which becomes a right
    turn, and the search resumes from the popped sibling.

    :param root: Tree to search.
    :type root: Leaf | Internal
    :param symbol: Symbol to locate.
    :type symbol: str
    :returns: Bit path from ``root`` to the leaf holding ``symbol``.
    :rtype: List[bool]
    :raises SymbolNotFound: If no leaf holds ``symbol``.
    """
    pending: List[CodeNode] = []
    path: List[bool] = []
    node = root
    while True:
        if isinstance(node, Internal):
            pending.append(node.right)
            path.append(False)
            node = node.left
            continue
        if node.symbol == symbol:
            return path
        if not pending:
            raise SymbolNotFound(symbol)
        node = pending.pop()
        while path[-1]:
            path.pop()
        path[-1] = True


def decode_bits(root: CodeNode, bits: Iterable[bool]) -> str:
    """Walk ``root`` once per symbol until ``bits`` is used up.

    A walk that runs out of bits inside a branch ends the output with
    :data:`SENTINEL` instead of raising.

    :param root: Tree to walk.
    :type root: Leaf | Internal
    :param bits: Concatenated bit paths.
    :type bits: Iterable[bool]
    :returns: Decoded text, ``""`` for no bits.
    :rtype: str
    """
    bits = list(bits)
    if not bits:
        return ""

    out: List[str] = []
    pos = 0
    node = root
    while True:
        if isinstance(node, Leaf):
            out.append(node.symbol)
            if pos >= len(bits):
                break
            node = root
            continue
        if pos >= len(bits):
            out.append(SENTINEL)
            break
        node = node.right if bits[pos] else node.left
        pos += 1
    return "".join(out)


def iter_leaves(root: CodeNode) -> Iterator[Leaf]:
    """Yield the leaves of ``root`` left to right."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def check_frequencies(root: CodeNode) -> bool:
    """Return ``True`` if every branch weighs the sum of its children."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, Internal):
            if node.freq != node.left.freq + node.right.freq:
                return False
            stack.append(node.left)
            stack.append(node.right)
    return True


class HuffmanCode:
    """Prefix-free code built once from an alphabet and its frequencies.

    The tree is never modified after construction, so one instance can be
    shared by any number of readers.

    :ivar root: Root of the code tree.
    :type root: Internal
    """

    def __init__(self, symbols: Sequence[str], frequencies: Sequence[int]):
        """Build the code tree.

        :param symbols: Single-character symbols of the alphabet.
        :type symbols: Sequence[str]
        :param frequencies: Weight of each symbol.
        :type frequencies: Sequence[int]
        :raises InvalidInput: If the tree cannot be built.
        """
        self.root = build_tree(symbols, frequencies)

    @classmethod
    def from_pairs(cls, pairs: Iterable) -> "HuffmanCode":
        """Build from ``(symbol, frequency)`` pairs."""
        pairs = list(pairs)
        return cls([s for s, _ in pairs], [f for _, f in pairs])

    @property
    def symbols(self) -> List[str]:
        return [leaf.symbol for leaf in iter_leaves(self.root)]

    @property
    def total_frequency(self) -> int:
        return self.root.freq

    def code_for(self, symbol: str) -> List[bool]:
        """Bit path of a single symbol.

        :raises SymbolNotFound: If ``symbol`` is not in the alphabet.
        """
        return find_path(self.root, symbol)

    def code_table(self) -> Dict[str, List[bool]]:
        """Map every symbol to its bit path, in left-to-right leaf order."""
        table: Dict[str, List[bool]] = {}
        for leaf in iter_leaves(self.root):
            table.setdefault(leaf.symbol, find_path(self.root, leaf.symbol))
        return table

    def encode(self, text: str) -> List[bool]:
        """Encode ``text`` as the concatenation of each character's path.

        :param text: Text made of symbols from the alphabet.
        :type text: str
        :returns: Encoded bits.
        :rtype: List[bool]
        :raises SymbolNotFound: If any character is not in the alphabet.
        """
        result: List[bool] = []
        for ch in text:
            result.extend(find_path(self.root, ch))
        return result

    def decode(self, bits: Iterable[bool]) -> str:
        """Decode ``bits``; a truncated final code yields ``"?"``."""
        return decode_bits(self.root, bits)
