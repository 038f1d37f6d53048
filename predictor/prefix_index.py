# prefix_index.py
# -*- coding: utf-8 -*-
# Trie over symptom strings for exact lookup + prefix autocomplete.
from __future__ import annotations
import re
from typing import Dict, List, Optional

_NON_LETTER = re.compile(r"[^a-z]+")

def symptom_key(text: str) -> str:
    """Comparison key: lowercase, letters a-z only ("Loss of Taste!" -> "lossoftaste")."""
    return _NON_LETTER.sub("", (text or "").lower())


class TrieNode:
    """One matched character position. `symptom` is only set on terminal nodes."""

    __slots__ = ("children", "terminal", "symptom")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.terminal = False
        self.symptom: Optional[str] = None


class PrefixIndex:
    def __init__(self) -> None:
        self._root = TrieNode()
        self._frozen = False

    def freeze(self) -> None:
        """No more inserts after this; the engine freezes its index once built."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---------- Insert ----------
    def insert(self, symptom: str) -> None:
        """Store `symptom` under its key; re-inserting the same key overwrites the display string."""
        if self._frozen:
            raise RuntimeError("PrefixIndex is frozen")
        node = self._root
        for ch in symptom_key(symptom):
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = TrieNode()
                node.children[ch] = nxt
            node = nxt
        node.terminal = True
        node.symptom = symptom

    # ---------- Lookup ----------
    def _find(self, text: str) -> Optional[TrieNode]:
        node = self._root
        for ch in symptom_key(text):
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains_exact(self, symptom: str) -> bool:
        node = self._find(symptom)
        return node is not None and node.terminal

    def has_prefix(self, prefix: str) -> bool:
        return self._find(prefix) is not None

    # ---------- Traversal ----------
    @staticmethod
    def _walk(start: TrieNode):
        # explicit stack; children pushed in reverse so pops come out a..z
        stack = [start]
        while stack:
            node = stack.pop()
            yield node
            for ch in sorted(node.children, reverse=True):
                stack.append(node.children[ch])

    def suggestions(self, prefix: str) -> List[str]:
        """
        Every stored symptom whose key starts with the key of `prefix`,
        in depth-first alphabetical order (a parent before its descendants).
        Unknown prefix -> [].
        """
        node = self._find(prefix)
        if node is None:
            return []
        return [n.symptom for n in self._walk(node) if n.terminal]

    def size(self) -> int:
        return sum(1 for n in self._walk(self._root) if n.terminal)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, symptom: object) -> bool:
        return isinstance(symptom, str) and self.contains_exact(symptom)
