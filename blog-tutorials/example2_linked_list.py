#!/usr/bin/env python3
"""
Tutorial: Singly Linked List Walkthrough

Builds a small list, inserts at the front, removes from the middle and
clears it, printing the chain after every step. Out-of-range indices
are rejected before the list is touched.
"""

import sys

from linked_list import IndexOutOfRangeError, LinkedList


def check(label, actual, expected):
    ok = actual == expected
    print(f"  {label}: {actual!r} (expected {expected!r}) {'PASS' if ok else 'FAIL'}")
    return ok


def walkthrough():
    print("Singly Linked List Walkthrough")
    print("=" * 40)
    results = []

    ll = LinkedList()
    ll.add(1)
    ll.add(2)
    print("\nAppending 1 and 2, then inserting 0 at the front...")
    ll.insert(0, 0)
    results.append(check("list", ll.to_list(), [0, 1, 2]))
    results.append(check("size", ll.size(), 3))

    print("\nRemoving index 1 (middle element)...")
    removed = ll.remove(1)
    results.append(check("removed", removed, 1))
    results.append(check("list", ll.to_list(), [0, 2]))
    results.append(check("size", ll.size(), 2))

    print("\nMembership:")
    results.append(check("contains(2)", ll.contains(2), True))
    results.append(check("contains(5)", ll.contains(5), False))

    print("\nGetting index 2 on a list of size 2...")
    try:
        ll.get(2)
        print("  no error raised FAIL")
        results.append(False)
    except IndexOutOfRangeError as e:
        print(f"  rejected: {e} PASS")
        results.append(ll.to_list() == [0, 2])

    print("\nClearing...")
    ll.clear()
    results.append(check("size", ll.size(), 0))
    results.append(check("is_empty()", ll.is_empty(), True))

    print("\n" + "=" * 40)
    if all(results):
        print("All checks passed!")
        return 0
    print(f"{results.count(False)} check(s) FAILED")
    return 1


if __name__ == "__main__":
    sys.exit(walkthrough())
