#!/usr/bin/env python3
"""
Quick Start Examples: Simplest possible usage of matchcase

This file walks through case dispatch with capture variables, guards,
rest captures and wildcards. Run it from the examples/ directory.
"""
import sys
sys.path.insert(0, "../src")

from matchcase import REST, NoValidMatch, match

print("=" * 80)
print("QUICK START EXAMPLES")
print("=" * 80)

# ============================================================================
# EXAMPLE 1: Guards on captured fields
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 1: Guards on captured fields")
print("=" * 80)


def describe_user(v, h):
    name, age = v.take(2)
    return [
        lambda: {"type": "user", "name": name, "age": age.when(lambda a: a >= 18)},
        lambda name, age: f"Adult user: {name} ({age})",
        lambda: {"type": "user", "name": name, "age": age},
        lambda name, age: f"Minor user: {name} ({age})",
        lambda: "Unknown entity",
    ]


for record in [
    {"type": "user", "name": "John", "age": 30},
    {"type": "user", "name": "Billy", "age": 15},
    {"type": "robot", "serial": "R2"},
]:
    print(f"  {record!r:55s} -> {match(record, describe_user)}")

# ============================================================================
# EXAMPLE 2: Rest captures
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 2: Rest captures in arrays and objects")
print("=" * 80)


def head_and_tail(v, h):
    head, tail = v.take(2)
    return [lambda: [head, tail.rest], lambda head, tail: (head, tail)]


def split_id(v, h):
    ident, others = v.take(2)
    return [lambda: {"id": ident, REST: others}, lambda ident, others: (ident, others)]


print(f"  [1, 2, 3, 4]           -> {match([1, 2, 3, 4], head_and_tail)}")
print(f"  {{'id': 7, 'name': 'x'}} -> {match({'id': 7, 'name': 'x'}, split_id)}")

# ============================================================================
# EXAMPLE 3: Wildcards, alternatives and type checks
# ============================================================================
print("\n" + "=" * 80)
print("EXAMPLE 3: Wildcards, alternatives and type checks")
print("=" * 80)


def classify(v, h):
    (value,) = v.take(1)
    _ = h._
    return [
        lambda: [_, value.of_type("str"), _],
        lambda value: f"middle string {value!r}",
        lambda: {"status": h.or_("ok", "done"), "result": value},
        lambda value: f"finished with {value!r}",
        lambda: {"email": h.regex(r"@example\.com$")},
        lambda value: "internal address",
    ]


for subject in [[1, "two", 3], {"status": "done", "result": 42}, {"email": "me@example.com"}]:
    print(f"  {subject!r:40s} -> {match(subject, classify)}")

try:
    match({"status": "failed"}, classify)
except NoValidMatch as exc:
    print(f"  {{'status': 'failed'}}                    -> NoValidMatch: {exc}")

print("\n" + "=" * 80)
print("Done.")
print("=" * 80)
