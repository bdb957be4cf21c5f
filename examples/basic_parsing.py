#!/usr/bin/env python3
"""
Basic GraphDL Parsing Examples

This script walks through parsing task statements and reading the result tree.
"""
import sys
import json
from pathlib import Path

# Add parent directory to path to import graphdl
sys.path.insert(0, str(Path(__file__).parent.parent))

from graphdl import GraphDLParser, expand_noun_phrase


def example_1_single_statement(parser):
    """Parse an uncoordinated statement and look at its slots."""
    print("=" * 60)
    print("Example 1: A Single Statement")
    print("=" * 60)

    text = "Develop plans for sustainable regeneration"
    print(f"\nInput: '{text}'")

    statement = parser.parse(text)

    print("\nSlots:")
    print(f"  Predicate:    {statement.predicate}")
    print(f"  Object:       {statement.object}")
    print(f"  Preposition:  {statement.preposition}")
    print(f"  Complement:   {statement.complement}")
    print(f"\nGraphDL: {parser.to_graphdl(statement)}")


def example_2_coordinated_verbs(parser):
    """Each coordinated verb becomes its own leaf."""
    print("\n" + "=" * 60)
    print("Example 2: Coordinated Verbs")
    print("=" * 60)

    text = "Collect, synthesize, analyze, manage, and report environmental data"
    print(f"\nInput: '{text}'")

    statement = parser.parse(text)

    print("\nLeaves:")
    for leaf in statement.leaves():
        print(f"  - {leaf.predicate} / {leaf.object}")
    print(f"\nGraphDL: {parser.to_graphdl(statement)}")


def example_3_coordinated_objects(parser):
    """Verbs and objects multiply out."""
    print("\n" + "=" * 60)
    print("Example 3: Verbs x Objects")
    print("=" * 60)

    text = "Develop or update plans, procedures, and guidelines"
    print(f"\nInput: '{text}'")

    statement = parser.parse(text)
    leaves = list(statement.leaves())

    print(f"\n{len(leaves)} leaves:")
    for leaf in leaves:
        print(f"  - {leaf.original}")


def example_4_json_output(parser):
    """Show the full tree as JSON."""
    print("\n" + "=" * 60)
    print("Example 4: Full Tree as JSON")
    print("=" * 60)

    text = "Prepare or present reports"
    print(f"\nInput: '{text}'")

    statement = parser.parse(text)

    print("\nComplete tree (JSON format):")
    print(json.dumps(statement.to_dict(), indent=2, ensure_ascii=False))


def example_5_occupation_titles():
    """The title expander works on job titles instead of task statements."""
    print("\n" + "=" * 60)
    print("Example 5: Occupation Titles")
    print("=" * 60)

    title = "Radio, Cellular, and Tower Equipment Installers and Repairers"
    print(f"\nInput: '{title}'")
    for expansion in expand_noun_phrase(title):
        print(f"  - {expansion}")


def main():
    """Run all examples."""
    print("\n")
    print("*" * 60)
    print("  GRAPHDL: Basic Statement Parsing Examples")
    print("*" * 60)

    parser = GraphDLParser().initialize()

    example_1_single_statement(parser)
    example_2_coordinated_verbs(parser)
    example_3_coordinated_objects(parser)
    example_4_json_output(parser)
    example_5_occupation_titles()

    unknown = parser.get_unknown_words(limit=10)
    if unknown:
        print("\nUnknown words seen:")
        for word, count in unknown:
            print(f"  {word}: {count}")

    print("\n" + "=" * 60)
    print("Examples Complete!")
    print("=" * 60)
    print("\n")


if __name__ == "__main__":
    main()
