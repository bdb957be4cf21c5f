"""
Tests for the ParsedStatement tree.
"""
import json
import unittest

from graphdl.statement import ParsedStatement


def _tree():
    first = ParsedStatement(original="Prepare reports", predicate="Prepare", object="reports")
    second = ParsedStatement(original="Present reports", predicate="Present", object="reports",
                             unknown_words=("Quarterly",), confidence=0.9)
    return ParsedStatement(
        original="Prepare or present reports",
        predicate="Prepare",
        object="or present reports",
    ).with_expansions([first, second])


class TestParsedStatement(unittest.TestCase):

    def test_leaf_defaults(self):
        statement = ParsedStatement(original="Review plans")
        self.assertTrue(statement.is_leaf)
        self.assertFalse(statement.has_conjunction)
        self.assertEqual(statement.confidence, 1.0)
        self.assertEqual(statement.modifiers, ())
        self.assertEqual(list(statement.leaves()), [statement])

    def test_with_expansions(self):
        tree = _tree()
        self.assertFalse(tree.is_leaf)
        self.assertTrue(tree.has_conjunction)
        self.assertEqual(len(tree.expansions), 2)
        self.assertEqual(tree.predicate, "Prepare")

    def test_leaves_depth_first(self):
        inner = _tree()
        outer = ParsedStatement(original="outer").with_expansions(
            [inner, ParsedStatement(original="Review plans")])
        self.assertEqual(
            [leaf.original for leaf in outer.leaves()],
            ["Prepare reports", "Present reports", "Review plans"],
        )

    def test_frozen(self):
        statement = ParsedStatement(original="Review plans")
        with self.assertRaises(AttributeError):
            statement.predicate = "Review"

    def test_to_dict_omits_unset_slots(self):
        data = ParsedStatement(original="Review plans", predicate="Review", object="plans").to_dict()
        self.assertEqual(data["predicate"], "Review")
        self.assertNotIn("preposition", data)
        self.assertNotIn("complement", data)
        self.assertNotIn("expansions", data)
        self.assertEqual(data["unknown_words"], [])

    def test_to_dict_slot_names(self):
        data = ParsedStatement(original="Develop plans for growth", predicate="Develop", object="plans",
                               preposition="for", complement="growth").to_dict()
        self.assertEqual(
            set(data),
            {"original", "predicate", "object", "preposition", "complement", "confidence", "unknown_words"},
        )

    def test_to_dict_is_json_serializable(self):
        data = _tree().to_dict()
        text = json.dumps(data)
        self.assertIn("Present reports", text)
        self.assertTrue(data["has_conjunction"])
        self.assertEqual(len(data["expansions"]), 2)

    def test_from_dict_round_trip(self):
        tree = _tree()
        self.assertEqual(ParsedStatement.from_dict(tree.to_dict()), tree)

    def test_from_dict_rejects_missing_original(self):
        with self.assertRaises(ValueError):
            ParsedStatement.from_dict({"predicate": "Review"})
        with self.assertRaises(ValueError):
            ParsedStatement.from_dict("Review plans")


if __name__ == "__main__":
    unittest.main()
