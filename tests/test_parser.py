"""
End-to-end tests for the statement parser.

Covers verb coordination, object and complement coordination, the
recursion guard and the GraphDLParser facade.
"""

import pytest

from graphdl.lexicon import LexiconLoader
from graphdl.parser import GraphDLParser, StatementParser
from graphdl.unknown_tracker import UnknownWordTracker


def _leaves(statement):
    return list(statement.leaves())


class TestVerbCoordination:
    """Statements that coordinate their verbs."""

    def test_verb_pair(self, graphdl_parser):
        result = graphdl_parser.parse("Prepare or present reports")
        leaves = _leaves(result)

        assert result.has_conjunction
        assert [leaf.predicate.lower() for leaf in leaves] == ["prepare", "present"]
        assert all(leaf.object == "reports" for leaf in leaves)
        assert graphdl_parser.to_graphdl(result) == "[prepare.Reports, present.Reports]"

    def test_verb_pair_with_complement(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Develop or implement plans for sustainable regeneration"))

        assert len(leaves) == 2
        for leaf in leaves:
            assert leaf.object == "plans"
            assert leaf.preposition == "for"
            assert leaf.complement == "sustainable regeneration"

    def test_verb_pair_with_determiner_in_complement(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse(
            "Develop or implement plans for the sustainable regeneration of brownfield sites"))

        assert len(leaves) == 2
        assert all("sustainable" in leaf.complement for leaf in leaves)

    def test_verb_list(self, graphdl_parser):
        result = graphdl_parser.parse("Collect, synthesize, analyze, manage, and report environmental data")
        leaves = _leaves(result)

        assert [leaf.predicate.lower() for leaf in leaves] == [
            "collect", "synthesize", "analyze", "manage", "report"]
        assert all(leaf.object == "environmental data" for leaf in leaves)
        assert result.predicate == "Collect"

    def test_slash_verbs(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Research/Resolve order exceptions"))

        assert [leaf.predicate.lower() for leaf in leaves] == ["research", "resolve"]
        assert all(leaf.object == "order exceptions" for leaf in leaves)

    @pytest.mark.parametrize("text", [
        "Assist and support children individually",
        "Organize and label materials",
        "Design or modify engineering schematics for electrical transmission",
    ])
    def test_two_verbs_two_leaves(self, graphdl_parser, text):
        assert len(_leaves(graphdl_parser.parse(text))) == 2

    def test_verb_pair_with_object_list(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Monitor and update strategy, plans, and policies"))

        assert len(leaves) == 6
        assert [leaf.object for leaf in leaves[:3]] == ["strategy", "plans", "policies"]
        assert leaves[0].predicate.lower() == "monitor"
        assert leaves[3].predicate.lower() == "update"

    def test_verb_pair_with_object_list_develop(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Develop or update plans, procedures, and guidelines"))

        assert len(leaves) == 6
        assert sum(1 for leaf in leaves if leaf.object == "plans") == 2

    def test_verb_pair_with_coordinated_complement(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse(
            "Direct or coordinate activities of businesses or departments concerned with production"))

        assert len(leaves) == 4


class TestObjectCoordination:
    """Statements with a single verb and coordinated objects or complements."""

    def test_shared_suffix_object(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Inspect generation or mechanical equipment"))

        assert [leaf.object for leaf in leaves] == ["generation equipment", "mechanical equipment"]

    def test_complement_product(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Prepare or file reports on findings or recommendations"))

        assert len(leaves) == 4

    def test_coordinated_complement(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Coordinate activities of businesses or departments"))

        assert len(leaves) == 2
        assert all(leaf.object == "activities" for leaf in leaves)
        assert [leaf.complement for leaf in leaves] == ["businesses", "departments"]

    def test_connector_product(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse(
            "Direct activities of businesses or departments concerned with production, "
            "pricing, sales, or distribution of products"))

        assert len(leaves) == 8

    def test_infinitive_complement(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse(
            "Review plans to ensure adherence to specifications or compliance with codes"))

        assert len(leaves) == 2

    def test_ensure_conformance(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse(
            "Ensure equipment conforms to applicable regulations or standards"))

        assert len(leaves) == 2

    def test_capitalized_objects(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Develop Vision and Strategy"))

        assert [leaf.object for leaf in leaves] == ["Vision", "Strategy"]

    def test_oxford_object_list(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Analyze trends, risks, and opportunities"))

        assert [leaf.object for leaf in leaves] == ["trends", "risks", "opportunities"]

    def test_coordinator_chain(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Review plans and goals and risk limits"))

        assert [leaf.object for leaf in leaves] == ["plans", "goals", "RiskLimits"]

    def test_verb_pair_leaves_unique(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Prepare or present reports and budgets"))
        originals = [leaf.original for leaf in leaves]

        assert len(originals) == 4
        assert len(set(originals)) == 4

    def test_list_not_collapsed_into_one_identifier(self, graphdl_parser):
        result = graphdl_parser.parse("Review contracts, agreements, and policies")
        graphdl = graphdl_parser.to_graphdl(result)

        assert graphdl.startswith("[")
        assert "ContractsAgreementsPolicies" not in graphdl

    def test_slash_in_complement(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse("Align staffing plan to strategies/resource needs"))

        assert len(leaves) >= 2

    def test_slash_and_shared_suffix_in_complement(self, graphdl_parser):
        leaves = _leaves(graphdl_parser.parse(
            "Align staffing plan to work force plan and business unit strategies/resource needs"))

        assert len(leaves) == 4
        assert all(len(leaf.complement) < 50 for leaf in leaves)
        assert any("work force" in leaf.complement for leaf in leaves)


class TestSingleStatements:

    def test_concepts_kept_in_summary(self, graphdl_parser):
        result = graphdl_parser.parse(
            "Discover potential value in opportunities consistent with trading strategy "
            "and objectives and within established capital allocation and risk limits")

        assert result.predicate == "Discover"
        assert result.object == "PotentialValue"
        assert result.preposition == "in"
        assert "objectives" in result.complement
        assert "TradingStrategy" in result.complement
        assert "CapitalAllocation" in result.complement

    def test_summary_slots_of_coordinated_statement(self, graphdl_parser):
        result = graphdl_parser.parse("Confer with leaders to coordinate training or to find opportunities")

        assert result.predicate == "Confer"
        assert result.preposition == "with"
        assert "leaders" in result.complement

    def test_uncoordinated_statement(self, graphdl_parser):
        result = graphdl_parser.parse("Analyze operations to determine performance")

        assert result.is_leaf
        assert result.object == "operations"
        assert result.preposition == "to"
        assert "performance" in result.complement

    def test_every_leaf_has_predicate(self, graphdl_parser):
        result = graphdl_parser.parse("Develop or update plans, procedures, and guidelines")

        assert all(leaf.predicate for leaf in result.leaves())


class TestStatementParser:

    def test_rule_order(self, lexicon):
        parser = StatementParser(lexicon)

        assert [rule.name for rule in parser.rules] == [
            "slash_verbs", "verb_list", "verb_pair", "coordinated_text"]

    def test_parse_single_never_expands(self, lexicon):
        parser = StatementParser(lexicon)
        result = parser.parse_single("Prepare or present reports")

        assert result.is_leaf
        assert not result.has_conjunction

    def test_verb_list_with_unlisted_later_verb(self, lexicon):
        leaves = _leaves(StatementParser(lexicon).parse(
            "Collect, synthesize, analyze, and frobnicate data"))

        assert [leaf.predicate.lower() for leaf in leaves] == [
            "collect", "synthesize", "analyze", "frobnicate"]
        assert all(leaf.object == "data" for leaf in leaves)

    def test_verb_list_needs_a_lead_verb(self, lexicon):
        parser = StatementParser(lexicon)

        assert parser._detect_verb_list("Budgets, forecasts, and reports guide planning") is None
        assert parser._detect_verb_list("Review contracts, agreements, and policies") is None


class TestGraphDLParser:
    """The facade: initialization, unknown-word tracking and export."""

    def test_requires_initialize(self):
        parser = GraphDLParser()

        assert not parser.is_initialized
        with pytest.raises(RuntimeError, match="initialize"):
            parser.parse("Review plans")

    def test_initialize_returns_self(self):
        parser = GraphDLParser()

        assert parser.initialize(LexiconLoader()) is parser
        assert parser.is_initialized

    def test_tracks_unknown_words(self):
        parser = GraphDLParser(tracker=UnknownWordTracker()).initialize()
        parser.parse("Develop Vision")
        parser.parse("Present Vision")

        assert parser.get_unknown_words() == [("Vision", 2)]

    def test_export_unknown_words(self, tmp_path):
        parser = GraphDLParser(tracker=UnknownWordTracker()).initialize()
        parser.parse("Develop Vision")
        out = tmp_path / "unknown.tsv"

        assert parser.export_unknown_words(out) == 1
        assert out.read_text(encoding="utf-8").splitlines() == [
            "word\tfrequency\tsuggested_pos",
            "Vision\t1\tNOUN",
        ]

    def test_to_graphdl_leaf(self, graphdl_parser):
        result = graphdl_parser.parse("Develop plans for sustainable regeneration")

        assert graphdl_parser.to_graphdl(result) == "develop.Plans.for.SustainableRegeneration"
