"""Tests for cypher_compose/pattern/pattern.py"""

import pytest

from cypher_compose import Node, Param, PartialPattern, Pattern, PatternError, Relationship
from cypher_compose.pattern import Direction, as_pattern


class TestNodeRendering:
    """Single-node patterns."""

    def test_bare_node(self, env):
        assert Pattern(Node()).get_cypher(env) == "(this0)"

    def test_labels_in_declaration_order(self, env):
        node = Node(labels=["Person", "Actor"])

        assert Pattern(node).get_cypher(env) == "(this0:Person:Actor)"

    def test_pattern_labels_override_node_labels(self, env):
        node = Node(labels=["Person"])

        assert Pattern(node, labels=["Director"]).get_cypher(env) == "(this0:Director)"
        assert Pattern(node, labels=[]).get_cypher(env) == "(this0)"

    def test_properties_are_parameterized(self, env):
        node = Node(labels=["Movie"])
        pattern = Pattern(node, properties={"title": "Heat", "released": 1995})

        assert pattern.get_cypher(env) == "(this0:Movie {title: $param1, released: $param2})"
        assert env.parameters() == {"param1": "Heat", "param2": 1995}

    def test_existing_param_is_reused(self, env):
        shared = Param("Heat")
        a = Pattern(Node(), properties={"title": shared})
        b = Pattern(Node(), properties={"title": shared})

        assert a.get_cypher(env) == "(this0 {title: $param1})"
        assert b.get_cypher(env) == "(this2 {title: $param1})"
        assert env.parameters() == {"param1": "Heat"}

    def test_label_needing_escape(self, env):
        node = Node(labels=["Sci Fi"])

        assert Pattern(node).get_cypher(env) == "(this0:`Sci Fi`)"

    def test_expression_property_value_is_rejected(self):
        other = Node()

        with pytest.raises(PatternError):
            Pattern(Node(), properties={"id": other.property("id")})


class TestRelationshipChains:
    """Chains built with related() and to()."""

    def test_right_direction(self, env):
        actor, movie = Node(labels=["Person"]), Node(labels=["Movie"])
        acted_in = Relationship(type="ACTED_IN")

        pattern = Pattern(actor).related(acted_in).to(movie)

        assert pattern.get_cypher(env) == "(this0:Person)-[this1:ACTED_IN]->(this2:Movie)"

    def test_left_direction_with_properties(self, env):
        movie, actor = Node(labels=["Movie"]), Node(labels=["Person"])
        acted_in = Relationship(type="ACTED_IN")

        pattern = (
            Pattern(movie)
            .related(acted_in, direction="left", properties={"role": "Neo"})
            .to(actor)
        )

        assert (
            pattern.get_cypher(env)
            == "(this0:Movie)<-[this1:ACTED_IN {role: $param2}]-(this3:Person)"
        )
        assert env.parameters() == {"param2": "Neo"}

    def test_undirected_anonymous_relationship(self, env):
        pattern = Pattern(Node()).related(direction=Direction.UNDIRECTED).to(Node())

        assert pattern.get_cypher(env) == "(this0)-[this1]-(this2)"

    def test_type_keyword_overrides_relationship_type(self, env):
        rel = Relationship(type="KNOWS")
        pattern = Pattern(Node()).related(rel, type="LIKES").to(Node())

        assert pattern.get_cypher(env) == "(this0)-[this1:LIKES]->(this2)"

    def test_longer_chain_reuses_node(self, env):
        a, b = Node(), Node()

        pattern = Pattern(a).related().to(b).related(direction="left").to(a)

        assert pattern.get_cypher(env) == "(this0)-[this1]->(this2)<-[this3]-(this0)"

    def test_related_returns_partial_pattern(self):
        partial = Pattern(Node()).related()

        assert isinstance(partial, PartialPattern)
        assert not hasattr(partial, "related")

    def test_patterns_are_immutable(self, env):
        base = Pattern(Node())
        base.related().to(Node())

        assert len(base.elements) == 1

    def test_unknown_direction(self):
        with pytest.raises(PatternError):
            Pattern(Node()).related(direction="sideways")

    def test_non_node_endpoint(self):
        with pytest.raises(PatternError):
            Pattern(Node()).related().to(Relationship())

    def test_non_node_start(self):
        with pytest.raises(PatternError):
            Pattern(Relationship())


class TestAsPattern:
    def test_node_is_wrapped(self, env):
        assert as_pattern(Node()).get_cypher(env) == "(this0)"

    def test_partial_pattern_is_rejected(self):
        with pytest.raises(PatternError, match="ends on a relationship"):
            as_pattern(Pattern(Node()).related())

    def test_other_values_are_rejected(self):
        with pytest.raises(PatternError):
            as_pattern("(n)")
