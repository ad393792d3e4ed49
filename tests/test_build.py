"""Tests for cypher_compose/statement.py"""

import re

import pytest
from pydantic import ValidationError

from cypher_compose import (
    CompiledQuery,
    ConstructionError,
    Create,
    Match,
    Node,
    Param,
    Pattern,
    Relationship,
    Return,
    Statement,
    Variable,
    With,
    build,
    count,
    eq,
)


def _actor_query() -> Statement:
    actor = Node(labels=["Person"])
    movie = Node(labels=["Movie"])
    movies = Variable()
    return Statement(
        Match(
            Pattern(actor, properties={"name": "Keanu Reeves"})
            .related(Relationship(type="ACTED_IN"))
            .to(movie)
        ),
        With(actor, (count(movie), movies)).where(eq(movies, 3)),
        Return(actor.property("name")),
    )


class TestStatement:
    def test_clauses_joined_by_newline(self):
        result = build(_actor_query())

        assert result.text == (
            "MATCH (this0:Person {name: $param1})-[this2:ACTED_IN]->(this3:Movie)\n"
            "WITH this0, count(this3) AS var4\n"
            "WHERE var4 = $param5\n"
            "RETURN this0.name"
        )
        assert result.params == {"param1": "Keanu Reeves", "param5": 3}

    def test_identity_stable_across_clauses(self):
        movie = Node()
        statement = Statement(Match(movie), Return(movie)).then(Return(movie))

        assert statement.build().text == "MATCH (this0)\nRETURN this0\nRETURN this0"

    def test_nested_statement_shares_environment(self):
        a = Node()
        inner = Statement(Match(a))
        outer = Statement(inner, Create(Node()), Return(a))

        assert outer.build().text == "MATCH (this0)\nCREATE (this1)\nRETURN this0"

    def test_empty_statement(self):
        result = Statement().build()

        assert result.text == ""
        assert result.params == {}

    def test_non_compilable_node(self):
        with pytest.raises(ConstructionError):
            Statement(Match(Node()), "RETURN 1")
        with pytest.raises(ConstructionError):
            Statement().then(42)
        with pytest.raises(ConstructionError):
            build("MATCH (n) RETURN n")


class TestBuildProperties:
    """Properties that hold for every build."""

    def test_determinism(self):
        first = build(_actor_query())
        second = build(_actor_query())

        assert first == second

    def test_rebuilding_same_tree(self):
        query = _actor_query()

        assert query.build() == query.build()

    def test_label_uniqueness(self):
        nodes = [Node() for _ in range(5)]
        statement = Statement(*[Match(node) for node in nodes], Return(*nodes))

        labels = re.findall(r"\((this\d+)\)", statement.build().text)

        assert len(labels) == len(set(labels)) == 5

    def test_parameter_hygiene(self):
        movie = Node()
        shared = Param("Heat")
        query = Statement(
            Match(Pattern(movie, properties={"title": shared})).where(
                eq(movie.property("alt"), shared)
            ),
            Return(movie).skip(0).limit(5),
        )

        result = query.build()
        placeholders = set(re.findall(r"\$(\w+)", result.text))

        assert placeholders == set(result.params)
        assert result.params["param1"] == "Heat"
        assert len(result.params) == 3

    def test_literals_never_inlined(self):
        movie = Node()
        result = Match(movie).where(eq(movie.property("title"), "Heat")).build()

        assert "Heat" not in result.text


class TestCompiledQuery:
    def test_as_tuple(self):
        result = Match(Node()).return_("*").limit(1).build()

        cypher, params = result.as_tuple()

        assert isinstance(result, CompiledQuery)
        assert cypher == "MATCH (this0)\nRETURN *\nLIMIT $param1"
        assert params == {"param1": 1}

    def test_as_tuple_returns_params_copy(self):
        result = Match(Node()).return_("*").limit(1).build()

        _, params = result.as_tuple()
        params["other"] = 2

        assert "other" not in result.params

    def test_frozen(self):
        result = Match(Node()).build()

        with pytest.raises(ValidationError):
            result.text = "changed"


class TestBuildConfiguration:
    def test_settings_apply_to_new_builds(self, override_settings):
        override_settings(NODE_PREFIX="n", PARAM_PREFIX="p_")

        movie = Node()
        result = Match(movie).where(eq(movie.property("title"), "Heat")).build()

        assert result.text == "MATCH (n0)\nWHERE n0.title = $p_1"

    def test_unsuffixed_first_identifier(self, override_settings):
        override_settings(UNSUFFIXED_FIRST_IDENTIFIER=True)

        movie = Node()

        assert Match(movie).return_(movie).build().text == "MATCH (this)\nRETURN this"

    def test_clause_separator(self, override_settings):
        override_settings(CLAUSE_SEPARATOR=" ")

        movie = Node()

        assert Match(movie).return_(movie).build().text == "MATCH (this0) RETURN this0"

    def test_compiled_text_logging(self, override_settings):
        override_settings(LOG_COMPILED_QUERIES=True)

        result = Match(Node()).build()

        assert result.text == "MATCH (this0)"
