## switchline — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from switchline.types import Cardinality
from switchline.registry import SwitchRegistry, parse_specification, parse_cardinality, remove_cardinality, \
                                looks_like_switch
from switchline.errors import MalformedSpecification, InvalidCardinality, DuplicateSwitch, SwitchNotFound, \
                              UnknownSwitch, InvalidArgument, NotInitialized


def _registry():
    return SwitchRegistry.from_string("--prev(0) --next(0) --onevalue(1)", implicit="--file(1)")


@pytest.mark.parametrize("text, expected", [
    ("--file(1)", Cardinality.exact(1)),
    ("--none(0)", Cardinality.exact(0)),
    ("--multi(*)", Cardinality.any()),
    ("--range(1-3)", Cardinality.between(1, 3)),
    ("--twomore(2-*)", Cardinality.at_least(2)),
    ("-v(0)", Cardinality.exact(0)),
    ("  --padded(1)  ", Cardinality.exact(1)),
])
def test_parse_specification_forms(text, expected):
    spec = parse_specification(text)
    assert spec.name == text.strip().split('(')[0]
    assert spec.cardinality == expected


@pytest.mark.parametrize("text", ["--usage", "--usage[0]", "--prev(0", "--prev0)", "(0)", "--a(1)x", "--a(1)(2)"])
def test_parse_specification_malformed(text):
    with pytest.raises(MalformedSpecification):
        parse_specification(text)


def test_parse_specification_requires_switch_prefix():
    with pytest.raises(MalformedSpecification, match="switch prefix"):
        parse_specification("usage(0)")


@pytest.mark.parametrize("text", ["--usage(?)", "--usage(3-2)", "--a()", "--a(x)", "--a(1-x)", "--a(x-100)",
                                  "--a(*-3)", "--a(-3)", "--a( 1 )"])
def test_parse_specification_invalid_cardinality(text):
    with pytest.raises(InvalidCardinality):
        parse_specification(text)


def test_parse_cardinality_keeps_equal_range():
    card = parse_cardinality("2-2")
    assert card.min_values == card.max_values == 2


def test_remove_cardinality():
    assert remove_cardinality("--file(1)") == "--file"
    assert remove_cardinality("--file") == "--file"
    with pytest.raises(MalformedSpecification):
        remove_cardinality("--file1)")
    with pytest.raises(MalformedSpecification):
        remove_cardinality("--file(1")
    with pytest.raises(MalformedSpecification):
        remove_cardinality("--file)1(")


def test_looks_like_switch_default_and_custom_prefixes():
    assert looks_like_switch("--file") and looks_like_switch("-f")
    assert not looks_like_switch("file") and not looks_like_switch("")
    assert looks_like_switch("/f", r"/") and not looks_like_switch("--f", r"/")


def test_from_string_and_queries():
    reg = _registry()
    assert len(reg) == 3
    assert [s.name for s in reg] == ["--prev", "--next", "--onevalue"]
    assert reg.is_possible_switch("--prev")
    # The implicit switch is resolvable but not a declared possible switch.
    assert not reg.is_possible_switch("--file")
    assert reg.implicit_name == "--file"
    assert str(reg) == "--prev(0) --next(0) --onevalue(1)"


def test_from_string_rejects_empty_list():
    with pytest.raises(InvalidArgument):
        SwitchRegistry.from_string("   ")


def test_duplicate_switches_rejected():
    with pytest.raises(DuplicateSwitch):
        SwitchRegistry.from_string("--a(0) --a(1)")
    with pytest.raises(DuplicateSwitch):
        _registry().added("--prev(1)")


def test_added_returns_new_registry():
    reg = _registry()
    bigger = reg.added("--usage(0)")
    assert bigger.is_possible_switch("--usage")
    assert not reg.is_possible_switch("--usage")
    with pytest.raises(MalformedSpecification):
        reg.added("--usage")


def test_removed_by_specification_and_name():
    reg = _registry()
    reg = reg.removed("--next(0)")
    assert len(reg) == 2
    reg = reg.removed("--prev")
    assert [s.name for s in reg] == ["--onevalue"]


def test_removed_errors():
    reg = _registry()
    with pytest.raises(SwitchNotFound):
        reg.removed("--nonexisting")
    with pytest.raises(SwitchNotFound):
        reg.removed("--next(1)")
    with pytest.raises(MalformedSpecification):
        reg.removed("--prev(0")
    with pytest.raises(MalformedSpecification):
        reg.removed("--prev0)")
    with pytest.raises(InvalidArgument):
        reg.removed("")


def test_with_switches_replaces_everything_but_implicit():
    reg = _registry().with_switches("--another(1) --other(0)")
    assert [s.name for s in reg] == ["--another", "--other"]
    assert not reg.is_possible_switch("--prev")
    assert reg.implicit_name == "--file"


def test_implicit_name_requires_configuration():
    with pytest.raises(NotInitialized):
        SwitchRegistry.from_string("--a(0)").implicit_name


def test_resolve_switch_by_name_and_specification():
    reg = _registry()
    assert reg.resolve_switch("--prev").cardinality == Cardinality.exact(0)
    assert reg.resolve_switch("--prev(0)").cardinality == Cardinality.exact(0)
    assert reg.resolve_switch("--file") is reg.implicit
    with pytest.raises(InvalidCardinality):
        reg.resolve_switch("--prev(1)")
    with pytest.raises(MalformedSpecification):
        reg.resolve_switch("--prev(0")
    with pytest.raises(MalformedSpecification):
        reg.resolve_switch("--prev0)")
    with pytest.raises(UnknownSwitch):
        reg.resolve_switch("--nonexisting(0)")


def test_resolve_switch_matches_exact_names_only():
    reg = SwitchRegistry.from_string("--filex(2) --f(0)")
    assert reg.find("--file") is None
    with pytest.raises(UnknownSwitch):
        reg.resolve_switch("--file")
    assert reg.resolve_switch("--f").name == "--f"


def test_possible_switches_take_precedence_over_implicit_with_same_name():
    reg = SwitchRegistry.from_string("--file(2)", implicit="--file(1)")
    assert reg.resolve_switch("--file").cardinality == Cardinality.exact(2)
