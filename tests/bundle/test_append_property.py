# topmark:header:start
#
#   project      : TexBundle
#   file         : test_append_property.py
#   file_relpath : tests/bundle/test_append_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for the `Bundle.append` merge policy."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from texbundle.bundle.model import Bundle
from texbundle.core.handlers import HandlerType
from texbundle.registry.registry import BundleRegistry

CATEGORIES: list[str] = list(HandlerType.keys())

s_identifier = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-", min_size=1, max_size=8)
s_chains = st.dictionaries(
    st.sampled_from(CATEGORIES),
    st.lists(s_identifier, max_size=6),
)
s_options = st.dictionaries(s_identifier, st.one_of(st.booleans(), s_identifier), max_size=5)


@settings(max_examples=100)
@given(this_chains=s_chains, other_chains=s_chains)
def test_append_prepends_reversed_chain(
    this_chains: dict[str, list[str]],
    other_chains: dict[str, list[str]],
) -> None:
    """Each category becomes ``reversed(other) + this``."""
    this = Bundle("this", handler={k: list(v) for k, v in this_chains.items()})
    other = Bundle("other", handler={k: list(v) for k, v in other_chains.items()})

    this.append(other)

    for category in CATEGORIES:
        expected = list(reversed(other_chains.get(category, []))) + this_chains.get(category, [])
        assert this.handler[category] == expected


@settings(max_examples=100)
@given(this_options=s_options, other_options=s_options)
def test_append_options_last_write_wins(
    this_options: dict[str, str | bool],
    other_options: dict[str, str | bool],
) -> None:
    """Options end up as the key-wise union with ``other`` taking precedence."""
    this = Bundle("this", options=dict(this_options))
    this.append(Bundle("other", options=dict(other_options)))

    assert this.options == {**this_options, **other_options}


@given(this_chains=s_chains, this_options=s_options)
def test_append_empty_is_identity(
    this_chains: dict[str, list[str]],
    this_options: dict[str, str | bool],
) -> None:
    """Appending an empty bundle leaves every facet unchanged."""
    this = Bundle("this", handler=this_chains, options=this_options, fallback={"macro": "f"})
    before = this.to_dict()

    this.append(Bundle("empty"))

    assert this.to_dict() == before


@pytest.mark.hypothesis_slow
@settings(max_examples=300, deadline=None)
@given(base_chains=s_chains, layers=st.lists(s_chains, max_size=4))
def test_compose_matches_successive_appends(
    base_chains: dict[str, list[str]],
    layers: list[dict[str, list[str]]],
) -> None:
    """`compose` equals appending every layer to a copy, and leaves the registry alone."""
    registry = BundleRegistry()
    registry.create("base", handler={k: list(v) for k, v in base_chains.items()})
    names: list[str] = []
    for index, chains in enumerate(layers):
        names.append(f"layer{index}")
        registry.create(names[-1], handler={k: list(v) for k, v in chains.items()})

    composed = registry.compose("base", *names)

    expected = Bundle("base", handler={k: list(v) for k, v in base_chains.items()})
    for chains in layers:
        expected.append(Bundle("layer", handler={k: list(v) for k, v in chains.items()}))

    assert composed.handler == expected.handler
    for category in CATEGORIES:
        assert registry.get("base").handler[category] == base_chains.get(category, [])
