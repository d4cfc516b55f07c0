"""Test summaries of candidates' degrees with searches and sorts."""
import pytest
import netsimplify as ns
from netsimplify.names import *


@pytest.fixture
def candidates_pyruvate(model_pyruvate):
    entities = ns.extract_metabolic_entities(model_pyruvate)
    context = ns.Context(True, ns.create_reactions_sets(entities))
    return ns.collect_candidates(entities, context)


def identifiers(records):
    return [r.candidate for r in records]


@pytest.fixture
def records():
    return [
        ns.SummaryRecord(METABOLITES, 'a', 'Alpha', 1, 2),
        ns.SummaryRecord(METABOLITES, 'b', 'beta', 2, 2),
        ns.SummaryRecord(METABOLITES, 'c', 'Gamma', 1, 2),
        ns.SummaryRecord(METABOLITES, 'd', 'Beta', 2, 2),
    ]


def test_initial_searches_and_sorts():
    assert (ns.create_initial_candidates_searches() == {METABOLITES: '', REACTIONS: ''})
    sorts = ns.create_initial_candidates_sorts()
    assert (sorts[METABOLITES] == {CRITERION: COUNT, ORDER: DESCEND})
    assert (sorts[REACTIONS] == {CRITERION: COUNT, ORDER: DESCEND})


@pytest.mark.timeout(15)
def test_counts_and_maximum(candidates_pyruvate):
    summaries = ns.create_candidates_summaries(*candidates_pyruvate)
    metabolites = {r.candidate: r for r in summaries[METABOLITES]}
    assert (metabolites['pyr_c'].count == 2)
    assert (metabolites['accoa_c'].count == 1)
    assert all(r.maximum == 2 for r in summaries[METABOLITES])
    assert (metabolites['pyr_m'].name == 'Pyruvate (mitochondria)')
    assert all(r.count == 2 and r.maximum == 2 for r in summaries[REACTIONS])
    assert all(r.entity == REACTIONS for r in summaries[REACTIONS])


def test_empty_summaries():
    summaries = ns.prepare_candidates_summaries({}, {})
    assert (summaries == {METABOLITES: [], REACTIONS: []})


@pytest.mark.timeout(15)
def test_default_preparation(candidates_pyruvate):
    summaries = ns.prepare_candidates_summaries(*candidates_pyruvate)
    assert (identifiers(summaries[METABOLITES]) == ['pyr_c', 'accoa_c', 'pyr_m'])
    assert (identifiers(summaries[REACTIONS]) == ['R1', 'R2'])


@pytest.mark.timeout(15)
def test_search(candidates_pyruvate):
    summaries = ns.prepare_candidates_summaries(*candidates_pyruvate, {METABOLITES: 'PYRUVATE', REACTIONS: 'r2'})
    assert (identifiers(summaries[METABOLITES]) == ['pyr_c', 'pyr_m'])
    assert (identifiers(summaries[REACTIONS]) == ['R2'])
    summaries = ns.prepare_candidates_summaries(*candidates_pyruvate, {METABOLITES: 'mitochondria', REACTIONS: ''})
    assert (identifiers(summaries[METABOLITES]) == ['pyr_m'])


@pytest.mark.timeout(15)
def test_search_without_matches(candidates_pyruvate):
    summaries = ns.prepare_candidates_summaries(*candidates_pyruvate, {METABOLITES: 'glucose', REACTIONS: 'xyz'})
    assert (identifiers(summaries[METABOLITES]) == ['pyr_c', 'accoa_c', 'pyr_m'])
    assert (identifiers(summaries[REACTIONS]) == ['R1', 'R2'])


@pytest.mark.timeout(15)
def test_sorts(candidates_pyruvate):
    sorts = {METABOLITES: {CRITERION: NAME, ORDER: ASCEND}, REACTIONS: {CRITERION: NAME, ORDER: DESCEND}}
    summaries = ns.prepare_candidates_summaries(*candidates_pyruvate, None, sorts)
    assert (identifiers(summaries[METABOLITES]) == ['accoa_c', 'pyr_c', 'pyr_m'])
    assert (identifiers(summaries[REACTIONS]) == ['R2', 'R1'])
    sorts = {METABOLITES: {CRITERION: COUNT, ORDER: ASCEND}}
    summaries = ns.prepare_candidates_summaries(*candidates_pyruvate, None, sorts)
    assert (identifiers(summaries[METABOLITES]) == ['accoa_c', 'pyr_m', 'pyr_c'])
    assert (identifiers(summaries[REACTIONS]) == ['R1', 'R2'])


def test_stable_count_sorts(records):
    assert (identifiers(ns.sort_summary_records(records, COUNT, DESCEND)) == ['b', 'd', 'a', 'c'])
    assert (identifiers(ns.sort_summary_records(records, COUNT, ASCEND)) == ['a', 'c', 'b', 'd'])


def test_stable_name_sorts(records):
    assert (identifiers(ns.sort_summary_records(records, NAME, ASCEND)) == ['a', 'b', 'd', 'c'])
    assert (identifiers(ns.sort_summary_records(records, NAME, DESCEND)) == ['c', 'b', 'd', 'a'])


def test_invalid_sorts(records):
    with pytest.raises(ValueError):
        ns.sort_summary_records(records, 'degree', ASCEND)
    with pytest.raises(ValueError):
        ns.sort_summary_records(records, COUNT, 'up')


@pytest.mark.timeout(15)
def test_search_none(candidates_pyruvate):
    summaries = ns.prepare_candidates_summaries(*candidates_pyruvate, {METABOLITES: None, REACTIONS: None})
    assert (identifiers(summaries[METABOLITES]) == ['pyr_c', 'accoa_c', 'pyr_m'])
    assert (identifiers(summaries[REACTIONS]) == ['R1', 'R2'])
