#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Summaries of candidates' degrees"""

import numpy as np
from typing import Dict, List

from netsimplify.names import *
from netsimplify.entities import SummaryRecord, CandidateReaction, CandidateMetabolite


def create_initial_candidates_sorts() -> Dict[str, Dict[str, str]]:
    return {
        METABOLITES: {
            CRITERION: COUNT,
            ORDER: DESCEND
        },
        REACTIONS: {
            CRITERION: COUNT,
            ORDER: DESCEND
        },
    }


def create_initial_candidates_searches() -> Dict[str, str]:
    return {METABOLITES: "", REACTIONS: ""}


def create_candidates_summaries(candidates_reactions: Dict[str, CandidateReaction],
                                candidates_metabolites: Dict[str, CandidateMetabolite]) -> Dict[str, List[SummaryRecord]]:
    """Create records of candidates' degrees

    The degree of a candidate metabolite is the count of its candidate reactions
    and the degree of a candidate reaction is the count of its candidate
    metabolites. Each record also holds the maximal count of its category.
    """
    summaries = {}
    for category, candidates, relations in ((METABOLITES, candidates_metabolites, REACTIONS),
                                            (REACTIONS, candidates_reactions, METABOLITES)):
        counts = np.array([len(getattr(c, relations)) for c in candidates.values()], dtype=int)
        maximum = int(counts.max()) if counts.size else 0
        summaries[category] = [
            SummaryRecord(category, identifier, candidate.name, int(count), maximum)
            for (identifier, candidate), count in zip(candidates.items(), counts)
        ]
    return summaries


def filter_candidates_summaries(candidates_summaries: Dict[str, List[SummaryRecord]],
                                candidates_searches: Dict[str, str]) -> Dict[str, List[SummaryRecord]]:
    """Filter records by case-insensitive search of candidates' names

    If no record of a category matches its search, all records of the category
    are kept.
    """
    filtered = {}
    for category, records in candidates_summaries.items():
        search = (candidates_searches.get(category) or "").lower()
        matches = [r for r in records if search in r.name.lower()]
        filtered[category] = matches if matches else list(records)
    return filtered


def sort_summary_records(records: List[SummaryRecord], criterion: str, order: str) -> List[SummaryRecord]:
    """Sort records by count or name

    The sort is stable in both orders: records with equal values keep their
    relative order.
    """
    if order not in (ASCEND, DESCEND):
        raise ValueError("Order " + str(order) + " is not supported. Use '" + ASCEND + "' or '" + DESCEND + "'.")
    if not records:
        return []
    if criterion == COUNT:
        counts = np.array([r.count for r in records], dtype=int)
        indices = np.argsort(counts if order == ASCEND else -counts, kind='stable')
        return [records[i] for i in indices]
    elif criterion == NAME:
        return sorted(records, key=lambda r: r.name.lower(), reverse=(order == DESCEND))
    raise ValueError("Criterion " + str(criterion) + " is not supported. Use '" + COUNT + "' or '" + NAME + "'.")


def sort_candidates_summaries(candidates_summaries: Dict[str, List[SummaryRecord]],
                              candidates_sorts: Dict[str, Dict[str, str]]) -> Dict[str, List[SummaryRecord]]:
    initial_sorts = create_initial_candidates_sorts()
    sorted_summaries = {}
    for category, records in candidates_summaries.items():
        sort = candidates_sorts.get(category, initial_sorts[category])
        sorted_summaries[category] = sort_summary_records(records, sort[CRITERION], sort[ORDER])
    return sorted_summaries


def prepare_candidates_summaries(candidates_reactions: Dict[str, CandidateReaction],
                                 candidates_metabolites: Dict[str, CandidateMetabolite],
                                 candidates_searches: Dict[str, str] = None,
                                 candidates_sorts: Dict[str, Dict[str, str]] = None) -> Dict[str, List[SummaryRecord]]:
    """Prepare searchable and sortable summaries of candidates' degrees

    Example:
        summaries = prepare_candidates_summaries(candidates_reactions, candidates_metabolites,
                                                 {'metabolites': 'pyr', 'reactions': ''},
                                                 {'metabolites': {'criterion': 'name', 'order': 'ascend'}})

    Args:
        candidates_reactions, candidates_metabolites (dict):
            Candidate reactions and metabolites keyed by identifier.

        candidates_searches (optional (dict of str)): (Default: no search)
            Search strings for 'metabolites' and 'reactions'.

        candidates_sorts (optional (dict of dict)): (Default: count, descending)
            Criterion ('count' or 'name') and order ('ascend' or 'descend') for
            'metabolites' and 'reactions'.

    Returns:
        (dict of list of SummaryRecord):
        Summary records for 'metabolites' and 'reactions'.
    """
    if candidates_searches is None:
        candidates_searches = create_initial_candidates_searches()
    if candidates_sorts is None:
        candidates_sorts = create_initial_candidates_sorts()
    summaries = create_candidates_summaries(candidates_reactions, candidates_metabolites)
    summaries = filter_candidates_summaries(summaries, candidates_searches)
    return sort_candidates_summaries(summaries, candidates_sorts)
