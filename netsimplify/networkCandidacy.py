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
"""Container for candidates and their simplifications (NetworkCandidacy)"""

import logging
from typing import Optional

from netsimplify.names import *
from netsimplify.entities import MetabolicEntities
from netsimplify.context import Context, parse_reactions_sets, validate_context
from netsimplify.candidacy import collect_candidates
from netsimplify.simplification import SimplificationManager
from netsimplify.summary import (prepare_candidates_summaries, create_initial_candidates_searches,
                                 create_initial_candidates_sorts)


class NetworkCandidacy(object):
    """Container for candidate entities, their simplifications and summaries

    Objects of this class are returned by compute_candidacy. Every change, be it
    of the context (compartmentalization, filters), of a designation for
    simplification or of the searches and sorts of summaries, re-runs the whole
    pipeline synchronously: candidates are collected anew, implicit designations
    for simplification are derived anew from the explicit ones and summaries are
    prepared anew. The resulting state replaces the previous one entirely.

    Instances of this class are not meant to be created directly by users.

    Args:
        entities (MetabolicEntities):
            Records of reactions, metabolites and compartments of the metabolic model.

        context (Context):
            Context of interest, i.e., compartmentalization and reactions' sets that
            pass the filters.

        candidates_searches (optional (dict of str)):
            Searches to filter the summaries of 'metabolites' and 'reactions'.

        candidates_sorts (optional (dict of dict)):
            Criteria and orders to sort the summaries of 'metabolites' and 'reactions'.

        default_simplifications (optional (list of str)):
            Identifiers of metabolites (without compartment) that are simplified with
            include_default_simplifications.

        fixed_point (optional (bool)): (Default: False)
            Derive implicit simplifications until convergence.

        strict (optional (bool)): (Default: False)
            Raise on contexts that reference unknown reactions.
    """

    def __init__(self, entities: MetabolicEntities, context: Context, candidates_searches=None, candidates_sorts=None,
                 default_simplifications=None, fixed_point=False, strict=False):
        self.entities = entities
        self.strict = strict
        self.context = validate_context(context, entities, strict)
        self.candidates_searches = candidates_searches if candidates_searches is not None else \
            create_initial_candidates_searches()
        self.candidates_sorts = candidates_sorts if candidates_sorts is not None else create_initial_candidates_sorts()
        if default_simplifications is None:
            default_simplifications = DEFAULT_SIMPLIFICATIONS_METABOLITES
        self.default_simplifications = list(default_simplifications)
        self.simplifications = SimplificationManager(fixed_point=fixed_point)
        self.candidates_reactions, self.candidates_metabolites = collect_candidates(self.entities, self.context)
        self.simplifications.recompute_implicit(self.entities, self.context, self.candidates_reactions,
                                                self.candidates_metabolites)
        self.candidates_summaries = self._prepare_summaries()

    @property
    def reactions_simplifications(self):
        return self.simplifications.reactions_simplifications

    @property
    def metabolites_simplifications(self):
        return self.simplifications.metabolites_simplifications

    def _prepare_summaries(self):
        return prepare_candidates_summaries(self.candidates_reactions, self.candidates_metabolites,
                                            self.candidates_searches, self.candidates_sorts)

    def change_context(self, compartmentalization: Optional[bool] = None, reactions_sets: Optional[dict] = None):
        """Change compartmentalization or filters and restore simplifications

        reactions_sets takes ReactionSets records or the dict form accepted by
        compute_candidacy, e.g., {'R1': {'metabolites': ['pyr'], 'compartments': ['c']}}.

        Explicit designations for simplification persist, also for entities that
        are no longer candidates, such that they apply again once the entities
        become candidates again.
        """
        if compartmentalization is None:
            compartmentalization = self.context.compartmentalization
        if reactions_sets is None:
            reactions_sets = self.context.reactions_sets
        else:
            reactions_sets = parse_reactions_sets(reactions_sets)
        context = validate_context(Context(compartmentalization, reactions_sets), self.entities, self.strict)
        candidates_reactions, candidates_metabolites = collect_candidates(self.entities, context)
        self.simplifications.restore(self.entities, context, candidates_reactions, candidates_metabolites)
        self.context = context
        self.candidates_reactions, self.candidates_metabolites = candidates_reactions, candidates_metabolites
        self.candidates_summaries = self._prepare_summaries()
        logging.info(f"Context changed: {len(candidates_reactions)} candidate reactions, "
                     f"{len(candidates_metabolites)} candidate metabolites.")

    def change_simplification(self, identifier: str, category: str, method: str = OMISSION):
        """Toggle the explicit designation of a candidate for simplification"""
        self.simplifications.toggle_explicit(identifier, category, method)

    def include_default_simplifications(self):
        self.simplifications.set_defaults(self.default_simplifications, include=True)

    def remove_default_simplifications(self):
        """Remove all designations of candidates of default metabolites, also directly selected ones"""
        self.simplifications.set_defaults(self.default_simplifications, include=False)

    def determine_default_simplifications(self) -> bool:
        """Whether all candidates of default metabolites have explicit designations"""
        return self.simplifications.determine_defaults(self.default_simplifications)

    def change_search(self, category: str, search: str):
        if category not in CATEGORIES:
            raise ValueError("Category " + str(category) + " is not supported.")
        self.candidates_searches = dict(self.candidates_searches)
        self.candidates_searches[category] = search
        self.candidates_summaries = self._prepare_summaries()

    def change_sort(self, category: str, criterion: str, order: str):
        if category not in CATEGORIES:
            raise ValueError("Category " + str(category) + " is not supported.")
        candidates_sorts = dict(self.candidates_sorts)
        candidates_sorts[category] = {CRITERION: criterion, ORDER: order}
        summaries = prepare_candidates_summaries(self.candidates_reactions, self.candidates_metabolites,
                                                 self.candidates_searches, candidates_sorts)
        self.candidates_sorts = candidates_sorts
        self.candidates_summaries = summaries

    def network_elements(self) -> dict:
        """Candidates and their simplifications for the assembly of a network"""
        return {
            'candidates_reactions': dict(self.candidates_reactions),
            'candidates_metabolites': dict(self.candidates_metabolites),
            'reactions_simplifications': dict(self.reactions_simplifications),
            'metabolites_simplifications': dict(self.metabolites_simplifications),
        }

    def __repr__(self):
        return (f"NetworkCandidacy(reactions={len(self.candidates_reactions)}, "
                f"metabolites={len(self.candidates_metabolites)}, "
                f"simplified_reactions={len(self.reactions_simplifications)}, "
                f"simplified_metabolites={len(self.metabolites_simplifications)})")
