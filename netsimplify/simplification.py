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
"""Management of explicit and implicit simplifications of candidate entities

Explicit designations for simplification come from direct selections.
Implicit designations come from an entity's dependency on related entities:
a reaction that is no longer relevant without its simplified metabolites and
a metabolite whose reactions are all simplified are simplified implicitly, by
omission. Implicit designations are never kept: they are derived from the
explicit designations in every pass.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from netsimplify.names import *
from netsimplify.entities import Simplification, CandidateReaction, CandidateMetabolite, MetabolicEntities
from netsimplify.context import Context, filter_reaction_sets_participants
from netsimplify.candidacy import (determine_participants_operation_relevance,
                                   create_candidate_metabolite_identifier)

LOG = logging.getLogger(__name__)


# =============================================================================
# Explicit simplifications
# =============================================================================


def include_simplification(identifier: str, method: str, dependency: bool,
                           simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    novel = dict(simplifications)
    novel[identifier] = Simplification(identifier, method, dependency)
    return novel


def exclude_simplification(identifier: str, simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    return {k: v for k, v in simplifications.items() if k != identifier}


def filter_explicit_simplifications(simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    return {k: v for k, v in simplifications.items() if not v.dependency}


def change_explicit_simplification(identifier: str, method: str,
                                   simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    """Toggle the explicit designation of a single entity

    An identical designation is removed, a designation with a different method
    is replaced and a missing designation is included.
    """
    if identifier in simplifications:
        if simplifications[identifier].method == method:
            return exclude_simplification(identifier, simplifications)
        return include_simplification(identifier, method, False, exclude_simplification(identifier, simplifications))
    return include_simplification(identifier, method, False, simplifications)


def check_simplification(category: str, method: str) -> None:
    if category not in CATEGORIES:
        raise ValueError("Category " + str(category) + " is not supported. Use '" + METABOLITES + "' or '" +
                         REACTIONS + "'.")
    if method not in METHODS:
        raise ValueError("Method " + str(method) + " is not supported. Use '" + OMISSION + "' or '" + REPLICATION +
                         "'.")
    if category == REACTIONS and method != OMISSION:
        raise ValueError("Reactions can only be simplified by " + OMISSION + ".")


# =============================================================================
# Default simplifications
# =============================================================================


def collect_default_simplifications_candidates(default_metabolites: Iterable[str],
                                               candidates_metabolites: Dict[str, CandidateMetabolite]) -> List[str]:
    """Identifiers of candidate metabolites that are instances of default metabolites

    With compartmentalization, a default metabolite can have multiple candidates,
    one per compartment.
    """
    default_metabolites = set(default_metabolites)
    return [k for k, v in candidates_metabolites.items() if v.metabolite in default_metabolites]


def include_default_simplifications(default_metabolites: Iterable[str],
                                    candidates_metabolites: Dict[str, CandidateMetabolite],
                                    simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    """Include explicit omissions of default metabolites that lack a designation"""
    novel = dict(simplifications)
    for identifier in collect_default_simplifications_candidates(default_metabolites, candidates_metabolites):
        if identifier not in novel:
            novel[identifier] = Simplification(identifier, OMISSION, False)
    return novel


def remove_default_simplifications(default_metabolites: Iterable[str],
                                   candidates_metabolites: Dict[str, CandidateMetabolite],
                                   simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    """Remove designations of all candidates of default metabolites

    Designations of these candidates are removed regardless of their origin,
    i.e., also designations that were selected directly before or after the
    defaults were included, and regardless of their method.
    """
    defaults = set(collect_default_simplifications_candidates(default_metabolites, candidates_metabolites))
    return {k: v for k, v in simplifications.items() if k not in defaults}


def determine_default_simplifications(default_metabolites: Iterable[str],
                                      candidates_metabolites: Dict[str, CandidateMetabolite],
                                      simplifications: Dict[str, Simplification]) -> bool:
    """Whether explicit designations exist for all candidates of default metabolites"""
    return all(identifier in simplifications and not simplifications[identifier].dependency
               for identifier in collect_default_simplifications_candidates(default_metabolites,
                                                                            candidates_metabolites))


# =============================================================================
# Implicit simplifications
# =============================================================================


def determine_reaction_simplification_dependency(reaction, reaction_sets, compartmentalization: bool,
                                                 metabolites_simplifications: Dict[str, Simplification]) -> bool:
    """Whether a reaction merits simplification by its dependency on its metabolites

    Only the participants that pass the filters and whose candidate metabolites
    have no designation for simplification are considered. The reaction merits
    simplification if it is not relevant with these participants alone.
    """
    participants = [
        p for p in filter_reaction_sets_participants(reaction.participants, reaction_sets)
        if create_candidate_metabolite_identifier(p.metabolite, p.compartment, compartmentalization) not in
        metabolites_simplifications
    ]
    return not determine_participants_operation_relevance(participants, reaction.conversion, reaction.transport,
                                                          reaction.transports, compartmentalization)


def collect_reactions_implicit_simplifications(
        entities: MetabolicEntities, context: Context, candidates_reactions: Dict[str, CandidateReaction],
        reactions_simplifications: Dict[str, Simplification],
        metabolites_simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    collection = dict(reactions_simplifications)
    for reac_id in candidates_reactions:
        if reac_id in collection:
            continue
        if determine_reaction_simplification_dependency(entities.reactions[reac_id], context.reactions_sets[reac_id],
                                                        context.compartmentalization, metabolites_simplifications):
            collection[reac_id] = Simplification(reac_id, OMISSION, True)
    return collection


def determine_metabolite_simplification_dependency(reactions: Iterable[str],
                                                   reactions_simplifications: Dict[str, Simplification]) -> bool:
    """Whether all reactions of a metabolite have designations for simplification"""
    return all(r in reactions_simplifications for r in reactions)


def collect_metabolites_implicit_simplifications(
        candidates_metabolites: Dict[str, CandidateMetabolite], reactions_simplifications: Dict[str, Simplification],
        metabolites_simplifications: Dict[str, Simplification]) -> Dict[str, Simplification]:
    collection = dict(metabolites_simplifications)
    for met_id, candidate in candidates_metabolites.items():
        if met_id in collection:
            continue
        if determine_metabolite_simplification_dependency(candidate.reactions, reactions_simplifications):
            collection[met_id] = Simplification(met_id, OMISSION, True)
    return collection


def create_implicit_simplifications(entities: MetabolicEntities,
                                    context: Context,
                                    candidates_reactions: Dict[str, CandidateReaction],
                                    candidates_metabolites: Dict[str, CandidateMetabolite],
                                    reactions_simplifications: Dict[str, Simplification],
                                    metabolites_simplifications: Dict[str, Simplification],
                                    fixed_point: bool = False) -> Tuple[dict, dict]:
    """Derive implicit simplifications and include them with the given simplifications

    The derivation runs a single pass: first, reactions without designation are
    simplified if they are irrelevant without the metabolites that have
    designations on entry; second, metabolites without designation are simplified
    if all of their reactions have designations, explicit or implicit from the
    first step. Metabolites simplified in the second step do not feed back into
    the first step.

    Args:
        entities (MetabolicEntities):
            Records of the metabolic model.

        context (Context):
            Context of interest.

        candidates_reactions, candidates_metabolites (dict):
            Candidate reactions and metabolites keyed by identifier.

        reactions_simplifications, metabolites_simplifications (dict of Simplification):
            Designations for simplification, usually only the explicit ones.

        fixed_point (optional (bool)): (Default: False)
            If True, repeat both steps until no further designations arise.

    Returns:
        (tuple):
        Complete designations for simplification of reactions and metabolites.
    """
    reactions_complete = collect_reactions_implicit_simplifications(entities, context, candidates_reactions,
                                                                    reactions_simplifications,
                                                                    metabolites_simplifications)
    metabolites_complete = collect_metabolites_implicit_simplifications(candidates_metabolites, reactions_complete,
                                                                        metabolites_simplifications)
    iteration = 1
    while fixed_point:
        reactions_next = collect_reactions_implicit_simplifications(entities, context, candidates_reactions,
                                                                    reactions_complete, metabolites_complete)
        metabolites_next = collect_metabolites_implicit_simplifications(candidates_metabolites, reactions_next,
                                                                        metabolites_complete)
        if len(reactions_next) == len(reactions_complete) and len(metabolites_next) == len(metabolites_complete):
            break
        reactions_complete, metabolites_complete = reactions_next, metabolites_next
        iteration += 1
    LOG.debug(f"Implicit simplifications after {iteration} pass(es): "
              f"{sum(s.dependency for s in reactions_complete.values())} reactions, "
              f"{sum(s.dependency for s in metabolites_complete.values())} metabolites.")
    return reactions_complete, metabolites_complete


# =============================================================================
# Manager
# =============================================================================


class SimplificationManager(object):
    """Explicit designations for simplification and their implicit consequences

    The manager keeps the explicit designations across changes of the context.
    After every change, the implicit designations are discarded and derived
    anew against the current candidates.

    Example:
        manager = SimplificationManager()
        manager.recompute_implicit(entities, context, candidates_reactions, candidates_metabolites)
        manager.toggle_explicit('atp_c', METABOLITES, REPLICATION)

    Args:
        reactions_simplifications, metabolites_simplifications (optional (dict of Simplification)):
            Initial designations. Implicit designations among these are dropped.

        fixed_point (optional (bool)): (Default: False)
            Derive implicit designations until convergence instead of in a single pass.
    """

    def __init__(self, reactions_simplifications=None, metabolites_simplifications=None, fixed_point=False):
        self.fixed_point = fixed_point
        self.explicit_reactions = filter_explicit_simplifications(reactions_simplifications or {})
        self.explicit_metabolites = filter_explicit_simplifications(metabolites_simplifications or {})
        self.reactions_simplifications = dict(self.explicit_reactions)
        self.metabolites_simplifications = dict(self.explicit_metabolites)
        self._entities = None
        self._context = None
        self._candidates_reactions = {}
        self._candidates_metabolites = {}

    def recompute_implicit(self, entities=None, context=None, candidates_reactions=None, candidates_metabolites=None):
        """Derive implicit designations from the explicit ones

        Arguments that are given replace the ones from the previous computation.
        """
        if entities is not None:
            self._entities = entities
        if context is not None:
            self._context = context
        if candidates_reactions is not None:
            self._candidates_reactions = candidates_reactions
        if candidates_metabolites is not None:
            self._candidates_metabolites = candidates_metabolites
        if self._entities is None or self._context is None:
            self.reactions_simplifications = dict(self.explicit_reactions)
            self.metabolites_simplifications = dict(self.explicit_metabolites)
            return
        self.reactions_simplifications, self.metabolites_simplifications = create_implicit_simplifications(
            self._entities, self._context, self._candidates_reactions, self._candidates_metabolites,
            self.explicit_reactions, self.explicit_metabolites, self.fixed_point)

    def restore(self, entities, context, candidates_reactions, candidates_metabolites):
        """Restore simplifications for new candidates after a change of the context"""
        self.explicit_reactions = filter_explicit_simplifications(self.reactions_simplifications)
        self.explicit_metabolites = filter_explicit_simplifications(self.metabolites_simplifications)
        self.recompute_implicit(entities, context, candidates_reactions, candidates_metabolites)

    def toggle_explicit(self, identifier: str, category: str, method: str = OMISSION):
        """Toggle the explicit designation of an entity for simplification

        Args:
            identifier (str):
                Identifier of a candidate reaction or metabolite.

            category (str):
                'reactions' or 'metabolites'.

            method (optional (str)): (Default: 'omission')
                'omission' or 'replication'. Reactions only allow omission.
        """
        check_simplification(category, method)
        if category == METABOLITES:
            self.explicit_metabolites = change_explicit_simplification(identifier, method, self.explicit_metabolites)
        else:
            self.explicit_reactions = change_explicit_simplification(identifier, method, self.explicit_reactions)
        LOG.debug(f"Changed explicit simplification of {category} {identifier} ({method}).")
        self.recompute_implicit()

    def set_defaults(self, default_metabolites: Iterable[str], include: bool = True):
        """Include or remove explicit omissions of default metabolites"""
        if include:
            self.explicit_metabolites = include_default_simplifications(default_metabolites,
                                                                        self._candidates_metabolites,
                                                                        self.explicit_metabolites)
        else:
            self.explicit_metabolites = remove_default_simplifications(default_metabolites,
                                                                       self._candidates_metabolites,
                                                                       self.explicit_metabolites)
        self.recompute_implicit()

    def determine_defaults(self, default_metabolites: Iterable[str]) -> bool:
        return determine_default_simplifications(default_metabolites, self._candidates_metabolites,
                                                 self.explicit_metabolites)
