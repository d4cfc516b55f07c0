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
"""Evaluation of the candidacy of reactions and metabolites in a context of interest

Candidate entities are eligible for representation in the network. A reaction's
candidacy depends on its participants that pass the filters of the context, on
compartmentalization and on redundancy with replicate reactions. A metabolite is
a candidate if it participates in a candidate reaction. Candidacy does not
depend on simplification, so that simplified entities remain accessible.
"""

import logging
from typing import Dict, List, NamedTuple, Tuple

from netsimplify.names import *
from netsimplify.entities import (Reaction, Participant, Transport, ReactionSets, CandidateReaction,
                                  CandidateMetabolite, MetabolicEntities)
from netsimplify.context import Context, filter_reaction_participants, filter_reaction_sets_participants

LOG = logging.getLogger(__name__)


class ReactionCandidacy(NamedTuple):
    relevance: bool
    priority: bool
    novelty: bool
    replicates: Tuple[str, ...]


# =============================================================================
# Relevance
# =============================================================================


def determine_reaction_participation(participants: List[Participant]) -> bool:
    """Whether metabolites participate as both reactants and products"""
    reactants = set(p.metabolite for p in participants if p.role == REACTANT)
    products = set(p.metabolite for p in participants if p.role == PRODUCT)
    return len(reactants) > 0 and len(products) > 0


def determine_reaction_transportation(participants: List[Participant], transports: Tuple[Transport, ...]) -> bool:
    """Whether any transport moves a metabolite between different compartments

    For each transport, the participants of the transported metabolite are split
    into reactants and products. The transport is relevant if there are both and
    if the compartments of reactants and products are not identical.
    """
    for transport in transports:
        reactants = filter_reaction_participants(participants,
                                                 metabolites=[transport.metabolite],
                                                 compartments=transport.compartments,
                                                 roles=[REACTANT])
        products = filter_reaction_participants(participants,
                                                metabolites=[transport.metabolite],
                                                compartments=transport.compartments,
                                                roles=[PRODUCT])
        same_compartments = set(p.compartment for p in reactants) == set(p.compartment for p in products)
        if reactants and products and not same_compartments:
            return True
    return False


def determine_participants_operation_relevance(participants: List[Participant], conversion: bool, transport: bool,
                                               transports: Tuple[Transport, ...], compartmentalization: bool) -> bool:
    """Whether a reaction is relevant on the basis of its participants and operation

    Conversions are relevant if metabolites participate as both reactants and
    products. Transports are only relevant with compartmentalization, when the
    transported metabolite participates as reactant and product in different
    compartments.
    """
    if conversion:
        return determine_reaction_participation(participants)
    elif transport:
        if not compartmentalization or not transports:
            return False
        return determine_reaction_transportation(participants, transports)
    return False


def determine_reaction_context_relevance(reaction: Reaction, reaction_sets: ReactionSets,
                                         compartmentalization: bool) -> bool:
    participants = filter_reaction_sets_participants(reaction.participants, reaction_sets)
    return determine_participants_operation_relevance(participants, reaction.conversion, reaction.transport,
                                                      reaction.transports, compartmentalization)


# =============================================================================
# Redundancy of replicates
# =============================================================================


def determine_participants_attributes_redundancy(first: List[Participant], second: List[Participant],
                                                 attributes: Tuple[str, ...]) -> bool:
    """Whether every participant of first matches some participant of second on all attributes"""
    second_values = set(tuple(getattr(p, a) for a in attributes) for p in second)
    return all(tuple(getattr(p, a) for a in attributes) in second_values for p in first)


def determine_participants_redundancy(first: List[Participant], second: List[Participant],
                                      compartmentalization: bool) -> bool:
    """Whether participants of two reactions match mutually

    Participants match by metabolite and role and, with compartmentalization,
    also by compartment.
    """
    if compartmentalization:
        attributes = ('metabolite', 'compartment', 'role')
    else:
        attributes = ('metabolite', 'role')
    return determine_participants_attributes_redundancy(first, second, attributes) and \
        determine_participants_attributes_redundancy(second, first, attributes)


def determine_reactions_redundancy(first: Reaction, second: Reaction, first_sets: ReactionSets,
                                   second_sets: ReactionSets, compartmentalization: bool) -> bool:
    return determine_participants_redundancy(filter_reaction_sets_participants(first.participants, first_sets),
                                             filter_reaction_sets_participants(second.participants, second_sets),
                                             compartmentalization)


def collect_redundant_replicate_reactions(reac_id: str, reactions: Dict[str, Reaction],
                                          reactions_sets: Dict[str, ReactionSets],
                                          compartmentalization: bool) -> Tuple[str, ...]:
    """Collect replicates of a reaction that are also redundant in the context of interest

    Redundant replicates pass the filters, are relevant, have identical
    reversibility and have participants that match mutually.

    Args:
        reac_id (str):
            Identifier of the reaction.

        reactions (dict of Reaction):
            All reactions of the model.

        reactions_sets (dict of ReactionSets):
            Reactions that pass the filters and their metabolites and compartments.

        compartmentalization (bool):
            Whether compartments are relevant.

    Returns:
        (tuple of str):
        Identifiers of redundant replicates, excluding the reaction itself.
    """
    reaction = reactions[reac_id]
    reaction_sets = reactions_sets[reac_id]
    redundant = []
    for replicate_id in reaction.replicates:
        if replicate_id == reac_id or replicate_id not in reactions_sets or replicate_id not in reactions:
            continue
        replicate = reactions[replicate_id]
        replicate_sets = reactions_sets[replicate_id]
        if not determine_reaction_context_relevance(replicate, replicate_sets, compartmentalization):
            continue
        if replicate.reversibility != reaction.reversibility:
            continue
        if determine_reactions_redundancy(reaction, replicate, reaction_sets, replicate_sets, compartmentalization):
            redundant.append(replicate_id)
    return tuple(redundant)


def determine_reaction_replicate_priority(reac_id: str, replicates) -> bool:
    """Whether a reaction is the priority among its redundant replicates

    The priority is the reaction with the smallest identifier in plain string
    order. The choice is recomputed on every evaluation and therefore does not
    depend on the order in which reactions are evaluated.
    """
    return reac_id == min((reac_id, ) + tuple(replicates))


def evaluate_reaction_candidacy(reac_id: str, reactions: Dict[str, Reaction], reactions_sets: Dict[str, ReactionSets],
                                compartmentalization: bool,
                                candidates_reactions: Dict[str, CandidateReaction]) -> ReactionCandidacy:
    """Evaluate a reaction's relevance, priority among replicates and novelty in a collection"""
    reaction = reactions[reac_id]
    relevance = determine_reaction_context_relevance(reaction, reactions_sets[reac_id], compartmentalization)
    if not relevance:
        return ReactionCandidacy(False, False, False, ())
    replicates = collect_redundant_replicate_reactions(reac_id, reactions, reactions_sets, compartmentalization)
    priority = determine_reaction_replicate_priority(reac_id, replicates)
    novelty = priority and reac_id not in candidates_reactions
    return ReactionCandidacy(relevance, priority, novelty, replicates)


# =============================================================================
# Candidate reactions and their metabolites
# =============================================================================


def create_candidate_metabolite_identifier(metabolite: str, compartment: str, compartmentalization: bool) -> str:
    if compartmentalization:
        return metabolite + "_" + compartment
    else:
        return metabolite


def create_candidate_metabolite_name(metabolite: str, compartment: str, compartmentalization: bool) -> str:
    if compartmentalization:
        return metabolite + " (" + compartment + ")"
    else:
        return metabolite


def collect_reaction_metabolites(reaction: Reaction, reaction_sets: ReactionSets, compartmentalization: bool,
                                 entities: MetabolicEntities) -> Dict[str, CandidateMetabolite]:
    """Collect candidate metabolites from a candidate reaction's participants

    The candidate metabolites do not yet reference their reactions, which are
    collected once all candidate reactions are known.
    """
    collection = {}
    for participant in filter_reaction_sets_participants(reaction.participants, reaction_sets):
        identifier = create_candidate_metabolite_identifier(participant.metabolite, participant.compartment,
                                                            compartmentalization)
        if identifier in collection:
            continue
        if participant.metabolite in entities.metabolites:
            met_name = entities.metabolites[participant.metabolite].name
        else:
            met_name = participant.metabolite
        if participant.compartment in entities.compartments:
            comp_name = entities.compartments[participant.compartment].name
        else:
            comp_name = participant.compartment
        collection[identifier] = CandidateMetabolite(
            identifier=identifier,
            metabolite=participant.metabolite,
            compartment=participant.compartment if compartmentalization else None,
            name=create_candidate_metabolite_name(met_name, comp_name, compartmentalization))
    return collection


def collect_candidate_reactions_metabolites(entities: MetabolicEntities, context: Context):
    """Collect candidate reactions and the metabolites that participate in them

    Returns:
        (tuple):
        Candidate reactions keyed by identifier, and candidate metabolites (without
        references to reactions) keyed by identifier.
    """
    candidates_reactions = {}
    reactions_metabolites = {}
    for reac_id in context.reactions_sets:
        if reac_id not in entities.reactions:
            LOG.warning(f"Reaction {reac_id} of the context is unknown and excluded.")
            continue
        candidacy = evaluate_reaction_candidacy(reac_id, entities.reactions, context.reactions_sets,
                                                context.compartmentalization, candidates_reactions)
        if not (candidacy.relevance and candidacy.priority and candidacy.novelty):
            continue
        reaction = entities.reactions[reac_id]
        reaction_metabolites = collect_reaction_metabolites(reaction, context.reactions_sets[reac_id],
                                                            context.compartmentalization, entities)
        for identifier, candidate in reaction_metabolites.items():
            reactions_metabolites.setdefault(identifier, candidate)
        candidates_reactions[reac_id] = CandidateReaction(identifier=reac_id,
                                                          reaction=reac_id,
                                                          replicates=candidacy.replicates,
                                                          metabolites=tuple(reaction_metabolites),
                                                          name=reaction.name)
    return candidates_reactions, reactions_metabolites


# =============================================================================
# Candidate metabolites and their reactions
# =============================================================================


def collect_candidate_metabolites_reactions(
        candidates_reactions: Dict[str, CandidateReaction],
        reactions_metabolites: Dict[str, CandidateMetabolite]) -> Dict[str, CandidateMetabolite]:
    """Complete candidate metabolites with the unique candidate reactions in which they participate"""
    metabolites_reactions = {}
    for reac_id, candidate in candidates_reactions.items():
        for met_id in candidate.metabolites:
            metabolites_reactions.setdefault(met_id, {})[reac_id] = None
    return {
        met_id: reactions_metabolites[met_id]._replace(reactions=tuple(reac_ids))
        for met_id, reac_ids in metabolites_reactions.items()
    }


def collect_candidates(entities: MetabolicEntities, context: Context):
    """Collect candidate reactions and metabolites in the context of interest

    Example:
        candidates_reactions, candidates_metabolites = collect_candidates(entities, context)

    Args:
        entities (MetabolicEntities):
            Records of the metabolic model.

        context (Context):
            Context of interest with compartmentalization and reactions' filtered sets.

    Returns:
        (tuple):
        Candidate reactions and candidate metabolites, both keyed by identifier.
    """
    candidates_reactions, reactions_metabolites = collect_candidate_reactions_metabolites(entities, context)
    candidates_metabolites = collect_candidate_metabolites_reactions(candidates_reactions, reactions_metabolites)
    LOG.debug(f"Candidates: {len(candidates_reactions)} reactions, {len(candidates_metabolites)} metabolites.")
    return candidates_reactions, candidates_metabolites
