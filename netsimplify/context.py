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
"""Context of interest: filters of reactions' participants and compartmentalization"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

from netsimplify.names import *
from netsimplify.entities import Participant, ReactionSets, MetabolicEntities

LOG = logging.getLogger(__name__)


class CandidacyContextError(ValueError):
    """Context references entities that the metabolic model does not define"""


class Context(NamedTuple):
    """Context of interest for the evaluation of candidacy

    Args:
        compartmentalization (bool):
            Whether compartments are relevant. If True, chemically identical metabolites
            in different compartments are distinct candidates and transport reactions
            can be relevant.

        reactions_sets (dict of ReactionSets):
            Reactions that pass the filters and their metabolites and compartments that
            pass the filters. Every key must be the identifier of a known reaction.
    """
    compartmentalization: bool
    reactions_sets: Dict[str, ReactionSets]


def filter_reaction_participants(participants: Iterable[Participant],
                                 metabolites: Optional[Iterable[str]] = None,
                                 compartments: Optional[Iterable[str]] = None,
                                 roles: Optional[Iterable[str]] = None) -> List[Participant]:
    """Filter participants of a reaction by their metabolites, compartments and roles

    Criteria that are None are not applied. A participant passes if its values
    are included in every criterion.
    """
    if metabolites is not None:
        metabolites = set(metabolites)
    if compartments is not None:
        compartments = set(compartments)
    if roles is not None:
        roles = set(roles)
    return [
        p for p in participants if (metabolites is None or p.metabolite in metabolites) and
        (compartments is None or p.compartment in compartments) and (roles is None or p.role in roles)
    ]


def filter_reaction_sets_participants(participants: Iterable[Participant], reaction_sets: ReactionSets):
    """Participants of a reaction that pass the filters of the context"""
    return filter_reaction_participants(participants,
                                        metabolites=reaction_sets.metabolites,
                                        compartments=reaction_sets.compartments)


def create_reactions_sets(entities: MetabolicEntities,
                          metabolites: Optional[Iterable[str]] = None,
                          compartments: Optional[Iterable[str]] = None,
                          processes: Optional[Iterable[str]] = None,
                          reactions: Optional[Iterable[str]] = None) -> Dict[str, ReactionSets]:
    """Create the sets of reactions' metabolites and compartments that pass filters

    Without any filters, all reactions pass with all of their metabolites and
    compartments.

    Example:
        reactions_sets = create_reactions_sets(entities, compartments=['c', 'm'])

    Args:
        entities (MetabolicEntities):
            Records of the metabolic model.

        metabolites, compartments, processes, reactions (optional (list of str)): (Default: None)
            Identifiers of metabolites, compartments, processes (subsystems) and reactions
            that pass the filters. A reaction passes if its process and identifier pass and
            if at least one of its metabolites and one of its compartments pass.

    Returns:
        (dict of ReactionSets):
        Reaction identifiers and their metabolites and compartments that pass.
    """
    metabolites = set(metabolites) if metabolites is not None else None
    compartments = set(compartments) if compartments is not None else None
    processes = set(processes) if processes is not None else None
    reactions = set(reactions) if reactions is not None else None
    reactions_sets = {}
    for reac_id, reaction in entities.reactions.items():
        if reactions is not None and reac_id not in reactions:
            continue
        if processes is not None and reaction.process not in processes:
            continue
        reac_mets = frozenset(m for m in reaction.metabolites if metabolites is None or m in metabolites)
        reac_comps = frozenset(c for c in reaction.compartments if compartments is None or c in compartments)
        if reac_mets and reac_comps:
            reactions_sets[reac_id] = ReactionSets(reac_mets, reac_comps)
    return reactions_sets


def parse_reactions_sets(reactions_sets: dict) -> Dict[str, ReactionSets]:
    """Convert reactions' sets given as dicts (e.g., from JSON) to ReactionSets records

    Example:
        parse_reactions_sets({'R1': {'metabolites': ['pyr', 'accoa'], 'compartments': ['c']}})
    """
    parsed = {}
    for reac_id, reac_sets in reactions_sets.items():
        if isinstance(reac_sets, ReactionSets):
            parsed[reac_id] = reac_sets
        elif isinstance(reac_sets, dict):
            parsed[reac_id] = ReactionSets(frozenset(reac_sets.get(METABOLITES, ())),
                                           frozenset(reac_sets.get(COMPARTMENTS, ())))
        else:
            parsed[reac_id] = ReactionSets(frozenset(reac_sets[0]), frozenset(reac_sets[1]))
    return parsed


def validate_context(context: Context, entities: MetabolicEntities, strict: bool = False) -> Context:
    """Ensure that the context only references known reactions

    Args:
        context (Context):
            Context of interest.

        entities (MetabolicEntities):
            Records of the metabolic model.

        strict (optional (bool)): (Default: False)
            If True, raise a CandidacyContextError for unknown reactions. Otherwise,
            unknown reactions are excluded from the context with a warning.

    Returns:
        (Context):
        A context that only references known reactions.
    """
    unknown = [r for r in context.reactions_sets if r not in entities.reactions]
    if not unknown:
        return context
    if strict:
        raise CandidacyContextError("Filters reference unknown reactions: " + ", ".join(unknown))
    LOG.warning(f"Excluding {len(unknown)} unknown reactions from context: " + ", ".join(unknown))
    reactions_sets = {k: v for k, v in context.reactions_sets.items() if k not in unknown}
    return Context(context.compartmentalization, reactions_sets)
