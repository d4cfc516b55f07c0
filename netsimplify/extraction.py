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
"""Functions for the extraction of metabolic entities from COBRA models"""

import logging
from typing import Dict, Tuple

from cobra import Model
from netsimplify.names import *
from netsimplify.entities import (Participant, Transport, Reaction, Metabolite, Compartment,
                                  MetabolicEntities)

LOG = logging.getLogger(__name__)


def extract_metabolite_identifier(metabolite) -> str:
    """Chemical identifier of a cobra metabolite, without the compartment suffix

    Example:
        'pyr_c' in compartment 'c' -> 'pyr'
    """
    suffix = '_' + metabolite.compartment if metabolite.compartment else None
    if suffix and metabolite.id.endswith(suffix) and len(metabolite.id) > len(suffix):
        return metabolite.id[:-len(suffix)]
    return metabolite.id


def create_reaction_participants(reaction) -> Tuple[Participant, ...]:
    participants = []
    for met, coeff in reaction.metabolites.items():
        if coeff < 0:
            role = REACTANT
        elif coeff > 0:
            role = PRODUCT
        else:
            continue
        participants.append(Participant(extract_metabolite_identifier(met), met.compartment, role))
    return tuple(participants)


def determine_reaction_chemical_conversion(participants) -> bool:
    """Whether metabolites change chemically between reactants and products

    A reaction performs a conversion if neither the chemical reactants are
    included in the products nor the chemical products in the reactants.
    """
    reactants = set(p.metabolite for p in participants if p.role == REACTANT)
    products = set(p.metabolite for p in participants if p.role == PRODUCT)
    return not reactants.issubset(products) and not products.issubset(reactants)


def collect_reaction_transports(participants) -> Tuple[Transport, ...]:
    """Collect chemically identical reactants and products in different compartments"""
    reactants = [p for p in participants if p.role == REACTANT]
    products = [p for p in participants if p.role == PRODUCT]
    transports = []
    for reactant in reactants:
        if any(t.metabolite == reactant.metabolite for t in transports):
            continue
        matches = [p.compartment for p in products if p.metabolite == reactant.metabolite]
        compartments = tuple(dict.fromkeys([reactant.compartment] + matches))
        if len(compartments) > 1:
            transports.append(Transport(reactant.metabolite, compartments))
    return tuple(transports)


def identify_replicate_reactions(participants: Dict[str, Tuple[Participant, ...]]) -> Dict[str, Tuple[str, ...]]:
    """Identify replicate reactions, that is, reactions with identical chemistry

    Reactions are replicates of each other if their participants have identical
    metabolites and roles. Compartments are not considered, since redundancy in
    the context of compartmentalization is determined during candidacy.

    Args:
        participants (dict):
            Reaction identifiers and their participants.

    Returns:
        (dict):
        Reaction identifiers and the identifiers of their replicates (excluding
        the reaction itself).
    """
    groups = {}
    for reac_id, reac_participants in participants.items():
        key = frozenset((p.metabolite, p.role) for p in reac_participants)
        groups.setdefault(key, []).append(reac_id)
    replicates = {}
    for group in groups.values():
        for reac_id in group:
            replicates[reac_id] = tuple(r for r in group if r != reac_id)
    return replicates


def extract_metabolic_entities(model: Model) -> MetabolicEntities:
    """Extract records of reactions, metabolites and compartments from a COBRA model

    Metabolites are identified chemically, i.e., 'pyr_c' and 'pyr_m' are the same
    metabolite 'pyr' that participates in the compartments 'c' and 'm'. Reactions
    without any participants (e.g., dummy reactions) are omitted.

    Example:
        entities = extract_metabolic_entities(model)

    Args:
        model (cobra.Model):
            A metabolic model that is an instance of the cobra.Model class.

    Returns:
        (MetabolicEntities):
        Records of the model's reactions, metabolites and compartments.
    """
    compartments = {}
    for comp_id, comp_name in model.compartments.items():
        compartments[comp_id] = Compartment(comp_id, comp_name if comp_name else comp_id)

    metabolites = {}
    for met in model.metabolites:
        if met.compartment and met.compartment not in compartments:
            compartments[met.compartment] = Compartment(met.compartment, met.compartment)
        met_id = extract_metabolite_identifier(met)
        if met_id not in metabolites:
            metabolites[met_id] = Metabolite(met_id, met.name if met.name else met_id, met.charge, met.formula)

    reac_participants = {}
    for reac in model.reactions:
        participants = create_reaction_participants(reac)
        if not participants:
            LOG.debug(f"Reaction {reac.id} has no participants and is omitted.")
            continue
        reac_participants[reac.id] = participants
    replicates = identify_replicate_reactions(reac_participants)

    reactions = {}
    for reac_id, participants in reac_participants.items():
        reac = model.reactions.get_by_id(reac_id)
        transports = collect_reaction_transports(participants)
        reactions[reac_id] = Reaction(identifier=reac_id,
                                      name=reac.name if reac.name else reac_id,
                                      participants=participants,
                                      conversion=determine_reaction_chemical_conversion(participants),
                                      transport=len(transports) > 0,
                                      transports=transports,
                                      reversibility=reac.lower_bound < 0 < reac.upper_bound,
                                      replicates=replicates[reac_id],
                                      process=reac.subsystem if reac.subsystem else '')
    entities = MetabolicEntities(reactions, metabolites, compartments)
    LOG.debug(f"Extracted {entities} from model {model.id}.")
    return entities
