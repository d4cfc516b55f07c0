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
"""Function: computing candidates for a network in a context of interest (compute_candidacy)"""

import json
import logging
from typing import Union

from cobra import Model
from netsimplify.names import *
from netsimplify.entities import MetabolicEntities
from netsimplify.extraction import extract_metabolic_entities
from netsimplify.context import Context, create_reactions_sets, parse_reactions_sets
from netsimplify.networkCandidacy import NetworkCandidacy


def compute_candidacy(model: Union[Model, MetabolicEntities], **kwargs: dict) -> NetworkCandidacy:
    """Computes candidate reactions and metabolites of a metabolic model in a context of interest

    Reactions are candidates if they are relevant with the participants that pass
    the filters and if they are the priority among their redundant replicates.
    Metabolites are candidates if they participate in candidate reactions.
    Designations for simplification of candidates can then be toggled on the
    returned object.

    Example:
        candidacy = compute_candidacy(model, compartmentalization=True,
                                      filters={'compartments': ['c']},
                                      default_simplifications=True)

    Args:
        model (cobra.Model or MetabolicEntities):
            A metabolic model that is an instance of the cobra.Model class, or records
            of its entities that were previously extracted with extract_metabolic_entities.

        compartmentalization (optional (bool)): (Default: True)
            Whether compartments are relevant. If True, chemically identical metabolites
            in different compartments are distinct candidates and transport reactions
            can be candidates.

        reactions_sets (optional (dict)): (Default: all reactions, metabolites and compartments)
            Reaction identifiers and the metabolites and compartments of their participants
            that pass the filters, e.g., {'R1': {'metabolites': ['pyr'], 'compartments': ['c']}}.
            Every key must be the identifier of a reaction of the model.

        filters (optional (dict)): (Default: None)
            Alternatively to reactions_sets, lists of identifiers of 'metabolites',
            'compartments', 'processes' and 'reactions' that pass the filters, e.g.,
            {'compartments': ['c'], 'processes': ['Glycolysis/Gluconeogenesis']}.

        candidates_searches (optional (dict of str)): (Default: no search)
            Searches of names in the summaries of 'metabolites' and 'reactions'.

        candidates_sorts (optional (dict of dict)): (Default: count, descending)
            Criterion ('count' or 'name') and order ('ascend' or 'descend') of the
            summaries of 'metabolites' and 'reactions'.

        default_simplifications (optional (bool or list of str)): (Default: False)
            If True, candidates of common cofactors and currency metabolites are
            designated for simplification by omission. A list of metabolite identifiers
            (without compartment) replaces the built-in list and is simplified as well.

        fixed_point (optional (bool)): (Default: False)
            Derive implicit simplifications until convergence.

        strict (optional (bool)): (Default: False)
            If True, raise a CandidacyContextError if reactions_sets reference unknown
            reactions. Otherwise, unknown reactions are excluded with a warning.

        setup (optional (dict or str)):
            Alternatively to the other keyword arguments, a dict or the path of a JSON
            file that holds them.

    Returns:
        (NetworkCandidacy):

            An object that contains the candidates, their designations for simplification
            and summaries, and that allows to change the context and the simplifications.
    """
    allowed_keys = {
        SETUP, COMPARTMENTALIZATION, REACTIONS_SETS, FILTERS, SEARCHES, SORTS, DEFAULT_SIMPLIFICATIONS, FIXED_POINT,
        STRICT
    }
    logging.info('Preparing candidacy computation.')
    if SETUP in kwargs:
        if type(kwargs[SETUP]) is str:
            with open(kwargs[SETUP], 'r') as fs:
                kwargs = json.load(fs)
        else:
            kwargs = dict(kwargs[SETUP])

    # check all keys passed in kwargs
    for key in kwargs:
        if key not in allowed_keys:
            raise Exception("Key " + key + " is not supported.")

    if isinstance(model, MetabolicEntities):
        entities = model
    else:
        logging.info('  Extracting metabolic entities of model ' + str(model.id) + '.')
        entities = extract_metabolic_entities(model)
    logging.info('  ' + str(len(entities.reactions)) + ' reactions, ' + str(len(entities.metabolites)) +
                 ' metabolites, ' + str(len(entities.compartments)) + ' compartments.')

    compartmentalization = bool(kwargs.get(COMPARTMENTALIZATION, True))
    if REACTIONS_SETS in kwargs:
        if FILTERS in kwargs:
            logging.warning('Both reactions_sets and filters were provided. Filters are ignored.')
        reactions_sets = parse_reactions_sets(kwargs[REACTIONS_SETS])
    elif FILTERS in kwargs:
        filters = kwargs[FILTERS]
        for key in filters:
            if key not in (METABOLITES, COMPARTMENTS, PROCESSES, REACTIONS):
                raise Exception("Filter " + key + " is not supported.")
        reactions_sets = create_reactions_sets(entities, **filters)
    else:
        reactions_sets = create_reactions_sets(entities)
    logging.info('  ' + str(len(reactions_sets)) + ' reactions pass the filters.')

    default_simplifications = kwargs.get(DEFAULT_SIMPLIFICATIONS, False)
    if isinstance(default_simplifications, bool):
        default_metabolites = DEFAULT_SIMPLIFICATIONS_METABOLITES
    else:
        default_metabolites = list(default_simplifications)
        default_simplifications = True

    logging.info('Evaluating candidacy' + (' with compartmentalization.' if compartmentalization else '.'))
    candidacy = NetworkCandidacy(entities,
                                 Context(compartmentalization, reactions_sets),
                                 candidates_searches=kwargs.get(SEARCHES),
                                 candidates_sorts=kwargs.get(SORTS),
                                 default_simplifications=default_metabolites,
                                 fixed_point=bool(kwargs.get(FIXED_POINT, False)),
                                 strict=bool(kwargs.get(STRICT, False)))
    if default_simplifications:
        logging.info('  Simplifying default metabolites.')
        candidacy.include_default_simplifications()
    logging.info(
        str(len(candidacy.candidates_reactions)) + ' candidate reactions, ' +
        str(len(candidacy.candidates_metabolites)) + ' candidate metabolites, ' +
        str(len(candidacy.reactions_simplifications) + len(candidacy.metabolites_simplifications)) + ' simplified.')
    return candidacy
