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
"""Static strings used in the netsimplify package

    Participants

        REACTANT = 'reactant'

        PRODUCT = 'product'

    Categories of entities

        METABOLITES = 'metabolites'

        REACTIONS = 'reactions'

    Methods of simplification

        OMISSION = 'omission'

        REPLICATION = 'replication'

    Summaries

        COUNT = 'count'

        NAME = 'name'

        ASCEND = 'ascend'

        DESCEND = 'descend'

        CRITERION = 'criterion'

        ORDER = 'order'

    Setup of candidacy

        SETUP = 'setup'

        COMPARTMENTALIZATION = 'compartmentalization'

        REACTIONS_SETS = 'reactions_sets'

        FILTERS = 'filters'

        SEARCHES = 'candidates_searches'

        SORTS = 'candidates_sorts'

        DEFAULT_SIMPLIFICATIONS = 'default_simplifications'

        FIXED_POINT = 'fixed_point'

        STRICT = 'strict'

        COMPARTMENTS = 'compartments'

        PROCESSES = 'processes'
"""

# Participants
REACTANT = 'reactant'
PRODUCT = 'product'
ROLES = (REACTANT, PRODUCT)

# Categories of entities
METABOLITES = 'metabolites'
REACTIONS = 'reactions'
CATEGORIES = (METABOLITES, REACTIONS)

# Methods of simplification
OMISSION = 'omission'
REPLICATION = 'replication'
METHODS = (OMISSION, REPLICATION)

# Summaries
COUNT = 'count'
NAME = 'name'
ASCEND = 'ascend'
DESCEND = 'descend'
CRITERION = 'criterion'
ORDER = 'order'

# Setup of candidacy
SETUP = 'setup'
COMPARTMENTALIZATION = 'compartmentalization'
REACTIONS_SETS = 'reactions_sets'
FILTERS = 'filters'
SEARCHES = 'candidates_searches'
SORTS = 'candidates_sorts'
DEFAULT_SIMPLIFICATIONS = 'default_simplifications'
FIXED_POINT = 'fixed_point'
STRICT = 'strict'
COMPARTMENTS = 'compartments'
PROCESSES = 'processes'

# Ubiquitous metabolites (cofactors, ions, currency metabolites) that are
# simplified by default
DEFAULT_SIMPLIFICATIONS_METABOLITES = [
    "ac", "accoa", "adp", "amp", "atp", "ca2", "camp", "cdp", "cl", "cmp",
    "co", "co2", "coa", "ctp", "datp", "dcmp", "dctp", "dna", "dtdp",
    "dtmp", "fe2", "fe3", "fmn", "gdp", "gmp", "gtp", "h", "h2", "h2o",
    "h2o2", "hco3", "i", "idp", "imp", "itp", "k", "na1", "nad", "nadh",
    "nadp", "nadph", "nh4", "no", "no2", "o2", "o2s", "oh1", "pi", "ppi",
    "pppi", "so3", "so4", "udp", "ump", "utp"
]
