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
"""Records of metabolic entities, candidates and simplifications

All records are immutable. Every pass of the candidacy pipeline creates fresh
dictionaries of records keyed by identifier instead of modifying records in
place.
"""

from typing import Dict, List, NamedTuple, Optional, Tuple


class Participant(NamedTuple):
    """Participation of a metabolite in a compartment as reactant or product"""
    metabolite: str
    compartment: str
    role: str


class Transport(NamedTuple):
    """Chemically identical metabolite that a reaction moves between compartments"""
    metabolite: str
    compartments: Tuple[str, ...]


class Reaction(NamedTuple):
    identifier: str
    name: str
    participants: Tuple[Participant, ...]
    conversion: bool
    transport: bool
    transports: Tuple[Transport, ...]
    reversibility: bool
    replicates: Tuple[str, ...]
    process: str

    @property
    def metabolites(self) -> List[str]:
        """Unique identifiers of metabolites that participate in the reaction"""
        return list(dict.fromkeys(p.metabolite for p in self.participants))

    @property
    def compartments(self) -> List[str]:
        """Unique identifiers of compartments in which metabolites participate"""
        return list(dict.fromkeys(p.compartment for p in self.participants))


class Metabolite(NamedTuple):
    identifier: str
    name: str
    charge: Optional[int] = None
    formula: Optional[str] = None


class Compartment(NamedTuple):
    identifier: str
    name: str


class ReactionSets(NamedTuple):
    """Metabolites and compartments of a reaction that pass the filters"""
    metabolites: frozenset
    compartments: frozenset


class CandidateReaction(NamedTuple):
    identifier: str
    reaction: str
    replicates: Tuple[str, ...]
    metabolites: Tuple[str, ...]
    name: str


class CandidateMetabolite(NamedTuple):
    identifier: str
    metabolite: str
    compartment: Optional[str]
    name: str
    reactions: Tuple[str, ...] = ()


class Simplification(NamedTuple):
    """Designation of a candidate for simplification

    dependency is False for explicit designations (selected directly) and
    True for implicit designations (derived from related candidates).
    """
    identifier: str
    method: str
    dependency: bool


class SummaryRecord(NamedTuple):
    entity: str
    candidate: str
    name: str
    count: int
    maximum: int


class MetabolicEntities(object):
    """Reactions, metabolites and compartments of a metabolic model

    Instances are usually created from a cobra.Model with
    extract_metabolic_entities, but can be assembled directly from records.

    Args:
        reactions (dict of Reaction):
            Reactions keyed by identifier.

        metabolites (dict of Metabolite):
            Metabolites keyed by their chemical identifier (without compartment).

        compartments (dict of Compartment):
            Compartments keyed by identifier.
    """

    def __init__(self, reactions: Dict[str, Reaction], metabolites: Dict[str, Metabolite],
                 compartments: Dict[str, Compartment]):
        self.reactions = dict(reactions)
        self.metabolites = dict(metabolites)
        self.compartments = dict(compartments)

    @property
    def processes(self) -> List[str]:
        return sorted(set(r.process for r in self.reactions.values() if r.process))

    def __repr__(self):
        return (f"MetabolicEntities(reactions={len(self.reactions)}, "
                f"metabolites={len(self.metabolites)}, compartments={len(self.compartments)})")
